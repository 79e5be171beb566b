# taskboard/services/task_export.py
# Task spreadsheet export: rows are built without any HTTP involvement
from datetime import date, datetime
from io import BytesIO
from typing import Iterable, List, Optional

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from taskboard.models.task import Task
from taskboard.schemas.task import UNKNOWN_OWNER

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_TITLE = "Tasks"
NO_DUE_DATE = "No date set"

# (header, column width)
COLUMNS = [
    ("Task ID", 26),
    ("Title", 30),
    ("Description", 40),
    ("Status", 15),
    ("Priority", 15),
    ("Due Date", 15),
    ("Employee", 20),
    ("Department", 20),
    ("Created At", 20),
]


def format_date(value: datetime) -> str:
    """M/D/YYYY, no zero padding"""
    return f"{value.month}/{value.day}/{value.year}"


def build_export_rows(tasks: Iterable[Task]) -> List[list]:
    """One row per task in COLUMNS order; the header row is not included."""
    rows = []
    for task in tasks:
        employee = task.employee
        rows.append([
            str(task.id),
            task.title,
            task.description,
            task.status.value,
            task.priority.value,
            format_date(task.due_date) if task.due_date else NO_DUE_DATE,
            employee.name if employee else UNKNOWN_OWNER,
            employee.department if employee else UNKNOWN_OWNER,
            format_date(task.created_at),
        ])
    return rows


def render_workbook(rows: List[list]) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append([header for header, _ in COLUMNS])
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for index, (_, width) in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    for row in rows:
        ws.append(row)

    stream = BytesIO()
    wb.save(stream)
    return stream.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    today = today or datetime.utcnow().date()
    return f"tasks-{today.isoformat()}.xlsx"
