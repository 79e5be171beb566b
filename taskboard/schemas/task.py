# taskboard/schemas/task.py
from pydantic import ValidationInfo, field_validator
from datetime import datetime, timezone
from typing import Optional

from taskboard.models.task import TaskStatus, TaskPriority
from .base import CamelModel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

# Shown in place of an owner whose user record no longer exists
UNKNOWN_OWNER = "Unknown"


def _clean_title(v):
    if v is None or not v.strip():
        raise ValueError("Please add a title")
    v = v.strip()
    if len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"Title cannot be more than {TITLE_MAX_LENGTH} characters")
    return v


def _clean_description(v):
    if v is None or not v.strip():
        raise ValueError("Please add a description")
    v = v.strip()
    if len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Description cannot be more than {DESCRIPTION_MAX_LENGTH} characters")
    return v


def _to_naive_utc(v):
    # Stored without tz info; aware inputs are shifted to UTC first
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class TaskCreate(CamelModel):
    title: str
    description: str
    status: TaskStatus = TaskStatus.TO_DO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    # Defaults to the caller when omitted
    employee_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_must_be_valid(cls, v):
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def description_must_be_valid(cls, v):
        return _clean_description(v)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, v):
        return _to_naive_utc(v)


class TaskUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    employee_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_must_be_valid(cls, v):
        return _clean_title(v)

    @field_validator("description")
    @classmethod
    def description_must_be_valid(cls, v):
        return _clean_description(v)

    @field_validator("due_date")
    @classmethod
    def due_date_in_utc(cls, v):
        return _to_naive_utc(v)

    @field_validator("status", "priority", "employee_id")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class EmployeeSummary(CamelModel):
    id: Optional[int] = None
    name: str
    department: str


class TaskOut(CamelModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    employee_id: int
    created_at: datetime
    employee: Optional[EmployeeSummary] = None

    @field_validator("employee", mode="before")
    @classmethod
    def unknown_owner(cls, v, info: ValidationInfo):
        if v is None:
            return {
                "id": info.data.get("employee_id"),
                "name": UNKNOWN_OWNER,
                "department": UNKNOWN_OWNER,
            }
        return v


class DeleteResult(CamelModel):
    success: bool = True
    data: dict = {}
