# taskboard/routers/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from taskboard.config.settings import settings
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.schemas.task import TaskCreate, TaskUpdate, TaskOut, DeleteResult
from taskboard.services.task_export import XLSX_MEDIA_TYPE, export_filename
from taskboard.services.task_service import TaskService
from taskboard.utils.auth import authorize, get_current_user

router = APIRouter(prefix="/tasks", tags=["tasks"])

admin_only = authorize(settings.ADMIN_ROLE)

@router.get("", response_model=List[TaskOut])
def get_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_only)
):
    """Get all tasks with their owners - admin only"""
    return TaskService(db).list(current_user)

@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a task; employees may only create tasks for themselves"""
    return TaskService(db).create(task, current_user)

# Must be registered before /{task_id}
@router.get("/export")
def export_tasks(
    department: Optional[str] = Query(None, description="Department name, or 'all'"),
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_only)
):
    """Export tasks to an Excel workbook - admin only"""
    content = TaskService(db).export(current_user, department)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )

@router.get("/employee/{user_id}", response_model=List[TaskOut])
def get_employee_tasks(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get tasks owned by one employee - self or admin"""
    return TaskService(db).list_for_employee(user_id, current_user)

@router.get("/{task_id}", response_model=TaskOut)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a single task - owner or admin"""
    return TaskService(db).get(task_id, current_user)

@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a task - owner or admin"""
    return TaskService(db).update(task_id, task_update, current_user)

@router.delete("/{task_id}", response_model=DeleteResult)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a task - owner or admin"""
    TaskService(db).delete(task_id, current_user)
    return DeleteResult()
