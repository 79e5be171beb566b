# taskboard/routers/departments.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from taskboard.config.settings import settings
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentOut
from taskboard.schemas.task import DeleteResult
from taskboard.services.department_service import DepartmentService
from taskboard.utils.auth import authorize, get_current_user

router = APIRouter(prefix="/departments", tags=["departments"])

admin_only = authorize(settings.ADMIN_ROLE)

@router.get("", response_model=List[DepartmentOut])
def get_departments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get all departments"""
    return DepartmentService(db).list()

@router.get("/{department_id}", response_model=DepartmentOut)
def get_department(
    department_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a single department"""
    return DepartmentService(db).get(department_id)

@router.post("", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
def create_department(
    department: DepartmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_only)
):
    """Create a department - admin only"""
    return DepartmentService(db).create(department, current_user)

@router.put("/{department_id}", response_model=DepartmentOut)
def update_department(
    department_id: int,
    department_update: DepartmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_only)
):
    """Update a department - admin only"""
    return DepartmentService(db).update(department_id, department_update, current_user)

@router.delete("/{department_id}", response_model=DeleteResult)
def delete_department(
    department_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_only)
):
    """Delete a department - admin only"""
    DepartmentService(db).delete(department_id, current_user)
    return DeleteResult()
