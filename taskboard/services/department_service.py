# taskboard/services/department_service.py
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.models.department import Department
from taskboard.models.user import User
from taskboard.schemas.department import DepartmentCreate, DepartmentUpdate
from taskboard.utils.auth import require_access
from taskboard.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Duplicate field value entered"


class DepartmentService:
    """CRUD over departments; every mutation is admin only"""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Department]:
        return self.db.query(Department).order_by(Department.name).all()

    def get(self, department_id: int) -> Department:
        department = self.db.query(Department).filter(Department.id == department_id).first()
        if not department:
            raise NotFoundError(f"No department with the id of {department_id}")
        return department

    def create(self, fields: DepartmentCreate, caller: User) -> Department:
        require_access(caller, "Not authorized to create departments")
        self._ensure_unique_name(fields.name)

        department = Department(name=fields.name, description=fields.description)
        self.db.add(department)
        self._commit()
        self.db.refresh(department)

        logger.info(f"Department {department.id} ({department.name}) created by user {caller.id}")
        return department

    def update(self, department_id: int, fields: DepartmentUpdate, caller: User) -> Department:
        require_access(caller, "Not authorized to update departments")
        department = self.get(department_id)

        update_data = fields.model_dump(exclude_unset=True)
        if "name" in update_data:
            self._ensure_unique_name(update_data["name"], exclude_id=department.id)

        for key, value in update_data.items():
            setattr(department, key, value)

        self._commit()
        self.db.refresh(department)

        logger.info(f"Department {department.id} updated by user {caller.id}: {update_data}")
        return department

    def delete(self, department_id: int, caller: User) -> None:
        require_access(caller, "Not authorized to delete departments")
        department = self.get(department_id)

        self.db.delete(department)
        self.db.commit()

        logger.info(f"Department {department_id} deleted by user {caller.id}")

    def _ensure_unique_name(self, name: str, exclude_id: int = None) -> None:
        query = self.db.query(Department).filter(Department.name == name)
        if exclude_id is not None:
            query = query.filter(Department.id != exclude_id)
        if query.first():
            raise ValidationError(DUPLICATE_MESSAGE)

    def _commit(self) -> None:
        # The unique constraint still wins if two requests race past the pre-check
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValidationError(DUPLICATE_MESSAGE)
