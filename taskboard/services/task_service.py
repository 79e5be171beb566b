# taskboard/services/task_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.services.task_export import build_export_rows, render_workbook
from taskboard.utils.auth import require_access
from taskboard.utils.errors import NotFoundError

logger = logging.getLogger(__name__)

ALL_DEPARTMENTS = "all"


class TaskService:
    """Task CRUD with ownership rules: employees act on their own tasks, admins on any"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Task).options(joinedload(Task.employee))

    def _get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError(f"No user with the id of {user_id}")
        return user

    def _get_task(self, task_id: int) -> Task:
        task = self._query().filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError(f"No task with the id of {task_id}")
        return task

    def list(self, caller: User) -> List[Task]:
        require_access(caller, "Not authorized to access all tasks")
        return self._query().order_by(Task.created_at.desc(), Task.id.desc()).all()

    def list_for_employee(self, user_id: int, caller: User) -> List[Task]:
        self._get_user(user_id)
        require_access(caller, "Not authorized to access these tasks", owner_id=user_id)
        return self._query().filter(Task.employee_id == user_id).order_by(Task.created_at.desc(), Task.id.desc()).all()

    def get(self, task_id: int, caller: User) -> Task:
        task = self._get_task(task_id)
        require_access(caller, "Not authorized to access this task", owner_id=task.employee_id)
        return task

    def create(self, fields: TaskCreate, caller: User) -> Task:
        data = fields.model_dump()
        if data.get("employee_id") is None:
            data["employee_id"] = caller.id

        require_access(
            caller,
            "Not authorized to create tasks for other employees",
            owner_id=data["employee_id"],
        )
        self._get_user(data["employee_id"])

        task = Task(**data)
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Task {task.id} created by user {caller.id} for user {task.employee_id}")
        return task

    def update(self, task_id: int, fields: TaskUpdate, caller: User) -> Task:
        task = self._get_task(task_id)
        require_access(caller, "Not authorized to update this task", owner_id=task.employee_id)

        update_data = fields.model_dump(exclude_unset=True)
        new_owner = update_data.get("employee_id")
        if new_owner is not None and new_owner != task.employee_id:
            require_access(caller, "Not authorized to assign tasks to other employees", owner_id=new_owner)
            self._get_user(new_owner)

        for key, value in update_data.items():
            setattr(task, key, value)

        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Task {task.id} updated by user {caller.id}: {sorted(update_data)}")
        return task

    def delete(self, task_id: int, caller: User) -> None:
        task = self._get_task(task_id)
        require_access(caller, "Not authorized to delete this task", owner_id=task.employee_id)

        self.db.delete(task)
        self.db.commit()

        logger.info(f"Task {task_id} deleted by user {caller.id}")

    def tasks_for_export(self, caller: User, department: Optional[str] = None) -> List[Task]:
        """Tasks to export, optionally only those owned by members of `department`"""
        require_access(caller, "Not authorized to export tasks")

        query = self._query()
        if department and department != ALL_DEPARTMENTS:
            employee_ids = [
                user_id for (user_id,) in self.db.query(User.id).filter(User.department == department).all()
            ]
            query = query.filter(Task.employee_id.in_(employee_ids))

        tasks = query.order_by(Task.created_at, Task.id).all()
        logger.info(f"Exporting {len(tasks)} tasks (department={department or ALL_DEPARTMENTS}) for user {caller.id}")
        return tasks

    def export(self, caller: User, department: Optional[str] = None) -> bytes:
        tasks = self.tasks_for_export(caller, department)
        return render_workbook(build_export_rows(tasks))
