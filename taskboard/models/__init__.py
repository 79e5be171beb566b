from .user import User
from .department import Department
from .task import Task, TaskStatus, TaskPriority
