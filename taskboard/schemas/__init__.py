from .user import UserLogin, UserOut
from .tokens import Token
from .department import DepartmentCreate, DepartmentUpdate, DepartmentOut
from .task import TaskCreate, TaskUpdate, TaskOut, EmployeeSummary, DeleteResult, TaskStatus, TaskPriority
