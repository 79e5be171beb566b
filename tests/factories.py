# tests/factories.py

from taskboard.models import Task, User
from taskboard.utils.security import create_access_token, get_password_hash

PASSWORD = "password123"


def make_user(db, name, email, role="employee", department="Engineering"):
    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(PASSWORD),
        role=role,
        department=department,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_task(db, owner, title="Task", **fields):
    fields.setdefault("description", "Details")
    task = Task(title=title, employee_id=owner.id, **fields)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def auth_headers(user):
    token = create_access_token(data={"sub": user.email})
    return {"Authorization": f"Bearer {token}"}
