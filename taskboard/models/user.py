# taskboard/models/user.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from taskboard.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="employee")
    # Department name, matched by the task export filter
    department = Column(String, nullable=False, index=True)

    tasks = relationship("Task", back_populates="employee")
