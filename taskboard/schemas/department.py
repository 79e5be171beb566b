from pydantic import field_validator
from typing import Optional
from datetime import datetime

from .base import CamelModel

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200


def _clean_name(v):
    if v is None or not v.strip():
        raise ValueError("Please add a department name")
    v = v.strip()
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Department name cannot be more than {NAME_MAX_LENGTH} characters")
    return v


def _clean_description(v):
    if v is None:
        return v
    v = v.strip()
    if len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Description cannot be more than {DESCRIPTION_MAX_LENGTH} characters")
    return v


class DepartmentCreate(CamelModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v):
        return _clean_name(v)

    @field_validator("description")
    @classmethod
    def description_must_be_valid(cls, v):
        return _clean_description(v)


class DepartmentUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v):
        # Only reached when the client sent the key, so null is rejected too
        return _clean_name(v)

    @field_validator("description")
    @classmethod
    def description_must_be_valid(cls, v):
        return _clean_description(v)


class DepartmentOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
