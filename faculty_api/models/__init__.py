"""Data models package."""

from faculty_api.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
)
from faculty_api.models.base import BaseModel
from faculty_api.models.course import Course
from faculty_api.models.teacher import Teacher

__all__ = [
    "BaseModel",
    "ModelError",
    "RecordNotFoundError",
    "DatabaseConnectionError",
    "InvalidFilterError",
    "Course",
    "Teacher",
]
