"""Pydantic schemas for API request/response models."""

from faculty_api.schemas.common import MessageResponse, PaginationMeta
from faculty_api.schemas.course import CourseResponse
from faculty_api.schemas.teacher import (
    TeacherCreate,
    TeacherDetailResponse,
    TeacherListResponse,
    TeacherRelation,
    TeacherResponse,
    TeacherUpdate,
)

__all__ = [
    "CourseResponse",
    "MessageResponse",
    "PaginationMeta",
    "TeacherCreate",
    "TeacherDetailResponse",
    "TeacherListResponse",
    "TeacherRelation",
    "TeacherResponse",
    "TeacherUpdate",
]
