"""Business logic services package."""

from faculty_api.services.base import BaseService
from faculty_api.services.teacher_service import TeacherService

__all__ = ["BaseService", "TeacherService"]
