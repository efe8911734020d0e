"""Course schemas for API response models."""

from datetime import datetime

from pydantic import BaseModel


class CourseResponse(BaseModel):
    """Response schema for a course nested under a teacher.

    Attributes:
        id: Course ID.
        title: Course title.
        teacher_id: ID of the teacher giving the course.
    """

    id: int
    title: str
    teacher_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
