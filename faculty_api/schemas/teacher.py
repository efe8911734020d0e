"""Teacher schemas for API request/response models."""

import enum
from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field

from faculty_api.schemas.common import PaginationMeta
from faculty_api.schemas.course import CourseResponse


class TeacherRelation(str, enum.Enum):
    """Relations that can be eager-loaded with ``populate``."""

    COURSE = "course"


class TeacherCreate(BaseModel):
    """Schema for creating a teacher.

    Both fields are required by the ``teachers`` table. They are optional
    here, and lengths are left to the column, so that a missing or
    over-long value is rejected by the database like any other constraint
    violation. Unknown fields are dropped.

    Attributes:
        name: Name of the teacher.
        department: Department of the teacher.
    """

    name: Optional[str] = None
    department: Optional[str] = None


class TeacherUpdate(BaseModel):
    """Schema for a partial teacher update.

    Only fields present in the request body are applied.
    """

    name: Optional[str] = None
    department: Optional[str] = None


class TeacherResponse(BaseModel):
    """Response schema for teacher.

    Attributes:
        id: Teacher ID.
        name: Teacher name.
        department: Teacher department.
    """

    id: int
    name: str
    department: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TeacherDetailResponse(TeacherResponse):
    """Teacher with the courses they teach."""

    courses: List[CourseResponse]


TeacherItem = Annotated[
    Union[TeacherDetailResponse, TeacherResponse],
    Field(union_mode="left_to_right"),
]


class TeacherListResponse(BaseModel):
    """Paginated teacher listing.

    Items carry ``courses`` only when the listing was populated with them.
    """

    meta: PaginationMeta
    data: List[TeacherItem]
