"""Teacher model representing academic instructors."""

from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from faculty_api.models.base import BaseModel

if TYPE_CHECKING:
    from faculty_api.models.course import Course


class Teacher(BaseModel):
    """Teacher model for storing academic instructors.

    A teacher belongs to a department and teaches any number of courses.
    Multiple teachers can share a name (no unique constraint).

    Attributes:
        name: Full name of the teacher (e.g., "Dr. Smith")
        department: Department the teacher belongs to (e.g., "Mathematics")
        courses: Courses taught by the teacher. Not loaded unless a query
            asks for it with ``selectinload(Teacher.courses)``.
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    department: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Course rows are removed by ON DELETE CASCADE, not by the ORM
    courses: Mapped[List["Course"]] = relationship(
        "Course",
        back_populates="teacher",
        lazy="noload",
        passive_deletes=True,
        order_by="Course.id",
    )

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return (
            f"Teacher(id={self.id}, name={self.name!r}, "
            f"department={self.department!r})"
        )
