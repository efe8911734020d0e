"""Course model representing classes taught by a teacher."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from faculty_api.models.base import BaseModel

if TYPE_CHECKING:
    from faculty_api.models.teacher import Teacher


class Course(BaseModel):
    """Course model.

    Only read as the nested ``courses`` collection of a teacher.

    Attributes:
        title: Course title (e.g., "Linear Algebra")
        teacher_id: Owning teacher; the course is deleted with the teacher
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    teacher_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("teachers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    teacher: Mapped["Teacher"] = relationship(
        "Teacher", back_populates="courses", lazy="noload"
    )

    def __repr__(self) -> str:
        """String representation of the course."""
        return (
            f"Course(id={self.id}, title={self.title!r}, "
            f"teacher_id={self.teacher_id})"
        )
