"""Unit tests for Teacher and Course models."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from faculty_api.models import Course, Teacher


def test_teacher_repr():
    """Teacher repr shows the identifying fields."""
    teacher = Teacher(id=4, name="Alice", department="Math")

    assert repr(teacher) == "Teacher(id=4, name='Alice', department='Math')"


def test_course_repr():
    """Course repr shows title and owner."""
    course = Course(id=2, title="Algebra", teacher_id=4)

    assert repr(course) == "Course(id=2, title='Algebra', teacher_id=4)"


@pytest.mark.asyncio
async def test_to_dict_contains_columns(db_session: AsyncSession):
    """to_dict() returns every column, including server defaults."""
    teacher = Teacher(name="Alice", department="Math")
    db_session.add(teacher)
    await db_session.flush()
    await db_session.refresh(teacher)

    data = teacher.to_dict()

    assert set(data) == {"id", "name", "department", "created_at", "updated_at"}
    assert data["name"] == "Alice"
    assert data["created_at"] is not None


@pytest.mark.asyncio
async def test_courses_not_loaded_by_default(db_session: AsyncSession):
    """A plain teacher load leaves courses empty until asked for."""
    teacher = Teacher(name="Alice", department="Math")
    db_session.add(teacher)
    await db_session.flush()
    db_session.add(Course(title="Algebra", teacher_id=teacher.id))
    await db_session.commit()
    db_session.expunge_all()

    loaded = await db_session.get(Teacher, teacher.id)

    assert loaded.courses == []
