"""Teacher service: the gateway behind the ``/teachers`` routes.

Adds the two reads the API needs beyond plain CRUD: an ordered page with
optional course loading, and a lookup that always includes courses.
"""

from typing import Collection, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from faculty_api.models.teacher import Teacher
from faculty_api.schemas.teacher import TeacherRelation
from faculty_api.services.base import BaseService


class TeacherService(BaseService[Teacher]):
    """Service for managing Teacher entities.

    Inherited from BaseService:
    - create(name=..., department=...)
    - count()
    - get_by_id(id) / get_by_id_or_fail(id)
    - update(id, **changes): partial update
    - delete(id)

    Usage:
        service = TeacherService(db_session)
        page = await service.list_page(
            limit=10, offset=0, include={TeacherRelation.COURSE}
        )
    """

    model = Teacher

    async def list_page(
        self,
        limit: int,
        offset: int,
        descending: bool = False,
        include: Collection[TeacherRelation] = (),
    ) -> List[Teacher]:
        """Get one page of teachers ordered by ID.

        Args:
            limit: Maximum number of teachers to return.
            offset: Number of teachers to skip.
            descending: Order by ID descending instead of ascending.
            include: Relations to eager-load alongside each teacher.

        Returns:
            List of Teacher instances.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        order = Teacher.id.desc() if descending else Teacher.id.asc()
        stmt = select(Teacher).order_by(order).limit(limit).offset(offset)
        if TeacherRelation.COURSE in include:
            # Collections already in the identity map were loaded empty
            stmt = stmt.options(selectinload(Teacher.courses)).execution_options(
                populate_existing=True
            )
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._fail("list", e, limit=limit, offset=offset)

    async def get_with_courses(self, teacher_id: int) -> Optional[Teacher]:
        """Get a teacher by ID with courses eager-loaded, or None."""
        stmt = (
            select(Teacher)
            .options(selectinload(Teacher.courses))
            .where(Teacher.id == teacher_id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail("get", e, id=teacher_id)
