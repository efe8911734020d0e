"""Persistence gateway shared by the model services.

A service wraps one ``AsyncSession`` for the length of a request. Writes
commit as soon as they succeed; a failed write rolls the session back before
the error leaves the service, so a request never continues on a broken
transaction.
"""

import logging
from typing import Any, Generic, NoReturn, Optional, TypeVar

from sqlalchemy import delete as delete_rows, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from faculty_api.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    RecordNotFoundError,
)
from faculty_api.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseService(Generic[T]):
    """Create, count, look up, update and delete rows of ``model``.

    Errors leave in two shapes only: ``RecordNotFoundError`` when the row
    does not exist (also when another request removed it mid-operation),
    and ``DatabaseConnectionError`` chained to the SQLAlchemy error for
    everything the database rejects.

    Usage:
        class TeacherService(BaseService[Teacher]):
            model = Teacher

        teacher = await TeacherService(db).create(name="Alice", department="Math")
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def _fail(
        self, action: str, error: SQLAlchemyError, **context: Any
    ) -> NoReturn:
        await self.db.rollback()
        logger.error(
            f"{self.model_name} {action} failed",
            extra={"model": self.model_name, **context, "error": str(error)},
            exc_info=True,
        )
        if isinstance(error, IntegrityError):
            raise DatabaseConnectionError(
                f"Integrity constraint violation: {error}"
            ) from error
        raise DatabaseConnectionError(
            f"Database error during {action}: {error}"
        ) from error

    async def _not_found(self, record_id: int, reason: str) -> NoReturn:
        await self.db.rollback()
        logger.info(
            f"{self.model_name} not found during {reason}",
            extra={"model": self.model_name, "id": record_id},
        )
        raise RecordNotFoundError(self.model_name, record_id)

    async def create(self, **fields: Any) -> T:
        """Insert a row built from ``fields`` and commit.

        Nothing is defaulted or checked here: a missing required column
        comes back from the database as an integrity violation.

        Raises:
            DatabaseConnectionError: If the insert is rejected.
        """
        try:
            record = self.model(**fields)
            self.db.add(record)
            await self.db.flush()
            # server-side timestamps
            await self.db.refresh(record)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail("create", e, fields=sorted(fields))
        logger.debug(
            f"{self.model_name} created",
            extra={"model": self.model_name, "id": record.id},
        )
        return record

    async def count(self) -> int:
        """Count every row of the table."""
        try:
            result = await self.db.execute(select(func.count(self.model.id)))
            return result.scalar_one()
        except SQLAlchemyError as e:
            await self._fail("count", e)

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Return the row with this primary key, or None."""
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail("get", e, id=record_id)

    async def get_by_id_or_fail(self, record_id: int) -> T:
        """Like ``get_by_id`` but raises ``RecordNotFoundError`` for a miss."""
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.model_name, record_id)
        return record

    async def update(self, record_id: int, **changes: Any) -> T:
        """Apply ``changes`` to an existing row and commit.

        Columns not named in ``changes`` keep their stored values. With no
        changes the stored row is returned as it is.

        Raises:
            RecordNotFoundError: If the row is missing, or is deleted by
                another session before this update reaches the database.
            InvalidFilterError: If a change names an unknown attribute.
            DatabaseConnectionError: If the database rejects the update.
        """
        record = await self.get_by_id_or_fail(record_id)
        for key in changes:
            if not hasattr(self.model, key):
                raise InvalidFilterError(
                    f"Invalid attribute '{key}' for model {self.model_name}"
                )
        try:
            for key, value in changes.items():
                setattr(record, key, value)
            await self.db.flush()
            # Re-read instead of refresh(): an empty flush never touches the
            # row, so this is where a concurrent delete shows up.
            result = await self.db.execute(
                select(self.model)
                .where(self.model.id == record_id)
                .execution_options(populate_existing=True)
            )
            if result.scalar_one_or_none() is None:
                await self._not_found(record_id, "update")
            await self.db.commit()
        except StaleDataError:
            await self._not_found(record_id, "update")
        except SQLAlchemyError as e:
            await self._fail("update", e, id=record_id)
        logger.debug(
            f"{self.model_name} updated",
            extra={
                "model": self.model_name,
                "id": record_id,
                "fields": sorted(changes),
            },
        )
        return record

    async def delete(self, record_id: int) -> None:
        """Delete the row with this primary key and commit.

        The DELETE itself decides existence, so a row removed by another
        session after it was last read here is still reported as missing.

        Raises:
            RecordNotFoundError: If no row was deleted.
            DatabaseConnectionError: If the database rejects the delete.
        """
        try:
            result = await self.db.execute(
                delete_rows(self.model).where(self.model.id == record_id)
            )
            deleted = result.rowcount
            if deleted:
                await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail("delete", e, id=record_id)
        if not deleted:
            await self._not_found(record_id, "delete")
        logger.debug(
            f"{self.model_name} deleted",
            extra={"model": self.model_name, "id": record_id},
        )
