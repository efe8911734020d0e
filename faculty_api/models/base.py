"""Base model class with primary key and timestamp tracking."""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from faculty_api.utils.db import Base


class BaseModel(Base):
    """Abstract base class for SQLAlchemy models.

    Provides common columns for all models:
    - Primary key (id), generated by the database
    - Timestamps (created_at, updated_at)

    Data access lives in the service layer (see ``faculty_api.services``).

    Usage:
        class Room(BaseModel):
            __tablename__ = "rooms"

            label: Mapped[str] = mapped_column(String(100))
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to dictionary of column values.

        Returns:
            Dictionary representation of the model
        """
        return {
            column.name: getattr(self, column.name) for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id}, {attrs})"
