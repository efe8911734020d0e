"""Shared response schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. ``{"message": "Deleted"}``."""

    message: str


class PaginationMeta(BaseModel):
    """Pagination metadata for list endpoints.

    Attributes:
        total: Number of records in the whole table.
        page: Requested page number (1-indexed).
        total_pages: ``ceil(total / limit)``, serialized as ``totalPages``.
    """

    total: int
    page: int
    total_pages: int = Field(alias="totalPages")

    model_config = {"populate_by_name": True}
