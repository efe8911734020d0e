"""Teachers API endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from faculty_api.exceptions import RecordNotFoundError
from faculty_api.schemas.common import MessageResponse, PaginationMeta
from faculty_api.schemas.teacher import (
    TeacherCreate,
    TeacherDetailResponse,
    TeacherListResponse,
    TeacherRelation,
    TeacherResponse,
    TeacherUpdate,
)
from faculty_api.services.teacher_service import TeacherService
from faculty_api.utils.api_helpers import (
    get_pagination_meta,
    parse_int_param,
    parse_populate,
)
from faculty_api.utils.dependencies import dependencies

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

NOT_FOUND_RESPONSE = {
    http_status.HTTP_404_NOT_FOUND: {
        "model": MessageResponse,
        "description": "Not found",
    }
}

router = APIRouter(
    prefix="/teachers",
    tags=["Teachers"],
)


@router.post(
    "",
    status_code=http_status.HTTP_201_CREATED,
    summary="Create a new teacher",
)
async def create_teacher(
    data: Optional[TeacherCreate] = None,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherResponse:
    """Create a new teacher.

    A missing body is an empty insert, which the database rejects.

    Args:
        data: Teacher creation data.
        service: TeacherService instance.

    Returns:
        Created teacher with its generated ID.
    """
    fields = data.model_dump(exclude_unset=True) if data else {}
    teacher = await service.create(**fields)
    logger.info("Teacher created", extra={"teacher_id": teacher.id})
    return TeacherResponse.model_validate(teacher)


@router.get("", summary="Get all teachers (paginated)")
async def list_teachers(
    limit: Optional[str] = Query(
        default=None, description="Number of teachers per page (default 10)"
    ),
    page: Optional[str] = Query(default=None, description="Page number (default 1)"),
    sort: Optional[str] = Query(
        default=None, description="Sort order by teacher ID: 'asc' or 'desc'"
    ),
    populate: Optional[str] = Query(
        default=None,
        description="Comma-separated relations to include (e.g. 'course')",
    ),
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherListResponse:
    """List teachers one page at a time.

    Args:
        limit: Page size; missing, non-numeric or zero means 10.
        page: Page number; missing, non-numeric or zero means 1.
        sort: ``desc`` for descending IDs, anything else ascending.
        populate: ``course`` to include each teacher's courses.
        service: TeacherService instance.

    Returns:
        Pagination metadata and the page of teachers.
    """
    page_size = parse_int_param(limit, DEFAULT_LIMIT, "limit")
    page_number = parse_int_param(page, DEFAULT_PAGE, "page")
    include = parse_populate(populate)

    total = await service.count()
    teachers = await service.list_page(
        limit=page_size,
        offset=(page_number - 1) * page_size,
        descending=sort == "desc",
        include=include,
    )

    item_schema = (
        TeacherDetailResponse
        if TeacherRelation.COURSE in include
        else TeacherResponse
    )
    return TeacherListResponse(
        meta=PaginationMeta(**get_pagination_meta(page_number, page_size, total)),
        data=[item_schema.model_validate(t) for t in teachers],
    )


@router.get(
    "/{teacher_id}",
    summary="Get a teacher by ID",
    responses=NOT_FOUND_RESPONSE,
)
async def get_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherDetailResponse:
    """Get a teacher together with their courses.

    Raises:
        RecordNotFoundError: If no teacher has this ID.
    """
    teacher = await service.get_with_courses(teacher_id)
    if teacher is None:
        raise RecordNotFoundError("Teacher", teacher_id)
    return TeacherDetailResponse.model_validate(teacher)


@router.put(
    "/{teacher_id}",
    summary="Update a teacher",
    responses=NOT_FOUND_RESPONSE,
)
async def update_teacher(
    teacher_id: int,
    data: Optional[TeacherUpdate] = None,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherResponse:
    """Update the fields present in the body, leaving the others as they are.

    Raises:
        RecordNotFoundError: If no teacher has this ID.
    """
    changes = data.model_dump(exclude_unset=True) if data else {}
    teacher = await service.update(teacher_id, **changes)
    logger.info(
        "Teacher updated",
        extra={"teacher_id": teacher_id, "fields": sorted(changes)},
    )
    return TeacherResponse.model_validate(teacher)


@router.delete(
    "/{teacher_id}",
    summary="Delete a teacher",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> MessageResponse:
    """Delete a teacher permanently.

    Raises:
        RecordNotFoundError: If no teacher has this ID.
    """
    await service.delete(teacher_id)
    logger.info("Teacher deleted", extra={"teacher_id": teacher_id})
    return MessageResponse(message="Deleted")
