"""Top-level router: health checks plus the teachers resource."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from faculty_api.api.teachers import router as teachers_router
from faculty_api.utils.db import verify_db_connection

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix="/health", tags=["Health"])


@health_router.get("")
async def health_check() -> dict:
    """Answer as long as the process is serving requests."""
    return {"status": "healthy"}


@health_router.get("/db", response_model=None)
async def health_check_db() -> JSONResponse:
    """Report whether the teachers database answers a trivial query.

    503 with the driver's error text when it does not.
    """
    try:
        await verify_db_connection()
    except Exception as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "disconnected",
                "error": str(e),
            },
        )
    return JSONResponse(content={"status": "healthy", "database": "connected"})


def create_api_router() -> APIRouter:
    """Combine the health checks and the teachers resource."""
    router = APIRouter()
    router.include_router(health_router)
    router.include_router(teachers_router)
    return router
