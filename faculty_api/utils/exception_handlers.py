"""Centralized exception handlers for FastAPI application.

Error bodies come in two shapes: ``{"message": ...}`` for missing records
and ``{"error": ...}`` for everything else.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from faculty_api.exceptions import (
    DatabaseConnectionError,
    InvalidQueryParameterError,
    ModelError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"


@dataclass(frozen=True, slots=True)
class ExceptionConfig:
    """Configuration for exception handler behavior."""

    status_code: int
    log_level: str = "warning"
    body_key: str = "error"
    fixed_message: str | None = None


# Exception type to configuration mapping
EXCEPTION_CONFIGS: dict[type[Exception], ExceptionConfig] = {
    RecordNotFoundError: ExceptionConfig(
        status_code=status.HTTP_404_NOT_FOUND,
        log_level="info",
        body_key="message",
        fixed_message=NOT_FOUND_MESSAGE,
    ),
    InvalidQueryParameterError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
    ),
    # TODO: stop echoing driver error text once clients no longer parse it
    DatabaseConnectionError: ExceptionConfig(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        log_level="error",
    ),
    ModelError: ExceptionConfig(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        log_level="error",
    ),
}


def _log_exception(request: Request, exc: Exception, config: ExceptionConfig) -> None:
    """Log exception with appropriate level."""
    log_func: Callable[..., None] = getattr(logger, config.log_level)
    log_func(
        f"{type(exc).__name__}: {exc}",
        extra={"method": request.method, "path": request.url.path},
    )


def _build_response_content(exc: Exception, config: ExceptionConfig) -> dict[str, Any]:
    """Build response content based on exception type."""
    message = config.fixed_message if config.fixed_message is not None else str(exc)
    return {config.body_key: message}


def _create_handler(
    config: ExceptionConfig,
) -> Callable[[Request, Exception], Any]:
    """Create exception handler function for given config."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        _log_exception(request, exc, config)
        content = _build_response_content(exc, config)
        return JSONResponse(status_code=config.status_code, content=content)

    return handler


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return validation errors without the non-serializable ``ctx`` values."""
    return [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in exc.errors()
    ]


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    for exc_type, config in EXCEPTION_CONFIGS.items():
        app.add_exception_handler(exc_type, _create_handler(config))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
