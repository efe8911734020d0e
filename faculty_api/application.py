"""FastAPI application factory for the faculty API."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from faculty_api.api import create_api_router
from faculty_api.config import settings
from faculty_api.utils.db import close_db, init_db
from faculty_api.utils.exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Migrate and check the database before serving; dispose it after."""
    await init_db()
    try:
        yield
    finally:
        await close_db()


def create_app() -> FastAPI:
    """Build the app: error envelopes first, then the routes."""
    app = FastAPI(
        title=settings.API_TITLE,
        description="Teacher records with their courses",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(create_api_router())
    return app
