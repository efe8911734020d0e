"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so defaults must be in place first
os.environ.setdefault("API_TITLE", "Faculty API Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_USER", "test_user")
os.environ.setdefault("DB_PASSWORD", "test_password")
os.environ.setdefault("DB_NAME", "test_db")

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

import faculty_api.models  # noqa: E402,F401
from faculty_api.application import create_app  # noqa: E402
from faculty_api.config import Settings  # noqa: E402
from faculty_api.utils.db import Base, get_db_session  # noqa: E402


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def settings() -> Settings:
    """Create settings instance from the test environment."""
    return Settings()


@pytest.fixture
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a throwaway SQLite database with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test database."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker,
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for direct service and model tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI application with startup database work disabled."""
    with patch("faculty_api.application.init_db", new_callable=AsyncMock):
        with patch("faculty_api.application.close_db", new_callable=AsyncMock):
            yield create_app()


@pytest.fixture
def db_app(app: FastAPI, session_factory: async_sessionmaker) -> FastAPI:
    """Application whose requests run against the test database."""

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(db_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the database-backed application."""
    transport = ASGITransport(app=db_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
