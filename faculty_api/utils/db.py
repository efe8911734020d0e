"""Database connection utilities."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from faculty_api.config import settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()

# Global engine and session factory
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def get_db_url() -> str:
    """Build database URL from settings.

    An explicit DATABASE_URL takes precedence over the individual DB_* values.
    """
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return (
        f"postgresql+asyncpg://{settings.DB_USER}:{settings.DB_PASSWORD}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
    )


async def get_db_engine() -> AsyncEngine:
    """Get or create database engine."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            get_db_url(),
            echo=settings.DEBUG,
            pool_pre_ping=True,  # Verify connections before using
        )
    return _engine


async def get_session_factory() -> async_sessionmaker:
    """Get or create the session factory bound to the engine."""
    global _session_factory
    if _session_factory is None:
        engine = await get_db_engine()
        _session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of one request."""
    session_factory = await get_session_factory()
    async with session_factory() as session:
        yield session


async def verify_db_connection() -> None:
    """Verify database connection. Raises exception if connection fails."""
    engine = await get_db_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def run_migrations() -> None:
    """Run database migrations using Alembic."""
    from alembic import command
    from alembic.config import Config

    project_root = Path(__file__).resolve().parents[2]
    alembic_ini_path = project_root / "alembic.ini"

    if not alembic_ini_path.exists():
        raise FileNotFoundError(
            f"Alembic configuration file not found at {alembic_ini_path}"
        )

    alembic_cfg = Config(str(alembic_ini_path))
    alembic_cfg.set_main_option("script_location", str(project_root / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", get_db_url())
    alembic_cfg.attributes["configure_logger"] = False

    # env.py drives its own event loop, so keep it off ours
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


async def init_db() -> None:
    """Initialize database connection and run migrations.

    Exits application if connection fails.
    """
    try:
        await run_migrations()
        await verify_db_connection()
        logger.info("Database initialized")
    except Exception as e:
        logger.critical("Failed to initialize database", extra={"error": str(e)})
        print(f"Failed to initialize database: {e}", file=sys.stderr)
        sys.exit(1)


async def close_db() -> None:
    """Close database connections."""
    global _engine, _session_factory
    if _engine:
        await _engine.dispose()
        _engine = None
        _session_factory = None
