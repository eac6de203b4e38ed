"""Database engine and session management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gate_tutor.config import Settings, mask_database_url

logger = logging.getLogger(__name__)

_TROUBLESHOOTING_TIPS = (
    "Troubleshooting: check DATABASE_URL in .env for stray spaces or special characters, "
    "make sure the password placeholder was replaced, and that the server accepts connections "
    "from this host."
)


def create_engine_from_settings(settings: Settings) -> AsyncEngine | None:
    """
    Create the async engine described by the settings.

    Returns None (after logging the problem) when no database URL is configured;
    the application still starts and store calls fail individually.
    """
    url = settings.database_url_async
    if not url:
        logger.error("DATABASE_URL is not set; schedule endpoints will fail until it is configured")
        return None

    logger.info("Attempting to connect to: %s", mask_database_url(url))

    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.debug)

    connect_args = {"ssl": "require"} if settings.database_requires_ssl else {}
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the given engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def probe_connection(engine: AsyncEngine) -> bool:
    """Run a trivial query so connectivity problems show up in the startup log."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database connection error: %s", e)
        logger.info(_TROUBLESHOOTING_TIPS)
        return False
    logger.info("Connected to the database successfully")
    return True


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
