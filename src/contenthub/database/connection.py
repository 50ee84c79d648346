"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Global shared connection pool
_async_engine = None
_async_session_local = None
_initialized = False
_init_lock = threading.Lock()


def get_database_url() -> str:
    """Get database URL, checking the environment first for test compatibility."""
    return os.getenv("CONTENTHUB_DATABASE_URL") or settings.database_url


def to_async_url(db_url: str) -> str:
    """Map a plain PostgreSQL URL onto the asyncpg driver."""
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return db_url


def reset_database():
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return a helpful error message.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"Please check that PostgreSQL is running and accessible."
            )
        if "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False):
    """Initialize the shared async connection pool.

    Thread-safe: a lock guards initialization when several threads race.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()

        _async_engine = create_async_engine(
            to_async_url(db_url),
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.sql_echo,
        )
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=db_url.split("@")[-1])


def get_async_engine():
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    return _async_engine


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the shared pool; commits on success."""
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Database not initialized")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
