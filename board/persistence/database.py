"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings
from board.domain.error import StorageFailureError
from board.domain.repository import UnitOfWork

P = ParamSpec("P")
T = TypeVar("T")

# Connectivity and timeout failures; integrity and programming errors propagate
_STORAGE_FAILURES = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,
    TimeoutError,
    OSError,
)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout,
        connect_args={"command_timeout": settings.database.command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


def storage_operation(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Translate connectivity failures of a repository call into
    ``StorageFailureError``.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except _STORAGE_FAILURES as e:
            logfire.error(
                "Storage operation failed",
                operation=func.__qualname__,
                error=str(e),
            )
            raise StorageFailureError("Storage temporarily unavailable") from e

    return wrapper


FOREIGN_KEY_VIOLATION = "23503"


def is_foreign_key_violation(error: sa_exc.IntegrityError) -> bool:
    """Whether an insert failed because a referenced row is gone."""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == FOREIGN_KEY_VIOLATION


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work over the request's SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @storage_operation
    async def commit(self) -> None:
        await self.session.commit()

    @storage_operation
    async def rollback(self) -> None:
        await self.session.rollback()
