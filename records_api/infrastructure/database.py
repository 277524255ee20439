"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One manager per process: created in lifespan startup, disposed at shutdown
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to OperationError (core/errors.py)
    - Connection loss is logged, never retried here (pool_pre_ping replaces stale connections)

Design Decisions:
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite URLs skip pool sizing (aiosqlite uses a non-queue pool)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from records_api.core.errors import ErrorContext, OperationError
from records_api.db.base import Base
from records_api import models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(
    operation: str,
    session: AsyncSession | None = None,
    context: ErrorContext | None = None,
) -> AsyncIterator[None]:
    """Translate SQLAlchemy failures inside the block into OperationError."""
    try:
        yield
    except SQLAlchemyError as e:
        if session is not None:
            await session.rollback()
        if isinstance(e, IntegrityError):
            message = "Integrity constraint violated"
        elif isinstance(e, OperationalError):
            message = "Connection or operational error"
        elif isinstance(e, DBAPIError):
            message = "Database driver error"
        else:
            message = "Database operation failed"
        logger.error(f"DB {operation} error: {e}")
        raise OperationError(message, operation, cause=e, context=context) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with storage_errors("session", session):
                yield session
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create any missing tables (local runs without migrations)."""
        async with storage_errors("create_schema"):
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
