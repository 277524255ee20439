"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database (StaticPool: one shared connection)
    - Seeding and counting use short-lived sessions so they never hold a transaction open
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from records_api.db.base import Base  # noqa: E402
from records_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from records_api.infrastructure.record_store import RecordStore  # noqa: E402
from records_api import models  # noqa: E402, F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (no new engine created)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def seed(test_session_factory):
    """Insert ORM records directly, bypassing the API."""
    async def _seed(*records):
        async with test_session_factory() as session:
            session.add_all(records)
            await session.commit()
            for record in records:
                await session.refresh(record)
        return records
    return _seed


@pytest.fixture
def count_records(test_session_factory):
    """Count stored records of one kind."""
    async def _count(model) -> int:
        async with test_session_factory() as session:
            return await RecordStore(session).count(model)
    return _count
