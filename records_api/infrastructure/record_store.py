"""Record Store — generic CRUD over one AsyncSession, shared by every record kind.

Invariants:
    - Each public method is a single atomic storage call (commit per write)
    - Every SQLAlchemy failure surfaces as OperationError; the session is rolled back
    - Malformed ids surface as OperationError (not 404, not 400)
    - list() always orders by created_at descending
    - delete() of an absent id is a successful no-op

Design Decisions:
    - Routes receive a RecordStore via Depends(get_record_store), never a raw session;
      tests swap the session underneath through the get_db override
"""

import logging
from typing import Any, Sequence, TypeVar
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.domain_types import RecordId
from records_api.core.errors import ErrorContext, OperationError
from records_api.db.base import Base
from records_api.infrastructure.database import get_db, storage_errors

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)


def parse_record_id(raw: str, collection: str) -> RecordId:
    """Parse a path id into a RecordId; malformed ids are operational failures."""
    try:
        return RecordId(UUID(raw))
    except (ValueError, TypeError, AttributeError) as e:
        raise OperationError(
            f"malformed id {raw!r}", "parse_id", cause=e,
            context=ErrorContext(collection=collection, record_id=str(raw)),
        ) from e


class RecordStore:
    """CRUD operations for any ORM model with `id` and `created_at` columns."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _context(self, model: type[Base], record_id: str | None = None) -> ErrorContext:
        return ErrorContext(collection=model.__tablename__, record_id=record_id)

    async def list(
        self, model: type[RecordT], **filters: Any,
    ) -> Sequence[RecordT]:
        """All records matching equality filters, newest first. None-valued filters are skipped."""
        query = select(model)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(model, column) == value)
        query = query.order_by(model.created_at.desc())
        async with storage_errors("find", self._session, self._context(model)):
            result = await self._session.execute(query)
            return result.scalars().all()

    async def get(self, model: type[RecordT], raw_id: str) -> RecordT | None:
        """Fetch one record by id, or None if absent."""
        record_id = parse_record_id(raw_id, model.__tablename__)
        async with storage_errors("find_by_id", self._session, self._context(model, raw_id)):
            return await self._session.get(model, record_id)

    async def insert(self, record: RecordT) -> RecordT:
        """Persist a new record and return it with store-assigned fields loaded."""
        async with storage_errors("insert", self._session, self._context(type(record))):
            self._session.add(record)
            await self._session.commit()
            await self._session.refresh(record)
        logger.info(
            f"Inserted {type(record).__tablename__} record",
            extra={"collection": type(record).__tablename__, "record_id": str(record.id)},
        )
        return record

    async def update(
        self, model: type[RecordT], raw_id: str, changes: dict[str, Any],
    ) -> RecordT | None:
        """Apply attribute changes to one record. Returns None if the id is absent."""
        record = await self.get(model, raw_id)
        if record is None:
            return None
        async with storage_errors("update", self._session, self._context(model, raw_id)):
            for column, value in changes.items():
                setattr(record, column, value)
            await self._session.commit()
            await self._session.refresh(record)
        return record

    async def delete(self, model: type[RecordT], raw_id: str) -> bool:
        """Remove one record. Returns whether anything was deleted."""
        record = await self.get(model, raw_id)
        if record is None:
            logger.info(
                f"Delete of absent {model.__tablename__} record is a no-op",
                extra={"collection": model.__tablename__, "record_id": raw_id},
            )
            return False
        async with storage_errors("delete", self._session, self._context(model, raw_id)):
            await self._session.delete(record)
            await self._session.commit()
        logger.info(
            f"Deleted {model.__tablename__} record",
            extra={"collection": model.__tablename__, "record_id": raw_id},
        )
        return True

    async def count(self, model: type[Base]) -> int:
        """Number of stored records of one kind."""
        async with storage_errors("count", self._session, self._context(model)):
            result = await self._session.execute(
                select(func.count()).select_from(model),
            )
            return result.scalar_one()


async def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """FastAPI dependency: a RecordStore bound to the request's session."""
    return RecordStore(db)
