"""
SQLAlchemy implementation of the RecordStore.

Works against any async engine (asyncpg in production, aiosqlite in tests).
Unique-constraint failures are translated into UniquenessViolation so callers
never depend on driver-specific IntegrityError messages.
"""

from typing import Any, Sequence, TypeVar

from sqlalchemy import Table, UniqueConstraint, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.core.logging import get_logger
from eventhub.stores.interfaces import RecordStore, UniquenessViolation

logger = get_logger(__name__)

T = TypeVar("T")


def _violated_field(table: Table, error: IntegrityError) -> str | None:
    """Name the unique column an IntegrityError refers to, if any."""
    message = str(error.orig)
    for constraint in table.constraints:
        if not isinstance(constraint, UniqueConstraint):
            continue
        columns = [column.name for column in constraint.columns]
        # Postgres reports the constraint name, SQLite reports table.column
        if constraint.name and constraint.name in message:
            return columns[0]
        if any(f"{table.name}.{column}" in message for column in columns):
            return columns[0]
    return None


class SQLAlchemyRecordStore(RecordStore):
    """Record store bound to one AsyncSession (one request)."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, model: type[T], record_id: Any) -> T | None:
        return await self._session.get(model, record_id)

    async def find_one_by(self, model: type[T], **criteria: Any) -> T | None:
        result = await self._session.execute(select(model).filter_by(**criteria).limit(1))
        return result.scalar_one_or_none()

    async def insert(self, record: T) -> T:
        self._session.add(record)
        return await self._flush(record)

    async def save(self, record: T) -> T:
        return await self._flush(record)

    async def find_many(
        self,
        model: type[T],
        *,
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int | None = None,
        **criteria: Any,
    ) -> list[T]:
        query = select(model).filter_by(**criteria).order_by(*order_by).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def count(self, model: type[T], **criteria: Any) -> int:
        query = select(func.count()).select_from(model).filter_by(**criteria)
        return (await self._session.execute(query)).scalar_one()

    async def _flush(self, record: T) -> T:
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            field = _violated_field(record.__table__, e)
            if field is None:
                raise
            logger.info("unique_constraint_violated", table=record.__table__.name, field=field)
            raise UniquenessViolation(field) from e
        # Pick up server-side defaults such as created_at/updated_at
        await self._session.refresh(record)
        return record
