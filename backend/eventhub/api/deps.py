"""
Shared route dependencies.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.session import get_db
from eventhub.stores import RecordStore, SQLAlchemyRecordStore


async def get_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """Record store bound to the request's session."""
    return SQLAlchemyRecordStore(db)
