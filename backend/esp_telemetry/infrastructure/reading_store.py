"""Reading Store — insert-one and query-page over the readings table.

Invariants:
    - insert() is one INSERT plus commit; on failure the session is rolled back
      and StoreError raised, so no partial row is ever visible
    - query_page() orders by timestamp DESC (id DESC on ties) and never returns None
    - No caching: every call goes to the database

Design Decisions:
    - Store takes an AsyncSession, not the engine: the request owns the session
      lifecycle via the get_db dependency
    - SQLAlchemy errors mapped here rather than in get_db so test overrides of
      get_db keep the same error contract
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from esp_telemetry.core.errors import StoreError
from esp_telemetry.models.reading import Reading

logger = logging.getLogger(__name__)


class ReadingStore:
    """Persistence accessor for temperature readings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, temp_co: float, temp_room: float, timestamp: int,
    ) -> Reading:
        """Append one reading and return it with its assigned id."""
        reading = Reading(
            temp_co=temp_co, temp_room=temp_room, timestamp=timestamp,
        )
        try:
            self.db.add(reading)
            await self.db.commit()
            await self.db.refresh(reading)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert temperature reading: {e}")
            raise StoreError("Could not persist reading", "insert")
        return reading

    async def query_page(self, limit: int, offset: int) -> list[Reading]:
        """Newest-first page of readings."""
        query = (
            select(Reading)
            .order_by(Reading.timestamp.desc(), Reading.id.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Failed to query temperature readings: {e}")
            raise StoreError("Could not load readings", "query")
        return list(result.scalars().all())
