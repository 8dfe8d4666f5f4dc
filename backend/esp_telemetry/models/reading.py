"""Reading ORM — one temperature data point reported by the device.

Invariants:
    - id is an auto-assigned integer primary key, strictly increasing per insert
    - temp_co, temp_room and timestamp are never null once stored
    - Rows are append-only: never updated, never deleted by the service

Design Decisions:
    - timestamp stored as BIGINT epoch seconds (device clock domain), separate from
      created_at (server wall clock, not exposed by the API)
    - Double over Float: maps to DOUBLE PRECISION on PostgreSQL
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Double, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from esp_telemetry.db.base import Base


class Reading(Base):
    """Reading entity — append-only telemetry row."""
    __tablename__ = "readings"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    temp_co: Mapped[float] = mapped_column(Double, nullable=False)
    temp_room: Mapped[float] = mapped_column(Double, nullable=False)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(),
    )
