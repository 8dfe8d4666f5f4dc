"""Readings — ingest (POST) and page through (GET) temperature readings at /data.

Invariants:
    - POST: secret check → body parse → timestamp default → single insert → 200
    - GET: no authentication; invalid limit/offset silently fall back to defaults
    - GET always returns a JSON array, [] when the table is empty
    - Other verbs on /data answer 405 from the router without touching the store

Design Decisions:
    - Dependencies declared in check order; FastAPI resolves them sequentially, so a
      bad secret short-circuits before the body is read or a session is opened
    - limit/offset taken as raw strings: core/pagination.py owns the fallback rules
"""

import logging

from fastapi import APIRouter, Depends, Query

from esp_telemetry.api.dependencies import (
    get_reading_store, get_request_logger, read_reading_payload, require_secret_key,
)
from esp_telemetry.core.pagination import parse_limit, parse_offset
from esp_telemetry.core.readings import resolve_timestamp
from esp_telemetry.infrastructure.metrics import READINGS_INGESTED
from esp_telemetry.infrastructure.reading_store import ReadingStore
from esp_telemetry.schemas.reading import ReadingPayload, ReadingResponse

router = APIRouter(prefix="/data", tags=["readings"])


@router.post(
    "", response_model=ReadingResponse,
    dependencies=[Depends(require_secret_key)],
)
async def create_reading(
    payload: ReadingPayload = Depends(read_reading_payload),
    store: ReadingStore = Depends(get_reading_store),
    log: logging.LoggerAdapter = Depends(get_request_logger),
):
    """Persist one reading reported by the device."""
    log.info(
        f"Received temperature reading: tempCo={payload.temp_co} "
        f"tempRoom={payload.temp_room} timestamp={payload.timestamp}",
    )
    timestamp = resolve_timestamp(payload.timestamp)
    reading = await store.insert(payload.temp_co, payload.temp_room, timestamp)
    READINGS_INGESTED.inc()
    log.info("Stored temperature reading", extra={"reading_id": reading.id})
    return ReadingResponse.model_validate(reading)


@router.get("", response_model=list[ReadingResponse])
async def list_readings(
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    store: ReadingStore = Depends(get_reading_store),
):
    """Newest-first page of readings."""
    readings = await store.query_page(parse_limit(limit), parse_offset(offset))
    return [ReadingResponse.model_validate(r) for r in readings]
