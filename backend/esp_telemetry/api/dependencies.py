"""Request Dependencies — settings, request logger, shared-secret check, store.

Invariants:
    - require_secret_key raises AuthError before the body is read or the store touched
    - read_reading_payload maps every parse/validation failure to PayloadValidationError
    - Per-request logger comes from request.state (set by middleware), never a global

Design Decisions:
    - Body parsed in a dependency, not as a FastAPI body parameter: FastAPI decodes
      JSON bodies before any dependency runs, which would put 422 ahead of 403
"""

import logging

from fastapi import Depends, Header, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from esp_telemetry.config import Settings
from esp_telemetry.core.errors import AuthError, ErrorContext, PayloadValidationError
from esp_telemetry.core.readings import SECRET_HEADER, secret_matches
from esp_telemetry.infrastructure.database import get_db
from esp_telemetry.infrastructure.observability import request_logger
from esp_telemetry.infrastructure.reading_store import ReadingStore
from esp_telemetry.schemas.reading import ReadingPayload


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_request_logger(request: Request) -> logging.LoggerAdapter:
    log = getattr(request.state, "logger", None)
    if log is None:
        log = request_logger(getattr(request.state, "request_id", "-"))
    return log


def _error_context(request: Request) -> ErrorContext:
    return ErrorContext(request_id=getattr(request.state, "request_id", None))


async def require_secret_key(
    request: Request,
    x_secret_key: str | None = Header(None, alias=SECRET_HEADER),
    settings: Settings = Depends(get_app_settings),
    log: logging.LoggerAdapter = Depends(get_request_logger),
) -> None:
    """Reject writes whose X-Secret-Key header differs from the configured secret."""
    if not secret_matches(x_secret_key, settings.secret_key):
        log.warning("Rejected write with invalid secret key")
        raise AuthError(_error_context(request))


async def read_reading_payload(
    request: Request,
    log: logging.LoggerAdapter = Depends(get_request_logger),
) -> ReadingPayload:
    """Decode the request body into a ReadingPayload."""
    body = await request.body()
    try:
        return ReadingPayload.model_validate_json(body)
    except ValidationError as e:
        errors = e.errors()
        field = ".".join(str(loc) for loc in errors[0]["loc"]) if errors else None
        log.error(f"Failed to decode temperature reading: {e}")
        raise PayloadValidationError(
            "Bad request", field=field or None, context=_error_context(request),
        )


def get_reading_store(db: AsyncSession = Depends(get_db)) -> ReadingStore:
    return ReadingStore(db)
