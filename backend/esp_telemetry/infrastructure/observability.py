"""Structured Logging — JSON formatter, setup, and request-scoped loggers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (request_id, method, path, status, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - Request-scoped context travels in a LoggerAdapter, never in global state

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - RequestLogger merges per-call extra with the request's fields instead of
      replacing them (stdlib LoggerAdapter drops per-call extra)
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "request_id", "method", "path", "status", "duration_ms",
    "remote", "user_agent", "error_code", "reading_id",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class RequestLogger(logging.LoggerAdapter):
    """Logger bound to one request's context fields."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def request_logger(request_id: str, base: logging.Logger | None = None) -> RequestLogger:
    return RequestLogger(
        base or logging.getLogger("esp_telemetry.request"),
        {"request_id": request_id},
    )


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(request_id)s - %(message)s",
            defaults={"request_id": "-"},
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
