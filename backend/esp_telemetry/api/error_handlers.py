"""Error Handlers — global exception handlers for the telemetry API.

Invariants:
    - TelemetryError → structured JSON with error code, message, severity
    - RequestValidationError → 422 with field-level error details
    - Framework HTTP errors (404, 405) → same envelope; 405 reported as MethodError
    - Exception (catch-all) → 500, logged with traceback, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, HTTP, catch-all
    - Handlers log through the request-scoped logger when middleware set one
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from esp_telemetry.core.errors import (
    ErrorContext, ErrorSeverity, MethodError, TelemetryError,
)

logger = logging.getLogger(__name__)


def _logger_for(request: Request):
    return getattr(request.state, "logger", None) or logger


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_telemetry_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_telemetry_error_handler(app: FastAPI) -> None:
    """Register telemetry domain/infrastructure error handler."""

    @app.exception_handler(TelemetryError)
    async def telemetry_error_handler(request: Request, exc: TelemetryError):
        """Handle all telemetry domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        _logger_for(request).log(
            level,
            f"TelemetryError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        _logger_for(request).warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=422,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler (unknown path, wrong verb)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            content = MethodError(
                request.method, request.url.path,
                ErrorContext(request_id=getattr(request.state, "request_id", None)),
            ).to_response()
        else:
            content = {
                "error": {
                    "code": f"HTTP_{exc.status_code}",
                    "message": str(exc.detail),
                    "category": "protocol",
                    "severity": ErrorSeverity.WARNING.value,
                },
            }
        return JSONResponse(
            status_code=exc.status_code, content=content, headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        _logger_for(request).error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
