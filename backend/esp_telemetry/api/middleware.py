"""Request Middleware — request ID tagging, request/response logging, metrics.

Invariants:
    - Every request gets a fresh UUID4 request id, echoed in the X-Request-ID header
    - request.state.logger is a RequestLogger bound to that id for the whole request
    - One "request" log line on entry, one "response" line (status, duration) on exit
    - Every completed request is counted and timed in Prometheus

Design Decisions:
    - Logger passed down via request.state rather than a contextvar or global default
    - Failures escaping the handlers are left to the catch-all in error_handlers.py
"""

import time
import uuid

from fastapi import FastAPI, Request

from esp_telemetry.infrastructure.metrics import observe_request
from esp_telemetry.infrastructure.observability import request_logger

REQUEST_ID_HEADER = "X-Request-ID"


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def register_middleware(app: FastAPI) -> None:
    """Register the request context middleware on the FastAPI app."""

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = str(uuid.uuid4())
        log = request_logger(request_id)
        request.state.request_id = request_id
        request.state.logger = log

        start = time.perf_counter()
        log.info("request", extra={
            "method": request.method,
            "path": request.url.path,
            "remote": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
        })

        response = await call_next(request)

        duration = time.perf_counter() - start
        response.headers[REQUEST_ID_HEADER] = request_id
        log.info("response", extra={
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(duration * 1000, 3),
        })
        observe_request(
            request.method, _route_path(request), response.status_code, duration,
        )
        return response
