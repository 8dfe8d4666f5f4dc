"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 {"status": "ok"} if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)

Design Decisions:
    - Liveness has no dependencies: it must answer even when the store is down
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import esp_telemetry.infrastructure.database as database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
