"""ESP Telemetry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TelemetryError → structured JSON responses
    - Database initialized and schema bootstrapped once, on startup, via lifespan
    - Settings live on app.state; handlers read them through a dependency

Design Decisions:
    - create_app() factory: the CLI passes flag-built Settings, tests pass their own,
      `esp_telemetry.main:app` uses environment defaults
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from esp_telemetry.api.error_handlers import register_error_handlers
from esp_telemetry.api.middleware import register_middleware
from esp_telemetry.api.routes import health, home, metrics, readings
from esp_telemetry.config import Settings, get_settings
from esp_telemetry.infrastructure import database
from esp_telemetry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        connect_args=settings.engine_connect_args,
    )
    await manager.create_schema()
    if not settings.secret_key:
        logger.warning("No secret key configured; POST /data accepts requests without X-Secret-Key")
    logger.info(f"starting server at http://{settings.host}:{settings.port}")
    yield
    logger.info("ESP Telemetry API shutting down")
    await manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="ESP Telemetry API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    register_middleware(app)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(readings.router)
    app.include_router(metrics.router)
    app.include_router(home.router)
    return app


app = create_app()
