"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness checks hit the test engine
    - The app is built with create_app(test_settings): no lifespan, no Postgres
"""

import pytest
from sqlalchemy import func, select
from httpx import ASGITransport, AsyncClient

from esp_telemetry.config import Settings
from esp_telemetry.infrastructure.database import get_db, DatabaseSessionManager
import esp_telemetry.infrastructure.database as db_module
from esp_telemetry.main import create_app
from esp_telemetry.models.reading import Reading

TEST_SECRET = "testsecret"


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, secret_key=TEST_SECRET)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
async def client(app, test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_readings(test_db):
    """Insert three readings with distinct timestamps (oldest first)."""
    rows = [
        Reading(temp_co=20.0, temp_room=18.0, timestamp=1_700_000_000),
        Reading(temp_co=21.0, temp_room=19.0, timestamp=1_700_000_100),
        Reading(temp_co=22.0, temp_room=20.0, timestamp=1_700_000_200),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


@pytest.fixture
def count_readings(test_session_factory):
    """Async callable returning the number of stored readings."""
    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count(Reading.id)))
            return result.scalar_one()
    return _count
