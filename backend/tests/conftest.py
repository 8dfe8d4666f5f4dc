"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - APP_* variables are cleared: they outrank the Settings(...) kwargs tests pass
    - Every test gets a fresh in-memory SQLite database with the schema created
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from esp_telemetry.db.base import Base
import esp_telemetry.models  # noqa: F401

for _key in [k for k in os.environ if k.upper().startswith("APP_")]:
    del os.environ[_key]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
