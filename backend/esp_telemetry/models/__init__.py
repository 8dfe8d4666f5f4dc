"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - A single table: readings

Design Decisions:
    - Models imported here so Base.metadata is complete before create_all runs
"""

from esp_telemetry.models.reading import Reading  # noqa: F401
