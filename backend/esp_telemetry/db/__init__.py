"""Database Metadata — SQLAlchemy declarative Base shared by all models.

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
