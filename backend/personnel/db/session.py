"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - SQLite engines enforce foreign keys (ON DELETE CASCADE on employee.person_id)
    - Meant for scripts and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI contexts
      (ADR: test fixtures need a raw engine and session factory)
    - PRAGMA on connect: SQLite ships with foreign key enforcement off
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_engine(database_url: str) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign keys enabled."""
    engine = create_async_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
