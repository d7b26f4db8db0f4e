"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - Schema comes from the ORM metadata (same tables the migrations create)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for the
      person/employee statements (PostgreSQL MONEY maps to NUMERIC there)
    - SQLite is more lenient than PostgreSQL: CAST('abc' AS MONEY) yields 0 here
      instead of an error, so malformed-salary rejection is never asserted
      against this store
    - Verification queries use short-lived sessions, never the request's session
"""

import os

# Ensure tests never point at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402

from personnel.db.base import Base  # noqa: E402
from personnel.db.session import create_engine, create_session_factory  # noqa: E402
import personnel.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fetch_rows(test_session_factory):
    """Run a SELECT in its own session and return rows as dicts."""
    async def _fetch(sql: str, **params) -> list[dict]:
        async with test_session_factory() as session:
            result = await session.execute(text(sql), params)
            return [dict(row) for row in result.mappings().all()]
    return _fetch
