"""Query Executor — verifies row-sets, error mapping, and transaction grouping.

Invariants:
    - SELECT returns list of dicts keyed by column name
    - Statements outside transaction() are committed one by one
    - A failed statement raises StoreError with the store's message, nothing else
    - transaction() rolls back every statement in the block on error
"""

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from personnel.core.errors import StoreError
from personnel.infrastructure.database import store_message
from personnel.infrastructure.query_executor import QueryExecutor

INSERT_PERSON = "INSERT INTO person (name) VALUES (:name) RETURNING *"


async def test_select_on_empty_table_returns_empty_list(test_db):
    executor = QueryExecutor(test_db)
    assert await executor.query("SELECT * FROM person") == []


async def test_insert_returning_yields_row_dict(test_db):
    executor = QueryExecutor(test_db)
    rows = await executor.query(INSERT_PERSON, {"name": "Ada"})
    assert len(rows) == 1
    assert rows[0]["name"] == "Ada"
    assert isinstance(rows[0]["id"], int)


async def test_query_one_returns_first_row_or_none(test_db):
    executor = QueryExecutor(test_db)
    assert await executor.query_one("SELECT * FROM person") is None
    row = await executor.query_one(INSERT_PERSON, {"name": "Grace"})
    assert row["name"] == "Grace"


async def test_statement_without_rows_returns_empty_list(test_db, fetch_rows):
    executor = QueryExecutor(test_db)
    rows = await executor.query(
        "INSERT INTO person (name) VALUES (:name)", {"name": "Linus"},
    )
    assert rows == []
    assert len(await fetch_rows("SELECT * FROM person")) == 1


async def test_insert_is_committed_immediately(test_db, fetch_rows):
    executor = QueryExecutor(test_db)
    await executor.query(INSERT_PERSON, {"name": "Ada"})
    rows = await fetch_rows("SELECT name FROM person")
    assert rows == [{"name": "Ada"}]


async def test_unique_violation_raises_store_error_with_store_message(test_db):
    executor = QueryExecutor(test_db)
    await executor.query(INSERT_PERSON, {"name": "Ada"})
    with pytest.raises(StoreError) as exc_info:
        await executor.query(INSERT_PERSON, {"name": "Ada"})
    assert "UNIQUE constraint failed: person.name" in exc_info.value.message
    assert exc_info.value.statement == INSERT_PERSON


async def test_session_usable_after_failed_statement(test_db):
    executor = QueryExecutor(test_db)
    with pytest.raises(StoreError):
        await executor.query(INSERT_PERSON, {"name": None})
    rows = await executor.query(INSERT_PERSON, {"name": "Ada"})
    assert rows[0]["name"] == "Ada"


async def test_syntax_error_surfaces_as_store_error(test_db):
    executor = QueryExecutor(test_db)
    with pytest.raises(StoreError) as exc_info:
        await executor.query("SELEKT 1")
    assert "syntax error" in exc_info.value.message


async def test_transaction_commits_all_statements(test_db, fetch_rows):
    executor = QueryExecutor(test_db)
    async with executor.transaction():
        await executor.query(INSERT_PERSON, {"name": "Ada"})
        await executor.query(INSERT_PERSON, {"name": "Grace"})
    rows = await fetch_rows("SELECT name FROM person ORDER BY id")
    assert [r["name"] for r in rows] == ["Ada", "Grace"]
    assert executor.in_transaction is False


async def test_transaction_rolls_back_on_store_error(test_db, fetch_rows):
    executor = QueryExecutor(test_db)
    with pytest.raises(StoreError):
        async with executor.transaction():
            await executor.query(INSERT_PERSON, {"name": "Ada"})
            await executor.query(INSERT_PERSON, {"name": "Ada"})
    assert await fetch_rows("SELECT * FROM person") == []


async def test_transaction_rolls_back_on_any_exception(test_db, fetch_rows):
    executor = QueryExecutor(test_db)
    with pytest.raises(RuntimeError):
        async with executor.transaction():
            await executor.query(INSERT_PERSON, {"name": "Ada"})
            raise RuntimeError("boom")
    assert await fetch_rows("SELECT * FROM person") == []
    assert executor.in_transaction is False


def test_store_message_prefers_native_driver_exception():
    native = ValueError('duplicate key value violates unique constraint "person_name_key"')
    adapted = Exception("adapter text")
    adapted.__cause__ = native
    exc = IntegrityError("INSERT ...", {}, adapted)
    assert store_message(exc) == (
        'duplicate key value violates unique constraint "person_name_key"'
    )


def test_store_message_uses_dbapi_exception_without_cause():
    exc = IntegrityError("INSERT ...", {}, Exception("NOT NULL constraint failed"))
    assert store_message(exc) == "NOT NULL constraint failed"


class _RefusingSession:
    """Session stand-in whose connection attempt is refused."""

    def __init__(self, exc):
        self._exc = exc
        self.rolled_back = False

    async def execute(self, statement, params=None):
        raise self._exc

    async def rollback(self):
        self.rolled_back = True


@pytest.mark.parametrize(
    "exc",
    [
        ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 1)"),
        asyncio.TimeoutError(),
    ],
)
async def test_unreachable_store_raises_store_error_without_rollback(exc):
    session = _RefusingSession(exc)
    executor = QueryExecutor(session)

    with pytest.raises(StoreError) as exc_info:
        await executor.query("SELECT * FROM person")

    assert exc_info.value.message == str(exc)
    assert exc_info.value.statement == "SELECT * FROM person"
    assert session.rolled_back is False
