"""Query Executor — runs one parameterized SQL statement against the request's session.

Invariants:
    - query() returns a row-set: list of dicts (column name -> value), [] when no rows
    - Outside transaction() every statement is committed on its own
    - Any SQLAlchemy failure rolls the session back and surfaces as StoreError
      carrying the driver's own message text
    - An unreachable store (OSError, timeout while connecting) also surfaces as
      StoreError; there is no connection to roll back
    - No retries

Design Decisions:
    - Raw text() statements over ORM queries: handlers issue straight-line SQL and
      serialize whatever columns the store returns (RETURNING *)
    - Message comes from database.store_message: the DB-API exception (or the
      native driver exception it wraps), never SQLAlchemy's decorated str()
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from personnel.core.errors import StoreError
from personnel.infrastructure.database import get_db, store_message

logger = logging.getLogger(__name__)


class QueryExecutor:
    """Executes parameterized statements on one session and returns row-sets."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._in_transaction = False

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    async def query(
        self, sql: str, params: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        try:
            result = await self._session.execute(text(sql), dict(params or {}))
            rows = (
                [dict(row) for row in result.mappings().all()]
                if result.returns_rows else []
            )
            if not self._in_transaction:
                await self._session.commit()
            return rows
        except SQLAlchemyError as e:
            await self._session.rollback()
            message = store_message(e)
            logger.debug(f"Statement failed: {message}")
            raise StoreError(message, statement=sql) from e
        except (OSError, asyncio.TimeoutError) as e:
            logger.debug(f"Store unreachable: {e}")
            raise StoreError(str(e), statement=sql) from e

    async def query_one(
        self, sql: str, params: Mapping[str, Any] | None = None,
    ) -> dict | None:
        rows = await self.query(sql, params)
        return rows[0] if rows else None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["QueryExecutor"]:
        """Group several query() calls into one commit; any error rolls all back."""
        self._in_transaction = True
        try:
            yield self
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        finally:
            self._in_transaction = False


async def get_executor(db: AsyncSession = Depends(get_db)) -> QueryExecutor:
    """FastAPI dependency: a QueryExecutor over the request's session."""
    return QueryExecutor(db)


def text_param(value: Any) -> str | None:
    """Bind a body value as text; the store parses it and rejects what it must."""
    return None if value is None else str(value)
