"""Person Store — list and insert Person rows.

Invariants:
    - insert_person returns the inserted row exactly as the store returns it
    - Duplicate names are rejected by the store's unique constraint, not pre-checked
    - name is bound as text whatever its JSON type; NULL reaches the NOT NULL constraint
"""

from typing import Any

from personnel.infrastructure.query_executor import QueryExecutor, text_param

SELECT_PERSONS = "SELECT * FROM person"
INSERT_PERSON = "INSERT INTO person (name) VALUES (CAST(:name AS TEXT)) RETURNING *"


async def list_persons(executor: QueryExecutor) -> list[dict]:
    return await executor.query(SELECT_PERSONS)


async def insert_person(executor: QueryExecutor, name: Any) -> dict:
    """Insert one Person and return the new row (including its generated id)."""
    return await executor.query_one(INSERT_PERSON, {"name": text_param(name)})
