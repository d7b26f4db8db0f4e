"""Employee Store — list employees and the two-step dependent insert.

Invariants:
    - Person is always inserted before the Employee that references it
    - First error wins: a failed Person insert stops the sequence before the
      Employee insert is attempted
    - Store messages pass through unchanged (no new error kinds)
    - Non-atomic by default: if the Employee insert fails, the Person row
      inserted in step one stays persisted

Design Decisions:
    - atomic=True wraps both inserts in QueryExecutor.transaction() so a failed
      Employee insert also discards the Person row (opt-in via settings)
"""

import logging
from typing import Any

from personnel.core.errors import StoreError
from personnel.infrastructure.query_executor import QueryExecutor, text_param
from personnel.services.person_store import insert_person

logger = logging.getLogger(__name__)

SELECT_EMPLOYEES = (
    "SELECT person.id, person.name, employee.salary "
    "FROM person "
    "INNER JOIN employee ON person.id = employee.person_id"
)
INSERT_EMPLOYEE = (
    "INSERT INTO employee (person_id, salary) "
    "VALUES (CAST(:person_id AS INTEGER), CAST(:salary AS MONEY)) "
    "RETURNING *"
)


async def list_employees(executor: QueryExecutor) -> list[dict]:
    """One row per Employee joined to its Person: id, name, salary."""
    return await executor.query(SELECT_EMPLOYEES)


async def create_employee(
    executor: QueryExecutor,
    name: Any,
    salary: Any,
    atomic: bool = False,
) -> dict:
    """Insert a Person, then an Employee referencing it; return the Employee row."""
    if atomic:
        async with executor.transaction():
            return await _insert_person_then_employee(executor, name, salary)
    return await _insert_person_then_employee(executor, name, salary)


async def _insert_person_then_employee(
    executor: QueryExecutor, name: Any, salary: Any,
) -> dict:
    person = await insert_person(executor, name)
    person_id = person["id"]
    logger.info("Person inserted for employee", extra={"person_id": person_id})

    try:
        employee = await executor.query_one(
            INSERT_EMPLOYEE, {"person_id": person_id, "salary": text_param(salary)},
        )
    except StoreError:
        if not executor.in_transaction:
            logger.warning(
                "Employee insert failed; person row left without employee",
                extra={"person_id": person_id},
            )
        raise

    logger.info(
        "Employee inserted",
        extra={"person_id": person_id, "employee_id": employee["id"]},
    )
    return employee

