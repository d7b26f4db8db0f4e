"""Employee Routes — list employees and create an employee with its Person.

Invariants:
    - Both endpoints answer 200 with {page, result} or {page, error}
    - POST inserts the Person first, then the Employee (see services/employee_store.py)
    - Whether the two inserts share one transaction is decided by settings,
      never by the request
"""

from fastapi import APIRouter, Depends

from personnel.api.envelope import page_error, page_result
from personnel.config import Settings, get_settings
from personnel.core.errors import StoreError
from personnel.infrastructure.query_executor import QueryExecutor, get_executor
from personnel.schemas.employee import EmployeeCreate
from personnel.services.employee_store import create_employee, list_employees

router = APIRouter(prefix="/employee", tags=["employee"])


@router.get("")
async def get_employees(executor: QueryExecutor = Depends(get_executor)):
    """List employees joined to their Person: id, name, salary."""
    page = "GET /employee"
    try:
        return page_result(page, await list_employees(executor))
    except StoreError as e:
        return page_error(page, e)


@router.post("")
async def post_employee(
    body: EmployeeCreate | None = None,
    executor: QueryExecutor = Depends(get_executor),
    settings: Settings = Depends(get_settings),
):
    """Create a Person and its Employee; return the Employee row."""
    page = "POST /employee"
    if body is None:
        body = EmployeeCreate()
    try:
        employee = await create_employee(
            executor, body.name, body.salary,
            atomic=settings.employee_create_atomic,
        )
        return page_result(page, employee)
    except StoreError as e:
        return page_error(page, e)
