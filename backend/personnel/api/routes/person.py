"""Person Routes — list and create Person rows.

Invariants:
    - Both endpoints answer 200 with {page, result} or {page, error}
    - No input validation: a missing body, a missing or duplicate name are all
      judged by the store
"""

from fastapi import APIRouter, Depends

from personnel.api.envelope import page_error, page_result
from personnel.core.errors import StoreError
from personnel.infrastructure.query_executor import QueryExecutor, get_executor
from personnel.schemas.person import PersonCreate
from personnel.services.person_store import insert_person, list_persons

router = APIRouter(prefix="/person", tags=["person"])


@router.get("")
async def get_persons(executor: QueryExecutor = Depends(get_executor)):
    """List every Person row."""
    page = "GET /person"
    try:
        return page_result(page, await list_persons(executor))
    except StoreError as e:
        return page_error(page, e)


@router.post("")
async def post_person(
    body: PersonCreate | None = None,
    executor: QueryExecutor = Depends(get_executor),
):
    """Insert one Person and return the inserted row."""
    page = "POST /person"
    if body is None:
        body = PersonCreate()
    try:
        return page_result(page, await insert_person(executor, body.name))
    except StoreError as e:
        return page_error(page, e)
