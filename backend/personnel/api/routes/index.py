"""Index — the root page."""

from fastapi import APIRouter

router = APIRouter(tags=["index"])


@router.get("/")
async def index():
    return {"page": "index"}
