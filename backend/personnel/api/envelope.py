"""Response Envelope — {page, result} on success, {page, error} on store failure.

Invariants:
    - page identifies the operation as "<METHOD> <path>"
    - error is the store's message text, unchanged
    - Status code is always 200; failure is encoded in the body

Design Decisions:
    - Plain dicts over response models: result carries whatever columns the
      store returned (RETURNING *), FastAPI's jsonable_encoder serializes them
"""

import logging
from typing import Any

from personnel.core.errors import StoreError

logger = logging.getLogger(__name__)


def page_result(page: str, result: Any) -> dict:
    return {"page": page, "result": result}


def page_error(page: str, exc: StoreError) -> dict:
    """Log the failed store operation and build the error envelope."""
    logger.warning(
        f"Store error on {page}: {exc.message}",
        extra={"page": page, "error_code": exc.code},
    )
    return {"page": page, "error": exc.message}
