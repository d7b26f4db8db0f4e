"""Error Handlers — global exception handlers for the Personnel API.

Invariants:
    - PersonnelError → its own http_status with a structured error body
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Every body carries "page" ("<METHOD> <path>") like the data envelopes

Design Decisions:
    - Store errors raised inside data routes never reach these handlers: routes
      answer them with the {page, error} envelope and status 200
    - Handlers here cover failures outside a data operation (bad JSON body,
      pool not initialized, bugs), which keep real status codes
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from personnel.core.errors import PersonnelError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(PersonnelError, personnel_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


def _page(request: Request) -> str:
    return f"{request.method} {request.url.path}"


async def personnel_error_handler(request: Request, exc: PersonnelError):
    page = _page(request)
    exc.context.page = page
    logger.error(
        f"PersonnelError on {page}: {exc.message}",
        extra={"error_code": exc.code, "page": page},
    )
    return JSONResponse(
        status_code=exc.http_status,
        content={"page": page, **exc.to_response()},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    page = _page(request)
    logger.warning(
        f"Unparseable request body on {page}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "page": page},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"page": page, **_validation_error_body(exc)},
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    page = _page(request)
    logger.error(
        f"Unhandled exception on {page}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "page": page},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "page": page,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _validation_error_body(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
