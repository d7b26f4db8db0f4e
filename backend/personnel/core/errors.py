"""Error Hierarchy — typed, categorized exceptions for all Personnel API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - StoreError carries the store's message text unchanged (no rewording)
    - to_response() produces the REST error envelope used by global handlers

Design Decisions:
    - Single hierarchy with PersonnelError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - One data-operation error (StoreError): constraint violations, connectivity
      failures and malformed input reach the client the same way
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    page: str | None = None
    statement: str | None = None


class PersonnelError(Exception):
    """Base exception for all Personnel API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "page": self.context.page,
                },
            }
        }


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreError(PersonnelError):
    """Store operation failed. Message is the store's own text."""
    def __init__(
        self, message: str, statement: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.statement = statement
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, ctx, 503,
        )
        self.statement = statement


class DatabaseNotInitializedError(PersonnelError):
    """Connection provider used before the application lifespan created it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database not initialized",
            "DATABASE_NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
