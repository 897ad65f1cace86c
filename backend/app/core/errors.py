"""Error Hierarchy — tagged, categorized failures for every request outcome that is not a success.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity), http_status
    - Request failures are exactly one of ValidationFailure, NotFoundFailure, ConflictFailure
    - ConflictFailure maps to 400 (referential protection), not 409
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DeliveryApiError base: FastAPI global handler catches all
    - FieldError as frozen dataclass: a multi-field rejection carries structured payload,
      flattened only at the boundary by core/normalize_error.py
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error (never returned to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: Any = None


@dataclass(frozen=True)
class FieldError:
    """One rejected field inside a multi-field validation failure."""
    field: str
    message: str


class DeliveryApiError(Exception):
    """Base exception for all Delivery API errors."""

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


# ─── Request Failures (400-level) ───────────────────────────────

class ValidationFailure(DeliveryApiError):
    """Malformed or missing input."""
    def __init__(
        self,
        message: str,
        field_errors: list[FieldError] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_errors = list(field_errors or [])

    @classmethod
    def from_field_errors(cls, field_errors: list[FieldError]) -> "ValidationFailure":
        """Build a single failure out of several rejected fields."""
        return cls(
            "; ".join(e.message for e in field_errors),
            field_errors=field_errors,
        )


class NotFoundFailure(DeliveryApiError):
    """Referenced entity does not exist."""
    def __init__(
        self, message: str, entity: str, entity_id: Any = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.entity_id = entity_id
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.entity = entity


class ConflictFailure(DeliveryApiError):
    """Entity is in use or already exists."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DeliveryApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
