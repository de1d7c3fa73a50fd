"""Error Hierarchy — typed, categorized exceptions for all Geometry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GeometryError base: FastAPI global handler catches all
    - DomainValidationError groups everything a route maps to 400 when raised below it
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
    BAD_REQUEST = "bad_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """When and where a failure happened; echoed under "context" in the envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: str | None = None
    operation: str | None = None


class GeometryError(Exception):
    """Base exception for all Geometry errors."""

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
                    "entity_id": self.context.entity_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class BadRequestError(GeometryError):
    """Request shape is unusable (absent body, mismatched identifiers)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.WARNING, context, 400,
        )


class DomainValidationError(GeometryError):
    """Base for validation failures raised by entities, mappers and repositories."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DimensionValidationError(DomainValidationError):
    """A geometric dimension is not strictly positive."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field} must be greater than 0.", "VALIDATION_ERROR", context,
        )
        self.field = field


class NullArgumentError(DomainValidationError):
    """A required argument was None."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"Value cannot be null. (Parameter '{argument}')",
            "NULL_ARGUMENT", context,
        )
        self.argument = argument


class ResourceNotFoundError(GeometryError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with Id {resource_id} was not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GeometryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class OperationFailedError(GeometryError):
    """Unanticipated failure while serving a request. Message is generic."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
