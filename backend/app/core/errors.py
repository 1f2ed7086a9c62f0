"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the error envelope: {"success": false, "error": message}
    - StoreError never exposes its cause in the client-facing message

Design Decisions:
    - Single hierarchy with AppError base: one FastAPI handler renders all of them
    - StoreError keeps the original exception on .cause for logging only
"""

from enum import Enum

from app.core.domain_types import FieldError


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
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


class AppError(Exception):
    """Base exception for all EdgeCRUD errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the error envelope."""
        return {"success": False, "error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(AppError):
    """Input failed schema validation."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            "; ".join(e.message for e in errors) or "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = list(errors)


class ResourceNotFoundError(AppError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: int | None = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UniqueConstraintViolation(AppError):
    """Insert collided with a unique column."""
    def __init__(self, field: str, resource: str = "user"):
        super().__init__(
            f"A {resource} with this {field} already exists",
            "UNIQUE_CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )
        self.field = field
        self.resource = resource


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(AppError):
    """Persistence failed for a reason other than a unique collision."""
    def __init__(self, cause: Exception, operation: str):
        super().__init__(
            "Database operation failed",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.cause = cause
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation} failed: {self.cause}"


class OperationFailedError(AppError):
    """Client-facing wrapper for a StoreError raised inside a handler."""
    def __init__(self, verb: str, resource: str):
        super().__init__(
            f"Failed to {verb} {resource}",
            "OPERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.verb = verb
        self.resource = resource
