"""Error Hierarchy — typed, categorized exceptions for all Task API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope: top-level "msg" plus structured "error"
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskApiError base: FastAPI global handler catches all
    - "msg" kept at the top level of every error body; clients read it for display
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: int | None = None
    debug_info: dict[str, Any] | None = None


class TaskApiError(Exception):
    """Base exception for all Task API errors."""

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
            "msg": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "task_id": self.context.task_id,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidTaskDataError(TaskApiError):
    """Request carried no task payload."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid task data", "INVALID_TASK_DATA", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class TaskValidationError(TaskApiError):
    """A required task field is missing or blank."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"Incorrect task {field}. {field} is required",
            "TASK_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.field = field


class TaskNotFoundError(TaskApiError):
    """Requested task does not exist."""
    def __init__(self, task_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = task_id
        super().__init__(
            f"Task with ID {task_id} not found",
            "TASK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.task_id = task_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
