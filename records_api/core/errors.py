"""Error Hierarchy — typed, categorized exceptions for every Record API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-facing bodies are always {"error": <string>}
    - OperationError never exposes its cause to the client; the cause is logged only

Design Decisions:
    - Single hierarchy rooted at RecordApiError: one global handler catches all
    - ErrorContext as dataclass: carries collection/record_id for log lines without
      coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    OPERATION = "operation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for server-side logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    record_id: str | None = None


class RecordApiError(Exception):
    """Base exception for all Record API errors."""

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

    @property
    def public_message(self) -> str:
        """Message safe to return to the client."""
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.public_message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "collection": self.context.collection,
            "record_id": self.context.record_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(RecordApiError):
    """Client-supplied data failed a required-field check."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(RecordApiError):
    """Requested record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.record_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Operational Errors (500-level) ─────────────────────────────

class OperationError(RecordApiError):
    """Storage or server failure. Surfaced to clients as a generic 500."""

    PUBLIC_MESSAGE = "Server error"

    def __init__(
        self,
        message: str,
        operation: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "OPERATION_ERROR", ErrorCategory.OPERATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.cause = cause

    @property
    def public_message(self) -> str:
        return self.PUBLIC_MESSAGE
