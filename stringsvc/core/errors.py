"""Error Hierarchy — typed, categorized exceptions for all string service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business-rule errors are recovered at the endpoint boundary (in-band `err`)
    - Transport errors (decode) surface as HTTP error responses via to_response()
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StringServiceError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging framework
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
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log correlation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    path: str | None = None


class StringServiceError(Exception):
    """Base exception for all string service errors."""

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
                    "method": self.context.method,
                    "path": self.context.path,
                },
            }
        }


# ─── Business Rule Errors (recovered in-band) ───────────────────

class EmptyInputError(StringServiceError):
    """Operation called with an empty string."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Empty string", "EMPTY_INPUT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Transport Errors (HTTP-level) ──────────────────────────────

class DecodeError(StringServiceError):
    """Request body could not be decoded into the typed request."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed request body: {message}",
            "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
