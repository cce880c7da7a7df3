"""Error Hierarchy — typed exceptions for failures at the infrastructure boundary.

Invariants:
    - Each LayeredAddError subclass fixes its code, category, severity and HTTP status
    - The services layer never raises or wraps these; it propagates whatever the fetch raised
    - Every error envelope (typed errors, validation, catch-all) comes from error_envelope()
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Call details attached to a fetch failure."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operand: int | None = None


def error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **details: object,
) -> dict:
    """Build the JSON body shared by every error response."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **details,
        },
    }


class LayeredAddError(Exception):
    """Base exception for all layered-add errors."""

    code = "LAYERED_ADD_ERROR"
    category = ErrorCategory.INTERNAL
    severity = ErrorSeverity.ERROR
    http_status = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        return error_envelope(
            self.code, self.message, self.category, self.severity,
            timestamp=self.context.timestamp.isoformat(),
            context={"operand": self.context.operand},
        )


class FetchError(LayeredAddError):
    """The stored value could not be obtained."""

    code = "FETCH_ERROR"
    category = ErrorCategory.EXTERNAL_API
    severity = ErrorSeverity.CRITICAL
    http_status = 503

    def __init__(
        self, message: str, source: str, context: ErrorContext | None = None,
    ):
        super().__init__(f"Fetch from {source} failed: {message}", context)
        self.source = source


class FetchTimeoutError(FetchError):
    """The stored value did not arrive before the deadline."""

    code = "FETCH_TIMEOUT"
    category = ErrorCategory.TIMEOUT
    http_status = 504

    def __init__(
        self, seconds: float, source: str = "stored_value",
        context: ErrorContext | None = None,
    ):
        super().__init__(f"no response within {seconds}s", source, context)
        self.seconds = seconds
