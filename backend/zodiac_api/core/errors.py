"""Error Hierarchy - typed, categorized exceptions for every zodiac API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400) carry ALL rule violations, never just the first
    - Persistence errors (500) never leak file paths or OS messages to clients
    - to_response() produces the flat client envelope {"error": message, ...}

Design Decisions:
    - Single hierarchy with ZodiacError base: one global handler catches all
    - Unknown classification is a sentinel value, not an exception - it is
      returned by the classifier and only logged
"""

from enum import Enum


UNKNOWN_SIGN: str = "Unknown"
INTERNAL_ERROR_MESSAGE: str = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PERSISTENCE = "persistence"
    RATE_LIMIT = "rate_limit"
    INTERNAL = "internal"


class ZodiacError(Exception):
    """Base exception for all zodiac API errors."""

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
        """Convert to the client-facing error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(ZodiacError):
    """One or more input rules failed. All violations reported together."""
    def __init__(self, errors: list[str]):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"error": self.message, "details": self.errors}


class RateLimitExceededError(ZodiacError):
    """Client exceeded its request budget for the current window."""
    def __init__(self, retry_after_seconds: int):
        super().__init__(
            "Too many requests, please try again later.",
            "RATE_LIMITED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, 429,
        )
        self.retry_after_seconds = retry_after_seconds


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(ZodiacError):
    """Entry store read or write failed. Not retried."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
