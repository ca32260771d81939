"""Error Hierarchy — typed, categorized exceptions for all clinic inventory failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Access errors (400-level) are expected outcomes; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by every client
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ClinicError base: FastAPI global handler catches all
    - The code/category pair is the tag transports switch on, not the Python class,
      so a non-HTTP binding can map UNAUTHORIZED without importing this module's types
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


DEFAULT_UNAUTHORIZED_MESSAGE = "Access denied. Admin role required."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    required_role: str | None = None
    path: str | None = None


class ClinicError(Exception):
    """Base exception for all clinic inventory errors."""

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
                    "user_id": self.context.user_id,
                    "required_role": self.context.required_role,
                    "path": self.context.path,
                },
            }
        }


# ─── Access Errors (400-level) ──────────────────────────────────

class UnauthorizedError(ClinicError):
    """Caller is unauthenticated or lacks the role a protected operation requires."""
    def __init__(
        self,
        message: str = DEFAULT_UNAUTHORIZED_MESSAGE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ClinicError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
