"""Error Hierarchy — typed, categorized exceptions for all wordcase failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are terminal: never retried, never partially applied
    - to_response() produces the REST envelope used by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WordCaseError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Conversion errors also subclass TypeError/ValueError so plain Python callers
      can catch them without importing this module
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
    style: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class WordCaseError(Exception):
    """Base exception for all wordcase errors."""

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
                    "style": self.context.style,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Conversion Errors (400-level) ──────────────────────────────

class NullOrUndefinedInputError(WordCaseError, TypeError):
    """Input is absent (None)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Input cannot be null or undefined.",
            "NULL_OR_UNDEFINED_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NotAStringError(WordCaseError, TypeError):
    """Input is present but not a str."""
    def __init__(self, received_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Input must be a string (got {received_type}).",
            "NOT_A_STRING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.received_type = received_type


class InvalidCharactersError(WordCaseError, ValueError):
    """Input holds characters outside the set allowed for the target casing."""
    def __init__(self, allowed: str, context: ErrorContext | None = None):
        super().__init__(
            f"Input contains invalid characters. Only {allowed} are allowed.",
            "INVALID_CHARACTERS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.allowed = allowed


class UnsupportedCasingError(WordCaseError, ValueError):
    """Requested casing style is not one of kebab, camel, dot."""
    def __init__(self, style: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.style = style
        super().__init__(
            f"Unsupported casing style '{style}'. Use one of: kebab, camel, dot.",
            "UNSUPPORTED_CASING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.style = style


class InputTooLongError(WordCaseError, ValueError):
    """Input exceeds the configured conversion limit."""
    def __init__(self, length: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Input is {length} characters long; the limit is {limit}.",
            "INPUT_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.length = length
        self.limit = limit


# ─── Resource Errors ────────────────────────────────────────────

class InvalidIdentifierError(WordCaseError):
    """Path identifier is not well-formed."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"Invalid {resource_type.lower()} ID",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class ResourceNotFoundError(WordCaseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WordCaseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
