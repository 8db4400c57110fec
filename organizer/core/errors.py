"""Error Hierarchy — typed, categorized exceptions for all store failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError is raised before any store interaction
    - StoreError keeps the driver exception as `original` (and __cause__)
    - Not-found is never an error: reads return [] / None, writes succeed silently

Design Decisions:
    - Single hierarchy with OrganizerError base: callers catch one type
    - ConstraintViolationError subclasses StoreError so callers can separate
      integrity failures from transient ones without inspecting driver types
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    DATABASE = "database"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    uid: str | None = None


class OrganizerError(Exception):
    """Base exception for all organizer store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to a serializable error envelope for the calling layer."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                    "uid": self.context.uid,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(OrganizerError):
    """Input rejected before reaching the store."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreError(OrganizerError):
    """Backing store operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        original: BaseException | None = None,
        context: ErrorContext | None = None,
        code: str = "STORE_ERROR",
        category: ErrorCategory = ErrorCategory.DATABASE,
    ):
        super().__init__(
            f"Store {operation} failed: {message}",
            code, category, ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
        self.original = original


class ConstraintViolationError(StoreError):
    """Integrity constraint rejected the write (e.g. duplicate uid)."""
    def __init__(
        self,
        message: str,
        operation: str,
        original: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, operation, original, context,
            code="CONSTRAINT_VIOLATION", category=ErrorCategory.CONFLICT,
        )
