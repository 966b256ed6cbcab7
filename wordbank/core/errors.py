"""Error Hierarchy — typed, categorized exceptions for all Wordbank failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - The CSV codec never raises: import/export failures are raised by the
      post-condition checks in core/word_list.py, not by the codec

Design Decisions:
    - Single hierarchy with WordbankError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    word_id: str | None = None
    record_count: int | None = None
    user_message: str | None = None


class WordbankError(Exception):
    """Base exception for all Wordbank errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "word_id": self.context.word_id,
                    "record_count": self.context.record_count,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(WordbankError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.word_id = ctx.word_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class NoWordsError(WordbankError):
    """A random word was requested from an empty list."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No words available to show. Add one first!",
            "NO_WORDS", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class NothingToExportError(WordbankError):
    """Export requested while the list is empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Nothing to export.",
            "NOTHING_TO_EXPORT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidImportError(WordbankError):
    """Imported content decoded to zero records."""
    def __init__(self, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_count = 0
        super().__init__(
            "Invalid CSV format. Expected lines of word,definition.",
            "INVALID_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class UnreadableFileError(WordbankError):
    """Uploaded content could not be read as text."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Error reading the file: {reason}",
            "UNREADABLE_FILE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WordbankError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
