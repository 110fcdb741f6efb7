"""Error Hierarchy: typed, categorized exceptions for every failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a user-facing message; storage errors
      (500-level) expose only a fixed public message, details go to the logs
    - to_response() produces the {success: false, error} envelope

Design Decisions:
    - Single hierarchy with ClubError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - SummaryServiceError is never rendered: the summary generator converts it
      into a degraded summary before it can reach a route
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
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    STORAGE = "storage"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    practice_id: str | None = None
    player_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ClubError(Exception):
    """Base exception for all practice-feedback errors."""

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
        """Message safe to show to API callers."""
        return self.message

    def to_response(self) -> dict:
        """Convert to the standard failure envelope."""
        return {"success": False, "error": self.public_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(ClubError):
    """Missing, blank or malformed input."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ResourceNotFoundError(ClubError):
    """Requested or referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ForbiddenError(ClubError):
    """Caller acted on an entity that belongs to another team."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


class ConflictError(ClubError):
    """Duplicate registration, submission or record key."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(ClubError):
    """Base for collection file failures. Details are logged, never returned."""

    PUBLIC_MESSAGE = "Failed to access stored data"

    def __init__(
        self, message: str, code: str, collection: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.collection = collection
        super().__init__(
            message, code, ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.collection = collection

    @property
    def public_message(self) -> str:
        return self.PUBLIC_MESSAGE


class StorageIOError(StorageError):
    """Collection file could not be read or written."""
    def __init__(
        self, message: str, collection: str, operation: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Storage {operation} failed for {collection}: {message}",
            "STORAGE_IO_ERROR", collection, context,
        )
        self.operation = operation


class StorageFormatError(StorageError):
    """Collection file exists but does not hold a JSON array of objects."""
    def __init__(
        self, message: str, collection: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Malformed data in {collection}: {message}",
            "STORAGE_FORMAT_ERROR", collection, context,
        )


class SummaryServiceError(ClubError):
    """Text-generation call failed (transport, SDK or reply shape)."""
    def __init__(
        self, message: str, api_error_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "SUMMARY_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.api_error_type = api_error_type
