"""Error Hierarchy — typed, categorized exceptions for all locale-catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; catalog errors (503) are critical
    - to_response() produces the REST envelope; debug_info surfaces as "details"
    - Catalog errors (503) carry retry_after for the Retry-After header
    - No provider internals leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LocalizationError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Lookup misses (language, rating, string) are NOT errors: resolvers return
      None / sentinel / key instead
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
    PRECONDITION = "precondition"
    PROVIDER = "provider"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_kind: str | None = None
    country_code: str | None = None
    culture: str | None = None
    debug_info: dict[str, Any] | None = None


class LocalizationError(Exception):
    """Base exception for all locale-catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        retry_after: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.retry_after = retry_after

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
                    "record_kind": self.context.record_kind,
                    "country_code": self.context.country_code,
                    "culture": self.context.culture,
                },
                "details": dict(self.context.debug_info or {}),
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidRatingError(LocalizationError):
    """Rating input is blank."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Rating value must be a non-empty string",
            "INVALID_RATING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(LocalizationError):
    """Requested resource does not exist (HTTP boundary only)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Catalog Errors (503) ───────────────────────────────────────

# Seconds a client should wait before retrying while the catalog is unavailable
CATALOG_RETRY_AFTER_SECONDS = 5


class CatalogNotLoadedError(LocalizationError):
    """A read was attempted before load_all() completed."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {**(ctx.debug_info or {}), "operation": operation}
        super().__init__(
            f"Catalog not loaded: await load_all() before calling {operation}",
            "CATALOG_NOT_LOADED", ErrorCategory.PRECONDITION,
            ErrorSeverity.CRITICAL, ctx, 503, CATALOG_RETRY_AFTER_SECONDS,
        )
        self.operation = operation


class RecordProviderError(LocalizationError):
    """The record provider failed to supply (valid) reference data."""
    def __init__(
        self, message: str, record_kind: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.record_kind = record_kind
        super().__init__(
            f"Loading {record_kind} records failed: {message}",
            "RECORD_PROVIDER_FAILURE", ErrorCategory.PROVIDER,
            ErrorSeverity.CRITICAL, ctx, 503, CATALOG_RETRY_AFTER_SECONDS,
        )
        self.record_kind = record_kind
