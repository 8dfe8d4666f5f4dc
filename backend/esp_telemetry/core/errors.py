"""Error Hierarchy — typed, categorized exceptions for every telemetry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store/asset errors (500-level) are critical
    - to_response() produces the REST envelope used by every error path
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TelemetryError base: one global handler catches all
    - ErrorContext as dataclass: request-scoped observability without coupling to logging
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
    AUTHENTICATION = "authentication"
    PROTOCOL = "protocol"
    DATABASE = "database"
    ASSET = "asset"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    field: str | None = None


class TelemetryError(Exception):
    """Base exception for all telemetry service errors."""

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
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(TelemetryError):
    """Request body is not valid JSON or misses required numeric fields."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.field = field


class AuthError(TelemetryError):
    """Shared secret header did not match the configured secret."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Forbidden", "AUTH_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 403,
        )


class MethodError(TelemetryError):
    """HTTP verb not supported by the endpoint."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Method {method} not allowed on {path}",
            "METHOD_NOT_ALLOWED", ErrorCategory.PROTOCOL,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(TelemetryError):
    """Persistence layer failed (connectivity, constraint, driver)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class AssetError(TelemetryError):
    """Static asset could not be read from disk."""
    def __init__(self, asset: str, context: ErrorContext | None = None):
        super().__init__(
            f"Static asset '{asset}' is unavailable",
            "ASSET_UNAVAILABLE", ErrorCategory.ASSET,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.asset = asset
