"""Error Hierarchy — typed, categorized exceptions for every upstream and domain failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream failures fall into exactly one of NotFound, ClientError, ServerError,
      RateLimited, Transport: all subclasses of UpstreamError
    - Domain failures (EmptyDataset, DeletionRejected) are never UpstreamError
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with EmployeeApiError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - http_status lives on the error so the boundary stays a table lookup
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    RATE_LIMITED = "rate_limited"
    TRANSPORT = "transport"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    operation: str | None = None
    upstream_status: int | None = None
    attempts: int | None = None
    retry_after_seconds: int | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeApiError(Exception):
    """Base exception for all employee API errors."""

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
                    "employee_id": self.context.employee_id,
                    "operation": self.context.operation,
                    "upstream_status": self.context.upstream_status,
                    "attempts": self.context.attempts,
                    "retry_after_seconds": self.context.retry_after_seconds,
                },
            }
        }


# ─── Upstream Errors (transport-level) ──────────────────────────

class UpstreamError(EmployeeApiError):
    """Failure reported by, or while talking to, the upstream employee service."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 502,
        status_code: int | None = None,
    ):
        ctx = context or ErrorContext()
        if status_code is not None:
            ctx.upstream_status = status_code
        super().__init__(message, code, category, severity, ctx, http_status)
        self.status_code = status_code


class UpstreamNotFoundError(UpstreamError):
    """Upstream reported absence (404)."""
    def __init__(
        self, employee_id: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if employee_id is not None:
            ctx.employee_id = employee_id
        message = (
            f"Employee '{employee_id}' not found"
            if employee_id is not None else "Employee not found"
        )
        super().__init__(
            message, "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404, status_code=404,
        )


class UpstreamClientError(UpstreamError):
    """Upstream rejected the request (4xx other than 404 and 429)."""
    def __init__(self, status_code: int, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream rejected request with status {status_code}",
            "UPSTREAM_CLIENT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502, status_code=status_code,
        )


class UpstreamServerError(UpstreamError):
    """Upstream failed internally (5xx)."""
    def __init__(self, status_code: int, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream server error with status {status_code}",
            "UPSTREAM_SERVER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502, status_code=status_code,
        )


class UpstreamRateLimitedError(UpstreamError):
    """Upstream throttled the request (429). The only retryable class."""
    def __init__(
        self,
        message: str = "Upstream rate limit exceeded",
        retry_after_seconds: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if retry_after_seconds is not None:
            ctx.retry_after_seconds = retry_after_seconds
        super().__init__(
            message, "UPSTREAM_RATE_LIMITED", ErrorCategory.RATE_LIMITED,
            ErrorSeverity.WARNING, ctx, 503, status_code=429,
        )


class UpstreamTransportError(UpstreamError):
    """Network failure, timeout, or a success body that could not be parsed."""
    def __init__(self, message: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream transport error ({reason}): {message}",
            "UPSTREAM_TRANSPORT_ERROR", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.reason = reason


# ─── Domain Errors ──────────────────────────────────────────────

class EmptyDatasetError(EmployeeApiError):
    """Aggregate requested over an empty employee list."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"No employees available to compute {operation}",
            "EMPTY_DATASET", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 404,
        )


class DeletionRejectedError(EmployeeApiError):
    """Employee existed but upstream declined to delete it."""
    def __init__(
        self, employee_id: str, name: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Upstream rejected deletion of employee '{employee_id}' ({name})",
            "DELETION_REJECTED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.name = name
