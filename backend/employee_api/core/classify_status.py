"""Status Classification — maps upstream HTTP status codes onto the error taxonomy.

Invariants:
    - classify_status is PURE: returns an error instance, never raises
    - 2xx → None; 404 → NotFound; 429 → RateLimited; other 4xx → ClientError;
      5xx → ServerError
    - Every non-2xx status maps to exactly one class

Design Decisions:
    - Returns instead of raising: the retry loop inspects the error before deciding
      whether to sleep or raise (ADR: policy decoupled from transport)
    - 1xx/3xx treated as ClientError: the upstream contract has no redirects
"""

from employee_api.core.errors import (
    ErrorContext,
    UpstreamClientError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServerError,
)


NOT_FOUND: int = 404
TOO_MANY_REQUESTS: int = 429


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def parse_retry_after(value: str | None) -> int | None:
    """Retry-After in delta-seconds form. HTTP-date form is ignored."""
    if not value:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdecimal()):
        return None
    return int(value)


def classify_status(
    status_code: int,
    *,
    employee_id: str | None = None,
    retry_after: str | None = None,
    context: ErrorContext | None = None,
) -> UpstreamError | None:
    """Classify an upstream response status. None means success."""
    if is_success(status_code):
        return None
    if status_code == NOT_FOUND:
        return UpstreamNotFoundError(employee_id, context=context)
    if status_code == TOO_MANY_REQUESTS:
        return UpstreamRateLimitedError(
            retry_after_seconds=parse_retry_after(retry_after),
            context=context,
        )
    if status_code >= 500:
        return UpstreamServerError(status_code, context=context)
    return UpstreamClientError(status_code, context=context)
