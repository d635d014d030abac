"""Error Handlers — global exception handlers for the employee API.

Invariants:
    - EmployeeApiError → structured JSON with error code, message, severity, http_status
    - UpstreamRateLimitedError additionally sets Retry-After when upstream sent one
    - RequestValidationError → field-level error details (400)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (EmployeeApiError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from employee_api.core.errors import (
    EmployeeApiError,
    ErrorSeverity,
    UpstreamRateLimitedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register upstream/domain error handler."""

    @app.exception_handler(EmployeeApiError)
    async def employee_api_error_handler(request: Request, exc: EmployeeApiError):
        """Handle all upstream and domain errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"EmployeeApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=_retry_after_headers(exc),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _retry_after_headers(exc: EmployeeApiError) -> dict[str, str] | None:
    if not isinstance(exc, UpstreamRateLimitedError):
        return None
    seconds = exc.context.retry_after_seconds
    if seconds is None:
        return None
    return {"Retry-After": str(seconds)}


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
