"""Resilient Upstream Client — talks to the employee service with retry and error mapping.

Invariants:
    - Rate limits (429): fixed-delay retry per RetryPolicy (default 5 retries x 5s)
    - Every other failure (404, other 4xx, 5xx, network, timeout) surfaces immediately
    - All failures mapped to UpstreamError subclasses (core/errors.py)
    - Success bodies unwrapped from `{data, status}`; unparseable bodies → UpstreamTransportError
    - One shared httpx.AsyncClient; no locks; a retry sleep suspends only its own request

Design Decisions:
    - Wrapper over raw httpx: isolates retry logic from the orchestrator (ADR: single responsibility)
    - Retry decision delegated to core.retry_policy; this module only sleeps and re-sends
    - sleep injectable: tests script 429 sequences without waiting
    - Request URLs logged by an httpx request event hook (one line per attempt)
    - Upstream delete is keyed by name, sent as a JSON body on DELETE
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from employee_api.config import Settings
from employee_api.core.classify_status import classify_status
from employee_api.core.errors import (
    ErrorContext,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamTransportError,
)
from employee_api.core.retry_policy import RetryPolicy
from employee_api.core.upstream_protocols import NewEmployeeLike
from employee_api.schemas.employee import EmployeeRecord
from employee_api.schemas.upstream import (
    DeleteByNameRequest,
    DeleteEnvelope,
    EmployeeEnvelope,
    EmployeeListEnvelope,
)

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)
Sleep = Callable[[float], Awaitable[None]]


class ResilientEmployeeClient:
    """Upstream employee API client with rate-limit retry and error classification."""

    def __init__(
        self,
        base_url: str,
        *,
        retry_policy: RetryPolicy | None = None,
        timeout_seconds: float = 10.0,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=timeout_seconds,
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections,
            ),
        )
        hooks = self.client.event_hooks
        hooks["request"].append(_log_request)
        self.client.event_hooks = hooks

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "ResilientEmployeeClient":
        return cls(
            settings.upstream_base_url,
            retry_policy=RetryPolicy(
                max_retries=settings.upstream_max_retries,
                delay_seconds=settings.upstream_retry_delay_seconds,
            ),
            timeout_seconds=settings.upstream_timeout_seconds,
            max_connections=settings.upstream_max_connections,
            max_keepalive_connections=settings.upstream_max_keepalive_connections,
            **kwargs,
        )

    # ─── Operations ─────────────────────────────────────────────

    async def list_all(self) -> list[EmployeeRecord]:
        """All employees, in upstream order."""
        response = await self._send("GET", operation="list_all")
        return self._parse(response, EmployeeListEnvelope, "list_all").data

    async def get_by_id(self, employee_id: str) -> EmployeeRecord:
        """Single employee. Raises UpstreamNotFoundError on 404."""
        response = await self._send(
            "GET", f"/{quote(employee_id, safe='')}",
            operation="get_by_id", employee_id=employee_id,
        )
        return self._parse(response, EmployeeEnvelope, "get_by_id").data

    async def create(self, request: NewEmployeeLike) -> EmployeeRecord:
        """Create an employee; upstream assigns the id."""
        body = {
            "name": request.name,
            "salary": request.salary,
            "age": request.age,
            "title": request.title,
            "email": request.email,
        }
        response = await self._send("POST", json=body, operation="create")
        return self._parse(response, EmployeeEnvelope, "create").data

    async def delete_by_name(self, name: str) -> bool:
        """Delete by exact name. Returns the upstream success flag."""
        body = DeleteByNameRequest(name=name).model_dump()
        response = await self._send("DELETE", json=body, operation="delete_by_name")
        return self._parse(response, DeleteEnvelope, "delete_by_name").succeeded

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    # ─── Transport ──────────────────────────────────────────────

    async def _send(
        self,
        method: str,
        path: str = "",
        *,
        json: dict | None = None,
        operation: str,
        employee_id: str | None = None,
    ) -> httpx.Response:
        """Issue a request, retrying rate-limited responses per policy."""
        url = f"{self.base_url}{path}"
        attempt = 0
        while True:
            response = await self._request(method, url, json, operation, employee_id)
            context = ErrorContext(
                employee_id=employee_id, operation=operation, attempts=attempt + 1,
            )
            error = classify_status(
                response.status_code,
                employee_id=employee_id,
                retry_after=response.headers.get("retry-after"),
                context=context,
            )
            if error is None:
                self._log_success(operation, response, attempt)
                return response

            decision = self.retry_policy.decide(error, attempt)
            if decision.should_retry:
                logger.warning(
                    f"Upstream rate limit hit on {operation}, retry after "
                    f"{decision.delay_seconds}s (attempt {attempt + 1})",
                    extra={
                        "operation": operation,
                        "attempt": attempt + 1,
                        "delay_seconds": decision.delay_seconds,
                        "status_code": response.status_code,
                    },
                )
                await self._sleep(decision.delay_seconds)
                attempt += 1
                continue

            if isinstance(error, UpstreamRateLimitedError):
                error = UpstreamRateLimitedError(
                    f"Upstream rate limit exceeded after {attempt + 1} attempts",
                    retry_after_seconds=context.retry_after_seconds,
                    context=context,
                )
            log = logger.warning if isinstance(error, UpstreamNotFoundError) else logger.error
            log(
                f"Upstream {operation} failed: {error.message}",
                extra={
                    "operation": operation,
                    "employee_id": employee_id,
                    "status_code": response.status_code,
                    "error_code": error.code,
                    "attempt": attempt + 1,
                },
            )
            raise error

    async def _request(
        self,
        method: str,
        url: str,
        json: dict | None,
        operation: str,
        employee_id: str | None,
    ) -> httpx.Response:
        """Single HTTP exchange. Network failures are never retried."""
        context = ErrorContext(employee_id=employee_id, operation=operation)
        try:
            return await self.client.request(method, url, json=json)
        except httpx.TimeoutException as e:
            raise UpstreamTransportError(
                str(e) or "request timed out", "timeout", context=context,
            ) from e
        except httpx.RequestError as e:
            raise UpstreamTransportError(
                str(e) or type(e).__name__, "connection_error", context=context,
            ) from e

    def _parse(
        self, response: httpx.Response, envelope: type[EnvelopeT], operation: str,
    ) -> EnvelopeT:
        """Unwrap a success body; anything unparseable is a transport error."""
        try:
            return envelope.model_validate_json(response.content)
        except ValidationError as e:
            raise UpstreamTransportError(
                f"malformed {envelope.__name__} body",
                "malformed_body",
                context=ErrorContext(
                    operation=operation,
                    upstream_status=response.status_code,
                    debug_info={"error_count": e.error_count()},
                ),
            ) from e

    def _log_success(self, operation: str, response: httpx.Response, attempt: int) -> None:
        logger.info(
            f"Upstream {operation} succeeded",
            extra={
                "operation": operation,
                "status_code": response.status_code,
                "attempt": attempt + 1,
            },
        )


async def _log_request(request: httpx.Request) -> None:
    """httpx request hook: one debug line per outgoing request, retries included."""
    logger.debug(
        f"Requested upstream URL: {request.method} {request.url}",
        extra={"method": request.method, "url": str(request.url)},
    )


# Singleton (initialized on startup)
upstream_client: ResilientEmployeeClient | None = None


def init_upstream(settings: Settings, **kwargs) -> ResilientEmployeeClient:
    global upstream_client
    upstream_client = ResilientEmployeeClient.from_settings(settings, **kwargs)
    return upstream_client


async def close_upstream() -> None:
    global upstream_client
    if upstream_client is not None:
        await upstream_client.aclose()
        upstream_client = None


def get_upstream_client() -> ResilientEmployeeClient:
    """FastAPI dependency for the shared upstream client."""
    if not upstream_client:
        raise RuntimeError("Upstream client not initialized")
    return upstream_client
