"""Retry Policy — decides wait-or-stop for a failed upstream attempt.

Invariants:
    - decide() is PURE: no sleeping, no IO, no clock
    - Only UpstreamRateLimitedError is ever retried
    - attempt is 0-based; the initial call plus at most max_retries retries
    - Delay is fixed (no exponential growth, no jitter)

Design Decisions:
    - Policy separated from the HTTP client so it is testable without a transport
      (ADR: single responsibility)
    - Frozen dataclass: one instance shared by concurrent requests, no locking
"""

from dataclasses import dataclass

from employee_api.core.errors import UpstreamError, UpstreamRateLimitedError


DEFAULT_MAX_RETRIES: int = 5
DEFAULT_DELAY_SECONDS: float = 5.0


@dataclass(frozen=True)
class RetryDecision:
    should_retry: bool
    delay_seconds: float = 0.0


STOP = RetryDecision(should_retry=False)


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded, fixed-delay retry for rate-limited responses."""
    max_retries: int = DEFAULT_MAX_RETRIES
    delay_seconds: float = DEFAULT_DELAY_SECONDS

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def is_retryable(self, error: UpstreamError) -> bool:
        return isinstance(error, UpstreamRateLimitedError)

    def decide(self, error: UpstreamError, attempt: int) -> RetryDecision:
        """Retry iff the failure is rate-limited and retries remain."""
        if not self.is_retryable(error):
            return STOP
        if attempt >= self.max_retries:
            return STOP
        return RetryDecision(should_retry=True, delay_seconds=self.delay_seconds)
