"""Retry Policy — tests for the pure wait-or-stop decision.

Tests cover:
    - Only rate-limited failures are retried
    - Up to max_retries retries (default 5), fixed 5s delay
    - Invalid policy parameters rejected
"""

import pytest

from employee_api.core.errors import (
    UpstreamClientError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServerError,
    UpstreamTransportError,
)
from employee_api.core.retry_policy import RetryPolicy, STOP


def test_defaults_are_five_retries_five_seconds():
    policy = RetryPolicy()
    assert policy.max_retries == 5
    assert policy.delay_seconds == 5.0
    assert policy.max_attempts == 6


def test_rate_limited_retried_with_fixed_delay():
    policy = RetryPolicy()
    for attempt in range(5):
        decision = policy.decide(UpstreamRateLimitedError(), attempt)
        assert decision.should_retry is True
        assert decision.delay_seconds == 5.0


def test_rate_limited_stops_after_max_retries():
    policy = RetryPolicy()
    assert policy.decide(UpstreamRateLimitedError(), 5) == STOP
    assert policy.decide(UpstreamRateLimitedError(), 6).should_retry is False


@pytest.mark.parametrize("error", [
    UpstreamClientError(400),
    UpstreamClientError(403),
    UpstreamNotFoundError("1"),
    UpstreamServerError(500),
    UpstreamServerError(503),
    UpstreamTransportError("boom", "connection_error"),
])
def test_other_failures_never_retried(error):
    assert RetryPolicy().decide(error, 0) == STOP


def test_zero_retries_policy():
    policy = RetryPolicy(max_retries=0)
    assert policy.decide(UpstreamRateLimitedError(), 0).should_retry is False


def test_custom_delay():
    decision = RetryPolicy(max_retries=2, delay_seconds=0.5).decide(
        UpstreamRateLimitedError(), 1,
    )
    assert decision.should_retry is True
    assert decision.delay_seconds == 0.5


def test_negative_parameters_rejected():
    with pytest.raises(ValueError):
        RetryPolicy(max_retries=-1)
    with pytest.raises(ValueError):
        RetryPolicy(delay_seconds=-1.0)
