"""Status Classification — every non-2xx status maps to exactly one error class."""

import pytest

from employee_api.core.classify_status import classify_status, parse_retry_after
from employee_api.core.errors import (
    ErrorContext,
    UpstreamClientError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServerError,
)


@pytest.mark.parametrize("code", [200, 201, 202, 204])
def test_success_is_none(code):
    assert classify_status(code) is None


def test_404_is_not_found_with_id():
    error = classify_status(404, employee_id="abc")
    assert isinstance(error, UpstreamNotFoundError)
    assert error.context.employee_id == "abc"
    assert error.http_status == 404


def test_429_is_rate_limited():
    error = classify_status(429, retry_after="7")
    assert isinstance(error, UpstreamRateLimitedError)
    assert error.context.retry_after_seconds == 7
    assert error.status_code == 429


@pytest.mark.parametrize("code", [400, 401, 403, 405, 409, 422])
def test_other_4xx_is_client_error(code):
    error = classify_status(code)
    assert type(error) is UpstreamClientError
    assert error.status_code == code


@pytest.mark.parametrize("code", [500, 502, 503, 504])
def test_5xx_is_server_error(code):
    error = classify_status(code)
    assert type(error) is UpstreamServerError
    assert error.context.upstream_status == code


def test_redirect_is_client_error():
    assert isinstance(classify_status(302), UpstreamClientError)


def test_context_is_carried():
    ctx = ErrorContext(operation="list_all", attempts=2)
    error = classify_status(500, context=ctx)
    assert error.context is ctx
    assert error.context.operation == "list_all"


@pytest.mark.parametrize("raw,expected", [
    (None, None),
    ("", None),
    ("5", 5),
    (" 12 ", 12),
    ("Wed, 21 Oct 2015 07:28:00 GMT", None),
    ("-3", None),
    ("\u00b2", None),
    ("\uff15", None),
])
def test_parse_retry_after(raw, expected):
    assert parse_retry_after(raw) == expected
