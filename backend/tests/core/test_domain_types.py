"""Domain Types — verifies identity types, delete outcomes and the error envelope.

Tests:
    - DeleteOutcome constructors produce exactly one status each
    - DeleteStatus has exactly three members
    - Error classes carry code, category and http_status used by the boundary
"""

from employee_api.core.domain_types import (
    DeleteOutcome, DeleteStatus, EmployeeId, TOP_EARNERS_LIMIT,
)
from employee_api.core.errors import (
    DeletionRejectedError,
    EmptyDatasetError,
    ErrorCategory,
    UpstreamError,
    UpstreamRateLimitedError,
    UpstreamTransportError,
)


def test_employee_id_wraps_str():
    assert EmployeeId("4a3a170b") == "4a3a170b"


def test_top_earners_limit_is_ten():
    assert TOP_EARNERS_LIMIT == 10


def test_delete_status_has_three_states():
    assert set(DeleteStatus) == {
        DeleteStatus.DELETED, DeleteStatus.NOT_FOUND, DeleteStatus.REJECTED,
    }


def test_delete_outcome_deleted():
    outcome = DeleteOutcome.deleted(EmployeeId("2"), "B")
    assert outcome.status is DeleteStatus.DELETED
    assert outcome.name == "B"
    assert outcome.succeeded is True


def test_delete_outcome_not_found_has_no_name():
    outcome = DeleteOutcome.not_found(EmployeeId("9"))
    assert outcome.status is DeleteStatus.NOT_FOUND
    assert outcome.name is None
    assert outcome.succeeded is False


def test_delete_outcome_rejected_keeps_name():
    outcome = DeleteOutcome.rejected(EmployeeId("1"), "A")
    assert outcome.status is DeleteStatus.REJECTED
    assert outcome.name == "A"
    assert outcome.succeeded is False


def test_domain_errors_are_not_upstream_errors():
    assert not isinstance(EmptyDatasetError("max_salary"), UpstreamError)
    assert not isinstance(DeletionRejectedError("1", "A"), UpstreamError)


def test_error_to_response_envelope():
    error = UpstreamRateLimitedError(retry_after_seconds=5)
    body = error.to_response()["error"]
    assert body["code"] == "UPSTREAM_RATE_LIMITED"
    assert body["category"] == ErrorCategory.RATE_LIMITED.value
    assert body["context"]["retry_after_seconds"] == 5
    assert body["context"]["upstream_status"] == 429
    assert error.http_status == 503


def test_transport_error_keeps_reason():
    error = UpstreamTransportError("bad json", "malformed_body")
    assert error.reason == "malformed_body"
    assert "malformed_body" in error.message
    assert error.http_status == 502
