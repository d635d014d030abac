"""Employee Schemas — wire aliases, immutability, create validation, delete flag parsing."""

import pytest
from pydantic import ValidationError

from employee_api.schemas.employee import EmployeeCreate, EmployeeRecord
from employee_api.schemas.upstream import DeleteEnvelope, EmployeeListEnvelope


WIRE_EMPLOYEE = {
    "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
    "employee_name": "Tiger Nixon",
    "employee_salary": 320800,
    "employee_age": 61,
    "employee_title": "Vice Chair Executive Principal",
    "employee_email": "tnixon@company.com",
}


def test_record_reads_wire_names():
    record = EmployeeRecord.model_validate(WIRE_EMPLOYEE)
    assert record.name == "Tiger Nixon"
    assert record.salary == 320800
    assert record.age == 61
    assert record.title == "Vice Chair Executive Principal"
    assert record.email == "tnixon@company.com"


def test_record_serializes_back_to_wire_names():
    record = EmployeeRecord.model_validate(WIRE_EMPLOYEE)
    assert record.model_dump(by_alias=True) == WIRE_EMPLOYEE


def test_record_is_frozen():
    record = EmployeeRecord.model_validate(WIRE_EMPLOYEE)
    with pytest.raises(ValidationError):
        record.salary = 1


def test_record_numeric_id_becomes_string():
    record = EmployeeRecord.model_validate({**WIRE_EMPLOYEE, "id": 7})
    assert record.id == "7"


def test_record_missing_field_rejected():
    payload = dict(WIRE_EMPLOYEE)
    del payload["employee_salary"]
    with pytest.raises(ValidationError):
        EmployeeRecord.model_validate(payload)


def test_record_negative_salary_rejected():
    with pytest.raises(ValidationError):
        EmployeeRecord.model_validate({**WIRE_EMPLOYEE, "employee_salary": -1})


def test_record_zero_salary_accepted():
    record = EmployeeRecord.model_validate({**WIRE_EMPLOYEE, "employee_salary": 0})
    assert record.salary == 0


def test_list_envelope_keeps_upstream_order():
    second = {**WIRE_EMPLOYEE, "id": "2", "employee_name": "Garrett Winters"}
    envelope = EmployeeListEnvelope.model_validate(
        {"data": [WIRE_EMPLOYEE, second], "status": "Successfully processed request."},
    )
    assert [e.name for e in envelope.data] == ["Tiger Nixon", "Garrett Winters"]


# ─── EmployeeCreate ──────────────────────────────────────────────

def _create(**overrides):
    body = {
        "name": "Jane Doe", "salary": 1000, "age": 30,
        "title": "Engineer", "email": "jane@example.com",
    }
    body.update(overrides)
    return EmployeeCreate.model_validate(body)


def test_create_valid_and_name_stripped():
    assert _create(name="  Jane Doe ").name == "Jane Doe"


@pytest.mark.parametrize("overrides", [
    {"name": "   "},
    {"name": ""},
    {"salary": 0},
    {"salary": -5},
    {"age": 15},
    {"age": 76},
    {"email": "not-an-email"},
    {"title": None},
])
def test_create_rejects_invalid(overrides):
    with pytest.raises(ValidationError):
        _create(**overrides)


@pytest.mark.parametrize("age", [16, 75])
def test_create_age_bounds_inclusive(age):
    assert _create(age=age).age == age


# ─── DeleteEnvelope ──────────────────────────────────────────────

@pytest.mark.parametrize("data,expected", [
    ("true", True),
    ("TRUE", True),
    ("false", False),
    ("", False),
    ("yes", False),
    (True, True),
    (False, False),
])
def test_delete_envelope_succeeded(data, expected):
    envelope = DeleteEnvelope.model_validate({"data": data, "status": "ok"})
    assert envelope.succeeded is expected
