"""Employee Schemas — Pydantic models for employee records and create requests.

Invariants:
    - EmployeeRecord is frozen: fetched records are never mutated
    - EmployeeRecord reads AND serializes the upstream wire names (employee_name, ...)
      while exposing short attribute names (name, salary, ...) to Python code
    - EmployeeCreate: name non-blank (stripped), salary > 0, age 16–75, email shaped

Design Decisions:
    - Aliases over a separate DTO + mapper: one model covers wire and domain
      (ADR: no parallel structures)
    - Email checked with a pattern, not EmailStr: no extra dependency for a shape check
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class EmployeeRecord(BaseModel):
    """Employee as returned by the upstream service."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = Field(alias="employee_name")
    salary: int = Field(alias="employee_salary", ge=0)
    age: int = Field(alias="employee_age")
    title: str = Field(alias="employee_title")
    email: str = Field(alias="employee_email")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Upstream ids are opaque; accept numeric ids as their string form."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class EmployeeCreate(BaseModel):
    """Employee creation request, validated before it reaches the orchestrator."""
    name: str = Field(min_length=1)
    salary: int = Field(gt=0)
    age: int = Field(ge=16, le=75)
    title: str
    email: str = Field(pattern=EMAIL_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v
