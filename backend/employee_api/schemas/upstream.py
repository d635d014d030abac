"""Upstream Envelopes — the `{data, status}` wrappers the upstream service returns.

Invariants:
    - Every upstream success body is `{ "data": ..., "status": ... }`
    - DeleteEnvelope.succeeded is True only for data == true / "true" (any case)

Design Decisions:
    - status kept optional: the client only relies on the HTTP status code
"""

from pydantic import BaseModel

from employee_api.schemas.employee import EmployeeRecord


class EmployeeListEnvelope(BaseModel):
    data: list[EmployeeRecord]
    status: str | None = None


class EmployeeEnvelope(BaseModel):
    data: EmployeeRecord
    status: str | None = None


class DeleteEnvelope(BaseModel):
    data: str | bool
    status: str | None = None

    @property
    def succeeded(self) -> bool:
        if isinstance(self.data, bool):
            return self.data
        return self.data.strip().lower() == "true"


class DeleteByNameRequest(BaseModel):
    """Body of the upstream name-keyed DELETE."""
    name: str
