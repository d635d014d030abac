"""Boundary Protocols — contracts between the orchestrator and the upstream client.

Invariants:
    - Core and services NEVER import the HTTP client; dependency arrows point inward
    - All upstream IO accessed through EmployeeSource
    - Implementations provided by infrastructure (or test fakes) via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
      (ADR: ExMA anti-pattern)
    - EmployeeLike exposes only the fields the derived views read
"""

from typing import Protocol, Sequence


class EmployeeLike(Protocol):
    """Structural contract for employee records read by core functions."""
    id: str
    name: str
    salary: int


class NewEmployeeLike(Protocol):
    """Structural contract for a validated create request."""
    name: str
    salary: int
    age: int
    title: str
    email: str


class EmployeeSource(Protocol):
    """Contract for the upstream employee service, implemented by infrastructure."""
    async def list_all(self) -> Sequence[EmployeeLike]: ...
    async def get_by_id(self, employee_id: str) -> EmployeeLike: ...
    async def create(self, request: NewEmployeeLike) -> EmployeeLike: ...
    async def delete_by_name(self, name: str) -> bool: ...
