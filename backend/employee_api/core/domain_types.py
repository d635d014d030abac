"""Domain Types — identities, outcome tags and constants shared across layers.

Invariants:
    - EmployeeId wraps the upstream's opaque string id; never parsed or reformatted
    - DeleteOutcome carries exactly one DeleteStatus; name present iff the employee
      was resolved (deleted or rejected)
    - TOP_EARNERS_LIMIT (10) is single source of truth for the top-N view

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost (ADR: speed)
    - Tagged outcome for delete instead of exceptions: not-found and rejected are
      expected results of the two-phase workflow, not faults
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)


# ─── Constants ───────────────────────────────────────────────────

TOP_EARNERS_LIMIT: int = 10


# ─── Enums ───────────────────────────────────────────────────────

class DeleteStatus(str, Enum):
    """Terminal states of delete-by-id."""
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


# ─── Outcomes ────────────────────────────────────────────────────

@dataclass(frozen=True)
class DeleteOutcome:
    """Result of the read-then-delete workflow."""
    status: DeleteStatus
    employee_id: EmployeeId
    name: str | None = None

    @classmethod
    def deleted(cls, employee_id: EmployeeId, name: str) -> "DeleteOutcome":
        return cls(DeleteStatus.DELETED, employee_id, name)

    @classmethod
    def not_found(cls, employee_id: EmployeeId) -> "DeleteOutcome":
        return cls(DeleteStatus.NOT_FOUND, employee_id)

    @classmethod
    def rejected(cls, employee_id: EmployeeId, name: str) -> "DeleteOutcome":
        return cls(DeleteStatus.REJECTED, employee_id, name)

    @property
    def succeeded(self) -> bool:
        return self.status is DeleteStatus.DELETED
