"""Employee Service — orchestrates upstream calls into derived views and compound operations.

Invariants:
    - Nothing cached: every operation re-fetches from upstream
    - Derived views delegate to pure core.derive_views after a single list_all()
    - delete_by_id is two-phase (get_by_id, then delete_by_name) and NOT atomic
    - delete_by_id resolves to exactly one DeleteOutcome; upstream failures other
      than not-found in phase 1 propagate unchanged
    - Phase 2 never runs when phase 1 reports not-found

Design Decisions:
    - Depends on the EmployeeSource protocol, not the HTTP client (ADR: testable with fakes)
    - Read/delete race accepted: upstream offers no lock or version token
    - Duplicate names: upstream decides which record a name-keyed delete removes
"""

import logging

from employee_api.core.derive_views import find_by_name, max_salary, top_earner_names
from employee_api.core.domain_types import DeleteOutcome, EmployeeId, TOP_EARNERS_LIMIT
from employee_api.core.errors import UpstreamNotFoundError
from employee_api.core.upstream_protocols import (
    EmployeeLike,
    EmployeeSource,
    NewEmployeeLike,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    """Derived reads and the delete-by-id workflow over an EmployeeSource."""

    def __init__(self, source: EmployeeSource):
        self.source = source

    async def list_all(self) -> list[EmployeeLike]:
        employees = list(await self.source.list_all())
        if not employees:
            logger.info("Employee list is empty")
        else:
            logger.info(f"Employee list fetched ({len(employees)} records)")
        return employees

    async def find_by_name(self, name: str) -> list[EmployeeLike]:
        """Exact, case-insensitive name match. Empty list when nothing matches."""
        return find_by_name(await self.source.list_all(), name)

    async def get_by_id(self, employee_id: str) -> EmployeeLike:
        return await self.source.get_by_id(employee_id)

    async def max_salary(self) -> int:
        """Highest salary. Raises EmptyDatasetError when upstream has no employees."""
        return max_salary(list(await self.source.list_all()))

    async def top_earner_names(self, limit: int = TOP_EARNERS_LIMIT) -> list[str]:
        return top_earner_names(list(await self.source.list_all()), limit)

    async def create(self, request: NewEmployeeLike) -> EmployeeLike:
        employee = await self.source.create(request)
        logger.info(
            f"Employee created: {employee.id}", extra={"employee_id": employee.id},
        )
        return employee

    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        """Resolve id → name, then delete by name.

        Returns DeleteOutcome.not_found without calling delete when the id does
        not resolve, rejected when upstream reports false, deleted(name) otherwise.
        """
        eid = EmployeeId(employee_id)
        try:
            employee = await self.source.get_by_id(employee_id)
        except UpstreamNotFoundError:
            logger.warning(
                f"Employee with id {employee_id} not found; nothing deleted",
                extra={"employee_id": employee_id},
            )
            return DeleteOutcome.not_found(eid)

        if not await self.source.delete_by_name(employee.name):
            logger.error(
                f"Employee with id {employee_id} deletion rejected by upstream",
                extra={"employee_id": employee_id},
            )
            return DeleteOutcome.rejected(eid, employee.name)

        logger.info(
            f"Employee with id {employee_id} deleted",
            extra={"employee_id": employee_id},
        )
        return DeleteOutcome.deleted(eid, employee.name)
