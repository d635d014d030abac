"""Derived Views — pure aggregations over a freshly fetched employee list.

Invariants:
    - All functions are PURE: no IO, no mutation of the input records
    - find_by_name is exact, case-insensitive equality (not substring)
    - top_earner_names sorts by salary descending with a STABLE sort, so equal
      salaries keep upstream order
    - max_salary raises EmptyDatasetError on an empty list; the other views
      return empty results instead
"""

from typing import Iterable, Sequence, TypeVar

from employee_api.core.domain_types import TOP_EARNERS_LIMIT
from employee_api.core.errors import EmptyDatasetError
from employee_api.core.upstream_protocols import EmployeeLike

E = TypeVar("E", bound=EmployeeLike)


def _fold(name: str) -> str:
    return name.casefold()


def find_by_name(records: Iterable[E], name: str) -> list[E]:
    """Records whose name equals `name`, ignoring case. Order preserved."""
    wanted = _fold(name)
    return [r for r in records if _fold(r.name) == wanted]


def max_salary(records: Sequence[EmployeeLike]) -> int:
    if not records:
        raise EmptyDatasetError("max_salary")
    return max(r.salary for r in records)


def top_earner_names(
    records: Sequence[EmployeeLike], limit: int = TOP_EARNERS_LIMIT,
) -> list[str]:
    """Names of the `limit` highest earners, highest first."""
    if limit <= 0:
        return []
    # stable: ties keep upstream order
    ranked = sorted(records, key=lambda r: -r.salary)
    return [r.name for r in ranked[:limit]]
