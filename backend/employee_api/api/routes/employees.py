"""Employee Routes — REST surface over EmployeeService.

Invariants:
    - Routes contain no aggregation or retry logic (delegate to EmployeeService)
    - Static paths (/search, /highestSalary, /topTen...) registered before /{employee_id}
    - Upstream and domain failures raised as EmployeeApiError → global handler
    - DeleteOutcome mapped 1:1: deleted → 202 + name, not_found → 404, rejected → 409

Design Decisions:
    - Empty list → 204, empty search / top-ten → 404 (ADR: keeps the established
      contract of the employee API consumers)
    - get_employee_service as a dependency: tests override it with a scripted source
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from employee_api.core.domain_types import DeleteStatus
from employee_api.core.errors import DeletionRejectedError, UpstreamNotFoundError
from employee_api.infrastructure.upstream_client import (
    ResilientEmployeeClient,
    get_upstream_client,
)
from employee_api.schemas.employee import EmployeeCreate, EmployeeRecord
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employee", tags=["employees"])


def get_employee_service(
    client: ResilientEmployeeClient = Depends(get_upstream_client),
) -> EmployeeService:
    return EmployeeService(client)


@router.get("", response_model=list[EmployeeRecord])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """All employees. 204 when upstream has none."""
    logger.info("GET all employees")
    employees = await service.list_all()
    if not employees:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return employees


@router.get("/search/{search_string}", response_model=list[EmployeeRecord])
async def search_employees(
    search_string: str, service: EmployeeService = Depends(get_employee_service),
):
    """Employees whose name equals search_string, ignoring case."""
    logger.info(f"GET employees by name {search_string}")
    employees = await service.find_by_name(search_string)
    if not employees:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=f"No employee named '{search_string}'",
        )
    return employees


@router.get("/highestSalary", response_model=int)
async def highest_salary(service: EmployeeService = Depends(get_employee_service)):
    logger.info("GET highest salary of employees")
    return await service.max_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def top_ten_earner_names(
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("GET names of top 10 highest paid employees")
    names = await service.top_earner_names()
    if not names:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, detail="No employees available",
        )
    return names


@router.get("/{employee_id}", response_model=EmployeeRecord)
async def get_employee(
    employee_id: str, service: EmployeeService = Depends(get_employee_service),
):
    """Single employee. 404 when upstream reports absence."""
    logger.info(f"GET employee for id {employee_id}", extra={"employee_id": employee_id})
    return await service.get_by_id(employee_id)


@router.post(
    "", response_model=EmployeeRecord, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate, service: EmployeeService = Depends(get_employee_service),
):
    logger.info(f"POST new employee {body.name}")
    return await service.create(body)


@router.delete(
    "/{employee_id}", response_model=str, status_code=status.HTTP_202_ACCEPTED,
)
async def delete_employee(
    employee_id: str, service: EmployeeService = Depends(get_employee_service),
):
    """Delete by id. Body is the deleted employee's name."""
    logger.info(f"DELETE employee by id {employee_id}", extra={"employee_id": employee_id})
    outcome = await service.delete_by_id(employee_id)
    if outcome.status is DeleteStatus.NOT_FOUND:
        raise UpstreamNotFoundError(employee_id)
    if outcome.status is DeleteStatus.REJECTED:
        raise DeletionRejectedError(employee_id, outcome.name or "")
    return outcome.name
