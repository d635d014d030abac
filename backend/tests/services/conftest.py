"""Service test fixtures — scripted EmployeeSource + FastAPI test client.

Invariants:
    - client overrides get_employee_service; no upstream client is ever created
    - Every test gets a fresh FakeEmployeeSource

Design Decisions:
    - httpx ASGITransport: routes exercised in-process, lifespan not run
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.api.routes.employees import get_employee_service
from employee_api.main import app
from employee_api.services.employee_service import EmployeeService

from tests.services.fake_upstream import FakeEmployeeSource


@pytest.fixture
def fake_source():
    return FakeEmployeeSource()


@pytest.fixture
def service(fake_source):
    return EmployeeService(fake_source)


@pytest.fixture
async def client(fake_source):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(fake_source)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
