from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_service
from app.main import app
from app.models.employee import Company, Employee
from app.services.employee_service import EmployeeService

FIRST_NAMES = [
    "Emily", "Michael", "Sophia", "James", "Emma",
    "Olivia", "Alexander", "Ava", "Ethan", "Isabella",
    "Liam", "Mia", "Noah", "Charlotte", "William",
    "Amelia", "Benjamin", "Harper", "Lucas", "Evelyn",
]
LAST_NAMES = [
    "Johnson", "Williams", "Brown", "Davis", "Miller",
    "Wilson", "Moore", "Taylor", "Anderson", "Thomas",
    "Jackson", "White", "Harris", "Martin", "Thompson",
    "Garcia", "Martinez", "Robinson", "Clark", "Rodriguez",
]


def make_raw_user(idx: int) -> dict:
    """A source record shaped like the dummyjson users endpoint."""
    first = FIRST_NAMES[(idx - 1) % len(FIRST_NAMES)]
    last = LAST_NAMES[(idx - 1) % len(LAST_NAMES)]
    return {
        "id": idx,
        "firstName": first,
        "lastName": last,
        "email": f"{first.lower()}.{last.lower()}@x.dummyjson.com",
        "age": 20 + idx,
        "phone": f"+1 555-010-{idx:04d}",
        "image": f"https://dummyjson.com/icon/{first.lower()}/128",
        "address": {
            "address": f"{idx} Main Street",
            "city": "Phoenix",
            "state": "Arizona",
            "postalCode": "85001",
            "country": "United States",
        },
        "company": {"name": "Dooley, Kozey and Cronin", "title": "Sales Manager", "department": "Engineering"},
    }


def make_employee(
    idx: int,
    *,
    first_name: str = "Test",
    last_name: str = "Person",
    email: str | None = None,
    department: str = "Engineering",
    rating: int = 3,
) -> Employee:
    return Employee(
        id=idx,
        first_name=first_name,
        last_name=last_name,
        email=email or f"{first_name.lower()}{idx}@example.com",
        company=Company(department=department),
        rating=rating,
    )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _bookmark_settings(tmp_path):
    from app.core.config import settings

    original_file = settings.BOOKMARKS_FILE
    settings.BOOKMARKS_FILE = str(tmp_path / "hr-bookmarks.json")
    yield
    settings.BOOKMARKS_FILE = original_file


@pytest.fixture
def raw_users() -> list[dict]:
    return [make_raw_user(i) for i in range(1, 21)]


@pytest.fixture
def synthesized_employees(raw_users) -> list[Employee]:
    service = EmployeeService()
    return [service._transform_user(raw) for raw in raw_users]


@pytest.fixture
def seeded_service(synthesized_employees) -> EmployeeService:
    service = EmployeeService()
    service.load(synthesized_employees)
    return service


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_service):
    app.dependency_overrides[get_employee_service] = lambda: seeded_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
