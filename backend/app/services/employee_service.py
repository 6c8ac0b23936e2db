"""Employee repository backed by a read-only remote user directory.

Source records are decorated with seeded HR fields. Create and feedback
writes are simulated: they only change the in-memory collection.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import date
from typing import Any

import aiohttp

from app.core.config import Settings
from app.models.employee import (
    Address,
    Company,
    Employee,
    EmployeeCreate,
    Feedback,
    FeedbackCreate,
)
from app.services.rating_seed import (
    seeded_bio,
    seeded_department,
    seeded_feedback,
    seeded_projects,
    seeded_rating,
)

logger = logging.getLogger(__name__)

# Source (dummyjson) field names → Employee attribute names
_FIELD_MAP: list[tuple[str, str]] = [
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("email", "email"),
    ("age", "age"),
    ("phone", "phone"),
    ("image", "image"),
]

_ADDRESS_FIELD_MAP: list[tuple[str, str]] = [
    ("address", "address"),
    ("city", "city"),
    ("state", "state"),
    ("postal_code", "postalCode"),
    ("country", "country"),
]

PLACEHOLDER_IMAGE = "/placeholder.svg"


class EmployeeService:
    def __init__(self) -> None:
        self.source_url: str = ""
        self.fetch_limit: int = 20
        self.fetch_timeout: float = 15.0
        self.write_delay: float = 0.0
        self.initialized: bool = False
        self.last_error: str | None = None

        self._fetched: list[Employee] | None = None
        self._created: list[Employee] = []
        self._lock = asyncio.Lock()
        self._generation = 0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEES_SOURCE_URL:
            logger.warning("Employee source URL missing — service not initialized")
            return

        self.source_url = settings.EMPLOYEES_SOURCE_URL.rstrip("/")
        self.fetch_limit = settings.EMPLOYEES_FETCH_LIMIT
        self.fetch_timeout = settings.EMPLOYEES_FETCH_TIMEOUT_SECONDS
        self.write_delay = settings.SIMULATED_WRITE_DELAY_SECONDS
        self.initialized = True
        logger.info("EmployeeService initialized (source=%s, limit=%d)", self.source_url, self.fetch_limit)

    async def close(self) -> None:
        # Any fetch still in flight belongs to the old generation and is dropped
        self._generation += 1
        self._fetched = None
        self._created = []
        self.last_error = None
        self.initialized = False

    def load(self, employees: list[Employee]) -> None:
        """Install an already-built collection, bypassing the remote source."""
        self._generation += 1
        self._fetched = list(employees)
        self.last_error = None

    async def get_employees(self) -> list[Employee]:
        if self._fetched is None and self.initialized:
            async with self._lock:
                if self._fetched is None:
                    await self._load()
        return [*self._created, *(self._fetched or [])]

    async def refresh(self) -> list[Employee]:
        async with self._lock:
            await self._load()
        return await self.get_employees()

    async def get_employee(self, employee_id: int) -> Employee | None:
        for employee in await self.get_employees():
            if employee.id == employee_id:
                return employee
        return None

    async def create_employee(self, form: EmployeeCreate) -> Employee:
        await asyncio.sleep(self.write_delay)

        employee_id = self._next_created_id(await self.get_employees())
        employee = Employee(
            id=employee_id,
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            email=form.email.strip(),
            age=int(form.age.strip()),
            phone=form.phone.strip(),
            address=Address(
                address=form.address,
                city=form.city,
                state=form.state,
                postal_code=form.postal_code,
                country=form.country,
            ),
            company=Company(department=form.department, title=form.title.strip()),
            image=PLACEHOLDER_IMAGE,
            rating=seeded_rating(employee_id),
            bio=form.bio
            or f"Experienced professional in {form.department}. Passionate about innovation and team collaboration.",
            projects=[],
            feedback=[],
        )

        self._created.insert(0, employee)
        logger.info("Simulated create of employee %d (%s %s)", employee.id, employee.first_name, employee.last_name)
        return employee

    async def submit_feedback(self, employee_id: int, payload: FeedbackCreate) -> Feedback | None:
        employee = await self.get_employee(employee_id)
        if employee is None:
            return None

        await asyncio.sleep(self.write_delay)

        next_id = max((f.id for f in employee.feedback), default=0) + 1
        feedback = Feedback(
            id=next_id,
            reviewer=payload.reviewer,
            rating=payload.rating,
            comment=payload.comment,
            date=date.today().isoformat(),
        )
        employee.feedback.append(feedback)
        logger.info("Simulated feedback %d for employee %d: %s", feedback.id, employee_id, payload.comment[:50])
        return feedback

    def check_status(self) -> str:
        if not self.initialized and self._fetched is None:
            return "not_configured"
        if self.last_error:
            return "error"
        if self._fetched is None:
            return "not_loaded"
        return "ok"

    async def _load(self) -> None:
        generation = self._generation
        try:
            raw_users = await self._fetch_users()
            employees = [self._transform_user(raw) for raw in raw_users]
            error = None
        except Exception as e:
            logger.exception("Failed to fetch employees from %s", self.source_url)
            employees = []
            error = str(e) or type(e).__name__

        if generation != self._generation:
            logger.info("Discarding employee fetch result from a closed session")
            return

        self._fetched = employees
        self.last_error = error
        if error is None:
            logger.info("Loaded %d employees from %s", len(employees), self.source_url)

    async def _fetch_users(self) -> list[dict[str, Any]]:
        timeout = aiohttp.ClientTimeout(total=self.fetch_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(self.source_url, params={"limit": self.fetch_limit}) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise RuntimeError(f"Employee fetch failed: {response.status} - {error_text[:200]}")
                data = await response.json()

        users = data.get("users") if isinstance(data, dict) else None
        if not isinstance(users, list):
            raise RuntimeError("Employee source response has no 'users' list")
        return users

    def _transform_user(self, raw: dict[str, Any]) -> Employee:
        employee_id = int(raw["id"])
        data: dict[str, Any] = {"id": employee_id, "first_name": "", "last_name": "", "email": ""}

        for python_key, source_key in _FIELD_MAP:
            value = raw.get(source_key)
            if value is not None:
                data[python_key] = value

        raw_address = raw.get("address") or {}
        data["address"] = Address(
            **{python_key: str(raw_address.get(source_key) or "") for python_key, source_key in _ADDRESS_FIELD_MAP}
        )

        raw_company = raw.get("company") or {}
        data["company"] = Company(
            department=seeded_department(employee_id),
            name=raw_company.get("name") or "TechCorp Inc.",
            title=raw_company.get("title") or "Software Engineer",
        )

        data["rating"] = seeded_rating(employee_id)
        data["bio"] = seeded_bio(employee_id)
        data["projects"] = seeded_projects(employee_id)
        data["feedback"] = seeded_feedback(employee_id)

        return Employee(**data)

    def _next_created_id(self, existing: list[Employee]) -> int:
        taken = {employee.id for employee in existing}
        candidate = int(time.time() * 1000)
        while candidate in taken:
            candidate += 1
        return candidate


employee_service = EmployeeService()
