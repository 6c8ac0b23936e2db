from __future__ import annotations

from typing import Iterable

from app.models.employee import Employee
from app.models.listing import FilterCriteria


def _matches_search(employee: Employee, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    haystacks = (
        employee.first_name,
        employee.last_name,
        employee.email,
        employee.company.department,
    )
    return any(needle in value.lower() for value in haystacks)


def matches_criteria(employee: Employee, criteria: FilterCriteria) -> bool:
    if not _matches_search(employee, criteria.search_text):
        return False
    if criteria.departments and employee.company.department not in criteria.departments:
        return False
    if criteria.ratings and employee.rating not in criteria.ratings:
        return False
    return True


def filter_employees(employees: Iterable[Employee], criteria: FilterCriteria) -> list[Employee]:
    return [employee for employee in employees if matches_criteria(employee, criteria)]
