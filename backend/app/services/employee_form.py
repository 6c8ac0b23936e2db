from __future__ import annotations

import re

from app.models.employee import EmployeeCreate
from app.services.rating_seed import DEPARTMENTS

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_AGE = 18
MAX_AGE = 100


AGE_PATTERN = re.compile(r"[0-9]+")


def _parse_age(value: str) -> int | None:
    stripped = value.strip()
    if not AGE_PATTERN.fullmatch(stripped):
        return None
    return int(stripped)


def validate_employee_form(form: EmployeeCreate) -> dict[str, str]:
    """Return one message per failing field; an empty dict means the form is valid."""
    errors: dict[str, str] = {}

    if not form.first_name.strip():
        errors["first_name"] = "First name is required"
    if not form.last_name.strip():
        errors["last_name"] = "Last name is required"

    if not form.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(form.email):
        errors["email"] = "Email is invalid"

    if not form.phone.strip():
        errors["phone"] = "Phone is required"

    if not form.age.strip():
        errors["age"] = "Age is required"
    else:
        age = _parse_age(form.age)
        if age is None or age < MIN_AGE or age > MAX_AGE:
            errors["age"] = f"Age must be between {MIN_AGE} and {MAX_AGE}"

    if not form.department:
        errors["department"] = "Department is required"
    elif form.department not in DEPARTMENTS:
        errors["department"] = "Department is invalid"

    if not form.title.strip():
        errors["title"] = "Job title is required"

    return errors
