"""Deterministic demo-data seeding keyed on employee id.

Every derived value comes from ``seeded_fraction(identifier, salt)``, a
sine-based hash mapped into ``[0, 1)``. Each derived field uses its own salt,
so rating, experience, bio department, project count, feedback count and
department are independent draws for the same id. Any int is a valid
identifier, including 0 and negative values.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from app.models.employee import Feedback, Project

T = TypeVar("T")

RATING_SALT = 12345
EXPERIENCE_SALT = 54321
BIO_DEPARTMENT_SALT = 98765
PROJECT_COUNT_SALT = 11111
FEEDBACK_COUNT_SALT = 22222
DEPARTMENT_SALT = 33333

MAX_RATING = 5
MAX_YEARS_OF_EXPERIENCE = 10
MAX_SEEDED_ITEMS = 3

DEPARTMENTS: list[str] = [
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Operations",
    "Design",
    "Product",
    "Legal",
    "Support",
]

PROJECT_CATALOG: list[Project] = [
    Project(id=1, name="Website Redesign", status="completed", completion=100),
    Project(id=2, name="Mobile App Development", status="in-progress", completion=75),
    Project(id=3, name="Database Migration", status="pending", completion=0),
    Project(id=4, name="API Integration", status="in-progress", completion=60),
    Project(id=5, name="Security Audit", status="completed", completion=100),
]

# (reviewer, rating, comment, date)
FEEDBACK_TEMPLATES: list[tuple[str, int, str, str]] = [
    ("John Manager", 5, "Excellent performance and leadership skills", "2024-01-15"),
    ("Sarah Director", 4, "Great team player with strong technical skills", "2024-01-10"),
    ("Mike Lead", 4, "Consistently delivers high-quality work", "2024-01-05"),
    ("Lisa VP", 5, "Outstanding problem-solving abilities", "2023-12-20"),
]


def seeded_fraction(identifier: int, salt: int) -> float:
    x = math.sin(identifier * salt) * 10000
    fraction = x - math.floor(x)
    # Tiny negative products can round up to exactly 1.0
    if fraction >= 1.0:
        return 0.0
    return fraction


def seeded_int(identifier: int, salt: int, upper: int) -> int:
    """Return an int in ``[1, upper]``."""
    return math.floor(seeded_fraction(identifier, salt) * upper) + 1


def seeded_choice(identifier: int, salt: int, options: Sequence[T]) -> T:
    return options[math.floor(seeded_fraction(identifier, salt) * len(options))]


def seeded_rating(identifier: int) -> int:
    return seeded_int(identifier, RATING_SALT, MAX_RATING)


def seeded_years_of_experience(identifier: int) -> int:
    return seeded_int(identifier, EXPERIENCE_SALT, MAX_YEARS_OF_EXPERIENCE)


def seeded_department(identifier: int) -> str:
    return seeded_choice(identifier, DEPARTMENT_SALT, DEPARTMENTS)


def seeded_bio(identifier: int) -> str:
    years = seeded_years_of_experience(identifier)
    department = seeded_choice(identifier, BIO_DEPARTMENT_SALT, DEPARTMENTS)
    return (
        f"Experienced professional with {years} years in {department}. "
        "Passionate about innovation and team collaboration."
    )


def seeded_projects(identifier: int) -> list[Project]:
    count = seeded_int(identifier, PROJECT_COUNT_SALT, MAX_SEEDED_ITEMS)
    return [project.model_copy() for project in PROJECT_CATALOG[:count]]


def seeded_feedback(identifier: int) -> list[Feedback]:
    count = seeded_int(identifier, FEEDBACK_COUNT_SALT, MAX_SEEDED_ITEMS)
    return [
        Feedback(id=index + 1, reviewer=reviewer, rating=rating, comment=comment, date=date)
        for index, (reviewer, rating, comment, date) in enumerate(FEEDBACK_TEMPLATES[:count])
    ]
