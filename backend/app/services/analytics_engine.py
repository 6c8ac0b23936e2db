"""Department, rating and leaderboard aggregates over the employee collection."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from app.models.analytics import (
    AnalyticsSnapshot,
    DepartmentStats,
    LeaderboardEntry,
    RatingBucket,
    SummaryMetrics,
)
from app.models.employee import Employee

DEFAULT_LEADERBOARD_SIZE = 10
HIGH_PERFORMER_MIN_RATING = 4
SCORE_PER_RATING_POINT = 20

RATING_LABELS: dict[int, str] = {
    5: "5 Stars",
    4: "4 Stars",
    3: "3 Stars",
    2: "2 Stars",
    1: "1 Star",
}


def round_half_up(value: Decimal | float | int, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _average(total: int, count: int) -> float:
    return round_half_up(Decimal(total) / Decimal(count))


def compute_department_stats(employees: Sequence[Employee]) -> dict[str, DepartmentStats]:
    """Group by department, keyed in order of first appearance."""
    grouped: dict[str, list[Employee]] = {}
    for employee in employees:
        grouped.setdefault(employee.company.department, []).append(employee)

    return {
        department: DepartmentStats(
            department=department,
            count=len(members),
            average_rating=_average(sum(m.rating for m in members), len(members)),
            members=members,
        )
        for department, members in grouped.items()
    }


def rank_departments(stats: dict[str, DepartmentStats]) -> list[DepartmentStats]:
    return sorted(stats.values(), key=lambda s: s.average_rating, reverse=True)


def compute_leaderboard(
    employees: Sequence[Employee],
    top_n: int = DEFAULT_LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    # Rating descending, ties broken by first name descending
    by_name = sorted(employees, key=lambda e: e.first_name, reverse=True)
    ranked = sorted(by_name, key=lambda e: e.rating, reverse=True)

    return [
        LeaderboardEntry(
            rank=position,
            score=employee.rating * SCORE_PER_RATING_POINT,
            employee=employee,
        )
        for position, employee in enumerate(ranked[:top_n], start=1)
    ]


def compute_rating_histogram(
    employees: Sequence[Employee],
    include_empty: bool = False,
) -> list[RatingBucket]:
    total = len(employees)
    counts = {rating: 0 for rating in RATING_LABELS}
    for employee in employees:
        counts[employee.rating] += 1

    buckets: list[RatingBucket] = []
    for rating, label in RATING_LABELS.items():
        count = counts[rating]
        if not count and not include_empty:
            continue
        percentage = round_half_up(Decimal(count * 100) / Decimal(total)) if total else 0.0
        buckets.append(RatingBucket(rating=rating, label=label, count=count, percentage=percentage))
    return buckets


def compute_top_performer_per_department(
    stats: dict[str, DepartmentStats],
) -> dict[str, Employee]:
    top: dict[str, Employee] = {}
    for department, entry in stats.items():
        if not entry.members:
            continue
        # max() keeps the first of equal ratings
        top[department] = max(entry.members, key=lambda e: e.rating)
    return top


def compute_summary(employees: Sequence[Employee], bookmark_count: int) -> SummaryMetrics:
    total = len(employees)
    if total:
        average = f"{_average(sum(e.rating for e in employees), total):.1f}"
    else:
        average = "0"

    return SummaryMetrics(
        total_employees=total,
        average_rating=average,
        high_performers=sum(1 for e in employees if e.rating >= HIGH_PERFORMER_MIN_RATING),
        bookmarked=bookmark_count,
    )


def build_snapshot(
    employees: Sequence[Employee],
    bookmark_count: int,
    top_n: int = DEFAULT_LEADERBOARD_SIZE,
) -> AnalyticsSnapshot:
    stats = compute_department_stats(employees)
    return AnalyticsSnapshot(
        summary=compute_summary(employees, bookmark_count),
        departments=rank_departments(stats),
        rating_distribution=compute_rating_histogram(employees),
        leaderboard=compute_leaderboard(employees, top_n=top_n),
        top_performers=compute_top_performer_per_department(stats),
    )
