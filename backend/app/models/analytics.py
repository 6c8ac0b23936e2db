"""Analytics aggregates derived from the employee collection. Never persisted."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.employee import Employee


class DepartmentStats(BaseModel):
    department: str
    count: int
    average_rating: float
    members: list[Employee]


class RatingBucket(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    label: str
    count: int
    percentage: float


class LeaderboardEntry(BaseModel):
    rank: int
    score: int = Field(..., ge=0, le=100)
    employee: Employee


class SummaryMetrics(BaseModel):
    total_employees: int
    average_rating: str
    high_performers: int
    bookmarked: int


class AnalyticsSnapshot(BaseModel):
    summary: SummaryMetrics
    departments: list[DepartmentStats]
    rating_distribution: list[RatingBucket]
    leaderboard: list[LeaderboardEntry]
    top_performers: dict[str, Employee]
