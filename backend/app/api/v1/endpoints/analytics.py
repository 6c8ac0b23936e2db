from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_bookmark_store, get_employee_service
from app.models.analytics import AnalyticsSnapshot
from app.services.analytics_engine import DEFAULT_LEADERBOARD_SIZE, build_snapshot
from app.services.bookmark_store import BookmarkStore
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsSnapshot)
async def get_analytics(
    top_n: int = Query(default=DEFAULT_LEADERBOARD_SIZE, ge=1, le=100),
    store: BookmarkStore = Depends(get_bookmark_store),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employees = await service.get_employees()
    snapshot = build_snapshot(employees, store.count, top_n=top_n)
    logger.debug(
        "Analytics computed: %d employees, %d departments",
        snapshot.summary.total_employees,
        len(snapshot.departments),
    )
    return snapshot
