from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_bookmark_store, get_employee_service
from app.models.bookmark import BookmarkSet, BulkActionRequest, BulkActionResponse
from app.models.employee import Employee
from app.services.bookmark_store import BookmarkStore
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def _as_set(store: BookmarkStore) -> BookmarkSet:
    return BookmarkSet(ids=store.all(), count=store.count)


@router.get("", response_model=BookmarkSet)
async def list_bookmarks(store: BookmarkStore = Depends(get_bookmark_store)):  # noqa: B008
    return _as_set(store)


@router.get("/employees", response_model=list[Employee])
async def list_bookmarked_employees(
    store: BookmarkStore = Depends(get_bookmark_store),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employees = await service.get_employees()
    return [employee for employee in employees if store.has(employee.id)]


@router.put("/{employee_id}", response_model=BookmarkSet)
async def add_bookmark(
    employee_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),  # noqa: B008
):
    store.add(employee_id)
    return _as_set(store)


@router.delete("/{employee_id}", response_model=BookmarkSet)
async def remove_bookmark(
    employee_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),  # noqa: B008
):
    store.remove(employee_id)
    return _as_set(store)


@router.post("/actions", response_model=BulkActionResponse)
async def bulk_action(
    request: BulkActionRequest,
    store: BookmarkStore = Depends(get_bookmark_store),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employees = await service.get_employees()
    employee_ids = [employee.id for employee in employees if store.has(employee.id)]
    logger.info("Simulated bulk action '%s' for employees %s", request.action, employee_ids)
    return BulkActionResponse(action=request.action, employee_ids=employee_ids)
