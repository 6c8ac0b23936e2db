from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from app.services.bookmark_store import BookmarkStore
from app.services.employee_service import EmployeeService, employee_service

logger = logging.getLogger(__name__)


def get_employee_service() -> EmployeeService:
    return employee_service


def get_bookmark_store(request: Request) -> BookmarkStore:
    store: BookmarkStore | None = getattr(request.app.state, "bookmark_store", None)
    if store is None:
        logger.error("Bookmark store requested before application startup")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Bookmark store not available",
        )
    return store
