from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.dependencies import get_employee_service
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    request: Request,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    services: dict[str, str] = {
        "employee_source": service.check_status(),
        "bookmark_store": "ok" if getattr(request.app.state, "bookmark_store", None) is not None else "error",
    }

    all_ok = all(v in ("ok", "not_configured", "not_loaded") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
