from fastapi import APIRouter

from app.api.v1.endpoints import analytics, bookmarks, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(bookmarks.router)
api_router.include_router(analytics.router)
