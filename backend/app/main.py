from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.services.bookmark_store import BookmarkStore, InMemoryStorage, JsonFileStorage
from app.services.employee_service import employee_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeService — continuing with no employees")
    try:
        application.state.bookmark_store = BookmarkStore(
            JsonFileStorage(settings.BOOKMARKS_FILE),
            key=settings.BOOKMARKS_STORAGE_KEY,
        )
    except Exception:
        logger.exception("Failed to open bookmark file — bookmarks will not survive a restart")
        application.state.bookmark_store = BookmarkStore(InMemoryStorage(), key=settings.BOOKMARKS_STORAGE_KEY)
    yield
    await employee_service.close()
    application.state.bookmark_store = None


app = FastAPI(
    title="HR Dashboard API",
    description="Employee directory, bookmarks and performance analytics",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "HR Dashboard API"}
