from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class BookmarkSet(BaseModel):
    ids: list[int]
    count: int


class BulkActionRequest(BaseModel):
    action: Literal["promote", "assign-project"]


class BulkActionResponse(BaseModel):
    action: str
    employee_ids: list[int]
    status: str = "simulated"
