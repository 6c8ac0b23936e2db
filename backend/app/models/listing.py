"""Models for the filtered, paginated employee list."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.employee import Employee


class FilterCriteria(BaseModel):
    """Search and facet filters. Empty sets mean no restriction."""

    search_text: str = ""
    departments: set[str] = Field(default_factory=set)
    ratings: set[int] = Field(default_factory=set)


class EmployeePage(BaseModel):
    items: list[Employee]
    page: int
    page_size: int
    total_pages: int
    total_items: int
    total_unfiltered: int
    start_index: int
    end_index: int
    visible_pages: list[int | None]
