from __future__ import annotations

from typing import Sequence

from app.models.employee import Employee
from app.models.listing import EmployeePage, FilterCriteria
from app.services.filter_engine import filter_employees
from app.services.paginator import (
    DEFAULT_PAGE_SIZE,
    clamp_page,
    paginate,
    total_pages_for,
    visible_pages,
)


class ListingState:
    """Filter and page state for the employee list.

    The page goes back to 1 whenever the criteria or the page size change, so
    a shrunk result set is never addressed past its end.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.criteria = FilterCriteria()
        self.page = 1
        self.page_size = page_size

    def update_criteria(self, criteria: FilterCriteria) -> None:
        if criteria != self.criteria:
            self.criteria = criteria
            self.page = 1

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if page_size != self.page_size:
            self.page_size = page_size
            self.page = 1

    def go_to_page(self, page: int) -> None:
        self.page = page

    def apply(self, employees: Sequence[Employee]) -> EmployeePage:
        filtered = filter_employees(employees, self.criteria)
        total_pages = total_pages_for(len(filtered), self.page_size)
        self.page = clamp_page(self.page, total_pages)

        window = paginate(filtered, self.page, self.page_size)
        return EmployeePage(
            items=window.items,
            page=self.page,
            page_size=self.page_size,
            total_pages=window.total_pages,
            total_items=window.total_items,
            total_unfiltered=len(employees),
            start_index=window.start_index,
            end_index=window.end_index,
            visible_pages=visible_pages(self.page, window.total_pages),
        )
