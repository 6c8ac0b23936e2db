"""Windowing over an already-filtered list.

``paginate`` does not clamp the page. Callers re-clamp with ``clamp_page``
whenever the filtered set or page size changes; an out-of-range page simply
yields an empty window.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE_OPTIONS: tuple[int, ...] = (6, 12, 24, 48)
DEFAULT_PAGE_SIZE = 6


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    items: list[T] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 0
    start_index: int = 0
    end_index: int = 0


def total_pages_for(total_items: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total_items / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> PageWindow[T]:
    total_pages = total_pages_for(len(items), page_size)
    start_index = (page - 1) * page_size
    window = list(items[start_index : start_index + page_size]) if page >= 1 else []
    return PageWindow(
        items=window,
        total_items=len(items),
        total_pages=total_pages,
        start_index=start_index,
        end_index=start_index + len(window),
    )


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, max(total_pages, 1)))


def visible_pages(current: int, total_pages: int, delta: int = 2) -> list[int | None]:
    """Page numbers for a pagination control; ``None`` marks an ellipsis gap."""
    if total_pages < 1:
        return []

    middle = list(range(max(2, current - delta), min(total_pages - 1, current + delta) + 1))

    pages: list[int | None] = [1]
    if current - delta > 2:
        pages.append(None)
    pages.extend(middle)

    if current + delta < total_pages - 1:
        pages.extend([None, total_pages])
    elif total_pages > 1:
        pages.append(total_pages)

    return pages
