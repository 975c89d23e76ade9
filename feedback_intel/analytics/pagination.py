"""
Paginator for the feedback detail list.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

import pandas as pd

from feedback_intel.config import PAGE_SIZE


@dataclass
class Page:
    number: int
    total_pages: int
    total_items: int
    page_size: int = PAGE_SIZE
    items: list[dict] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    def to_dict(self) -> dict:
        return {
            "page": self.number,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "page_size": self.page_size,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "items": self.items,
        }


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """0 for an empty working set, otherwise ceil(count / page_size)."""
    return math.ceil(count / page_size)


def clamp_page(page: int, pages: int) -> int:
    """Clamp into [1, pages]; an empty set still sits on page 1."""
    if pages <= 0:
        return 1
    return min(max(page, 1), pages)


def next_page(page: int, pages: int) -> int:
    return page + 1 if page < pages else page


def previous_page(page: int) -> int:
    return page - 1 if page > 1 else page


def paginate(df: pd.DataFrame, page: int = 1, page_size: int = PAGE_SIZE) -> Page:
    pages = total_pages(len(df), page_size)
    number = clamp_page(page, pages)
    start = (number - 1) * page_size
    items = df.iloc[start:start + page_size].to_dict("records") if not df.empty else []
    return Page(
        number=number,
        total_pages=pages,
        total_items=int(len(df)),
        page_size=page_size,
        items=items,
    )
