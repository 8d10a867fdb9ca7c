from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

USERS_PER_PAGE = 5

T = TypeVar("T")


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    items: tuple[T, ...]
    page: int
    page_size: int
    page_count: int
    total: int

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def page_count(total: int, page_size: int = USERS_PER_PAGE) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    return math.ceil(total / page_size) if total > 0 else 0


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def compute_page(items: Sequence[T], page_size: int = USERS_PER_PAGE, current_page: int = 1) -> PageSlice[T]:
    pages = page_count(len(items), page_size)
    start = max(0, (current_page - 1) * page_size)
    return PageSlice(
        items=tuple(items[start : start + page_size]),
        page=current_page,
        page_size=page_size,
        page_count=pages,
        total=len(items),
    )


def next_page(current_page: int, pages: int) -> int:
    return clamp_page(current_page + 1, pages)


def prev_page(current_page: int, pages: int) -> int:
    return clamp_page(current_page - 1, pages)
