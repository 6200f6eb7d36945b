"""Slicing of ordered results into fixed-size pages."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    page: int
    total_pages: int


def paginate(items: Sequence[T], page: int = 1, limit: int = 12) -> Page[T]:
    """Return the ``page``-th slice of ``limit`` items.

    Pages past the end are empty rather than an error, so clients can step
    through pages without checking bounds first.

    Raises:
        ValueError: If ``page`` or ``limit`` is less than 1
    """
    if page < 1:
        raise ValueError("page must be at least 1")
    if limit < 1:
        raise ValueError("limit must be at least 1")

    total = len(items)
    start_index = (page - 1) * limit
    end_index = start_index + limit

    return Page(
        items=list(items[start_index:end_index]),
        total=total,
        page=page,
        total_pages=math.ceil(total / limit),
    )
