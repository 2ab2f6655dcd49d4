# user_browser/services/paginator.py
"""
Pure pagination arithmetic over an in-memory result set.
"""

from __future__ import annotations

from typing import Sequence, Tuple, TypeVar

from user_browser.models.pagination import Page

T = TypeVar("T")


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for `count` items; 0 when there are none."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if count <= 0:
        return 0
    return (count + page_size - 1) // page_size


def slice_records(
    records: Sequence[T], page_index: int, page_size: int
) -> Tuple[Sequence[T], int]:
    """
    Return the visible slice for `page_index` and the total page count.

    An index outside the available pages yields an empty slice instead of
    raising.
    """
    pages = total_pages(len(records), page_size)
    if page_index < 0 or page_index >= pages:
        return records[0:0], pages

    start = page_index * page_size
    return records[start:start + page_size], pages


def paginate(records: Sequence[T], page_index: int, page_size: int) -> Page[T]:
    """Wrap `slice_records` into a Page."""
    visible, pages = slice_records(records, page_index, page_size)
    return Page(
        items=visible,
        total=len(records),
        pages=pages,
        page=page_index,
        per_page=page_size,
    )
