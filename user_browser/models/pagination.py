"""Generic page-of-results container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """A single page of items plus meta-data."""

    items: Sequence[T]
    total: int           # total items in the whole result set
    pages: int           # total number of pages (0 when there are no items)
    page: int            # current page index (0-based)

    per_page: int        # size of each page (for convenience)

    # ------------- helpers -------------
    @property
    def number(self) -> int:
        """1-based page number for display."""
        return self.page + 1

    def has_next(self) -> bool:
        return self.page < self.pages - 1

    def has_prev(self) -> bool:
        return 0 < self.page < self.pages
