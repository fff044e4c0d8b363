"""listkit.paginate: fixed-size page windows over an ordered sequence.

Usage::

    from listkit.paginate import paginate

    pager = paginate(entries, page_size=10)
    pager.total_pages           # >= 1, even for an empty sequence
    pager.slice(2)              # items 11-20
    pager.slice(99)             # clamped to the last page
    for number, items in pager.pages():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Paginator(Generic[T]):
    """1-based page view over *items*.

    Nothing is cached: every call recomputes from the sequence it wraps, and
    the sequence itself is never modified.  Page numbers outside
    ``[1, total_pages]`` are clamped.  Non-integer page numbers are converted
    with ``int()`` (``2.7`` → 2, ``"3"`` → 3); values ``int()`` rejects are
    treated as page 1.
    """

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ValueError(f"page_size must be a positive integer; got {page_size!r}")
        self._items = items
        self._page_size = page_size

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_int(page: Any) -> int:
        try:
            return int(page)
        except (TypeError, ValueError, OverflowError):
            logger.debug("Non-numeric page %r; using page 1", page)
            return 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        """Number of pages; an empty sequence still has one (empty) page."""
        return max(1, -(-len(self._items) // self._page_size))

    def clamp(self, page: Any) -> int:
        """Return *page* as a valid page number in ``[1, total_pages]``."""
        return min(max(1, self._to_int(page)), self.total_pages)

    def slice(self, page: Any) -> list[T]:
        """Return the items on *page* (the last page may be short)."""
        start = (self.clamp(page) - 1) * self._page_size
        return list(self._items[start:start + self._page_size])

    def pages(self) -> Iterator[tuple[int, list[T]]]:
        """Yield ``(page_number, items)`` for every page, first to last."""
        for number in range(1, self.total_pages + 1):
            yield number, self.slice(number)

    def has_previous(self, page: Any) -> bool:
        return self.clamp(page) > 1

    def has_next(self, page: Any) -> bool:
        return self.clamp(page) < self.total_pages


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    """Return a :class:`Paginator` over *items* with *page_size* items per page."""
    return Paginator(items, page_size)
