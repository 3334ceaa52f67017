"""
Pagination stage: page counts, page slices and the numbered page window.

Clamping policy: none. A page number past the last page, or below 1, yields an
empty slice; callers decide whether to clamp before dispatching a page change.

Examples:
    >>> rows = list("abcde")
    >>> total_pages(len(rows), 2)
    3
    >>> page_slice(rows, 3, 2)
    ['e']
    >>> page_window(5, 10)
    ['...', 3, 4, 5, 6, 7, '...']
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from gridview.core.constants import MAX_PAGE_BUTTONS, PAGE_ELLIPSIS
from gridview.core.typing import Record

__all__ = [
    "total_pages",
    "page_bounds",
    "page_slice",
    "page_window",
]


def total_pages(length: int, rows_per_page: int) -> int:
    """``ceil(length / rows_per_page)``; 0 for an empty result."""
    if rows_per_page < 1:
        raise ValueError(f"rows_per_page must be >= 1, got {rows_per_page}")
    return math.ceil(length / rows_per_page)


def page_bounds(current_page: int, rows_per_page: int) -> tuple[int, int]:
    """Half-open ``[start, stop)`` indices of a 1-based page."""
    start = (current_page - 1) * rows_per_page
    return start, start + rows_per_page


def page_slice(
    records: Sequence[Record], current_page: int, rows_per_page: int
) -> list[Record]:
    """
    Slice the displayed page out of the sorted records.

    Args:
        records (Sequence[Record]): Sorted and filtered records.
        current_page (int): 1-based page number (not clamped).
        rows_per_page (int): Page size.

    Returns:
        list[Record]: Records of the page; empty when the page is out of range.
    """
    if current_page < 1:
        return []
    start, stop = page_bounds(current_page, rows_per_page)
    return list(records[start:stop])


def page_window(
    current_page: int, num_pages: int, max_buttons: int = MAX_PAGE_BUTTONS
) -> list[int | str]:
    """
    Page numbers to show around the current page, with ellipsis markers.

    Args:
        current_page (int): 1-based current page.
        num_pages (int): Total page count.
        max_buttons (int): Maximum numbered entries in the window.

    Returns:
        list[int | str]: Page numbers, prefixed/suffixed by PAGE_ELLIPSIS when
        pages are elided before/after the window.

    Notes:
        The window holds exactly ``min(max_buttons, num_pages)`` numbers. It is
        centred on the current page (with the extra page after it for an even
        size) and shifted inward near either end.
    """
    if num_pages < 1:
        return []
    count = max(1, min(max_buttons, num_pages))
    start = current_page - (count - 1) // 2
    start = max(1, min(start, num_pages - count + 1))
    end = start + count - 1

    pages: list[int | str] = list(range(start, end + 1))
    if start > 1:
        pages.insert(0, PAGE_ELLIPSIS)
    if end < num_pages:
        pages.append(PAGE_ELLIPSIS)
    return pages
