"""
Host-facing widget contracts produced by the engine for one render.

The engine does not draw anything. It hands the host small frozen views that a
search box, header row, checkbox or pagination bar can bind to; every interactive
view carries the engine callback it should invoke.

Notes:
    - Callbacks are excluded from equality and repr so views compare by content.
    - PaginationControl.previous/next/go_to only navigate within 1..total_pages and
      never to the current page; the engine's on_page_changed itself does not clamp.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from gridview.core.constants import MAX_PAGE_BUTTONS
from gridview.core.grammar import RowAlign
from gridview.stages.paginate import page_window

__all__ = [
    "CheckboxControl",
    "SearchControl",
    "PaginationControl",
    "ColumnHeaderView",
    "CellView",
    "RowView",
    "PageView",
]


@dataclass(frozen=True)
class CheckboxControl:
    """Row or header checkbox: ``{checked, on_toggle()}``."""

    checked: bool
    on_toggle: Callable[[], None] = field(repr=False, compare=False)

    def toggle(self) -> None:
        self.on_toggle()


@dataclass(frozen=True)
class SearchControl:
    term: str
    placeholder: str
    on_change: Callable[[str], None] = field(repr=False, compare=False)

    def change(self, term: str) -> None:
        self.on_change(term)


@dataclass(frozen=True)
class PaginationControl:
    """
    Pagination widget contract: ``{total_pages, current_page, on_page_changed(page)}``.

    Examples:
        >>> seen = []
        >>> ctl = PaginationControl(total_pages=3, current_page=3, on_page_changed=seen.append)
        >>> ctl.next(); ctl.previous(); seen
        [2]
    """

    total_pages: int
    current_page: int
    on_page_changed: Callable[[int], None] = field(repr=False, compare=False)
    max_buttons: int = MAX_PAGE_BUTTONS

    @property
    def pages(self) -> list[int | str]:
        return page_window(self.current_page, self.total_pages, self.max_buttons)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def go_to(self, page: int | str) -> None:
        if isinstance(page, int) and page != self.current_page:
            self.on_page_changed(page)

    def previous(self) -> None:
        if self.has_previous:
            self.on_page_changed(self.current_page - 1)

    def next(self) -> None:
        if self.has_next:
            self.on_page_changed(self.current_page + 1)


@dataclass(frozen=True)
class ColumnHeaderView:
    """
    One header cell.

    Attributes:
        sort_indicator (str | None): "asc"/"desc" on the active sortable column, else None.
    """

    key: str
    header: Any
    sortable: bool
    sort_indicator: str | None = None
    width: str | None = None
    align: RowAlign | None = None
    on_click: Callable[[], None] | None = field(default=None, repr=False, compare=False)

    def click(self) -> None:
        if self.sortable and self.on_click is not None:
            self.on_click()


@dataclass(frozen=True)
class CellView:
    key: str
    value: Any
    width: str | None = None
    align: RowAlign | None = None
    on_click: Callable[[], None] | None = field(default=None, repr=False, compare=False)

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()


@dataclass(frozen=True)
class RowView:
    id: Any
    record: Any
    selected: bool
    cells: tuple[CellView, ...]
    checkbox: CheckboxControl | None = None


@dataclass(frozen=True)
class PageView:
    """
    Everything the host needs to draw the content branch.

    Attributes:
        headers (tuple[ColumnHeaderView, ...]): Header cells in column order.
        rows (tuple[RowView, ...]): Displayed rows.
        total_rows (int): Number of records after filtering.
        search (SearchControl | None): Present when searchable.
        header_checkbox (CheckboxControl | None): Present when selectable.
        pagination (PaginationControl | None): Present when pagination is enabled.
    """

    headers: tuple[ColumnHeaderView, ...]
    rows: tuple[RowView, ...]
    total_rows: int
    search: SearchControl | None = None
    header_checkbox: CheckboxControl | None = None
    pagination: PaginationControl | None = None
