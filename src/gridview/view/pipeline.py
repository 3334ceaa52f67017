"""
Composition of the derivation stages: records -> filtered -> sorted -> page.

``derive_view`` is a pure function of (records, columns, state); the engine calls
it on every render so derived sets are never cached across state changes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from gridview.core.columns import ColumnRegistry
from gridview.core.state import ViewState
from gridview.stages.filter import filter_records
from gridview.stages.paginate import page_slice, total_pages
from gridview.stages.sort import sort_records

__all__ = [
    "DerivedView",
    "derive_view",
]


@dataclass(frozen=True)
class DerivedView:
    """
    Successive views over the record collection for one state.

    Attributes:
        filtered (tuple[Any, ...]): Records matching the search term, input order.
        ordered (tuple[Any, ...]): Filtered records in sort order.
        page (tuple[Any, ...]): Displayed rows.
        total_pages (int): ``ceil(len(ordered) / rows_per_page)``.
        current_page (int): Page the slice was taken from.
    """

    filtered: tuple[Any, ...]
    ordered: tuple[Any, ...]
    page: tuple[Any, ...]
    total_pages: int
    current_page: int


def derive_view(
    records: Sequence[Any],
    columns: ColumnRegistry,
    state: ViewState,
    *,
    paginate: bool = True,
) -> DerivedView:
    """
    Run filter, sort and pagination for `state`.

    Args:
        records (Sequence[Any]): Source records.
        columns (ColumnRegistry): Static column registry.
        state (ViewState): Current view state.
        paginate (bool): When False the page is the whole ordered set.

    Returns:
        DerivedView: Filtered, ordered and paged records with the page count.
    """
    filtered = filter_records(records, state.search_term, columns)
    ordered = sort_records(filtered, state.sort.field, state.sort.direction, columns)
    rows_per_page = state.pagination.rows_per_page
    current = state.pagination.current_page
    page = page_slice(ordered, current, rows_per_page) if paginate else ordered
    return DerivedView(
        filtered=tuple(filtered),
        ordered=tuple(ordered),
        page=tuple(page),
        total_pages=total_pages(len(ordered), rows_per_page),
        current_page=current,
    )
