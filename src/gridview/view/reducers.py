"""
Pure reducers mapping (ViewState, action) to the next ViewState.

Each user interaction has one reducer; ``reduce`` dispatches typed actions from
gridview.core.state. Reducers never touch records and never fire callbacks; the
engine commits the returned state and notifies the host afterwards.

Notes:
    - search_changed resets the page to 1 unconditionally.
    - sort_requested ignores clicks on columns registered with sortable=False.
    - No reducer clears the selection implicitly; only selection_cleared does.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gridview.core.columns import ColumnRegistry
from gridview.core.grammar import next_sort_direction
from gridview.core.state import (
    Action,
    PageChanged,
    RowToggled,
    SearchChanged,
    SelectionCleared,
    SortRequested,
    SortState,
    ViewState,
    VisibleRowsToggled,
)
from gridview.core.typing import RowId
from gridview.stages.selection import select_all_visible, toggle_id

__all__ = [
    "search_changed",
    "sort_requested",
    "page_changed",
    "row_toggled",
    "visible_rows_toggled",
    "selection_cleared",
    "reduce",
]


def search_changed(state: ViewState, term: str) -> ViewState:
    pagination = state.pagination.model_copy(update={"current_page": 1})
    return state.model_copy(update={"search_term": term, "pagination": pagination})


def sort_requested(
    state: ViewState, field: str, columns: ColumnRegistry | None = None
) -> ViewState:
    """
    Apply a header click.

    Args:
        state (ViewState): Current state.
        field (str): Clicked column key.
        columns (ColumnRegistry | None): Registry used to honour ``sortable``.

    Returns:
        ViewState: Same state object for a non-sortable column, otherwise a state
        whose sort is flipped (same column) or reset to asc on `field`.
    """
    if columns is not None:
        column = columns.get(field)
        if column is not None and not column.sortable:
            return state
    direction = next_sort_direction(state.sort.field, state.sort.direction, field)
    return state.model_copy(update={"sort": SortState(field=field, direction=direction)})


def page_changed(state: ViewState, page: int) -> ViewState:
    pagination = state.pagination.model_copy(update={"current_page": int(page)})
    return state.model_copy(update={"pagination": pagination})


def row_toggled(state: ViewState, row_id: RowId) -> ViewState:
    return state.model_copy(update={"selection": toggle_id(state.selection, row_id)})


def visible_rows_toggled(state: ViewState, page_ids: Sequence[Any]) -> ViewState:
    return state.model_copy(
        update={"selection": select_all_visible(state.selection, tuple(page_ids))}
    )


def selection_cleared(state: ViewState) -> ViewState:
    return state.model_copy(update={"selection": frozenset()})


def reduce(state: ViewState, action: Action, columns: ColumnRegistry | None = None) -> ViewState:
    """
    Dispatch a typed action to its reducer.

    Examples:
        >>> from gridview.core.state import SearchChanged
        >>> s = reduce(ViewState.initial("name"), SearchChanged(term="an"))
        >>> (s.search_term, s.pagination.current_page)
        ('an', 1)
    """
    if isinstance(action, SearchChanged):
        return search_changed(state, action.term)
    if isinstance(action, SortRequested):
        return sort_requested(state, action.field, columns)
    if isinstance(action, PageChanged):
        return page_changed(state, action.page)
    if isinstance(action, RowToggled):
        return row_toggled(state, action.row_id)
    if isinstance(action, VisibleRowsToggled):
        return visible_rows_toggled(state, action.page_ids)
    if isinstance(action, SelectionCleared):
        return selection_cleared(state)
    raise TypeError(f"unsupported action: {action!r}")
