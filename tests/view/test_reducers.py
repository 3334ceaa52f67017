from __future__ import annotations

import pytest

from gridview.core.columns import ColumnRegistry
from gridview.core.grammar import SortDirection
from gridview.core.state import (
    PageChanged,
    RowToggled,
    SearchChanged,
    SelectionCleared,
    SortRequested,
    ViewState,
    VisibleRowsToggled,
)
from gridview.view.reducers import (
    page_changed,
    reduce,
    row_toggled,
    search_changed,
    selection_cleared,
    sort_requested,
)

COLS = ColumnRegistry([{"key": "name"}, {"key": "email"}, {"key": "role", "sortable": False}])


def _start() -> ViewState:
    return ViewState.initial(first_key=COLS.first_key, rows_per_page=2)


def test_search_resets_page_and_keeps_sort_and_selection() -> None:
    s = page_changed(_start(), 3)
    s = row_toggled(s, 7)
    s = sort_requested(s, "email", COLS)
    out = search_changed(s, "an")
    assert out.search_term == "an"
    assert out.pagination.current_page == 1
    assert out.sort == s.sort
    assert out.selection == {7}


def test_sort_toggle_sequence() -> None:
    s = _start()
    s = sort_requested(s, "name", COLS)
    assert (s.sort.field, s.sort.direction) == ("name", SortDirection.DESC)
    s = sort_requested(s, "name", COLS)
    assert (s.sort.field, s.sort.direction) == ("name", SortDirection.ASC)
    s = sort_requested(s, "name", COLS)
    s = sort_requested(s, "email", COLS)
    assert (s.sort.field, s.sort.direction) == ("email", SortDirection.ASC)


def test_sort_on_non_sortable_column_returns_same_state() -> None:
    s = _start()
    assert sort_requested(s, "role", COLS) is s


def test_sort_does_not_reset_page() -> None:
    s = page_changed(_start(), 2)
    assert sort_requested(s, "email", COLS).pagination.current_page == 2


def test_reducers_do_not_mutate_input_state() -> None:
    s = _start()
    search_changed(s, "x")
    row_toggled(s, 1)
    assert s == _start()


def test_reduce_dispatches_every_action() -> None:
    s = _start()
    s = reduce(s, SearchChanged(term="b"), COLS)
    s = reduce(s, SortRequested(field="name"), COLS)
    s = reduce(s, PageChanged(page=2), COLS)
    s = reduce(s, RowToggled(row_id="r1"), COLS)
    assert s.search_term == "b"
    assert s.sort.direction is SortDirection.DESC
    assert s.pagination.current_page == 2
    assert s.selection == {"r1"}
    s = reduce(s, VisibleRowsToggled(page_ids=("a", "b")), COLS)
    assert s.selection == {"a", "b"}
    assert selection_cleared(s).selection == frozenset()
    assert reduce(s, SelectionCleared(), COLS).selection == frozenset()


def test_reduce_rejects_unknown_action() -> None:
    with pytest.raises(TypeError):
        reduce(_start(), object())  # type: ignore[arg-type]
