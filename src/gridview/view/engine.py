"""
TableEngine: the control surface that owns one table's view state.

Responsibilities:
    - Hold the static column registry, the host-owned record collection and the
      single immutable ViewState.
    - Apply user interactions through the pure reducers and commit the result.
    - Notify the host (on_sort, on_search, on_selection_change) synchronously,
      once per triggering interaction, after the new state is committed.
    - Gate renders (error, loading, empty, content) and build widget views.

Concurrency:
    Every operation runs to completion on the calling thread. With
    ``ViewSettings.thread_safe`` all transitions share one re-entrant lock and
    callbacks run after the lock is released.

Notes:
    - The engine never mutates records and never revalidates selected ids.
    - Callbacks receive plain values: field key, direction string, search term,
      frozenset of ids.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from contextlib import AbstractContextManager, nullcontext
from functools import partial
from typing import Any

from gridview.core.columns import ColumnDescriptor, ColumnRegistry
from gridview.core.grammar import RenderGate
from gridview.core.state import (
    Action,
    PageChanged,
    RowToggled,
    SearchChanged,
    SelectionCleared,
    SortRequested,
    ViewState,
    VisibleRowsToggled,
)
from gridview.core.typing import (
    RowId,
    SearchCallback,
    Selection,
    SelectionCallback,
    SortCallback,
)
from gridview.stages.selection import page_counts_as_selected, row_ids

from .config import ViewSettings
from .pipeline import DerivedView, derive_view
from .reducers import reduce
from .render import RenderResult, resolve_gate
from .widgets import (
    CellView,
    CheckboxControl,
    ColumnHeaderView,
    PageView,
    PaginationControl,
    RowView,
    SearchControl,
)

__all__ = [
    "TableEngine",
]

logger = logging.getLogger(__name__)


class TableEngine:
    """
    In-memory table view engine.

    Args:
        columns (ColumnRegistry | Iterable[ColumnDescriptor | Mapping]): Static columns.
        records (Sequence[Any]): Initial record collection (host-owned, not copied deeply).
        settings (ViewSettings | None): Engine options; defaults when None.
        on_sort (SortCallback | None): ``(field, direction)`` after a sort change.
        on_search (SearchCallback | None): ``(term)`` after a search change.
        on_selection_change (SelectionCallback | None): ``(ids)`` after any selection change.
        state (ViewState | None): Optional starting state (defaults to ViewState.initial).

    Raises:
        ColumnConfigError: If the columns are invalid.
        ViewConfigError: If the settings are invalid.

    Examples:
        >>> rows = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}, {"id": 3, "name": "cat"}]
        >>> engine = TableEngine([{"key": "name"}], rows)
        >>> [r["name"] for r in engine.derive().page]
        ['Ann', 'Bob', 'cat']
        >>> engine.on_search_term_changed("an")
        >>> [r["id"] for r in engine.derive().page]
        [2]
    """

    def __init__(
        self,
        columns: ColumnRegistry | Iterable[ColumnDescriptor | Mapping[str, Any]],
        records: Sequence[Any] = (),
        *,
        settings: ViewSettings | None = None,
        on_sort: SortCallback | None = None,
        on_search: SearchCallback | None = None,
        on_selection_change: SelectionCallback | None = None,
        state: ViewState | None = None,
    ) -> None:
        self._columns = ColumnRegistry.coerce(columns)
        self._settings = (settings or ViewSettings()).validate()
        self._records: Sequence[Any] = records
        self._state = state or ViewState.initial(
            first_key=self._columns.first_key,
            rows_per_page=self._settings.rows_per_page,
        )
        self._on_sort = on_sort
        self._on_search = on_search
        self._on_selection_change = on_selection_change
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._settings.thread_safe else nullcontext()
        )

    # ------------------------------------------------------------------
    # Read-only surface
    # ------------------------------------------------------------------

    @property
    def columns(self) -> ColumnRegistry:
        return self._columns

    @property
    def settings(self) -> ViewSettings:
        return self._settings

    @property
    def records(self) -> Sequence[Any]:
        return self._records

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def selection(self) -> Selection:
        return self._state.selection

    def is_selected(self, row_id: RowId) -> bool:
        return row_id in self._state.selection

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def dispatch(self, action: Action) -> ViewState:
        """
        Commit `action` and notify the host.

        Args:
            action (Action): Typed action from gridview.core.state.

        Returns:
            ViewState: The committed state.

        Notes:
            A sort request on a non-sortable column leaves the state untouched and
            fires no callback.
        """
        with self._lock:
            before, after = self._commit(action)
        self._after_commit(action, before, after)
        return after

    def _commit(self, action: Action) -> tuple[ViewState, ViewState]:
        # Caller holds the lock.
        before = self._state
        after = reduce(before, action, self._columns)
        self._state = after
        return before, after

    def _after_commit(self, action: Action, before: ViewState, after: ViewState) -> None:
        if after is before:
            logger.debug("ignored %s (no state change)", action.kind)
            return
        logger.debug(
            "%s: search=%r sort=%s:%s page=%d selected=%d",
            action.kind,
            after.search_term,
            after.sort.field,
            after.sort.direction.value,
            after.pagination.current_page,
            len(after.selection),
        )
        self._notify(action, after)

    def _notify(self, action: Action, state: ViewState) -> None:
        if isinstance(action, SearchChanged):
            if self._on_search is not None:
                self._on_search(action.term)
        elif isinstance(action, SortRequested):
            if self._on_sort is not None:
                self._on_sort(state.sort.field, state.sort.direction.value)
        elif isinstance(action, (RowToggled, VisibleRowsToggled, SelectionCleared)):
            if self._on_selection_change is not None:
                self._on_selection_change(state.selection)

    def on_search_term_changed(self, term: str) -> None:
        """Search input ingestion point; resets the page to 1."""
        self.dispatch(SearchChanged(term=term))

    def on_sort_requested(self, key: str) -> None:
        """Header click: flip the active column or switch to `key` ascending."""
        self.dispatch(SortRequested(field=key))

    def on_page_changed(self, page: int) -> None:
        """Move to `page` without clamping; out-of-range pages display no rows."""
        self.dispatch(PageChanged(page=page))

    def toggle_row(self, row_id: RowId) -> None:
        self.dispatch(RowToggled(row_id=row_id))

    def select_all_visible(self) -> None:
        """Header checkbox click, evaluated against the currently displayed page."""
        with self._lock:
            page_ids = row_ids(self.derive().page, self._settings.id_key)
            action = VisibleRowsToggled(page_ids=page_ids)
            before, after = self._commit(action)
        self._after_commit(action, before, after)

    def clear_selection(self) -> None:
        self.dispatch(SelectionCleared())

    def set_records(self, records: Sequence[Any]) -> None:
        """Replace the whole record collection; view state is kept as is."""
        with self._lock:
            self._records = records
        logger.debug("records replaced: %d rows", len(records))

    def close(self) -> None:
        """Teardown: drop the selection and detach host callbacks without notifying."""
        with self._lock:
            self._state = self._state.model_copy(update={"selection": frozenset()})
            self._on_sort = None
            self._on_search = None
            self._on_selection_change = None

    def __enter__(self) -> TableEngine:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Derivation and rendering
    # ------------------------------------------------------------------

    def derive(self) -> DerivedView:
        """Run filter, sort and pagination for the current state."""
        with self._lock:
            return derive_view(
                self._records,
                self._columns,
                self._state,
                paginate=self._settings.pagination,
            )

    def render(
        self,
        *,
        is_error: bool = False,
        error: Any = None,
        is_loading: bool = False,
        loading: Any = None,
        empty: Any = None,
    ) -> RenderResult:
        """
        Evaluate render gating and, for content, build the page view.

        Args:
            is_error (bool): Host error flag; wins over everything else.
            error (Any): Node returned for the error gate.
            is_loading (bool): Host loading flag.
            loading (Any): Node returned for the loading gate.
            empty (Any): Node returned when the record collection is empty.

        Returns:
            RenderResult: Gate plus either the host node or a PageView.
        """
        with self._lock:
            gate = resolve_gate(
                is_error=is_error,
                is_loading=is_loading,
                has_records=len(self._records) > 0,
            )
            if gate is RenderGate.ERROR:
                return RenderResult(gate=gate, node=error)
            if gate is RenderGate.LOADING:
                return RenderResult(gate=gate, node=loading)
            if gate is RenderGate.EMPTY:
                return RenderResult(gate=gate, node=empty)
            return RenderResult(gate=gate, page=self._page_view(self.derive(), self._state))

    def _page_view(self, derived: DerivedView, state: ViewState) -> PageView:
        s = self._settings
        ids = row_ids(derived.page, s.id_key)

        headers = tuple(
            ColumnHeaderView(
                key=c.key,
                header=c.header,
                sortable=c.sortable,
                sort_indicator=(
                    state.sort.direction.value
                    if c.sortable and c.key == state.sort.field
                    else None
                ),
                width=c.width,
                align=c.align,
                on_click=partial(self.on_sort_requested, c.key) if c.sortable else None,
            )
            for c in self._columns
        )

        rows = tuple(
            RowView(
                id=rid,
                record=rec,
                selected=rid in state.selection,
                cells=tuple(
                    CellView(
                        key=c.key,
                        value=c.cell_value(rec),
                        width=c.width,
                        align=c.align,
                        on_click=partial(c.on_click, rec) if c.on_click is not None else None,
                    )
                    for c in self._columns
                ),
                checkbox=(
                    CheckboxControl(
                        checked=rid in state.selection,
                        on_toggle=partial(self.toggle_row, rid),
                    )
                    if s.selectable
                    else None
                ),
            )
            for rid, rec in zip(ids, derived.page, strict=True)
        )

        return PageView(
            headers=headers,
            rows=rows,
            total_rows=len(derived.filtered),
            search=(
                SearchControl(
                    term=state.search_term,
                    placeholder=s.search_placeholder,
                    on_change=self.on_search_term_changed,
                )
                if s.searchable
                else None
            ),
            header_checkbox=(
                CheckboxControl(
                    checked=page_counts_as_selected(state.selection, ids),
                    on_toggle=self.select_all_visible,
                )
                if s.selectable
                else None
            ),
            pagination=(
                PaginationControl(
                    total_pages=derived.total_pages,
                    current_page=derived.current_page,
                    on_page_changed=self.on_page_changed,
                    max_buttons=s.max_page_buttons,
                )
                if s.pagination
                else None
            ),
        )
