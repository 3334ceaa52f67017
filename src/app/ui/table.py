"""
Streamlit renderer for a gridview TableEngine.

Binds Streamlit widgets to the engine's widget contracts:
- search box -> SearchControl.change
- header buttons -> ColumnHeaderView.click (sortable columns only)
- row / header check buttons -> CheckboxControl.toggle
- pagination buttons -> PaginationControl.previous/next/go_to
- clickable cells -> CellView.click

Notes:
    - All interactions are wired through ``on_click``/``on_change`` callbacks, which
      Streamlit runs before the rerun, so each rerun renders the committed state.
    - The engine lives in st.session_state (see app.ui.app); this module only draws.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from gridview.core.grammar import RenderGate
from gridview.view.engine import TableEngine
from gridview.view.widgets import CheckboxControl, PageView, PaginationControl

from .helpers import format_cell, header_label

_CHECKED = "☑"
_UNCHECKED = "☐"


def _check_button(ctl: CheckboxControl, key: str) -> None:
    st.button(_CHECKED if ctl.checked else _UNCHECKED, key=key, on_click=ctl.toggle)


def _render_search(page: PageView, key_prefix: str) -> None:
    if page.search is None:
        return
    widget_key = f"{key_prefix}_search"
    search = page.search

    def _changed() -> None:
        search.change(st.session_state.get(widget_key, ""))

    st.text_input(
        "Search",
        value=search.term,
        placeholder=search.placeholder,
        key=widget_key,
        on_change=_changed,
        label_visibility="collapsed",
    )


def _render_pagination(ctl: PaginationControl, key_prefix: str) -> None:
    items = ctl.pages
    cols = st.columns(len(items) + 2)
    cols[0].button("‹", key=f"{key_prefix}_prev", disabled=not ctl.has_previous, on_click=ctl.previous)
    for i, item in enumerate(items, start=1):
        if isinstance(item, str):
            cols[i].markdown(item)
            continue
        cols[i].button(
            str(item),
            key=f"{key_prefix}_page_{item}",
            type="primary" if item == ctl.current_page else "secondary",
            on_click=ctl.go_to,
            args=(item,),
        )
    cols[-1].button("›", key=f"{key_prefix}_next", disabled=not ctl.has_next, on_click=ctl.next)


def _render_page(page: PageView, key_prefix: str) -> None:
    _render_search(page, key_prefix)

    with_checks = page.header_checkbox is not None
    widths = ([0.6] if with_checks else []) + [1.0] * len(page.headers)

    head = st.columns(widths)
    offset = 0
    if page.header_checkbox is not None:
        with head[0]:
            _check_button(page.header_checkbox, f"{key_prefix}_select_all")
        offset = 1
    for i, h in enumerate(page.headers):
        with head[i + offset]:
            if h.sortable:
                st.button(
                    header_label(h.header, h.sort_indicator),
                    key=f"{key_prefix}_sort_{h.key}",
                    on_click=h.click,
                )
            else:
                st.markdown(f"**{h.header}**")

    for row in page.rows:
        cols = st.columns(widths)
        if row.checkbox is not None:
            with cols[0]:
                _check_button(row.checkbox, f"{key_prefix}_row_{row.id}")
        for i, cell in enumerate(row.cells):
            with cols[i + offset]:
                text = format_cell(cell.value)
                if cell.on_click is not None:
                    st.button(text, key=f"{key_prefix}_cell_{row.id}_{cell.key}", on_click=cell.click)
                else:
                    st.write(text)

    st.caption(f"{page.total_rows} matching rows")
    if page.pagination is not None and page.pagination.total_pages > 0:
        _render_pagination(page.pagination, key_prefix)


def render_table(
    engine: TableEngine,
    *,
    is_error: bool = False,
    error: Any = None,
    is_loading: bool = False,
    loading: Any = None,
    empty: Any = None,
    key_prefix: str = "gv",
) -> RenderGate:
    """Render one engine through its render gates.

    Args:
        engine (TableEngine): Engine to draw.
        is_error (bool): Show `error` only.
        error (Any): Error message/node.
        is_loading (bool): Show `loading` only.
        loading (Any): Loading message/node.
        empty (Any): Shown when the engine has no records.
        key_prefix (str): Prefix for Streamlit widget keys (one per table on a page).

    Returns:
        RenderGate: The branch that was drawn.
    """
    result = engine.render(
        is_error=is_error, error=error, is_loading=is_loading, loading=loading, empty=empty
    )
    if result.gate is RenderGate.ERROR:
        st.error(result.node or "Failed to load data.")
    elif result.gate is RenderGate.LOADING:
        st.info(result.node or "Loading ...")
    elif result.gate is RenderGate.EMPTY:
        st.caption(result.node or "No data available")
    elif result.page is not None:
        _render_page(result.page, key_prefix)
    return result.gate
