from __future__ import annotations

from gridview.core.grammar import RenderGate
from gridview.view.render import RenderResult, resolve_gate
from gridview.view.widgets import (
    CellView,
    CheckboxControl,
    ColumnHeaderView,
    PaginationControl,
    SearchControl,
)


def test_resolve_gate_precedence() -> None:
    assert resolve_gate(is_error=True, is_loading=True, has_records=True) is RenderGate.ERROR
    assert resolve_gate(is_error=False, is_loading=True, has_records=False) is RenderGate.LOADING
    assert resolve_gate(is_error=False, is_loading=False, has_records=False) is RenderGate.EMPTY
    assert resolve_gate(is_error=False, is_loading=False, has_records=True) is RenderGate.CONTENT


def test_render_result_defaults() -> None:
    r = RenderResult(gate=RenderGate.EMPTY)
    assert r.node is None and r.page is None


def test_controls_compare_by_content_not_callbacks() -> None:
    a = CheckboxControl(checked=True, on_toggle=lambda: None)
    b = CheckboxControl(checked=True, on_toggle=print)
    assert a == b
    assert "on_toggle" not in repr(a)


def test_search_control_forwards_term() -> None:
    seen: list[str] = []
    SearchControl(term="", placeholder="Search property ...", on_change=seen.append).change("ann")
    assert seen == ["ann"]


def test_pagination_control_ignores_current_and_ellipsis() -> None:
    seen: list[int] = []
    ctl = PaginationControl(total_pages=10, current_page=5, on_page_changed=seen.append)
    assert ctl.pages == ["...", 3, 4, 5, 6, 7, "..."]
    ctl.go_to(5)
    ctl.go_to("...")
    ctl.go_to(7)
    assert seen == [7]


def test_pagination_control_edges() -> None:
    seen: list[int] = []
    last = PaginationControl(total_pages=3, current_page=3, on_page_changed=seen.append)
    assert last.has_previous and not last.has_next
    last.next()
    last.previous()
    assert seen == [2]
    empty = PaginationControl(total_pages=0, current_page=1, on_page_changed=seen.append)
    assert empty.pages == [] and not empty.has_next and not empty.has_previous


def test_header_click_only_when_sortable() -> None:
    clicks: list[str] = []
    ColumnHeaderView(key="a", header="A", sortable=False, on_click=lambda: clicks.append("a")).click()
    ColumnHeaderView(key="b", header="B", sortable=True, on_click=lambda: clicks.append("b")).click()
    assert clicks == ["b"]


def test_cell_without_handler_click_is_noop() -> None:
    CellView(key="a", value=1).click()
