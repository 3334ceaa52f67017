"""
gridview.view — control surface over the derivation stages.

## Public API
- TableEngine — owns one table's ViewState, applies interactions, notifies the host,
  gates renders and builds widget views.
- ViewSettings — per-instance options (env > TOML > defaults).
- reduce / derive_view — the pure reducer dispatcher and pipeline composition.
- RenderResult, PageView and widget contracts for host widgets.

## Import DAG discipline
- Depends on stdlib, pydantic, gridview.core and gridview.stages.
- MUST NOT import the app package.
"""

from __future__ import annotations

from .config import ViewSettings
from .engine import TableEngine
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
    "ViewSettings",
    "DerivedView",
    "derive_view",
    "reduce",
    "RenderResult",
    "resolve_gate",
    "CellView",
    "CheckboxControl",
    "ColumnHeaderView",
    "PageView",
    "PaginationControl",
    "RowView",
    "SearchControl",
]
