"""
gridview — in-memory tabular data view engine.

Given a finite record collection and a static set of column descriptors, gridview
derives the displayed page by composing search filtering, sorting and pagination,
and tracks a row selection that is independent of what is currently visible.

## Layers
- gridview.core — vocabulary, column registry, field coercion, immutable state.
- gridview.stages — pure filter/sort/paginate/selection functions.
- gridview.view — reducers, settings, render gates, widget contracts, TableEngine.
- gridview.frames — polars DataFrame adapters for hosts.

## Examples
```python
from gridview import TableEngine

rows = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}, {"id": 3, "name": "cat"}]
engine = TableEngine([{"key": "name", "header": "Name"}], rows, on_sort=print)
engine.on_sort_requested("name")  # prints: name desc
result = engine.render()
[row.id for row in result.page.rows]  # [3, 1, 2]
```
"""

from __future__ import annotations

from .core import ColumnDescriptor, ColumnRegistry, RenderGate, RowAlign, SortDirection, ViewState
from .view import RenderResult, TableEngine, ViewSettings

__all__ = [
    "ColumnDescriptor",
    "ColumnRegistry",
    "RenderGate",
    "RowAlign",
    "SortDirection",
    "ViewState",
    "RenderResult",
    "TableEngine",
    "ViewSettings",
]
