"""
Core package aggregator for gridview contracts (vocabulary, columns, fields, state).

## Contracts (single source of truth)
- Grammar — SortDirection, RowAlign, RenderGate and normalization helpers.
- Columns — frozen ColumnDescriptor and the static ColumnRegistry.
- Fields — own-field lookup, text coercion and collation keys for opaque records.
- State — frozen pydantic ViewState plus typed user actions.
- Constants/Errors/Typing — defaults, configuration exceptions, aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only.
- Naming policy: enum `.value` strings are lower_snake; host callbacks receive them.

## Downstream usage
- gridview.stages — pure filter/sort/paginate/selection functions over records.
- gridview.view — reducers, settings, render gates and the TableEngine.

## Examples
```python
from gridview.core import ColumnRegistry, ViewState

columns = ColumnRegistry([{"key": "name", "header": "Name"}, {"key": "email"}])
state = ViewState.initial(first_key=columns.first_key)
state.sort.field  # 'name'
```
"""

from __future__ import annotations

from .columns import ColumnDescriptor, ColumnRegistry
from .errors import ColumnConfigError, GrammarError, GridError, ViewConfigError
from .grammar import RenderGate, RowAlign, SortDirection
from .state import PaginationState, SortState, ViewState

__all__ = [
    "ColumnDescriptor",
    "ColumnRegistry",
    "GridError",
    "GrammarError",
    "ColumnConfigError",
    "ViewConfigError",
    "RenderGate",
    "RowAlign",
    "SortDirection",
    "PaginationState",
    "SortState",
    "ViewState",
]
