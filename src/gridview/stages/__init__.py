"""
gridview.stages — pure derivation stages over an in-memory record collection.

## Responsibilities
- filter: case-insensitive substring search scoped to registered column keys.
- sort: stable single-column ordering with string collation by default.
- paginate: page counts, page slices and the numbered page window.
- selection: identity-set operations, including the page "select all" rule.

## Import DAG discipline
- Depends only on stdlib and gridview.core.
- MUST NOT import gridview.view or the app package.

## Examples
```python
from gridview.core import ColumnRegistry
from gridview.stages import filter_records, page_slice, sort_records

cols = ColumnRegistry([{"key": "name"}])
rows = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}]
page_slice(sort_records(filter_records(rows, "", cols), "name", "asc", cols), 1, 10)
```
"""

from __future__ import annotations

from .filter import filter_records, matches_term
from .paginate import page_bounds, page_slice, page_window, total_pages
from .selection import (
    is_selected,
    page_counts_as_selected,
    row_ids,
    select_all_visible,
    toggle_id,
)
from .sort import sort_records, sort_value

__all__ = [
    "filter_records",
    "matches_term",
    "sort_records",
    "sort_value",
    "total_pages",
    "page_bounds",
    "page_slice",
    "page_window",
    "row_ids",
    "toggle_id",
    "is_selected",
    "page_counts_as_selected",
    "select_all_visible",
]
