"""
Core exception types raised by column registry checks, grammar normalization and settings.

Provides typed exceptions for configuration-time failures:
- GrammarError for unknown sort direction / alignment literals.
- ColumnConfigError for an invalid column registry (empty or duplicate keys).
- ViewConfigError for explicitly invalid view settings.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - The filter/sort/paginate stages never raise these; malformed records degrade
      to defined strings instead (see gridview.core.fields.to_text).

Examples:
    Catch a registry failure.

    >>> from gridview.core.columns import ColumnDescriptor, ColumnRegistry
    >>> from gridview.core.errors import ColumnConfigError
    >>> try:
    ...     ColumnRegistry([ColumnDescriptor(key="a"), ColumnDescriptor(key="a")])
    ... except ColumnConfigError as e:
    ...     msg = str(e)
    >>> "duplicate" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "GridError",
    "GrammarError",
    "ColumnConfigError",
    "ViewConfigError",
]


class GridError(Exception):
    """
    Base class for gridview errors.

    Notes:
        Use this as a catch-all for configuration failures surfaced by the library.
    """


class GrammarError(GridError, ValueError):
    """Unknown enum-like literal (e.g., a sort direction other than asc/desc)."""


class ColumnConfigError(GridError, ValueError):
    """
    Raised when a column registry cannot be built.

    Examples:
        - A descriptor with an empty key
        - Two descriptors sharing the same key
    """


class ViewConfigError(GridError, ValueError):
    """
    Raised when view settings are invalid.

    Examples:
        - rows_per_page < 1
        - empty id_key
    """
