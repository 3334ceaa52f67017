"""
Shared UI helper utilities for the gridview Streamlit application.

Small formatting helpers (sort glyphs, cell text, selection summaries) plus the
app's logging setup. Keeping these here keeps the table renderer lean.

Notes:
    - This module contains no Streamlit state manipulation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any

__all__ = [
    "sort_glyph",
    "header_label",
    "format_cell",
    "summarize_selection",
    "configure_logging",
]

_GLYPHS = {"asc": "▲", "desc": "▼"}


def sort_glyph(indicator: str | None) -> str:
    """Arrow for a header's sort indicator ("" when the column is not sorted)."""
    return _GLYPHS.get(indicator or "", "")


def header_label(header: Any, indicator: str | None) -> str:
    """Header button label, e.g. "Name ▲".

    Args:
        header (Any): Column header content.
        indicator (str | None): "asc", "desc" or None.

    Returns:
        str: Header text followed by the sort glyph when sorted.
    """
    glyph = sort_glyph(indicator)
    return f"{header} {glyph}" if glyph else str(header)


def format_cell(value: Any) -> str:
    """Cell text: "" for None, ``str(value)`` otherwise."""
    if value is None:
        return ""
    return str(value)


def summarize_selection(ids: Iterable[Any], limit: int = 5) -> str:
    """Short human-readable summary of selected ids.

    Args:
        ids (Iterable[Any]): Selected identities.
        limit (int): Maximum ids listed before truncating.

    Returns:
        str: "No rows selected", or "3 selected: 1, 2, 5" (with "…" when truncated).
    """
    ordered = sorted(ids, key=str)
    if not ordered:
        return "No rows selected"
    shown = ", ".join(str(i) for i in ordered[:limit])
    more = "…" if len(ordered) > limit else ""
    return f"{len(ordered)} selected: {shown}{more}"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging for the app from `level` or GRIDVIEW_LOG_LEVEL.

    Returns:
        int: The numeric level applied (WARNING for unknown names).
    """
    name = (level or os.environ.get("GRIDVIEW_LOG_LEVEL") or "WARNING").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return numeric
