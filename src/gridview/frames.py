"""
Polars adapters for host data sources.

The engine works on plain row sequences. Hosts that already hold a
``polars.DataFrame`` convert it once per refresh with records_from_frame; the
resulting dicts are never mutated by the engine.
"""

from __future__ import annotations

from typing import Any

import polars as pl

from gridview.core.constants import DEFAULT_ID_KEY

__all__ = [
    "records_from_frame",
    "frame_from_records",
]


def records_from_frame(
    df: pl.DataFrame, id_key: str = DEFAULT_ID_KEY, *, add_row_index: bool = False
) -> list[dict[str, Any]]:
    """
    Convert a DataFrame into row dicts suitable for TableEngine.

    Args:
        df (pl.DataFrame): Source frame.
        id_key (str): Identity column name.
        add_row_index (bool): When True and `id_key` is absent, number rows from 0
            into `id_key` so every record has an identity.

    Returns:
        list[dict[str, Any]]: One dict per row, in frame order.

    Examples:
        >>> records_from_frame(pl.DataFrame({"name": ["Ann"]}), add_row_index=True)
        [{'id': 0, 'name': 'Ann'}]
    """
    if add_row_index and id_key not in df.columns:
        df = df.with_row_index(name=id_key)
    return df.to_dicts()


def frame_from_records(records: list[Any], columns: list[str] | None = None) -> pl.DataFrame:
    """
    Build a DataFrame from mapping records (e.g. the displayed page, for export).

    Args:
        records (list[Any]): Mapping records.
        columns (list[str] | None): Optional projection in output order.

    Returns:
        pl.DataFrame: Frame with one row per record.
    """
    df = pl.DataFrame([dict(r) for r in records]) if records else pl.DataFrame()
    if columns:
        present = [c for c in columns if c in df.columns]
        df = df.select(present)
    return df
