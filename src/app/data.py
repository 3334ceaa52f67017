"""
Record sources and column definitions for the gridview Streamlit host.

Loads tabular files (Parquet, CSV, JSON) with polars, converts them to engine
records, and builds a deterministic demo dataset of admin-screen users when no
source is given.

Notes:
    - Loading is IO-bound and wrapped with Streamlit caching (see CacheConfig).
    - The engine never sees DataFrames; loaders return row dicts.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import polars as pl
import streamlit as st

from gridview.core.columns import ColumnDescriptor, ColumnRegistry
from gridview.core.constants import DEFAULT_ID_KEY
from gridview.core.grammar import RowAlign
from gridview.frames import records_from_frame

__all__ = [
    "CacheConfig",
    "SUPPORTED_SUFFIXES",
    "read_frame",
    "load_records",
    "demo_frame",
    "create_demo_dataset",
    "demo_columns",
    "infer_columns",
    "compare_numbers",
]

SUPPORTED_SUFFIXES: tuple[str, ...] = (".parquet", ".csv", ".json")

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders ----------


def read_frame(path: str | Path) -> pl.DataFrame:
    """Read a tabular file into a DataFrame based on its suffix.

    Args:
        path (str | Path): Parquet, CSV or JSON file.

    Returns:
        pl.DataFrame: Loaded frame.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is not supported.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Required file not found: {p}")
    suffix = p.suffix.lower()
    if suffix == ".parquet":
        return pl.read_parquet(p)
    if suffix == ".csv":
        return pl.read_csv(p)
    if suffix == ".json":
        return pl.read_json(p)
    raise ValueError(f"Unsupported source {p.name!r}; expected one of {SUPPORTED_SUFFIXES}")


def _load_records_impl(path: str, id_key: str) -> list[dict[str, Any]]:
    df = read_frame(path)
    return records_from_frame(df, id_key, add_row_index=True)


def load_records(
    path: str, *, id_key: str = DEFAULT_ID_KEY, cfg: CacheConfig = CacheConfig()
) -> list[dict[str, Any]]:
    fn = _get_cached("load_records", cfg, _load_records_impl)
    return fn(path, id_key)  # type: ignore[no-any-return]


# ---------- Demo dataset ----------

_FIRST = ["Ann", "bob", "Cleo", "Dmitri", "Émile", "farah", "Gus", "Hana", "Ivo", "June"]
_LAST = ["Smith", "Okafor", "Lindqvist", "Moreau", "Tanaka"]
_ROLES = ["Admin", "Editor", "Viewer"]
_STATUSES = ["active", "invited", "suspended"]


def demo_frame(n: int = 42) -> pl.DataFrame:
    """Deterministic admin-user table used when no source is configured.

    Args:
        n (int): Number of rows.

    Returns:
        pl.DataFrame: Columns id, name, email, role, status, age.
    """
    ids = list(range(1, n + 1))
    names = [f"{_FIRST[i % len(_FIRST)]} {_LAST[(i // len(_FIRST)) % len(_LAST)]}" for i in ids]
    return pl.DataFrame(
        {
            "id": ids,
            "name": names,
            "email": [f"user{i}@example.com" for i in ids],
            "role": [_ROLES[i % len(_ROLES)] for i in ids],
            "status": [_STATUSES[(i * 7) % len(_STATUSES)] for i in ids],
            "age": [18 + (i * 13) % 50 for i in ids],
        }
    )


def create_demo_dataset(path: Path, n: int = 42) -> Path:
    """Write the demo table to `path` (Parquet), creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    demo_frame(n).write_parquet(path)
    return path


def compare_numbers(a: Any, b: Any) -> int:
    """Numeric comparator for typed columns; None sorts first."""
    if a is None or b is None:
        return (a is not None) - (b is not None)
    return (a > b) - (a < b)


def demo_columns() -> ColumnRegistry:
    """Columns for the demo table (custom render on status, numeric sort on age)."""
    return ColumnRegistry(
        [
            ColumnDescriptor(key="name", header="Name", width="220px"),
            ColumnDescriptor(key="email", header="Email"),
            ColumnDescriptor(key="role", header="Role", sortable=False),
            ColumnDescriptor(
                key="status",
                header="Status",
                render=lambda r: {"active": "🟢", "invited": "🟡"}.get(r["status"], "🔴")
                + " "
                + r["status"],
            ),
            ColumnDescriptor(
                key="age", header="Age", align=RowAlign.RIGHT, compare=compare_numbers
            ),
        ]
    )


def infer_columns(
    records: list[dict[str, Any]], id_key: str = DEFAULT_ID_KEY
) -> ColumnRegistry:
    """One sortable column per field of the first record, except the identity field.

    Numeric fields are right-aligned; ordering stays the default string collation.
    """
    if not records:
        return ColumnRegistry()
    first = records[0]
    return ColumnRegistry(
        ColumnDescriptor(
            key=name,
            header=name.replace("_", " ").title(),
            align=(
                RowAlign.RIGHT
                if isinstance(value, (int, float)) and not isinstance(value, bool)
                else None
            ),
        )
        for name, value in first.items()
        if name != id_key
    )
