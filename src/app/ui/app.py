"""
Streamlit application orchestrator for the gridview demo host.

Responsibilities:
    - Configure the Streamlit page and logging.
    - Resolve view settings (env > TOML > defaults) and the record source.
    - Keep one TableEngine per source in st.session_state so view state survives reruns.
    - Mirror the engine's host callbacks into an event log panel.

Notes:
    - Load failures are fed into the engine's error gate rather than raised.
    - Replacing the source file builds a new engine; reloading the same source only
      replaces records (view state and selection are kept).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import streamlit as st

from app.data import demo_columns, demo_frame, infer_columns, load_records
from gridview.core.columns import ColumnRegistry
from gridview.frames import records_from_frame
from gridview.view.config import ViewSettings
from gridview.view.engine import TableEngine

from .helpers import configure_logging, summarize_selection
from .table import render_table

logger = logging.getLogger(__name__)

_ENGINE_KEY = "gridview_engine"
_SOURCE_KEY = "gridview_source"
_EVENTS_KEY = "gridview_events"
_MAX_EVENTS = 50


def _log_event(kind: str, payload: Any) -> None:
    events: list[str] = st.session_state.setdefault(_EVENTS_KEY, [])
    events.append(f"{kind}: {payload}")
    del events[:-_MAX_EVENTS]


def _build_engine(
    columns: ColumnRegistry, records: list[dict[str, Any]], settings: ViewSettings
) -> TableEngine:
    return TableEngine(
        columns,
        records,
        settings=settings,
        on_sort=lambda field, direction: _log_event("on_sort", f"{field} {direction}"),
        on_search=lambda term: _log_event("on_search", repr(term)),
        on_selection_change=lambda ids: _log_event("on_selection_change", sorted(ids, key=str)),
    )


def needs_rebuild(
    engine: TableEngine | None,
    previous_source: str | None,
    source: str,
    columns: ColumnRegistry | None,
) -> bool:
    """Whether the session engine must be replaced rather than refreshed.

    A new engine is needed on first run, when the source changes, and when the
    freshly loaded columns differ from the engine's registry (a source that
    failed to load earlier, or a file whose schema changed). A failed load
    (`columns` is None) keeps the current engine so its error gate can render.
    """
    if engine is None or previous_source != source:
        return True
    return columns is not None and columns.keys() != engine.columns.keys()


def streamlit_app(
    default_source: str | None = None,
    rows_per_page: int | None = None,
) -> None:
    """Render the gridview demo application.

    Args:
        default_source (str | None): Parquet/CSV/JSON file to display; the built-in
            demo table is used when None.
        rows_per_page (int | None): Overrides the configured page size.

    Returns:
        None
    """
    st.set_page_config(page_title="gridview", layout="wide")
    configure_logging()
    st.markdown("### gridview")

    settings = ViewSettings.load()
    if rows_per_page:
        settings = replace(settings, rows_per_page=int(rows_per_page)).validate()

    source = default_source or ""
    error: str | None = None
    records: list[dict[str, Any]] = []
    columns: ColumnRegistry | None = None

    with st.spinner("Loading records ..."):
        if source:
            try:
                records = load_records(source, id_key=settings.id_key)
                columns = infer_columns(records, settings.id_key)
            except (FileNotFoundError, ValueError) as e:
                error = str(e)
            except Exception as e:  # pragma: no cover
                logger.exception("failed to load %s", source)
                error = f"Failed to load {Path(source).name}: {e}"
        else:
            records = records_from_frame(demo_frame(), settings.id_key, add_row_index=True)
            columns = demo_columns()

    engine: TableEngine | None = st.session_state.get(_ENGINE_KEY)
    if needs_rebuild(engine, st.session_state.get(_SOURCE_KEY), source, columns):
        if engine is not None:
            engine.close()
        engine = _build_engine(columns or ColumnRegistry(), records, settings)
        st.session_state[_ENGINE_KEY] = engine
        st.session_state[_SOURCE_KEY] = source
    elif columns is not None:
        engine.set_records(records)

    c1, c2 = st.columns([0.75, 0.25])
    with c1:
        render_table(
            engine,
            is_error=error is not None,
            error=error,
            empty="No records in this source.",
        )
    with c2:
        st.subheader("Selection")
        st.caption(summarize_selection(engine.selection))
        if st.button("Clear selection", key="gridview_clear"):
            engine.clear_selection()
            st.rerun()
        st.subheader("Host callbacks")
        for line in reversed(st.session_state.get(_EVENTS_KEY, [])):
            st.text(line)
