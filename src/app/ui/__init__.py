"""
gridview App UI package.

This package contains the Streamlit UI for the gridview demo host. It exposes the
application orchestrator and the reusable table renderer.

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - table: Draws a TableEngine through its render gates (render_table).
    - helpers: Small formatting helpers and logging setup.

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_source="data/users.parquet", rows_per_page=10)
"""

from __future__ import annotations

from .app import streamlit_app
from .table import render_table

__all__ = [
    "streamlit_app",
    "render_table",
]
