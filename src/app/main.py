"""
gridview App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers
all UI composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        uv run python -m app.main --source data/users.parquet --rows-per-page 25

    - Streamlit direct:
        streamlit run src/app/main.py -- --source data/users.parquet --rows-per-page 25
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

from app.ui import streamlit_app


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the gridview UI.

    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.

    Examples:
        uv run python -m app.main --source data/users.csv
        streamlit run src/app/main.py -- --source data/users.csv
    """
    args = list(sys.argv[1:] if argv is None else argv)

    parser = argparse.ArgumentParser(description="gridview Streamlit App")
    parser.add_argument(
        "--source", default=None, help="Parquet/CSV/JSON file to display (demo data if omitted)."
    )
    parser.add_argument(
        "--rows-per-page",
        type=int,
        default=None,
        help="Rows per page (overrides GRIDVIEW_VIEW_ROWS_PER_PAGE and gridview.toml).",
    )
    ns = parser.parse_args(args)

    # If invoked within Streamlit, just render
    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(default_source=ns.source, rows_per_page=ns.rows_per_page)
        return

    # Otherwise, exec streamlit run on this module to take over the process
    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    if ns.source:
        passthrough += ["--source", ns.source]
    if ns.rows_per_page is not None:
        passthrough += ["--rows-per-page", str(int(ns.rows_per_page))]
    if passthrough:
        cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # Support: --source, --rows-per-page after '--' when using `streamlit run`
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--source", default=None)
    parser.add_argument("--rows-per-page", type=int, default=None)
    try:
        ns, _ = parser.parse_known_args(sys.argv[1:])
        streamlit_app(default_source=ns.source, rows_per_page=ns.rows_per_page)
    except SystemExit:
        # Fallback to no-arg render
        streamlit_app()
