"""
Top-level Streamlit app package.

This package hosts the interactive gridview demo (Streamlit), decoupled from the
gridview.* library modules. The engine, stages and widget contracts live under
gridview.*; the Streamlit shell, record loaders and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    gridview-app = app.main:main
"""
