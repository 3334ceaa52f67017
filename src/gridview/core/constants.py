"""
Gridview core defaults.

Defines the page size, pagination window and identity defaults consumed by the
stages and the view engine. This module is zero-IO and uses only the Python
standard library.

Notes:
    - ViewSettings (gridview.view.config) sources its defaults from here.
    - Changing a default here changes every engine built without explicit settings.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ROWS_PER_PAGE",
    "DEFAULT_ID_KEY",
    "MAX_PAGE_BUTTONS",
    "PAGE_ELLIPSIS",
    "SEARCH_PLACEHOLDER",
]

# Rows shown per page when the host does not configure a page size.
DEFAULT_ROWS_PER_PAGE: int = 10

# Record field holding the identity used by the selection tracker.
DEFAULT_ID_KEY: str = "id"

# Upper bound of numbered page buttons in a pagination window.
MAX_PAGE_BUTTONS: int = 5

# Marker emitted by page_window for elided page ranges.
PAGE_ELLIPSIS: str = "..."

SEARCH_PLACEHOLDER: str = "Search property ..."
