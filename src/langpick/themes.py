"""Configurable themes for the picker screen.

The Theme dataclass holds every visual knob (colors, icons, layout).
Config files may override individual fields by name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Visual theme for the picker.

    All colors use Rich style syntax (e.g., "yellow", "bold cyan", "black on white").

    Attributes:
        search_color: Style of the query text while editing.
        highlight_style: Style of the row under the cursor.
        dim_color: Style for secondary text (scroll markers, empty hints).
        key_style: Style for key names in the help line.
        border_color: Border style of both panels.

        highlight_symbol: Prefix drawn on the row under the cursor.
        caret_icon: Drawn after the query while editing.
        scroll_up_icon: Marker for rows hidden above.
        scroll_down_icon: Marker for rows hidden below.

        search_title: Title of the query panel.
        list_title: Title of the items panel.
        min_visible_items: Minimum rows before scrolling.
        panel_padding: Lines reserved for help line, search box and borders.
    """

    # Colors
    search_color: str = "yellow"
    highlight_style: str = "black on white"
    dim_color: str = "dim"
    key_style: str = "bold"
    border_color: str = "default"

    # Icons
    highlight_symbol: str = ">> "
    caret_icon: str = "█"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    search_title: str = "Search"
    list_title: str = "Languages"
    min_visible_items: int = 3
    panel_padding: int = 9


# Default theme used when none is specified
DEFAULT_THEME = Theme()


def theme_from_overrides(overrides: dict[str, Any] | None) -> Theme:
    """Build a Theme from DEFAULT_THEME plus per-field overrides.

    Unknown field names are logged and ignored.
    """
    if not overrides:
        return DEFAULT_THEME
    known = {f.name for f in fields(Theme)}
    accepted = {}
    for name, value in overrides.items():
        if name in known:
            accepted[name] = value
        else:
            logger.warning("Ignoring unknown theme field %r", name)
    return replace(DEFAULT_THEME, **accepted)
