"""Browse/Search mode controller.

``PickerState`` bundles everything the screen shows. ``handle_key`` is the
single update function: it takes one classified key event, mutates the
state in place, and reports whether the user asked to quit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .catalog import Catalog
from .filtering import filter_items
from .keys import KeyEvent, KeyKind
from .selection import SelectableList

logger = logging.getLogger(__name__)


class Mode(Enum):
    """How key presses are interpreted."""

    BROWSE = "browse"
    SEARCH = "search"


@dataclass(frozen=True)
class KeyBindings:
    """Browse-mode command keys."""

    search: str = "e"
    quit: str = "q"


@dataclass
class PickerState:
    """Mutable screen state for one picker session.

    Attributes:
        catalog: Items the query filters over.
        query: Current search text.
        mode: Current key interpretation mode.
        selection: Visible items and cursor, always derived from catalog + query.
        bindings: Browse-mode command keys.
    """

    catalog: Catalog
    query: str = ""
    mode: Mode = Mode.BROWSE
    bindings: KeyBindings = field(default_factory=KeyBindings)
    selection: SelectableList = field(init=False, default_factory=SelectableList)

    def __post_init__(self) -> None:
        self.refilter()

    @classmethod
    def from_catalog(cls, catalog: Catalog, bindings: KeyBindings | None = None) -> PickerState:
        """Create the startup state: empty query, Browse mode, full catalog visible."""
        return cls(catalog=catalog, bindings=bindings or KeyBindings())

    def refilter(self) -> None:
        """Recompute the visible items from the query and re-anchor the cursor."""
        self.selection.reset_selection(filter_items(self.catalog, self.query))

    @property
    def visible_items(self) -> list[str]:
        return self.selection.items

    @property
    def cursor(self) -> int | None:
        return self.selection.cursor


def _handle_browse(state: PickerState, event: KeyEvent) -> bool:
    if event.kind is not KeyKind.CHAR:
        return False
    if event.char == state.bindings.quit:
        logger.debug("Quit requested")
        return True
    if event.char == state.bindings.search:
        state.mode = Mode.SEARCH
        logger.debug("Entered search mode")
    return False


def _handle_search(state: PickerState, event: KeyEvent) -> None:
    if event.kind is KeyKind.CHAR:
        state.query += event.char
    elif event.kind is KeyKind.BACKSPACE:
        state.query = state.query[:-1]
    elif event.kind is KeyKind.ESCAPE:
        state.mode = Mode.BROWSE
        logger.debug("Left search mode with query %r", state.query)
        return
    else:
        return

    # Every edit re-filters and resets the cursor, even if the result is unchanged
    state.refilter()
    logger.debug("Query %r matches %d item(s)", state.query, len(state.selection))


def handle_key(state: PickerState, event: KeyEvent) -> bool:
    """Apply one key event to ``state``.

    Arrow keys move the cursor in either mode before any mode-specific
    handling. In Browse mode the search key switches to Search and the quit
    key ends the session. In Search mode printable characters and backspace
    edit the query, and Escape returns to Browse keeping the query.

    Returns:
        True if the session should end.
    """
    if event.kind is KeyKind.DOWN:
        state.selection.advance()
    elif event.kind is KeyKind.UP:
        state.selection.retreat()

    if state.mode is Mode.BROWSE:
        return _handle_browse(state, event)
    _handle_search(state, event)
    return False
