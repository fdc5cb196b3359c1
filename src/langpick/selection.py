"""Cursor-bearing list over the currently visible items."""

from __future__ import annotations

from collections.abc import Iterable


class SelectableList:
    """Visible items plus an optional cursor with wrap-around navigation.

    The cursor is ``None`` exactly when there are no items; otherwise it
    indexes into ``items``. Navigation wraps last -> first and first -> last.

    Attributes:
        items: Items currently shown, in display order.
        cursor: Index of the highlighted item, or None when ``items`` is empty.
    """

    def __init__(self, items: Iterable[str] = ()):
        self.items: list[str] = []
        self.cursor: int | None = None
        self.reset_selection(items)

    def advance(self) -> None:
        """Move the cursor down one row, wrapping to the top."""
        if not self.items:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor >= len(self.items) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def retreat(self) -> None:
        """Move the cursor up one row, wrapping to the bottom."""
        if not self.items:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = len(self.items) - 1
        else:
            self.cursor -= 1

    def reset_selection(self, items: Iterable[str]) -> None:
        """Replace the visible items and re-anchor the cursor on the first one."""
        self.items = list(items)
        self.cursor = 0 if self.items else None

    @property
    def selected(self) -> str | None:
        """The highlighted item, if any."""
        if self.cursor is None:
            return None
        return self.items[self.cursor]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"SelectableList(items={self.items!r}, cursor={self.cursor!r})"
