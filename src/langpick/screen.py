"""Rich rendering of the picker state.

Three stacked regions: a help line describing the keys for the current
mode, a bordered search box holding the query, and a bordered list of the
visible items with the cursor row highlighted.
"""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .modes import Mode, PickerState
from .themes import DEFAULT_THEME, Theme


def calculate_visible_range(
    cursor: int | None, total: int, max_visible: int, scroll_offset: int
) -> tuple[int, int]:
    """Return the (start, end) slice that keeps ``cursor`` on screen."""
    if total == 0:
        return 0, 0
    if cursor is not None:
        cursor = max(0, min(cursor, total - 1))
        if cursor < scroll_offset:
            scroll_offset = cursor
        elif cursor >= scroll_offset + max_visible:
            scroll_offset = cursor - max_visible + 1
    scroll_offset = max(0, min(scroll_offset, max(0, total - max_visible)))
    return scroll_offset, min(scroll_offset + max_visible, total)


class Screen:
    """Builds renderables for a PickerState.

    Keeps only the scroll offset between frames; everything else is read
    from the state on each call.

    Args:
        console: Console whose height bounds the list (auto-created if None).
        theme: Visual theme for styling.
    """

    def __init__(self, console: Console | None = None, theme: Theme | None = None):
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self.window_offset = 0

    def _max_visible(self) -> int:
        calculated = self.console.height - self.theme.panel_padding
        return max(self.theme.min_visible_items, calculated)

    def render_help(self, state: PickerState) -> Text:
        """Render the one-line key hint for the current mode."""
        key = self.theme.key_style
        if state.mode is Mode.BROWSE:
            quit_key = escape(state.bindings.quit)
            search_key = escape(state.bindings.search)
            markup = (
                f"Press [{key}]{quit_key}[/{key}] to exit, "
                f"[{key}]{search_key}[/{key}] to start search."
            )
        else:
            markup = f"Press [{key}]Esc[/{key}] to stop editing."
        return Text.from_markup(markup)

    def render_search(self, state: PickerState) -> Panel:
        """Render the bordered query box."""
        if state.mode is Mode.SEARCH:
            content = Text(state.query + self.theme.caret_icon, style=self.theme.search_color)
        else:
            content = Text(state.query)
        return Panel(
            content,
            title=self.theme.search_title,
            title_align="left",
            border_style=self.theme.border_color,
        )

    def render_items(self, state: PickerState) -> Panel:
        """Render the bordered list of visible items with the cursor row highlighted."""
        theme = self.theme
        items = state.visible_items
        cursor = state.cursor
        start, end = calculate_visible_range(
            cursor, len(items), self._max_visible(), self.window_offset
        )
        self.window_offset = start

        lines: list[Text] = []
        if start > 0:
            lines.append(
                Text(f"  {theme.scroll_up_icon} {start} more above", style=theme.dim_color)
            )

        pad = " " * len(theme.highlight_symbol)
        for index in range(start, end):
            if index == cursor:
                lines.append(Text(theme.highlight_symbol + items[index], style=theme.highlight_style))
            else:
                lines.append(Text(pad + items[index]))

        below = len(items) - end
        if below > 0:
            lines.append(
                Text(f"  {theme.scroll_down_icon} {below} more below", style=theme.dim_color)
            )

        if not items:
            lines.append(Text("No matches", style=theme.dim_color))

        return Panel(
            Text("\n").join(lines),
            title=theme.list_title,
            title_align="left",
            border_style=theme.border_color,
        )

    def render(self, state: PickerState) -> RenderableType:
        """Render the whole screen for ``state``."""
        return Group(
            self.render_help(state),
            self.render_search(state),
            self.render_items(state),
        )
