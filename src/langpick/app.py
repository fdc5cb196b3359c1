"""Interaction loop and the Rich/readchar terminal shell around it."""

from __future__ import annotations

import logging
from collections.abc import Callable

import readchar
from rich.console import Console
from rich.live import Live

from .keys import classify_keys
from .modes import PickerState, handle_key
from .screen import Screen

logger = logging.getLogger(__name__)


def run_loop(
    state: PickerState,
    render: Callable[[PickerState], None],
    read_key: Callable[[], str],
) -> PickerState:
    """Render, wait for one key, apply it, repeat until the user quits.

    The quit key in Browse mode is the only way out. Errors raised by
    ``render`` or ``read_key`` propagate unchanged.

    Returns:
        The final state, as it was when the user quit.
    """
    while True:
        render(state)
        key = read_key()
        for event in classify_keys(key):
            logger.debug("Key %r -> %s", key, event.kind.value)
            if handle_key(state, event):
                return state


def run_picker(
    state: PickerState,
    console: Console | None = None,
    screen: Screen | None = None,
    read_key: Callable[[], str] = readchar.readkey,
) -> PickerState:
    """Run the picker on the alternate screen until the user quits.

    Args:
        state: Initial picker state; mutated in place.
        console: Rich Console to draw on (auto-created if None).
        screen: Renderer for the state (built on ``console`` if None).
        read_key: Blocking key source, ``readchar.readkey`` by default.

    Returns:
        The final state.
    """
    console = console or Console()
    screen = screen or Screen(console=console)

    with Live(
        screen.render(state),
        console=console,
        screen=True,
        auto_refresh=False,
        transient=True,
    ) as live:

        def _render(current: PickerState) -> None:
            live.update(screen.render(current), refresh=True)

        return run_loop(state, _render, read_key)
