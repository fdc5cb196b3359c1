from __future__ import annotations

import readchar

from langpick.catalog import Catalog
from langpick.keys import classify_key
from langpick.modes import KeyBindings, Mode, PickerState, handle_key


def _press(state: PickerState, *keys: str) -> bool:
    quit_requested = False
    for key in keys:
        quit_requested = handle_key(state, classify_key(key))
    return quit_requested


def test_initial_state_shows_full_catalog(state):
    assert state.mode is Mode.BROWSE
    assert state.query == ""
    assert state.visible_items == ["php", "python", "rust"]
    assert state.cursor == 0


def test_search_key_enters_search_mode(state):
    assert _press(state, "e") is False
    assert state.mode is Mode.SEARCH


def test_quit_key_in_browse_ends_session(state):
    assert _press(state, "q") is True


def test_other_keys_in_browse_are_ignored(state):
    assert _press(state, "x", "\x7f", "\x1b") is False
    assert state.mode is Mode.BROWSE
    assert state.query == ""
    assert state.visible_items == ["php", "python", "rust"]


def test_typing_filters_and_resets_cursor(state):
    _press(state, "e", "p")
    assert state.visible_items == ["php", "python"]
    assert state.cursor == 0

    _press(state, "y")
    assert state.query == "py"
    assert state.visible_items == ["python"]
    assert state.cursor == 0

    _press(state, "\x7f")
    assert state.query == "p"
    assert state.visible_items == ["php", "python"]
    assert state.cursor == 0


def test_no_match_clears_cursor_and_advance_is_noop(state):
    _press(state, "e", "z")
    assert state.visible_items == []
    assert state.cursor is None
    _press(state, readchar.key.DOWN)
    assert state.cursor is None


def test_backspace_on_empty_query_is_noop_but_refilters(state):
    _press(state, "e", readchar.key.DOWN)
    assert state.cursor == 1
    _press(state, "\x7f")
    assert state.query == ""
    assert state.visible_items == ["php", "python", "rust"]
    assert state.cursor == 0


def test_quit_and_search_keys_are_text_in_search_mode(state):
    assert _press(state, "e", "q") is False
    assert state.query == "q"
    _press(state, "\x7f", "e")
    assert state.query == "e"
    assert state.mode is Mode.SEARCH


def test_cancel_keeps_query_and_visible_items(state):
    _press(state, "e", "p", readchar.key.DOWN)
    assert state.cursor == 1
    _press(state, "\x1b")
    assert state.mode is Mode.BROWSE
    assert state.query == "p"
    assert state.visible_items == ["php", "python"]
    assert state.cursor == 1


def test_down_wraps_in_browse_mode(state):
    cursors = [state.cursor]
    for _ in range(3):
        _press(state, readchar.key.DOWN)
        cursors.append(state.cursor)
    assert cursors == [0, 1, 2, 0]


def test_up_wraps_in_search_mode(state):
    _press(state, "e", readchar.key.UP)
    assert state.mode is Mode.SEARCH
    assert state.cursor == 2
    assert state.query == ""


def test_unrecognized_key_in_search_is_ignored(state):
    _press(state, "e", "p", readchar.key.DOWN, "\r")
    assert state.query == "p"
    assert state.cursor == 1


def test_custom_bindings():
    state = PickerState.from_catalog(Catalog(["go"]), KeyBindings(search="/", quit="x"))
    assert _press(state, "q") is False
    assert _press(state, "/") is False
    assert state.mode is Mode.SEARCH
    _press(state, "\x1b")
    assert _press(state, "x") is True


def test_direct_construction_shows_filtered_catalog():
    state = PickerState(catalog=Catalog(["b", "a"]))
    assert state.visible_items == ["a", "b"]
    assert state.cursor == 0

    state = PickerState(catalog=Catalog(["rust", "python", "php"]), query="py")
    assert state.visible_items == ["python"]
    assert state.cursor == 0
