"""Keyboard input helpers for langpick.

Raw keys come from ``readchar.readkey()`` as strings. ``classify_key``
turns them into a ``KeyEvent`` so the mode controller never has to know
about terminal escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import readchar


class KeyKind(Enum):
    """Coarse classification of a key press."""

    CHAR = "char"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A classified key press.

    Attributes:
        kind: What sort of key this was.
        char: The printable character for CHAR events, else "".
    """

    kind: KeyKind
    char: str = ""


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_up(key: str) -> bool:
    """Check if key is the up arrow."""
    return key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is the down arrow."""
    return key == readchar.key.DOWN


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_printable(key: str) -> bool:
    """Check if key is a single printable character."""
    return len(key) == 1 and key.isprintable()


def classify_key(key: str) -> KeyEvent:
    """Classify a raw key string into a KeyEvent."""
    if is_up(key):
        return KeyEvent(KeyKind.UP)
    if is_down(key):
        return KeyEvent(KeyKind.DOWN)
    if is_backspace(key):
        return KeyEvent(KeyKind.BACKSPACE)
    if is_escape(key):
        return KeyEvent(KeyKind.ESCAPE)
    if is_printable(key):
        return KeyEvent(KeyKind.CHAR, key)
    return KeyEvent(KeyKind.OTHER)


def classify_keys(key: str) -> list[KeyEvent]:
    """Classify a raw key string that may hold more than one key press.

    On POSIX, readchar reads ahead after a lone Escape and returns it joined
    with the next key (e.g. ``"\\x1bq"``). That is split into ESCAPE followed
    by the classification of the trailing key. Escape sequences introduced by
    ``[`` or ``O`` are left whole.
    """
    if len(key) == 2 and key[0] == "\x1b" and key[1] not in ("[", "O", "\x1b"):
        return [KeyEvent(KeyKind.ESCAPE), classify_key(key[1])]
    return [classify_key(key)]
