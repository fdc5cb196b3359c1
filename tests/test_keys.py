from __future__ import annotations

import readchar

from langpick.keys import KeyEvent, KeyKind, classify_key, classify_keys


def test_arrows_are_navigation():
    assert classify_key(readchar.key.UP) == KeyEvent(KeyKind.UP)
    assert classify_key(readchar.key.DOWN) == KeyEvent(KeyKind.DOWN)


def test_printable_character_carries_char():
    assert classify_key("p") == KeyEvent(KeyKind.CHAR, "p")
    assert classify_key(" ") == KeyEvent(KeyKind.CHAR, " ")


def test_backspace_variations():
    for key in ("\x7f", "\b", readchar.key.BACKSPACE):
        assert classify_key(key).kind is KeyKind.BACKSPACE


def test_escape():
    assert classify_key("\x1b").kind is KeyKind.ESCAPE


def test_unrecognized_keys():
    assert classify_key(readchar.key.LEFT).kind is KeyKind.OTHER
    assert classify_key("\r").kind is KeyKind.OTHER
    assert classify_key("\t").kind is KeyKind.OTHER


def test_escape_joined_with_next_key_is_split():
    assert classify_keys("\x1bq") == [KeyEvent(KeyKind.ESCAPE), KeyEvent(KeyKind.CHAR, "q")]
    assert classify_keys("\x1b\x7f") == [KeyEvent(KeyKind.ESCAPE), KeyEvent(KeyKind.BACKSPACE)]


def test_escape_sequences_stay_whole():
    assert classify_keys(readchar.key.UP) == [KeyEvent(KeyKind.UP)]
    assert classify_keys("\x1b\x1b") == [KeyEvent(KeyKind.ESCAPE)]
    assert classify_keys("p") == [KeyEvent(KeyKind.CHAR, "p")]
