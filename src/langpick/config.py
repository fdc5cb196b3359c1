"""YAML-based configuration for langpick.

The config file lives at ``$XDG_CONFIG_HOME/langpick/config.yaml`` and is
deep-merged over DEFAULT_CONFIG. A missing file means defaults.
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from .catalog import DEFAULT_LANGUAGES, Catalog
from .modes import KeyBindings
from .themes import DEFAULT_THEME, Theme, theme_from_overrides

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "languages": list(DEFAULT_LANGUAGES),
    "debug": False,
    "keys": {
        "search": "e",
        "quit": "q",
    },
    "theme": {},
}


class ConfigError(ValueError):
    """Raised when the config file holds values the picker cannot use."""


def get_config_dir() -> Path:
    """Get the langpick config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "langpick"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file merged over the defaults.

    Malformed or unreadable files fall back to the defaults with a warning.
    """
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if data is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def _validate_key(name: str, value: Any) -> None:
    if not isinstance(value, str) or len(value) != 1 or not value.isprintable():
        raise ConfigError(f"keys.{name} must be a single printable character, got {value!r}")


def _validate_theme(theme: dict[str, Any]) -> None:
    known = {f.name for f in fields(Theme)}
    for name, value in theme.items():
        if name not in known:
            continue
        expected = type(getattr(DEFAULT_THEME, name))
        if type(value) is not expected:
            raise ConfigError(f"theme.{name} must be {expected.__name__}, got {value!r}")
        if expected is int and value < 0:
            raise ConfigError(f"theme.{name} must not be negative, got {value!r}")
    if theme.get("min_visible_items", 1) < 1:
        raise ConfigError("theme.min_visible_items must be at least 1")


def validate_config(cfg: dict[str, Any]) -> None:
    """Check the values the picker depends on.

    Raises:
        ConfigError: If languages, key bindings, debug or theme values are unusable.
    """
    if not isinstance(cfg.get("debug"), bool):
        raise ConfigError(f"debug must be true or false, got {cfg.get('debug')!r}")

    languages = cfg.get("languages")
    if not isinstance(languages, list):
        raise ConfigError("languages must be a list of strings")
    for item in languages:
        if not isinstance(item, str):
            raise ConfigError(f"languages entries must be strings, got {item!r}")

    keys = cfg.get("keys")
    if not isinstance(keys, dict):
        raise ConfigError("keys must be a mapping")
    _validate_key("search", keys.get("search"))
    _validate_key("quit", keys.get("quit"))
    if keys["search"] == keys["quit"]:
        raise ConfigError("keys.search and keys.quit must differ")

    if not isinstance(cfg.get("theme"), dict):
        raise ConfigError("theme must be a mapping")
    _validate_theme(cfg["theme"])


def build_catalog(cfg: dict[str, Any]) -> Catalog:
    """Create the catalog from the configured languages."""
    return Catalog(cfg["languages"])


def build_bindings(cfg: dict[str, Any]) -> KeyBindings:
    """Create the Browse-mode key bindings."""
    keys = cfg["keys"]
    return KeyBindings(search=keys["search"], quit=keys["quit"])


def build_theme(cfg: dict[str, Any]) -> Theme:
    """Create the screen theme from the configured overrides."""
    return theme_from_overrides(cfg.get("theme"))
