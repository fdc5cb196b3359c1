"""Pytest fixtures for langpick tests."""

import pytest

from langpick.catalog import Catalog
from langpick.modes import PickerState


@pytest.fixture
def catalog():
    """The three seed languages, sorted."""
    return Catalog(["rust", "python", "php"])


@pytest.fixture
def state(catalog):
    """Startup state over the seed catalog."""
    return PickerState.from_catalog(catalog)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temporary directory and return langpick's dir in it."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    path = tmp_path / "langpick"
    path.mkdir()
    return path


@pytest.fixture
def scripted_keys():
    """Factory for a read_key callable that replays the given keys in order."""
    def _make(*keys: str):
        remaining = list(keys)

        def _read_key() -> str:
            if not remaining:
                raise AssertionError("read_key called after the script ran out")
            return remaining.pop(0)

        return _read_key

    return _make
