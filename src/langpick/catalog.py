"""The immutable catalog of selectable items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DEFAULT_LANGUAGES: tuple[str, ...] = ("rust", "python", "php")


class Catalog:
    """Sorted, read-only sequence of item names.

    Established once at startup and shared by every filter pass.
    Duplicates are kept as given.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = DEFAULT_LANGUAGES):
        items = list(items)
        for item in items:
            if not isinstance(item, str):
                raise TypeError(f"Catalog items must be strings, got {type(item).__name__}")
        self._items: tuple[str, ...] = tuple(sorted(items))

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Catalog):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Catalog({list(self._items)!r})"
