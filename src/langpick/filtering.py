"""Case-insensitive prefix filtering over a catalog."""

from __future__ import annotations

from collections.abc import Iterable


def filter_items(catalog: Iterable[str], query: str) -> list[str]:
    """Return catalog entries starting with ``query``, ignoring case.

    An empty query returns the whole catalog. Catalog order is preserved
    and an empty result is a valid answer.
    """
    if not query:
        return list(catalog)
    needle = query.lower()
    return [item for item in catalog if item.lower().startswith(needle)]
