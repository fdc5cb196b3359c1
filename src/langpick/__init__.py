"""langpick: browse a catalog of languages and narrow it with live prefix search.

Example:
    from langpick import Catalog, PickerState, handle_key, classify_key

    state = PickerState.from_catalog(Catalog(["rust", "python", "php"]))
    handle_key(state, classify_key("e"))  # enter search mode
    handle_key(state, classify_key("p"))  # visible: ["php", "python"]
"""

__version__ = "0.1.0"

from .catalog import DEFAULT_LANGUAGES, Catalog
from .filtering import filter_items
from .keys import KeyEvent, KeyKind, classify_key, classify_keys
from .modes import Mode, PickerState, handle_key
from .selection import SelectableList

__all__ = [
    "__version__",
    # Core state
    "Catalog",
    "DEFAULT_LANGUAGES",
    "SelectableList",
    "PickerState",
    "Mode",
    # Operations
    "filter_items",
    "handle_key",
    # Key helpers
    "KeyEvent",
    "KeyKind",
    "classify_key",
    "classify_keys",
]
