from .types import (
    Action,
    ActionResult,
    FocusActions,
    FocusPath,
    FocusPathError,
    KeyBinding,
    KeyEvent,
    Modifiers,
    NavigationContext,
    NavigationHandler,
    ParsedFocusPath,
    Stores,
)
from .paths import build_path, match_path, parse_path
from .key_bindings import DEFAULT_KEY_BINDINGS, event_to_action, is_global_action

__all__ = [
    "Action",
    "ActionResult",
    "FocusActions",
    "FocusPath",
    "FocusPathError",
    "KeyBinding",
    "KeyEvent",
    "Modifiers",
    "NavigationContext",
    "NavigationHandler",
    "ParsedFocusPath",
    "Stores",
    "build_path",
    "match_path",
    "parse_path",
    "DEFAULT_KEY_BINDINGS",
    "event_to_action",
    "is_global_action",
]
