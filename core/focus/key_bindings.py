"""Key bindings: the only place where physical keys are mapped to actions."""

import sys
from typing import Iterable, List, Optional, Sequence

from core.focus.types import Action, KeyBinding, KeyEvent, Modifiers

_CMD = Modifiers(meta=True)
_CTRL = Modifiers(ctrl=True)
_SHIFT = Modifiers(shift=True)

# Order matters: modifier-qualified bindings must precede the bare key,
# the first structurally matching entry wins.
DEFAULT_KEY_BINDINGS: List[KeyBinding] = [
    # Global shortcuts (work even in input fields)
    KeyBinding("s", Action.SAVE, _CMD),
    KeyBinding("s", Action.SAVE, _CTRL),
    KeyBinding("f", Action.SEARCH, _CMD),
    KeyBinding("f", Action.SEARCH, _CTRL),
    # Move task between columns
    KeyBinding("ArrowLeft", Action.MOVE_LEFT, _CMD),
    KeyBinding("ArrowLeft", Action.MOVE_LEFT, _CTRL),
    KeyBinding("ArrowRight", Action.MOVE_RIGHT, _CMD),
    KeyBinding("ArrowRight", Action.MOVE_RIGHT, _CTRL),
    KeyBinding("h", Action.MOVE_LEFT, _CMD),
    KeyBinding("h", Action.MOVE_LEFT, _CTRL),
    KeyBinding("l", Action.MOVE_RIGHT, _CMD),
    KeyBinding("l", Action.MOVE_RIGHT, _CTRL),
    # Tab cycles fields, Shift+Tab backwards
    KeyBinding("Tab", Action.UP, _SHIFT),
    KeyBinding("Tab", Action.DOWN),
    KeyBinding("ArrowUp", Action.UP),
    KeyBinding("ArrowDown", Action.DOWN),
    KeyBinding("ArrowLeft", Action.LEFT),
    KeyBinding("ArrowRight", Action.RIGHT),
    # Vim-style
    KeyBinding("k", Action.UP),
    KeyBinding("j", Action.DOWN),
    KeyBinding("h", Action.LEFT),
    KeyBinding("l", Action.RIGHT),
    KeyBinding(" ", Action.SELECT),
    KeyBinding("Enter", Action.SELECT),
    KeyBinding("Escape", Action.BACK),
    KeyBinding("Delete", Action.DELETE),
    KeyBinding("Backspace", Action.DELETE),
]

# Actions that still work while a text field owns input.
GLOBAL_ACTIONS = frozenset({Action.BACK, Action.SAVE, Action.SEARCH})


def modifiers_match(event: KeyEvent, modifiers: Optional[Modifiers]) -> bool:
    if modifiers is None:
        # Shift is exempt so Shift+Tab can have its own unqualified-looking binding.
        return not event.meta and not event.ctrl and not event.alt

    # Ctrl and Cmd are one "accelerator" modifier.
    wants_accel = bool(modifiers.meta or modifiers.ctrl)
    has_accel = event.meta or event.ctrl
    if wants_accel != has_accel:
        return False
    if bool(modifiers.shift) != event.shift:
        return False
    if bool(modifiers.alt) != event.alt:
        return False
    return True


def event_to_action(event: KeyEvent, bindings: Sequence[KeyBinding] = DEFAULT_KEY_BINDINGS) -> Optional[Action]:
    for binding in bindings:
        if event.key != binding.key:
            continue
        if not modifiers_match(event, binding.modifiers):
            continue
        return binding.action
    return None


def is_global_action(action: Action) -> bool:
    return action in GLOBAL_ACTIONS


_KEY_DISPLAY = {
    "ArrowUp": "↑",
    "ArrowDown": "↓",
    "ArrowLeft": "←",
    "ArrowRight": "→",
    " ": "Space",
    "Escape": "Esc",
    "Delete": "Del",
    "Backspace": "⌫",
    "Enter": "↵",
    "Tab": "Tab",
}


def get_key_display(binding: KeyBinding, platform: Optional[str] = None) -> str:
    """
    Human readable label for a binding, e.g. ``⌘S`` on macOS or ``Ctrl+S`` elsewhere.
    """
    is_mac = (platform or sys.platform) == "darwin"
    mods = binding.modifiers or Modifiers()
    parts: List[str] = []
    if mods.ctrl or mods.meta:
        parts.append("⌘" if is_mac else "Ctrl+")
    if mods.shift:
        parts.append("⇧" if is_mac else "Shift+")
    if mods.alt:
        parts.append("⌥" if is_mac else "Alt+")
    parts.append(_KEY_DISPLAY.get(binding.key, binding.key.upper()))
    return "".join(parts)


def get_bindings_for_action(action: Action, bindings: Iterable[KeyBinding] = DEFAULT_KEY_BINDINGS) -> List[KeyBinding]:
    return [b for b in bindings if b.action == action]


def get_primary_key_for_action(action: Action, platform: Optional[str] = None) -> str:
    found = get_bindings_for_action(action)
    return get_key_display(found[0], platform) if found else ""


__all__ = [
    "DEFAULT_KEY_BINDINGS",
    "GLOBAL_ACTIONS",
    "event_to_action",
    "get_bindings_for_action",
    "get_key_display",
    "get_primary_key_for_action",
    "is_global_action",
    "modifiers_match",
]
