"""
Translate prompt_toolkit key presses into toolkit-neutral :class:`KeyEvent`.

Terminals cannot report Cmd, so the accelerator is always Ctrl here. ``c-h``
arrives as Backspace on most terminals and is mapped to it; Ctrl+Left is the
terminal spelling of "move task left".
"""

from typing import Optional

from prompt_toolkit.keys import Keys

from core.focus.types import KeyEvent

_SPECIAL = {
    Keys.Up: ("ArrowUp", False, False),
    Keys.Down: ("ArrowDown", False, False),
    Keys.Left: ("ArrowLeft", False, False),
    Keys.Right: ("ArrowRight", False, False),
    Keys.ControlUp: ("ArrowUp", True, False),
    Keys.ControlDown: ("ArrowDown", True, False),
    Keys.ControlLeft: ("ArrowLeft", True, False),
    Keys.ControlRight: ("ArrowRight", True, False),
    Keys.ControlM: ("Enter", False, False),
    Keys.ControlJ: ("Enter", False, False),
    Keys.ControlI: ("Tab", False, False),
    Keys.BackTab: ("Tab", False, True),
    Keys.Escape: ("Escape", False, False),
    Keys.Delete: ("Delete", False, False),
    Keys.ControlH: ("Backspace", False, False),
}


def to_key_event(key: str, data: str = "", in_text_field: bool = False) -> Optional[KeyEvent]:
    """
    ``key`` is ``KeyPress.key`` (a :class:`Keys` member or a literal character),
    ``data`` the raw text. Returns ``None`` for keys without a DOM equivalent.
    """
    special = _SPECIAL.get(key)
    if special is not None:
        name, ctrl, shift = special
        return KeyEvent(key=name, ctrl=ctrl, shift=shift, in_text_field=in_text_field)

    value = str(key.value) if isinstance(key, Keys) else str(key)
    if value.startswith("c-") and len(value) == 3:
        return KeyEvent(key=value[2], ctrl=True, in_text_field=in_text_field)
    if len(value) == 1 and value.isprintable():
        return KeyEvent(key=value, shift=value.isupper(), in_text_field=in_text_field)
    if len(data) == 1 and data.isprintable():
        return KeyEvent(key=data, shift=data.isupper(), in_text_field=in_text_field)
    return None


__all__ = ["to_key_event"]
