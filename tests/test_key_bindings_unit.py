import pytest

from core.focus.key_bindings import (
    DEFAULT_KEY_BINDINGS,
    event_to_action,
    get_bindings_for_action,
    get_key_display,
    get_primary_key_for_action,
    is_global_action,
    modifiers_match,
)
from core.focus.types import Action, KeyBinding, KeyEvent, Modifiers


@pytest.mark.parametrize(
    "event,expected",
    [
        (KeyEvent("ArrowUp"), Action.UP),
        (KeyEvent("ArrowDown"), Action.DOWN),
        (KeyEvent("k"), Action.UP),
        (KeyEvent("j"), Action.DOWN),
        (KeyEvent("h"), Action.LEFT),
        (KeyEvent("l"), Action.RIGHT),
        (KeyEvent("Enter"), Action.SELECT),
        (KeyEvent(" "), Action.SELECT),
        (KeyEvent("Escape"), Action.BACK),
        (KeyEvent("Delete"), Action.DELETE),
        (KeyEvent("Backspace"), Action.DELETE),
        (KeyEvent("Tab"), Action.DOWN),
        (KeyEvent("Tab", shift=True), Action.UP),
        (KeyEvent("s", ctrl=True), Action.SAVE),
        (KeyEvent("s", meta=True), Action.SAVE),
        (KeyEvent("f", ctrl=True), Action.SEARCH),
        (KeyEvent("ArrowLeft", ctrl=True), Action.MOVE_LEFT),
        (KeyEvent("ArrowRight", meta=True), Action.MOVE_RIGHT),
        (KeyEvent("h", ctrl=True), Action.MOVE_LEFT),
        (KeyEvent("l", meta=True), Action.MOVE_RIGHT),
    ],
)
def test_default_bindings(event, expected):
    assert event_to_action(event) == expected


@pytest.mark.parametrize(
    "event",
    [
        KeyEvent("x"),
        KeyEvent("s"),
        KeyEvent("f"),
        KeyEvent("j", alt=True),
        KeyEvent("ArrowUp", ctrl=True),
        KeyEvent("Enter", meta=True),
    ],
)
def test_unbound_events(event):
    assert event_to_action(event) is None


def test_accelerator_binding_wins_over_plain_arrow():
    # Ctrl+Left must not fall through to the unqualified ArrowLeft entry.
    assert event_to_action(KeyEvent("ArrowLeft", ctrl=True)) == Action.MOVE_LEFT
    assert event_to_action(KeyEvent("ArrowLeft")) == Action.LEFT


def test_first_matching_binding_wins():
    bindings = [KeyBinding("a", Action.UP), KeyBinding("a", Action.DOWN)]
    assert event_to_action(KeyEvent("a"), bindings) == Action.UP


def test_modifiers_match_rules():
    assert modifiers_match(KeyEvent("x"), None)
    assert modifiers_match(KeyEvent("x", shift=True), None)
    assert not modifiers_match(KeyEvent("x", ctrl=True), None)
    assert modifiers_match(KeyEvent("x", meta=True), Modifiers(ctrl=True))
    assert modifiers_match(KeyEvent("x", ctrl=True), Modifiers(meta=True))
    assert not modifiers_match(KeyEvent("x", ctrl=True, shift=True), Modifiers(ctrl=True))
    assert not modifiers_match(KeyEvent("x"), Modifiers(shift=True))


def test_global_actions():
    assert is_global_action(Action.SAVE)
    assert is_global_action(Action.SEARCH)
    assert is_global_action(Action.BACK)
    assert not is_global_action(Action.DOWN)
    assert not is_global_action(Action.SELECT)


def test_key_display():
    save = KeyBinding("s", Action.SAVE, Modifiers(meta=True))
    assert get_key_display(save, "darwin") == "⌘S"
    assert get_key_display(save, "linux") == "Ctrl+S"
    assert get_key_display(KeyBinding("Tab", Action.UP, Modifiers(shift=True)), "linux") == "Shift+Tab"
    assert get_key_display(KeyBinding("ArrowUp", Action.UP), "linux") == "↑"
    assert get_key_display(KeyBinding(" ", Action.SELECT), "linux") == "Space"


def test_bindings_for_action():
    keys = [b.key for b in get_bindings_for_action(Action.SELECT)]
    assert keys == [" ", "Enter"]
    assert get_primary_key_for_action(Action.SEARCH, "linux") == "Ctrl+F"
    assert get_primary_key_for_action(Action.BACK, "linux") == "Esc"


def test_every_action_is_bound():
    bound = {b.action for b in DEFAULT_KEY_BINDINGS}
    assert bound == set(Action)
