"""Confirmation dialog: two buttons, cancel and confirm, navigated horizontally."""

import re
from typing import Callable, Optional

from core.focus.paths import dialog_path
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath

CANCEL = "cancel"
CONFIRM = "confirm"
CONFIRM_BUTTONS = (CANCEL, CONFIRM)


def _close(ctx: NavigationContext) -> ActionResult:
    def effect() -> None:
        ctx.stores.ui.hide_confirm()
        ctx.focus.pop_layer()

    return ActionResult(handled=True, effect=effect)


def request_confirm(ctx: NavigationContext, title: str, message: str, on_confirm: Callable[[], None]) -> None:
    """Open the confirmation dialog on top of the current layer, focused on confirm."""
    ctx.stores.ui.show_confirm(title, message, on_confirm)
    ctx.focus.push_layer(dialog_path(CONFIRM))


def handle_dialog(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    if path.item not in CONFIRM_BUTTONS:
        return _close(ctx) if action == Action.BACK else None

    index = CONFIRM_BUTTONS.index(path.item)

    if action == Action.LEFT:
        if index > 0:
            return ActionResult(handled=True, new_path=dialog_path(CONFIRM_BUTTONS[index - 1]))
        return ActionResult(handled=True)
    if action == Action.RIGHT:
        if index < len(CONFIRM_BUTTONS) - 1:
            return ActionResult(handled=True, new_path=dialog_path(CONFIRM_BUTTONS[index + 1]))
        return ActionResult(handled=True)
    if action in (Action.UP, Action.DOWN):
        return ActionResult(handled=True)
    if action == Action.SELECT:
        if path.item == CANCEL:
            return _close(ctx)
        # The stored callback closes the dialog and pops the layer itself.
        return ActionResult(handled=True, effect=lambda: ctx.stores.ui.confirm_dialog.on_confirm())
    if action == Action.BACK:
        return _close(ctx)
    return None


dialog_handler = NavigationHandler(name="dialog", pattern=re.compile(r"^dialog\."), handle=handle_dialog)


__all__ = ["CANCEL", "CONFIRM", "CONFIRM_BUTTONS", "dialog_handler", "handle_dialog", "request_confirm"]
