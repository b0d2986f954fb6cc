"""Catch-all handler for actions that do not depend on the focused place."""

from typing import Optional

from application.ui_store import EVENT_SAVE
from core.focus.paths import LAYER_SEARCH, SEARCH_INPUT_ITEM, search_path
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath


def handle_global(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    if action == Action.SEARCH:
        if path.layer == LAYER_SEARCH:
            return None
        return ActionResult(handled=True, effect=lambda: ctx.focus.push_layer(search_path(SEARCH_INPUT_ITEM)))
    if action == Action.SAVE:
        return ActionResult(handled=True, effect=lambda: ctx.stores.ui.emit(EVENT_SAVE))
    return None


# Empty prefix: matches every path, must stay last in the registry.
global_handler = NavigationHandler(name="global", pattern="", handle=handle_global)


__all__ = ["global_handler", "handle_global"]
