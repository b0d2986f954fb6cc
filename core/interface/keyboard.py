"""
The single keyboard entry point of the application.

``GlobalKeyboard.handle_key`` turns a key press into an :class:`Action`, checks
whether it may run while a text field owns input, and routes it to the first
navigation handler that claims it for the current focus path. Widgets never
listen to keys themselves; they read focus through ``FocusBinding``.
"""

import inspect
import logging
from typing import Optional, Sequence

from application.focus_store import FocusStore
from core.focus.handlers import NAVIGATION_HANDLERS
from core.focus.key_bindings import DEFAULT_KEY_BINDINGS, event_to_action, is_global_action
from core.focus.paths import AREA_EDITOR, AREA_META, LAYER_FULL_TASK, LAYER_SEARCH, SEARCH_INPUT_ITEM
from core.focus.types import (
    Action,
    ActionResult,
    FocusPathError,
    KeyBinding,
    KeyEvent,
    NavigationContext,
    NavigationHandler,
    Stores,
)

logger = logging.getLogger("kanban_md.focus")


class GlobalKeyboard:
    def __init__(
        self,
        focus: FocusStore,
        stores: Stores,
        handlers: Sequence[NavigationHandler] = NAVIGATION_HANDLERS,
        bindings: Sequence[KeyBinding] = DEFAULT_KEY_BINDINGS,
    ):
        self.focus = focus
        self.stores = stores
        self.handlers = list(handlers)
        self.bindings = list(bindings)

    def allowed_in_text_field(self, action: Action, event: KeyEvent) -> bool:
        """Global actions always pass; Tab advances fields, ArrowDown leaves the search input."""
        if is_global_action(action):
            return True
        try:
            parsed = self.focus.parsed
        except FocusPathError:
            return False
        if parsed.layer == LAYER_FULL_TASK and parsed.area in (AREA_EDITOR, AREA_META):
            return event.key == "Tab"
        if parsed.layer == LAYER_SEARCH and parsed.item == SEARCH_INPUT_ITEM:
            return event.key in ("Tab", "ArrowDown")
        return False

    def build_context(self) -> NavigationContext:
        return NavigationContext(
            current_path=self.focus.current_path,
            parsed=self.focus.parsed,
            stores=self.stores,
            focus=self.focus.actions(),
        )

    def resolve(self, action: Action) -> Optional[ActionResult]:
        """First non-``None`` result from the handlers whose pattern matches the current path."""
        try:
            ctx = self.build_context()
        except FocusPathError as exc:
            logger.debug("Unparseable focus path %r: %s", self.focus.current_path, exc)
            return None
        for handler in self.handlers:
            if not handler.applies_to(ctx.current_path):
                continue
            result = handler.handle(ctx.parsed, action, ctx)
            if result is not None:
                logger.debug("%s handled %s at %s", handler.name, action.value, ctx.current_path)
                return result
        logger.debug("No handler for %s at %s", action.value, ctx.current_path)
        return None

    async def handle_action(self, action: Action) -> bool:
        result = self.resolve(action)
        if result is None or not result.handled:
            return False
        if result.new_path:
            self.focus.set_path(result.new_path)
        if result.effect is not None:
            outcome = result.effect()
            if inspect.isawaitable(outcome):
                await outcome
        return True

    async def handle_key(self, event: KeyEvent) -> bool:
        """Dispatch one key press; ``True`` means the caller should swallow it."""
        action = event_to_action(event, self.bindings)
        if action is None:
            return False
        if event.in_text_field and not self.allowed_in_text_field(action, event):
            return False
        return await self.handle_action(action)


__all__ = ["GlobalKeyboard"]
