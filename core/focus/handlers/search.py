"""Search overlay: the input field followed by a list of matching tasks."""

import re
from typing import Optional

from application.search import search_results
from core.focus.paths import (
    AREA_EDITOR,
    SEARCH_INPUT_ITEM,
    extract_result_index,
    full_task_path,
    result_item,
    search_path,
)
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath

EDITOR_TITLE = "title"


def handle_search(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    ui = ctx.stores.ui
    results = search_results(ctx.stores.task, ui)
    is_input = path.item == SEARCH_INPUT_ITEM
    index = extract_result_index(path.item)
    if index is None:
        index = -1

    if action == Action.UP:
        if index > 0:
            return ActionResult(handled=True, new_path=search_path(result_item(index - 1)))
        if index == 0:
            return ActionResult(handled=True, new_path=search_path(SEARCH_INPUT_ITEM))
        return ActionResult(handled=True)

    if action == Action.DOWN:
        if is_input and results:
            return ActionResult(handled=True, new_path=search_path(result_item(0)))
        if 0 <= index < len(results) - 1:
            return ActionResult(handled=True, new_path=search_path(result_item(index + 1)))
        return ActionResult(handled=True)

    if action in (Action.LEFT, Action.RIGHT):
        return ActionResult(handled=True)

    if action == Action.SELECT:
        if not 0 <= index < len(results):
            return None
        task_id = results[index].id

        def open_result() -> None:
            ctx.focus.pop_layer()
            ui.open_full_task(task_id)
            ctx.focus.push_layer(full_task_path(len(ui.full_task_stack) - 1, AREA_EDITOR, EDITOR_TITLE))

        return ActionResult(handled=True, effect=open_result)

    if action in (Action.BACK, Action.SEARCH):
        return ActionResult(handled=True, effect=ctx.focus.pop_layer)

    return None


search_handler = NavigationHandler(name="search", pattern=re.compile(r"^search\."), handle=handle_search)


__all__ = ["handle_search", "search_handler"]
