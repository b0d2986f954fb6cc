"""Board columns and their task cards."""

import re
from typing import List, Optional

from core.focus.handlers.columns import carry_slot, column_slots, slot_index
from core.focus.handlers.dialog import request_confirm
from core.focus.paths import (
    AREA_EDITOR,
    NEW_TASK_ITEM,
    board_path,
    extract_task_id,
    full_task_path,
    project_id_to_path_item,
    sidebar_path,
    task_id_to_path_item,
)
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath
from core.interface.i18n import translate

EDITOR_TITLE = "title"


def board_slots(ctx: NavigationContext, column_index: int) -> List[str]:
    """Focusable items of a board column, sentinel first when it is the first column."""
    column = ctx.stores.config.columns[column_index]
    return column_slots(
        ctx.stores.task.tasks_by_column(column.id),
        column_index == 0,
        NEW_TASK_ITEM,
        task_id_to_path_item,
    )


def _sidebar_entry(ctx: NavigationContext) -> str:
    project_store = ctx.stores.project
    current = project_store.get_current_project()
    if current is None and project_store.projects:
        current = project_store.projects[0]
    if current is None:
        return sidebar_path()
    return sidebar_path(project_id_to_path_item(current.name))


def _column_path(ctx: NavigationContext, column_index: int, carried: int) -> str:
    column_id = ctx.stores.config.columns[column_index].id
    return board_path(column_id, carry_slot(carried, board_slots(ctx, column_index)))


def open_task_effect(ctx: NavigationContext, task_id: str, is_new: bool = False):
    def effect() -> None:
        ui = ctx.stores.ui
        ui.open_full_task(task_id, is_new)
        ctx.focus.push_layer(full_task_path(len(ui.full_task_stack) - 1, AREA_EDITOR, EDITOR_TITLE))

    return effect


def _delete_effect(ctx: NavigationContext, task_id: str, column_index: int, index: int):
    task_store, ui = ctx.stores.task, ctx.stores.ui

    def on_confirm() -> None:
        task_store.delete_task(task_id)
        ui.hide_confirm()
        ctx.focus.pop_layer()
        ctx.focus.set_path(_column_path(ctx, column_index, index))

    def effect() -> None:
        task = task_store.get_task(task_id)
        if task is None:
            return
        request_confirm(
            ctx,
            translate("confirm.deleteTask.title"),
            translate("confirm.deleteTask", title=task.title),
            on_confirm,
        )

    return effect


def handle_kanban_board(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    columns = ctx.stores.config.columns
    column_index = next((i for i, c in enumerate(columns) if c.id == path.container), -1)
    if column_index == -1:
        return None

    slots = board_slots(ctx, column_index)
    index = slot_index(slots, path.item)
    task_id = extract_task_id(path.item)

    if action == Action.UP:
        if slots and index > 0:
            return ActionResult(handled=True, new_path=board_path(path.container, slots[index - 1]))
        return ActionResult(handled=True)

    if action == Action.DOWN:
        if path.item is None and slots:
            return ActionResult(handled=True, new_path=board_path(path.container, slots[0]))
        if index < len(slots) - 1:
            return ActionResult(handled=True, new_path=board_path(path.container, slots[index + 1]))
        return ActionResult(handled=True)

    if action == Action.LEFT:
        if column_index > 0:
            return ActionResult(handled=True, new_path=_column_path(ctx, column_index - 1, index))
        return ActionResult(handled=True, new_path=_sidebar_entry(ctx))

    if action == Action.RIGHT:
        if column_index < len(columns) - 1:
            return ActionResult(handled=True, new_path=_column_path(ctx, column_index + 1, index))
        return ActionResult(handled=True)

    if action == Action.SELECT:
        if path.item == NEW_TASK_ITEM:
            column_id = path.container

            def create() -> None:
                task = ctx.stores.task.create_task(column_id, {"title": ""})
                open_task_effect(ctx, task.id, is_new=True)()

            return ActionResult(handled=True, effect=create)
        if task_id:
            return ActionResult(handled=True, effect=open_task_effect(ctx, task_id))
        return None

    if action == Action.DELETE:
        if task_id:
            return ActionResult(handled=True, effect=_delete_effect(ctx, task_id, column_index, index))
        return None

    if action in (Action.MOVE_LEFT, Action.MOVE_RIGHT):
        target = column_index - 1 if action == Action.MOVE_LEFT else column_index + 1
        if task_id and 0 <= target < len(columns):
            target_id = columns[target].id
            return ActionResult(
                handled=True,
                new_path=board_path(target_id, path.item),
                effect=lambda: ctx.stores.task.move_task(task_id, target_id),
            )
        return ActionResult(handled=True)

    return None


kanban_board_handler = NavigationHandler(
    name="kanban-board",
    pattern=re.compile(r"^kanban\.board\."),
    handle=handle_kanban_board,
)


__all__ = ["board_slots", "handle_kanban_board", "kanban_board_handler", "open_task_effect"]
