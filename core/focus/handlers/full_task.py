"""
Detail view of a task: three panels side by side.

    meta      fullTask.<n>.meta.<index>          priority, category, users, tags, dates
    editor    fullTask.<n>.editor.<field>        title, description, notes
    subtasks  fullTask.<n>.subtasks.<item>       sub-board of child tasks

``<n>`` is the position of the task in the UI store's detail stack, so a
subtask opened from its parent's sub-board lives at ``<n> + 1``.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional

from application.ui_store import EVENT_SAVE
from core import META_DATE_FIELDS, Task
from core.focus.handlers.columns import carry_slot, column_slots, slot_index
from core.focus.handlers.dialog import request_confirm
from core.focus.handlers.kanban_board import open_task_effect
from core.focus.list_navigation import first_enabled_index, next_index, toggle_selection
from core.focus.paths import (
    AREA_EDITOR,
    AREA_META,
    AREA_SUBTASKS,
    NEW_SUBTASK_ITEM,
    extract_task_id,
    full_task_path,
    task_id_to_subtask_item,
)
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath
from core.interface.i18n import translate

EDITOR_FIELDS = ("title", "description", "notes")

# Maintained by the board itself: creation stamp and the move into "done".
AUTO_DATE_FIELDS = ("created", "completed")

RADIO_FIELDS = ("priority", "category")
CHECKBOX_FIELDS = ("assignees", "tags")


@dataclass(frozen=True)
class MetaItem:
    field: str
    value: Any = None
    label: str = ""
    disabled: bool = False

    @property
    def is_date(self) -> bool:
        return self.field in META_DATE_FIELDS


def build_meta_items(config) -> List[MetaItem]:
    """
    Entries of the meta panel in display order; the focus path addresses them by index.

    ``config`` is anything exposing the board vocabularies (a BoardConfig or the config store).
    """
    items: List[MetaItem] = []
    items.extend(MetaItem("priority", p.value, f"{p.icon} {p.name}") for p in config.priorities)
    items.extend(MetaItem("category", c, c) for c in config.categories)
    items.extend(MetaItem("assignees", u.id, u.display_name or u.id) for u in config.users)
    items.extend(MetaItem("tags", t, f"#{t}") for t in config.tags)
    items.extend(MetaItem(name, None, name, disabled=name in AUTO_DATE_FIELDS) for name in META_DATE_FIELDS)
    return items


def is_meta_item_selected(task: Task, item: MetaItem) -> bool:
    if item.field in RADIO_FIELDS:
        return getattr(task, item.field) == item.value
    if item.field in CHECKBOX_FIELDS:
        return item.value in getattr(task, item.field)
    return False


def _close_effect(ctx: NavigationContext, task_id: str):
    task_store, ui = ctx.stores.task, ctx.stores.ui

    def effect() -> None:
        ui.close_full_task()
        ctx.focus.pop_layer()
        if not ui.is_new_task(task_id):
            return
        ui.mark_task_saved(task_id)
        task = task_store.get_task(task_id)
        if task is not None and not task.title.strip():
            task_store.delete_task(task_id)

    return effect


def _save_effect(ctx: NavigationContext, task_id: str):
    ui = ctx.stores.ui

    def effect() -> None:
        ui.mark_task_saved(task_id)
        ui.close_full_task()
        ctx.focus.pop_layer()
        ui.emit(EVENT_SAVE)

    return effect


def _handle_meta(stack_index: int, item: Optional[str], action: Action, ctx: NavigationContext, task: Task):
    items = build_meta_items(ctx.stores.config)
    index = int(item) if item and item.isdigit() else first_enabled_index(items)

    def meta_path(i: int) -> str:
        return full_task_path(stack_index, AREA_META, str(i))

    if action in (Action.UP, Action.DOWN):
        delta = -1 if action == Action.UP else 1
        new_index = next_index(len(items), index, delta, is_disabled=lambda i: items[i].disabled)
        if new_index != index:
            return ActionResult(handled=True, new_path=meta_path(new_index))
        return ActionResult(handled=True)

    if action == Action.LEFT:
        return ActionResult(handled=True)

    if action == Action.RIGHT:
        return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_EDITOR, EDITOR_FIELDS[0]))

    if action == Action.SELECT:
        if not 0 <= index < len(items) or items[index].disabled:
            return ActionResult(handled=True)
        entry = items[index]
        task_store, ui = ctx.stores.task, ctx.stores.ui

        if entry.is_date:
            return ActionResult(handled=True, effect=lambda: ui.begin_edit(task.id, entry.field))

        def toggle() -> None:
            current = task_store.get_task(task.id)
            if current is None:
                return
            mode = "radio" if entry.field in RADIO_FIELDS else "checkbox"
            value = toggle_selection(mode, getattr(current, entry.field), entry.value)
            task_store.update_task(current.id, {entry.field: "" if value is None else value})

        return ActionResult(handled=True, effect=toggle)

    return None


def _handle_editor(stack_index: int, item: Optional[str], action: Action, ctx: NavigationContext, task: Task):
    index = EDITOR_FIELDS.index(item) if item in EDITOR_FIELDS else 0

    if action == Action.UP:
        if index > 0:
            return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_EDITOR, EDITOR_FIELDS[index - 1]))
        return ActionResult(handled=True)

    if action == Action.DOWN:
        if index < len(EDITOR_FIELDS) - 1:
            return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_EDITOR, EDITOR_FIELDS[index + 1]))
        return ActionResult(handled=True)

    if action == Action.LEFT:
        first = first_enabled_index(build_meta_items(ctx.stores.config))
        return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_META, str(first)))

    if action == Action.RIGHT:
        return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_SUBTASKS, NEW_SUBTASK_ITEM))

    if action == Action.SELECT:
        field_name = EDITOR_FIELDS[index]
        return ActionResult(handled=True, effect=lambda: ctx.stores.ui.begin_edit(task.id, field_name))

    return None


def subtask_slots(ctx: NavigationContext, parent_id: str, column_index: int) -> List[str]:
    """Focusable items of one sub-board column; the sentinel lives in the first column only."""
    column_id = ctx.stores.config.columns[column_index].id
    children = [t for t in ctx.stores.task.get_subtasks(parent_id) if t.status == column_id]
    return column_slots(children, column_index == 0, NEW_SUBTASK_ITEM, task_id_to_subtask_item)


def _subtask_column(ctx: NavigationContext, subtask_id: Optional[str]) -> int:
    if not subtask_id:
        return 0
    subtask = ctx.stores.task.get_task(subtask_id)
    if subtask is None:
        return 0
    columns = ctx.stores.config.columns
    return next((i for i, c in enumerate(columns) if c.id == subtask.status), 0)


def _handle_subtasks(stack_index: int, item: Optional[str], action: Action, ctx: NavigationContext, task: Task):
    columns = ctx.stores.config.columns
    if not columns:
        return ActionResult(handled=True)

    subtask_id = extract_task_id(item)
    column_index = _subtask_column(ctx, subtask_id)
    slots = subtask_slots(ctx, task.id, column_index)
    index = slot_index(slots, item)

    def sub_path(slot: Optional[str]) -> str:
        return full_task_path(stack_index, AREA_SUBTASKS, slot or NEW_SUBTASK_ITEM)

    if action == Action.UP:
        if index > 0:
            return ActionResult(handled=True, new_path=sub_path(slots[index - 1]))
        return ActionResult(handled=True)

    if action == Action.DOWN:
        if index < len(slots) - 1:
            return ActionResult(handled=True, new_path=sub_path(slots[index + 1]))
        return ActionResult(handled=True)

    if action in (Action.LEFT, Action.RIGHT):
        step = -1 if action == Action.LEFT else 1
        target = column_index + step
        while 0 <= target < len(columns):
            target_slots = subtask_slots(ctx, task.id, target)
            if target_slots:
                return ActionResult(handled=True, new_path=sub_path(carry_slot(index, target_slots)))
            target += step
        if action == Action.LEFT:
            return ActionResult(handled=True, new_path=full_task_path(stack_index, AREA_EDITOR, EDITOR_FIELDS[0]))
        return ActionResult(handled=True)

    if action == Action.SELECT:
        if item == NEW_SUBTASK_ITEM:
            parent_id, column_id = task.id, columns[0].id

            def create() -> None:
                child = ctx.stores.task.create_task(column_id, {"title": "", "parent_id": parent_id})
                open_task_effect(ctx, child.id, is_new=True)()

            return ActionResult(handled=True, effect=create)
        if subtask_id:
            return ActionResult(handled=True, effect=open_task_effect(ctx, subtask_id))
        return None

    if action == Action.DELETE:
        if not subtask_id:
            return None
        subtask = ctx.stores.task.get_task(subtask_id)
        if subtask is None:
            return None
        task_store, ui = ctx.stores.task, ctx.stores.ui

        def on_confirm() -> None:
            task_store.delete_task(subtask_id)
            ui.hide_confirm()
            ctx.focus.pop_layer()
            remaining = subtask_slots(ctx, task.id, column_index)
            ctx.focus.set_path(sub_path(carry_slot(index, remaining)))

        def confirm() -> None:
            request_confirm(
                ctx,
                translate("confirm.deleteSubtask.title"),
                translate("confirm.deleteSubtask", title=subtask.title),
                on_confirm,
            )

        return ActionResult(handled=True, effect=confirm)

    if action in (Action.MOVE_LEFT, Action.MOVE_RIGHT):
        target = column_index - 1 if action == Action.MOVE_LEFT else column_index + 1
        if subtask_id and 0 <= target < len(columns):
            target_id = columns[target].id
            return ActionResult(
                handled=True,
                new_path=sub_path(item),
                effect=lambda: ctx.stores.task.move_task(subtask_id, target_id),
            )
        return ActionResult(handled=True)

    return None


_PANELS = {
    AREA_META: _handle_meta,
    AREA_EDITOR: _handle_editor,
    AREA_SUBTASKS: _handle_subtasks,
}


def handle_full_task(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    stack_index = path.stack_index or 0
    stack = ctx.stores.ui.full_task_stack
    if stack_index >= len(stack):
        return None
    task = ctx.stores.task.get_task(stack[stack_index])
    if task is None:
        return None

    if action == Action.BACK:
        return ActionResult(handled=True, effect=_close_effect(ctx, task.id))
    if action == Action.SAVE:
        return ActionResult(handled=True, effect=_save_effect(ctx, task.id))

    panel = _PANELS.get(path.area or "")
    if panel is None:
        return None
    return panel(stack_index, path.item, action, ctx, task)


full_task_handler = NavigationHandler(name="full-task", pattern=re.compile(r"^fullTask\."), handle=handle_full_task)


__all__ = [
    "AUTO_DATE_FIELDS",
    "EDITOR_FIELDS",
    "MetaItem",
    "build_meta_items",
    "full_task_handler",
    "handle_full_task",
    "is_meta_item_selected",
    "subtask_slots",
]
