"""Sidebar listing recent projects."""

import re
from typing import Optional

from core.focus.handlers.dialog import request_confirm
from core.focus.paths import NEW_TASK_ITEM, board_path, extract_project_id, project_id_to_path_item, sidebar_path
from core.focus.types import Action, ActionResult, NavigationContext, NavigationHandler, ParsedFocusPath
from core.interface.i18n import translate


def _project_path(name: str) -> str:
    return sidebar_path(project_id_to_path_item(name))


def _first_column_path(ctx: NavigationContext) -> Optional[str]:
    columns = ctx.stores.config.columns
    if not columns:
        return None
    return board_path(columns[0].id, NEW_TASK_ITEM)


def _delete_effect(ctx: NavigationContext, name: str, index: int):
    project_store, ui = ctx.stores.project, ctx.stores.ui

    def on_confirm() -> None:
        project_store.delete_project(name)
        ui.hide_confirm()
        ctx.focus.pop_layer()
        remaining = project_store.projects
        if remaining:
            ctx.focus.set_path(_project_path(remaining[min(index, len(remaining) - 1)].name))
        else:
            ctx.focus.set_path(sidebar_path())

    def effect() -> None:
        request_confirm(
            ctx,
            translate("confirm.deleteProject.title"),
            translate("confirm.deleteProject", name=name),
            on_confirm,
        )

    return effect


def handle_kanban_sidebar(path: ParsedFocusPath, action: Action, ctx: NavigationContext) -> Optional[ActionResult]:
    project_store = ctx.stores.project
    projects = project_store.projects
    name = extract_project_id(path.item)
    index = next((i for i, p in enumerate(projects) if p.name == name), -1) if name else -1

    if action == Action.UP:
        if index > 0:
            return ActionResult(handled=True, new_path=_project_path(projects[index - 1].name))
        return ActionResult(handled=True)

    if action == Action.DOWN:
        if index < len(projects) - 1:
            return ActionResult(handled=True, new_path=_project_path(projects[index + 1].name))
        return ActionResult(handled=True)

    if action == Action.LEFT:
        return ActionResult(handled=True)

    if action in (Action.RIGHT, Action.BACK):
        return ActionResult(handled=True, new_path=_first_column_path(ctx))

    if action == Action.SELECT:
        if index == -1:
            return None
        target = projects[index].name

        async def switch() -> None:
            await project_store.switch_project(target)

        return ActionResult(handled=True, effect=switch)

    if action == Action.DELETE:
        if index == -1:
            return None
        return ActionResult(handled=True, effect=_delete_effect(ctx, projects[index].name, index))

    return None


kanban_sidebar_handler = NavigationHandler(
    name="kanban-sidebar",
    pattern=re.compile(r"^kanban\.sidebar"),
    handle=handle_kanban_sidebar,
)


__all__ = ["handle_kanban_sidebar", "kanban_sidebar_handler"]
