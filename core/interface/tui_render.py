"""Rendering helpers for KanbanTUI: every view is a list of fragment lines."""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from application.search import build_suggestions, search_results
from core import Task
from core.focus.handlers.dialog import CANCEL, CONFIRM
from core.focus.handlers.full_task import EDITOR_FIELDS, build_meta_items, is_meta_item_selected
from core.focus.key_bindings import get_primary_key_for_action
from core.focus.paths import (
    AREA_EDITOR,
    AREA_META,
    AREA_SUBTASKS,
    LAYER_DIALOG,
    LAYER_FULL_TASK,
    LAYER_SEARCH,
    NEW_SUBTASK_ITEM,
    NEW_TASK_ITEM,
    SEARCH_INPUT_ITEM,
    project_id_to_path_item,
    result_item,
    task_id_to_path_item,
    task_id_to_subtask_item,
)
from core.focus.types import Action
from core.interface.constants import APP_TITLE
from core.interface.focus_binding import ExactFocusBinding, FocusBinding, PanelFocus
from core.interface.i18n import translate
from core.interface.tui_display import display_width, pad_display

Fragment = Tuple[str, str]
Line = List[Fragment]

SIDEBAR_WIDTH = 22
# Terminals have no Cmd key; hints always show the Ctrl spelling.
TERMINAL_PLATFORM = "linux"


def _style(name: str, selected: bool = False) -> str:
    return f"class:{name} class:selected" if selected else f"class:{name}"


def pad_line(line: Line, width: int) -> Line:
    """Cut a fragment line to ``width`` cells and pad it with spaces."""
    result: Line = []
    used = 0
    for style, text in line:
        if used >= width:
            break
        piece = text
        if used + display_width(piece) > width:
            piece = pad_display(piece, width - used)
        result.append((style, piece))
        used += display_width(piece)
    if used < width:
        tail_style = result[-1][0] if result and "selected" in result[-1][0] else ""
        result.append((tail_style, " " * (width - used)))
    return result


def join_columns(blocks: Sequence[List[Line]], widths: Sequence[int], gap: str = " ") -> List[Line]:
    height = max((len(block) for block in blocks), default=0)
    lines: List[Line] = []
    for row in range(height):
        line: Line = []
        for idx, (block, width) in enumerate(zip(blocks, widths)):
            if idx:
                line.append(("class:border", gap))
            cell = block[row] if row < len(block) else []
            line.extend(pad_line(cell, width))
        lines.append(line)
    return lines


def to_formatted_text(lines: Sequence[Line]) -> FormattedText:
    fragments: List[Fragment] = []
    for idx, line in enumerate(lines):
        if idx:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return FormattedText(fragments)


def _header(title: str, focused: bool, width: int) -> List[Line]:
    return [
        [(_style("header.focused" if focused else "header"), title)],
        [("class:border", "─" * max(0, width))],
    ]


def _priority_icon(stores, task: Task) -> Fragment:
    for priority in stores.config.priorities:
        if priority.value == task.priority:
            return (f"class:priority.{priority.value}", priority.icon + " ")
    return ("", "")


def _task_title(task: Task) -> str:
    return task.title.strip() or translate("board.untitled")


def render_card(stores, task: Task, selected: bool) -> List[Line]:
    first: Line = [_priority_icon(stores, task)] if task.priority else []
    first.append((_style("text", selected), f"{task.id} {_task_title(task)}"))
    lines = [first]
    extras = [f"#{tag}" for tag in task.tags] + [f"@{user}" for user in task.assignees]
    if task.category:
        extras.insert(0, task.category)
    if extras:
        lines.append([(_style("tag", selected), "  " + " ".join(extras))])
    children = stores.task.get_subtasks(task.id)
    if children:
        done = sum(1 for child in children if child.status == "done")
        lines.append([(_style("text.dim", selected), f"  ↳ {done}/{len(children)}")])
    return lines


def render_sidebar(tui, width: int) -> List[Line]:
    binding = FocusBinding(tui.focus, "kanban.sidebar")
    store = tui.stores.project
    lines = _header(translate("sidebar.title"), binding.is_focused, width)
    if not store.projects:
        lines.append([(_style("text.dim", binding.is_focused), translate("sidebar.empty"))])
        return lines
    current = store.get_current_project()
    for project in store.projects:
        selected = binding.is_item_focused(project_id_to_path_item(project.name))
        marker = "● " if current is not None and current.id == project.id else "  "
        lines.append([(_style("text", selected), marker + project.name)])
    return lines


def render_column(tui, column, is_first: bool, width: int) -> List[Line]:
    stores = tui.stores
    pattern = f"kanban.board.{column.id}"
    binding = FocusBinding(tui.focus, pattern)
    tasks = stores.task.tasks_by_column(column.id)
    lines = _header(f"{column.name} ({len(tasks)})", binding.is_focused, width)
    if is_first:
        selected = binding.is_item_focused(NEW_TASK_ITEM)
        lines.append([(_style("card.new", selected), translate("board.newTask"))])
    for task in tasks:
        lines.extend(render_card(stores, task, binding.is_item_focused(task_id_to_path_item(task.id))))
    if not tasks:
        empty_focused = ExactFocusBinding(tui.focus, pattern).is_focused and binding.focused_item is None
        lines.append([(_style("text.dimmer", empty_focused), translate("board.noTasks"))])
    return lines


def render_board(tui, width: int) -> List[Line]:
    columns = tui.stores.config.columns
    board_width = max(10, width - SIDEBAR_WIDTH - 1)
    col_width = max(10, (board_width - max(0, len(columns) - 1)) // max(1, len(columns)))
    blocks = [render_sidebar(tui, SIDEBAR_WIDTH)]
    blocks.extend(render_column(tui, column, idx == 0, col_width) for idx, column in enumerate(columns))
    return join_columns(blocks, [SIDEBAR_WIDTH] + [col_width] * len(columns), gap="│")


def render_meta_panel(tui, task: Task, stack_index: int, width: int) -> List[Line]:
    panel = PanelFocus(tui.focus, stack_index, AREA_META)
    lines = _header(translate("detail.meta"), panel.is_focused, width)
    last_group: Optional[str] = None
    for idx, item in enumerate(build_meta_items(tui.stores.config)):
        group = "dates" if item.is_date else item.field
        if group != last_group:
            label = translate(f"detail.{group}")
            lines.append([("class:text.dim", label)])
            last_group = group
        selected = panel.is_item_focused(str(idx))
        if item.is_date:
            value = getattr(task, item.field) or "-"
            style = "text.dimmer" if item.disabled else "text"
            lines.append([(_style(style, selected), f"  {translate('field.' + item.field)}: {value}")])
            continue
        radio = item.field in ("priority", "category")
        checked = is_meta_item_selected(task, item)
        mark = ("(•)" if checked else "( )") if radio else ("[x]" if checked else "[ ]")
        lines.append([(_style("card.checked" if checked else "text", selected), f"  {mark} {item.label}")])
    return lines


def render_editor_panel(tui, task: Task, stack_index: int, width: int) -> List[Line]:
    panel = PanelFocus(tui.focus, stack_index, AREA_EDITOR)
    editing = tui.stores.ui.editing
    lines = _header(translate("detail.editor"), panel.is_focused, width)
    for field_name in EDITOR_FIELDS:
        selected = panel.is_item_focused(field_name)
        marker = " ✎" if editing == (task.id, field_name) else ""
        lines.append([(_style("text.dim", selected), translate(f"field.{field_name}") + marker)])
        value = getattr(task, field_name) or "-"
        for text in value.splitlines()[:6] or ["-"]:
            lines.append([("class:text", "  " + text)])
        lines.append([])
    return lines


def render_subtasks_panel(tui, task: Task, stack_index: int, width: int) -> List[Line]:
    stores = tui.stores
    panel = PanelFocus(tui.focus, stack_index, AREA_SUBTASKS)
    children = stores.task.get_subtasks(task.id)
    lines = _header(translate("detail.subtasks"), panel.is_focused, width)
    for idx, column in enumerate(stores.config.columns):
        in_column = [child for child in children if child.status == column.id]
        if idx and not in_column:
            continue
        lines.append([("class:text.dim", f"{column.name} ({len(in_column)})")])
        if idx == 0:
            selected = panel.is_item_focused(NEW_SUBTASK_ITEM)
            lines.append([(_style("card.new", selected), "  " + translate("detail.newSubtask"))])
        for child in in_column:
            selected = panel.is_item_focused(task_id_to_subtask_item(child.id))
            lines.append([(_style("text", selected), f"  {child.id} {_task_title(child)}")])
    return lines


def _breadcrumb(tui) -> str:
    ids = tui.stores.ui.full_task_stack
    titles = []
    for task_id in ids:
        task = tui.stores.task.get_task(task_id)
        titles.append(f"{task_id} {_task_title(task)}" if task else task_id)
    return " › ".join(titles)


def render_full_task(tui, stack_index: int, width: int) -> List[Line]:
    stack = tui.stores.ui.full_task_stack
    if not 0 <= stack_index < len(stack):
        return []
    task = tui.stores.task.get_task(stack[stack_index])
    if task is None:
        return []
    meta_width = max(18, width // 4)
    sub_width = max(18, width // 4)
    editor_width = max(20, width - meta_width - sub_width - 2)
    body = join_columns(
        [
            render_meta_panel(tui, task, stack_index, meta_width),
            render_editor_panel(tui, task, stack_index, editor_width),
            render_subtasks_panel(tui, task, stack_index, sub_width),
        ],
        [meta_width, editor_width, sub_width],
        gap="│",
    )
    return [[("class:header", _breadcrumb(tui))], []] + body


def render_search(tui, width: int) -> List[Line]:
    ui = tui.stores.ui
    input_binding = ExactFocusBinding(tui.focus, f"{LAYER_SEARCH}.{SEARCH_INPUT_ITEM}")
    lines = _header(translate("search.title"), True, width)
    query = ui.search_query or ""
    if query:
        lines.append([(_style("editor", input_binding.is_focused), f"> {query}▏")])
    else:
        lines.append([(_style("text.dim", input_binding.is_focused), "> " + translate("search.placeholder"))])
    if ui.active_filters:
        chips = " ".join(f"{flt.type}:{flt.value}" for flt in ui.active_filters)
        lines.append([("class:text.dim", translate("search.filters") + " "), ("class:tag", chips)])
    suggestions = build_suggestions(query, tui.stores.config.get_config())
    if suggestions and input_binding.is_focused:
        lines.append([("class:text.dimmer", "  " + "  ".join(s.display for s in suggestions))])
    lines.append([])
    results = search_results(tui.stores.task, ui)
    binding = FocusBinding(tui.focus, LAYER_SEARCH)
    if (query.strip() or ui.active_filters) and not results:
        lines.append([("class:text.dim", translate("search.empty"))])
    for idx, task in enumerate(results):
        selected = binding.is_item_focused(result_item(idx))
        column = next((c.name for c in tui.stores.config.columns if c.id == task.status), task.status)
        lines.append([(_style("text", selected), f"{task.id} {_task_title(task)}"), ("class:text.dim", f"  [{column}]")])
    return lines


def render_dialog(tui, width: int) -> List[Line]:
    dialog = tui.stores.ui.confirm_dialog
    binding = FocusBinding(tui.focus, LAYER_DIALOG)
    box_width = min(width, max(40, display_width(dialog.message) + 4))
    inner = box_width - 2

    def boxed(style: str, text: str) -> Line:
        return [("class:dialog", "│"), (style, pad_display(" " + text, inner)), ("class:dialog", "│")]

    buttons: Line = [("class:dialog", "│ ")]
    for item, label in ((CANCEL, translate("confirm.cancel")), (CONFIRM, translate("confirm.ok"))):
        style = "class:dialog.button.focused" if binding.is_item_focused(item) else "class:dialog.button"
        buttons.append((style, f" {label} "))
        buttons.append(("class:dialog", " "))
    used = sum(display_width(text) for _, text in buttons)
    buttons.append(("class:dialog", " " * max(0, box_width - used - 1) + "│"))

    return [
        [("class:dialog", "┌" + "─" * inner + "┐")],
        boxed("class:dialog.title", dialog.title or translate("confirm.title")),
        boxed("class:dialog", ""),
        boxed("class:dialog", dialog.message),
        boxed("class:dialog", ""),
        buttons,
        [("class:dialog", "└" + "─" * inner + "┘")],
    ]


def _render_layer(tui, layer: str, stack_index: int, width: int) -> List[Line]:
    if layer == LAYER_FULL_TASK:
        return render_full_task(tui, stack_index, width)
    if layer == LAYER_SEARCH:
        return render_search(tui, width)
    return render_board(tui, width)


def render_body(tui, width: int) -> List[Line]:
    focus = tui.focus
    if focus.is_dialog:
        # The dialog floats over whatever layer opened it.
        underlying = focus.path_stack[-1] if focus.path_stack else focus.default_path
        layer = underlying.split(".", 1)[0]
        stack_index = max(0, len(tui.stores.ui.full_task_stack) - 1)
        return render_dialog(tui, width) + [[]] + _render_layer(tui, layer, stack_index, width)
    return _render_layer(tui, focus.layer, focus.full_task_stack_index, width)


def render_status(tui) -> Line:
    project = tui.stores.project.get_current_project()
    parts: Line = [("class:header", f" {APP_TITLE} ")]
    if project is not None:
        parts.append(("class:text", f"· {project.name} "))
    parts.append(("class:text.dimmer", f"· {tui.focus.current_path} "))
    message = getattr(tui, "status_message", "")
    if message:
        style = "class:status.fail" if getattr(tui, "status_is_error", False) else "class:status.ok"
        parts.append((style, f"  {message}"))
    return parts


def render_footer(tui) -> Line:
    editing = tui.stores.ui.editing
    if editing is not None:
        field_label = translate(f"field.{editing[1]}")
        return [("class:status", " " + translate("status.editing", field=field_label))]

    def key(action: Action) -> str:
        return get_primary_key_for_action(action, TERMINAL_PLATFORM)

    hints = translate(
        "footer.hints",
        nav="↑↓←→/hjkl",
        select=key(Action.SELECT),
        delete=key(Action.DELETE),
        move=key(Action.MOVE_LEFT) + "/" + key(Action.MOVE_RIGHT),
        search=key(Action.SEARCH),
        save=key(Action.SAVE),
        back=key(Action.BACK),
    )
    return [("class:status", " " + hints)]


__all__ = [
    "join_columns",
    "pad_line",
    "render_board",
    "render_body",
    "render_card",
    "render_column",
    "render_dialog",
    "render_footer",
    "render_full_task",
    "render_search",
    "render_sidebar",
    "render_status",
    "to_formatted_text",
]
