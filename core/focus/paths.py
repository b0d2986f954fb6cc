"""Parsing, building and matching of focus paths."""

from typing import List, Optional

from core.task import TASK_ID_PREFIX
from core.focus.types import FocusPath, FocusPathError, ParsedFocusPath

LAYER_KANBAN = "kanban"
LAYER_FULL_TASK = "fullTask"
LAYER_DIALOG = "dialog"
LAYER_SEARCH = "search"

AREA_SIDEBAR = "sidebar"
AREA_BOARD = "board"
AREA_META = "meta"
AREA_EDITOR = "editor"
AREA_SUBTASKS = "subtasks"

NEW_TASK_ITEM = "new-task"
NEW_SUBTASK_ITEM = "new-subtask"
SEARCH_INPUT_ITEM = "input"

_TASK_ITEM_PREFIX = "task-"
_SUBTASK_ITEM_PREFIX = "subtask-"
_PROJECT_ITEM_PREFIX = "project-"
_RESULT_ITEM_PREFIX = "result-"

DEFAULT_COLUMN = "todo"
DEFAULT_PATH: FocusPath = f"{LAYER_KANBAN}.{AREA_BOARD}.{DEFAULT_COLUMN}.{NEW_TASK_ITEM}"


def _segment(parts: List[str], index: int) -> Optional[str]:
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def _rest(parts: List[str], index: int) -> Optional[str]:
    # The trailing field keeps any extra dots (project names may contain them).
    tail = ".".join(parts[index:])
    return tail or None


def parse_path(path: FocusPath) -> ParsedFocusPath:
    """
    Parse a focus path into its structured form.

    >>> parse_path("kanban.board.todo.task-001")
    ParsedFocusPath(layer='kanban', stack_index=None, area='board', container='todo', item='task-001')

    Unknown layers yield a record carrying only ``layer``. A ``fullTask`` path
    without a numeric stack index raises :class:`FocusPathError`.
    """
    parts = path.split(".")
    layer = parts[0]

    if layer == LAYER_KANBAN:
        area = _segment(parts, 1)
        if area == AREA_SIDEBAR:
            return ParsedFocusPath(layer=layer, area=area, item=_rest(parts, 2))
        if area == AREA_BOARD:
            return ParsedFocusPath(layer=layer, area=area, container=_segment(parts, 2), item=_rest(parts, 3))
        return ParsedFocusPath(layer=layer, area=area)

    if layer == LAYER_FULL_TASK:
        raw_index = _segment(parts, 1)
        if raw_index is None or not raw_index.isdigit():
            raise FocusPathError(f"Invalid fullTask stack index in focus path: {path!r}")
        return ParsedFocusPath(
            layer=layer,
            stack_index=int(raw_index),
            area=_segment(parts, 2),
            item=_rest(parts, 3),
        )

    if layer in (LAYER_DIALOG, LAYER_SEARCH):
        return ParsedFocusPath(layer=layer, item=_rest(parts, 1))

    return ParsedFocusPath(layer=layer)


def build_path(parsed: ParsedFocusPath) -> FocusPath:
    """Inverse of :func:`parse_path`."""
    layer = parsed.layer or LAYER_KANBAN
    parts = [layer]

    if layer == LAYER_KANBAN:
        if parsed.area:
            parts.append(parsed.area)
        if parsed.area == AREA_BOARD and parsed.container:
            parts.append(parsed.container)
        if parsed.item:
            parts.append(parsed.item)
    elif layer == LAYER_FULL_TASK:
        parts.append(str(parsed.stack_index or 0))
        if parsed.area:
            parts.append(parsed.area)
        if parsed.item:
            parts.append(parsed.item)
    elif layer in (LAYER_DIALOG, LAYER_SEARCH):
        if parsed.item:
            parts.append(parsed.item)

    return ".".join(parts)


def board_path(column_id: str, item: Optional[str] = None) -> FocusPath:
    return build_path(ParsedFocusPath(layer=LAYER_KANBAN, area=AREA_BOARD, container=column_id, item=item))


def sidebar_path(item: Optional[str] = None) -> FocusPath:
    return build_path(ParsedFocusPath(layer=LAYER_KANBAN, area=AREA_SIDEBAR, item=item))


def full_task_path(stack_index: int, area: str, item: Optional[str] = None) -> FocusPath:
    return build_path(ParsedFocusPath(layer=LAYER_FULL_TASK, stack_index=stack_index, area=area, item=item))


def dialog_path(item: str) -> FocusPath:
    return build_path(ParsedFocusPath(layer=LAYER_DIALOG, item=item))


def search_path(item: str) -> FocusPath:
    return build_path(ParsedFocusPath(layer=LAYER_SEARCH, item=item))


def match_path(path: FocusPath, pattern: str) -> bool:
    """
    Check a path against a glob-like pattern.

    ``*`` matches exactly one segment, ``**`` matches everything after it.
    Matching is by prefix: a path may have more segments than the pattern.
    """
    path_parts = path.split(".")
    pattern_parts = pattern.split(".")

    for index, pattern_part in enumerate(pattern_parts):
        if pattern_part == "**":
            return True
        if pattern_part == "*":
            if index >= len(path_parts):
                return False
            continue
        if index >= len(path_parts) or path_parts[index] != pattern_part:
            return False

    return len(path_parts) >= len(pattern_parts)


def extract_task_id(item: Optional[str]) -> Optional[str]:
    """``task-001`` and ``subtask-001`` decode to ``TASK-001``; sentinels decode to ``None``."""
    if not item or item in (NEW_TASK_ITEM, NEW_SUBTASK_ITEM):
        return None
    if item.startswith(_TASK_ITEM_PREFIX):
        return TASK_ID_PREFIX + item[len(_TASK_ITEM_PREFIX):].upper()
    if item.startswith(_SUBTASK_ITEM_PREFIX):
        return TASK_ID_PREFIX + item[len(_SUBTASK_ITEM_PREFIX):].upper()
    return None


def _task_suffix(task_id: str) -> str:
    return task_id.replace(TASK_ID_PREFIX, "").lower()


def task_id_to_path_item(task_id: str) -> str:
    return _TASK_ITEM_PREFIX + _task_suffix(task_id)


def task_id_to_subtask_item(task_id: str) -> str:
    return _SUBTASK_ITEM_PREFIX + _task_suffix(task_id)


def project_id_to_path_item(project_id: str) -> str:
    return _PROJECT_ITEM_PREFIX + project_id


def extract_project_id(item: Optional[str]) -> Optional[str]:
    if item and item.startswith(_PROJECT_ITEM_PREFIX):
        return item[len(_PROJECT_ITEM_PREFIX):]
    return None


def result_item(index: int) -> str:
    return f"{_RESULT_ITEM_PREFIX}{index}"


def extract_result_index(item: Optional[str]) -> Optional[int]:
    if not item or not item.startswith(_RESULT_ITEM_PREFIX):
        return None
    raw = item[len(_RESULT_ITEM_PREFIX):]
    return int(raw) if raw.isdigit() else None


def get_parent_path(path: FocusPath) -> Optional[FocusPath]:
    parts = path.split(".")
    if len(parts) <= 1:
        return None
    return ".".join(parts[:-1])


def get_sibling_path(path: FocusPath, new_item: str) -> FocusPath:
    parts = path.split(".")
    if len(parts) < 2:
        return path
    parts[-1] = new_item
    return ".".join(parts)


__all__ = [
    "AREA_BOARD",
    "AREA_EDITOR",
    "AREA_META",
    "AREA_SIDEBAR",
    "AREA_SUBTASKS",
    "DEFAULT_COLUMN",
    "DEFAULT_PATH",
    "LAYER_DIALOG",
    "LAYER_FULL_TASK",
    "LAYER_KANBAN",
    "LAYER_SEARCH",
    "NEW_SUBTASK_ITEM",
    "NEW_TASK_ITEM",
    "SEARCH_INPUT_ITEM",
    "board_path",
    "build_path",
    "dialog_path",
    "extract_project_id",
    "extract_result_index",
    "extract_task_id",
    "full_task_path",
    "get_parent_path",
    "get_sibling_path",
    "match_path",
    "parse_path",
    "project_id_to_path_item",
    "result_item",
    "search_path",
    "sidebar_path",
    "task_id_to_path_item",
    "task_id_to_subtask_item",
]
