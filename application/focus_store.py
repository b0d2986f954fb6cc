"""Focus state: the single source of truth for what owns keyboard input.

Only the dispatcher writes it (directly for ``new_path`` results, or through
the mutators it hands to effects). Everything derived from the path is
recomputed on read.
"""

import logging
from typing import List, Optional

from core.focus.paths import (
    AREA_BOARD,
    AREA_SIDEBAR,
    DEFAULT_PATH,
    LAYER_DIALOG,
    LAYER_FULL_TASK,
    LAYER_KANBAN,
    LAYER_SEARCH,
    NEW_TASK_ITEM,
    board_path,
    match_path,
    parse_path,
)
from core.focus.types import FocusActions, FocusPath, ParsedFocusPath

logger = logging.getLogger("kanban_md.focus")


class FocusStore:
    def __init__(self, default_path: FocusPath = DEFAULT_PATH):
        self.default_path = default_path
        self.current_path: FocusPath = default_path
        self.path_stack: List[FocusPath] = []

    @property
    def parsed(self) -> ParsedFocusPath:
        return parse_path(self.current_path)

    @property
    def layer(self) -> str:
        return self.current_path.split(".", 1)[0]

    @property
    def is_kanban(self) -> bool:
        return self.layer == LAYER_KANBAN

    @property
    def is_full_task(self) -> bool:
        return self.layer == LAYER_FULL_TASK

    @property
    def is_dialog(self) -> bool:
        return self.layer == LAYER_DIALOG

    @property
    def is_search(self) -> bool:
        return self.layer == LAYER_SEARCH

    @property
    def is_sidebar(self) -> bool:
        return self.is_kanban and self.parsed.area == AREA_SIDEBAR

    @property
    def is_board(self) -> bool:
        return self.is_kanban and self.parsed.area == AREA_BOARD

    @property
    def full_task_stack_index(self) -> int:
        if not self.is_full_task:
            return -1
        return self.parsed.stack_index or 0

    @property
    def focused_item(self) -> Optional[str]:
        return self.parsed.item

    @property
    def focused_container(self) -> Optional[str]:
        return self.parsed.container

    @property
    def focused_area(self) -> Optional[str]:
        return self.parsed.area

    @property
    def stack_depth(self) -> int:
        return len(self.path_stack)

    def set_path(self, path: FocusPath) -> None:
        self.current_path = path

    def push_layer(self, path: FocusPath) -> None:
        """Remember the current path and enter a modal layer."""
        self.path_stack.append(self.current_path)
        self.current_path = path
        logger.debug("Pushed %s (depth %d)", path, len(self.path_stack))

    def pop_layer(self) -> Optional[FocusPath]:
        """Restore the path saved by the matching push; an empty stack resets to the default."""
        if self.path_stack:
            self.current_path = self.path_stack.pop()
            logger.debug("Popped back to %s (depth %d)", self.current_path, len(self.path_stack))
            return self.current_path
        logger.debug("Pop on an empty layer stack, resetting to %s", self.default_path)
        self.current_path = self.default_path
        return None

    def matches(self, pattern: str) -> bool:
        return match_path(self.current_path, pattern)

    def is_item_focused(self, pattern: str, item: str) -> bool:
        return self.matches(pattern) and self.focused_item == item

    def reset(self) -> None:
        self.current_path = self.default_path
        self.path_stack = []

    def initialize_with_column(self, column_id: str) -> None:
        self.default_path = board_path(column_id, NEW_TASK_ITEM)
        self.current_path = self.default_path

    def actions(self) -> FocusActions:
        return FocusActions(set_path=self.set_path, push_layer=self.push_layer, pop_layer=self.pop_layer)


__all__ = ["FocusStore"]
