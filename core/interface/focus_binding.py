"""Read-only views of the focus state for renderers; none of them mutate it."""

from typing import Optional

from application.focus_store import FocusStore
from core.focus.paths import LAYER_FULL_TASK, match_path


class FocusBinding:
    """
    Focus seen from one widget, identified by a path pattern.

    >>> binding = FocusBinding(store, "kanban.board.todo.*")
    >>> binding.is_item_focused("task-001")
    """

    def __init__(self, store: FocusStore, pattern: str):
        self.store = store
        self.pattern = pattern

    @property
    def is_focused(self) -> bool:
        return match_path(self.store.current_path, self.pattern)

    @property
    def focused_item(self) -> Optional[str]:
        return self.store.focused_item if self.is_focused else None

    @property
    def focused_container(self) -> Optional[str]:
        return self.store.focused_container if self.is_focused else None

    def is_item_focused(self, item: str) -> bool:
        return self.is_focused and self.store.focused_item == item


class ExactFocusBinding:
    """Focused when the current path equals ``path`` or lies below it."""

    def __init__(self, store: FocusStore, path: str):
        self.store = store
        self.path = path

    @property
    def is_focused(self) -> bool:
        current = self.store.current_path
        return current == self.path or current.startswith(self.path + ".")


class PanelFocus(FocusBinding):
    """One panel (meta, editor, subtasks) of the detail view at a given stack depth."""

    def __init__(self, store: FocusStore, stack_index: int, panel: str):
        self.panel_path = f"{LAYER_FULL_TASK}.{stack_index}.{panel}"
        super().__init__(store, self.panel_path + ".*")

    @property
    def is_focused(self) -> bool:
        return super().is_focused or self.store.current_path == self.panel_path


__all__ = ["ExactFocusBinding", "FocusBinding", "PanelFocus"]
