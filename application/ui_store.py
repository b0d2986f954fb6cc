"""UI state that is not focus: open detail views, search, confirm dialog, field editing."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

EVENT_SAVE = "save"

FILTER_TYPES = ("tag", "category", "user", "priority", "text")


@dataclass(frozen=True)
class Filter:
    type: str
    value: str


def _noop() -> None:
    return None


@dataclass
class ConfirmDialog:
    visible: bool = False
    title: str = ""
    message: str = ""
    on_confirm: Callable[[], None] = field(default=_noop)


class UIStore:
    def __init__(self) -> None:
        # Mirrors the fullTask layers of the focus stack, but holds task ids.
        self.full_task_stack: List[str] = []
        self.new_task_ids: Set[str] = set()
        self.search_query = ""
        self.active_filters: List[Filter] = []
        self.confirm_dialog = ConfirmDialog()
        self.editing: Optional[Tuple[str, str]] = None
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    # Detail view stack
    def open_full_task(self, task_id: str, is_new: bool = False) -> None:
        self.full_task_stack.append(task_id)
        if is_new:
            self.new_task_ids.add(task_id)

    def close_full_task(self) -> Optional[str]:
        self.editing = None
        return self.full_task_stack.pop() if self.full_task_stack else None

    def close_all_full_tasks(self) -> None:
        self.editing = None
        self.full_task_stack = []

    def is_new_task(self, task_id: str) -> bool:
        return task_id in self.new_task_ids

    def mark_task_saved(self, task_id: str) -> None:
        self.new_task_ids.discard(task_id)

    # Search
    def add_filter(self, flt: Filter) -> None:
        if flt.type not in FILTER_TYPES:
            raise ValueError(f"Unknown filter type: {flt.type!r}")
        if flt not in self.active_filters:
            self.active_filters.append(flt)

    def remove_filter(self, flt: Filter) -> None:
        self.active_filters = [f for f in self.active_filters if f != flt]

    def clear_filters(self) -> None:
        self.active_filters = []
        self.search_query = ""

    # Confirm dialog
    def show_confirm(self, title: str, message: str, on_confirm: Callable[[], None]) -> None:
        self.confirm_dialog = ConfirmDialog(visible=True, title=title, message=message, on_confirm=on_confirm)

    def hide_confirm(self) -> None:
        self.confirm_dialog.visible = False

    # Field editing
    def begin_edit(self, task_id: str, field_name: str) -> None:
        self.editing = (task_id, field_name)

    def end_edit(self) -> Optional[Tuple[str, str]]:
        current, self.editing = self.editing, None
        return current

    # Events
    def subscribe(self, event: str, callback: Callable[..., Any]) -> Callable[[], None]:
        self._listeners.setdefault(event, []).append(callback)

        def unsubscribe() -> None:
            listeners = self._listeners.get(event, [])
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def emit(self, event: str, **payload: Any) -> None:
        for callback in list(self._listeners.get(event, [])):
            callback(**payload)


__all__ = ["ConfirmDialog", "EVENT_SAVE", "FILTER_TYPES", "Filter", "UIStore"]
