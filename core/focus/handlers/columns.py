"""Slot arithmetic shared by the board and the detail view's sub-board.

A column is a list of focusable slots. Only the first column carries the
sentinel "create" slot at index 0; every other column starts at its first task.
"""

from typing import Callable, Iterable, List, Optional

from core import Task


def column_slots(
    tasks: Iterable[Task],
    is_first: bool,
    sentinel: str,
    encode: Callable[[str], str],
) -> List[str]:
    slots = [encode(task.id) for task in tasks]
    if is_first:
        slots.insert(0, sentinel)
    return slots


def slot_index(slots: List[str], item: Optional[str]) -> int:
    """Position of ``item`` in ``slots``; 0 when it is absent."""
    if item in slots:
        return slots.index(item)
    return 0


def carry_slot(index: int, slots: List[str]) -> Optional[str]:
    """Slot at ``index`` clamped to the destination; ``None`` for an empty column."""
    if not slots:
        return None
    return slots[max(0, min(index, len(slots) - 1))]


__all__ = ["carry_slot", "column_slots", "slot_index"]
