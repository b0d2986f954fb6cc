"""Stateless list-navigation helpers shared by the navigation handlers."""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Union

SelectionValue = Union[Any, List[Any], None]


@dataclass(frozen=True)
class ListItem:
    id: str
    value: Any = None
    disabled: bool = False


def _clamp(index: int, count: int) -> int:
    return max(0, min(count - 1, index))


def next_index(
    count: int,
    index: int,
    delta: int,
    *,
    loop: bool = False,
    is_disabled: Optional[Callable[[int], bool]] = None,
) -> int:
    """
    Step ``index`` by ``delta`` inside a list of ``count`` entries.

    Without ``loop`` the result clamps at both ends. Disabled entries are
    skipped in the direction of travel; when no enabled entry is reachable the
    original index is returned unchanged.
    """
    if count <= 0:
        return index
    new_index = (index + delta) % count if loop else _clamp(index + delta, count)
    if is_disabled is None:
        return new_index

    attempts = 0
    while is_disabled(new_index) and attempts < count:
        new_index = (new_index + delta) % count if loop else _clamp(new_index + delta, count)
        attempts += 1
    if is_disabled(new_index):
        return index
    return new_index


def move_in_list(items: Sequence[ListItem], index: int, delta: int, loop: bool = False) -> int:
    return next_index(len(items), index, delta, loop=loop, is_disabled=lambda i: items[i].disabled)


def first_enabled_index(items: Sequence[ListItem]) -> int:
    """Index of the first entry that is not disabled; 0 when every entry is."""
    for idx, item in enumerate(items):
        if not item.disabled:
            return idx
    return 0


def toggle_selection(mode: str, current: SelectionValue, value: Any) -> SelectionValue:
    """
    Radio mode selects ``value`` (selecting it again clears it); checkbox mode
    adds or removes ``value`` from the current list.
    """
    if mode == "radio":
        return None if current == value else value
    values = list(current or [])
    if value in values:
        return [v for v in values if v != value]
    return values + [value]


__all__ = ["ListItem", "first_enabled_index", "move_in_list", "next_index", "toggle_selection"]
