"""Navigation handlers in dispatch order: the first match that claims an action wins."""

from typing import List

from core.focus.types import NavigationHandler

from .dialog import dialog_handler
from .search import search_handler
from .full_task import full_task_handler
from .kanban_board import kanban_board_handler
from .kanban_sidebar import kanban_sidebar_handler
from .global_actions import global_handler

# Modal layers first, the catch-all last.
NAVIGATION_HANDLERS: List[NavigationHandler] = [
    dialog_handler,
    search_handler,
    full_task_handler,
    kanban_board_handler,
    kanban_sidebar_handler,
    global_handler,
]

__all__ = [
    "NAVIGATION_HANDLERS",
    "dialog_handler",
    "search_handler",
    "full_task_handler",
    "kanban_board_handler",
    "kanban_sidebar_handler",
    "global_handler",
]
