"""Types shared by the focus-path navigation engine.

Focus is a semantic path such as ``kanban.board.todo.task-001`` rather than a
set of numeric indexes scattered across widgets. Handlers read the parsed path,
interpret an abstract :class:`Action` and answer with an :class:`ActionResult`.

Path examples::

    kanban.sidebar.project-abc
    kanban.board.todo.new-task
    kanban.board.process.task-001
    fullTask.0.meta.3
    fullTask.0.editor.title
    fullTask.1.subtasks.subtask-002
    dialog.confirm
    search.input
    search.result-0
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Pattern, Union

if TYPE_CHECKING:  # pragma: no cover
    from application.ports import ConfigStore, ProjectStore, TaskStore, UIStore

FocusPath = str


class Action(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"  # Enter / Space
    BACK = "back"  # Escape
    DELETE = "delete"
    MOVE_LEFT = "move-left"  # accelerator + Left
    MOVE_RIGHT = "move-right"  # accelerator + Right
    SEARCH = "search"  # accelerator + F
    SAVE = "save"  # accelerator + S


class FocusPathError(ValueError):
    """Raised when a focus path cannot be parsed into its layer grammar."""


@dataclass(frozen=True)
class ParsedFocusPath:
    layer: str
    stack_index: Optional[int] = None
    area: Optional[str] = None
    container: Optional[str] = None
    item: Optional[str] = None


@dataclass(frozen=True)
class Modifiers:
    ctrl: Optional[bool] = None
    meta: Optional[bool] = None  # Cmd on macOS
    shift: Optional[bool] = None
    alt: Optional[bool] = None


@dataclass(frozen=True)
class KeyBinding:
    key: str
    action: Action
    modifiers: Optional[Modifiers] = None


@dataclass(frozen=True)
class KeyEvent:
    """Toolkit-neutral key press. ``key`` uses DOM key names (``ArrowUp``, ``Enter``...)."""

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    alt: bool = False
    in_text_field: bool = False


Effect = Callable[[], Union[None, Awaitable[None]]]


@dataclass
class ActionResult:
    handled: bool
    new_path: Optional[FocusPath] = None
    effect: Optional[Effect] = None


@dataclass(frozen=True)
class FocusActions:
    set_path: Callable[[FocusPath], None]
    push_layer: Callable[[FocusPath], None]
    pop_layer: Callable[[], Optional[FocusPath]]


@dataclass(frozen=True)
class Stores:
    task: "TaskStore"
    config: "ConfigStore"
    ui: "UIStore"
    project: "ProjectStore"


@dataclass(frozen=True)
class NavigationContext:
    current_path: FocusPath
    parsed: ParsedFocusPath
    stores: Stores
    focus: FocusActions


HandleFn = Callable[[ParsedFocusPath, Action, NavigationContext], Optional[ActionResult]]


@dataclass(frozen=True)
class NavigationHandler:
    """Pattern-scoped handler; a string pattern is a prefix, otherwise a regex."""

    name: str
    pattern: Union[str, Pattern[str]]
    handle: HandleFn

    def applies_to(self, path: FocusPath) -> bool:
        if isinstance(self.pattern, str):
            return path.startswith(self.pattern)
        return bool(self.pattern.search(path))


__all__ = [
    "Action",
    "ActionResult",
    "Effect",
    "FocusActions",
    "FocusPath",
    "FocusPathError",
    "KeyBinding",
    "KeyEvent",
    "Modifiers",
    "NavigationContext",
    "NavigationHandler",
    "ParsedFocusPath",
    "Stores",
]
