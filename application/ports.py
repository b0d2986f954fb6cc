from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Tuple, Union

from core import BoardConfig, Column, Priority, Project, Task, User


class TaskStore(Protocol):
    tasks: List[Task]
    archived_tasks: List[Task]
    last_task_id: int

    def get_task(self, task_id: str) -> Optional[Task]:
        ...

    def tasks_by_column(self, column_id: str) -> List[Task]:
        ...

    def get_subtasks(self, parent_id: str) -> List[Task]:
        ...

    def create_task(self, column_id: str, fields: Optional[Dict[str, Any]] = None) -> Task:
        ...

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> None:
        ...

    def move_task(self, task_id: str, column_id: str) -> None:
        ...

    def delete_task(self, task_id: str) -> None:
        ...


class ConfigStore(Protocol):
    columns: List[Column]
    categories: List[str]
    users: List[User]
    priorities: List[Priority]
    tags: List[str]

    def get_config(self) -> BoardConfig:
        ...


class ConfirmDialog(Protocol):
    visible: bool
    title: str
    message: str
    on_confirm: Callable[[], None]


class UIStore(Protocol):
    full_task_stack: List[str]
    search_query: str
    active_filters: List[Any]
    confirm_dialog: ConfirmDialog
    editing: Optional[Tuple[str, str]]

    def open_full_task(self, task_id: str, is_new: bool = False) -> None:
        ...

    def close_full_task(self) -> None:
        ...

    def is_new_task(self, task_id: str) -> bool:
        ...

    def mark_task_saved(self, task_id: str) -> None:
        ...

    def show_confirm(self, title: str, message: str, on_confirm: Callable[[], None]) -> None:
        ...

    def hide_confirm(self) -> None:
        ...

    def begin_edit(self, task_id: str, field_name: str) -> None:
        ...

    def emit(self, event: str, **payload: Any) -> None:
        ...


ProjectListener = Callable[[Project], Union[None, Awaitable[None]]]


class ProjectStore(Protocol):
    projects: List[Project]
    current_project_id: Optional[str]

    def get_current_project(self) -> Optional[Project]:
        ...

    def delete_project(self, name: str) -> None:
        ...

    async def switch_project(self, name: str) -> bool:
        ...


class BoardRepository(Protocol):
    board_path: Path

    def load(self) -> Tuple[BoardConfig, List[Task], int]:
        ...

    def load_archive(self) -> List[Task]:
        ...

    def save(self, config: BoardConfig, tasks: List[Task], last_task_id: int) -> None:
        ...

    def save_archive(self, tasks: List[Task]) -> None:
        ...
