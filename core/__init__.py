from .task import Task, create_empty_task, format_task_id, task_number, today_iso, TASK_ID_PREFIX
from .board_config import (
    BoardConfig,
    Column,
    User,
    Priority,
    FIXED_COLUMNS,
    META_DATE_FIELDS,
    create_default_config,
)
from .project import Project

__all__ = [
    "Task",
    "create_empty_task",
    "format_task_id",
    "task_number",
    "today_iso",
    "TASK_ID_PREFIX",
    # Board configuration
    "BoardConfig",
    "Column",
    "User",
    "Priority",
    "FIXED_COLUMNS",
    "META_DATE_FIELDS",
    "create_default_config",
    # Projects
    "Project",
]
