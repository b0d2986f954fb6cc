from dataclasses import asdict, dataclass, field, fields
from datetime import date
from typing import Any, Dict, List, Optional

TASK_ID_PREFIX = "TASK-"


def today_iso() -> str:
    return date.today().isoformat()


def format_task_id(number: int) -> str:
    return f"{TASK_ID_PREFIX}{number:03d}"


def task_number(task_id: str) -> int:
    """Numeric part of a task id, 0 when the id does not follow TASK-NNN."""
    try:
        return int(task_id.replace(TASK_ID_PREFIX, ""))
    except ValueError:
        return 0


@dataclass
class Task:
    id: str
    title: str = ""
    status: str = "todo"  # column id
    priority: str = ""
    category: str = ""
    assignees: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    created: str = ""
    started: str = ""
    due: str = ""
    completed: str = ""
    description: str = ""
    notes: str = ""
    parent_id: Optional[str] = None  # set when the task is a subtask of another board task

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.parent_id is None:
            data.pop("parent_id")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        known = {f.name for f in fields(cls)}
        payload = {k: v for k, v in (data or {}).items() if k in known}
        for key in ("assignees", "tags"):
            payload[key] = list(payload.get(key) or [])
        return cls(**payload)

    def apply(self, changes: Dict[str, Any]) -> None:
        for key, value in changes.items():
            if not hasattr(self, key):
                raise AttributeError(f"Task has no field {key!r}")
            setattr(self, key, value)


def create_empty_task(task_id: str, status: str) -> Task:
    return Task(id=task_id, status=status, created=today_iso())
