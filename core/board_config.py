from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Column:
    id: str
    name: str


@dataclass
class User:
    id: str
    display_name: str = ""


@dataclass
class Priority:
    icon: str
    name: str
    value: str


# Date fields shown in the detail view's meta panel, in display order.
META_DATE_FIELDS = ("created", "started", "due", "completed")


@dataclass
class BoardConfig:
    columns: List[Column] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    users: List[User] = field(default_factory=list)
    priorities: List[Priority] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": [{"id": c.id, "name": c.name} for c in self.columns],
            "categories": list(self.categories),
            "users": [{"id": u.id, "display_name": u.display_name} for u in self.users],
            "priorities": [{"icon": p.icon, "name": p.name, "value": p.value} for p in self.priorities],
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        data = data or {}
        default = create_default_config()
        columns = [Column(**c) for c in data.get("columns") or []] or default.columns
        return cls(
            columns=columns,
            categories=list(data.get("categories") or []),
            users=[User(**u) for u in data.get("users") or []],
            priorities=[Priority(**p) for p in data.get("priorities") or []] if "priorities" in data else default.priorities,
            tags=list(data.get("tags") or []) if "tags" in data else default.tags,
        )


FIXED_COLUMNS: List[Column] = [
    Column("todo", "Todo"),
    Column("process", "Process"),
    Column("review", "Review"),
    Column("done", "Done"),
]


def create_default_config() -> BoardConfig:
    return BoardConfig(
        columns=[Column(c.id, c.name) for c in FIXED_COLUMNS],
        categories=[],
        users=[],
        priorities=[
            Priority("🔴", "Critical", "critical"),
            Priority("🟠", "High", "high"),
            Priority("🟡", "Medium", "medium"),
            Priority("🟢", "Low", "low"),
        ],
        tags=["bug", "feature", "docs", "refactor"],
    )
