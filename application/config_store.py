from typing import List, Optional

from core import BoardConfig, Column, Priority, User, create_default_config


class ConfigStore:
    """Board configuration: columns plus the category/user/priority/tag vocabularies."""

    def __init__(self, config: Optional[BoardConfig] = None):
        self.columns: List[Column] = []
        self.categories: List[str] = []
        self.users: List[User] = []
        self.priorities: List[Priority] = []
        self.tags: List[str] = []
        self.set_config(config or create_default_config())

    def set_config(self, config: BoardConfig) -> None:
        self.columns = list(config.columns)
        self.categories = list(config.categories)
        self.users = list(config.users)
        self.priorities = list(config.priorities)
        self.tags = list(config.tags)

    def get_config(self) -> BoardConfig:
        return BoardConfig(
            columns=list(self.columns),
            categories=list(self.categories),
            users=list(self.users),
            priorities=list(self.priorities),
            tags=list(self.tags),
        )

    def reset_to_default(self) -> None:
        self.set_config(create_default_config())

    def column_index(self, column_id: Optional[str]) -> int:
        for idx, column in enumerate(self.columns):
            if column.id == column_id:
                return idx
        return -1

    def add_column(self, column: Column) -> None:
        self.columns.append(column)

    def update_column(self, column_id: str, name: str) -> None:
        idx = self.column_index(column_id)
        if idx != -1:
            self.columns[idx] = Column(column_id, name)

    def remove_column(self, column_id: str) -> None:
        self.columns = [c for c in self.columns if c.id != column_id]

    def move_column(self, column_id: str, direction: str) -> None:
        idx = self.column_index(column_id)
        if idx == -1:
            return
        target = idx - 1 if direction == "up" else idx + 1
        if target < 0 or target >= len(self.columns):
            return
        self.columns[idx], self.columns[target] = self.columns[target], self.columns[idx]

    def add_category(self, category: str) -> None:
        if category not in self.categories:
            self.categories.append(category)

    def add_user(self, user: User) -> None:
        if all(u.id != user.id for u in self.users):
            self.users.append(user)

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)


__all__ = ["ConfigStore"]
