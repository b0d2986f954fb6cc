import logging
from pathlib import Path
from typing import List

import yaml

from core import Project

logger = logging.getLogger("kanban_md.projects")


class ProjectRegistry:
    """Recent-projects list persisted as YAML."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Project]:
        if not self.path.exists():
            return []
        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Unreadable project registry %s: %s", self.path, exc)
            return []
        if not isinstance(raw, dict):
            logger.warning("Ignoring project registry %s: expected a mapping", self.path)
            return []
        projects: List[Project] = []
        for entry in raw.get("projects") or []:
            try:
                projects.append(Project.from_dict(entry))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed project entry: %r", entry)
        return projects

    def save(self, projects: List[Project]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"projects": [p.to_dict() for p in projects]}
        self.path.write_text(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), encoding="utf-8")


__all__ = ["ProjectRegistry"]
