"""Recent projects shown in the sidebar and the active-project switch."""

import inspect
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from application.ports import ProjectListener
from core import Project
from infrastructure.project_registry import ProjectRegistry

logger = logging.getLogger("kanban_md.projects")


class ProjectStore:
    def __init__(self, registry: Optional[ProjectRegistry] = None):
        self.registry = registry
        self.projects: List[Project] = []
        self.current_project_id: Optional[str] = None
        self._listeners: List[ProjectListener] = []

    def load_projects(self) -> None:
        if self.registry is None:
            return
        self.projects = sorted(self.registry.load(), key=lambda p: p.last_access, reverse=True)

    def _persist(self) -> None:
        self.projects.sort(key=lambda p: p.last_access, reverse=True)
        if self.registry is not None:
            self.registry.save(self.projects)

    def get_project(self, name: str) -> Optional[Project]:
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def get_current_project(self) -> Optional[Project]:
        for project in self.projects:
            if project.id == self.current_project_id:
                return project
        return None

    def add_project(self, path: Path, name: Optional[str] = None) -> Project:
        resolved = Path(path).resolve()
        for project in self.projects:
            if project.path == str(resolved):
                return project
        base = name or resolved.name or "board"
        unique, counter = base, 2
        while self.get_project(unique) is not None:
            unique = f"{base}-{counter}"
            counter += 1
        project = Project(
            id=f"project-{int(time.time() * 1000)}-{len(self.projects)}",
            name=unique,
            path=str(resolved),
            last_access=time.time(),
        )
        self.projects.append(project)
        self._persist()
        return project

    def delete_project(self, name: str) -> None:
        """Drop a project from the recent list; its files stay on disk."""
        project = self.get_project(name)
        if project is None:
            return
        self.projects.remove(project)
        if self.current_project_id == project.id:
            self.current_project_id = None
        self._persist()
        logger.info("Removed project %s from the recent list", name)

    def rename_project(self, project_id: str, new_name: str) -> None:
        for project in self.projects:
            if project.id == project_id:
                project.name = new_name
                self._persist()
                return

    def add_listener(self, listener: ProjectListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener) if listener in self._listeners else None

    async def switch_project(self, name: str) -> bool:
        project = self.get_project(name)
        if project is None:
            logger.warning("Cannot switch to unknown project %s", name)
            return False
        self.current_project_id = project.id
        project.last_access = time.time()
        self._persist()
        for listener in list(self._listeners):
            outcome = listener(project)
            if inspect.isawaitable(outcome):
                await outcome
        logger.info("Switched to project %s (%s)", project.name, project.path)
        return True


__all__ = ["ProjectStore"]
