"""Loads a project directory into the stores and writes it back on save."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from application.config_store import ConfigStore
from application.ports import BoardRepository
from application.project_store import ProjectStore
from application.task_store import TaskStore
from application.ui_store import EVENT_SAVE, UIStore
from core import Project
from infrastructure.board_repository import FileBoardRepository

logger = logging.getLogger("kanban_md.projects")

RepositoryFactory = Callable[[Path], BoardRepository]


class ProjectData:
    def __init__(
        self,
        tasks: TaskStore,
        config: ConfigStore,
        ui: UIStore,
        projects: ProjectStore,
        repository_factory: RepositoryFactory = FileBoardRepository,
    ):
        self.tasks = tasks
        self.config = config
        self.ui = ui
        self.projects = projects
        self.repository_factory = repository_factory
        self.repository: Optional[BoardRepository] = None
        self.project_dir: Optional[Path] = None
        self._unsubscribers: List[Callable[[], None]] = []

    def attach(self) -> None:
        """Save on the UI ``save`` event and reload whenever the active project changes."""
        self._unsubscribers.append(self.ui.subscribe(EVENT_SAVE, self.save))
        self._unsubscribers.append(self.projects.add_listener(self.on_project_switch))

    def detach(self) -> None:
        while self._unsubscribers:
            self._unsubscribers.pop()()

    def load(self, project_dir: Path) -> None:
        repository = self.repository_factory(Path(project_dir))
        config, tasks, last_task_id = repository.load()
        archived = repository.load_archive()
        self.config.set_config(config)
        self.tasks.set_tasks(tasks, archived, last_task_id)
        self.ui.close_all_full_tasks()
        self.ui.clear_filters()
        self.repository = repository
        self.project_dir = Path(project_dir).resolve()
        logger.info("Loaded %d tasks from %s", len(tasks), project_dir)

    def save(self) -> Optional[Path]:
        if self.repository is None:
            logger.debug("Save requested without an open project")
            return None
        self.repository.save(self.config.get_config(), self.tasks.tasks, self.tasks.last_task_id)
        self.repository.save_archive(self.tasks.archived_tasks)
        return self.repository.board_path

    def on_project_switch(self, project: Project) -> None:
        """Write the open board back before loading another one; re-selecting it keeps the stores."""
        target = Path(project.path).resolve()
        if self.repository is not None:
            if target == self.project_dir:
                logger.debug("Project %s is already open", project.name)
                return
            self.save()
        self.load(target)

    async def open_directory(self, path: Path, name: Optional[str] = None) -> Project:
        """Register ``path`` as a recent project (if new) and make it the active one."""
        project = self.projects.add_project(Path(path), name)
        await self.projects.switch_project(project.name)
        return project


__all__ = ["ProjectData"]
