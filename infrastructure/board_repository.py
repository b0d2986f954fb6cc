import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from core import BoardConfig, Task, create_default_config
from core.interface.constants import ARCHIVE_FILE, BOARD_FILE

logger = logging.getLogger("kanban_md.storage")


class BoardFileError(RuntimeError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FileBoardRepository:
    """Board of one project directory: ``kanban.yaml`` plus ``archive.yaml``."""

    def __init__(self, project_dir: Path):
        self.project_dir = Path(project_dir)

    @property
    def board_path(self) -> Path:
        return self.project_dir / BOARD_FILE

    @property
    def archive_path(self) -> Path:
        return self.project_dir / ARCHIVE_FILE

    def exists(self) -> bool:
        return self.board_path.exists()

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise BoardFileError(path, f"cannot read file ({exc})") from exc
        except yaml.YAMLError as exc:
            raise BoardFileError(path, f"invalid YAML ({exc})") from exc
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise BoardFileError(path, "expected a mapping at the top level")
        return raw

    def _write(self, path: Path, payload: Dict[str, Any]) -> None:
        try:
            self.project_dir.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(path.suffix + ".tmp")
            tmp.write_text(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise BoardFileError(path, f"cannot write file ({exc})") from exc

    @staticmethod
    def _tasks(path: Path, entries: Any) -> List[Task]:
        tasks: List[Task] = []
        for entry in entries or []:
            try:
                tasks.append(Task.from_dict(entry))
            except (TypeError, ValueError) as exc:
                raise BoardFileError(path, f"malformed task entry {entry!r} ({exc})") from exc
        return tasks

    def load(self) -> Tuple[BoardConfig, List[Task], int]:
        raw = self._read(self.board_path)
        if not raw:
            logger.info("No board in %s, starting from the default configuration", self.project_dir)
            return create_default_config(), [], 0
        try:
            config = BoardConfig.from_dict(raw.get("config") or {})
        except (TypeError, ValueError) as exc:
            raise BoardFileError(self.board_path, f"malformed config ({exc})") from exc
        tasks = self._tasks(self.board_path, raw.get("tasks"))
        last_task_id = int(raw.get("last_task_id") or 0)
        logger.debug("Loaded %d tasks from %s", len(tasks), self.board_path)
        return config, tasks, last_task_id

    def load_archive(self) -> List[Task]:
        raw = self._read(self.archive_path)
        return self._tasks(self.archive_path, raw.get("tasks"))

    def save(self, config: BoardConfig, tasks: List[Task], last_task_id: int) -> None:
        payload = {
            "config": config.to_dict(),
            "last_task_id": last_task_id,
            "tasks": [task.to_dict() for task in tasks],
        }
        self._write(self.board_path, payload)
        logger.debug("Saved %d tasks to %s", len(tasks), self.board_path)

    def save_archive(self, tasks: List[Task]) -> None:
        self._write(self.archive_path, {"tasks": [task.to_dict() for task in tasks]})


__all__ = ["BoardFileError", "FileBoardRepository"]
