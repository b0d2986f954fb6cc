"""In-memory task store; tasks are ordered by insertion within each column."""

from typing import Any, Dict, List, Optional

from core import Task, create_empty_task, format_task_id, task_number, today_iso

DONE_COLUMN = "done"


class TaskStore:
    def __init__(self, tasks: Optional[List[Task]] = None, archived: Optional[List[Task]] = None):
        self.tasks: List[Task] = []
        self.archived_tasks: List[Task] = []
        self.last_task_id = 0
        self.set_tasks(tasks or [], archived or [])

    def get_task(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def tasks_by_column(self, column_id: str) -> List[Task]:
        """Top-level tasks of a column; subtasks live on their parent's sub-board."""
        return [t for t in self.tasks if t.status == column_id and not t.parent_id]

    def get_subtasks(self, parent_id: str) -> List[Task]:
        return [t for t in self.tasks if t.parent_id == parent_id]

    def get_parent_task(self, task_id: str) -> Optional[Task]:
        task = self.get_task(task_id)
        if task and task.parent_id:
            return self.get_task(task.parent_id)
        return None

    def create_task(self, column_id: str, fields: Optional[Dict[str, Any]] = None) -> Task:
        self.last_task_id += 1
        task = create_empty_task(format_task_id(self.last_task_id), column_id)
        if fields:
            task.apply(fields)
        self.tasks.append(task)
        return task

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> None:
        task = self.get_task(task_id)
        if task is not None:
            task.apply(fields)

    def move_task(self, task_id: str, column_id: str) -> None:
        task = self.get_task(task_id)
        if task is None:
            return
        task.status = column_id
        if column_id == DONE_COLUMN and not task.completed:
            task.completed = today_iso()

    def delete_task(self, task_id: str) -> None:
        """Remove a task together with every subtask below it, at any depth."""
        doomed = set()
        pending = [task_id]
        while pending:
            current = pending.pop()
            if current in doomed:
                continue
            doomed.add(current)
            pending.extend(t.id for t in self.get_subtasks(current))
        self.tasks = [t for t in self.tasks if t.id not in doomed]

    def archive_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        if task is not None:
            self.tasks.remove(task)
            self.archived_tasks.append(task)

    def restore_task(self, task_id: str) -> None:
        for task in self.archived_tasks:
            if task.id == task_id:
                self.archived_tasks.remove(task)
                self.tasks.append(task)
                return

    def set_tasks(self, tasks: List[Task], archived: Optional[List[Task]] = None, last_task_id: int = 0) -> None:
        self.tasks = list(tasks)
        self.archived_tasks = list(archived or [])
        highest = max((task_number(t.id) for t in self.tasks + self.archived_tasks), default=0)
        self.last_task_id = max(highest, last_task_id)

    def clear_tasks(self) -> None:
        self.tasks = []
        self.archived_tasks = []
        self.last_task_id = 0


__all__ = ["TaskStore", "DONE_COLUMN"]
