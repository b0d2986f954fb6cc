import asyncio

import pytest

from application.config_store import ConfigStore
from application.project_data import ProjectData
from application.project_store import ProjectStore
from application.task_store import TaskStore
from application.ui_store import EVENT_SAVE, Filter, UIStore
from core import Task, create_default_config
from infrastructure.board_repository import BoardFileError, FileBoardRepository
from infrastructure.project_registry import ProjectRegistry


@pytest.fixture
def data(tmp_path):
    project_data = ProjectData(
        TaskStore(),
        ConfigStore(),
        UIStore(),
        ProjectStore(ProjectRegistry(tmp_path / "registry.yaml")),
    )
    project_data.attach()
    return project_data


def _write_board(path, tasks):
    FileBoardRepository(path).save(create_default_config(), tasks, len(tasks))


def test_open_directory_loads_board_and_registers_project(tmp_path, data):
    board = tmp_path / "board"
    _write_board(board, [Task("TASK-001", "Existing")])
    data.ui.open_full_task("TASK-009")
    data.ui.add_filter(Filter("tag", "bug"))

    project = asyncio.run(data.open_directory(board))

    assert project.name == "board"
    assert data.projects.get_current_project() is project
    assert [t.title for t in data.tasks.tasks] == ["Existing"]
    assert data.ui.full_task_stack == []
    assert data.ui.active_filters == []
    assert data.repository.board_path == board.resolve() / "kanban.yaml"


def test_save_event_writes_board(tmp_path, data):
    asyncio.run(data.open_directory(tmp_path))
    data.tasks.create_task("todo", {"title": "New"})
    data.ui.emit(EVENT_SAVE)

    _, tasks, last_task_id = FileBoardRepository(tmp_path).load()
    assert [t.title for t in tasks] == ["New"]
    assert last_task_id == 1


def test_save_without_project_is_a_no_op(data):
    assert data.save() is None


def test_switching_projects_reloads_stores(tmp_path, data):
    first, second = tmp_path / "first", tmp_path / "second"
    _write_board(first, [Task("TASK-001", "one")])
    _write_board(second, [Task("TASK-001", "two"), Task("TASK-002", "three")])
    asyncio.run(data.open_directory(first))
    asyncio.run(data.open_directory(second))
    assert len(data.tasks.tasks) == 2

    asyncio.run(data.projects.switch_project("first"))
    assert [t.title for t in data.tasks.tasks] == ["one"]


def test_broken_board_propagates(tmp_path, data):
    (tmp_path / "kanban.yaml").write_text("tasks: [", encoding="utf-8")
    with pytest.raises(BoardFileError):
        asyncio.run(data.open_directory(tmp_path))


def test_detach_stops_saving(tmp_path, data):
    asyncio.run(data.open_directory(tmp_path))
    data.detach()
    data.tasks.create_task("todo")
    data.ui.emit(EVENT_SAVE)
    assert not (tmp_path / "kanban.yaml").exists()


def test_switching_away_saves_unsaved_work(tmp_path, data):
    first, second = tmp_path / "a", tmp_path / "b"
    asyncio.run(data.open_directory(first))
    data.tasks.create_task("todo", {"title": "unsaved work"})
    asyncio.run(data.open_directory(second))
    assert data.tasks.tasks == []

    asyncio.run(data.projects.switch_project("a"))
    assert [t.title for t in data.tasks.tasks] == ["unsaved work"]
    assert data.project_dir == first.resolve()


def test_reselecting_the_open_project_keeps_the_stores(tmp_path, data):
    asyncio.run(data.open_directory(tmp_path / "a"))
    data.tasks.create_task("todo", {"title": "in memory"})
    data.ui.open_full_task("TASK-001")

    asyncio.run(data.projects.switch_project("a"))

    assert [t.title for t in data.tasks.tasks] == ["in memory"]
    assert data.ui.full_task_stack == ["TASK-001"]
    assert not (tmp_path / "a" / "kanban.yaml").exists()
