import pytest
import yaml

from core import Column, Project, Task, create_default_config
from infrastructure.board_repository import BoardFileError, FileBoardRepository
from infrastructure.project_registry import ProjectRegistry


def test_missing_board_loads_defaults(tmp_path):
    repo = FileBoardRepository(tmp_path)
    assert not repo.exists()
    config, tasks, last_task_id = repo.load()
    assert [c.id for c in config.columns] == ["todo", "process", "review", "done"]
    assert tasks == []
    assert last_task_id == 0
    assert repo.load_archive() == []


def test_save_then_load(tmp_path):
    repo = FileBoardRepository(tmp_path / "board")
    config = create_default_config()
    config.columns.append(Column("blocked", "Blocked"))
    tasks = [
        Task("TASK-001", "Parent", tags=["bug"]),
        Task("TASK-002", "Child", status="review", parent_id="TASK-001"),
    ]
    repo.save(config, tasks, 5)

    loaded_config, loaded_tasks, last_task_id = FileBoardRepository(tmp_path / "board").load()
    assert loaded_config.columns[-1] == Column("blocked", "Blocked")
    assert loaded_tasks == tasks
    assert last_task_id == 5


def test_file_layout(tmp_path):
    repo = FileBoardRepository(tmp_path)
    repo.save(create_default_config(), [Task("TASK-001", "A")], 1)
    raw = yaml.safe_load((tmp_path / "kanban.yaml").read_text(encoding="utf-8"))
    assert list(raw) == ["config", "last_task_id", "tasks"]
    assert "parent_id" not in raw["tasks"][0]
    assert not (tmp_path / "kanban.yaml.tmp").exists()


def test_archive_round_trip(tmp_path):
    repo = FileBoardRepository(tmp_path)
    repo.save_archive([Task("TASK-003", "old", status="done")])
    assert [t.id for t in repo.load_archive()] == ["TASK-003"]


def test_unknown_task_keys_are_ignored(tmp_path):
    (tmp_path / "kanban.yaml").write_text(
        "tasks:\n  - id: TASK-001\n    title: A\n    colour: red\n", encoding="utf-8"
    )
    _, tasks, _ = FileBoardRepository(tmp_path).load()
    assert tasks[0].title == "A"


@pytest.mark.parametrize(
    "content",
    [
        "tasks: [unclosed",
        "- just\n- a list\n",
        "tasks:\n  - title: missing id\n",
    ],
)
def test_broken_board_raises(tmp_path, content):
    (tmp_path / "kanban.yaml").write_text(content, encoding="utf-8")
    with pytest.raises(BoardFileError) as excinfo:
        FileBoardRepository(tmp_path).load()
    assert excinfo.value.path == tmp_path / "kanban.yaml"


def test_registry_round_trip(tmp_path):
    registry = ProjectRegistry(tmp_path / "nested" / "projects.yaml")
    assert registry.load() == []
    registry.save([Project("p1", "alpha", "/boards/alpha", 12.5)])
    assert registry.load() == [Project("p1", "alpha", "/boards/alpha", 12.5)]


def test_registry_tolerates_garbage(tmp_path):
    path = tmp_path / "projects.yaml"
    path.write_text("projects: [oops", encoding="utf-8")
    assert ProjectRegistry(path).load() == []
    path.write_text("projects:\n  - name: no-id\n  - id: p2\n    name: ok\n", encoding="utf-8")
    assert [p.name for p in ProjectRegistry(path).load()] == ["ok"]
