import pytest

from core import Project
from core.focus.types import Action


@pytest.fixture
def projects(stores, tmp_path):
    stores.project.projects = [
        Project("p1", "alpha", str(tmp_path / "alpha"), 3.0),
        Project("p2", "beta", str(tmp_path / "beta"), 2.0),
        Project("p3", "gamma", str(tmp_path / "gamma"), 1.0),
    ]
    return stores.project


def test_vertical_navigation_clamps(focus, projects, act):
    focus.set_path("kanban.sidebar.project-alpha")
    assert act(Action.UP)
    assert focus.current_path == "kanban.sidebar.project-alpha"
    act(Action.DOWN)
    act(Action.DOWN)
    assert focus.current_path == "kanban.sidebar.project-gamma"
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.sidebar.project-gamma"


def test_down_from_bare_sidebar_enters_first_project(focus, projects, act):
    focus.set_path("kanban.sidebar")
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.sidebar.project-alpha"


def test_empty_sidebar_swallows_navigation(focus, act):
    focus.set_path("kanban.sidebar")
    assert act(Action.DOWN)
    assert act(Action.SELECT) is False
    assert focus.current_path == "kanban.sidebar"


@pytest.mark.parametrize("action", [Action.RIGHT, Action.BACK])
def test_right_and_back_return_to_board(focus, projects, act, action):
    focus.set_path("kanban.sidebar.project-beta")
    assert act(action)
    assert focus.current_path == "kanban.board.todo.new-task"


def test_left_is_swallowed(focus, projects, act):
    focus.set_path("kanban.sidebar.project-beta")
    assert act(Action.LEFT)
    assert focus.current_path == "kanban.sidebar.project-beta"


def test_select_switches_project_asynchronously(focus, projects, act):
    switched = []
    projects.add_listener(lambda project: switched.append(project.name))
    focus.set_path("kanban.sidebar.project-beta")
    assert act(Action.SELECT)
    assert projects.current_project_id == "p2"
    assert switched == ["beta"]


def test_delete_removes_from_recent_list(focus, projects, stores, act):
    focus.set_path("kanban.sidebar.project-beta")
    assert act(Action.DELETE)
    assert focus.current_path == "dialog.confirm"
    assert "beta" in stores.ui.confirm_dialog.message

    stores.ui.confirm_dialog.on_confirm()
    assert [p.name for p in projects.projects] == ["alpha", "gamma"]
    assert focus.current_path == "kanban.sidebar.project-gamma"
    assert not stores.ui.confirm_dialog.visible


def test_deleting_last_project_leaves_bare_sidebar(focus, stores, tmp_path, act):
    stores.project.projects = [Project("p1", "solo", str(tmp_path), 1.0)]
    focus.set_path("kanban.sidebar.project-solo")
    act(Action.DELETE)
    stores.ui.confirm_dialog.on_confirm()
    assert stores.project.projects == []
    assert focus.current_path == "kanban.sidebar"
