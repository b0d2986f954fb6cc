import asyncio

import pytest
from prompt_toolkit.input import DummyInput
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from config import _save_config
from core.interface.tui_app import KanbanTUI
from infrastructure.board_repository import BoardFileError, FileBoardRepository
from infrastructure.project_registry import ProjectRegistry


@pytest.fixture
def tui(tmp_path):
    app = KanbanTUI(project_dir=tmp_path / "board", registry=ProjectRegistry(tmp_path / "projects.yaml"))
    asyncio.run(app.open_initial_project())
    return app


def key(tui, press, data=""):
    return asyncio.run(tui.on_key(press, data))


def test_opening_a_directory_focuses_first_column(tui):
    assert tui.focus.current_path == "kanban.board.todo.new-task"
    assert tui.project_store.get_current_project().name == "board"
    assert "board" in tui.status_message


def test_default_column_from_user_config(tmp_path):
    _save_config({"default_column": "process"})
    board = tmp_path / "board"
    app = KanbanTUI(project_dir=board, registry=ProjectRegistry(tmp_path / "projects.yaml"))
    asyncio.run(app.open_initial_project())
    assert app.focus.current_path == "kanban.board.process"


def test_create_and_title_a_task(tui):
    assert key(tui, Keys.Enter)
    assert tui.focus.current_path == "fullTask.0.editor.title"

    assert key(tui, Keys.Enter)
    task_id, field = tui.ui_store.editing
    assert field == "title"
    assert tui.in_text_field()

    tui.edit_field.text = "  Write tests  "
    assert tui.commit_edit()
    assert tui.task_store.get_task(task_id).title == "Write tests"
    assert tui.ui_store.editing is None


def test_tab_while_editing_commits_and_moves(tui):
    key(tui, Keys.Enter)
    key(tui, Keys.Enter)
    tui.edit_field.text = "Title"
    asyncio.run(tui.commit_and_dispatch(Keys.Tab))
    assert tui.focus.current_path == "fullTask.0.editor.description"


def test_cancel_edit_keeps_value(tui):
    key(tui, Keys.Enter)
    task_id = tui.ui_store.full_task_stack[0]
    tui.task_store.update_task(task_id, {"title": "Keep"})
    key(tui, Keys.Enter)
    assert tui.edit_field.text == "Keep"
    tui.edit_field.text = "Discard"
    tui.cancel_edit()
    assert tui.task_store.get_task(task_id).title == "Keep"


def test_date_fields_are_validated(tui):
    task = tui.task_store.create_task("todo", {"title": "t"})
    tui.ui_store.begin_edit(task.id, "due")
    tui.edit_field.text = "next week"
    assert tui.commit_edit() is False
    assert tui.status_is_error
    assert tui.ui_store.editing == (task.id, "due")

    tui.edit_field.text = "2026-03-01"
    assert tui.commit_edit()
    assert task.due == "2026-03-01"


def test_typing_into_search(tui):
    tui.task_store.create_task("todo", {"title": "Fix bug", "tags": ["bug"]})
    assert key(tui, Keys.ControlF)
    assert tui.focus.current_path == "search.input"

    for ch in "bjx":
        assert key(tui, ch)
    assert tui.ui_store.search_query == "bjx"
    key(tui, Keys.Backspace)
    key(tui, Keys.Backspace)
    assert tui.ui_store.search_query == "b"

    key(tui, Keys.Enter)
    assert [f.value for f in tui.ui_store.active_filters] == ["bug"]
    assert tui.ui_store.search_query == ""

    assert key(tui, Keys.Down)
    assert tui.focus.current_path == "search.result-0"
    assert key(tui, Keys.Escape)
    assert tui.focus.current_path == "kanban.board.todo.new-task"


def test_q_quits_only_outside_text_fields(tui):
    exits = []
    tui.request_exit = lambda: exits.append(True)
    assert key(tui, "q")
    assert exits == [True]

    key(tui, Keys.ControlF)
    key(tui, "q")
    assert exits == [True]
    assert tui.ui_store.search_query == "q"


def test_save_shortcut_writes_board(tui, tmp_path):
    tui.task_store.create_task("todo", {"title": "Persist me"})
    assert key(tui, Keys.ControlS)
    _, tasks, _ = FileBoardRepository(tmp_path / "board").load()
    assert [t.title for t in tasks] == ["Persist me"]
    assert tui.status_message.startswith("Saved")
    assert not tui.status_is_error


def test_save_failure_is_reported(tui, tmp_path):
    def fail(*args, **kwargs):
        raise BoardFileError(tmp_path / "kanban.yaml", "disk full")

    tui.project_data.repository.save = fail
    assert key(tui, Keys.ControlS)
    assert tui.status_is_error
    assert tui.status_message == "Save failed: disk full"


def test_failing_effect_is_reported(tui, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("no space")

    monkeypatch.setattr(tui.task_store, "create_task", boom)
    assert key(tui, Keys.Enter)
    assert tui.status_is_error
    assert "no space" in tui.status_message
    assert tui.focus.current_path == "kanban.board.todo.new-task"


def test_status_message_expires(tui):
    tui.set_status_message("hello", ttl=-1)
    key(tui, "x")
    assert tui.status_message == ""


def test_build_app_wires_catch_all_binding(tui, monkeypatch):
    monkeypatch.setenv("KANBAN_MD_TUI_TTIMEOUTLEN", "0.2")
    app = tui.build_app(input=DummyInput(), output=DummyOutput())
    assert app is tui.app
    assert app.ttimeoutlen == 0.2
    bindings = app.key_bindings.bindings
    catch_all = [b for b in bindings if b.keys == (Keys.Any,)]
    assert len(catch_all) == 1
    assert catch_all[0].eager()
    escape = [b for b in bindings if b.keys == (Keys.Escape,)]
    assert escape and all(b.eager() for b in escape)


def test_body_renders_through_formatted_text(tui):
    fragments = tui.get_body_text()
    assert any("+ New task" in text for _, text in fragments)
    assert any("kanban.board.todo.new-task" in text for _, text in tui.get_status_text())


def test_quitting_saves_the_board(tui, tmp_path):
    exits = []
    tui.request_exit = lambda: exits.append(True)
    tui.task_store.create_task("todo", {"title": "Keep me"})

    key(tui, "q")

    assert exits == [True]
    _, tasks, _ = FileBoardRepository(tmp_path / "board").load()
    assert [t.title for t in tasks] == ["Keep me"]


def test_quitting_commits_the_open_edit(tui, tmp_path):
    tui.request_exit = lambda: None
    task = tui.task_store.create_task("todo", {"title": "old"})
    tui.ui_store.begin_edit(task.id, "title")
    tui.edit_field.text = "new"

    assert tui.quit(force=True)

    _, tasks, _ = FileBoardRepository(tmp_path / "board").load()
    assert [t.title for t in tasks] == ["new"]


def test_failed_save_keeps_the_board_open(tui, tmp_path):
    exits = []
    tui.request_exit = lambda: exits.append(True)

    def fail(*args, **kwargs):
        raise BoardFileError(tmp_path / "kanban.yaml", "read-only")

    tui.project_data.repository.save = fail
    key(tui, "q")
    assert exits == []
    assert tui.status_message == "Save failed: read-only"

    assert tui.quit(force=True)
    assert exits == [True]


def test_search_shortcut_while_editing(tui):
    key(tui, Keys.Enter)
    key(tui, Keys.Enter)
    task_id = tui.ui_store.editing[0]
    tui.edit_field.text = "Draft"

    asyncio.run(tui.commit_and_dispatch(Keys.ControlF))

    assert tui.focus.current_path == "search.input"
    assert tui.ui_store.editing is None
    assert tui.task_store.get_task(task_id).title == "Draft"


def test_editing_bindings_cover_global_shortcuts(tui):
    app = tui.build_app(input=DummyInput(), output=DummyOutput())
    tui.ui_store.editing = ("TASK-001", "title")
    routed = {b.keys[0] for b in app.key_bindings.bindings if b.filter()}
    assert {Keys.ControlS, Keys.ControlF, Keys.Tab, Keys.BackTab} <= routed
    assert Keys.Any not in routed
