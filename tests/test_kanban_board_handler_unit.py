from core import Project
from core.focus.types import Action


def _seed(stores, layout):
    """``layout`` maps column id to task titles; ids are assigned in order."""
    ids = {}
    for column_id, titles in layout.items():
        for title in titles:
            ids[title] = stores.task.create_task(column_id, {"title": title}).id
    return ids


def test_down_walks_from_sentinel_through_cards(focus, stores, act):
    _seed(stores, {"todo": ["A", "B"]})
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.board.todo.task-001"
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.board.todo.task-002"
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.board.todo.task-002"


def test_up_stops_at_sentinel(focus, stores, act):
    _seed(stores, {"todo": ["A"]})
    focus.set_path("kanban.board.todo.task-001")
    assert act(Action.UP)
    assert focus.current_path == "kanban.board.todo.new-task"
    assert act(Action.UP)
    assert focus.current_path == "kanban.board.todo.new-task"


def test_right_into_empty_column_focuses_bare_column(focus, act):
    assert act(Action.RIGHT)
    assert focus.current_path == "kanban.board.process"


def test_down_from_bare_column_enters_first_card(focus, stores, act):
    _seed(stores, {"process": ["P"]})
    focus.set_path("kanban.board.process")
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.board.process.task-001"


def test_right_at_last_column_is_swallowed(focus, stores, act):
    _seed(stores, {"done": ["D"]})
    focus.set_path("kanban.board.done.task-001")
    assert act(Action.RIGHT)
    assert focus.current_path == "kanban.board.done.task-001"


def test_left_from_first_column_goes_to_sidebar(focus, stores, act):
    assert act(Action.LEFT)
    assert focus.current_path == "kanban.sidebar"

    stores.project.projects = [Project("p1", "alpha", "/tmp/alpha", 2.0), Project("p2", "beta", "/tmp/beta", 1.0)]
    focus.set_path("kanban.board.todo.new-task")
    assert act(Action.LEFT)
    assert focus.current_path == "kanban.sidebar.project-alpha"

    stores.project.current_project_id = "p2"
    focus.set_path("kanban.board.todo.new-task")
    assert act(Action.LEFT)
    assert focus.current_path == "kanban.sidebar.project-beta"


def test_select_card_opens_detail_view(focus, stores, act):
    ids = _seed(stores, {"process": ["P"]})
    focus.set_path("kanban.board.process.task-001")
    assert act(Action.SELECT)
    assert stores.ui.full_task_stack == [ids["P"]]
    assert focus.current_path == "fullTask.0.editor.title"
    assert focus.path_stack == ["kanban.board.process.task-001"]
    assert not stores.ui.is_new_task(ids["P"])


def test_select_bare_column_is_not_handled(focus, act):
    focus.set_path("kanban.board.review")
    assert act(Action.SELECT) is False


def test_delete_asks_for_confirmation_then_refocuses_neighbour(focus, stores, act):
    _seed(stores, {"todo": ["A", "B"]})
    focus.set_path("kanban.board.todo.task-002")
    assert act(Action.DELETE)

    dialog = stores.ui.confirm_dialog
    assert focus.current_path == "dialog.confirm"
    assert dialog.visible
    assert dialog.title == "Delete task"
    assert '"B"' in dialog.message

    dialog.on_confirm()
    assert stores.task.get_task("TASK-002") is None
    assert not stores.ui.confirm_dialog.visible
    assert focus.current_path == "kanban.board.todo.task-001"
    assert focus.path_stack == []


def test_cancelled_delete_keeps_task(focus, stores, act):
    _seed(stores, {"todo": ["A"]})
    focus.set_path("kanban.board.todo.task-001")
    act(Action.DELETE)
    act(Action.BACK)
    assert stores.task.get_task("TASK-001") is not None
    assert focus.current_path == "kanban.board.todo.task-001"
    assert not stores.ui.confirm_dialog.visible


def test_delete_on_sentinel_is_not_handled(focus, act):
    assert act(Action.DELETE) is False
    assert focus.current_path == "kanban.board.todo.new-task"


def test_move_left_at_first_column_is_swallowed(focus, stores, act):
    _seed(stores, {"todo": ["A"]})
    focus.set_path("kanban.board.todo.task-001")
    assert act(Action.MOVE_LEFT)
    assert stores.task.get_task("TASK-001").status == "todo"
    assert focus.current_path == "kanban.board.todo.task-001"


def test_move_into_done_stamps_completion(focus, stores, act):
    _seed(stores, {"review": ["R"]})
    focus.set_path("kanban.board.review.task-001")
    assert act(Action.MOVE_RIGHT)
    task = stores.task.get_task("TASK-001")
    assert task.status == "done"
    assert task.completed
    assert focus.current_path == "kanban.board.done.task-001"


def test_unknown_column_is_not_handled(focus, act):
    focus.set_path("kanban.board.archive.task-001")
    assert act(Action.DOWN) is False
    assert focus.current_path == "kanban.board.archive.task-001"


def test_subtasks_stay_off_the_board(focus, stores, act):
    ids = _seed(stores, {"todo": ["Parent"]})
    stores.task.create_task("todo", {"title": "child", "parent_id": ids["Parent"]})
    focus.set_path("kanban.board.todo.task-001")
    assert act(Action.DOWN)
    assert focus.current_path == "kanban.board.todo.task-001"
