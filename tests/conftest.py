import asyncio

import pytest

from application.config_store import ConfigStore
from application.focus_store import FocusStore
from application.project_store import ProjectStore
from application.task_store import TaskStore
from application.ui_store import UIStore
from core.focus.types import KeyEvent, Stores
from core.interface.keyboard import GlobalKeyboard


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("KANBAN_MD_CONFIG", str(tmp_path / "kanban_md_config.yaml"))
    monkeypatch.delenv("KANBAN_MD_LANG", raising=False)


@pytest.fixture
def stores():
    return Stores(task=TaskStore(), config=ConfigStore(), ui=UIStore(), project=ProjectStore())


@pytest.fixture
def focus():
    return FocusStore()


@pytest.fixture
def keyboard(focus, stores):
    return GlobalKeyboard(focus, stores)


@pytest.fixture
def act(keyboard):
    """Run one abstract action through the dispatcher, effects included."""

    def run(action):
        return asyncio.run(keyboard.handle_action(action))

    return run


@pytest.fixture
def press(keyboard):
    def run(key, **modifiers):
        return asyncio.run(keyboard.handle_key(KeyEvent(key=key, **modifiers)))

    return run
