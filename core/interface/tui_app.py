"""Full-screen kanban board driven entirely by the focus-path dispatcher."""

import asyncio
import logging
import os
import time
from datetime import date
from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import ConditionalContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import TextArea

from config import get_default_column, get_registry_path
from application.config_store import ConfigStore
from application.focus_store import FocusStore
from application.project_data import ProjectData
from application.project_store import ProjectStore
from application.search import apply_suggestion, build_suggestions
from application.task_store import TaskStore
from application.ui_store import EVENT_SAVE, UIStore
from core import META_DATE_FIELDS, Project
from core.focus.handlers.columns import carry_slot, column_slots
from core.focus.paths import (
    DEFAULT_PATH,
    LAYER_KANBAN,
    LAYER_SEARCH,
    NEW_TASK_ITEM,
    SEARCH_INPUT_ITEM,
    board_path,
    search_path,
    task_id_to_path_item,
)
from core.focus.types import KeyEvent, Stores
from core.interface.i18n import translate
from core.interface.keyboard import GlobalKeyboard
from core.interface.tui_keys import to_key_event
from core.interface.tui_render import render_body, render_footer, render_status, to_formatted_text
from core.interface.tui_themes import DEFAULT_THEME, build_style
from infrastructure.board_repository import BoardFileError
from infrastructure.project_registry import ProjectRegistry

logger = logging.getLogger("kanban_md.tui")

STATUS_TTL = 4.0


class KanbanTUI:
    def __init__(
        self,
        project_dir: Optional[Path] = None,
        theme: str = DEFAULT_THEME,
        registry: Optional[ProjectRegistry] = None,
    ):
        self.project_dir = Path(project_dir) if project_dir else None
        self.task_store = TaskStore()
        self.config_store = ConfigStore()
        self.ui_store = UIStore()
        self.project_store = ProjectStore(registry or ProjectRegistry(get_registry_path()))
        self.project_store.load_projects()
        self.stores = Stores(task=self.task_store, config=self.config_store, ui=self.ui_store, project=self.project_store)

        self.project_data = ProjectData(self.task_store, self.config_store, self.ui_store, self.project_store)
        self.project_data.attach()
        self.ui_store.subscribe(EVENT_SAVE, self._on_saved)
        self.project_store.add_listener(self._on_project_switched)

        self.focus = FocusStore()
        self.keyboard = GlobalKeyboard(self.focus, self.stores)

        self.theme_name = theme
        self.style = build_style(theme)
        self.status_message = ""
        self.status_is_error = False
        self.status_message_expires = 0.0
        self.edit_field = TextArea(multiline=False, focusable=True, style="class:editor")
        self.app: Optional[Application] = None

    # Status line
    def set_status_message(self, message: str, error: bool = False, ttl: float = STATUS_TTL) -> None:
        self.status_message = message
        self.status_is_error = error
        self.status_message_expires = time.time() + ttl

    def _expire_status(self) -> None:
        if self.status_message and time.time() > self.status_message_expires:
            self.status_message = ""
            self.status_is_error = False

    def _on_saved(self) -> None:
        board = self.project_data.repository.board_path if self.project_data.repository else ""
        self.set_status_message(translate("status.saved", path=board))

    def _on_project_switched(self, project: Project) -> None:
        self.focus.default_path = self.initial_path()
        self.focus.reset()
        self.set_status_message(translate("status.projectLoaded", name=project.name))

    def initial_path(self) -> str:
        """Start on the configured column: its sentinel or first card, else the bare column."""
        columns = self.config_store.columns
        if not columns:
            return DEFAULT_PATH
        wanted = get_default_column()
        index = next((i for i, c in enumerate(columns) if c.id == wanted), 0)
        column = columns[index]
        slots = column_slots(
            self.task_store.tasks_by_column(column.id),
            index == 0,
            NEW_TASK_ITEM,
            task_id_to_path_item,
        )
        return board_path(column.id, carry_slot(0, slots))

    async def open_initial_project(self) -> None:
        target = self.project_dir or Path.cwd()
        await self.project_data.open_directory(target)

    # Key handling
    def in_text_field(self) -> bool:
        return self.ui_store.editing is not None or self.focus.current_path == search_path(SEARCH_INPUT_ITEM)

    async def dispatch(self, event: KeyEvent) -> bool:
        try:
            return await self.keyboard.handle_key(event)
        except BoardFileError as exc:
            logger.error("Save failed: %s", exc)
            self.set_status_message(translate("status.saveFailed", error=exc.reason), error=True)
            return True
        except Exception as exc:
            # Effects are not wrapped by the dispatcher.
            logger.exception("Effect failed for key %r at %s", event.key, self.focus.current_path)
            self.set_status_message(translate("status.actionFailed", error=exc), error=True)
            return True

    def _type_into_search(self, event: KeyEvent) -> bool:
        ui = self.ui_store
        if event.ctrl or event.meta or event.alt:
            return False
        if event.key == "Backspace":
            ui.search_query = ui.search_query[:-1]
            return True
        if event.key == "Enter":
            suggestions = build_suggestions(ui.search_query, self.config_store.get_config())
            if suggestions:
                apply_suggestion(ui, suggestions[0])
            return True
        if len(event.key) == 1:
            ui.search_query += event.key
            return True
        return False

    async def on_key(self, key: str, data: str = "") -> bool:
        """One key press from prompt_toolkit, outside field editing."""
        self._expire_status()
        in_text = self.in_text_field()
        event = to_key_event(key, data, in_text_field=in_text)
        if event is None:
            return False
        handled = await self.dispatch(event)
        if not handled and self.focus.layer == LAYER_SEARCH and in_text:
            handled = self._type_into_search(event)
        if not handled and event.key == "q" and not in_text and self.focus.layer == LAYER_KANBAN:
            self.quit()
            handled = True
        self._sync_editor()
        self.force_render()
        return handled

    # Field editing
    def _sync_editor(self) -> None:
        editing = self.ui_store.editing
        if editing is None:
            return
        task = self.task_store.get_task(editing[0])
        if task is None:
            self.ui_store.end_edit()
            return
        text = getattr(task, editing[1]) or ""
        if editing[1] == "due" and not text:
            text = date.today().isoformat()
        self.edit_field.text = text
        self.edit_field.buffer.cursor_position = len(text)
        if self.app is not None:
            self.app.layout.focus(self.edit_field)

    def commit_edit(self) -> bool:
        editing = self.ui_store.editing
        if editing is None:
            return False
        task_id, field_name = editing
        value = self.edit_field.text
        if field_name == "title":
            value = value.strip()
        if field_name in META_DATE_FIELDS and value.strip():
            try:
                value = date.fromisoformat(value.strip()).isoformat()
            except ValueError:
                self.set_status_message(f"{value!r}: YYYY-MM-DD", error=True)
                return False
        self.task_store.update_task(task_id, {field_name: value})
        self.ui_store.end_edit()
        self._focus_body()
        return True

    def cancel_edit(self) -> None:
        self.ui_store.end_edit()
        self._focus_body()

    async def commit_and_dispatch(self, key: str, data: str = "") -> None:
        """Tab, Ctrl+S or Ctrl+F while editing: keep the text, then let the dispatcher act."""
        if not self.commit_edit():
            return
        event = to_key_event(key, data, in_text_field=True)
        if event is not None:
            await self.dispatch(event)
        self.force_render()

    def _focus_body(self) -> None:
        if self.app is not None:
            self.app.layout.focus(self.body_window)

    # prompt_toolkit plumbing
    def force_render(self) -> None:
        if self.app is not None:
            self.app.invalidate()

    def request_exit(self) -> None:
        if self.app is not None:
            self.app.exit()

    def quit(self, force: bool = False) -> bool:
        """Write the board back, then leave. A failed save keeps the UI open unless ``force``."""
        if self.ui_store.editing is not None:
            self.commit_edit()
        try:
            self.project_data.save()
        except BoardFileError as exc:
            logger.error("Save on exit failed: %s", exc)
            self.set_status_message(translate("status.saveFailed", error=exc.reason), error=True)
            if not force:
                self.force_render()
                return False
        self.request_exit()
        return True

    @staticmethod
    def get_terminal_width() -> int:
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def get_body_text(self) -> FormattedText:
        return to_formatted_text(render_body(self, self.get_terminal_width()))

    def get_status_text(self) -> FormattedText:
        self._expire_status()
        return FormattedText(render_status(self))

    def get_footer_text(self) -> FormattedText:
        return FormattedText(render_footer(self))

    def build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        editing_active = Condition(lambda: self.ui_store.editing is not None)

        @kb.add("c-c", eager=True)
        def _(event):
            self.quit(force=True)

        @kb.add("enter", eager=True, filter=editing_active)
        def _(event):
            self.commit_edit()

        @kb.add("escape", eager=True, filter=editing_active)
        def _(event):
            self.cancel_edit()

        @kb.add("tab", eager=True, filter=editing_active)
        @kb.add("s-tab", eager=True, filter=editing_active)
        @kb.add("c-s", eager=True, filter=editing_active)
        @kb.add("c-f", eager=True, filter=editing_active)
        async def _(event):
            press = event.key_sequence[0]
            await self.commit_and_dispatch(press.key, press.data)

        @kb.add(Keys.Any, eager=True, filter=~editing_active)
        async def _(event):
            press = event.key_sequence[0]
            await self.on_key(press.key, press.data)

        return kb

    def build_app(self, input=None, output=None) -> Application:
        self.body_window = Window(
            content=FormattedTextControl(self.get_body_text, focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        root = HSplit(
            [
                Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True),
                self.body_window,
                ConditionalContainer(self.edit_field, filter=Condition(lambda: self.ui_store.editing is not None)),
                Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True),
            ]
        )
        self.app = Application(
            layout=Layout(root, focused_element=self.body_window),
            key_bindings=self.build_key_bindings(),
            style=self.style,
            full_screen=True,
            mouse_support=False,
            refresh_interval=1.0,
            input=input,
            output=output,
        )
        # Esc must not wait for an ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("KANBAN_MD_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05
        return self.app

    def run(self) -> None:
        asyncio.run(self.open_initial_project())
        self.build_app().run()


def cmd_tui(args) -> int:
    try:
        tui = KanbanTUI(project_dir=getattr(args, "directory", None), theme=getattr(args, "theme", DEFAULT_THEME))
        tui.run()
    except BoardFileError as exc:
        logger.error("Cannot open board: %s", exc)
        print(f"kanban: {exc}")
        return 1
    return 0


__all__ = ["KanbanTUI", "cmd_tui"]
