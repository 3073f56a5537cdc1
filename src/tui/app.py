"""Textual front end: key bindings, the tick interval, and redraws."""

from __future__ import annotations

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Footer, Input, Static

from bell import BellService
from runtime import PomodoroSession, TickDependencies, TickProcessor

from .render import render_phase_bar, render_today, render_todos


class NewTodoScreen(ModalScreen[str]):
    """Prompt for the text of a new todo item."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    DEFAULT_CSS = """
    NewTodoScreen {
        align: center top;
    }
    NewTodoScreen Input {
        width: 80%;
        margin-top: 4;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="New todo", id="new-todo")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss("")


class PomodoroApp(App[None]):
    """Progress bar, today's intervals, and the todo list on one screen."""

    CSS = """
    #phase-bar {
        height: 1;
    }
    #today {
        height: 1;
        margin: 1 0 0 1;
    }
    #todos {
        margin: 1 0 0 1;
    }
    """

    BINDINGS = [
        Binding("s", "pomodoro('start')", "Start"),
        Binding("x", "pomodoro('stop')", "Stop"),
        Binding("r", "pomodoro('reset')", "Reset"),
        Binding("j,down", "select(1)", "Down", show=False),
        Binding("k,up", "select(-1)", "Up", show=False),
        Binding("space", "toggle_todo", "Done"),
        Binding("n", "new_todo", "New"),
        Binding("D", "delete_todo", "Delete"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: PomodoroSession,
        *,
        bell_service: Optional[BellService] = None,
        bell_enabled: bool = True,
        poll_interval_seconds: float = 0.02,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__()
        self._pomodoro_session = session
        self._poll_interval_seconds = poll_interval_seconds
        self._ui_logger = logger or logging.getLogger("tui")
        self._tick_processor = TickProcessor(
            TickDependencies(
                bell_service=bell_service,
                terminal_bell=self.bell,
                logger=logging.getLogger("ticks"),
                enabled=bell_enabled,
            )
        )

    def compose(self) -> ComposeResult:
        # Kept as attributes: the new-todo prompt covers the main screen
        # while ticks keep redrawing it.
        self._bar_view = Static(id="phase-bar")
        self._today_view = Static(id="today")
        self._todo_view = Static(id="todos")
        yield self._bar_view
        yield self._today_view
        yield self._todo_view
        yield Footer()

    def on_mount(self) -> None:
        self.set_interval(self._poll_interval_seconds, self._on_tick)
        self._redraw()

    def _on_tick(self) -> None:
        self._tick_processor.handle_tick(self._pomodoro_session.tick())
        self._redraw()

    def _redraw(self) -> None:
        session = self._pomodoro_session
        self._bar_view.update(render_phase_bar(session.snapshot(), self.size.width))
        self._today_view.update(render_today(session.history))
        self._todo_view.update(
            render_todos(session.todos.items, session.todos.selected_index)
        )

    def action_pomodoro(self, action: str) -> None:
        result = self._pomodoro_session.apply(action)  # type: ignore[arg-type]
        if not result.accepted:
            self._ui_logger.debug("Ignored %s: %s", action, result.reason)
        self._redraw()

    def action_select(self, delta: int) -> None:
        self._pomodoro_session.todos.advance_selection(delta)
        self._redraw()

    def action_toggle_todo(self) -> None:
        self._pomodoro_session.todos.toggle_done()
        self._redraw()

    def action_delete_todo(self) -> None:
        self._pomodoro_session.todos.delete()
        self._redraw()

    def action_new_todo(self) -> None:
        self.push_screen(NewTodoScreen(), self._add_todo)

    def _add_todo(self, text: Optional[str]) -> None:
        if text and self._pomodoro_session.todos.insert(text):
            self._ui_logger.info("Added todo: %s", text)
        self._redraw()
