"""Session object owning the phase machine, todo list, and day history."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from app_config import AppConfig
from pomodoro import (
    History,
    Interval,
    PhaseDurations,
    PomodoroAction,
    PomodoroActionResult,
    PomodoroPhaseMachine,
    PomodoroSnapshot,
    PomodoroTick,
)
from storage import (
    SessionSnapshot,
    StateStore,
    StorageError,
    TodoArchive,
    WorkJournal,
)
from todo import TodoList


def current_day() -> str:
    return dt.date.today().isoformat()


@dataclass(frozen=True)
class SessionConfig:
    """Everything a session needs, passed in at construction."""
    durations: PhaseDurations
    acceleration: float
    state_file: str
    journal_file: str
    todo_archive_file: str

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "SessionConfig":
        timer = app_config.timer
        return cls(
            durations=PhaseDurations(
                work_seconds=timer.work_seconds,
                short_break_seconds=timer.short_break_seconds,
                long_break_seconds=timer.long_break_seconds,
                long_break_every=timer.long_break_every,
            ),
            acceleration=timer.acceleration,
            state_file=app_config.storage.state_file,
            journal_file=app_config.storage.journal_file,
            todo_archive_file=app_config.storage.todo_archive_file,
        )


class PomodoroSession:
    """Single logical session mutated only from the UI control loop.

    Storage failures never abort the session: they are logged and the
    session carries on with whatever state it has.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        state_store: Optional[StateStore] = None,
        journal: Optional[WorkJournal] = None,
        todo_archive: Optional[TodoArchive] = None,
        today_fn: Optional[Callable[[], str]] = None,
        now_fn: Optional[Callable[[], dt.datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("session")
        self._state_store = state_store or StateStore(config.state_file)
        self._journal = journal or WorkJournal(config.journal_file)
        self._todo_archive = todo_archive or TodoArchive(config.todo_archive_file)
        self._today_fn = today_fn or current_day

        self._day = ""
        self._todos = TodoList.with_default(())
        self._history = History()
        self._machine = PomodoroPhaseMachine(
            durations=config.durations,
            acceleration=config.acceleration,
            history=self._history,
            label_provider=lambda: self._todos.current_item_text(),
            now_fn=now_fn,
            logger=logging.getLogger("pomodoro"),
        )
        self._closed = False

    @property
    def day(self) -> str:
        return self._day

    @property
    def todos(self) -> TodoList:
        return self._todos

    @property
    def history(self) -> History:
        return self._history

    @property
    def machine(self) -> PomodoroPhaseMachine:
        return self._machine

    def open(self) -> None:
        """Load persisted state and apply the day-boundary check."""
        try:
            snapshot = self._state_store.load()
        except StorageError as error:
            self._logger.warning("Could not load saved state, starting empty: %s", error)
            snapshot = SessionSnapshot()

        today = self._today_fn()
        self._history.clear()
        if snapshot.day == today:
            for interval in snapshot.history:
                self._history.append(interval)
        elif snapshot.day:
            self._logger.info(
                "New day %s (saved state is from %s); clearing history",
                today,
                snapshot.day,
            )
        self._day = today
        self._todos = TodoList.with_default(snapshot.todos)
        self._logger.info(
            "Session opened: day=%s todos=%d intervals=%d",
            self._day,
            len(self._todos),
            len(self._history),
        )

    def snapshot(self) -> PomodoroSnapshot:
        return self._machine.snapshot()

    def apply(self, action: PomodoroAction) -> PomodoroActionResult:
        result = self._machine.apply(action)
        if result.interval is not None:
            self._journal_interval(result.interval)
        return result

    def tick(self) -> Optional[PomodoroTick]:
        return self._machine.tick()

    def close(self) -> None:
        """Flush in-flight intervals, archive todos, and save state."""
        if self._closed:
            return
        self._closed = True

        for interval in self._machine.shutdown():
            self._journal_interval(interval)

        try:
            self._todo_archive.append(self._day, self._todos.items)
        except StorageError as error:
            self._logger.warning("Skipping todo archive: %s", error)

        snapshot = SessionSnapshot(
            day=self._day,
            todos=self._todos.pending_items(),
            history=list(self._history.intervals),
        )
        try:
            self._state_store.save(snapshot)
        except StorageError as error:
            self._logger.error("Could not save state: %s", error)
            return
        self._logger.info(
            "Session saved: todos=%d intervals=%d",
            len(snapshot.todos),
            len(snapshot.history),
        )

    def _journal_interval(self, interval: Interval) -> None:
        if not interval.is_work:
            return
        try:
            self._journal.append(self._day, interval)
        except StorageError as error:
            self._logger.warning("Skipping journal line: %s", error)
