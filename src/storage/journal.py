"""Append-only, human readable logs of finished work and of the todo list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from pomodoro import Interval
from todo import TodoItem

from .errors import JournalWriteError


def format_work_line(day: str, interval: Interval) -> str:
    """Format one work interval as `day start end minutes label`."""
    line = (
        f"{day} {interval.start:%H:%M} {interval.end:%H:%M} "
        f"{interval.duration_minutes}"
    )
    if interval.label:
        line = f"{line} {interval.label}"
    return line


def format_todo_block(day: str, items: Iterable[TodoItem]) -> str:
    lines = ["", day]
    for item in items:
        done_indicator = "x" if item.done else " "
        lines.append(f" {done_indicator} {item.text}")
    return "\n".join(lines) + "\n"


class _AppendOnlyFile:
    def __init__(self, path: str | Path, logger: logging.Logger):
        self._path = Path(path).expanduser()
        self._logger = logger

    @property
    def path(self) -> Path:
        return self._path

    def _append(self, text: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as error:
            raise JournalWriteError(f"Could not write to {self._path}: {error}") from error


class WorkJournal(_AppendOnlyFile):
    """One line per finalized work interval."""

    def __init__(self, path: str | Path, logger: Optional[logging.Logger] = None):
        super().__init__(path, logger or logging.getLogger("storage.journal"))

    def append(self, day: str, interval: Interval) -> None:
        if not interval.is_work:
            return
        self._append(format_work_line(day, interval) + "\n")
        self._logger.debug("Journaled work interval to %s", self._path)


class TodoArchive(_AppendOnlyFile):
    """Day header followed by every todo item with its done marker."""

    def __init__(self, path: str | Path, logger: Optional[logging.Logger] = None):
        super().__init__(path, logger or logging.getLogger("storage.todo_archive"))

    def append(self, day: str, items: Iterable[TodoItem]) -> None:
        self._append(format_todo_block(day, items))
