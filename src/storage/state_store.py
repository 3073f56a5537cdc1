"""JSON snapshot of the day, the todo list, and the interval history."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from pomodoro import Interval
from pomodoro.constants import INTERVAL_BREAK, INTERVAL_WORK
from todo import TodoItem

from .errors import StateLoadError, StateSaveError

_INTERVAL_KINDS = {INTERVAL_WORK, INTERVAL_BREAK}


@dataclass
class SessionSnapshot:
    """Everything that survives a restart."""
    day: str = ""
    todos: list[TodoItem] = field(default_factory=list)
    history: list[Interval] = field(default_factory=list)


def snapshot_to_dict(snapshot: SessionSnapshot) -> dict[str, Any]:
    return {
        "day": snapshot.day,
        "todos": [{"text": item.text, "done": item.done} for item in snapshot.todos],
        "history": [
            {
                "kind": interval.kind,
                "start": interval.start.isoformat(),
                "end": interval.end.isoformat(),
                "duration_seconds": interval.duration_seconds,
                "label": interval.label,
            }
            for interval in snapshot.history
        ],
    }


def snapshot_from_dict(raw: Mapping[str, Any]) -> SessionSnapshot:
    """Decode a snapshot mapping, raising `StateLoadError` on bad content."""
    if not isinstance(raw, Mapping):
        raise StateLoadError("State root must be an object.")
    try:
        day = raw.get("day", "")
        if not isinstance(day, str):
            raise StateLoadError("State field 'day' must be a string.")
        todos = [_todo_from_dict(item) for item in raw.get("todos", [])]
        history = [_interval_from_dict(item) for item in raw.get("history", [])]
    except (KeyError, TypeError, ValueError) as error:
        raise StateLoadError(f"Malformed state content: {error}") from error
    return SessionSnapshot(day=day, todos=todos, history=history)


def _todo_from_dict(raw: Mapping[str, Any]) -> TodoItem:
    text = raw["text"]
    if not isinstance(text, str):
        raise TypeError("todo text must be a string")
    return TodoItem(text=text, done=bool(raw.get("done", False)))


def _interval_from_dict(raw: Mapping[str, Any]) -> Interval:
    kind = raw["kind"]
    if kind not in _INTERVAL_KINDS:
        raise ValueError(f"unknown interval kind: {kind!r}")
    return Interval(
        kind=kind,
        start=datetime.fromisoformat(raw["start"]),
        end=datetime.fromisoformat(raw["end"]),
        duration_seconds=float(raw["duration_seconds"]),
        label=str(raw.get("label", "")),
    )


class StateStore:
    """Loads and atomically saves `SessionSnapshot` as a JSON document."""

    def __init__(self, path: str | Path, logger: Optional[logging.Logger] = None):
        self._path = Path(path).expanduser()
        self._logger = logger or logging.getLogger("storage.state")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SessionSnapshot:
        if not self._path.exists():
            self._logger.info("No saved state at %s; starting fresh", self._path)
            return SessionSnapshot()

        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as error:
            raise StateLoadError(f"Failed to read state file {self._path}: {error}") from error

        snapshot = snapshot_from_dict(raw)
        self._logger.debug(
            "Loaded state: day=%s todos=%d intervals=%d",
            snapshot.day,
            len(snapshot.todos),
            len(snapshot.history),
        )
        return snapshot

    def save(self, snapshot: SessionSnapshot) -> None:
        payload = json.dumps(snapshot_to_dict(snapshot), indent=2, ensure_ascii=False)
        tmp_name: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                fh.write(payload)
                fh.write("\n")
            os.replace(tmp_name, self._path)
        except OSError as error:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StateSaveError(f"Failed to write state file {self._path}: {error}") from error

        self._logger.debug("Saved state to %s", self._path)
