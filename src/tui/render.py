"""Rich text builders for the phase bar, the today strip, and the todo list."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.text import Text

from pomodoro import Interval, PomodoroSnapshot
from pomodoro.constants import (
    PHASE_PAUSE,
    PHASE_PAUSE_DONE,
    PHASE_WORK_DONE,
    PHASE_WORKING,
)
from runtime.messages import phase_status_message
from todo import TodoItem

BAR_STYLES: dict[str, str] = {
    PHASE_WORKING: "black on green",
    PHASE_WORK_DONE: "black on blue",
    PHASE_PAUSE: "black on blue",
    PHASE_PAUSE_DONE: "black on yellow",
}
WORK_BLOCK_STYLE = "black on green"
BREAK_BLOCK_STYLE = "dim"


def bar_length(snapshot: PomodoroSnapshot, width: int) -> int:
    if width <= 0:
        return 0
    if snapshot.is_done:
        return width
    return max(1, min(width, int(snapshot.elapsed_fraction * width)))


def render_phase_bar(snapshot: PomodoroSnapshot, width: int) -> Text:
    """Single line: status at the left, pomodoro badge at the right."""
    width = max(1, width)
    cells = [" "] * width
    status = phase_status_message(snapshot)
    for offset, char in enumerate(status[: max(0, width - 1)]):
        cells[1 + offset] = char
    badge = str(snapshot.pomodoros_done)
    if width >= len(badge) + 2:
        start = width - len(badge) - 1
        cells[start : start + len(badge)] = list(badge)

    text = Text("".join(cells))
    text.stylize(BAR_STYLES[snapshot.phase], 0, bar_length(snapshot, width))
    return text


def render_today(intervals: Iterable[Interval]) -> Text:
    """Minutes per finished interval, work on green, breaks dimmed."""
    text = Text()
    for interval in intervals:
        style = WORK_BLOCK_STYLE if interval.is_work else BREAK_BLOCK_STYLE
        text.append(f" {interval.duration_minutes} ", style=style)
    return text


def render_todos(items: Sequence[TodoItem], selected_index: int) -> Text:
    text = Text()
    for index, item in enumerate(items):
        status_char = "x" if item.done else " "
        styles = []
        if index == selected_index:
            styles.append("bold")
        if item.done:
            styles.append("dim")
        if index:
            text.append("\n")
        text.append(f"[{status_char}] {item.text}", style=" ".join(styles))
    return text
