"""Status text builders for the phase bar."""

from __future__ import annotations

from pomodoro import PomodoroSnapshot
from pomodoro.constants import (
    PHASE_PAUSE,
    PHASE_PAUSE_DONE,
    PHASE_WORK_DONE,
    PHASE_WORKING,
)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as `MM:SS`."""
    minutes, remainder = divmod(max(0, int(round(seconds))), 60)
    return f"{minutes:02d}:{remainder:02d}"


def format_overtime(seconds: float) -> str:
    minutes, remainder = divmod(max(0, int(round(seconds))), 60)
    return f"+{minutes}:{remainder:02d}"


def phase_status_message(snapshot: PomodoroSnapshot) -> str:
    """Build the text painted over the progress bar."""
    if snapshot.phase == PHASE_WORKING:
        return f"work {format_duration(snapshot.remaining_seconds)}"
    if snapshot.phase == PHASE_WORK_DONE:
        return f"work DONE ({format_overtime(snapshot.overtime_seconds)})"
    if snapshot.phase == PHASE_PAUSE:
        return f"pause {format_duration(snapshot.remaining_seconds)}"
    if snapshot.phase == PHASE_PAUSE_DONE:
        return "pause OVER"
    return snapshot.phase
