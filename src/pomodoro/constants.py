"""Phase, action, and reason constants used by the pomodoro phase machine."""

from __future__ import annotations

DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_SHORT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 15 * 60
DEFAULT_LONG_BREAK_EVERY = 4
DEFAULT_ACCELERATION = 1.0

PHASE_WORKING = "working"
PHASE_WORK_DONE = "work_done"
PHASE_PAUSE = "pause"
PHASE_PAUSE_DONE = "pause_done"

RUNNING_PHASES: frozenset[str] = frozenset({PHASE_WORKING, PHASE_PAUSE})
DONE_PHASES: frozenset[str] = frozenset({PHASE_WORK_DONE, PHASE_PAUSE_DONE})

INTERVAL_WORK = "work"
INTERVAL_BREAK = "break"

ACTION_START = "start"
ACTION_STOP = "stop"
ACTION_RESET = "reset"

REASON_WORK_STARTED = "work_started"
REASON_BREAK_STARTED = "break_started"
REASON_LONG_BREAK_STARTED = "long_break_started"
REASON_BREAK_RESTARTED = "break_restarted"
REASON_STOPPED = "stopped"
REASON_RESET = "reset"
REASON_ALREADY_RUNNING = "already_running"
REASON_NOT_RUNNING = "not_running"
REASON_NOTHING_TO_RESET = "nothing_to_reset"
REASON_UNSUPPORTED_ACTION = "unsupported_action"
