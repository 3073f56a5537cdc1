from .clock import Timer
from .countdown import CountdownRecord, PomodoroTimer
from .history import History, Interval, IntervalKind
from .service import (
    PHASE_LABELS,
    PhaseDurations,
    PomodoroAction,
    PomodoroActionResult,
    PomodoroPhase,
    PomodoroPhaseMachine,
    PomodoroSnapshot,
    PomodoroTick,
)

__all__ = [
    "CountdownRecord",
    "History",
    "Interval",
    "IntervalKind",
    "PHASE_LABELS",
    "PhaseDurations",
    "PomodoroAction",
    "PomodoroActionResult",
    "PomodoroPhase",
    "PomodoroPhaseMachine",
    "PomodoroSnapshot",
    "PomodoroTick",
    "PomodoroTimer",
    "Timer",
]
