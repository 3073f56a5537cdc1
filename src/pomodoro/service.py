"""Pomodoro work/break phase state machine driven by user actions and ticks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Literal, Optional

from .constants import (
    ACTION_RESET,
    ACTION_START,
    ACTION_STOP,
    DEFAULT_ACCELERATION,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_SECONDS,
    DEFAULT_SHORT_BREAK_SECONDS,
    DEFAULT_WORK_SECONDS,
    DONE_PHASES,
    INTERVAL_BREAK,
    INTERVAL_WORK,
    PHASE_PAUSE,
    PHASE_PAUSE_DONE,
    PHASE_WORK_DONE,
    PHASE_WORKING,
    REASON_ALREADY_RUNNING,
    REASON_BREAK_RESTARTED,
    REASON_BREAK_STARTED,
    REASON_LONG_BREAK_STARTED,
    REASON_NOT_RUNNING,
    REASON_NOTHING_TO_RESET,
    REASON_RESET,
    REASON_STOPPED,
    REASON_UNSUPPORTED_ACTION,
    REASON_WORK_STARTED,
    RUNNING_PHASES,
)
from .countdown import PomodoroTimer
from .history import History, Interval, IntervalKind

PomodoroPhase = Literal["working", "work_done", "pause", "pause_done"]
PomodoroAction = Literal["start", "stop", "reset"]

PHASE_LABELS: dict[str, str] = {
    PHASE_WORKING: "work",
    PHASE_WORK_DONE: "work DONE",
    PHASE_PAUSE: "pause",
    PHASE_PAUSE_DONE: "pause OVER",
}


@dataclass(frozen=True)
class PhaseDurations:
    """Target durations of each phase and the long-break cadence."""
    work_seconds: float = DEFAULT_WORK_SECONDS
    short_break_seconds: float = DEFAULT_SHORT_BREAK_SECONDS
    long_break_seconds: float = DEFAULT_LONG_BREAK_SECONDS
    long_break_every: int = DEFAULT_LONG_BREAK_EVERY

    def __post_init__(self) -> None:
        for name in ("work_seconds", "short_break_seconds", "long_break_seconds"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be greater than zero")
        if self.long_break_every < 1:
            raise ValueError("long_break_every must be at least 1")


@dataclass(frozen=True)
class PomodoroSnapshot:
    """Side-effect-free view of the machine consumed by renderers."""
    phase: PomodoroPhase
    target_seconds: float
    remaining_seconds: float
    overtime_seconds: float
    elapsed_fraction: float
    pomodoros_done: int

    @property
    def is_running(self) -> bool:
        return self.phase in RUNNING_PHASES

    @property
    def is_done(self) -> bool:
        return self.phase in DONE_PHASES

    @property
    def label(self) -> str:
        return PHASE_LABELS[self.phase]


@dataclass(frozen=True)
class PomodoroActionResult:
    """Result envelope returned after applying a user action."""
    action: str
    accepted: bool
    reason: str
    snapshot: PomodoroSnapshot
    interval: Optional[Interval] = None


@dataclass(frozen=True)
class PomodoroTick:
    """Tick payload emitted when a running countdown rings."""
    snapshot: PomodoroSnapshot
    rang: bool = False


class PomodoroPhaseMachine:
    """Work/break cycle with pomodoro counting and long-break cadence.

    A finished work phase is credited exactly once, on the first `start`
    that leaves `work_done`. The counter value from before that credit is
    remembered so a later `reset` out of `work_done` can restore it.
    """

    def __init__(
        self,
        *,
        durations: Optional[PhaseDurations] = None,
        acceleration: float = DEFAULT_ACCELERATION,
        history: Optional[History] = None,
        label_provider: Optional[Callable[[], str]] = None,
        now_fn: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._durations = durations or PhaseDurations()
        self._history = history if history is not None else History()
        self._label_provider = label_provider or (lambda: "")
        self._logger = logger or logging.getLogger("pomodoro")
        self._countdown = PomodoroTimer(acceleration=acceleration, now_fn=now_fn)

        self._phase: PomodoroPhase = PHASE_PAUSE_DONE
        self._countdown_kind: Optional[IntervalKind] = None
        self._pomodoros_done = 0
        self._count_before_credit: Optional[int] = None
        self._break_target_seconds = self._durations.short_break_seconds

    @property
    def phase(self) -> PomodoroPhase:
        return self._phase

    @property
    def phase_label(self) -> str:
        return PHASE_LABELS[self._phase]

    @property
    def pomodoros_done(self) -> int:
        return self._pomodoros_done

    @property
    def history(self) -> History:
        return self._history

    @property
    def durations(self) -> PhaseDurations:
        return self._durations

    @property
    def remaining_seconds(self) -> float:
        if not self._countdown.active:
            return 0.0
        return self._countdown.remaining_seconds()

    @property
    def overtime_seconds(self) -> float:
        if not self._countdown.active:
            return 0.0
        return self._countdown.overtime_seconds()

    @property
    def elapsed_fraction(self) -> float:
        if self._phase in DONE_PHASES or not self._countdown.active:
            return 1.0
        return min(1.0, max(0.0, self._countdown.elapsed_fraction()))

    def snapshot(self) -> PomodoroSnapshot:
        return PomodoroSnapshot(
            phase=self._phase,
            target_seconds=self._countdown.target_seconds,
            remaining_seconds=self.remaining_seconds,
            overtime_seconds=self.overtime_seconds,
            elapsed_fraction=self.elapsed_fraction,
            pomodoros_done=self._pomodoros_done,
        )

    def start(self) -> PomodoroActionResult:
        return self.apply(ACTION_START)

    def stop(self) -> PomodoroActionResult:
        return self.apply(ACTION_STOP)

    def reset(self) -> PomodoroActionResult:
        return self.apply(ACTION_RESET)

    def apply(self, action: PomodoroAction) -> PomodoroActionResult:
        if action == ACTION_START:
            return self._apply_start()
        if action == ACTION_STOP:
            return self._apply_stop()
        if action == ACTION_RESET:
            return self._apply_reset()
        return self._result(action, False, REASON_UNSUPPORTED_ACTION)

    def tick(self) -> Optional[PomodoroTick]:
        """Consume the countdown ring once per call and advance on it."""
        if self._phase not in RUNNING_PHASES:
            return None
        if not self._countdown.is_ringing():
            return None

        if self._phase == PHASE_WORKING:
            self._phase = PHASE_WORK_DONE
            self._logger.info("Work phase rang after %.1fs", self._countdown.elapsed_seconds())
        else:
            self._phase = PHASE_PAUSE_DONE
            self._logger.info("Break rang after %.1fs", self._countdown.elapsed_seconds())
        return PomodoroTick(snapshot=self.snapshot(), rang=True)

    def shutdown(self) -> list[Interval]:
        """Finalize any in-flight countdown so no interval is dropped."""
        finalized: list[Interval] = []
        if self._countdown.active:
            interval = self._finalize_countdown()
            if interval is not None:
                finalized.append(interval)
        self._phase = PHASE_PAUSE_DONE
        self._count_before_credit = None
        return finalized

    def _apply_start(self) -> PomodoroActionResult:
        if self._phase in RUNNING_PHASES:
            return self._result(ACTION_START, False, REASON_ALREADY_RUNNING)

        if self._phase == PHASE_WORK_DONE:
            interval: Optional[Interval] = None
            if self._count_before_credit is None:
                interval = self._finalize_countdown()
                reason = self._credit_pomodoro()
            else:
                # Break was reset; the finished work phase is already credited.
                reason = REASON_BREAK_RESTARTED
            self._begin(PHASE_PAUSE, INTERVAL_BREAK, self._break_target_seconds)
            return self._result(ACTION_START, True, reason, interval)

        interval = self._finalize_countdown()
        self._count_before_credit = None
        self._begin(PHASE_WORKING, INTERVAL_WORK, self._durations.work_seconds)
        return self._result(ACTION_START, True, REASON_WORK_STARTED, interval)

    def _apply_stop(self) -> PomodoroActionResult:
        if self._phase == PHASE_WORKING:
            self._countdown.halt()
            self._phase = PHASE_WORK_DONE
        elif self._phase == PHASE_PAUSE:
            self._countdown.halt()
            self._phase = PHASE_PAUSE_DONE
        else:
            return self._result(ACTION_STOP, False, REASON_NOT_RUNNING)

        self._logger.info(
            "Countdown stopped early: phase=%s elapsed=%.1fs",
            self._phase,
            self._countdown.elapsed_seconds(),
        )
        return self._result(ACTION_STOP, True, REASON_STOPPED)

    def _apply_reset(self) -> PomodoroActionResult:
        if self._phase == PHASE_PAUSE_DONE:
            return self._result(ACTION_RESET, False, REASON_NOTHING_TO_RESET)

        self._discard_countdown()
        if self._phase == PHASE_PAUSE:
            self._phase = PHASE_WORK_DONE
        else:
            if self._count_before_credit is not None:
                self._pomodoros_done = self._count_before_credit
                self._count_before_credit = None
            self._phase = PHASE_PAUSE_DONE

        self._logger.info(
            "Phase reset: phase=%s pomodoros_done=%d",
            self._phase,
            self._pomodoros_done,
        )
        return self._result(ACTION_RESET, True, REASON_RESET)

    def _credit_pomodoro(self) -> str:
        self._count_before_credit = self._pomodoros_done
        self._pomodoros_done += 1
        if self._pomodoros_done >= self._durations.long_break_every:
            self._pomodoros_done = 0
            self._break_target_seconds = self._durations.long_break_seconds
            return REASON_LONG_BREAK_STARTED
        self._break_target_seconds = self._durations.short_break_seconds
        return REASON_BREAK_STARTED

    def _begin(self, phase: PomodoroPhase, kind: IntervalKind, target_seconds: float) -> None:
        self._phase = phase
        self._countdown_kind = kind
        self._countdown.start(target_seconds)
        self._logger.info("Countdown started: phase=%s target=%.0fs", phase, target_seconds)

    def _finalize_countdown(self) -> Optional[Interval]:
        kind = self._countdown_kind
        record = self._countdown.stop()
        self._countdown_kind = None
        if kind == INTERVAL_WORK:
            interval = self._history.finalize_work(record, label=self._label_provider())
        elif kind == INTERVAL_BREAK:
            interval = self._history.finalize_break(record)
        else:
            interval = None

        if interval is not None:
            self._logger.info(
                "Interval finalized: kind=%s duration=%.1fs label=%s",
                interval.kind,
                interval.duration_seconds,
                interval.label,
            )
        return interval

    def _discard_countdown(self) -> None:
        self._countdown.stop()
        self._countdown_kind = None

    def _result(
        self,
        action: str,
        accepted: bool,
        reason: str,
        interval: Optional[Interval] = None,
    ) -> PomodoroActionResult:
        return PomodoroActionResult(
            action=action,
            accepted=accepted,
            reason=reason,
            snapshot=self.snapshot(),
            interval=interval,
        )
