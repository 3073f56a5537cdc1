"""One-shot countdown built on the accelerated monotonic `Timer`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .clock import Timer


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class CountdownRecord:
    """Start/end wall-clock times and accelerated duration of a countdown."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    duration_seconds: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.start is None


class PomodoroTimer:
    """Countdown towards a target duration that rings exactly once.

    The countdown keeps running past its target so callers can show overtime.
    `is_ringing()` consumes the ring event: it returns True on the first call
    after the target is reached and False afterwards until the next `start()`.
    """

    def __init__(
        self,
        *,
        acceleration: float = 1.0,
        now_fn: Optional[Callable[[], datetime]] = None,
    ):
        self._timer = Timer(acceleration=acceleration)
        self._now_fn = now_fn or local_now
        self._target_seconds = 0.0
        self._has_rung = False
        self._started_at: Optional[datetime] = None
        self._halted_at: Optional[datetime] = None
        self._halted_at_monotonic: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._started_at is not None

    @property
    def halted(self) -> bool:
        return self._halted_at_monotonic is not None

    @property
    def target_seconds(self) -> float:
        return self._target_seconds

    def start(self, target_seconds: float) -> None:
        if target_seconds <= 0:
            raise ValueError("target_seconds must be greater than zero")
        self._target_seconds = float(target_seconds)
        self._has_rung = False
        self._halted_at = None
        self._halted_at_monotonic = None
        self._started_at = self._now_fn()
        self._timer.start()

    def halt(self) -> None:
        """Freeze elapsed time at the current instant without ringing."""
        if not self.active or self.halted:
            return
        self._halted_at_monotonic = time.monotonic()
        self._halted_at = self._now_fn()
        self._has_rung = True

    def stop(self) -> CountdownRecord:
        if self._started_at is None:
            return CountdownRecord()

        record = CountdownRecord(
            start=self._started_at,
            end=self._halted_at or self._now_fn(),
            duration_seconds=self.elapsed_seconds(),
        )
        self._started_at = None
        self._halted_at = None
        self._halted_at_monotonic = None
        self._timer.reset()
        return record

    def elapsed_seconds(self) -> float:
        return self._timer.elapsed_seconds(now=self._halted_at_monotonic)

    def remaining_seconds(self) -> float:
        return max(0.0, self._target_seconds - self.elapsed_seconds())

    def overtime_seconds(self) -> float:
        return max(0.0, self.elapsed_seconds() - self._target_seconds)

    def elapsed_fraction(self) -> float:
        if self._target_seconds <= 0:
            return 0.0
        return self.elapsed_seconds() / self._target_seconds

    # Only returns True once, when called after the time is up.
    def is_ringing(self) -> bool:
        if self._has_rung or not self.active:
            return False
        if self.elapsed_seconds() >= self._target_seconds:
            self._has_rung = True
            return True
        return False
