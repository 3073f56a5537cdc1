"""Monotonic elapsed-time clock with an optional acceleration factor."""

from __future__ import annotations

import time
from typing import Optional


class Timer:
    """Reports accelerated seconds elapsed since `start()`.

    The acceleration factor compresses real time for demos and tests; with a
    factor of 100 a 25 minute work phase passes in 15 seconds.
    """

    def __init__(self, *, acceleration: float = 1.0):
        if acceleration <= 0:
            raise ValueError("acceleration must be greater than zero")
        self._acceleration = float(acceleration)
        self._started_at_monotonic: Optional[float] = None

    @property
    def acceleration(self) -> float:
        return self._acceleration

    @property
    def started(self) -> bool:
        return self._started_at_monotonic is not None

    def start(self) -> None:
        self._started_at_monotonic = time.monotonic()

    def reset(self) -> None:
        self._started_at_monotonic = None

    def elapsed_seconds(self, now: Optional[float] = None) -> float:
        if self._started_at_monotonic is None:
            return 0.0
        current = time.monotonic() if now is None else now
        return max(0.0, current - self._started_at_monotonic) * self._acceleration
