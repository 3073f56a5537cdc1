"""Tick handler that turns ring events into an audible bell."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from bell import BellError, BellService
from pomodoro import PomodoroTick

from .messages import phase_status_message


@dataclass(frozen=True)
class TickDependencies:
    """Dependencies required for processing ring events."""
    bell_service: Optional[BellService]
    terminal_bell: Callable[[], None]
    logger: logging.Logger
    enabled: bool = True


class TickProcessor:
    """Rings the bell once per ring event; falls back to the terminal bell."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    def handle_tick(self, tick: Optional[PomodoroTick]) -> bool:
        """Return True when the tick was a ring."""
        if tick is None or not tick.rang:
            return False

        deps = self._dependencies
        deps.logger.info("Ring: %s", phase_status_message(tick.snapshot))
        if not deps.enabled:
            return True

        if deps.bell_service:
            try:
                deps.bell_service.ring()
                return True
            except BellError as error:
                deps.logger.error("Bell playback failed: %s", error)
        deps.terminal_bell()
        return True
