"""Runtime session and tick handling exports."""

from .session import PomodoroSession, SessionConfig
from .ticks import TickDependencies, TickProcessor

__all__ = ["PomodoroSession", "SessionConfig", "TickDependencies", "TickProcessor"]
