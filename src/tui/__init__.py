"""Terminal UI for the pomodoro todo timer."""

from .app import NewTodoScreen, PomodoroApp

__all__ = ["NewTodoScreen", "PomodoroApp"]
