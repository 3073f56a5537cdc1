"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONFIG_FILE = "config.toml"
DEFAULT_DATA_DIR = "~/.local/share/pomodoro-todo"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Phase durations, long-break cadence and time acceleration from `[timer]`."""
    work_seconds: float = 25 * 60
    short_break_seconds: float = 5 * 60
    long_break_seconds: float = 15 * 60
    long_break_every: int = 4
    acceleration: float = 1.0


@dataclass(frozen=True)
class StorageSettings:
    """State and log file locations from `[storage]`."""
    state_file: str = f"{DEFAULT_DATA_DIR}/state.json"
    journal_file: str = f"{DEFAULT_DATA_DIR}/history.txt"
    todo_archive_file: str = f"{DEFAULT_DATA_DIR}/todo.txt"


@dataclass(frozen=True)
class BellSettings:
    """Ring tone and output selection from `[bell]`."""
    enabled: bool = True
    sound: bool = True
    frequency_hz: float = 880.0
    duration_seconds: float = 0.4
    volume: float = 0.3
    sample_rate_hz: int = 44100
    output_device: Optional[int] = None


@dataclass(frozen=True)
class UISettings:
    """Terminal UI loop settings from `[ui]`."""
    poll_interval_seconds: float = 0.02


@dataclass(frozen=True)
class LoggingSettings:
    """Log level and destination from `[logging]`."""
    level: str = "INFO"
    file: str = f"{DEFAULT_DATA_DIR}/pomodoro.log"


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    timer: TimerSettings
    storage: StorageSettings
    bell: BellSettings
    ui: UISettings
    logging: LoggingSettings
    source_file: str
