"""Config file resolution and loading for the pomodoro todo timer."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    BellSettings,
    LoggingSettings,
    StorageSettings,
    TimerSettings,
    UISettings,
)

CONFIG_ENV_VAR = "POMODORO_CONFIG_FILE"

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "BellSettings",
    "CONFIG_ENV_VAR",
    "LoggingSettings",
    "StorageSettings",
    "TimerSettings",
    "UISettings",
    "default_app_config",
    "load_app_config",
    "resolve_config_path",
]


def resolve_config_path(config_path: str | None = None) -> Path:
    raw = config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


def default_app_config() -> AppConfig:
    """Built-in settings used when no config file exists."""
    return parse_app_config({}, base_dir=Path.cwd(), source_file="")


def load_app_config(config_path: str | None = None) -> AppConfig:
    """Load `config.toml`.

    An explicitly requested file (argument or environment variable) must
    exist. When only the implicit `config.toml` is missing the built-in
    defaults apply.
    """
    explicit = bool(config_path or os.getenv(CONFIG_ENV_VAR))
    path = resolve_config_path(config_path)
    if not path.exists():
        if not explicit:
            return default_app_config()
        raise AppConfigurationError(f"Config file not found: {path}")
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    if not isinstance(raw, Mapping):
        raise AppConfigurationError("Root config TOML object must be a table.")

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))
