"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    BellSettings,
    LoggingSettings,
    StorageSettings,
    TimerSettings,
    UISettings,
)

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    timer = _parse_timer_settings(_section(raw, "timer"))
    storage = _parse_storage_settings(_section(raw, "storage"), base_dir=base_dir)
    bell = _parse_bell_settings(_section(raw, "bell"))
    ui = _parse_ui_settings(_section(raw, "ui"))
    logging_settings = _parse_logging_settings(_section(raw, "logging"), base_dir=base_dir)

    return AppConfig(
        timer=timer,
        storage=storage,
        bell=bell,
        ui=ui,
        logging=logging_settings,
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    defaults = TimerSettings()
    return TimerSettings(
        work_seconds=_as_positive_float(
            section.get("work_seconds", defaults.work_seconds),
            "timer.work_seconds",
        ),
        short_break_seconds=_as_positive_float(
            section.get("short_break_seconds", defaults.short_break_seconds),
            "timer.short_break_seconds",
        ),
        long_break_seconds=_as_positive_float(
            section.get("long_break_seconds", defaults.long_break_seconds),
            "timer.long_break_seconds",
        ),
        long_break_every=_as_positive_int(
            section.get("long_break_every", defaults.long_break_every),
            "timer.long_break_every",
        ),
        acceleration=_as_positive_float(
            section.get("acceleration", defaults.acceleration),
            "timer.acceleration",
        ),
    )


def _parse_storage_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> StorageSettings:
    defaults = StorageSettings()
    return StorageSettings(
        state_file=_resolve_path(
            base_dir,
            _as_str(section.get("state_file", defaults.state_file), "storage.state_file")
            or defaults.state_file,
        ),
        journal_file=_resolve_path(
            base_dir,
            _as_str(section.get("journal_file", defaults.journal_file), "storage.journal_file")
            or defaults.journal_file,
        ),
        todo_archive_file=_resolve_path(
            base_dir,
            _as_str(
                section.get("todo_archive_file", defaults.todo_archive_file),
                "storage.todo_archive_file",
            )
            or defaults.todo_archive_file,
        ),
    )


def _parse_bell_settings(section: Mapping[str, Any]) -> BellSettings:
    defaults = BellSettings()
    volume = _as_float(section.get("volume", defaults.volume), "bell.volume")
    if not 0.0 <= volume <= 1.0:
        raise AppConfigurationError("bell.volume must be in [0, 1].")
    return BellSettings(
        enabled=_as_bool(section.get("enabled", defaults.enabled), "bell.enabled"),
        sound=_as_bool(section.get("sound", defaults.sound), "bell.sound"),
        frequency_hz=_as_positive_float(
            section.get("frequency_hz", defaults.frequency_hz),
            "bell.frequency_hz",
        ),
        duration_seconds=_as_positive_float(
            section.get("duration_seconds", defaults.duration_seconds),
            "bell.duration_seconds",
        ),
        volume=volume,
        sample_rate_hz=_as_positive_int(
            section.get("sample_rate_hz", defaults.sample_rate_hz),
            "bell.sample_rate_hz",
        ),
        output_device=(
            _as_int(section.get("output_device"), "bell.output_device")
            if "output_device" in section
            else None
        ),
    )


def _parse_ui_settings(section: Mapping[str, Any]) -> UISettings:
    defaults = UISettings()
    return UISettings(
        poll_interval_seconds=_as_positive_float(
            section.get("poll_interval_seconds", defaults.poll_interval_seconds),
            "ui.poll_interval_seconds",
        ),
    )


def _parse_logging_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> LoggingSettings:
    defaults = LoggingSettings()
    level = _as_str(section.get("level", defaults.level), "logging.level").upper()
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"logging.level must be one of: {allowed}.")
    log_file = _as_str(section.get("file", defaults.file), "logging.file")
    return LoggingSettings(
        level=level,
        file=_resolve_path(base_dir, log_file) if log_file else "",
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")


def _as_positive_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number <= 0:
        raise AppConfigurationError(f"{field} must be greater than zero.")
    return number


def _as_positive_float(value: Any, field: str) -> float:
    number = _as_float(value, field)
    if number <= 0:
        raise AppConfigurationError(f"{field} must be greater than zero.")
    return number


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
