import logging
import sys
from pathlib import Path
from typing import Optional

from app_config import AppConfigurationError, load_app_config
from bell import BellConfig, BellConfigurationError, BellService
from runtime import PomodoroSession, SessionConfig
from tui import PomodoroApp


def setup_logging(level: str = "INFO", log_file: str = "") -> logging.Logger:
    """Configure logging for the application.

    The terminal belongs to the UI, so records go to `log_file` when set.
    """
    handler_kwargs: dict = {}
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler_kwargs["filename"] = log_file
        handler_kwargs["encoding"] = "utf-8"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        **handler_kwargs,
    )
    return logging.getLogger("pomodoro_todo")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the terminal pomodoro timer until the user quits."""
    args = sys.argv[1:] if argv is None else argv
    config_path = args[0] if args else None

    try:
        app_config = load_app_config(config_path)
    except AppConfigurationError as error:
        setup_logging()
        logging.getLogger("pomodoro_todo").error("App configuration error: %s", error)
        return 1

    try:
        logger = setup_logging(app_config.logging.level, app_config.logging.file)
    except OSError as error:
        logger = setup_logging(app_config.logging.level)
        logger.warning("Cannot log to %s, using stderr: %s", app_config.logging.file, error)
    logger.info("Loaded runtime config: %s", app_config.source_file or "<defaults>")

    bell_service: Optional[BellService] = None
    bell_enabled = app_config.bell.enabled
    try:
        bell_config = BellConfig.from_settings(app_config.bell)
        if bell_config.enabled and bell_config.sound:
            bell_service = BellService(bell_config, logger=logging.getLogger("bell"))
    except BellConfigurationError as error:
        logger.warning("Bell configuration error, using terminal bell: %s", error)

    session = PomodoroSession(SessionConfig.from_app_config(app_config))
    session.open()

    try:
        PomodoroApp(
            session,
            bell_service=bell_service,
            bell_enabled=bell_enabled,
            poll_interval_seconds=app_config.ui.poll_interval_seconds,
        ).run()
    except Exception as error:
        logger.error("Unexpected error: %s", error, exc_info=True)
        return 1
    finally:
        logger.info("Stopping session...")
        session.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
