import os
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from app_config import (
    CONFIG_ENV_VAR,
    AppConfigurationError,
    TimerSettings,
    load_app_config,
    resolve_config_path,
)
from runtime import SessionConfig


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        env_patcher = patch.dict(os.environ, {}, clear=False)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        os.environ.pop(CONFIG_ENV_VAR, None)

    def test_load_app_config_parses_all_sections(self) -> None:
        config_path = self.root / "config.toml"
        _write_text(
            config_path,
            textwrap.dedent(
                """
                [timer]
                work_seconds = 600
                short_break_seconds = 60
                long_break_seconds = 120.5
                long_break_every = 3
                acceleration = 100

                [storage]
                state_file = "data/state.json"
                journal_file = "/var/tmp/history.txt"

                [bell]
                enabled = true
                sound = false
                volume = 0.5
                output_device = 2

                [ui]
                poll_interval_seconds = 0.05

                [logging]
                level = "debug"
                file = "logs/pomodoro.log"
                """
            ).strip(),
        )

        app_config = load_app_config(str(config_path))

        self.assertEqual(str(config_path), app_config.source_file)
        self.assertEqual(
            TimerSettings(
                work_seconds=600.0,
                short_break_seconds=60.0,
                long_break_seconds=120.5,
                long_break_every=3,
                acceleration=100.0,
            ),
            app_config.timer,
        )
        self.assertEqual(
            str((self.root / "data/state.json").resolve()),
            app_config.storage.state_file,
        )
        self.assertEqual("/var/tmp/history.txt", app_config.storage.journal_file)
        self.assertTrue(app_config.storage.todo_archive_file.endswith("pomodoro-todo/todo.txt"))
        self.assertFalse(app_config.bell.sound)
        self.assertEqual(0.5, app_config.bell.volume)
        self.assertEqual(2, app_config.bell.output_device)
        self.assertEqual(0.05, app_config.ui.poll_interval_seconds)
        self.assertEqual("DEBUG", app_config.logging.level)
        self.assertEqual(
            str((self.root / "logs/pomodoro.log").resolve()),
            app_config.logging.file,
        )

    def test_missing_implicit_config_uses_defaults(self) -> None:
        with patch("app_config.Path.cwd", return_value=self.root):
            app_config = load_app_config()

        self.assertEqual("", app_config.source_file)
        self.assertEqual(TimerSettings(), app_config.timer)
        self.assertEqual(1500.0, app_config.timer.work_seconds)
        self.assertIsNone(app_config.bell.output_device)
        self.assertFalse(app_config.storage.state_file.startswith("~"))

    def test_missing_explicit_config_raises(self) -> None:
        with self.assertRaises(AppConfigurationError):
            load_app_config(str(self.root / "nope.toml"))

    def test_env_var_selects_config_file(self) -> None:
        config_path = self.root / "custom.toml"
        _write_text(config_path, "[timer]\nwork_seconds = 42\n")
        os.environ[CONFIG_ENV_VAR] = str(config_path)

        self.assertEqual(config_path, resolve_config_path())
        self.assertEqual(42.0, load_app_config().timer.work_seconds)

    def test_env_var_pointing_to_missing_file_raises(self) -> None:
        os.environ[CONFIG_ENV_VAR] = str(self.root / "gone.toml")

        with self.assertRaises(AppConfigurationError):
            load_app_config()

    def test_invalid_toml_raises(self) -> None:
        config_path = self.root / "config.toml"
        _write_text(config_path, "[timer\nwork_seconds = 1")

        with self.assertRaises(AppConfigurationError):
            load_app_config(str(config_path))

    def test_invalid_values_are_rejected(self) -> None:
        cases = {
            "zero duration": "[timer]\nwork_seconds = 0\n",
            "negative acceleration": "[timer]\nacceleration = -2\n",
            "boolean cadence": "[timer]\nlong_break_every = true\n",
            "text duration": '[timer]\nshort_break_seconds = "soon"\n',
            "loud volume": "[bell]\nvolume = 1.5\n",
            "unknown level": '[logging]\nlevel = "chatty"\n',
            "section not table": 'timer = "fast"\n',
            "zero poll": "[ui]\npoll_interval_seconds = 0\n",
        }
        for name, content in cases.items():
            with self.subTest(case=name):
                config_path = self.root / "config.toml"
                _write_text(config_path, content)
                with self.assertRaises(AppConfigurationError):
                    load_app_config(str(config_path))

    def test_session_config_from_app_config(self) -> None:
        config_path = self.root / "config.toml"
        _write_text(config_path, "[timer]\nwork_seconds = 90\nlong_break_every = 2\n")

        session_config = SessionConfig.from_app_config(load_app_config(str(config_path)))

        self.assertEqual(90.0, session_config.durations.work_seconds)
        self.assertEqual(2, session_config.durations.long_break_every)
        self.assertEqual(1.0, session_config.acceleration)


if __name__ == "__main__":
    unittest.main()
