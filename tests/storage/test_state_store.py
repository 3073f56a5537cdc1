import json
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pomodoro import Interval
from storage import SessionSnapshot, StateLoadError, StateSaveError, StateStore
from todo import TodoItem

_START = datetime(2024, 3, 4, 9, 0, tzinfo=timezone(timedelta(hours=1)))


def _snapshot() -> SessionSnapshot:
    return SessionSnapshot(
        day="2024-03-04",
        todos=[TodoItem("Write report"), TodoItem("Tidy desk", done=True)],
        history=[
            Interval(
                kind="work",
                start=_START,
                end=_START + timedelta(seconds=1500.5),
                duration_seconds=1500.5,
                label="Write report",
            ),
            Interval(
                kind="break",
                start=_START + timedelta(seconds=1500.5),
                end=_START + timedelta(seconds=1800.5),
                duration_seconds=300.0,
            ),
        ],
    )


class StateStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp_path = Path(tmp.name)

    def test_round_trip_is_structurally_equal(self) -> None:
        store = StateStore(self.tmp_path / "state.json")
        original = _snapshot()

        store.save(original)
        loaded = store.load()

        self.assertEqual(original, loaded)

    def test_missing_file_loads_empty_snapshot(self) -> None:
        store = StateStore(self.tmp_path / "missing.json")
        self.assertEqual(SessionSnapshot(), store.load())

    def test_save_creates_parent_directories(self) -> None:
        path = self.tmp_path / "nested" / "dir" / "state.json"
        StateStore(path).save(SessionSnapshot(day="2024-03-04"))

        self.assertTrue(path.exists())
        self.assertEqual("2024-03-04", json.loads(path.read_text(encoding="utf-8"))["day"])
        self.assertEqual([path], list(path.parent.iterdir()))

    def test_corrupt_json_raises_load_error(self) -> None:
        path = self.tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")

        with self.assertRaises(StateLoadError):
            StateStore(path).load()

    def test_malformed_content_raises_load_error(self) -> None:
        cases = {
            "root": [],
            "day": {"day": 20240304},
            "todo": {"todos": [{"done": True}]},
            "kind": {
                "history": [
                    {
                        "kind": "nap",
                        "start": _START.isoformat(),
                        "end": _START.isoformat(),
                        "duration_seconds": 1,
                    }
                ]
            },
            "timestamp": {
                "history": [
                    {
                        "kind": "work",
                        "start": "yesterday",
                        "end": _START.isoformat(),
                        "duration_seconds": 1,
                    }
                ]
            },
        }
        for name, payload in cases.items():
            with self.subTest(case=name):
                path = self.tmp_path / f"{name}.json"
                path.write_text(json.dumps(payload), encoding="utf-8")
                with self.assertRaises(StateLoadError):
                    StateStore(path).load()

    def test_unwritable_location_raises_save_error(self) -> None:
        blocker = self.tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with self.assertRaises(StateSaveError):
            StateStore(blocker / "state.json").save(SessionSnapshot())


if __name__ == "__main__":
    unittest.main()
