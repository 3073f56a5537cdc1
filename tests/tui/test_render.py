import unittest
from datetime import datetime

from pomodoro import Interval, PomodoroSnapshot
from todo import TodoItem
from tui.render import bar_length, render_phase_bar, render_today, render_todos

_START = datetime(2024, 3, 4, 9, 0)


def _snapshot(phase: str, fraction: float, remaining: float = 0.0, done: int = 0):
    return PomodoroSnapshot(
        phase=phase,  # type: ignore[arg-type]
        target_seconds=1500.0,
        remaining_seconds=remaining,
        overtime_seconds=0.0,
        elapsed_fraction=fraction,
        pomodoros_done=done,
    )


class PhaseBarTests(unittest.TestCase):
    def test_bar_length_follows_fraction(self) -> None:
        self.assertEqual(10, bar_length(_snapshot("working", 0.5), 20))
        self.assertEqual(1, bar_length(_snapshot("working", 0.0), 20))
        self.assertEqual(20, bar_length(_snapshot("pause_done", 0.2), 20))
        self.assertEqual(0, bar_length(_snapshot("working", 0.5), 0))

    def test_status_and_badge_positions(self) -> None:
        text = render_phase_bar(_snapshot("working", 0.5, remaining=750, done=3), 20)

        self.assertEqual(" work 12:30       3 ", text.plain)
        self.assertEqual(20, len(text.plain))

    def test_fill_style_is_keyed_to_phase(self) -> None:
        cases = {
            "working": "black on green",
            "work_done": "black on blue",
            "pause": "black on blue",
            "pause_done": "black on yellow",
        }
        for phase, style in cases.items():
            with self.subTest(phase=phase):
                text = render_phase_bar(_snapshot(phase, 0.25), 40)
                span = text.spans[0]
                self.assertEqual(style, str(span.style))
                self.assertEqual(0, span.start)
                expected_end = 40 if phase in ("work_done", "pause_done") else 10
                self.assertEqual(expected_end, span.end)


class ListRenderingTests(unittest.TestCase):
    def test_today_strip_shows_minutes(self) -> None:
        text = render_today(
            [
                Interval(kind="work", start=_START, end=_START, duration_seconds=1500.0),
                Interval(kind="break", start=_START, end=_START, duration_seconds=300.0),
            ]
        )

        self.assertEqual(" 25  5 ", text.plain)
        self.assertEqual(["black on green", "dim"], [str(span.style) for span in text.spans])

    def test_todos_mark_done_and_selection(self) -> None:
        text = render_todos([TodoItem("a", done=True), TodoItem("b")], selected_index=1)

        self.assertEqual("[x] a\n[ ] b", text.plain)
        self.assertEqual(["dim", "bold"], [str(span.style) for span in text.spans])


if __name__ == "__main__":
    unittest.main()
