import unittest
from datetime import datetime, timedelta

from pomodoro import CountdownRecord, History, Interval

_START = datetime(2024, 3, 4, 9, 0)


def _record(seconds: float) -> CountdownRecord:
    return CountdownRecord(
        start=_START,
        end=_START + timedelta(seconds=seconds),
        duration_seconds=seconds,
    )


class HistoryTests(unittest.TestCase):
    def test_finalize_work_appends_labeled_interval(self) -> None:
        history = History()
        interval = history.finalize_work(_record(1500.5), label="Write report")

        self.assertIsNotNone(interval)
        if interval is None:
            self.fail("Expected a work interval")
        self.assertEqual("work", interval.kind)
        self.assertEqual("Write report", interval.label)
        self.assertEqual(1500.5, interval.duration_seconds)
        self.assertEqual(25, interval.duration_minutes)
        self.assertEqual((interval,), history.intervals)

    def test_finalize_break_has_no_label(self) -> None:
        history = History()
        interval = history.finalize_break(_record(300))

        self.assertIsNotNone(interval)
        if interval is None:
            self.fail("Expected a break interval")
        self.assertEqual("break", interval.kind)
        self.assertEqual("", interval.label)
        self.assertFalse(interval.is_work)

    def test_empty_record_appends_nothing(self) -> None:
        history = History()

        self.assertIsNone(history.finalize_work(CountdownRecord(), label="x"))
        self.assertIsNone(history.finalize_break(CountdownRecord()))
        self.assertEqual(0, len(history))

    def test_keeps_insertion_order_and_filters_work(self) -> None:
        history = History()
        history.finalize_work(_record(1500), label="a")
        history.finalize_break(_record(300))
        history.finalize_work(_record(1200), label="b")

        self.assertEqual(["work", "break", "work"], [item.kind for item in history])
        self.assertEqual(["a", "b"], [item.label for item in history.work_intervals()])

    def test_clear_empties_history(self) -> None:
        history = History(
            [Interval(kind="work", start=_START, end=_START, duration_seconds=0.0)]
        )
        history.clear()
        self.assertEqual((), history.intervals)

    def test_duration_minutes_rounds_seconds_first(self) -> None:
        interval = Interval(kind="work", start=_START, end=_START, duration_seconds=119.6)
        self.assertEqual(2, interval.duration_minutes)


if __name__ == "__main__":
    unittest.main()
