import unittest
from unittest.mock import patch

from pomodoro.clock import Timer


class TimerTests(unittest.TestCase):
    def test_elapsed_is_zero_before_start(self) -> None:
        timer = Timer()
        self.assertFalse(timer.started)
        self.assertEqual(0.0, timer.elapsed_seconds())

    def test_elapsed_counts_from_start(self) -> None:
        timer = Timer()
        with patch("pomodoro.clock.time.monotonic", side_effect=[100.0, 112.5]):
            timer.start()
            elapsed = timer.elapsed_seconds()

        self.assertTrue(timer.started)
        self.assertEqual(12.5, elapsed)

    def test_acceleration_multiplies_elapsed(self) -> None:
        timer = Timer(acceleration=100.0)
        with patch("pomodoro.clock.time.monotonic", side_effect=[100.0]):
            timer.start()

        self.assertEqual(1500.0, timer.elapsed_seconds(now=115.0))

    def test_clock_going_backwards_clamps_to_zero(self) -> None:
        timer = Timer()
        with patch("pomodoro.clock.time.monotonic", side_effect=[100.0]):
            timer.start()

        self.assertEqual(0.0, timer.elapsed_seconds(now=99.0))

    def test_reset_clears_start(self) -> None:
        timer = Timer()
        with patch("pomodoro.clock.time.monotonic", side_effect=[100.0]):
            timer.start()
        timer.reset()

        self.assertFalse(timer.started)
        self.assertEqual(0.0, timer.elapsed_seconds(now=500.0))

    def test_rejects_non_positive_acceleration(self) -> None:
        with self.assertRaises(ValueError):
            Timer(acceleration=0)
        with self.assertRaises(ValueError):
            Timer(acceleration=-1.0)


if __name__ == "__main__":
    unittest.main()
