"""Append-only log of finalized work and break intervals for one day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Literal, Optional

from .constants import INTERVAL_BREAK, INTERVAL_WORK
from .countdown import CountdownRecord

IntervalKind = Literal["work", "break"]


@dataclass(frozen=True)
class Interval:
    """Immutable record of a finished work or break phase."""
    kind: IntervalKind
    start: datetime
    end: datetime
    duration_seconds: float
    label: str = ""

    @property
    def is_work(self) -> bool:
        return self.kind == INTERVAL_WORK

    @property
    def duration_minutes(self) -> int:
        return int(round(self.duration_seconds)) // 60


class History:
    """Insertion-ordered intervals owned by the session state for the day."""

    def __init__(self, intervals: Iterable[Interval] = ()):
        self._intervals: list[Interval] = list(intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return tuple(self._intervals)

    def work_intervals(self) -> tuple[Interval, ...]:
        return tuple(interval for interval in self._intervals if interval.is_work)

    def append(self, interval: Interval) -> None:
        self._intervals.append(interval)

    def clear(self) -> None:
        self._intervals.clear()

    def finalize_work(self, record: CountdownRecord, *, label: str) -> Optional[Interval]:
        return self._finalize(INTERVAL_WORK, record, label=label)

    def finalize_break(self, record: CountdownRecord) -> Optional[Interval]:
        return self._finalize(INTERVAL_BREAK, record, label="")

    def _finalize(
        self,
        kind: IntervalKind,
        record: CountdownRecord,
        *,
        label: str,
    ) -> Optional[Interval]:
        if record.is_empty or record.start is None or record.end is None:
            return None
        interval = Interval(
            kind=kind,
            start=record.start,
            end=record.end,
            duration_seconds=record.duration_seconds,
            label=label,
        )
        self._intervals.append(interval)
        return interval
