from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from ._days import DAY_UNIT, DateLike, as_date, as_day_array, next_day, previous_day
from ._exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ArrayLike = Union[DateLike, "np.ndarray"]


@dataclass(frozen=True, slots=True, repr=False)
class DateRange:
    """
    Closed, inclusive range of calendar days ``[start, end]``.

    ``start <= end`` is a precondition and is not checked on construction;
    operations on a range with ``start > end`` have no defined result.
    Every operation returns new values, instances are never mutated.
    """

    start: datetime.date
    end: datetime.date

    # ── membership ───────────────────────────────────────────────────────

    def contains(self, day: ArrayLike) -> bool | np.ndarray:
        if isinstance(day, datetime.date):
            d = as_date(day)
            return self.start <= d <= self.end

        # NaT and days past MAX_DATE compare False rather than raising.
        mask = self._mask(as_day_array(day))
        return bool(mask) if isinstance(day, np.datetime64) else mask

    def _mask(self, days: np.ndarray) -> np.ndarray:
        lo = np.datetime64(self.start, "D")
        hi = np.datetime64(self.end, "D")
        return (days >= lo) & (days <= hi)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, (datetime.date, np.datetime64)):
            return False
        return self.contains(day)

    # ── relations between ranges ─────────────────────────────────────────

    def overlaps(self, other: DateRange) -> bool:
        return other.start <= self.end and other.end >= self.start

    def is_superset_of(self, other: DateRange) -> bool:
        """True when ``other`` lies entirely within this range."""
        return self.start <= other.start and self.end >= other.end

    def intersect(self, other: DateRange) -> Optional[DateRange]:
        if not other.overlaps(self):
            return None
        return DateRange(max(self.start, other.start), min(self.end, other.end))

    def subtract(self, other: DateRange) -> list[DateRange]:
        """
        Days of this range that are not in ``other``, as at most two
        disjoint ranges in ascending order.
        """
        if not other.overlaps(self):
            return [self]

        if other.is_superset_of(self):
            return []

        if other.start <= self.start:
            return [DateRange(next_day(other.end), self.end)]

        if other.end >= self.end:
            return [DateRange(self.start, previous_day(other.start))]

        return [
            DateRange(self.start, previous_day(other.start)),
            DateRange(next_day(other.end), self.end),
        ]

    # ── enumeration ──────────────────────────────────────────────────────

    def days(self) -> Iterator[datetime.date]:
        current = self.start
        # Stop before stepping past end so MAX_DATE is yielded without overflow.
        while current < self.end:
            yield current
            current = next_day(current)
        yield current

    def __iter__(self) -> Iterator[datetime.date]:
        return self.days()

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def to_numpy(self) -> np.ndarray:
        lo = np.datetime64(self.start, "D")
        hi = np.datetime64(self.end, "D")
        return np.arange(lo, hi + 1, dtype=DAY_UNIT)

    def __repr__(self) -> str:
        return (
            f"DateRange(start={self.start.isoformat()}, "
            f"end={self.end.isoformat()})"
        )


def intersect_overlapping_dates_in_ranges(
    left: Iterable[DateRange],
    right: Iterable[DateRange],
) -> Iterator[DateRange]:
    """
    Intersect every range in ``left`` with each overlapping range in ``right``.

    Results are grouped by ``left`` order, then by ``right`` order. A range
    in ``left`` that overlaps nothing contributes nothing. ``right`` is read
    once; both arguments may be any iterable. The result is lazy, but the
    ``None`` check happens at call time.
    """
    if left is None:
        raise InvalidArgumentError("left must not be None.")
    if right is None:
        raise InvalidArgumentError("right must not be None.")
    return _intersect_overlapping(left, right)


def _intersect_overlapping(
    left: Iterable[DateRange],
    right: Iterable[DateRange],
) -> Iterator[DateRange]:
    candidates = tuple(right)
    produced = 0
    try:
        for current in left:
            for other in candidates:
                if other.overlaps(current):
                    produced += 1
                    yield other.intersect(current)
    finally:
        logger.debug(
            "Intersected left ranges against %d right ranges; %d intersections.",
            len(candidates),
            produced,
        )
