"""Calendar-day ranges and their set algebra."""

from dateonly.daterange import (
    MAX_DATE,
    MIN_DATE,
    DateRange,
    DateRangeError,
    InvalidArgumentError,
    intersect_overlapping_dates_in_ranges,
)

__all__ = [
    "DateRange",
    "intersect_overlapping_dates_in_ranges",
    "MIN_DATE",
    "MAX_DATE",
    "DateRangeError",
    "InvalidArgumentError",
]
