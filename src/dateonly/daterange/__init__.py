# src/dateonly/daterange/__init__.py
"""
dateonly.daterange
~~~~~~~~~~~~~~~~~~

Inclusive ranges of calendar days and the set algebra over them.  A
DateRange is an immutable ``[start, end]`` pair of ``datetime.date`` values;
every operation returns new values.

Basic usage::

    from datetime import date
    from dateonly.daterange import DateRange

    sep = DateRange(date(2022, 9, 10), date(2022, 9, 12))
    sep.contains(date(2022, 9, 11))                        # → True
    sep.intersect(DateRange(date(2022, 9, 11), date(2022, 9, 30)))
                                                           # → 2022-09-11 … 2022-09-12
    sep.subtract(DateRange(date(2022, 9, 11), date(2022, 9, 11)))
                                                           # → [09-10 … 09-10, 09-12 … 09-12]
    list(sep)                                              # → three dates

Day arithmetic saturates at ``date.min`` / ``date.max``, so ranges touching
either bound never raise ``OverflowError``.

NumPy ``datetime64`` arrays are accepted by ``contains``::

    import numpy as np
    sep.contains(np.array(["2022-09-09", "2022-09-11"], dtype="datetime64[D]"))
                                                           # → array([False,  True])

Public API
----------
DateRange                              The value type.
intersect_overlapping_dates_in_ranges  Pairwise intersection of two collections.
MIN_DATE, MAX_DATE                     Bounds of the supported calendar.
as_date, as_day_array                  Coerce dates and datetime64 values; no time of day.
DateRangeError                         Base exception for all date-range errors.
InvalidArgumentError                   Missing or malformed argument.
"""

from __future__ import annotations

from dateonly.daterange._days import (
    MAX_DATE,
    MIN_DATE,
    add_days,
    as_date,
    as_day_array,
    next_day,
    previous_day,
)
from dateonly.daterange._exceptions import DateRangeError, InvalidArgumentError
from dateonly.daterange.daterange import (
    DateRange,
    intersect_overlapping_dates_in_ranges,
)

__all__ = [
    "DateRange",
    "intersect_overlapping_dates_in_ranges",
    "MIN_DATE",
    "MAX_DATE",
    "add_days",
    "next_day",
    "previous_day",
    "as_date",
    "as_day_array",
    "DateRangeError",
    "InvalidArgumentError",
]
