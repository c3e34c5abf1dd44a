"""
Day arithmetic on ``datetime.date`` that clamps at the representable bounds
instead of raising ``OverflowError``.
"""

from __future__ import annotations

import datetime
from typing import Final, Union

import numpy as np

from ._exceptions import DateRangeError

MIN_DATE: Final[datetime.date] = datetime.date.min
MAX_DATE: Final[datetime.date] = datetime.date.max

DAY_UNIT: Final[str] = "datetime64[D]"

DateLike = Union[datetime.date, np.datetime64]


def add_days(day: datetime.date, n: int) -> datetime.date:
    try:
        return day + datetime.timedelta(days=n)
    except OverflowError:
        return MAX_DATE if n > 0 else MIN_DATE


def next_day(day: datetime.date) -> datetime.date:
    return add_days(day, 1)


def previous_day(day: datetime.date) -> datetime.date:
    return add_days(day, -1)


# datetime64 units that carry no time of day
_DAY_OR_COARSER: Final[frozenset[str]] = frozenset({"Y", "M", "W", "D", "generic"})


def _check_day_unit(dtype: np.dtype) -> None:
    unit, _ = np.datetime_data(dtype)
    if unit not in _DAY_OR_COARSER:
        raise DateRangeError(
            f"Expected dates without time of day; got datetime64[{unit}]."
        )


def as_date(value: DateLike) -> datetime.date:
    """Coerce a ``date`` or a ``datetime64`` scalar to ``datetime.date``."""
    if isinstance(value, datetime.datetime):
        raise DateRangeError(f"Expected a date without time of day; got {value!r}.")
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, np.datetime64):
        _check_day_unit(value.dtype)
        if np.isnat(value):
            raise DateRangeError("NaT is not a date.")
        day = value.astype(DAY_UNIT).item()
        # .item() falls back to an int outside the range of datetime.date
        if not isinstance(day, datetime.date):
            raise DateRangeError(f"{value!r} is outside the supported date range.")
        return day
    raise DateRangeError(f"Expected a date; got {type(value).__name__}.")


def as_day_array(values) -> np.ndarray:
    """
    Coerce dates, ``datetime64`` values or ISO strings to a ``datetime64[D]``
    array of the same shape.

    Values with a time of day are rejected, as in ``as_date``. NaT and days
    beyond ``MAX_DATE`` are kept; they simply fall outside every range.
    """
    days = np.asarray(values)
    if days.dtype.kind == "O":
        if any(isinstance(v, datetime.datetime) for v in days.flat):
            raise DateRangeError("Expected dates without time of day; got datetime.")
    elif days.dtype.kind in "US":
        days = days.astype("datetime64")
    elif days.dtype.kind != "M" and days.size:
        raise DateRangeError(f"Expected dates; got an array of {days.dtype}.")

    if days.dtype.kind == "M":
        _check_day_unit(days.dtype)
    return days.astype(DAY_UNIT)
