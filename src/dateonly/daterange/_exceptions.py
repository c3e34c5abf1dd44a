class DateRangeError(Exception):
    """Base exception for all date-range errors."""


class InvalidArgumentError(DateRangeError, ValueError):
    """An argument was missing or of the wrong kind."""
