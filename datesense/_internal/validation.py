"""Validation utilities for Datesense.

This module provides helpers that check calendar fields against their
legal ranges, raising InvalidCalendarValueError on the first violation.

This module is not part of the public API.
"""

from __future__ import annotations

from datesense._internal.calendar import MAX_ORDINAL, MIN_ORDINAL, days_in_month
from datesense._internal.constants import MAX_OFFSET_MINUTES, MAX_YEAR, MIN_YEAR
from datesense.errors import InvalidCalendarValueError


def require_int(name: str, value: object) -> int:
    """Return value if it is a plain int, else raise TypeError.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that value lies in [min_val, max_val].

    Raises:
        InvalidCalendarValueError: If value is out of range.
    """
    if value < min_val or value > max_val:
        raise InvalidCalendarValueError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        InvalidCalendarValueError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidCalendarValueError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate year, month and day together."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate the time-of-day fields."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("millisecond", millisecond, 0, 999)


def validate_ordinal(ordinal: int) -> None:
    """Validate that an ordinal day lies within the supported years.

    Used on arithmetic results, which are computed on ordinals before
    being turned back into calendar fields.
    """
    if ordinal < MIN_ORDINAL or ordinal > MAX_ORDINAL:
        raise InvalidCalendarValueError(
            f"result is outside the supported years {MIN_YEAR}-{MAX_YEAR}"
        )


def validate_offset(offset_minutes: int | None) -> None:
    """Validate an optional UTC offset given in minutes."""
    if offset_minutes is None:
        return
    validate_range("offset_minutes", offset_minutes, -MAX_OFFSET_MINUTES, MAX_OFFSET_MINUTES)


__all__ = [
    "require_int",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
    "validate_ordinal",
    "validate_offset",
]
