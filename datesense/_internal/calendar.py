"""Calendar utilities for Datesense.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap years, month lengths, ordinal day
numbers and clamped month shifting.

Ordinal 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from datesense._internal.constants import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)

# Days in 400, 100 and 4 year cycles
_DAYS_IN_400_YEARS = 146_097
_DAYS_IN_100_YEARS = 36_524
_DAYS_IN_4_YEARS = 1_461

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle lands one past the final 365-day block
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month = 1
    while True:
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim
        month += 1


def ordinal_to_iso_weekday(ordinal: int) -> int:
    """Return the ISO weekday (Monday=1 .. Sunday=7) of an ordinal day."""
    return (ordinal - 1) % 7 + 1


def shift_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Move a date by whole months, clamping the day to the target month.

    Examples:
        >>> shift_months(2024, 1, 31, 1)
        (2024, 2, 29)
        >>> shift_months(2023, 1, 31, 1)
        (2023, 2, 28)
        >>> shift_months(2024, 3, 15, -3)
        (2023, 12, 15)
    """
    total_months = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, new_month_index = divmod(total_months, MONTHS_PER_YEAR)
    new_month = new_month_index + 1
    if new_year < 1:
        # Let the caller's range validation report the failure
        return (new_year, new_month, day)
    return (new_year, new_month, min(day, days_in_month(new_year, new_month)))


def div_toward_zero(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero instead of flooring.

    Examples:
        >>> div_toward_zero(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


MIN_ORDINAL: int = ymd_to_ordinal(MIN_YEAR, 1, 1)
MAX_ORDINAL: int = ymd_to_ordinal(MAX_YEAR, 12, 31)


__all__ = [
    "MIN_ORDINAL",
    "MAX_ORDINAL",
    "div_toward_zero",
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_iso_weekday",
    "shift_months",
]
