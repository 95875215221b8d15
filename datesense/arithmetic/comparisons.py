"""Ordering comparisons for calendar values.

Comparison Rules:
    - Values are ordered by their written fields; offsets are ignored
      and never normalized, so 10:00+02:00 is after 09:00Z.
    - A CalendarDate compared with a CalendarDateTime counts as the
      start of its day.
    - is_equal is the ordering equality. ``==`` on CalendarDateTime
      additionally compares offsets.
"""

from __future__ import annotations

from typing import Union

from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime, as_datetime

CalendarValue = Union[CalendarDate, CalendarDateTime]


def _key(value: CalendarValue) -> int:
    return as_datetime(value).local_millis


def is_before(left: CalendarValue, right: CalendarValue) -> bool:
    """Test if left comes strictly before right.

    Raises:
        TypeError: If either value is not a calendar value.

    Examples:
        >>> is_before(CalendarDate(2024, 1, 15), CalendarDate(2024, 1, 16))
        True
        >>> is_before(CalendarDate(2024, 1, 15), CalendarDateTime(2024, 1, 15))
        False
    """
    return _key(left) < _key(right)


def is_after(left: CalendarValue, right: CalendarValue) -> bool:
    """Test if left comes strictly after right."""
    return _key(left) > _key(right)


def is_equal(left: CalendarValue, right: CalendarValue) -> bool:
    """Test if left and right fall on the same instant as written.

    Examples:
        >>> a = CalendarDateTime(2024, 1, 15, 9, offset_minutes=0)
        >>> b = CalendarDateTime(2024, 1, 15, 9, offset_minutes=60)
        >>> is_equal(a, b), a == b
        (True, False)
    """
    return _key(left) == _key(right)


def compare(left: CalendarValue, right: CalendarValue) -> int:
    """Compare two calendar values.

    Returns:
        -1 if left is before right, 0 if equal, 1 if after.
    """
    left_key = _key(left)
    right_key = _key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


__all__ = ["compare", "is_after", "is_before", "is_equal"]
