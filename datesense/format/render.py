"""Rendering of calendar values with catalog patterns.

Output is canonical for each pattern: fields are zero-padded to their
full width and milliseconds always use three digits.
"""

from __future__ import annotations

from typing import Union

from datesense.catalog import Fields, Pattern, PatternKind, PatternSpec, get_spec
from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime
from datesense.errors import UnsupportedPatternError

CalendarValue = Union[CalendarDate, CalendarDateTime]


def _fields_of(value: CalendarValue) -> Fields:
    fields: Fields = {"year": value.year, "month": value.month, "day": value.day}
    if isinstance(value, CalendarDateTime):
        fields.update(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.millisecond,
            offset_minutes=value.offset_minutes,
        )
    return fields


def _render(value: CalendarValue, spec: PatternSpec) -> str:
    if not isinstance(value, (CalendarDate, CalendarDateTime)):
        raise TypeError(
            f"expected CalendarDate or CalendarDateTime, got {type(value).__name__}"
        )
    if spec.kind is PatternKind.DATETIME and not isinstance(value, CalendarDateTime):
        raise UnsupportedPatternError(
            f"pattern {spec.pattern.name} needs a time of day; got a CalendarDate"
        )
    fields = _fields_of(value)
    if spec.has_offset and fields.get("offset_minutes") is None:
        raise UnsupportedPatternError(
            f"pattern {spec.pattern.name} needs a UTC offset; value has none"
        )
    return spec.render(fields)


def format_date(value: CalendarValue, pattern: Pattern | str) -> str:
    """Render the date part of a value with a date-only pattern.

    A CalendarDateTime is accepted and its time is dropped.

    Raises:
        UnsupportedPatternError: If the pattern carries a time, or
            names no catalog pattern.
        TypeError: If value is not a calendar value.

    Examples:
        >>> format_date(CalendarDate(2024, 1, 5), Pattern.US_DATE)
        '01/05/2024'

        >>> format_date(CalendarDateTime(2024, 1, 5, 23, 59), "yyyyMMdd")
        '20240105'
    """
    spec = get_spec(pattern)
    if spec.kind is not PatternKind.DATE:
        raise UnsupportedPatternError(
            f"pattern {spec.pattern.name} carries a time; use format_datetime"
        )
    return _render(value, spec)


def format_datetime(value: CalendarValue, pattern: Pattern | str) -> str:
    """Render a value with any pattern it can fill.

    Date-only patterns drop the time and ``HH:mm`` patterns drop the
    seconds. Patterns without milliseconds drop them, and millisecond
    patterns render ``.000`` for a whole second. Offsets are dropped by
    patterns without one.

    Raises:
        UnsupportedPatternError: If the pattern needs fields the value
            lacks (a time for a CalendarDate, an offset for
            ISO_DATETIME_OFFSET), or names no catalog pattern.
        TypeError: If value is not a calendar value.

    Examples:
        >>> format_datetime(CalendarDateTime(2024, 1, 5, 9, 3, 7), Pattern.ISO_DATETIME_MS)
        '2024-01-05T09:03:07.000'

        >>> dt = CalendarDateTime(2024, 1, 5, 9, 3, 7, 250, offset_minutes=-300)
        >>> format_datetime(dt, Pattern.ISO_DATETIME_OFFSET)
        '2024-01-05T09:03:07.250-05:00'

        >>> format_datetime(dt, Pattern.EU_DATETIME)
        '05/01/2024 09:03:07'
    """
    return _render(value, get_spec(pattern))


__all__ = ["format_date", "format_datetime"]
