"""Unit arithmetic, field accessors and day boundaries for calendar values.

Type Combinations:
    - CalendarDate + calendar/day units -> CalendarDate
    - CalendarDate + time units -> UnsupportedUnitError
    - CalendarDateTime + any unit -> CalendarDateTime
    - (date or datetime) + Duration -> CalendarDateTime

MONTHS and YEARS clamp the day to the end of a shorter month. All other
units are exact and carry into coarser fields.
"""

from __future__ import annotations

from typing import Union

from datesense._internal.calendar import div_toward_zero
from datesense._internal.constants import MILLIS_PER_DAY
from datesense._internal.validation import require_int
from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime, as_datetime
from datesense.core.duration import Duration
from datesense.errors import UnsupportedUnitError
from datesense.units.unit import Unit
from datesense.units.weekday import Weekday

CalendarValue = Union[CalendarDate, CalendarDateTime]


def _require_calendar_value(value: object) -> None:
    if not isinstance(value, (CalendarDate, CalendarDateTime)):
        raise TypeError(
            f"expected CalendarDate or CalendarDateTime, got {type(value).__name__}"
        )


def add_units(value: CalendarValue, amount: int, unit: Unit | str) -> CalendarValue:
    """Add a signed amount of a unit to a calendar value.

    Args:
        value: A CalendarDate or CalendarDateTime.
        amount: Signed whole number of units.
        unit: A Unit or its name (case-insensitive).

    Returns:
        A new value of the same type.

    Raises:
        TypeError: If value is not a calendar value or amount is not an int.
        UnsupportedUnitError: If unit is unknown, or is finer than a day
            and value is a CalendarDate.
        InvalidCalendarValueError: If the result leaves years 1-9999.

    Examples:
        >>> add_units(CalendarDate(2024, 1, 31), 1, Unit.MONTHS)
        CalendarDate(2024, 2, 29)

        >>> add_units(CalendarDateTime(2024, 12, 31, 23, 30), 90, "minutes")
        CalendarDateTime(2025, 1, 1, 1, 0, 0, millisecond=0)
    """
    _require_calendar_value(value)
    require_int("amount", amount)
    resolved = Unit.lookup(unit)

    if isinstance(value, CalendarDate):
        if resolved.is_time_based:
            raise UnsupportedUnitError(
                f"cannot add {resolved.name} to a CalendarDate; "
                "convert it with start_of_day() first"
            )
        if resolved.is_calendar_based:
            return value.add_months(amount * resolved.months)  # type: ignore[operator]
        return value.add_days(amount * (resolved.millis // MILLIS_PER_DAY))  # type: ignore[operator]

    if resolved.is_calendar_based:
        return value.add_months(amount * resolved.months)  # type: ignore[operator]
    return value.add_millis(amount * resolved.millis)  # type: ignore[operator]


def subtract_units(value: CalendarValue, amount: int, unit: Unit | str) -> CalendarValue:
    """Subtract a signed amount of a unit; add_units with the amount negated.

    Examples:
        >>> subtract_units(CalendarDate(2024, 3, 31), 1, "MONTHS")
        CalendarDate(2024, 2, 29)
    """
    return add_units(value, -require_int("amount", amount), unit)


def between(start: CalendarValue, end: CalendarValue, unit: Unit | str) -> int:
    """Return the signed number of whole units from start to end.

    The count is truncated toward zero, so 1.9 days is 1 day and -1.9
    days is -1 day. Dates count from the start of their day.

    MONTHS and YEARS count whole calendar months: the raw month
    difference shrinks by one when the end's day and time have not yet
    reached the start's.

    Examples:
        >>> between(CalendarDate(2024, 12, 16), CalendarDate(2024, 12, 26), Unit.DAYS)
        10

        >>> between(CalendarDate(2024, 1, 31), CalendarDate(2024, 2, 29), Unit.MONTHS)
        0

        >>> between(CalendarDate(2024, 1, 15), CalendarDate(2023, 1, 16), "years")
        0
    """
    _require_calendar_value(start)
    _require_calendar_value(end)
    resolved = Unit.lookup(unit)
    start_dt = as_datetime(start)
    end_dt = as_datetime(end)

    if resolved.is_calendar_based:
        months = _whole_months(start_dt, end_dt)
        return div_toward_zero(months, resolved.months)  # type: ignore[arg-type]

    return div_toward_zero(
        end_dt.local_millis - start_dt.local_millis,
        resolved.millis,  # type: ignore[arg-type]
    )


def _whole_months(start: CalendarDateTime, end: CalendarDateTime) -> int:
    months = (end.year * 12 + end.month) - (start.year * 12 + start.month)
    start_rest = (start.day, start.millis_of_day)
    end_rest = (end.day, end.millis_of_day)
    if months > 0 and end_rest < start_rest:
        months -= 1
    elif months < 0 and end_rest > start_rest:
        months += 1
    return months


def add_duration(value: CalendarValue, duration: Duration) -> CalendarDateTime:
    """Add a Duration; dates are promoted to the start of their day."""
    if not isinstance(duration, Duration):
        raise TypeError(f"expected Duration, got {type(duration).__name__}")
    return duration.add_to(value)


def subtract_duration(value: CalendarValue, duration: Duration) -> CalendarDateTime:
    """Subtract a Duration; dates are promoted to the start of their day."""
    if not isinstance(duration, Duration):
        raise TypeError(f"expected Duration, got {type(duration).__name__}")
    return duration.subtract_from(value)


def start_of_day(value: CalendarValue) -> CalendarDateTime:
    """Return the value's date at 00:00:00.000.

    A CalendarDateTime keeps its offset marker.

    Examples:
        >>> start_of_day(CalendarDate(2024, 12, 16))
        CalendarDateTime(2024, 12, 16, 0, 0, 0, millisecond=0)
    """
    _require_calendar_value(value)
    return as_datetime(value).start_of_day()


def end_of_day(value: CalendarValue) -> CalendarDateTime:
    """Return the value's date at 23:59:59.999.

    Examples:
        >>> end_of_day(CalendarDate(2024, 12, 16))
        CalendarDateTime(2024, 12, 16, 23, 59, 59, millisecond=999)
    """
    _require_calendar_value(value)
    return as_datetime(value).end_of_day()


def get_year(value: CalendarValue) -> int:
    _require_calendar_value(value)
    return value.year


def get_month(value: CalendarValue) -> int:
    _require_calendar_value(value)
    return value.month


def get_day(value: CalendarValue) -> int:
    _require_calendar_value(value)
    return value.day


def get_weekday(value: CalendarValue) -> Weekday:
    """Return the day of the week; ``str()`` of the result is e.g. ``MONDAY``."""
    _require_calendar_value(value)
    return value.weekday


__all__ = [
    "add_duration",
    "add_units",
    "between",
    "end_of_day",
    "get_day",
    "get_month",
    "get_weekday",
    "get_year",
    "start_of_day",
    "subtract_duration",
    "subtract_units",
]
