"""Current-instant source for now() and today().

A clock is any zero-argument callable returning a CalendarDateTime.
Passing one explicitly makes "now" deterministic, e.g. in tests.

Examples:
    >>> from datesense.clock import fixed_clock, today
    >>> clock = fixed_clock(CalendarDateTime(2024, 12, 16, 9, 30))
    >>> today(clock)
    CalendarDate(2024, 12, 16)
"""

from __future__ import annotations

import datetime as _datetime
from typing import Callable

from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime

Clock = Callable[[], CalendarDateTime]


def system_clock() -> CalendarDateTime:
    """Return the current local time (naive, no offset) at millisecond precision."""
    now = _datetime.datetime.now()
    return CalendarDateTime(
        now.year,
        now.month,
        now.day,
        now.hour,
        now.minute,
        now.second,
        now.microsecond // 1000,
    )


def fixed_clock(instant: CalendarDateTime) -> Clock:
    """Return a clock that always reports instant."""
    if not isinstance(instant, CalendarDateTime):
        raise TypeError(f"expected CalendarDateTime, got {type(instant).__name__}")

    def clock() -> CalendarDateTime:
        return instant

    return clock


def now(clock: Clock | None = None) -> CalendarDateTime:
    """Return the current instant read from clock (system clock by default).

    Raises:
        TypeError: If the clock returns something other than a
            CalendarDateTime.
    """
    value = (clock or system_clock)()
    if not isinstance(value, CalendarDateTime):
        raise TypeError(f"clock returned {type(value).__name__}, expected CalendarDateTime")
    return value


def today(clock: Clock | None = None) -> CalendarDate:
    """Return the date part of now(clock)."""
    return now(clock).date()


__all__ = ["Clock", "fixed_clock", "now", "system_clock", "today"]
