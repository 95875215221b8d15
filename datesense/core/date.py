"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing dates in
the proleptic Gregorian calendar, years 1 through 9999.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datesense._internal.calendar import (
    days_before_month,
    is_leap_year,
    ordinal_to_iso_weekday,
    ordinal_to_ymd,
    shift_months,
    ymd_to_ordinal,
)
from datesense._internal.validation import (
    require_int,
    validate_date,
    validate_ordinal,
)
from datesense.units.weekday import Weekday

if TYPE_CHECKING:
    from datesense.catalog import Pattern
    from datesense.clock import Clock
    from datesense.core.datetime import CalendarDateTime
    from datesense.core.duration import Duration
    from datesense.infer import HintLike


class CalendarDate:
    """An immutable calendar date.

    CalendarDate represents a specific calendar day with year, month and
    day components. Every operation that looks like a mutation returns
    a new instance.

    Internal representation is the ordinal day number (0001-01-01 is 1),
    which makes day arithmetic and ordering plain integer operations.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CalendarDate(2024, 2, 29)  # Valid leap year date
        CalendarDate(2024, 2, 29)

        >>> CalendarDate(2024, 1, 31).add_months(1)
        CalendarDate(2024, 2, 29)
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Raises:
            TypeError: If a component is not an int.
            InvalidCalendarValueError: If any component is out of range.

        Examples:
            >>> CalendarDate(2024, 2, 30)
            Traceback (most recent call last):
            ...
            InvalidCalendarValueError: day must be between 1 and 29 for 2024-02, got 30
        """
        require_int("year", year)
        require_int("month", month)
        require_int("day", day)
        validate_date(year, month, day)

        self._ordinal = ymd_to_ordinal(year, month, day)

    @classmethod
    def _from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal, checking the supported range."""
        validate_ordinal(ordinal)
        instance = object.__new__(cls)
        instance._ordinal = ordinal
        return instance

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal day number.

        Ordinal 1 is 0001-01-01, matching Python's date.toordinal().

        Examples:
            >>> CalendarDate.from_ordinal(738900)
            CalendarDate(2024, 1, 15)
        """
        return cls._from_ordinal(require_int("ordinal", ordinal))

    @classmethod
    def today(cls, clock: Clock | None = None) -> CalendarDate:
        """Return today's date as read from the clock (system clock by default)."""
        from datesense.clock import today

        return today(clock)

    @classmethod
    def parse(
        cls,
        text: str,
        pattern: Pattern | str | None = None,
        hint: HintLike = None,
    ) -> CalendarDate:
        """Parse a date string. See datesense.format.parse_date."""
        from datesense.format.parser import parse_date

        return parse_date(text, pattern, hint)

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> CalendarDate(2024, 12, 16).weekday
            <Weekday.MONDAY: 1>
        """
        return Weekday(ordinal_to_iso_weekday(self._ordinal))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date."""
        return self._ordinal

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Raises:
            InvalidCalendarValueError: If the resulting date is invalid.

        Examples:
            >>> CalendarDate(2024, 1, 15).replace(month=6)
            CalendarDate(2024, 6, 15)
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return CalendarDate(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def add_days(self, days: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of days.

        Examples:
            >>> CalendarDate(2024, 1, 15).add_days(-20)
            CalendarDate(2023, 12, 26)
        """
        return CalendarDate._from_ordinal(self._ordinal + require_int("days", days))

    def add_months(self, months: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of months.

        If the resulting day does not exist in the target month, it is
        clamped to the last valid day of that month.

        Examples:
            >>> CalendarDate(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            CalendarDate(2024, 2, 29)

            >>> CalendarDate(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            CalendarDate(2023, 2, 28)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        new_year, new_month, new_day = shift_months(
            year, month, day, require_int("months", months)
        )
        return CalendarDate(new_year, new_month, new_day)

    def add_years(self, years: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of years.

        Feb 29 moved into a non-leap year clamps to Feb 28.
        """
        return self.add_months(require_int("years", years) * 12)

    def at_start_of_day(self) -> CalendarDateTime:
        """Return this date at 00:00:00.000."""
        from datesense.core.datetime import CalendarDateTime

        return CalendarDateTime.combine(self)

    def format(self, pattern: Pattern | str) -> str:
        """Render this date with a catalog pattern. See datesense.format.format_date."""
        from datesense.format.render import format_date

        return format_date(self, pattern)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD)."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> CalendarDateTime:
        """Add a Duration, promoting the date to the start of its day.

        Examples:
            >>> from datesense.core.duration import Duration
            >>> CalendarDate(2024, 1, 15) + Duration(hours=6)
            CalendarDateTime(2024, 1, 15, 6, 0, 0, millisecond=0)
        """
        from datesense.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return other.add_to(self)

    def __sub__(self, other: object) -> CalendarDateTime | Duration:
        """Subtract a Duration (giving a CalendarDateTime), or a date or
        datetime (giving the Duration between them).

        Examples:
            >>> from datesense.core.datetime import CalendarDateTime
            >>> (CalendarDate(2024, 1, 16) - CalendarDateTime(2024, 1, 15, 18)).to_hours()
            6
        """
        from datesense.core.datetime import CalendarDateTime
        from datesense.core.duration import Duration

        if isinstance(other, Duration):
            return other.subtract_from(self)
        if isinstance(other, (CalendarDate, CalendarDateTime)):
            return Duration.between(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CalendarDate"]
