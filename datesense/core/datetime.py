"""CalendarDateTime class combining a date, a time of day and an offset marker.

This module provides the CalendarDateTime class for representing a
calendar date plus a millisecond-resolution time of day, optionally
tagged with a UTC offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datesense._internal.calendar import (
    ordinal_to_iso_weekday,
    ordinal_to_ymd,
    shift_months,
    ymd_to_ordinal,
)
from datesense._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from datesense._internal.validation import (
    require_int,
    validate_date,
    validate_offset,
    validate_ordinal,
    validate_time,
)
from datesense.core.date import CalendarDate
from datesense.units.weekday import Weekday

if TYPE_CHECKING:
    from datesense.catalog import Pattern
    from datesense.clock import Clock
    from datesense.core.duration import Duration
    from datesense.infer import HintLike

_LAST_MILLI_OF_DAY = MILLIS_PER_DAY - 1


class CalendarDateTime:
    """An immutable calendar date with a time of day.

    CalendarDateTime combines a CalendarDate with hour, minute, second
    and millisecond fields and an optional UTC offset in minutes.

    The offset is a marker carried through parsing and formatting; it
    does not take part in ordering. Two values are ordered by their
    written fields, so 10:00+02:00 sorts after 09:00Z. Equality (``==``)
    is structural and includes the offset; use ``is_equal`` for the
    ordering-based comparison.

    Internal representation is the ordinal day number plus milliseconds
    since midnight.

    Examples:
        >>> dt = CalendarDateTime(2024, 12, 16, 9, 0, 0)
        >>> dt.hour
        9

        >>> CalendarDateTime(2024, 12, 16, 23, 30).add_millis(90 * 60_000)
        CalendarDateTime(2024, 12, 17, 1, 0, 0, millisecond=0)

        >>> CalendarDateTime(2024, 1, 15, 12, 0, offset_minutes=330).offset_minutes
        330
    """

    __slots__ = ("_ordinal", "_millis", "_offset")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        offset_minutes: int | None = None,
    ) -> None:
        """Create a CalendarDateTime from component parts.

        Raises:
            TypeError: If a component is not an int.
            InvalidCalendarValueError: If any component is out of range.
        """
        for name, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("millisecond", millisecond),
        ):
            require_int(name, value)
        if offset_minutes is not None:
            require_int("offset_minutes", offset_minutes)

        validate_date(year, month, day)
        validate_time(hour, minute, second, millisecond)
        validate_offset(offset_minutes)

        self._ordinal: int = ymd_to_ordinal(year, month, day)
        self._millis: int = (
            hour * MILLIS_PER_HOUR
            + minute * MILLIS_PER_MINUTE
            + second * MILLIS_PER_SECOND
            + millisecond
        )
        self._offset: int | None = offset_minutes

    @classmethod
    def _from_internal(
        cls,
        ordinal: int,
        millis: int,
        offset: int | None,
    ) -> CalendarDateTime:
        """Create a CalendarDateTime from ordinal + millis-of-day.

        Millis outside one day are carried into the ordinal before the
        supported range is checked.
        """
        carry, millis = divmod(millis, MILLIS_PER_DAY)
        ordinal += carry
        validate_ordinal(ordinal)
        instance = object.__new__(cls)
        instance._ordinal = ordinal
        instance._millis = millis
        instance._offset = offset
        return instance

    @classmethod
    def combine(
        cls,
        date: CalendarDate,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        offset_minutes: int | None = None,
    ) -> CalendarDateTime:
        """Create a CalendarDateTime from a CalendarDate and time fields.

        Examples:
            >>> CalendarDateTime.combine(CalendarDate(2024, 1, 15), 14, 30)
            CalendarDateTime(2024, 1, 15, 14, 30, 0, millisecond=0)
        """
        if not isinstance(date, CalendarDate):
            raise TypeError(f"expected CalendarDate, got {type(date).__name__}")
        return cls(
            date.year,
            date.month,
            date.day,
            hour,
            minute,
            second,
            millisecond,
            offset_minutes=offset_minutes,
        )

    @classmethod
    def now(cls, clock: Clock | None = None) -> CalendarDateTime:
        """Return the current local date and time as read from the clock."""
        from datesense.clock import now

        return now(clock)

    @classmethod
    def parse(
        cls,
        text: str,
        pattern: Pattern | str | None = None,
        hint: HintLike = None,
    ) -> CalendarDateTime:
        """Parse a datetime string. See datesense.format.parse_datetime."""
        from datesense.format.parser import parse_datetime

        return parse_datetime(text, pattern, hint)

    # Properties - date components

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
        """Return the day of the week."""
        return Weekday(ordinal_to_iso_weekday(self._ordinal))

    # Properties - time components

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._millis // MILLIS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._millis % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._millis % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self._millis % MILLIS_PER_SECOND

    @property
    def offset_minutes(self) -> int | None:
        """Return the UTC offset in minutes, or None if no offset was given."""
        return self._offset

    @property
    def millis_of_day(self) -> int:
        """Return milliseconds elapsed since midnight."""
        return self._millis

    @property
    def local_millis(self) -> int:
        """Milliseconds since 0001-01-01T00:00 measured on the written fields.

        The offset is ignored; this is the quantity ordering and
        Duration.between work on.
        """
        return self._ordinal * MILLIS_PER_DAY + self._millis

    def date(self) -> CalendarDate:
        """Return the date component as a CalendarDate.

        Examples:
            >>> CalendarDateTime(2024, 1, 15, 14, 30, 45).date()
            CalendarDate(2024, 1, 15)
        """
        return CalendarDate._from_ordinal(self._ordinal)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
        *,
        offset_minutes: int | None | object = ...,
    ) -> CalendarDateTime:
        """Return a new CalendarDateTime with specified components replaced.

        Omit offset_minutes to keep the current offset; pass None to drop it.
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        new_offset = self._offset if offset_minutes is ... else offset_minutes
        return CalendarDateTime(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            millisecond if millisecond is not None else self.millisecond,
            offset_minutes=new_offset,  # type: ignore[arg-type]
        )

    # Arithmetic

    def add_millis(self, millis: int) -> CalendarDateTime:
        """Return a new value offset by an exact number of milliseconds.

        Overflow carries into the date, so adding 90 minutes to 23:30
        lands on 01:00 of the next day.
        """
        return CalendarDateTime._from_internal(
            self._ordinal, self._millis + require_int("millis", millis), self._offset
        )

    def add_days(self, days: int) -> CalendarDateTime:
        """Return a new value offset by whole days; the time is unchanged."""
        return CalendarDateTime._from_internal(
            self._ordinal + require_int("days", days), self._millis, self._offset
        )

    def add_months(self, months: int) -> CalendarDateTime:
        """Return a new value offset by whole months, clamping the day.

        Examples:
            >>> CalendarDateTime(2023, 1, 31, 8, 0).add_months(1)
            CalendarDateTime(2023, 2, 28, 8, 0, 0, millisecond=0)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        new_year, new_month, new_day = shift_months(
            year, month, day, require_int("months", months)
        )
        validate_date(new_year, new_month, new_day)
        return CalendarDateTime._from_internal(
            ymd_to_ordinal(new_year, new_month, new_day), self._millis, self._offset
        )

    def add_years(self, years: int) -> CalendarDateTime:
        """Return a new value offset by whole years, clamping Feb 29."""
        return self.add_months(require_int("years", years) * 12)

    def start_of_day(self) -> CalendarDateTime:
        """Return this value's date at 00:00:00.000, keeping the offset."""
        return CalendarDateTime._from_internal(self._ordinal, 0, self._offset)

    def end_of_day(self) -> CalendarDateTime:
        """Return this value's date at 23:59:59.999, keeping the offset."""
        return CalendarDateTime._from_internal(
            self._ordinal, _LAST_MILLI_OF_DAY, self._offset
        )

    def format(self, pattern: Pattern | str) -> str:
        """Render with a catalog pattern. See datesense.format.format_datetime."""
        from datesense.format.render import format_datetime

        return format_datetime(self, pattern)

    def to_iso_format(self) -> str:
        """Return the value as an ISO 8601 string.

        Milliseconds are included only when non-zero; the offset is
        rendered as ``Z`` or ``+HH:MM`` when present.

        Examples:
            >>> CalendarDateTime(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45'

            >>> CalendarDateTime(2024, 1, 15, 14, 30, 45, 120, offset_minutes=0).to_iso_format()
            '2024-01-15T14:30:45.120Z'
        """
        from datesense.catalog import format_offset

        year, month, day = ordinal_to_ymd(self._ordinal)
        result = (
            f"{year:04d}-{month:02d}-{day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.millisecond:
            result += f".{self.millisecond:03d}"
        if self._offset is not None:
            result += format_offset(self._offset)
        return result

    # Operators

    def __add__(self, other: object) -> CalendarDateTime:
        """Add a Duration.

        Examples:
            >>> from datesense.core.duration import Duration
            >>> CalendarDateTime(2024, 1, 15, 12, 0) + Duration(days=1, hours=2)
            CalendarDateTime(2024, 1, 16, 14, 0, 0, millisecond=0)
        """
        from datesense.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return other.add_to(self)

    def __sub__(self, other: object) -> CalendarDateTime | Duration:
        """Subtract a Duration, or another value to get the Duration between them."""
        from datesense.core.duration import Duration

        if isinstance(other, Duration):
            return other.subtract_from(self)
        if isinstance(other, (CalendarDateTime, CalendarDate)):
            return Duration.between(other, self)
        return NotImplemented

    def _key(self) -> tuple[int, int]:
        return (self._ordinal, self._millis)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._key() == other._key() and self._offset == other._offset

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._ordinal, self._millis, self._offset))

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._ordinal)
        offset_part = ""
        if self._offset is not None:
            offset_part = f", offset_minutes={self._offset}"
        return (
            f"CalendarDateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, millisecond={self.millisecond}{offset_part})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


def as_datetime(value: CalendarDate | CalendarDateTime) -> CalendarDateTime:
    """Return value as a CalendarDateTime, promoting dates to start of day.

    Raises:
        TypeError: If value is not a calendar value.
    """
    if isinstance(value, CalendarDateTime):
        return value
    if isinstance(value, CalendarDate):
        return CalendarDateTime._from_internal(value.to_ordinal(), 0, None)
    raise TypeError(
        f"expected CalendarDate or CalendarDateTime, got {type(value).__name__}"
    )


__all__ = ["CalendarDateTime", "as_datetime"]
