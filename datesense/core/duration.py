"""Duration class representing a signed span of time.

This module provides the Duration class. A Duration holds two
independent signed components: an exact length in milliseconds, and a
number of calendar months whose length depends on where it is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from datesense._internal.calendar import div_toward_zero
from datesense._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
    MONTHS_PER_YEAR,
)
from datesense._internal.validation import require_int
from datesense.errors import UnanchoredCalendarDurationError
from datesense.units.unit import Unit

if TYPE_CHECKING:
    from datesense.core.date import CalendarDate
    from datesense.core.datetime import CalendarDateTime

    CalendarValue = Union[CalendarDate, CalendarDateTime]


class Duration:
    """An immutable signed span of time.

    The millisecond component covers every fixed-length unit (weeks and
    finer). The month component carries MONTHS and YEARS, which cannot
    be turned into milliseconds without knowing the starting point; such
    conversions need an ``anchor``.

    Durations created with ``Duration.of`` set exactly one component.
    Composition with ``+`` and ``-`` may set both.

    Examples:
        >>> Duration(hours=8, minutes=30).to_minutes()
        510

        >>> Duration.of(2, "weeks").to_days()
        14

        >>> str(Duration.of(1, Unit.MONTHS))
        'P1M'

        >>> Duration.of(1, Unit.MONTHS).to_days()
        Traceback (most recent call last):
        ...
        UnanchoredCalendarDurationError: cannot convert P1M to days without an anchor
    """

    __slots__ = ("_millis", "_months")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        *,
        weeks: int = 0,
        months: int = 0,
        years: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero and are summed.

        Raises:
            TypeError: If a component is not an int.

        Examples:
            >>> Duration(days=1, hours=2).to_hours()
            26

            >>> Duration(years=1, months=6).months
            18
        """
        for name, value in (
            ("days", days),
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
            ("milliseconds", milliseconds),
            ("weeks", weeks),
            ("months", months),
            ("years", years),
        ):
            require_int(name, value)

        self._millis: int = (
            weeks * MILLIS_PER_WEEK
            + days * MILLIS_PER_DAY
            + hours * MILLIS_PER_HOUR
            + minutes * MILLIS_PER_MINUTE
            + seconds * MILLIS_PER_SECOND
            + milliseconds
        )
        self._months: int = years * MONTHS_PER_YEAR + months

    @classmethod
    def _from_parts(cls, millis: int, months: int = 0) -> Duration:
        instance = object.__new__(cls)
        instance._millis = millis
        instance._months = months
        return instance

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls._from_parts(0, 0)

    @classmethod
    def of(cls, amount: int, unit: Unit | str) -> Duration:
        """Create a Duration of amount units.

        Args:
            amount: Signed whole number of units.
            unit: A Unit or its name (case-insensitive).

        Raises:
            TypeError: If amount is not an int.
            UnsupportedUnitError: If unit names no unit.

        Examples:
            >>> Duration.of(90, "minutes").to_hours()
            1

            >>> Duration.of(-2, Unit.YEARS).months
            -24
        """
        require_int("amount", amount)
        resolved = Unit.lookup(unit)
        if resolved.is_calendar_based:
            return cls._from_parts(0, amount * resolved.months)  # type: ignore[operator]
        return cls._from_parts(amount * resolved.millis, 0)  # type: ignore[operator]

    @classmethod
    def between(cls, start: CalendarValue, end: CalendarValue) -> Duration:
        """Return the exact span from start to end.

        The result is always millisecond-based, positive when end is
        later than start. Dates are taken at the start of their day.
        Offsets are not normalized: values are measured as written.

        Examples:
            >>> from datesense.core.datetime import CalendarDateTime
            >>> Duration.between(
            ...     CalendarDateTime(2024, 12, 16, 9, 0),
            ...     CalendarDateTime(2024, 12, 16, 17, 30),
            ... ).to_minutes()
            510
        """
        from datesense.core.datetime import as_datetime

        start_dt = as_datetime(start)
        end_dt = as_datetime(end)
        return cls._from_parts(end_dt.local_millis - start_dt.local_millis, 0)

    # Properties

    @property
    def millis(self) -> int:
        """Return the fixed-length component in milliseconds."""
        return self._millis

    @property
    def months(self) -> int:
        """Return the calendar component in months."""
        return self._months

    @property
    def is_zero(self) -> bool:
        """Return True if both components are zero."""
        return self._millis == 0 and self._months == 0

    @property
    def is_negative(self) -> bool:
        """Return True if no component is positive and at least one is negative."""
        return (
            self._millis <= 0
            and self._months <= 0
            and (self._millis < 0 or self._months < 0)
        )

    @property
    def is_calendar_based(self) -> bool:
        """Return True if the duration has a month component."""
        return self._months != 0

    # Application to calendar values

    def add_to(self, value: CalendarValue) -> CalendarDateTime:
        """Return value moved forward by this duration.

        A CalendarDate is promoted to the start of its day first. The
        month component is applied before the milliseconds, clamping the
        day to the end of a shorter month.

        Raises:
            TypeError: If value is not a calendar value.
            InvalidCalendarValueError: If the result leaves years 1-9999.

        Examples:
            >>> from datesense.core.datetime import CalendarDateTime
            >>> Duration(months=1, hours=1).add_to(CalendarDateTime(2024, 1, 31, 12))
            CalendarDateTime(2024, 2, 29, 13, 0, 0, millisecond=0)
        """
        from datesense.core.datetime import as_datetime

        result = as_datetime(value)
        if self._months:
            result = result.add_months(self._months)
        if self._millis:
            result = result.add_millis(self._millis)
        return result

    def subtract_from(self, value: CalendarValue) -> CalendarDateTime:
        """Return value moved backward by this duration."""
        return (-self).add_to(value)

    # Conversions

    def _resolve_millis(self, target: str, anchor: CalendarValue | None) -> int:
        if not self._months:
            return self._millis
        if anchor is None:
            raise UnanchoredCalendarDurationError(
                f"cannot convert {self} to {target} without an anchor"
            )
        from datesense.core.datetime import as_datetime

        start = as_datetime(anchor)
        return self.add_to(start).local_millis - start.local_millis

    def to_millis(self, anchor: CalendarValue | None = None) -> int:
        """Return the total length in milliseconds.

        Args:
            anchor: Starting point used to measure a month component.

        Raises:
            UnanchoredCalendarDurationError: If the duration has a month
                component and no anchor was given.
        """
        return self._resolve_millis("milliseconds", anchor)

    def to_seconds(self, anchor: CalendarValue | None = None) -> int:
        """Return the length in whole seconds, truncated toward zero."""
        return div_toward_zero(self._resolve_millis("seconds", anchor), MILLIS_PER_SECOND)

    def to_minutes(self, anchor: CalendarValue | None = None) -> int:
        """Return the length in whole minutes, truncated toward zero."""
        return div_toward_zero(self._resolve_millis("minutes", anchor), MILLIS_PER_MINUTE)

    def to_hours(self, anchor: CalendarValue | None = None) -> int:
        """Return the length in whole hours, truncated toward zero."""
        return div_toward_zero(self._resolve_millis("hours", anchor), MILLIS_PER_HOUR)

    def to_days(self, anchor: CalendarValue | None = None) -> int:
        """Return the length in whole days, truncated toward zero.

        Examples:
            >>> Duration(hours=-36).to_days()
            -1

            >>> from datesense.core.date import CalendarDate
            >>> Duration.of(1, "months").to_days(anchor=CalendarDate(2024, 2, 1))
            29
        """
        return div_toward_zero(self._resolve_millis("days", anchor), MILLIS_PER_DAY)

    # Operators

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_parts(
            self._millis + other._millis, self._months + other._months
        )

    def __radd__(self, other: object) -> Duration:
        # Allows sum() over durations
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_parts(
            self._millis - other._millis, self._months - other._months
        )

    def __neg__(self) -> Duration:
        return Duration._from_parts(-self._millis, -self._months)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration._from_parts(abs(self._millis), abs(self._months))

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration._from_parts(self._millis * other, self._months * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __bool__(self) -> bool:
        return not self.is_zero

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._millis == other._millis and self._months == other._months

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def _ordering_key(self, other: Duration) -> tuple[int, int]:
        if self._months or other._months:
            raise UnanchoredCalendarDurationError(
                "cannot order durations with a month component"
            )
        return (self._millis, other._millis)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._ordering_key(other)
        return left < right

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._ordering_key(other)
        return left <= right

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._ordering_key(other)
        return left > right

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._ordering_key(other)
        return left >= right

    def __hash__(self) -> int:
        return hash((self._millis, self._months))

    def __repr__(self) -> str:
        return f"Duration(millis={self._millis}, months={self._months})"

    def __str__(self) -> str:
        """Return an ISO 8601 style representation.

        Each field carries its own sign, so ninety minutes back renders as
        ``PT-1H-30M``.

        Examples:
            >>> str(Duration(hours=8, minutes=30))
            'PT8H30M'

            >>> str(Duration(years=1, months=2, seconds=1, milliseconds=500))
            'P1Y2MT1.5S'

            >>> str(Duration())
            'PT0S'
        """
        if self.is_zero:
            return "PT0S"

        result = "P"
        years = div_toward_zero(self._months, MONTHS_PER_YEAR)
        months = self._months - years * MONTHS_PER_YEAR
        if years:
            result += f"{years}Y"
        if months:
            result += f"{months}M"

        if self._millis:
            result += "T"
            hours = div_toward_zero(self._millis, MILLIS_PER_HOUR)
            rest = self._millis - hours * MILLIS_PER_HOUR
            minutes = div_toward_zero(rest, MILLIS_PER_MINUTE)
            rest -= minutes * MILLIS_PER_MINUTE
            if hours:
                result += f"{hours}H"
            if minutes:
                result += f"{minutes}M"
            if rest:
                sign = "-" if rest < 0 else ""
                whole, fraction = divmod(abs(rest), MILLIS_PER_SECOND)
                seconds = f"{sign}{whole}"
                if fraction:
                    seconds += "." + f"{fraction:03d}".rstrip("0")
                result += f"{seconds}S"
        return result


__all__ = ["Duration"]
