"""Unit enumeration for calendar arithmetic and durations.

This module provides the Unit enum representing the amounts that can be
added to calendar values or used to build a Duration, from milliseconds
up to years.
"""

from __future__ import annotations

from enum import Enum

from datesense._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)
from datesense.errors import UnsupportedUnitError


class Unit(Enum):
    """Units for calendar arithmetic, finest to coarsest.

    Member values are the stable upper-case identifiers callers pass as
    strings. Members are ordered by granularity, so ``Unit.MILLIS <
    Unit.DAYS`` holds.

    Note:
        MONTHS and YEARS have no fixed length in milliseconds; their
        ``millis`` attribute is None.

    Examples:
        >>> Unit.HOURS.millis
        3600000

        >>> Unit.lookup("days")
        <Unit.DAYS: 'DAYS'>

        >>> Unit.MONTHS.is_calendar_based
        True
    """

    MILLIS = "MILLIS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"
    WEEKS = "WEEKS"
    MONTHS = "MONTHS"
    YEARS = "YEARS"

    @classmethod
    def lookup(cls, value: Unit | str) -> Unit:
        """Return the Unit named by value.

        Args:
            value: A Unit, or its name in any letter case.

        Raises:
            UnsupportedUnitError: If value names no unit.
            TypeError: If value is neither a Unit nor a string.
        """
        if isinstance(value, Unit):
            return value
        if not isinstance(value, str):
            raise TypeError(f"unit must be a Unit or str, got {type(value).__name__}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(member.name for member in cls)
            raise UnsupportedUnitError(
                f"invalid unit: {value!r}. Use one of {names}"
            ) from None

    @property
    def rank(self) -> int:
        """Position in the finest-to-coarsest ordering (MILLIS is 0)."""
        return _RANKS[self]

    @property
    def millis(self) -> int | None:
        """Fixed length of one unit in milliseconds, or None for MONTHS/YEARS."""
        return _MILLIS[self]

    @property
    def months(self) -> int | None:
        """Length of one unit in months, or None for fixed-length units."""
        if self is Unit.MONTHS:
            return 1
        if self is Unit.YEARS:
            return 12
        return None

    @property
    def is_calendar_based(self) -> bool:
        """True for MONTHS and YEARS, whose length depends on the calendar."""
        return self.millis is None

    @property
    def is_time_based(self) -> bool:
        """True for units finer than a day."""
        return self.rank < Unit.DAYS.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank >= other.rank


_RANKS: dict[Unit, int] = {unit: index for index, unit in enumerate(Unit)}

_MILLIS: dict[Unit, int | None] = {
    Unit.MILLIS: 1,
    Unit.SECONDS: MILLIS_PER_SECOND,
    Unit.MINUTES: MILLIS_PER_MINUTE,
    Unit.HOURS: MILLIS_PER_HOUR,
    Unit.DAYS: MILLIS_PER_DAY,
    Unit.WEEKS: MILLIS_PER_WEEK,
    Unit.MONTHS: None,  # Variable length
    Unit.YEARS: None,  # Variable length (leap years)
}


__all__ = ["Unit"]
