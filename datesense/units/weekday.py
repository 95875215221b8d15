"""Weekday enumeration.

This module provides the Weekday enum returned by the weekday accessor
of calendar values.
"""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """Day of the week with ISO numbering (Monday=1 .. Sunday=7).

    Examples:
        >>> Weekday(1)
        <Weekday.MONDAY: 1>

        >>> Weekday.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self.value >= 6

    def __str__(self) -> str:
        return self.name


__all__ = ["Weekday"]
