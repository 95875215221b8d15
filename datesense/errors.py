"""Datesense exception hierarchy.

All Datesense-specific exceptions inherit from DateSenseError. Each
concrete class carries a ``kind`` string naming its failure category so
callers can branch on the category without importing every class.
"""

from __future__ import annotations


class DateSenseError(Exception):
    """Base exception for all Datesense errors."""

    kind: str = "DateSenseError"


class ParseError(DateSenseError):
    """Failed to turn a raw string into a calendar value.

    Base class for the input-shape failures raised by the classifier
    and the parser.
    """

    kind = "ParseError"


class EmptyInputError(ParseError):
    """The input was None, empty, or whitespace only."""

    kind = "EmptyInput"


class UnrecognizedFormatError(ParseError):
    """No catalog pattern matches the input's shape.

    Examples:
        - "not-a-date"
        - "2024.1" (no known separator layout)
        - a 9-digit number (not a compact length)
    """

    kind = "UnrecognizedFormat"


class AmbiguousFormatError(UnrecognizedFormatError):
    """Strict detection could not decide between day-first and month-first.

    Only raised when detection runs with ``DetectionHint(strict=True)``;
    the default behavior falls back to month-first ordering.
    """

    kind = "AmbiguousFormat"


class StructuralMismatchError(ParseError):
    """The input's shape does not fit the explicitly supplied pattern.

    Also raised when a date is requested from a pattern that carries
    time fields.
    """

    kind = "StructuralMismatch"


class InvalidCalendarValueError(DateSenseError):
    """Field values are outside the calendar's legal range.

    Examples:
        - Month value outside 1-12
        - February 30
        - Hour value outside 0-23
        - Arithmetic result beyond year 9999
    """

    kind = "InvalidCalendarValue"


class UnsupportedPatternError(DateSenseError):
    """The pattern cannot represent the value, or is not a known pattern.

    Examples:
        - Formatting a CalendarDate with ISO_DATETIME
        - Formatting an offset-less value with ISO_DATETIME_OFFSET
        - Looking up the format string "dd MMM yyyy"
    """

    kind = "UnsupportedPattern"


class UnanchoredCalendarDurationError(DateSenseError):
    """A month/year Duration was converted to a fixed unit without an anchor."""

    kind = "UnanchoredCalendarDuration"


class UnsupportedUnitError(DateSenseError):
    """The unit is unknown, or does not apply to the value.

    Examples:
        - Unit.lookup("fortnights")
        - add_units(CalendarDate(...), 3, Unit.HOURS)
    """

    kind = "UnsupportedUnit"


__all__ = [
    "DateSenseError",
    "ParseError",
    "EmptyInputError",
    "UnrecognizedFormatError",
    "AmbiguousFormatError",
    "StructuralMismatchError",
    "InvalidCalendarValueError",
    "UnsupportedPatternError",
    "UnanchoredCalendarDurationError",
    "UnsupportedUnitError",
]
