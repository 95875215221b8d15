"""Datesense: date/time format detection, parsing and calendar arithmetic.

Datesense recognizes the layout of a date/time string without being
told the format, parses and renders calendar values against a closed
catalog of patterns, and does calendar and duration arithmetic.

Core Types:
    CalendarDate: Calendar date (year, month, day)
    CalendarDateTime: Date plus time of day with an optional offset marker
    Duration: Signed span of milliseconds and calendar months

Enumerations:
    Pattern: Supported layouts (ISO_DATE, US_DATE, COMPACT_DATETIME, ...)
    Unit: Arithmetic units (MILLIS through YEARS)
    Weekday: ISO day of week
    Locale: Field order hint for ambiguous dates

Functions:
    detect: Identify the Pattern of a string
    parse_date, parse_datetime, parse: Parse strings
    format_date, format_datetime: Render values
    add_units, subtract_units, between: Unit arithmetic
    is_before, is_after, is_equal, compare: Ordering
    start_of_day, end_of_day: Day boundaries
    now, today: Current instant from a clock

Exceptions:
    DateSenseError: Base exception
    ParseError: Failed to turn a string into a value
    InvalidCalendarValueError: Field out of calendar range
    UnsupportedPatternError: Pattern cannot represent the value
    UnanchoredCalendarDurationError: Month span converted without anchor
    UnsupportedUnitError: Unknown or inapplicable unit

Example:
    >>> from datesense import parse_date, add_units, Unit
    >>> add_units(parse_date("2024-01-31"), 1, Unit.MONTHS)
    CalendarDate(2024, 2, 29)

    >>> from datesense import detect
    >>> detect("13/01/2024")
    <Pattern.EU_DATE: 'EU_DATE'>
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime
from datesense.core.duration import Duration

# Catalog and units
from datesense.catalog import Pattern, PatternKind
from datesense.units.unit import Unit
from datesense.units.weekday import Weekday

# Detection
from datesense.infer import DetectionHint, Locale, detect

# Exceptions
from datesense.errors import (
    AmbiguousFormatError,
    DateSenseError,
    EmptyInputError,
    InvalidCalendarValueError,
    ParseError,
    StructuralMismatchError,
    UnanchoredCalendarDurationError,
    UnrecognizedFormatError,
    UnsupportedPatternError,
    UnsupportedUnitError,
)

# Parse and format functions
from datesense.format import (
    format_date,
    format_datetime,
    parse,
    parse_date,
    parse_datetime,
)

# Arithmetic
from datesense.arithmetic import (
    add_duration,
    add_units,
    between,
    compare,
    end_of_day,
    get_day,
    get_month,
    get_weekday,
    get_year,
    is_after,
    is_before,
    is_equal,
    start_of_day,
    subtract_duration,
    subtract_units,
)

# Clock
from datesense.clock import Clock, fixed_clock, now, system_clock, today

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "CalendarDateTime",
    "Duration",
    # Catalog and units
    "Pattern",
    "PatternKind",
    "Unit",
    "Weekday",
    # Detection
    "DetectionHint",
    "Locale",
    "detect",
    # Exceptions
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
    # Parse and format functions
    "parse",
    "parse_date",
    "parse_datetime",
    "format_date",
    "format_datetime",
    # Arithmetic
    "add_units",
    "subtract_units",
    "between",
    "add_duration",
    "subtract_duration",
    "start_of_day",
    "end_of_day",
    "get_year",
    "get_month",
    "get_day",
    "get_weekday",
    "is_before",
    "is_after",
    "is_equal",
    "compare",
    # Clock
    "Clock",
    "fixed_clock",
    "now",
    "system_clock",
    "today",
]
