"""Parsing and formatting against catalog patterns.

This module converts between strings and calendar values:
    - Parsing with an explicit pattern or with detection
    - Canonical rendering with a pattern

Functions:
    parse_date: Parse a string into a CalendarDate.
    parse_datetime: Parse a string into a CalendarDateTime.
    parse: Parse into whichever value the pattern describes.
    format_date: Render the date part of a value.
    format_datetime: Render a value with any pattern it can fill.

Examples:
    >>> from datesense.format import parse_date, format_date
    >>> d = parse_date("12/26/2024")
    >>> d.month, d.day
    (12, 26)

    >>> format_date(d, "dd.MM.yyyy")
    '26.12.2024'
"""

from __future__ import annotations

from datesense.format.parser import parse, parse_date, parse_datetime
from datesense.format.render import format_date, format_datetime

__all__: list[str] = [
    # Parsing
    "parse",
    "parse_date",
    "parse_datetime",
    # Formatting
    "format_date",
    "format_datetime",
]
