"""Core calendar value types.

This module provides the fundamental value types:
    - CalendarDate: Calendar date in the proleptic Gregorian calendar
    - CalendarDateTime: Date plus time of day with an optional offset marker
    - Duration: Signed span of milliseconds and calendar months
"""

from __future__ import annotations

from datesense.core.date import CalendarDate
from datesense.core.datetime import CalendarDateTime
from datesense.core.duration import Duration

__all__: list[str] = [
    "CalendarDate",
    "CalendarDateTime",
    "Duration",
]
