"""Units and enumerations.

This module provides:
    - Unit: Arithmetic units (MILLIS through YEARS)
    - Weekday: ISO day-of-week enum
"""

from __future__ import annotations

from datesense.units.unit import Unit
from datesense.units.weekday import Weekday

__all__: list[str] = [
    "Unit",
    "Weekday",
]
