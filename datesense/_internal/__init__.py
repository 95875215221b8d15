"""Internal utilities for Datesense.

This module contains private implementation details:
    - Calendar calculations (leap years, ordinals, month shifting)
    - Constants and magic numbers
    - Field validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datesense._internal.validation import (
    require_int,
    validate_date,
    validate_day,
    validate_month,
    validate_ordinal,
    validate_offset,
    validate_range,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "require_int",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_ordinal",
    "validate_offset",
    "validate_range",
    "validate_time",
    "validate_year",
]
