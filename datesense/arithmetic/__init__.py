"""Calendar arithmetic operations.

This module provides function-based APIs that complement the methods
and operators on the core classes.

Arithmetic Operations (from datesense.arithmetic.ops):
    - add_units, subtract_units: Move a value by an amount of a Unit
    - between: Whole units separating two values
    - add_duration, subtract_duration: Apply a Duration
    - start_of_day, end_of_day: Day boundaries of a date
    - get_year, get_month, get_day, get_weekday: Field accessors

Comparison Operations (from datesense.arithmetic.comparisons):
    - is_before, is_after, is_equal: Offset-naive ordering tests
    - compare: Return -1, 0, or 1
"""

from __future__ import annotations

from datesense.arithmetic.ops import (
    add_duration,
    add_units,
    between,
    end_of_day,
    get_day,
    get_month,
    get_weekday,
    get_year,
    start_of_day,
    subtract_duration,
    subtract_units,
)
from datesense.arithmetic.comparisons import (
    compare,
    is_after,
    is_before,
    is_equal,
)

__all__ = [
    # Arithmetic operations
    "add_units",
    "subtract_units",
    "between",
    "add_duration",
    "subtract_duration",
    "start_of_day",
    "end_of_day",
    # Accessors
    "get_year",
    "get_month",
    "get_day",
    "get_weekday",
    # Comparison operations
    "is_before",
    "is_after",
    "is_equal",
    "compare",
]
