"""Tests for clocks and the now/today helpers."""

from __future__ import annotations

import pytest

from datesense import (
    CalendarDate,
    CalendarDateTime,
    fixed_clock,
    now,
    system_clock,
    today,
)


class TestFixedClock:
    """Tests for fixed_clock and the frozen_clock fixture."""

    def test_now(self, frozen_clock) -> None:
        """now() reads the clock."""
        assert now(frozen_clock) == CalendarDateTime(2024, 12, 16, 9, 30, 15, 250)

    def test_today(self, frozen_clock) -> None:
        """today() is the date part of now()."""
        assert today(frozen_clock) == CalendarDate(2024, 12, 16)

    def test_classmethods(self, frozen_clock) -> None:
        """The value classes accept a clock too."""
        assert CalendarDate.today(frozen_clock) == CalendarDate(2024, 12, 16)
        assert CalendarDateTime.now(frozen_clock).millisecond == 250

    def test_repeatable(self, frozen_clock) -> None:
        """A fixed clock never moves."""
        assert now(frozen_clock) == now(frozen_clock)

    def test_requires_datetime(self) -> None:
        """Only CalendarDateTime instants can be frozen."""
        with pytest.raises(TypeError):
            fixed_clock(CalendarDate(2024, 12, 16))  # type: ignore[arg-type]


class TestSystemClock:
    """Tests for the default clock."""

    def test_naive_local_time(self) -> None:
        """The system clock carries no offset."""
        value = system_clock()
        assert isinstance(value, CalendarDateTime)
        assert value.offset_minutes is None

    def test_default_clock(self) -> None:
        """now() and today() fall back to the system clock."""
        assert isinstance(now(), CalendarDateTime)
        assert isinstance(today(), CalendarDate)
        assert today() >= CalendarDate(2024, 1, 1)


class TestBadClock:
    """Tests for clocks returning the wrong type."""

    def test_wrong_return_type(self) -> None:
        """A clock must return a CalendarDateTime."""
        with pytest.raises(TypeError):
            now(lambda: "2024-12-16T09:30:00")  # type: ignore[arg-type,return-value]
        with pytest.raises(TypeError):
            today(lambda: CalendarDate(2024, 12, 16))  # type: ignore[arg-type,return-value]
