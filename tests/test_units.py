"""Tests for the Unit and Weekday enums."""

from __future__ import annotations

import pytest

from datesense import Unit, Weekday
from datesense.errors import UnsupportedUnitError


class TestUnitLookup:
    """Tests for Unit.lookup."""

    @pytest.mark.parametrize("name", ["days", "DAYS", "Days", "  days "])
    def test_case_insensitive(self, name: str) -> None:
        """Names match in any case, ignoring surrounding space."""
        assert Unit.lookup(name) is Unit.DAYS

    def test_member_passthrough(self) -> None:
        """A Unit is returned as is."""
        assert Unit.lookup(Unit.WEEKS) is Unit.WEEKS

    def test_unknown_name(self) -> None:
        """Unknown names raise UnsupportedUnitError listing the choices."""
        with pytest.raises(UnsupportedUnitError, match="MILLIS"):
            Unit.lookup("fortnights")

    def test_wrong_type(self) -> None:
        """Non-string values raise TypeError."""
        with pytest.raises(TypeError):
            Unit.lookup(3)  # type: ignore[arg-type]


class TestUnitProperties:
    """Tests for unit sizes and classification."""

    def test_ordering(self) -> None:
        """Units are ordered finest to coarsest."""
        assert Unit.MILLIS < Unit.SECONDS < Unit.MINUTES < Unit.HOURS
        assert Unit.HOURS < Unit.DAYS < Unit.WEEKS < Unit.MONTHS < Unit.YEARS
        assert sorted(reversed(list(Unit))) == list(Unit)
        assert Unit.YEARS >= Unit.YEARS

    def test_ordering_foreign_type(self) -> None:
        """Units do not order against other types."""
        with pytest.raises(TypeError):
            _ = Unit.DAYS < 1  # type: ignore[operator]

    @pytest.mark.parametrize(
        ("unit", "millis"),
        [
            (Unit.MILLIS, 1),
            (Unit.SECONDS, 1_000),
            (Unit.MINUTES, 60_000),
            (Unit.HOURS, 3_600_000),
            (Unit.DAYS, 86_400_000),
            (Unit.WEEKS, 604_800_000),
            (Unit.MONTHS, None),
            (Unit.YEARS, None),
        ],
    )
    def test_millis(self, unit: Unit, millis: int | None) -> None:
        """Fixed units have a length; calendar units do not."""
        assert unit.millis == millis

    def test_months(self) -> None:
        """Calendar units measure in months."""
        assert Unit.MONTHS.months == 1
        assert Unit.YEARS.months == 12
        assert Unit.DAYS.months is None

    def test_classification(self) -> None:
        """Each unit is time-based, day-sized or calendar-based."""
        assert [u for u in Unit if u.is_calendar_based] == [Unit.MONTHS, Unit.YEARS]
        assert [u for u in Unit if u.is_time_based] == [
            Unit.MILLIS,
            Unit.SECONDS,
            Unit.MINUTES,
            Unit.HOURS,
        ]

    def test_values_are_names(self) -> None:
        """Member values are the upper-case identifiers."""
        assert all(u.value == u.name for u in Unit)


class TestWeekday:
    """Tests for the Weekday enum."""

    def test_iso_numbering(self) -> None:
        """Monday is 1 and Sunday is 7."""
        assert Weekday(1) is Weekday.MONDAY
        assert Weekday.SUNDAY.value == 7

    def test_weekend(self) -> None:
        """Only Saturday and Sunday are weekend days."""
        assert [d for d in Weekday if d.is_weekend] == [Weekday.SATURDAY, Weekday.SUNDAY]

    def test_str(self) -> None:
        """str() gives the upper-case name."""
        assert str(Weekday.WEDNESDAY) == "WEDNESDAY"
