"""Tests for rendering calendar values with catalog patterns."""

from __future__ import annotations

import pytest

from datesense import (
    CalendarDate,
    CalendarDateTime,
    Pattern,
    format_date,
    format_datetime,
)
from datesense.errors import UnsupportedPatternError


@pytest.fixture
def sample() -> CalendarDateTime:
    return CalendarDateTime(2024, 3, 5, 7, 8, 9, 45, offset_minutes=330)


class TestCanonicalRendering:
    """Tests for the canonical template of each pattern."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            (Pattern.ISO_DATE, "2024-03-05"),
            (Pattern.ISO_DATETIME, "2024-03-05T07:08:09"),
            (Pattern.ISO_DATETIME_MS, "2024-03-05T07:08:09.045"),
            (Pattern.ISO_DATETIME_OFFSET, "2024-03-05T07:08:09.045+05:30"),
            (Pattern.ISO_DATETIME_SPACE, "2024-03-05 07:08:09"),
            (Pattern.US_DATE, "03/05/2024"),
            (Pattern.US_DATETIME, "03/05/2024 07:08:09"),
            (Pattern.EU_DATE, "05/03/2024"),
            (Pattern.EU_DATETIME, "05/03/2024 07:08:09"),
            (Pattern.COMPACT_DATE, "20240305"),
            (Pattern.COMPACT_DATETIME, "20240305070809"),
            (Pattern.COMPACT_DATETIME_MS, "20240305070809045"),
            (Pattern.US_DATE_DASH, "03-05-2024"),
            (Pattern.EU_DATE_DASH, "05-03-2024"),
            (Pattern.EU_DATE_DOT, "05.03.2024"),
            (Pattern.US_DATE_DOT, "03.05.2024"),
            (Pattern.ISO_DATETIME_SPACE_MINUTES, "2024-03-05 07:08"),
            (Pattern.US_DATETIME_MINUTES, "03/05/2024 07:08"),
            (Pattern.EU_DATETIME_MINUTES, "05/03/2024 07:08"),
            (Pattern.US_DATETIME_DASH, "03-05-2024 07:08:09"),
            (Pattern.EU_DATETIME_DASH, "05-03-2024 07:08:09"),
            (Pattern.US_DATETIME_DASH_MINUTES, "03-05-2024 07:08"),
            (Pattern.EU_DATETIME_DASH_MINUTES, "05-03-2024 07:08"),
            (Pattern.US_DATETIME_DOT, "03.05.2024 07:08:09"),
            (Pattern.EU_DATETIME_DOT, "05.03.2024 07:08:09"),
            (Pattern.US_DATETIME_DOT_MINUTES, "03.05.2024 07:08"),
            (Pattern.EU_DATETIME_DOT_MINUTES, "05.03.2024 07:08"),
            (Pattern.YMD_DATE_SLASH, "2024/03/05"),
            (Pattern.YMD_DATETIME_SLASH, "2024/03/05 07:08:09"),
            (Pattern.YMD_DATETIME_SLASH_MINUTES, "2024/03/05 07:08"),
        ],
    )
    def test_pattern_output(
        self, sample: CalendarDateTime, pattern: Pattern, expected: str
    ) -> None:
        """Fields are zero-padded to their full width."""
        assert format_datetime(sample, pattern) == expected

    def test_small_year_is_padded(self) -> None:
        """Years render with four digits."""
        assert format_date(CalendarDate(5, 1, 2), Pattern.ISO_DATE) == "0005-01-02"

    def test_pattern_by_name_or_format_string(self) -> None:
        """Patterns can be given by name or format string."""
        d = CalendarDate(2024, 12, 26)
        assert format_date(d, "eu_date_dot") == "26.12.2024"
        assert format_date(d, "MM/dd/yyyy") == "12/26/2024"


class TestFieldSets:
    """Tests for values and patterns with different field sets."""

    def test_datetime_with_date_pattern_drops_time(self, sample: CalendarDateTime) -> None:
        """Date patterns drop the time silently."""
        assert format_date(sample, Pattern.US_DATE) == "03/05/2024"
        assert format_datetime(sample, Pattern.ISO_DATE) == "2024-03-05"

    def test_date_with_time_pattern_fails(self) -> None:
        """A CalendarDate has no time to render."""
        with pytest.raises(UnsupportedPatternError):
            format_datetime(CalendarDate(2024, 3, 5), Pattern.ISO_DATETIME)
        with pytest.raises(UnsupportedPatternError):
            format_date(CalendarDate(2024, 3, 5), Pattern.COMPACT_DATETIME)

    def test_format_date_refuses_time_patterns(self, sample: CalendarDateTime) -> None:
        """format_date only renders date-only patterns."""
        with pytest.raises(UnsupportedPatternError):
            format_date(sample, Pattern.ISO_DATETIME)

    def test_date_with_date_pattern_via_format_datetime(self) -> None:
        """format_datetime accepts dates for date-only patterns."""
        assert format_datetime(CalendarDate(2024, 3, 5), Pattern.COMPACT_DATE) == "20240305"

    def test_whole_second_with_ms_pattern(self) -> None:
        """Millisecond patterns render .000 for a whole second."""
        dt = CalendarDateTime(2024, 3, 5, 7, 8, 9)
        assert format_datetime(dt, Pattern.ISO_DATETIME_MS) == "2024-03-05T07:08:09.000"
        assert format_datetime(dt, Pattern.COMPACT_DATETIME_MS) == "20240305070809000"

    def test_ms_dropped_by_second_patterns(self, sample: CalendarDateTime) -> None:
        """Patterns without milliseconds drop them."""
        assert format_datetime(sample, Pattern.COMPACT_DATETIME) == "20240305070809"

    def test_seconds_dropped_by_minute_patterns(self) -> None:
        """HH:mm patterns truncate seconds and milliseconds."""
        dt = CalendarDateTime(2024, 12, 26, 14, 30, 59, 999)
        assert format_datetime(dt, Pattern.EU_DATETIME_DOT_MINUTES) == "26.12.2024 14:30"
        assert format_datetime(dt, "yyyy/MM/dd HH:mm") == "2024/12/26 14:30"

    def test_fraction_not_rendered_by_separated_patterns(self) -> None:
        """Separated seconds patterns read a fraction but never write one."""
        dt = CalendarDateTime(2024, 12, 26, 14, 30, 0, 500)
        assert format_datetime(dt, Pattern.US_DATETIME) == "12/26/2024 14:30:00"
        assert format_datetime(dt, Pattern.ISO_DATETIME_SPACE) == "2024-12-26 14:30:00"

    def test_offset_dropped_by_other_patterns(self, sample: CalendarDateTime) -> None:
        """Only the offset pattern renders the offset."""
        assert format_datetime(sample, Pattern.ISO_DATETIME_MS).endswith(".045")

    def test_offset_pattern_requires_offset(self) -> None:
        """A value without offset cannot fill ISO_DATETIME_OFFSET."""
        with pytest.raises(UnsupportedPatternError):
            format_datetime(CalendarDateTime(2024, 3, 5, 7), Pattern.ISO_DATETIME_OFFSET)

    def test_offset_pattern_omits_zero_millis(self) -> None:
        """Milliseconds appear in the offset pattern only when non-zero."""
        dt = CalendarDateTime(2024, 3, 5, 7, 8, 9, offset_minutes=0)
        assert format_datetime(dt, Pattern.ISO_DATETIME_OFFSET) == "2024-03-05T07:08:09Z"
        dt = dt.replace(millisecond=5, offset_minutes=-60)
        assert format_datetime(dt, Pattern.ISO_DATETIME_OFFSET) == "2024-03-05T07:08:09.005-01:00"


class TestFormatErrors:
    """Tests for invalid arguments."""

    def test_non_calendar_value(self) -> None:
        """Strings and other objects raise TypeError."""
        with pytest.raises(TypeError):
            format_date("2024-03-05", Pattern.ISO_DATE)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            format_datetime(None, Pattern.ISO_DATETIME)  # type: ignore[arg-type]

    def test_unknown_pattern(self) -> None:
        """Unknown pattern names raise UnsupportedPatternError."""
        with pytest.raises(UnsupportedPatternError):
            format_date(CalendarDate(2024, 3, 5), "dd MMM yyyy")


class TestValueMethods:
    """Tests for format and ISO helpers on the value classes."""

    def test_date_format_method(self) -> None:
        """CalendarDate.format delegates to format_date."""
        assert CalendarDate(2024, 12, 26).format(Pattern.EU_DATE) == "26/12/2024"

    def test_datetime_format_method(self, sample: CalendarDateTime) -> None:
        """CalendarDateTime.format delegates to format_datetime."""
        assert sample.format("yyyyMMddHHmmss") == "20240305070809"

    def test_iso_strings(self, sample: CalendarDateTime) -> None:
        """str() gives the ISO form with optional millis and offset."""
        assert str(CalendarDate(2024, 3, 5)) == "2024-03-05"
        assert str(sample) == "2024-03-05T07:08:09.045+05:30"
        assert str(CalendarDateTime(2024, 3, 5, 7, 8, 9)) == "2024-03-05T07:08:09"
