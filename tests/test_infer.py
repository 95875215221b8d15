"""Tests for format detection.

Tests the detect function, tier ordering, day/month disambiguation and
the DetectionHint options.
"""

from __future__ import annotations

import dataclasses
import logging

import pytest

from datesense import CalendarDateTime, Pattern, format_datetime
from datesense.errors import (
    AmbiguousFormatError,
    EmptyInputError,
    UnrecognizedFormatError,
)
from datesense.infer import DetectionHint, Locale, detect


class TestDetectionHint:
    """Tests for DetectionHint configuration."""

    def test_defaults(self) -> None:
        """Default hint is automatic and lenient."""
        hint = DetectionHint()
        assert hint.locale is Locale.AUTO
        assert hint.strict is False

    def test_is_frozen(self) -> None:
        """DetectionHint should be immutable."""
        hint = DetectionHint()
        with pytest.raises(dataclasses.FrozenInstanceError):
            hint.strict = True  # type: ignore[misc]

    def test_coerce_none(self) -> None:
        """None coerces to the default hint."""
        assert DetectionHint.coerce(None) == DetectionHint()

    def test_coerce_passthrough(self) -> None:
        """A DetectionHint is returned unchanged."""
        hint = DetectionHint(locale=Locale.EU, strict=True)
        assert DetectionHint.coerce(hint) is hint

    @pytest.mark.parametrize(
        ("value", "locale"),
        [
            ("US", Locale.US),
            ("eu", Locale.EU),
            ("auto", Locale.AUTO),
            (Locale.EU, Locale.EU),
        ],
    )
    def test_coerce_locale(self, value: object, locale: Locale) -> None:
        """Locale names (any case) and Locale members coerce."""
        assert DetectionHint.coerce(value).locale is locale  # type: ignore[arg-type]

    def test_coerce_mapping(self) -> None:
        """Mappings with locale and strict keys coerce."""
        hint = DetectionHint.coerce({"locale": "EU", "strict": True})
        assert hint == DetectionHint(locale=Locale.EU, strict=True)

    def test_coerce_mapping_defaults(self) -> None:
        """Missing mapping keys fall back to defaults."""
        assert DetectionHint.coerce({}) == DetectionHint()

    def test_coerce_unknown_locale(self) -> None:
        """Unknown locale names raise ValueError."""
        with pytest.raises(ValueError):
            DetectionHint.coerce("FR")

    def test_coerce_wrong_type(self) -> None:
        """Unsupported hint types raise TypeError."""
        with pytest.raises(TypeError):
            DetectionHint.coerce(42)  # type: ignore[arg-type]


class TestDetectISO:
    """Tests for the ISO tier."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-01-15", Pattern.ISO_DATE),
            ("2024-01-15T10:30:00", Pattern.ISO_DATETIME),
            ("2024-01-15T10:30:00.123", Pattern.ISO_DATETIME_MS),
            ("2024-01-15T10:30:00.5", Pattern.ISO_DATETIME_MS),
            ("2024-01-15T10:30:00Z", Pattern.ISO_DATETIME_OFFSET),
            ("2024-01-15T10:30:00.123Z", Pattern.ISO_DATETIME_OFFSET),
            ("2024-01-15T10:30:00+05:30", Pattern.ISO_DATETIME_OFFSET),
            ("2024-01-15T10:30:00.1-08:00", Pattern.ISO_DATETIME_OFFSET),
            ("2024-01-15 10:30:00", Pattern.ISO_DATETIME_SPACE),
            ("2024-01-15 10:30:00.250", Pattern.ISO_DATETIME_SPACE),
            ("2024-01-15 10:30", Pattern.ISO_DATETIME_SPACE_MINUTES),
        ],
    )
    def test_iso_shapes(self, text: str, expected: Pattern) -> None:
        """ISO strings resolve to the most specific ISO pattern."""
        assert detect(text) is expected

    def test_shape_only(self) -> None:
        """Detection looks at shape, not calendar validity."""
        assert detect("2024-13-45") is Pattern.ISO_DATE


class TestDetectCompact:
    """Tests for the compact tier."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("20241216", Pattern.COMPACT_DATE),
            ("20241216093000", Pattern.COMPACT_DATETIME),
            ("20241216093000123", Pattern.COMPACT_DATETIME_MS),
        ],
    )
    def test_compact_lengths(self, text: str, expected: Pattern) -> None:
        """Digit strings of length 8, 14 and 17 are compact forms."""
        assert detect(text) is expected

    @pytest.mark.parametrize("text", ["2024121", "202412160", "202412160930001"])
    def test_other_lengths_unrecognized(self, text: str) -> None:
        """Other digit-string lengths match nothing."""
        with pytest.raises(UnrecognizedFormatError):
            detect(text)


class TestDetectSeparated:
    """Tests for slash, dash and dot separated shapes."""

    def test_first_field_over_twelve_is_day_first(self) -> None:
        """'13/01/2024' can only be day-first."""
        assert detect("13/01/2024") is Pattern.EU_DATE

    def test_second_field_over_twelve_is_month_first(self) -> None:
        """'12/26/2024' can only be month-first."""
        assert detect("12/26/2024") is Pattern.US_DATE

    def test_ambiguous_defaults_to_us(self) -> None:
        """With nothing to decide, slash dates read month-first."""
        assert detect("01/02/2024") is Pattern.US_DATE

    def test_single_digit_fields(self) -> None:
        """One-digit month and day are accepted."""
        assert detect("1/2/2024") is Pattern.US_DATE
        assert detect("25/2/2024") is Pattern.EU_DATE

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            ("EU", Pattern.EU_DATE),
            ("US", Pattern.US_DATE),
            ("auto", Pattern.US_DATE),
            (DetectionHint(locale=Locale.EU), Pattern.EU_DATE),
            ({"locale": "eu"}, Pattern.EU_DATE),
        ],
    )
    def test_locale_hint(self, hint: object, expected: Pattern) -> None:
        """An explicit locale decides ambiguous dates."""
        assert detect("01/02/2024", hint=hint) is expected  # type: ignore[arg-type]

    def test_locale_hint_overrides_field_values(self) -> None:
        """The locale hint is consulted before the field heuristic."""
        assert detect("12/26/2024", hint="EU") is Pattern.EU_DATE
        assert detect("26/12/2024", hint="US") is Pattern.US_DATE

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12/26/2024 14:30:00", Pattern.US_DATETIME),
            ("26/12/2024 14:30:00", Pattern.EU_DATETIME),
            ("12/26/2024 9:05:00", Pattern.US_DATETIME),
            ("12-26-2024", Pattern.US_DATE_DASH),
            ("26-12-2024", Pattern.EU_DATE_DASH),
            ("01-02-2024", Pattern.US_DATE_DASH),
            ("26.12.2024", Pattern.EU_DATE_DOT),
            ("01.02.2024", Pattern.EU_DATE_DOT),
            ("12.26.2024", Pattern.US_DATE_DOT),
            ("12/26/2024 14:30", Pattern.US_DATETIME_MINUTES),
            ("26/12/2024 9:05", Pattern.EU_DATETIME_MINUTES),
            ("12/26/2024 14:30:00.5", Pattern.US_DATETIME),
            ("26-12-2024 14:30:00", Pattern.EU_DATETIME_DASH),
            ("12-26-2024 14:30", Pattern.US_DATETIME_DASH_MINUTES),
            ("26.12.2024 14:30:00", Pattern.EU_DATETIME_DOT),
            ("26.12.2024 14:30", Pattern.EU_DATETIME_DOT_MINUTES),
            ("12.26.2024 14:30:00", Pattern.US_DATETIME_DOT),
            ("2024/12/26", Pattern.YMD_DATE_SLASH),
            ("2024/01/02", Pattern.YMD_DATE_SLASH),
            ("2024/12/26 14:30:00", Pattern.YMD_DATETIME_SLASH),
            ("2024/12/26 9:05", Pattern.YMD_DATETIME_SLASH_MINUTES),
        ],
    )
    def test_other_separated_shapes(self, text: str, expected: Pattern) -> None:
        """Datetime, dash, dot and year-first shapes resolve within the tier."""
        assert detect(text) is expected

    def test_dot_dates_default_to_day_first(self) -> None:
        """Undecided dot dates read day-first; slash and dash stay month-first."""
        assert detect("01.02.2024") is Pattern.EU_DATE_DOT
        assert detect("01.02.2024 10:00") is Pattern.EU_DATETIME_DOT_MINUTES
        assert detect("01/02/2024") is Pattern.US_DATE
        assert detect("01-02-2024") is Pattern.US_DATE_DASH

    def test_dot_dates_follow_locale_hint(self) -> None:
        """A US hint reads a dot date month-first."""
        assert detect("01.02.2024", hint="US") is Pattern.US_DATE_DOT
        assert detect("01.02.2024", hint="EU") is Pattern.EU_DATE_DOT

    def test_dot_dates_second_field_over_twelve(self) -> None:
        """A dot date whose second field cannot be a month is month-first."""
        assert detect("12.26.2024") is Pattern.US_DATE_DOT
        assert detect("1.13.2024 8:00:00") is Pattern.US_DATETIME_DOT

    def test_year_first_ignores_locale_hint(self) -> None:
        """yyyy/MM/dd has a single reading."""
        assert detect("2024/01/02", hint="EU") is Pattern.YMD_DATE_SLASH
        assert detect("2024/01/02", hint=DetectionHint(strict=True)) is Pattern.YMD_DATE_SLASH


class TestStrictDetection:
    """Tests for DetectionHint(strict=True)."""

    def test_strict_raises_on_ambiguity(self) -> None:
        """Strict mode refuses to guess between two valid readings."""
        with pytest.raises(AmbiguousFormatError):
            detect("01/02/2024", hint=DetectionHint(strict=True))

    def test_strict_error_is_unrecognized_format(self) -> None:
        """AmbiguousFormatError is caught as UnrecognizedFormatError."""
        with pytest.raises(UnrecognizedFormatError):
            detect("03-04-2024", hint={"strict": True})

    def test_strict_dot_dates(self) -> None:
        """Strict mode covers dot dates too, despite their day-first default."""
        with pytest.raises(AmbiguousFormatError):
            detect("01.02.2024", hint=DetectionHint(strict=True))
        assert detect("13.02.2024", hint=DetectionHint(strict=True)) is Pattern.EU_DATE_DOT

    def test_strict_allows_decided_cases(self) -> None:
        """Field values or a locale still decide in strict mode."""
        strict = DetectionHint(strict=True)
        assert detect("13/01/2024", hint=strict) is Pattern.EU_DATE
        assert detect("01/13/2024", hint=strict) is Pattern.US_DATE
        assert (
            detect("01/02/2024", hint=DetectionHint(locale=Locale.EU, strict=True))
            is Pattern.EU_DATE
        )

    def test_strict_allows_equal_fields(self) -> None:
        """Identical day and month read the same either way."""
        assert detect("05/05/2024", hint=DetectionHint(strict=True)) is Pattern.US_DATE


class TestDetectFailures:
    """Tests for input that cannot be classified."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_empty_input(self, text: object) -> None:
        """None and blank strings raise EmptyInputError."""
        with pytest.raises(EmptyInputError):
            detect(text)  # type: ignore[arg-type]

    def test_non_string_input(self) -> None:
        """Non-string input raises TypeError."""
        with pytest.raises(TypeError):
            detect(20241216)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-date",
            "2024-1-15",
            "Jan 15, 2024",
            "15/01/24",
            "2024-01-15T10:30",
            "2024-01-15T10:30:00.1234",
            "12/26/2024T14:30:00",
        ],
    )
    def test_unrecognized(self, text: str) -> None:
        """Shapes outside the catalog raise UnrecognizedFormatError."""
        with pytest.raises(UnrecognizedFormatError):
            detect(text)

    def test_surrounding_whitespace_ignored(self) -> None:
        """Input is stripped before classification."""
        assert detect("  2024-01-15\n") is Pattern.ISO_DATE


class TestClassificationStability:
    """Tests that every pattern's own rendering detects as that pattern."""

    @pytest.mark.parametrize("pattern", list(Pattern))
    def test_rendered_text_detects_as_its_pattern(self, pattern: Pattern) -> None:
        """A day above 12 keeps separated renderings unambiguous."""
        value = CalendarDateTime(2024, 12, 26, 14, 30, 45, 123, offset_minutes=330)
        text = format_datetime(value, pattern)
        assert detect(text) is pattern
        assert detect(text) is detect(text)


class TestDetectionLogging:
    """Tests for debug logging of detection decisions."""

    def test_decision_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """The chosen pattern and the reason are logged."""
        caplog.set_level(logging.DEBUG, logger="datesense.infer")
        detect("13/01/2024")
        assert "EU_DATE" in caplog.text
        assert all(record.levelno == logging.DEBUG for record in caplog.records)

    def test_failures_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failures are raised to the caller, never logged."""
        caplog.set_level(logging.DEBUG, logger="datesense")
        with pytest.raises(UnrecognizedFormatError):
            detect("not-a-date")
        assert [r for r in caplog.records if r.name.startswith("datesense")] == []
