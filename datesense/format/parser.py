"""Parsing of date/time strings against catalog patterns.

When no pattern is supplied the classifier picks one; otherwise the
string must have the explicit pattern's shape. Extracted fields are then
checked for calendar validity by the value constructors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from datesense._internal.validation import validate_offset, validate_time
from datesense.catalog import PatternKind, get_spec
from datesense.errors import StructuralMismatchError
from datesense.infer import DetectionHint, classify, normalize_input
from datesense.infer._tiers import Candidate

if TYPE_CHECKING:
    from datesense.catalog import Fields, Pattern
    from datesense.core.date import CalendarDate
    from datesense.core.datetime import CalendarDateTime
    from datesense.infer import HintLike

logger = logging.getLogger(__name__)


_DATE_FIELDS = ("year", "month", "day")


def _match(
    text: str,
    pattern: Pattern | str | None,
    hint: HintLike,
    *,
    drop_time: bool = False,
) -> Candidate:
    """Find the pattern for text and extract its raw fields.

    With drop_time, an explicit date-only pattern also accepts its date
    followed by a time of day. The time is validated, then discarded.
    """
    if pattern is None:
        return classify(text, DetectionHint.coerce(hint))

    spec = get_spec(pattern)
    match = spec.match(text)
    if match is None and drop_time and spec.kind is PatternKind.DATE:
        match = spec.match_with_time(text)
        if match is not None:
            logger.debug("dropping the time of %r for %s", text, spec.pattern.name)
            return Candidate(spec=spec, match=match, fields=_without_time(spec.extract(match)))
    if match is None:
        raise StructuralMismatchError(
            f"{text!r} does not match pattern {spec.pattern.name} "
            f"({spec.format_string})"
        )
    return Candidate(spec=spec, match=match, fields=spec.extract(match))


def _without_time(fields: Fields) -> Fields:
    validate_time(
        fields.get("hour", 0),  # type: ignore[arg-type]
        fields.get("minute", 0),  # type: ignore[arg-type]
        fields.get("second", 0),  # type: ignore[arg-type]
        fields.get("millisecond", 0),  # type: ignore[arg-type]
    )
    validate_offset(fields.get("offset_minutes"))
    return {name: fields[name] for name in _DATE_FIELDS}


def _build_date(fields: Fields) -> CalendarDate:
    from datesense.core.date import CalendarDate

    return CalendarDate(fields["year"], fields["month"], fields["day"])  # type: ignore[arg-type]


def _build_datetime(fields: Fields) -> CalendarDateTime:
    from datesense.core.datetime import CalendarDateTime

    return CalendarDateTime(
        fields["year"],  # type: ignore[arg-type]
        fields["month"],  # type: ignore[arg-type]
        fields["day"],  # type: ignore[arg-type]
        fields.get("hour", 0),  # type: ignore[arg-type]
        fields.get("minute", 0),  # type: ignore[arg-type]
        fields.get("second", 0),  # type: ignore[arg-type]
        fields.get("millisecond", 0),  # type: ignore[arg-type]
        offset_minutes=fields.get("offset_minutes"),
    )


def parse_date(
    raw: str,
    pattern: Pattern | str | None = None,
    hint: HintLike = None,
) -> CalendarDate:
    """Parse a string into a CalendarDate.

    An explicit date-only pattern also accepts its date followed by a
    ``T`` or space and a time of day; the time is checked and dropped.
    A datetime pattern, explicit or detected, is never cut down.

    Args:
        raw: The string to parse. Surrounding whitespace is ignored.
        pattern: Explicit Pattern, pattern name or format string. If
            omitted, the format is detected.
        hint: Detection options; ignored when a pattern is given.

    Raises:
        EmptyInputError: If raw is None, empty or whitespace only.
        UnrecognizedFormatError: If no pattern was given and none matches.
        StructuralMismatchError: If raw does not have the explicit
            pattern's shape, or the pattern carries a time.
        InvalidCalendarValueError: If a field is out of range.
        UnsupportedPatternError: If pattern names no catalog pattern.

    Examples:
        >>> parse_date("2024-02-29")
        CalendarDate(2024, 2, 29)

        >>> parse_date("01/02/2024", hint="EU")
        CalendarDate(2024, 2, 1)

        >>> parse_date("2024-12-16T09:00:00", "ISO_DATE")
        CalendarDate(2024, 12, 16)

        >>> parse_date("2024-12-16T09:00:00")
        Traceback (most recent call last):
        ...
        StructuralMismatchError: pattern ISO_DATETIME carries a time; use parse_datetime
    """
    text = normalize_input(raw)
    candidate = _match(text, pattern, hint, drop_time=True)
    if candidate.spec.kind is PatternKind.DATETIME:
        raise StructuralMismatchError(
            f"pattern {candidate.spec.pattern.name} carries a time; use parse_datetime"
        )
    logger.debug("parsing %r as %s", text, candidate.spec.pattern.name)
    return _build_date(candidate.fields)


def parse_datetime(
    raw: str,
    pattern: Pattern | str | None = None,
    hint: HintLike = None,
) -> CalendarDateTime:
    """Parse a string into a CalendarDateTime.

    A date-only pattern yields midnight of that date.

    Raises:
        The same errors as parse_date, except that a time-bearing
        pattern is expected here.

    Examples:
        >>> parse_datetime("2024-12-16T09:00:00")
        CalendarDateTime(2024, 12, 16, 9, 0, 0, millisecond=0)

        >>> parse_datetime("2024-01-15T10:30:00.5+05:30").millisecond
        500

        >>> parse_datetime("20241216")
        CalendarDateTime(2024, 12, 16, 0, 0, 0, millisecond=0)
    """
    text = normalize_input(raw)
    candidate = _match(text, pattern, hint)
    logger.debug("parsing %r as %s", text, candidate.spec.pattern.name)
    return _build_datetime(candidate.fields)


def parse(
    raw: str,
    pattern: Pattern | str | None = None,
    hint: HintLike = None,
) -> Union[CalendarDate, CalendarDateTime]:
    """Parse a string into whichever value its pattern describes.

    Date patterns produce a CalendarDate and time-bearing patterns a
    CalendarDateTime.

    Examples:
        >>> parse("16.12.2024")
        CalendarDate(2024, 12, 16)

        >>> parse("20241216093000")
        CalendarDateTime(2024, 12, 16, 9, 30, 0, millisecond=0)
    """
    text = normalize_input(raw)
    candidate = _match(text, pattern, hint)
    logger.debug("parsing %r as %s", text, candidate.spec.pattern.name)
    if candidate.spec.kind is PatternKind.DATE:
        return _build_date(candidate.fields)
    return _build_datetime(candidate.fields)


__all__ = ["parse", "parse_date", "parse_datetime"]
