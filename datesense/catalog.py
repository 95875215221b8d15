"""Pattern catalog: the closed set of supported date/time layouts.

Each Pattern has one PatternSpec holding:
- A compiled regex recognizing the layout's shape (not calendar validity)
- A field extractor turning a regex match into raw integer fields
- A renderer producing the canonical string from fields
- Classification metadata (tier, rank, day_first, preferred) used by the
  classifier

Adding a layout means adding a Pattern member and its PatternSpec here;
the classifier, parser and formatter only iterate the catalog.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Dict, Iterator, Optional

from datesense.errors import UnsupportedPatternError

# Raw integer fields keyed by name: year, month, day, hour, minute,
# second, millisecond, offset_minutes. Missing keys mean "not present".
Fields = Dict[str, Optional[int]]

_INT_FIELDS = ("year", "month", "day", "hour", "minute", "second", "millisecond")


class PatternKind(Enum):
    """Whether a pattern describes a date or a date with time."""

    DATE = "date"
    DATETIME = "datetime"


class Tier(IntEnum):
    """Classification tiers, tried in ascending order.

    ISO shapes are fixed-width and cannot collide with the others;
    compact shapes have no separators; separated shapes are the loosest
    and may need day/month disambiguation.
    """

    ISO = 0
    COMPACT = 1
    SEPARATED = 2


class Pattern(Enum):
    """Supported date/time layouts.

    Member names are stable identifiers. Each member exposes the
    Java-style ``format_string`` it corresponds to plus the shape
    attributes of its PatternSpec.

    Examples:
        >>> Pattern.US_DATE.format_string
        'MM/dd/yyyy'

        >>> Pattern.lookup("iso_datetime")
        <Pattern.ISO_DATETIME: 'ISO_DATETIME'>

        >>> Pattern.lookup("dd.MM.yyyy")
        <Pattern.EU_DATE_DOT: 'EU_DATE_DOT'>
    """

    ISO_DATE = "ISO_DATE"
    ISO_DATETIME = "ISO_DATETIME"
    ISO_DATETIME_MS = "ISO_DATETIME_MS"
    ISO_DATETIME_OFFSET = "ISO_DATETIME_OFFSET"
    US_DATE = "US_DATE"
    US_DATETIME = "US_DATETIME"
    EU_DATE = "EU_DATE"
    EU_DATETIME = "EU_DATETIME"
    COMPACT_DATE = "COMPACT_DATE"
    COMPACT_DATETIME = "COMPACT_DATETIME"
    COMPACT_DATETIME_MS = "COMPACT_DATETIME_MS"
    ISO_DATETIME_SPACE = "ISO_DATETIME_SPACE"
    US_DATE_DASH = "US_DATE_DASH"
    EU_DATE_DASH = "EU_DATE_DASH"
    EU_DATE_DOT = "EU_DATE_DOT"
    US_DATE_DOT = "US_DATE_DOT"
    ISO_DATETIME_SPACE_MINUTES = "ISO_DATETIME_SPACE_MINUTES"
    US_DATETIME_MINUTES = "US_DATETIME_MINUTES"
    EU_DATETIME_MINUTES = "EU_DATETIME_MINUTES"
    US_DATETIME_DASH = "US_DATETIME_DASH"
    EU_DATETIME_DASH = "EU_DATETIME_DASH"
    US_DATETIME_DASH_MINUTES = "US_DATETIME_DASH_MINUTES"
    EU_DATETIME_DASH_MINUTES = "EU_DATETIME_DASH_MINUTES"
    US_DATETIME_DOT = "US_DATETIME_DOT"
    EU_DATETIME_DOT = "EU_DATETIME_DOT"
    US_DATETIME_DOT_MINUTES = "US_DATETIME_DOT_MINUTES"
    EU_DATETIME_DOT_MINUTES = "EU_DATETIME_DOT_MINUTES"
    YMD_DATE_SLASH = "YMD_DATE_SLASH"
    YMD_DATETIME_SLASH = "YMD_DATETIME_SLASH"
    YMD_DATETIME_SLASH_MINUTES = "YMD_DATETIME_SLASH_MINUTES"

    @classmethod
    def lookup(cls, value: Pattern | str) -> Pattern:
        """Return the Pattern named by value.

        Args:
            value: A Pattern, its name in any letter case, or its
                format string (e.g. ``"MM/dd/yyyy"``).

        Raises:
            UnsupportedPatternError: If value names no pattern.
            TypeError: If value is neither a Pattern nor a string.
        """
        if isinstance(value, Pattern):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"pattern must be a Pattern or str, got {type(value).__name__}"
            )
        key = value.strip()
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        for spec in _CATALOG.values():
            if spec.format_string == key:
                return spec.pattern
        raise UnsupportedPatternError(f"unknown pattern: {value!r}")

    @property
    def spec(self) -> PatternSpec:
        """Return the catalog entry for this pattern."""
        return _CATALOG[self]

    @property
    def format_string(self) -> str:
        return _CATALOG[self].format_string

    @property
    def kind(self) -> PatternKind:
        return _CATALOG[self].kind

    @property
    def has_time(self) -> bool:
        return _CATALOG[self].kind is PatternKind.DATETIME

    @property
    def has_seconds(self) -> bool:
        return _CATALOG[self].has_seconds

    @property
    def has_millis(self) -> bool:
        return _CATALOG[self].has_millis

    @property
    def has_offset(self) -> bool:
        return _CATALOG[self].has_offset

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PatternSpec:
    """Catalog entry describing one pattern.

    Attributes:
        pattern: The Pattern this entry describes.
        format_string: Java-style layout string.
        kind: Date or datetime.
        regex: Compiled, anchored shape recognizer.
        extractor: Maps a regex match to raw integer fields.
        renderer: Maps complete fields to the canonical string.
        tier: Classification tier.
        rank: Order within the tier (lower is tried first).
        day_first: None when the shape has no day/month ambiguity,
            otherwise whether the first field is the day.
        preferred: For day/month twins, whether this reading wins when
            the field values and the hint leave the order open.
        has_seconds: Whether the rendering carries seconds.
        has_millis: Whether the rendering carries milliseconds. Some
            layouts accept a fraction on input without rendering one.
        has_offset: Whether the layout carries a UTC offset.
        time_tail: For date layouts, the shape followed by a time of
            day, or None where no time tail is recognized.
    """

    pattern: Pattern
    format_string: str
    kind: PatternKind
    regex: re.Pattern[str]
    extractor: Callable[[re.Match[str]], Fields]
    renderer: Callable[[Fields], str]
    tier: Tier
    rank: int
    day_first: bool | None = None
    preferred: bool = False
    has_seconds: bool = False
    has_millis: bool = False
    has_offset: bool = False
    time_tail: re.Pattern[str] | None = None

    def match(self, text: str) -> re.Match[str] | None:
        """Return the regex match for text, or None if the shape differs."""
        return self.regex.match(text)

    def match_with_time(self, text: str) -> re.Match[str] | None:
        """Return the match of text as this date followed by a time, if any."""
        if self.time_tail is None:
            return None
        return self.time_tail.match(text)

    def extract(self, match: re.Match[str]) -> Fields:
        return self.extractor(match)

    def render(self, fields: Fields) -> str:
        return self.renderer(fields)


# Offsets


def parse_offset(text: str) -> int:
    """Convert ``Z`` or ``+HH:MM`` / ``-HH:MM`` to signed minutes.

    Examples:
        >>> parse_offset("Z")
        0
        >>> parse_offset("-05:30")
        -330
    """
    if text in ("Z", "z"):
        return 0
    sign = -1 if text[0] == "-" else 1
    hours, minutes = text[1:].split(":")
    return sign * (int(hours) * 60 + int(minutes))


def format_offset(minutes: int) -> str:
    """Render signed offset minutes as ``Z`` or ``+HH:MM``.

    Examples:
        >>> format_offset(0)
        'Z'
        >>> format_offset(330)
        '+05:30'
        >>> format_offset(-480)
        '-08:00'
    """
    if minutes == 0:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


# Extraction


def _extract_fields(match: re.Match[str]) -> Fields:
    """Extract raw fields from a match of any catalog regex.

    Every catalog regex uses the same group names. ``fraction`` holds a
    1-3 digit fraction of a second, scaled to milliseconds ("5" is 500).
    """
    groups = match.groupdict()
    fields: Fields = {}
    for name in _INT_FIELDS:
        raw = groups.get(name)
        if raw is not None:
            fields[name] = int(raw)
    fraction = groups.get("fraction")
    if fraction is not None:
        fields["millisecond"] = int(fraction.ljust(3, "0"))
    offset = groups.get("offset")
    if offset is not None:
        fields["offset_minutes"] = parse_offset(offset)
    return fields


# Rendering


def _template(template: str) -> Callable[[Fields], str]:
    """Build a renderer from a str.format template over the field names."""

    def render(fields: Fields) -> str:
        return template.format(**fields)

    return render


def _render_iso_offset(fields: Fields) -> str:
    # Milliseconds only when present; offset always
    result = "{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}".format(
        **fields
    )
    if fields["millisecond"]:
        result += f".{fields['millisecond']:03d}"
    return result + format_offset(fields["offset_minutes"])  # type: ignore[arg-type]


# Regex building blocks

_ISO_YMD = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_ISO_HMS = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
_ISO_HM = r"(?P<hour>\d{2}):(?P<minute>\d{2})"
_SHORT_HMS = r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})"
_SHORT_HM = r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
_FRACTION = r"(?:\.(?P<fraction>\d{1,3}))?"
_OFFSET = r"(?P<offset>[Zz]|[+-]\d{2}:[0-5]\d)"
_YMD_SLASH = r"(?P<year>\d{4})/(?P<month>\d{2})/(?P<day>\d{2})"

# A time of day after a date: T or space, then HH:mm with optional
# seconds, fraction and offset
_TIME_TAIL = (
    rf"[T ]{_SHORT_HM}(?::(?P<second>\d{{2}})(?:\.(?P<fraction>\d{{1,3}}))?)?"
    rf"{_OFFSET}?"
)


def _mdy(sep: str) -> str:
    sep = re.escape(sep)
    return rf"(?P<month>\d{{1,2}}){sep}(?P<day>\d{{1,2}}){sep}(?P<year>\d{{4}})"


def _dmy(sep: str) -> str:
    sep = re.escape(sep)
    return rf"(?P<day>\d{{1,2}}){sep}(?P<month>\d{{1,2}}){sep}(?P<year>\d{{4}})"


def _compile(body: str) -> re.Pattern[str]:
    return re.compile(rf"^{body}$", re.ASCII)


_DATE_YMD = "{year:04d}-{month:02d}-{day:02d}"
_TIME = "{hour:02d}:{minute:02d}:{second:02d}"
_TIME_HM = "{hour:02d}:{minute:02d}"
_COMPACT = "{year:04d}{month:02d}{day:02d}"
_COMPACT_TIME = "{hour:02d}{minute:02d}{second:02d}"
_SLASH_YMD = "{year:04d}/{month:02d}/{day:02d}"


def _spec(
    pattern: Pattern,
    format_string: str,
    kind: PatternKind,
    regex: str,
    renderer: Callable[[Fields], str],
    tier: Tier,
    rank: int,
    **metadata: bool | None,
) -> PatternSpec:
    time_tail = None
    if kind is PatternKind.DATE and tier is not Tier.COMPACT:
        time_tail = _compile(regex + _TIME_TAIL)
    return PatternSpec(
        pattern=pattern,
        format_string=format_string,
        kind=kind,
        regex=_compile(regex),
        extractor=_extract_fields,
        renderer=renderer,
        tier=tier,
        rank=rank,
        time_tail=time_tail,
        **metadata,  # type: ignore[arg-type]
    )


# Time portions of the separated layouts:
# (regex, render template, format suffix, has_seconds)
_NO_TIME = ("", "", "", False)
_WITH_SECONDS = (rf" {_SHORT_HMS}{_FRACTION}", f" {_TIME}", " HH:mm:ss", True)
_WITH_MINUTES = (rf" {_SHORT_HM}", f" {_TIME_HM}", " HH:mm", False)


def _twins(
    month_first: Pattern,
    day_first: Pattern,
    sep: str,
    time: tuple[str, str, str, bool],
    rank: int,
    *,
    prefer_day_first: bool = False,
) -> list[PatternSpec]:
    """Build the month-first and day-first entries sharing one shape."""
    time_regex, time_template, time_format, has_seconds = time
    kind = PatternKind.DATETIME if time_regex else PatternKind.DATE
    mdy = "{month:02d}" + sep + "{day:02d}" + sep + "{year:04d}"
    dmy = "{day:02d}" + sep + "{month:02d}" + sep + "{year:04d}"
    return [
        _spec(
            month_first,
            f"MM{sep}dd{sep}yyyy{time_format}",
            kind,
            _mdy(sep) + time_regex,
            _template(mdy + time_template),
            Tier.SEPARATED,
            rank,
            day_first=False,
            preferred=not prefer_day_first,
            has_seconds=has_seconds,
        ),
        _spec(
            day_first,
            f"dd{sep}MM{sep}yyyy{time_format}",
            kind,
            _dmy(sep) + time_regex,
            _template(dmy + time_template),
            Tier.SEPARATED,
            rank + 1,
            day_first=True,
            preferred=prefer_day_first,
            has_seconds=has_seconds,
        ),
    ]


_DATE = PatternKind.DATE
_DATETIME = PatternKind.DATETIME

_SPECS = [
    # ISO tier: offset-qualified first, date-only last
    _spec(
        Pattern.ISO_DATETIME_OFFSET,
        "yyyy-MM-dd'T'HH:mm:ss.SSSXXX",
        _DATETIME,
        rf"{_ISO_YMD}T{_ISO_HMS}{_FRACTION}{_OFFSET}",
        _render_iso_offset,
        Tier.ISO,
        0,
        has_seconds=True,
        has_millis=True,
        has_offset=True,
    ),
    _spec(
        Pattern.ISO_DATETIME_MS,
        "yyyy-MM-dd'T'HH:mm:ss.SSS",
        _DATETIME,
        rf"{_ISO_YMD}T{_ISO_HMS}\.(?P<fraction>\d{{1,3}})",
        _template(f"{_DATE_YMD}T{_TIME}.{{millisecond:03d}}"),
        Tier.ISO,
        1,
        has_seconds=True,
        has_millis=True,
    ),
    _spec(
        Pattern.ISO_DATETIME,
        "yyyy-MM-dd'T'HH:mm:ss",
        _DATETIME,
        rf"{_ISO_YMD}T{_ISO_HMS}",
        _template(f"{_DATE_YMD}T{_TIME}"),
        Tier.ISO,
        2,
        has_seconds=True,
    ),
    _spec(
        Pattern.ISO_DATETIME_SPACE,
        "yyyy-MM-dd HH:mm:ss",
        _DATETIME,
        rf"{_ISO_YMD} {_ISO_HMS}{_FRACTION}",
        _template(f"{_DATE_YMD} {_TIME}"),
        Tier.ISO,
        3,
        has_seconds=True,
    ),
    _spec(
        Pattern.ISO_DATETIME_SPACE_MINUTES,
        "yyyy-MM-dd HH:mm",
        _DATETIME,
        rf"{_ISO_YMD} {_ISO_HM}",
        _template(f"{_DATE_YMD} {_TIME_HM}"),
        Tier.ISO,
        4,
    ),
    _spec(
        Pattern.ISO_DATE,
        "yyyy-MM-dd",
        _DATE,
        _ISO_YMD,
        _template(_DATE_YMD),
        Tier.ISO,
        5,
    ),
    # Compact tier: pure digit strings of length 8, 14 and 17
    _spec(
        Pattern.COMPACT_DATE,
        "yyyyMMdd",
        _DATE,
        r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})",
        _template(_COMPACT),
        Tier.COMPACT,
        0,
    ),
    _spec(
        Pattern.COMPACT_DATETIME,
        "yyyyMMddHHmmss",
        _DATETIME,
        r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"
        r"(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})",
        _template(_COMPACT + _COMPACT_TIME),
        Tier.COMPACT,
        1,
        has_seconds=True,
    ),
    _spec(
        Pattern.COMPACT_DATETIME_MS,
        "yyyyMMddHHmmssSSS",
        _DATETIME,
        r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"
        r"(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})(?P<millisecond>\d{3})",
        _template(_COMPACT + _COMPACT_TIME + "{millisecond:03d}"),
        Tier.COMPACT,
        2,
        has_seconds=True,
        has_millis=True,
    ),
    # Separated tier: month-first / day-first twins share a shape.
    # Slash and dash read month-first when undecided, dot day-first.
    *_twins(Pattern.US_DATE, Pattern.EU_DATE, "/", _NO_TIME, 0),
    *_twins(Pattern.US_DATETIME, Pattern.EU_DATETIME, "/", _WITH_SECONDS, 2),
    *_twins(Pattern.US_DATETIME_MINUTES, Pattern.EU_DATETIME_MINUTES, "/", _WITH_MINUTES, 4),
    *_twins(Pattern.US_DATE_DASH, Pattern.EU_DATE_DASH, "-", _NO_TIME, 6),
    *_twins(Pattern.US_DATETIME_DASH, Pattern.EU_DATETIME_DASH, "-", _WITH_SECONDS, 8),
    *_twins(
        Pattern.US_DATETIME_DASH_MINUTES,
        Pattern.EU_DATETIME_DASH_MINUTES,
        "-",
        _WITH_MINUTES,
        10,
    ),
    *_twins(Pattern.US_DATE_DOT, Pattern.EU_DATE_DOT, ".", _NO_TIME, 12, prefer_day_first=True),
    *_twins(
        Pattern.US_DATETIME_DOT,
        Pattern.EU_DATETIME_DOT,
        ".",
        _WITH_SECONDS,
        14,
        prefer_day_first=True,
    ),
    *_twins(
        Pattern.US_DATETIME_DOT_MINUTES,
        Pattern.EU_DATETIME_DOT_MINUTES,
        ".",
        _WITH_MINUTES,
        16,
        prefer_day_first=True,
    ),
    # Year-first slash dates have a single reading
    _spec(
        Pattern.YMD_DATE_SLASH,
        "yyyy/MM/dd",
        _DATE,
        _YMD_SLASH,
        _template(_SLASH_YMD),
        Tier.SEPARATED,
        18,
    ),
    _spec(
        Pattern.YMD_DATETIME_SLASH,
        "yyyy/MM/dd HH:mm:ss",
        _DATETIME,
        _YMD_SLASH + _WITH_SECONDS[0],
        _template(_SLASH_YMD + _WITH_SECONDS[1]),
        Tier.SEPARATED,
        19,
        has_seconds=True,
    ),
    _spec(
        Pattern.YMD_DATETIME_SLASH_MINUTES,
        "yyyy/MM/dd HH:mm",
        _DATETIME,
        _YMD_SLASH + _WITH_MINUTES[0],
        _template(_SLASH_YMD + _WITH_MINUTES[1]),
        Tier.SEPARATED,
        20,
    ),
]

_CATALOG: dict[Pattern, PatternSpec] = {spec.pattern: spec for spec in _SPECS}


def get_spec(pattern: Pattern | str) -> PatternSpec:
    """Return the catalog entry for a Pattern, name or format string."""
    return _CATALOG[Pattern.lookup(pattern)]


def iter_tier(tier: Tier) -> Iterator[PatternSpec]:
    """Yield the catalog entries of one tier in rank order."""
    for spec in sorted(_CATALOG.values(), key=lambda s: s.rank):
        if spec.tier is tier:
            yield spec


def iter_specs() -> Iterator[PatternSpec]:
    """Yield every catalog entry in classification order."""
    yield from sorted(_CATALOG.values(), key=lambda s: (s.tier, s.rank))


__all__ = [
    "Fields",
    "Pattern",
    "PatternKind",
    "PatternSpec",
    "Tier",
    "format_offset",
    "get_spec",
    "iter_specs",
    "iter_tier",
    "parse_offset",
]
