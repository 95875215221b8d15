"""Date/time format detection.

This module classifies a raw date/time string into one of the catalog
patterns by shape alone, without an explicit format.

Public API:
    detect: Return the Pattern a string is laid out in.
    DetectionHint: Options for ambiguous day/month ordering.
    Locale: Enum for field order (US, EU, AUTO).

Detection tries the catalog tiers in a fixed order and the first tier
with a match wins:
    - ISO 8601 shapes (offset, milliseconds, datetime, space, date)
      with the space forms taking seconds or minutes
    - Compact digit strings of length 8, 14 or 17
    - Slash, dash and dot separated dates, disambiguated by locale hint
      and field values, plus year-first slash dates

Examples:
    >>> from datesense.infer import detect
    >>> detect("2024-01-15T10:30:00Z")
    <Pattern.ISO_DATETIME_OFFSET: 'ISO_DATETIME_OFFSET'>

    >>> detect("13/01/2024")
    <Pattern.EU_DATE: 'EU_DATE'>

    >>> detect("01/02/2024", hint="EU")
    <Pattern.EU_DATE: 'EU_DATE'>
"""

from __future__ import annotations

import logging

from datesense.catalog import Pattern, Tier
from datesense.errors import EmptyInputError, UnrecognizedFormatError
from datesense.infer._options import DetectionHint, HintLike, Locale
from datesense.infer._tiers import Candidate, match_tier, resolve_order

logger = logging.getLogger(__name__)


def normalize_input(raw: object) -> str:
    """Return raw stripped of surrounding whitespace.

    Raises:
        EmptyInputError: If raw is None, empty or whitespace only.
        TypeError: If raw is not a string.
    """
    if raw is None:
        raise EmptyInputError("input is None")
    if not isinstance(raw, str):
        raise TypeError(f"expected str, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        raise EmptyInputError("input is empty")
    return text


def classify(text: str, hint: DetectionHint) -> Candidate:
    """Return the winning candidate for already-normalized text.

    Raises:
        UnrecognizedFormatError: If no tier matches.
        AmbiguousFormatError: If a strict hint cannot order day and month.
    """
    for tier in Tier:
        candidates = match_tier(text, tier)
        if not candidates:
            continue
        if tier is Tier.SEPARATED:
            chosen, reason = resolve_order(candidates, hint)
        else:
            chosen, reason = candidates[0], f"rank {candidates[0].spec.rank}"
        logger.debug(
            "detected %s for %r (tier %s, %s)",
            chosen.spec.pattern.name,
            text,
            tier.name,
            reason,
        )
        return chosen

    raise UnrecognizedFormatError(
        f"cannot determine format for: {text!r}. "
        "Expected an ISO, compact, or slash/dash/dot separated date."
    )


def detect(raw: str, hint: HintLike = None) -> Pattern:
    """Return the Pattern a date/time string is laid out in.

    Only the shape is examined; "2024-13-45" is detected as ISO_DATE
    and rejected later by the parser.

    Args:
        raw: The string to classify. Surrounding whitespace is ignored.
        hint: A DetectionHint, a Locale, a locale name ("US", "EU",
            "auto"), or a mapping like ``{"locale": "EU"}``.

    Returns:
        The detected Pattern.

    Raises:
        EmptyInputError: If raw is None, empty or whitespace only.
        UnrecognizedFormatError: If no pattern matches.
        AmbiguousFormatError: If a strict hint cannot order day and month.
        TypeError: If raw is not a string.

    Examples:
        >>> detect("20241216")
        <Pattern.COMPACT_DATE: 'COMPACT_DATE'>

        >>> detect("12/26/2024 14:30:00")
        <Pattern.US_DATETIME: 'US_DATETIME'>
    """
    text = normalize_input(raw)
    return classify(text, DetectionHint.coerce(hint)).spec.pattern


__all__ = [
    "DetectionHint",
    "HintLike",
    "Locale",
    "classify",
    "detect",
    "normalize_input",
]
