"""Tier matching and day/month disambiguation for the classifier.

Internal module - use detect() from datesense.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from datesense.catalog import Fields, PatternSpec, Tier, iter_tier
from datesense.errors import AmbiguousFormatError
from datesense.infer._options import DetectionHint, Locale

if TYPE_CHECKING:
    import re

# Largest value a month field can hold
_MAX_MONTH = 12


@dataclass
class Candidate:
    """A catalog entry whose shape matched the input.

    Attributes:
        spec: The matching catalog entry.
        match: The regex match object.
        fields: Raw integer fields extracted from the match.
    """

    spec: PatternSpec
    match: re.Match[str]
    fields: Fields


def match_tier(text: str, tier: Tier) -> list[Candidate]:
    """Return every entry of one tier whose shape matches text, in rank order."""
    candidates: list[Candidate] = []
    for spec in iter_tier(tier):
        match = spec.match(text)
        if match:
            candidates.append(Candidate(spec=spec, match=match, fields=spec.extract(match)))
    return candidates


def resolve_order(
    candidates: list[Candidate],
    hint: DetectionHint,
) -> tuple[Candidate, str]:
    """Pick between month-first and day-first readings of the same shape.

    Decision order:
        1. An explicit locale in the hint.
        2. A first field above 12 cannot be a month: day-first.
        3. A second field above 12 cannot be a month: month-first.
        4. Strict hints refuse to guess when the two fields differ.
        5. The shape's preferred reading: month-first for slash and
           dash shapes, day-first for dot shapes.

    Args:
        candidates: Non-empty list of matches from one tier.
        hint: Detection options.

    Returns:
        The chosen candidate and a short reason for the choice.

    Raises:
        AmbiguousFormatError: In strict mode when nothing decides.
    """
    month_first = [c for c in candidates if c.spec.day_first is False]
    day_first = [c for c in candidates if c.spec.day_first is True]
    if not month_first or not day_first:
        return candidates[0], "single shape"

    if hint.locale is Locale.US:
        return month_first[0], "locale US"
    if hint.locale is Locale.EU:
        return day_first[0], "locale EU"

    # Read both fields through the month-first twin
    first: int = month_first[0].fields["month"]  # type: ignore[assignment]
    second: int = month_first[0].fields["day"]  # type: ignore[assignment]

    if first > _MAX_MONTH and second <= _MAX_MONTH:
        return day_first[0], f"first field {first} > {_MAX_MONTH}"
    if second > _MAX_MONTH and first <= _MAX_MONTH:
        return month_first[0], f"second field {second} > {_MAX_MONTH}"
    if hint.strict and first != second:
        raise AmbiguousFormatError(
            f"cannot tell day from month in {month_first[0].match.string!r}; "
            "pass a locale hint"
        )
    if day_first[0].spec.preferred:
        return day_first[0], "default day-first"
    return month_first[0], "default month-first"


__all__ = ["Candidate", "match_tier", "resolve_order"]
