"""Detection options for the format classifier.

Internal module - import Locale and DetectionHint from datesense.infer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Locale(Enum):
    """Field order used to read ambiguous slash/dash dates.

    Values:
        US: Month first ("01/02/2024" is January 2nd)
        EU: Day first ("01/02/2024" is February 1st)
        AUTO: Decide from the field values, falling back to US
    """

    US = "US"
    EU = "EU"
    AUTO = "AUTO"

    @classmethod
    def lookup(cls, value: Locale | str) -> Locale:
        """Return the Locale named by value (case-insensitive).

        Raises:
            ValueError: If value names no locale.
        """
        if isinstance(value, Locale):
            return value
        if not isinstance(value, str):
            raise TypeError(f"locale must be a Locale or str, got {type(value).__name__}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(
                f"unknown locale: {value!r}. Use 'US', 'EU' or 'auto'"
            ) from None


@dataclass(frozen=True)
class DetectionHint:
    """Configuration for format detection.

    Attributes:
        locale: Field order for ambiguous separated dates.
        strict: If True, refuse to guess when neither the locale nor the
            field values decide between day-first and month-first, and
            raise AmbiguousFormatError instead of defaulting to US.

    Examples:
        >>> DetectionHint(locale=Locale.EU)
        DetectionHint(locale=<Locale.EU: 'EU'>, strict=False)

        >>> DetectionHint.coerce("eu").locale
        <Locale.EU: 'EU'>

        >>> DetectionHint.coerce({"locale": "US", "strict": True}).strict
        True
    """

    locale: Locale = Locale.AUTO
    strict: bool = False

    @classmethod
    def coerce(cls, value: HintLike) -> DetectionHint:
        """Build a DetectionHint from the loose forms callers pass.

        Accepts None, a DetectionHint, a Locale, a locale name, or a
        mapping with optional ``locale`` and ``strict`` keys.

        Raises:
            ValueError: If a locale name is unknown.
            TypeError: If value has an unsupported type.
        """
        if value is None:
            return _DEFAULT_HINT
        if isinstance(value, DetectionHint):
            return value
        if isinstance(value, (Locale, str)):
            return cls(locale=Locale.lookup(value))
        if isinstance(value, Mapping):
            return cls(
                locale=Locale.lookup(value.get("locale", Locale.AUTO)),
                strict=bool(value.get("strict", False)),
            )
        raise TypeError(
            f"hint must be a DetectionHint, Locale, str or mapping, "
            f"got {type(value).__name__}"
        )


_DEFAULT_HINT = DetectionHint()

# Type alias for the hint forms detect() and the parser accept
HintLike = Union[DetectionHint, Locale, str, Mapping[str, Any], None]


__all__ = ["DetectionHint", "HintLike", "Locale"]
