"""Conversion specifier table.

Each two-character code maps to the CLDR (Unicode LDML) pattern field that
renders it, and to the granularity it represents. CLDR pattern syntax is
documented at https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table

The table is read-only process-wide data.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from date_expr.enums import Granularity

__all__ = [
    "CONVERSION_SPECS",
    "ConversionSpec",
    "extract_conversion_specs",
    "has_conversion_spec",
    "specifier_run_pattern",
]


@dataclass(frozen=True, slots=True)
class ConversionSpec:
    """A single %X conversion specifier.

    Attributes:
        code: The specifier, e.g. "%Y"
        pattern: CLDR pattern field substituted for the code
        description: Human-readable meaning of the rendered text
        granularity: Time unit represented (None for timezone specifiers)
        is_timezone: True if the specifier renders a UTC offset
    """

    code: str
    pattern: str
    description: str
    granularity: Granularity | None = None
    is_timezone: bool = False

    def __post_init__(self) -> None:
        """Validate ConversionSpec invariants.

        Raises:
            ValueError: If code is not "%" plus one character, or if the specifier
                has both (or neither) a granularity and the timezone flag.
        """
        if len(self.code) != 2 or not self.code.startswith("%"):
            msg = f"ConversionSpec.code must be '%' plus one character, got {self.code!r}"
            raise ValueError(msg)
        if (self.granularity is None) != self.is_timezone:
            msg = f"ConversionSpec {self.code} needs exactly one of granularity or is_timezone"
            raise ValueError(msg)


_SPECS: tuple[ConversionSpec, ...] = (
    ConversionSpec("%Y", "yyyy", "year in four digit format", Granularity.YEAR),
    ConversionSpec("%m", "MM", "month (01 to 12)", Granularity.MONTH),
    ConversionSpec("%d", "dd", "day (01 to 31)", Granularity.DAY),
    ConversionSpec("%p", "a", "AM or PM", Granularity.MERIDIAN),
    ConversionSpec("%H", "HH", "hour (00 to 23)", Granularity.HOUR),
    ConversionSpec("%h", "hh", "hour (01 to 12)", Granularity.HOUR),
    ConversionSpec("%M", "mm", "minute (00 to 59)", Granularity.MINUTE),
    ConversionSpec(
        "%S", "ss", "second (00 to 60, allowing for leap seconds)", Granularity.SECOND
    ),
    # No granularity: an offset is an artifact of rendering, not a time unit
    ConversionSpec(
        "%z",
        "Z",
        "+hhmm or -hhmm numeric timezone (hour and minute offset from UTC)",
        is_timezone=True,
    ),
)

CONVERSION_SPECS: MappingProxyType[str, ConversionSpec] = MappingProxyType(
    {spec.code: spec for spec in _SPECS}
)

_ANY_SPEC = "|".join(re.escape(code) for code in CONVERSION_SPECS)
_SPEC_RE = re.compile(_ANY_SPEC)
_SPEC_RUN_RE = re.compile(f"(?:{_ANY_SPEC})+")


def specifier_run_pattern() -> re.Pattern[str]:
    """Regex matching a maximal run of adjacent specifiers ("%H%M%z")."""
    return _SPEC_RUN_RE


def extract_conversion_specs(template: str) -> tuple[str, ...]:
    """Return every specifier occurrence in template, left to right.

    Example:
        >>> extract_conversion_specs("s3://b/%Y/%m/%H%M%z")
        ('%Y', '%m', '%H', '%M', '%z')
    """
    return tuple(_SPEC_RE.findall(template))


def has_conversion_spec(template: str, code: str) -> bool:
    """Check whether template contains the specifier code."""
    return code in extract_conversion_specs(template)
