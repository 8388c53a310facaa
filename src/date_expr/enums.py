"""Enumerations for date-expr type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Granularity(StrEnum):
    """Time unit represented by a conversion specifier.

    Members are declared coarsest to finest; that declaration order is the
    total order used to pick the finest granularity of a template.

    StrEnum provides automatic string conversion: str(Granularity.DAY) == "day"
    """

    YEAR = "year"
    """%Y"""

    MONTH = "month"
    """%m"""

    DAY = "day"
    """%d"""

    MERIDIAN = "meridian"
    """%p - a change of AM/PM, always 12 hours in a fixed-offset frame"""

    HOUR = "hour"
    """%H, %h"""

    MINUTE = "minute"
    """%M"""

    SECOND = "second"
    """%S"""

    @property
    def rank(self) -> int:
        """Position in the coarsest-to-finest order (YEAR == 0)."""
        return GRANULARITY_ORDER.index(self)


GRANULARITY_ORDER: tuple[Granularity, ...] = tuple(Granularity)


__all__ = [
    "GRANULARITY_ORDER",
    "Granularity",
]
