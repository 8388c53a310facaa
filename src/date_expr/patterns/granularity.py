"""Granularity inference for templates.

The granularity of a template is the finest time unit among its
specifiers. It fixes the step used when walking a time span, so that
consecutive rendered strings differ by exactly one unit of their finest
field.

Timezone specifiers carry no granularity and are ignored here.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from dateutil.relativedelta import relativedelta

from date_expr.diagnostics import ErrorTemplate, NoGranularityError
from date_expr.enums import Granularity

from .specs import CONVERSION_SPECS, extract_conversion_specs

__all__ = [
    "GRANULARITY_PERIODS",
    "compute_granularity",
    "finest_granularity",
    "resolve_step",
    "template_granularities",
]

# A change of meridian is 11, 12 or 13 hours across a DST switch in a
# regional zone, but steps are taken in UTC, where it is always 12 hours.
GRANULARITY_PERIODS: MappingProxyType[Granularity, relativedelta] = MappingProxyType(
    {
        Granularity.YEAR: relativedelta(years=1),
        Granularity.MONTH: relativedelta(months=1),
        Granularity.DAY: relativedelta(days=1),
        Granularity.MERIDIAN: relativedelta(hours=12),
        Granularity.HOUR: relativedelta(hours=1),
        Granularity.MINUTE: relativedelta(minutes=1),
        Granularity.SECOND: relativedelta(seconds=1),
    }
)


def template_granularities(template: str) -> tuple[Granularity, ...]:
    """Granularity of every time-bearing specifier in template, in order."""
    granularities: list[Granularity] = []
    for code in extract_conversion_specs(template):
        granularity = CONVERSION_SPECS[code].granularity
        if granularity is not None:
            granularities.append(granularity)
    return tuple(granularities)


def finest_granularity(granularities: Iterable[Granularity]) -> Granularity | None:
    """Return the finest granularity, or None for an empty iterable."""
    return max(granularities, key=lambda g: g.rank, default=None)


def compute_granularity(template: str) -> Granularity:
    """Return the finest granularity present in template.

    Args:
        template: Percent-escaped template

    Returns:
        The finest Granularity among the template's specifiers

    Raises:
        NoGranularityError: If template has no time-bearing specifier

    Example:
        >>> compute_granularity("s3://bucket/%Y/%m")
        <Granularity.MONTH: 'month'>
        >>> compute_granularity("%H.%M%z")
        <Granularity.MINUTE: 'minute'>
    """
    granularity = finest_granularity(template_granularities(template))
    if granularity is None:
        raise NoGranularityError(ErrorTemplate.no_granularity(template))
    return granularity


def resolve_step(template: str) -> tuple[Granularity, relativedelta]:
    """Return the finest granularity of template and its step period."""
    granularity = compute_granularity(template)
    return granularity, GRANULARITY_PERIODS[granularity]
