"""Ranges of rendered date expressions.

formatted_date_range() walks from a start to an end instant at the
template's granularity and renders each step:

    >>> expr = make_date_expr("s3://bucket/foo/%Y")
    >>> list(formatted_date_range(1344877842, 1407949842, expr))
    ['s3://bucket/foo/2012', 's3://bucket/foo/2013', 's3://bucket/foo/2014']

Bounds may be instants of any accepted type, or strings previously
rendered by the expression (which are parsed first). The bounds and the
expression may each use a different timezone: instants are absolute, and
the range is always rendered in the expression's timezone.

Both bounds are floored to whole seconds before stepping. Without this,
a start of 04:00:00.556 and an end of 04:01:00.000 with a minute step
would yield only 04:00; floored, it yields 04:00 and 04:01.

Thread-safe. Results are immutable and restartable.

Python 3.13+.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from dateutil.relativedelta import relativedelta

from date_expr.core import Instant, to_datetime, to_seconds_since_epoch
from date_expr.enums import Granularity
from date_expr.expression import DateExpr
from date_expr.patterns import GRANULARITY_PERIODS, resolve_step

__all__ = [
    "Bound",
    "FormattedDateRange",
    "date_range",
    "day_range",
    "formatted_date_range",
    "hour_range",
    "minute_range",
    "month_range",
    "second_range",
    "week_range",
    "year_range",
]

logger = logging.getLogger(__name__)

type Bound = Instant | str
type Step = relativedelta | Granularity


def date_range(
    start: Instant,
    step: relativedelta,
    end: Instant | None = None,
) -> Iterator[datetime]:
    """Yield UTC datetimes start, start + step, start + 2*step, ...

    Each element is computed from start rather than from its predecessor,
    so month steps from Jan 31 give Feb 28 (or 29), Mar 31, Apr 30, ...

    Args:
        start: First instant
        step: Positive calendar period
        end: Inclusive upper bound; None for an infinite sequence

    The sequence also ends before the first instant past datetime.max.

    Raises:
        ValueError: If step does not move forward in time
    """
    origin = to_datetime(start)
    if origin + step <= origin:
        msg = f"date_range step must be positive, got {step!r}"
        raise ValueError(msg)
    limit = None if end is None else to_datetime(end)
    return _walk(origin, step, limit)


def _walk(origin: datetime, step: relativedelta, limit: datetime | None) -> Iterator[datetime]:
    for n in itertools.count():
        try:
            current = origin + step * n
        except (OverflowError, ValueError):
            # Past datetime.max, hence past any limit
            return
        if limit is not None and current > limit:
            return
        yield current


@dataclass(frozen=True, slots=True)
class FormattedDateRange:
    """Finite, restartable sequence of rendered strings.

    Every iteration walks the range afresh; nothing is cached.

    Attributes:
        expr: Expression used for rendering
        start: First instant (UTC, whole second)
        end: Inclusive last instant (UTC, whole second)
        step: Period between instants
    """

    expr: DateExpr
    start: datetime
    end: datetime
    step: relativedelta

    def instants(self) -> Iterator[datetime]:
        """Iterate the underlying instants."""
        return date_range(self.start, self.step, self.end)

    def __iter__(self) -> Iterator[str]:
        return map(self.expr.render, self.instants())

    def __len__(self) -> int:
        return sum(1 for _ in self.instants())

    def to_tuple(self) -> tuple[str, ...]:
        """Materialize the rendered strings."""
        return tuple(self)


def _bound_seconds(bound: Bound, expr: DateExpr) -> int:
    if isinstance(bound, str):
        return expr.parse(bound)
    return to_seconds_since_epoch(bound)


def _step_period(step: Step) -> relativedelta:
    if isinstance(step, Granularity):
        return GRANULARITY_PERIODS[step]
    return step


def formatted_date_range(
    start: Bound,
    end: Bound,
    expr: DateExpr,
    *,
    step: Step | None = None,
) -> FormattedDateRange:
    """Render expr at every step from start to end inclusive.

    Args:
        start: Instant, or string rendered by expr
        end: Instant, or string rendered by expr
        expr: The date expression
        step: Explicit period or Granularity; inferred from the template's
            finest specifier when None

    Returns:
        FormattedDateRange (empty when start is after end)

    Raises:
        UnknownInstantTypeError: If a bound is not an instant or string
        UnparseableInputError: If a string bound does not match expr
        NoGranularityError: If step is None and the template has no time field
    """
    start_seconds = _bound_seconds(start, expr)
    end_seconds = _bound_seconds(end, expr)

    if step is None:
        granularity, period = resolve_step(expr.template)
        logger.debug("Template '%s' steps by %s", expr.template, granularity)
    else:
        period = _step_period(step)

    return FormattedDateRange(
        expr=expr,
        start=to_datetime(start_seconds),
        end=to_datetime(end_seconds),
        step=period,
    )


def year_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(years=1))


def month_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(months=1))


def week_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(weeks=1))


def day_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(days=1))


def hour_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(hours=1))


def minute_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(minutes=1))


def second_range(start: Bound, end: Bound, expr: DateExpr) -> FormattedDateRange:
    return formatted_date_range(start, end, expr, step=relativedelta(seconds=1))
