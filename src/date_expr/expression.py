"""Date expressions: templates bound to a timezone.

A DateExpr is a date-dependent string such as
"s3://bucket/logs/%Y/%m/%d/%H". It renders instants into concrete strings
and parses rendered strings back into (approximate) instants.

Why only approximate? Rendering may lose precision. Rendering
2014-08-13T02:00Z with a day-granularity template loses "at 2 a.m.", so:

    expr.render(expr.parse(formatted)) == formatted   # always
    expr.parse(expr.render(instant)) == instant       # only on a boundary

Fields render in the expression's timezone (UTC unless specified).
Instants are absolute; the timezone is only a rendering concern.

Thread Safety:
    DateExpr is immutable and may be shared freely between threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, tzinfo

from dateutil.relativedelta import relativedelta

from date_expr.constants import DEFAULT_LOCALE
from date_expr.core import (
    Instant,
    TimezoneSpec,
    offset_timezone,
    parse_timezone,
    to_datetime,
    to_seconds_since_epoch,
)
from date_expr.diagnostics import (
    LOG_FORMATTER,
    ErrorTemplate,
    NoTimezoneInTemplateError,
    UnparseableInputError,
)
from date_expr.enums import Granularity
from date_expr.formatting import format_datetime
from date_expr.patterns import (
    CONVERSION_SPECS,
    StrptimePattern,
    cldr_to_strptime,
    extract_conversion_specs,
    resolve_step,
    translate_pattern,
)

__all__ = [
    "DateExpr",
    "extract_timezone",
    "has_timezone",
    "make_date_expr",
]

logger = logging.getLogger(__name__)

# Leap second included
_MAX_SECOND = 60
_SECONDS_PER_DAY = 86400


def has_timezone(template: str) -> bool:
    """Check whether template contains a timezone specifier (%z).

    Example:
        >>> has_timezone("s3://bucket/%H.%M%z/foo")
        True
        >>> has_timezone("s3://bucket/%H.%M%Z/foo")
        False
    """
    return any(CONVERSION_SPECS[code].is_timezone for code in extract_conversion_specs(template))


def _strptime(template: str, value: str) -> time.struct_time:
    """Match value against template, raising UnparseableInputError on mismatch."""
    if not isinstance(value, str):
        reason = f"Expected string, got {type(value).__name__}"  # type: ignore[unreachable]
        diagnostic = ErrorTemplate.unparseable_input(str(value), template, reason)
        raise UnparseableInputError(diagnostic, input_value=str(value), template=template)

    strptime_pattern: StrptimePattern = cldr_to_strptime(translate_pattern(template))
    try:
        parsed = time.strptime(strptime_pattern.preprocess(value), strptime_pattern.directive())
    except ValueError as e:
        diagnostic = ErrorTemplate.unparseable_input(value, template, str(e))
        raise UnparseableInputError(diagnostic, input_value=value, template=template) from e

    # strptime accepts %S up to 61 and any two-digit %z hour
    if parsed.tm_sec > _MAX_SECOND:
        reason = f"second {parsed.tm_sec} out of range 00-{_MAX_SECOND}"
    elif parsed.tm_gmtoff is not None and abs(parsed.tm_gmtoff) >= _SECONDS_PER_DAY:
        reason = "UTC offset must be less than 24 hours"
    else:
        return parsed
    diagnostic = ErrorTemplate.unparseable_input(value, template, reason)
    raise UnparseableInputError(diagnostic, input_value=value, template=template)


def _struct_to_seconds(parsed: time.struct_time, tz: tzinfo) -> int:
    """Convert parsed fields to epoch seconds.

    An offset parsed from the text (%z) takes precedence over tz. Seconds
    are added after construction so that a leap second (:60) rolls over
    into the following minute instead of failing.
    """
    if parsed.tm_gmtoff is not None:
        tz = offset_timezone(timedelta(seconds=parsed.tm_gmtoff))
    wall = datetime(
        parsed.tm_year,
        parsed.tm_mon,
        parsed.tm_mday,
        parsed.tm_hour,
        parsed.tm_min,
        tzinfo=tz,
    )
    return to_seconds_since_epoch(wall) + parsed.tm_sec


@dataclass(frozen=True, slots=True)
class DateExpr:
    """A template string bound to a rendering timezone.

    Attributes:
        template: Percent-escaped template, e.g. "logs/%Y/%m/%d"
        tz: Rendering timezone; any TimezoneSpec is resolved on construction
        locale_code: CLDR locale for day-period names

    Example:
        >>> expr = DateExpr("s3://bucket/foo/%Y/%m/%d/bar/%H.%M/file-A")
        >>> expr.render(1407949842)
        's3://bucket/foo/2014/08/13/bar/17.10/file-A'
        >>> expr.parse("s3://bucket/foo/2014/08/13/bar/17.10/file-A")
        1407949800
    """

    template: str
    tz: tzinfo = UTC
    locale_code: str = field(default=DEFAULT_LOCALE, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.template, str):
            msg = f"DateExpr.template must be str, got {type(self.template).__name__}"
            raise TypeError(msg)
        if not isinstance(self.tz, tzinfo):
            object.__setattr__(self, "tz", parse_timezone(self.tz))

    @property
    def timezone(self) -> tzinfo:
        """The timezone this expression renders in."""
        return self.tz

    @property
    def pattern(self) -> str:
        """The CLDR pattern the template translates to."""
        return translate_pattern(self.template)

    def render(self, instant: Instant) -> str:
        """Render the template for instant.

        Args:
            instant: int seconds since the epoch, EpochTime or datetime

        Returns:
            The formatted string

        Raises:
            UnknownInstantTypeError: If instant is not an accepted type
        """
        return format_datetime(to_datetime(instant), self.pattern, self.tz, self.locale_code)

    def parse(self, formatted: str) -> int:
        """Recover the approximate instant a string was rendered from.

        Fields finer than the template's granularity are lost in rendering
        and come back as their minimum (day 1, 00:00:00, ...).

        Args:
            formatted: Text previously rendered by this template

        Returns:
            Seconds since the epoch

        Raises:
            UnparseableInputError: If formatted does not match the template
        """
        return _struct_to_seconds(_strptime(self.template, formatted), self.tz)

    def has_timezone(self) -> bool:
        """Check whether the template renders a UTC offset."""
        return has_timezone(self.template)

    def granularity(self) -> Granularity:
        """Finest granularity of the template.

        Raises:
            NoGranularityError: If the template has no time field
        """
        granularity, _ = resolve_step(self.template)
        return granularity

    def step(self) -> relativedelta:
        """Period between consecutive distinct renderings."""
        _, period = resolve_step(self.template)
        return period


def make_date_expr(template: str, tz: TimezoneSpec = None) -> DateExpr:
    """Create a DateExpr, resolving the timezone specifier.

    Args:
        template: Percent-escaped template
        tz: None (UTC), a tzinfo, a region id like "America/Los_Angeles",
            or an offset like "-0800"

    Returns:
        The DateExpr

    Raises:
        InvalidTimezoneError: If tz is not a recognized specifier
    """
    return DateExpr(template, parse_timezone(tz))


def extract_timezone(template: str, formatted: str) -> tzinfo:
    """Return the UTC offset encoded in a rendered string.

    The offset is read literally from the text; it is not normalized to
    the timezone of any particular DateExpr.

    Args:
        template: Template containing %z
        formatted: Text rendered by that template

    Returns:
        datetime.UTC for a zero offset, else a fixed-offset timezone

    Raises:
        NoTimezoneInTemplateError: If template has no timezone specifier
        UnparseableInputError: If formatted does not match the template

    Example:
        >>> extract_timezone("s3://bucket/%H.%M%z", "s3://bucket/10.43-0700")
        datetime.timezone(datetime.timedelta(days=-1, seconds=61200))
    """
    if not has_timezone(template):
        diagnostic = ErrorTemplate.no_timezone_in_template(template, formatted)
        logger.error("%s", LOG_FORMATTER.format(diagnostic))
        raise NoTimezoneInTemplateError(diagnostic)

    parsed = _strptime(template, formatted)
    return offset_timezone(timedelta(seconds=parsed.tm_gmtoff or 0))
