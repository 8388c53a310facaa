"""Timezone specifier resolution.

A date-expression's timezone may be given as:
    - None                         -> UTC
    - a datetime.tzinfo            -> used as-is
    - a region id "Area/City"      -> zoneinfo.ZoneInfo
    - a fixed offset "+hhmm"/"-hhmm" -> datetime.timezone

Specifiers are resolved once, at DateExpr construction, into a single
tzinfo. Zero offsets are normalized to datetime.UTC so that "+0000",
None and UTC compare equal and render identically.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from date_expr.constants import FIXED_OFFSET_PATTERN, REGION_ID_PATTERN
from date_expr.diagnostics import LOG_FORMATTER, ErrorTemplate, InvalidTimezoneError

__all__ = [
    "TimezoneSpec",
    "offset_timezone",
    "parse_timezone",
]

logger = logging.getLogger(__name__)

type TimezoneSpec = tzinfo | str | None

_FIXED_OFFSET_RE = re.compile(FIXED_OFFSET_PATTERN)
_REGION_ID_RE = re.compile(REGION_ID_PATTERN)


def offset_timezone(offset: timedelta) -> tzinfo:
    """Return the fixed-offset tzinfo for offset, or UTC for a zero offset."""
    if not offset:
        return UTC
    return timezone(offset)


def _invalid(spec: object, reason: str | None = None) -> InvalidTimezoneError:
    diagnostic = ErrorTemplate.invalid_timezone(spec, reason)
    logger.error("%s", LOG_FORMATTER.format(diagnostic))
    return InvalidTimezoneError(diagnostic)


def _parse_fixed_offset(spec: str, match: re.Match[str]) -> tzinfo:
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise _invalid(spec, "offset out of range")
    offset = timedelta(hours=int(hours), minutes=int(minutes))
    return offset_timezone(-offset if sign == "-" else offset)


def _parse_region(spec: str) -> tzinfo:
    try:
        return ZoneInfo(spec)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise _invalid(spec, "unknown region") from e


def parse_timezone(spec: TimezoneSpec) -> tzinfo:
    """Resolve a timezone specifier to a tzinfo.

    Args:
        spec: None, a tzinfo, a region id or a "+hhmm"/"-hhmm" offset

    Returns:
        The resolved tzinfo

    Raises:
        InvalidTimezoneError: If spec has none of the accepted shapes or
            names an unknown region

    Example:
        >>> parse_timezone("-0800")
        datetime.timezone(datetime.timedelta(days=-1, seconds=57600))
        >>> parse_timezone(None) is UTC
        True
    """
    match spec:
        case None:
            logger.debug("No timezone specified. Using UTC")
            return UTC
        case tzinfo():
            return spec
        case str() if offset := _FIXED_OFFSET_RE.fullmatch(spec):
            return _parse_fixed_offset(spec, offset)
        case str() if _REGION_ID_RE.fullmatch(spec):
            return _parse_region(spec)
        case _:
            raise _invalid(spec)
