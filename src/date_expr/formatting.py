"""Rendering of instants through Babel CLDR patterns.

Python 3.13+.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from babel import dates as babel_dates

from date_expr.constants import DEFAULT_LOCALE
from date_expr.locale_utils import get_babel_locale

__all__ = [
    "format_datetime",
    "format_utc_offset",
]

_ONE_MINUTE = timedelta(minutes=1)


def format_utc_offset(offset: timedelta | None) -> str:
    """Render an offset as "+hhmm" / "-hhmm".

    Example:
        >>> format_utc_offset(-timedelta(hours=8, minutes=1))
        '-0801'
    """
    total_minutes = (offset or timedelta(0)) // _ONE_MINUTE
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


class _DateTimeFormat(babel_dates.DateTimeFormat):
    """Babel field formatter with sign-first RFC 822 offsets for "Z".

    The hours and minutes of a negative offset are both taken from its
    absolute value, so -08:01 renders "-0801".
    """

    def format_timezone(self, char: str, num: int) -> str:
        if char == "Z" and num < 4:
            return format_utc_offset(self.value.utcoffset())
        return super().format_timezone(char, num)


def format_datetime(
    value: datetime,
    cldr_pattern: str,
    tz: tzinfo = UTC,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Render value with a CLDR pattern in timezone tz.

    Args:
        value: Timezone-aware datetime
        cldr_pattern: CLDR date pattern (see translate_pattern())
        tz: Timezone the fields are rendered in
        locale_code: Locale for day-period names

    Returns:
        Rendered text
    """
    localized = value.astimezone(tz)
    pattern = babel_dates.parse_pattern(cldr_pattern)
    return pattern % _DateTimeFormat(localized, get_babel_locale(locale_code))
