"""Tests for core/timezones.py: timezone specifier resolution.

Python 3.13+.
"""

import logging
from datetime import UTC, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from date_expr import InvalidTimezoneError
from date_expr.core import offset_timezone, parse_timezone
from date_expr.diagnostics import DiagnosticCode


class TestParseTimezone:
    """Accepted specifier shapes."""

    def test_none_is_utc(self):
        """None resolves to UTC."""
        assert parse_timezone(None) is UTC

    def test_none_logs_default(self, caplog: pytest.LogCaptureFixture):
        """Falling back to UTC is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="date_expr.core.timezones"):
            parse_timezone(None)

        assert "Using UTC" in caplog.text

    def test_tzinfo_passes_through(self):
        """A tzinfo object is used as-is."""
        tz = timezone(timedelta(hours=3))
        assert parse_timezone(tz) is tz

    def test_region_id(self):
        """Area/City names resolve through zoneinfo."""
        assert parse_timezone("America/Los_Angeles") == ZoneInfo("America/Los_Angeles")

    @pytest.mark.parametrize(
        ("spec", "offset"),
        [
            ("-0800", -timedelta(hours=8)),
            ("+0530", timedelta(hours=5, minutes=30)),
            ("-0801", -timedelta(hours=8, minutes=1)),
            ("+2359", timedelta(hours=23, minutes=59)),
        ],
    )
    def test_fixed_offset(self, spec: str, offset: timedelta):
        """+hhmm / -hhmm resolve to fixed offsets."""
        assert parse_timezone(spec) == timezone(offset)

    @pytest.mark.parametrize("spec", ["+0000", "-0000"])
    def test_zero_offset_is_utc(self, spec: str):
        """Zero offsets normalize to UTC."""
        assert parse_timezone(spec) is UTC


class TestInvalidTimezone:
    """Unrecognized specifiers raise InvalidTimezoneError."""

    @pytest.mark.parametrize(
        "spec",
        ["-080", "-08000", "0800", "-08:00", "PST", "", "+2400", "+0060", 8],
    )
    def test_malformed(self, spec):
        """Malformed shapes are rejected."""
        with pytest.raises(InvalidTimezoneError) as exc_info:
            parse_timezone(spec)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_TIMEZONE

    def test_unknown_region(self):
        """A well-formed but unknown region is rejected."""
        with pytest.raises(InvalidTimezoneError, match="unknown region"):
            parse_timezone("Mars/Olympus_Mons")

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture):
        """Rejections are logged at ERROR."""
        with (
            caplog.at_level(logging.ERROR, logger="date_expr.core.timezones"),
            pytest.raises(InvalidTimezoneError),
        ):
            parse_timezone("-080")

        assert "INVALID_TIMEZONE: Unrecognized timezone specified" in caplog.text


class TestOffsetTimezone:
    """Test offset_timezone()."""

    def test_zero_is_utc(self):
        """A zero offset is UTC itself."""
        assert offset_timezone(timedelta(0)) is UTC

    def test_nonzero(self):
        """Other offsets become fixed-offset zones."""
        assert offset_timezone(timedelta(hours=-7)) == timezone(timedelta(hours=-7))
