"""Tests for core/instants.py: coercion between instant representations.

Python 3.13+.
"""

import time
from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from date_expr import (
    EpochTime,
    UnknownInstantTypeError,
    epoch_time_now,
    to_datetime,
    to_epoch_time,
    to_seconds_since_epoch,
)
from date_expr.core import EPOCH
from date_expr.diagnostics import DiagnosticCode

TS = 1407949842
TS_DATETIME = datetime(2014, 8, 13, 17, 10, 42, tzinfo=UTC)


class TestCoercion:
    """Coercion functions produce the expected values."""

    def test_to_datetime(self):
        """Seconds become an aware UTC datetime."""
        assert to_datetime(TS) == TS_DATETIME
        assert to_datetime(TS).tzinfo is UTC

    def test_to_epoch_time(self):
        """Seconds are wrapped in EpochTime."""
        assert to_epoch_time(TS) == EpochTime(1407949842)

    def test_to_seconds_since_epoch(self):
        """int is already seconds."""
        assert to_seconds_since_epoch(TS) == TS

    def test_epoch(self):
        """EPOCH is the Unix epoch in UTC."""
        assert to_seconds_since_epoch(EPOCH) == 0


class TestCoercionCommutes:
    """Any chain of coercions preserves the instant."""

    @pytest.mark.parametrize(
        "start",
        [TS, EpochTime(TS), TS_DATETIME],
        ids=["int", "epoch_time", "datetime"],
    )
    @pytest.mark.parametrize(
        "via",
        [to_datetime, to_epoch_time, to_seconds_since_epoch],
        ids=["datetime", "epoch_time", "seconds"],
    )
    def test_round_trip_through_any_representation(self, start, via):
        """Coercing through another representation first changes nothing."""
        intermediate = via(start)

        assert to_datetime(intermediate) == TS_DATETIME
        assert to_epoch_time(intermediate) == EpochTime(TS)
        assert to_seconds_since_epoch(intermediate) == TS

    def test_to_epoch_time_returns_same_object(self):
        """An EpochTime is returned as-is."""
        et = EpochTime(TS)
        assert to_epoch_time(et) is et


class TestDatetimeNormalization:
    """datetime inputs are normalized to whole UTC seconds."""

    def test_naive_datetime_is_utc(self):
        """Naive datetimes are taken to be UTC."""
        assert to_seconds_since_epoch(datetime(2014, 8, 13, 17, 10, 42)) == TS

    def test_other_timezone(self):
        """Aware datetimes in other zones denote the same instant."""
        pdt = timezone(timedelta(hours=-7))
        assert to_seconds_since_epoch(datetime(2014, 8, 13, 10, 10, 42, tzinfo=pdt)) == TS

    def test_microseconds_are_floored(self):
        """Sub-second precision is dropped toward the earlier second."""
        value = TS_DATETIME.replace(microsecond=999_999)

        assert to_seconds_since_epoch(value) == TS
        assert to_datetime(value) == TS_DATETIME

    def test_pre_epoch_microseconds_floor_down(self):
        """Floor, not truncation, before the epoch."""
        value = EPOCH - timedelta(microseconds=1)
        assert to_seconds_since_epoch(value) == -1


class TestUnknownInstantType:
    """Unrecognized values raise UnknownInstantTypeError."""

    @pytest.mark.parametrize(
        "value",
        [None, "1407949842", 1407949842.0, Decimal(1), True, [TS]],
        ids=["none", "str", "float", "decimal", "bool", "list"],
    )
    def test_rejected(self, value):
        """Only int, EpochTime and datetime are instants."""
        with pytest.raises(UnknownInstantTypeError) as exc_info:
            to_seconds_since_epoch(value)

        assert exc_info.value.value is value
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNKNOWN_INSTANT_TYPE

    def test_to_datetime_rejects(self):
        """to_datetime() validates the same way."""
        with pytest.raises(UnknownInstantTypeError, match="to an instant"):
            to_datetime("yesterday")


class TestEpochTimeNow:
    """Test epoch_time_now()."""

    def test_is_current(self):
        """The result lies between two surrounding clock readings."""
        before = int(time.time())
        now = epoch_time_now()
        after = int(time.time())

        assert isinstance(now, EpochTime)
        assert before <= now.seconds <= after
