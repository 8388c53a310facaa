"""Coercion between the three accepted instant representations.

An instant may arrive as:
    (1) int, the number of whole seconds since the Unix epoch
    (2) EpochTime, a wrapped seconds value defined here
    (3) datetime.datetime (naive values are taken to be UTC)

Precision is one second. Sub-second parts of a datetime are floored, so
12:00:00.999 and 12:00:00.000 are the same instant.

Python 3.13+.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from date_expr.diagnostics import ErrorTemplate, UnknownInstantTypeError

__all__ = [
    "EPOCH",
    "EpochTime",
    "Instant",
    "epoch_time_now",
    "to_datetime",
    "to_epoch_time",
    "to_seconds_since_epoch",
]

EPOCH: datetime = datetime(1970, 1, 1, tzinfo=UTC)

_ONE_SECOND = timedelta(seconds=1)


@dataclass(frozen=True, slots=True)
class EpochTime:
    """Whole seconds since the Unix epoch.

    Attributes:
        seconds: Seconds since 1970-01-01T00:00:00Z
    """

    seconds: int


type Instant = int | EpochTime | datetime


def _reject(value: object) -> UnknownInstantTypeError:
    return UnknownInstantTypeError(ErrorTemplate.unknown_instant_type(value), value=value)


def _datetime_to_seconds(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    # Floor division rounds pre-epoch sub-second values toward the earlier second
    return (value - EPOCH) // _ONE_SECOND


def to_seconds_since_epoch(instant: Instant) -> int:
    """Normalize an instant to integer seconds since the epoch.

    Args:
        instant: int seconds, EpochTime or datetime

    Returns:
        Seconds since the epoch

    Raises:
        UnknownInstantTypeError: If instant is none of the accepted types

    Example:
        >>> to_seconds_since_epoch(datetime(2014, 8, 13, 17, 10, 42, tzinfo=UTC))
        1407949842
    """
    match instant:
        case bool():
            raise _reject(instant)
        case int():
            return instant
        case EpochTime(seconds=seconds):
            return seconds
        case datetime():
            return _datetime_to_seconds(instant)
        case _:
            raise _reject(instant)


def to_epoch_time(instant: Instant) -> EpochTime:
    """Normalize an instant to an EpochTime."""
    if isinstance(instant, EpochTime):
        return instant
    return EpochTime(to_seconds_since_epoch(instant))


def to_datetime(instant: Instant) -> datetime:
    """Normalize an instant to a timezone-aware UTC datetime.

    The result is always on a whole second, including when a datetime
    with microseconds or another timezone is passed in.
    """
    return EPOCH + timedelta(seconds=to_seconds_since_epoch(instant))


def epoch_time_now() -> EpochTime:
    """Return the current instant, floored to the second."""
    return EpochTime(int(time.time()))
