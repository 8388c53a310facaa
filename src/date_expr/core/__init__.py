"""Core utilities shared across the patterns and expression layers.

Exports:
    EpochTime: Wrapped seconds-since-epoch value type
    Instant: Type alias for the accepted instant representations
    to_datetime / to_epoch_time / to_seconds_since_epoch: Instant coercion
    epoch_time_now: Current instant as EpochTime
    parse_timezone: Timezone specifier resolution

Python 3.13+.
"""

from .instants import (
    EPOCH,
    EpochTime,
    Instant,
    epoch_time_now,
    to_datetime,
    to_epoch_time,
    to_seconds_since_epoch,
)
from .timezones import TimezoneSpec, offset_timezone, parse_timezone

__all__ = [
    "EPOCH",
    "EpochTime",
    "Instant",
    "TimezoneSpec",
    "epoch_time_now",
    "offset_timezone",
    "parse_timezone",
    "to_datetime",
    "to_epoch_time",
    "to_seconds_since_epoch",
]
