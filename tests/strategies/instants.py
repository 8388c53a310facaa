"""Hypothesis strategies for instants.

Events emitted:
- instant_kind={int|epoch_time|datetime}: Representation drawn by any_instants
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from hypothesis import event
from hypothesis import strategies as st

from date_expr import EpochTime

# 1970-01-01 .. 2099-12-31
_MAX_SECONDS = 4102444799

epoch_seconds = st.integers(min_value=0, max_value=_MAX_SECONDS)

utc_datetimes = epoch_seconds.map(
    lambda s: datetime(1970, 1, 1, tzinfo=UTC) + timedelta(seconds=s)
)


@st.composite
def any_instants(draw: st.DrawFn) -> tuple[int, int | EpochTime | datetime]:
    """Draw (seconds, instant) where instant is one representation of seconds."""
    seconds = draw(epoch_seconds)
    kind = draw(st.sampled_from(["int", "epoch_time", "datetime"]))
    event(f"instant_kind={kind}")
    match kind:
        case "int":
            return seconds, seconds
        case "epoch_time":
            return seconds, EpochTime(seconds)
        case _:
            return seconds, datetime(1970, 1, 1, tzinfo=UTC) + timedelta(seconds=seconds)
