"""Time scales, exact time arithmetic and UTC.

Typical usage::

    from orientax.time import Time, TimeScale, Utc
    utc = Utc.from_iso("2024-07-05T09:09:18.173Z")
    tdb = utc.to_time().try_to_scale(TimeScale.TDB)
"""

from orientax.time._calendar import Date, TimeOfDay, is_leap_year
from orientax.time._deltas import Subsecond, TimeDelta, TimeDeltaRange
from orientax.time._leap_seconds import (
    BuiltinLeapSeconds,
    LeapSecondsKernel,
    LeapSecondsProvider,
)
from orientax.time._offsets import DefaultOffsetProvider, OffsetProvider
from orientax.time._scales import TimeScale
from orientax.time._time import Epoch, Time
from orientax.time._utc import Utc, UtcBuilder, tai_to_utc, utc_to_tai

__all__ = [
    "BuiltinLeapSeconds",
    "Date",
    "DefaultOffsetProvider",
    "Epoch",
    "LeapSecondsKernel",
    "LeapSecondsProvider",
    "OffsetProvider",
    "Subsecond",
    "Time",
    "TimeDelta",
    "TimeDeltaRange",
    "TimeOfDay",
    "TimeScale",
    "Utc",
    "UtcBuilder",
    "is_leap_year",
    "tai_to_utc",
    "utc_to_tai",
]
