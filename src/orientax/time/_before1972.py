"""TAI-UTC between 1960 and 1972.

Before 1972 UTC was steered to UT1 by rate changes as well as steps, so
TAI - UTC is a piecewise linear function of the UTC Modified Julian Date.

References:

    1. IERS Bulletin C, historical table of TAI-UTC.
"""

from __future__ import annotations

from bisect import bisect_right

from orientax.constants import SECONDS_PER_DAY
from orientax.errors import UtcUndefinedError
from orientax.time._deltas import TimeDelta

EPOCHS: tuple[int, ...] = (
    36934, 37300, 37512, 37665, 38334, 38395, 38486,
    38639, 38761, 38820, 38942, 39004, 39126, 39887,
)
"""MJD (UTC) at which each piece starts."""

OFFSETS: tuple[float, ...] = (
    1.417818, 1.422818, 1.372818, 1.845858, 1.945858, 3.240130, 3.340130,
    3.440130, 3.540130, 3.640130, 3.740130, 3.840130, 4.313170, 4.213170,
)
"""Constant part of TAI - UTC for each piece [s]."""

DRIFT_EPOCHS: tuple[int, ...] = (
    37300, 37300, 37300, 37665, 37665, 38761, 38761,
    38761, 38761, 38761, 38761, 38761, 39126, 39126,
)
"""Reference MJD of the drift term for each piece."""

DRIFT_RATES: tuple[float, ...] = (
    0.0012960, 0.0012960, 0.0012960, 0.0011232, 0.0011232, 0.0012960, 0.0012960,
    0.0012960, 0.0012960, 0.0012960, 0.0012960, 0.0012960, 0.0025920, 0.0025920,
)
"""Drift of TAI - UTC for each piece [s/day]."""

MJD_1972: int = 41317
"""First day covered by the leap-second table."""


def _piece(mjd: float) -> int:
    if mjd < EPOCHS[0]:
        raise UtcUndefinedError()
    return bisect_right(EPOCHS, mjd) - 1


def delta_utc_tai(utc_delta: TimeDelta) -> TimeDelta:
    """UTC - TAI for a UTC instant given as a delta since J2000.

    Raises:
        UtcUndefinedError: Before 1960-01-01.
    """
    mjd = utc_delta.to_decimal_seconds() / SECONDS_PER_DAY + 51544.5
    p = _piece(mjd)
    offset = OFFSETS[p] + (mjd - DRIFT_EPOCHS[p]) * DRIFT_RATES[p]
    return TimeDelta.from_decimal_seconds(-offset)


def delta_tai_utc(tai_delta: TimeDelta) -> TimeDelta:
    """TAI - UTC for a TAI instant given as a delta since J2000.

    Raises:
        UtcUndefinedError: Before 1960-01-01.
    """
    mjd = tai_delta.to_decimal_seconds() / SECONDS_PER_DAY + 51544.5
    p = _piece(mjd)
    rate_utc = DRIFT_RATES[p] / SECONDS_PER_DAY
    rate_tai = rate_utc / (1.0 + rate_utc) * SECONDS_PER_DAY
    dt = mjd - DRIFT_EPOCHS[p] - OFFSETS[p] / SECONDS_PER_DAY
    return TimeDelta.from_decimal_seconds(OFFSETS[p] + dt * rate_tai)
