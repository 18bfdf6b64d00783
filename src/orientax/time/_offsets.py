"""Offsets between the continuous time scales.

The scales form a tree rooted at TAI::

    TAI ─ TT ─ TCG
     │     └── TDB ─ TCB
     └── UT1

Each edge has a closed-form offset, except TAI-UT1 which needs Earth
orientation data.  Conversions between non-adjacent scales walk the tree
edge by edge, evaluating each step at the instant reached by the previous
ones.

References:

    1. IERS Conventions (2010), IERS Technical Note 36, chapter 10.
    2. Fairhead, L. & Bretagnon, P., *Astron. Astrophys.* 229, 240-247 (1990).
"""

from __future__ import annotations

import math
from itertools import pairwise

from orientax.errors import MissingEopProviderError
from orientax.time._deltas import TimeDelta
from orientax.time._scales import TimeScale

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

D_TAI_TT: float = 32.184
"""TT - TAI [s]."""

LG: float = 6.969290134e-10
"""Rate of TCG relative to TT."""

LB: float = 1.550519768e-8
"""Rate of TCB relative to TDB."""

_LG_RATIO: tuple[int, int] = (6969290134, 10**19)
"""LG as an exact fraction."""

_LB_RATIO: tuple[int, int] = (1550519768, 10**17)
"""LB as an exact fraction."""

TDB_0: float = -6.55e-5
"""TDB - TCB at 1977-01-01T00:00:32.184 TT [s]."""

J77_TAI: int = -725803200
"""1977-01-01T00:00:00 TAI in seconds since J2000."""

J77_TT = TimeDelta(J77_TAI + 32, 0.184)
"""1977-01-01T00:00:32.184 TT since J2000."""

K: float = 1.657e-3
"""Amplitude of the periodic TDB - TT term [s]."""

EB: float = 1.671e-2
"""Eccentricity of the Earth-Moon barycentre orbit."""

M_0: float = 6.239996
"""Mean anomaly of the Earth-Moon barycentre at J2000 [rad]."""

M_1: float = 1.99096871e-7
"""Mean motion of the Earth-Moon barycentre [rad/s]."""


# ---------------------------------------------------------------------------
# Direct offsets
# ---------------------------------------------------------------------------


def _scaled(delta: TimeDelta, numerator: int, denominator: int) -> TimeDelta:
    """``delta * numerator / denominator`` with the whole seconds scaled exactly."""
    whole, rest = divmod(delta.seconds * numerator, denominator)
    fraction = (rest + float(delta.subsecond) * numerator) / denominator
    return TimeDelta.from_seconds(whole) + TimeDelta.from_decimal_seconds(fraction)


def _mean_anomaly(delta: TimeDelta, correction: float = 0.0) -> float:
    # The whole seconds are reduced modulo one revolution before the
    # fractional part is added.
    whole = math.fmod(M_1 * delta.seconds, 2.0 * math.pi)
    return M_0 + whole + M_1 * (float(delta.subsecond) + correction)


def tai_to_tt() -> TimeDelta:
    return TimeDelta.from_decimal_seconds(D_TAI_TT)


def tt_to_tai() -> TimeDelta:
    return -tai_to_tt()


def tt_to_tcg(delta: TimeDelta) -> TimeDelta:
    """TCG - TT at the TT instant *delta*."""
    numerator, denominator = _LG_RATIO
    return _scaled(delta - J77_TT, numerator, denominator - numerator)


def tcg_to_tt(delta: TimeDelta) -> TimeDelta:
    """TT - TCG at the TCG instant *delta*."""
    return -_scaled(delta - J77_TT, *_LG_RATIO)


def tdb_to_tcb(delta: TimeDelta) -> TimeDelta:
    """TCB - TDB at the TDB instant *delta*."""
    numerator, denominator = _LB_RATIO
    linear = _scaled(delta - J77_TT, numerator, denominator - numerator)
    return linear - TimeDelta.from_decimal_seconds(TDB_0 / (1.0 - LB))


def tcb_to_tdb(delta: TimeDelta) -> TimeDelta:
    """TDB - TCB at the TCB instant *delta*."""
    return TimeDelta.from_decimal_seconds(TDB_0) - _scaled(delta - J77_TT, *_LB_RATIO)


def tt_to_tdb(delta: TimeDelta) -> TimeDelta:
    """TDB - TT at the TT instant *delta* (Fairhead-Bretagnon short form)."""
    g = _mean_anomaly(delta)
    return TimeDelta.from_decimal_seconds(K * math.sin(g + EB * math.sin(g)))


def tdb_to_tt(delta: TimeDelta) -> TimeDelta:
    """TT - TDB at the TDB instant *delta*, refined by fixed-point iteration."""
    offset = 0.0
    for _ in range(3):
        g = _mean_anomaly(delta, offset)
        offset = -K * math.sin(g + EB * math.sin(g))
    return TimeDelta.from_decimal_seconds(offset)


# ---------------------------------------------------------------------------
# Conversion paths
# ---------------------------------------------------------------------------

_PARENT: dict[TimeScale, TimeScale] = {
    TimeScale.TT: TimeScale.TAI,
    TimeScale.UT1: TimeScale.TAI,
    TimeScale.TCG: TimeScale.TT,
    TimeScale.TDB: TimeScale.TT,
    TimeScale.TCB: TimeScale.TDB,
}


def _ancestry(scale: TimeScale) -> list[TimeScale]:
    chain = [scale]
    while chain[-1] in _PARENT:
        chain.append(_PARENT[chain[-1]])
    return chain


def _path(origin: TimeScale, target: TimeScale) -> tuple[TimeScale, ...]:
    up = _ancestry(origin)
    down = _ancestry(target)
    while len(up) > 1 and len(down) > 1 and up[-2] == down[-2]:
        up.pop()
        down.pop()
    return tuple(up + down[-2::-1])


_PATHS: dict[tuple[TimeScale, TimeScale], tuple[TimeScale, ...]] = {
    (origin, target): _path(origin, target)
    for origin in TimeScale
    for target in TimeScale
}
"""Sequence of scales visited when converting between each pair."""


_EDGES = {
    (TimeScale.TAI, TimeScale.TT): lambda _: tai_to_tt(),
    (TimeScale.TT, TimeScale.TAI): lambda _: tt_to_tai(),
    (TimeScale.TT, TimeScale.TCG): tt_to_tcg,
    (TimeScale.TCG, TimeScale.TT): tcg_to_tt,
    (TimeScale.TT, TimeScale.TDB): tt_to_tdb,
    (TimeScale.TDB, TimeScale.TT): tdb_to_tt,
    (TimeScale.TDB, TimeScale.TCB): tdb_to_tcb,
    (TimeScale.TCB, TimeScale.TDB): tcb_to_tdb,
}
"""Closed-form offsets for each edge not involving UT1."""


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


class OffsetProvider:
    """Computes offsets between any two continuous time scales.

    The UT1 edge is delegated to :meth:`tai_to_ut1` and :meth:`ut1_to_tai`,
    which raise :class:`~orientax.errors.MissingEopProviderError` here.
    Providers with Earth orientation data override them.
    """

    def tai_to_ut1(self, delta: TimeDelta) -> TimeDelta:
        """UT1 - TAI at the TAI instant *delta*."""
        raise MissingEopProviderError()

    def ut1_to_tai(self, delta: TimeDelta) -> TimeDelta:
        """TAI - UT1 at the UT1 instant *delta*."""
        raise MissingEopProviderError()

    def offset(self, origin: TimeScale, target: TimeScale, delta: TimeDelta) -> TimeDelta:
        """Return ``target - origin`` at the instant *delta* expressed in *origin*.

        Args:
            origin: Scale in which *delta* is expressed.
            target: Scale to convert to.
            delta: Seconds since J2000 in the *origin* scale.

        Returns:
            The offset to add to *delta* to obtain the instant in *target*.

        Raises:
            MissingEopProviderError: If the path crosses UT1 and this provider
                has no Earth orientation data.
        """
        total = TimeDelta()
        current = delta
        for step_origin, step_target in pairwise(_PATHS[(origin, target)]):
            step = self._step(step_origin, step_target, current)
            total = total + step
            current = current + step
        return total

    def _step(self, origin: TimeScale, target: TimeScale, delta: TimeDelta) -> TimeDelta:
        if (origin, target) == (TimeScale.TAI, TimeScale.UT1):
            return self.tai_to_ut1(delta)
        if (origin, target) == (TimeScale.UT1, TimeScale.TAI):
            return self.ut1_to_tai(delta)
        return _EDGES[(origin, target)](delta)


class DefaultOffsetProvider(OffsetProvider):
    """Offset provider without Earth orientation data."""
