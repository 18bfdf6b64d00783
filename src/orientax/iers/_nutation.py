"""Nutation in longitude and obliquity.

Provides the IAU 1980, IAU 2000A, IAU 2000B and IAU 2006/2000A nutation
series. Each series is evaluated as one vectorized sum over its coefficient
table; the tables are stored with the smallest terms first.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import AS2RAD, TWO_PI
from orientax.iers import _nutation_1980_data as _data_1980
from orientax.iers import _nutation_2000a_data as _data_2000a
from orientax.iers import _nutation_2000b_data as _data_2000b
from orientax.iers._fundamental import (
    luni_solar_args_mhb2000,
    luni_solar_args_simon94,
    planetary_args_mhb2000,
)
from orientax.rotation_matrices import Rx, Rz

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_U2R: float = AS2RAD / 1e7
"""Units of 0.1 microarcsecond to radians."""

_MAS_U2R: float = AS2RAD / 1e4
"""Units of 0.1 milliarcsecond to radians."""

_DPSI_PLANETARY_2000B: float = -0.135e-3 * AS2RAD
"""Fixed offset in longitude replacing the 2000B planetary terms [rad]."""

_DEPS_PLANETARY_2000B: float = 0.388e-3 * AS2RAD
"""Fixed offset in obliquity replacing the 2000B planetary terms [rad]."""

_LUNI_SOLAR_2000A = np.array(_data_2000a.LUNI_SOLAR_TERMS[::-1])
_PLANETARY_2000A = np.array(_data_2000a.PLANETARY_TERMS[::-1])
_LUNI_SOLAR_2000B = np.array(_data_2000b.LUNI_SOLAR_TERMS[::-1])
_TERMS_1980 = np.array(_data_1980.TERMS[::-1])


class Nutation(NamedTuple):
    """Nutation angles [rad].

    Adding a :class:`~orientax.iers.Corrections` (or any pair) adds the
    components, which is how celestial pole offsets are applied.

    Attributes:
        dpsi: Nutation in longitude.
        deps: Nutation in obliquity.
    """

    dpsi: Array
    deps: Array

    def __add__(self, other: Sequence[ArrayLike]) -> Nutation:
        return Nutation(self.dpsi + other[0], self.deps + other[1])

    def nutation_matrix(self, epsa: ArrayLike) -> Array:
        """Rotation from the mean to the true equator and equinox of date.

        Args:
            epsa: Mean obliquity of date [rad].

        Returns:
            3x3 rotation matrix.
        """
        return Rx(-(self.deps + epsa)) @ Rz(-self.dpsi) @ Rx(epsa)

    @classmethod
    def iau1980(cls, t: ArrayLike) -> Nutation:
        return cls(*nutation_iau1980(t))

    @classmethod
    def iau2000a(cls, t: ArrayLike) -> Nutation:
        return cls(*nutation_iau2000a(t))

    @classmethod
    def iau2000b(cls, t: ArrayLike) -> Nutation:
        return cls(*nutation_iau2000b(t))

    @classmethod
    def iau2006a(cls, t: ArrayLike) -> Nutation:
        return cls(*nutation_iau2006a(t))


# ---------------------------------------------------------------------------
# Series
# ---------------------------------------------------------------------------


def _luni_solar_sum(terms: Array, args: Array, t: Array) -> tuple[Array, Array]:
    """Sum an MHB2000-layout luni-solar table in units of 0.1 uas."""
    phase = jnp.fmod(terms[:, :5] @ args, TWO_PI)
    s = jnp.sin(phase)
    c = jnp.cos(phase)
    dp = jnp.sum((terms[:, 5] + terms[:, 6] * t) * s + terms[:, 7] * c)
    de = jnp.sum((terms[:, 8] + terms[:, 9] * t) * c + terms[:, 10] * s)
    return dp, de


def nutation_iau1980(t: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 1980 model.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Tuple of (dpsi, deps) [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)

    def _arg(poly: Array, turns: float) -> Array:
        return jnp.fmod(poly * AS2RAD + jnp.fmod(turns * t, 1.0) * TWO_PI, TWO_PI)

    # Delaunay arguments, 1980 theory
    el = _arg((485866.733 + (715922.633 + (31.310 + 0.064 * t) * t) * t), 1325.0)
    elp = _arg((1287099.804 + (1292581.224 + (-0.577 - 0.012 * t) * t) * t), 99.0)
    f = _arg((335778.877 + (295263.137 + (-13.257 + 0.011 * t) * t) * t), 1342.0)
    d = _arg((1072261.307 + (1105601.328 + (-6.891 + 0.019 * t) * t) * t), 1236.0)
    om = _arg((450160.280 + (-482890.539 + (7.455 + 0.008 * t) * t) * t), -5.0)
    args = jnp.stack([el, elp, f, d, om])

    terms = jnp.asarray(_TERMS_1980, dtype=dtype)
    phase = terms[:, :5] @ args
    dp = jnp.sum((terms[:, 5] + terms[:, 6] * t) * jnp.sin(phase))
    de = jnp.sum((terms[:, 7] + terms[:, 8] * t) * jnp.cos(phase))
    return dp * _MAS_U2R, de * _MAS_U2R


def nutation_iau2000a(t: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A model (MHB2000 luni-solar and planetary terms).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Tuple of (dpsi, deps) [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)

    ls = jnp.asarray(_LUNI_SOLAR_2000A, dtype=dtype)
    dp_ls, de_ls = _luni_solar_sum(ls, luni_solar_args_mhb2000(t), t)

    pl = jnp.asarray(_PLANETARY_2000A, dtype=dtype)
    phase = jnp.fmod(pl[:, :13] @ planetary_args_mhb2000(t), TWO_PI)
    s = jnp.sin(phase)
    c = jnp.cos(phase)
    dp_pl = jnp.sum(pl[:, 13] * s + pl[:, 14] * c)
    de_pl = jnp.sum(pl[:, 15] * s + pl[:, 16] * c)

    return (dp_ls + dp_pl) * _U2R, (de_ls + de_pl) * _U2R


def nutation_iau2000b(t: ArrayLike) -> tuple[Array, Array]:
    """Nutation, truncated IAU 2000B model.

    The planetary terms are replaced by fixed offsets.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Tuple of (dpsi, deps) [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    ls = jnp.asarray(_LUNI_SOLAR_2000B, dtype=dtype)
    dp, de = _luni_solar_sum(ls, luni_solar_args_simon94(t), t)
    return dp * _U2R + _DPSI_PLANETARY_2000B, de * _U2R + _DEPS_PLANETARY_2000B


def nutation_iau2006a(t: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A adjusted to the IAU 2006 precession.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Tuple of (dpsi, deps) [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    dpsi, deps = nutation_iau2000a(t)
    # J2 rate correction
    fj2 = -2.7774e-6 * t
    return dpsi + (0.4697e-6 + fj2) * dpsi, deps + fj2 * deps
