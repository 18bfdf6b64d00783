"""Earth rotation angle, sidereal time and the equation of the equinoxes.

Time arguments follow the SOFA conventions: ``days`` is UT1 days since
J2000.0 and ``t`` is TT (or TDB) Julian centuries since J2000.0.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import AS2RAD, DAYS_PER_JULIAN_CENTURY, SECONDS_PER_DAY, TWO_PI
from orientax.iers import _complementary_terms_data as _data
from orientax.iers._fundamental import fundamental_args_iers03
from orientax.iers._nutation import (
    nutation_iau1980,
    nutation_iau2000a,
    nutation_iau2000b,
    nutation_iau2006a,
)
from orientax.iers._obliquity import mean_obliquity_iau1980, mean_obliquity_iau2006
from orientax.iers._precession import PrecessionCorrectionsIau2000

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

S2R: float = 15.0 * AS2RAD
"""Seconds of time to radians."""

_ARGUMENT_INDICES = np.array([0, 1, 2, 3, 4, 6, 7, 13])
"""Positions of (l, l', F, D, Om, LVe, LE, pA) among the IERS 2003 arguments."""

_E0_MULTIPLIERS = np.array([row[0] for row in _data.E0_TERMS[::-1]])
_E0_AMPLITUDES = np.array([row[1:] for row in _data.E0_TERMS[::-1]])
_E1_MULTIPLIERS = np.array([row[0] for row in _data.E1_TERMS[::-1]])
_E1_AMPLITUDES = np.array([row[1:] for row in _data.E1_TERMS[::-1]])


# ---------------------------------------------------------------------------
# Earth rotation angle
# ---------------------------------------------------------------------------


def earth_rotation_angle(days: ArrayLike) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    Args:
        days: UT1 days since J2000.0.

    Returns:
        Earth Rotation Angle in radians (0 to 2*pi).
    """
    days = jnp.asarray(days, dtype=get_dtype())
    f = jnp.fmod(days, 1.0)
    return jnp.mod(TWO_PI * (f + 0.7790572732640 + 0.00273781191135448 * days), TWO_PI)


# ---------------------------------------------------------------------------
# Greenwich mean sidereal time
# ---------------------------------------------------------------------------


def gmst_iau1982(days: ArrayLike) -> Array:
    """Greenwich mean sidereal time, IAU 1982 model.

    Args:
        days: UT1 days since J2000.0.

    Returns:
        GMST in radians (0 to 2*pi).
    """
    days = jnp.asarray(days, dtype=get_dtype())
    # Coefficients of the IAU 1982 expression [s]; the constant is shifted by
    # half a day because the fraction below is counted from noon.
    a = 24110.54841 - SECONDS_PER_DAY / 2.0
    b = 8640184.812866
    c = 0.093104
    d = -6.2e-6

    t = days / DAYS_PER_JULIAN_CENTURY
    f = SECONDS_PER_DAY * jnp.fmod(days, 1.0)
    return jnp.mod(S2R * ((a + (b + (c + d * t) * t) * t) + f), TWO_PI)


def gmst_iau2000(days: ArrayLike, t: ArrayLike) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2000 resolutions.

    Args:
        days: UT1 days since J2000.0.
        t: TT Julian centuries since J2000.0.

    Returns:
        GMST in radians (0 to 2*pi).
    """
    t = jnp.asarray(t, dtype=get_dtype())
    poly = (
        0.014506 + (4612.15739966 + (1.39667721 + (-0.00009344 + 0.00001882 * t) * t) * t) * t
    )
    return jnp.mod(earth_rotation_angle(days) + poly * AS2RAD, TWO_PI)


def gmst_iau2006(days: ArrayLike, t: ArrayLike) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2006 precession.

    Args:
        days: UT1 days since J2000.0.
        t: TT Julian centuries since J2000.0.

    Returns:
        GMST in radians (0 to 2*pi).
    """
    t = jnp.asarray(t, dtype=get_dtype())
    poly = 0.014506 + (
        4612.156534
        + (1.3915817 + (-0.00000044 + (-0.000029956 + (-0.0000000368) * t) * t) * t) * t
    ) * t
    return jnp.mod(earth_rotation_angle(days) + poly * AS2RAD, TWO_PI)


# ---------------------------------------------------------------------------
# Equation of the equinoxes
# ---------------------------------------------------------------------------


def equation_of_the_equinoxes_complementary_terms(t: ArrayLike) -> Array:
    """Complementary terms of the equation of the equinoxes (IERS 2003).

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        Complementary terms [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    fa = fundamental_args_iers03(t)[_ARGUMENT_INDICES]

    def _sum(multipliers: np.ndarray, amplitudes: np.ndarray) -> Array:
        args = jnp.asarray(multipliers, dtype=dtype) @ fa
        sc = jnp.asarray(amplitudes, dtype=dtype)
        return jnp.sum(sc[:, 0] * jnp.sin(args) + sc[:, 1] * jnp.cos(args))

    e0 = _sum(_E0_MULTIPLIERS, _E0_AMPLITUDES)
    e1 = _sum(_E1_MULTIPLIERS, _E1_AMPLITUDES)
    return (e0 + e1 * t) * AS2RAD


def equation_of_the_equinoxes_iau1994(t: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 1994 model.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Equation of the equinoxes [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    # Longitude of the mean ascending node of the lunar orbit
    om = jnp.mod(
        (450160.280 + (-482890.539 + (7.455 + 0.008 * t) * t) * t) * AS2RAD
        + jnp.fmod(-5.0 * t, 1.0) * TWO_PI,
        TWO_PI,
    )
    dpsi, _ = nutation_iau1980(t)
    eps0 = mean_obliquity_iau1980(t)
    return dpsi * jnp.cos(eps0) + AS2RAD * (0.00264 * jnp.sin(om) + 0.000063 * jnp.sin(om + om))


def equation_of_the_equinoxes_iau2000(t: ArrayLike, epsa: ArrayLike, dpsi: ArrayLike) -> Array:
    """Equation of the equinoxes from given nutation and obliquity.

    Args:
        t: TT Julian centuries since J2000.0.
        epsa: Mean obliquity [rad].
        dpsi: Nutation in longitude [rad].

    Returns:
        Equation of the equinoxes [rad].
    """
    return dpsi * jnp.cos(epsa) + equation_of_the_equinoxes_complementary_terms(t)


def equation_of_the_equinoxes_iau2000a(t: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000A nutation with IAU 2000 precession."""
    corrections = PrecessionCorrectionsIau2000.from_centuries(t)
    epsa = mean_obliquity_iau1980(t) + corrections.depspr
    dpsi, _ = nutation_iau2000a(t)
    return equation_of_the_equinoxes_iau2000(t, epsa, dpsi)


def equation_of_the_equinoxes_iau2000b(t: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000B nutation with IAU 2000 precession."""
    corrections = PrecessionCorrectionsIau2000.from_centuries(t)
    epsa = mean_obliquity_iau1980(t) + corrections.depspr
    dpsi, _ = nutation_iau2000b(t)
    return equation_of_the_equinoxes_iau2000(t, epsa, dpsi)


def equation_of_the_equinoxes_iau2006a(t: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2006/2000A."""
    epsa = mean_obliquity_iau2006(t)
    dpsi, _ = nutation_iau2006a(t)
    return equation_of_the_equinoxes_iau2000(t, epsa, dpsi)
