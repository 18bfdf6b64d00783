"""Fundamental arguments of the nutation theories.

Three families are provided, all functions of TDB Julian centuries ``t``
since J2000:

- IERS Conventions 2003 (``*03``), used by the CIP, CIO and equation of the
  equinoxes series and by the 2000A luni-solar nutation.
- MHB2000 variants (``*_mhb2000``), used inside the IAU 2000A nutation.
- Simon et al. (1994) linear forms (``*_simon94``), used by IAU 2000B.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.constants import AS2RAD, TURNAS, TWO_PI

# ---------------------------------------------------------------------------
# Delaunay arguments (IERS Conventions 2003)
# ---------------------------------------------------------------------------


def fal03(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l in radians.
    """
    return (
        jnp.fmod(
            485868.249036
            + t * (1717915923.2178 + t * (31.8792 + t * (0.051635 + t * (-0.00024470)))),
            TURNAS,
        )
        * AS2RAD
    )


def falp03(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l' in radians.
    """
    return (
        jnp.fmod(
            1287104.793048
            + t * (129596581.0481 + t * (-0.5532 + t * (0.000136 + t * (-0.00001149)))),
            TURNAS,
        )
        * AS2RAD
    )


def faf03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon minus that of the ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        F in radians.
    """
    return (
        jnp.fmod(
            335779.526232
            + t * (1739527262.8478 + t * (-12.7512 + t * (-0.001037 + t * (0.00000417)))),
            TURNAS,
        )
        * AS2RAD
    )


def fad03(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        D in radians.
    """
    return (
        jnp.fmod(
            1072260.703692
            + t * (1602961601.2090 + t * (-6.3706 + t * (0.006593 + t * (-0.00003169)))),
            TURNAS,
        )
        * AS2RAD
    )


def faom03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon's ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Omega in radians.
    """
    return (
        jnp.fmod(
            450160.398036
            + t * (-6962890.5431 + t * (7.4722 + t * (0.007702 + t * (-0.00005939)))),
            TURNAS,
        )
        * AS2RAD
    )


# ---------------------------------------------------------------------------
# Planetary longitudes (IERS Conventions 2003)
# ---------------------------------------------------------------------------


def fame03(t: ArrayLike) -> Array:
    """Mean longitude of Mercury [rad]."""
    return jnp.fmod(4.402608842 + 2608.7903141574 * t, TWO_PI)


def fave03(t: ArrayLike) -> Array:
    """Mean longitude of Venus [rad]."""
    return jnp.fmod(3.176146697 + 1021.3285546211 * t, TWO_PI)


def fae03(t: ArrayLike) -> Array:
    """Mean longitude of Earth [rad]."""
    return jnp.fmod(1.753470314 + 628.3075849991 * t, TWO_PI)


def fama03(t: ArrayLike) -> Array:
    """Mean longitude of Mars [rad]."""
    return jnp.fmod(6.203480913 + 334.0612426700 * t, TWO_PI)


def faju03(t: ArrayLike) -> Array:
    """Mean longitude of Jupiter [rad]."""
    return jnp.fmod(0.599546497 + 52.9690962641 * t, TWO_PI)


def fasa03(t: ArrayLike) -> Array:
    """Mean longitude of Saturn [rad]."""
    return jnp.fmod(0.874016757 + 21.3299104960 * t, TWO_PI)


def faur03(t: ArrayLike) -> Array:
    """Mean longitude of Uranus [rad]."""
    return jnp.fmod(5.481293872 + 7.4781598567 * t, TWO_PI)


def fane03(t: ArrayLike) -> Array:
    """Mean longitude of Neptune [rad]."""
    return jnp.fmod(5.311886287 + 3.8133035638 * t, TWO_PI)


def fapa03(t: ArrayLike) -> Array:
    """General accumulated precession in longitude [rad]."""
    return (0.024381750 + 0.00000538691 * t) * t


def fundamental_args_iers03(t: ArrayLike) -> Array:
    """All 14 IERS 2003 fundamental arguments.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Array of shape ``(14,)`` ordered l, l', F, D, Om, LMe, LVe, LE, LMa,
        LJu, LSa, LUr, LNe, pA.
    """
    return jnp.stack(
        [
            fal03(t),
            falp03(t),
            faf03(t),
            fad03(t),
            faom03(t),
            fame03(t),
            fave03(t),
            fae03(t),
            fama03(t),
            faju03(t),
            fasa03(t),
            faur03(t),
            fane03(t),
            fapa03(t),
        ]
    )


# ---------------------------------------------------------------------------
# MHB2000 variants
# ---------------------------------------------------------------------------


def falp_mhb2000(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun, MHB2000 luni-solar form [rad]."""
    return (
        jnp.fmod(
            1287104.79305
            + t * (129596581.0481 + t * (-0.5532 + t * (0.000136 + t * (-0.00001149)))),
            TURNAS,
        )
        * AS2RAD
    )


def fad_mhb2000(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun, MHB2000 luni-solar form [rad]."""
    return (
        jnp.fmod(
            1072260.70369
            + t * (1602961601.2090 + t * (-6.3706 + t * (0.006593 + t * (-0.00003169)))),
            TURNAS,
        )
        * AS2RAD
    )


def fal_mhb2000_planetary(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon, MHB2000 planetary form [rad]."""
    return jnp.fmod(2.35555598 + 8328.6914269554 * t, TWO_PI)


def faf_mhb2000_planetary(t: ArrayLike) -> Array:
    """Mean argument of latitude of the Moon, MHB2000 planetary form [rad]."""
    return jnp.fmod(1.627905234 + 8433.466158131 * t, TWO_PI)


def fad_mhb2000_planetary(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun, MHB2000 planetary form [rad]."""
    return jnp.fmod(5.198466741 + 7771.3771468121 * t, TWO_PI)


def faom_mhb2000_planetary(t: ArrayLike) -> Array:
    """Mean longitude of the ascending node of the Moon, MHB2000 planetary form [rad]."""
    return jnp.fmod(2.18243920 - 33.757045 * t, TWO_PI)


def fane_mhb2000(t: ArrayLike) -> Array:
    """Mean longitude of Neptune, MHB2000 form [rad]."""
    return jnp.fmod(5.321159000 + 3.8127774000 * t, TWO_PI)


def luni_solar_args_mhb2000(t: ArrayLike) -> Array:
    """Delaunay arguments (l, l', F, D, Om) for the 2000A luni-solar series."""
    return jnp.stack([fal03(t), falp_mhb2000(t), faf03(t), fad_mhb2000(t), faom03(t)])


def planetary_args_mhb2000(t: ArrayLike) -> Array:
    """Arguments for the 2000A planetary series.

    Returns:
        Array of shape ``(13,)`` ordered l, F, D, Om, LMe, LVe, LE, LMa, LJu,
        LSa, LUr, LNe, pA.
    """
    return jnp.stack(
        [
            fal_mhb2000_planetary(t),
            faf_mhb2000_planetary(t),
            fad_mhb2000_planetary(t),
            faom_mhb2000_planetary(t),
            fame03(t),
            fave03(t),
            fae03(t),
            fama03(t),
            faju03(t),
            fasa03(t),
            faur03(t),
            fane_mhb2000(t),
            fapa03(t),
        ]
    )


# ---------------------------------------------------------------------------
# Simon et al. (1994)
# ---------------------------------------------------------------------------


def luni_solar_args_simon94(t: ArrayLike) -> Array:
    """Delaunay arguments (l, l', F, D, Om), linear terms only, for 2000B."""
    return (
        jnp.stack(
            [
                jnp.fmod(485868.249036 + 1717915923.2178 * t, TURNAS),
                jnp.fmod(1287104.79305 + 129596581.0481 * t, TURNAS),
                jnp.fmod(335779.526232 + 1739527262.8478 * t, TURNAS),
                jnp.fmod(1072260.70369 + 1602961601.2090 * t, TURNAS),
                jnp.fmod(450160.398036 - 6962890.5431 * t, TURNAS),
            ]
        )
        * AS2RAD
    )
