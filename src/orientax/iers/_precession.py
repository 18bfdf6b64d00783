"""Frame bias and precession.

Three precession models are provided: IAU 1976 (Lieske), IAU 2000 (the
1976 model plus the IAU 2000 rate corrections) and IAU 2006 (Fukushima-
Williams angles). Each angle set builds the bias-precession matrix that
rotates GCRS vectors to the mean equator and equinox of date.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import AS2RAD
from orientax.iers._obliquity import mean_obliquity_iau2006
from orientax.rotation_matrices import Rx, Ry, Rz

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EPS0: float = 84381.448 * AS2RAD
"""J2000.0 obliquity of the ecliptic (Lieske et al. 1977) [rad]."""

D_PSI_BIAS: float = -0.041775 * AS2RAD
"""Frame bias in longitude [rad]."""

D_EPS_BIAS: float = -0.0068192 * AS2RAD
"""Frame bias in obliquity [rad]."""

D_RA0: float = -0.0146 * AS2RAD
"""ICRS right ascension of the J2000.0 equinox [rad]."""

PRECESSION_RATE_CORRECTION: float = -0.29965 * AS2RAD
"""IAU 2000 correction to the precession rate in longitude [rad/century]."""

OBLIQUITY_RATE_CORRECTION: float = -0.02524 * AS2RAD
"""IAU 2000 correction to the obliquity rate [rad/century]."""


def frame_bias() -> Array:
    """Frame bias matrix rotating GCRS to the J2000.0 mean equator and equinox.

    Returns:
        3x3 rotation matrix.
    """
    return Rx(-D_EPS_BIAS) @ Ry(jnp.sin(EPS0) * D_PSI_BIAS) @ Rz(D_RA0)


# ---------------------------------------------------------------------------
# Precession angle sets
# ---------------------------------------------------------------------------


class PrecessionIau1976(NamedTuple):
    """Lieske (1977) equatorial precession angles [rad]."""

    zeta: Array
    z: Array
    theta: Array

    @classmethod
    def from_centuries(cls, t: ArrayLike) -> PrecessionIau1976:
        """Compute the angles for *t* TT Julian centuries since J2000.0."""
        t = jnp.asarray(t, dtype=get_dtype())
        zeta = (2306.2181 + (0.30188 + 0.017998 * t) * t) * t * AS2RAD
        z = (2306.2181 + (1.09468 + 0.018203 * t) * t) * t * AS2RAD
        theta = (2004.3109 + (-0.42665 - 0.041833 * t) * t) * t * AS2RAD
        return cls(zeta, z, theta)

    def precession_matrix(self) -> Array:
        """Rotation from the J2000.0 mean equator to the mean equator of date."""
        return Rz(-self.z) @ Ry(self.theta) @ Rz(-self.zeta)

    def bias_precession_matrix(self) -> Array:
        return self.precession_matrix() @ frame_bias()


class PrecessionCorrectionsIau2000(NamedTuple):
    """IAU 2000 corrections to the IAU 1976 precession rates [rad].

    Attributes:
        dpsipr: Correction in longitude.
        depspr: Correction in obliquity.
    """

    dpsipr: Array
    depspr: Array

    @classmethod
    def from_centuries(cls, t: ArrayLike) -> PrecessionCorrectionsIau2000:
        t = jnp.asarray(t, dtype=get_dtype())
        return cls(PRECESSION_RATE_CORRECTION * t, OBLIQUITY_RATE_CORRECTION * t)


class PrecessionIau2000(NamedTuple):
    """IAU 2000 precession angles [rad].

    Attributes:
        psia: Precession in longitude, including the rate correction.
        oma: Inclination of the mean equator of date, including the rate
            correction.
        chia: Planetary precession along the equator.
    """

    psia: Array
    oma: Array
    chia: Array

    @classmethod
    def from_centuries(cls, t: ArrayLike) -> PrecessionIau2000:
        t = jnp.asarray(t, dtype=get_dtype())
        corrections = PrecessionCorrectionsIau2000.from_centuries(t)
        psia77 = (5038.7784 + (-1.07259 + (-0.001147) * t) * t) * t * AS2RAD
        oma77 = EPS0 + ((0.05127 + (-0.007726) * t) * t) * t * AS2RAD
        chia = (10.5526 + (-2.38064 + (-0.001125) * t) * t) * t * AS2RAD
        return cls(psia77 + corrections.dpsipr, oma77 + corrections.depspr, chia)

    def precession_matrix(self) -> Array:
        return Rz(self.chia) @ Rx(-self.oma) @ Rz(-self.psia) @ Rx(EPS0)

    def bias_precession_matrix(self) -> Array:
        return self.precession_matrix() @ frame_bias()


class PrecessionIau2006(NamedTuple):
    """IAU 2006 Fukushima-Williams precession angles [rad].

    The angles already include the frame bias.

    Attributes:
        gamb: F-W angle gamma_bar.
        phib: F-W angle phi_bar.
        psib: F-W angle psi_bar.
        epsa: Mean obliquity of date.
    """

    gamb: Array
    phib: Array
    psib: Array
    epsa: Array

    @classmethod
    def from_centuries(cls, t: ArrayLike) -> PrecessionIau2006:
        t = jnp.asarray(t, dtype=get_dtype())
        gamb = AS2RAD * (
            -0.052928
            + (10.556378 + (0.4932044 + (-0.00031238 + (-0.000002788 + 0.0000000260 * t) * t) * t) * t)
            * t
        )
        phib = AS2RAD * (
            84381.412819
            + (-46.811016 + (0.0511268 + (0.00053289 + (-0.000000440 - 0.0000000176 * t) * t) * t) * t)
            * t
        )
        psib = AS2RAD * (
            -0.041775
            + (5038.481484 + (1.5584175 + (-0.00018522 + (-0.000026452 - 0.0000000148 * t) * t) * t) * t)
            * t
        )
        return cls(gamb, phib, psib, mean_obliquity_iau2006(t))

    def bias_precession_matrix(self) -> Array:
        return Rx(-self.epsa) @ Rz(-self.psib) @ Rx(self.phib) @ Rz(self.gamb)


PrecessionAngles = PrecessionIau1976 | PrecessionIau2000 | PrecessionIau2006
