"""Polar motion and the Terrestrial Intermediate Origin locator."""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import AS2RAD
from orientax.rotation_matrices import Rx, Ry, Rz

TIO_SECULAR_DRIFT: float = -47e-6
"""Secular drift of the TIO locator [arcsec/century]."""


def tio_locator(t: ArrayLike) -> Array:
    """TIO locator s', IAU 2000 approximation.

    s' is dominated by a secular drift, which is all this model keeps.

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        s' [rad].
    """
    return jnp.asarray(t, dtype=get_dtype()) * TIO_SECULAR_DRIFT * AS2RAD


def polar_motion_matrix(xp: ArrayLike, yp: ArrayLike, sp: ArrayLike | None = None) -> Array:
    """Polar motion matrix rotating TIRS (or PEF without *sp*) to the ITRS.

    Args:
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].
        sp: TIO locator s' [rad]. Omitted for the IERS 1996 conventions.

    Returns:
        3x3 rotation matrix ``Rx(-yp) @ Ry(-xp) @ Rz(sp)``.
    """
    w = Rx(-jnp.asarray(yp)) @ Ry(-jnp.asarray(xp))
    if sp is None:
        return w
    return w @ Rz(sp)
