"""Rotations to the IAU body-fixed frames.

The body-fixed axes follow from the rotational elements of the body:

    M = Rz(W) @ Rx(pi/2 - dec) @ Rz(ra + pi/2)

The derivative is formed by the product rule from the element rates, with
the derivatives of the elementary matrices obtained by forward-mode
differentiation.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from orientax.bodies import Origin
from orientax.constants import TWO_PI
from orientax.frames._rotation import Rotation
from orientax.rotation_matrices import Rx, Rz

_dRx = jax.jacfwd(Rx)
_dRz = jax.jacfwd(Rz)


def icrf_to_iau(body: Origin, seconds: float) -> Rotation:
    """Rotation from the ICRF to the body-fixed frame of *body*.

    Args:
        body: Body with IAU rotational elements.
        seconds: TDB seconds since J2000.

    Returns:
        The rotation and its time derivative.

    Raises:
        UndefinedOriginPropertyError: If the body has no rotational elements.
    """
    ra, dec, w = body.rotational_elements(seconds)
    ra_dot, dec_dot, w_dot = body.rotational_element_rates(seconds)

    w = jnp.mod(w, TWO_PI)
    inclination = jnp.pi / 2.0 - dec
    node = ra + jnp.pi / 2.0

    r3 = Rz(w)
    r1 = Rx(inclination)
    r0 = Rz(node)
    m = r3 @ r1 @ r0
    dm = (
        w_dot * _dRz(w) @ r1 @ r0
        - dec_dot * r3 @ _dRx(inclination) @ r0
        + ra_dot * r3 @ r1 @ _dRz(node)
    )
    return Rotation(m, dm)
