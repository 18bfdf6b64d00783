"""Elementary rotation matrices.

The matrices rotate the *frame* (passive convention): ``Rz(a) @ v`` expresses
vector ``v`` in axes rotated counter-clockwise by ``a`` about z.  This is the
convention of the IERS and SOFA routines that the orientation pipeline
composes.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype


def Rx(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle: Counter-clockwise angle of rotation [rad] as viewed
            looking back along the positive direction of the rotation axis.

    Returns:
        3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    return jnp.array([[1.0, 0.0, 0.0],
                      [0.0,  +c,  +s],
                      [0.0,  -s,  +c]], dtype=get_dtype())


def Ry(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle: Counter-clockwise angle of rotation [rad] as viewed
            looking back along the positive direction of the rotation axis.

    Returns:
        3x3 rotation matrix.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    return jnp.array([[ +c, 0.0,  -s],
                      [0.0, 1.0, 0.0],
                      [ +s, 0.0,  +c]], dtype=get_dtype())


def Rz(angle: ArrayLike) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle: Counter-clockwise angle of rotation [rad] as viewed
            looking back along the positive direction of the rotation axis.

    Returns:
        3x3 rotation matrix.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    return jnp.array([[ +c,  +s, 0.0],
                      [ -s,  +c, 0.0],
                      [0.0, 0.0, 1.0]], dtype=get_dtype())


def skew(v: ArrayLike) -> Array:
    """Cross-product matrix ``[v]x`` such that ``skew(v) @ w == cross(v, w)``.

    Args:
        v: 3-vector.

    Returns:
        3x3 skew-symmetric matrix.
    """
    v = jnp.asarray(v, dtype=get_dtype())
    return jnp.array([[0.0, -v[2], v[1]],
                      [v[2], 0.0, -v[0]],
                      [-v[1], v[0], 0.0]], dtype=get_dtype())
