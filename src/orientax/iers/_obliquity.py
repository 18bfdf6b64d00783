"""Mean obliquity of the ecliptic.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.constants import AS2RAD
from orientax.config import get_dtype


def mean_obliquity_iau1980(t: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model.

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        Mean obliquity [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    return AS2RAD * (84381.448 + (-46.8150 + (-0.00059 + 0.001813 * t) * t) * t)


def mean_obliquity_iau2006(t: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession model.

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        Mean obliquity [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    return AS2RAD * (
        84381.406
        + (
            -46.836769
            + (-0.0001831 + (0.00200340 + (-0.000000576 + (-0.0000000434) * t) * t) * t) * t
        )
        * t
    )
