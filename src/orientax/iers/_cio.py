"""CIO locator s, IAU 2006/2000A.

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
from orientax.constants import AS2RAD
from orientax.iers import _cio_data as _data
from orientax.iers._fundamental import fundamental_args_iers03

_ARGUMENT_INDICES = np.array([0, 1, 2, 3, 4, 6, 7, 13])
"""Positions of (l, l', F, D, Om, LVe, LE, pA) among the IERS 2003 arguments."""


def _split(terms: tuple) -> tuple[np.ndarray, np.ndarray]:
    multipliers = np.array([row[0] for row in terms[::-1]])
    amplitudes = np.array([row[1:] for row in terms[::-1]])
    return multipliers, amplitudes


_SERIES = tuple(
    _split(terms)
    for terms in (_data.S0_TERMS, _data.S1_TERMS, _data.S2_TERMS, _data.S3_TERMS, _data.S4_TERMS)
)


def _series(nfa: Array, sc: Array, fa: Array) -> Array:
    """Evaluate one order of the CIO locator series.

    Args:
        nfa: Integer multiplier array, shape (N, 8).
        sc: Sine/cosine coefficient array, shape (N, 2).
        fa: Fundamental arguments, shape (8,).

    Returns:
        Sum of s*sin(a) + c*cos(a) over all terms.
    """
    args = nfa @ fa
    return jnp.sum(sc[:, 0] * jnp.sin(args) + sc[:, 1] * jnp.cos(args))


def cio_locator_iau2006(t: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, positioning the CIO on the equator of the CIP.

    The series is for s + XY/2; the product is subtracted to return s.

    Args:
        t: TDB Julian centuries since J2000.0.
        x: CIP x coordinate [rad].
        y: CIP y coordinate [rad].

    Returns:
        CIO locator s [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    fa = fundamental_args_iers03(t)[_ARGUMENT_INDICES]

    w = [
        coefficient + _series(jnp.asarray(nfa, dtype=dtype), jnp.asarray(sc, dtype=dtype), fa)
        for coefficient, (nfa, sc) in zip(_data.POLYNOMIAL, _SERIES)
    ]
    w.append(_data.POLYNOMIAL[5])

    s = w[0] + (w[1] + (w[2] + (w[3] + (w[4] + w[5] * t) * t) * t) * t) * t
    return s * AS2RAD - x * y / 2.0
