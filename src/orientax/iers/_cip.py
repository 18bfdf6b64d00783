"""Celestial Intermediate Pole coordinates.

The IAU 2006/2000A X, Y series is evaluated in one pass: every amplitude is
paired with the frequency it belongs to and with its axis, trigonometric
function and power of t, so the whole series reduces to a handful of
vectorized products.

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
from orientax.constants import AS2RAD
from orientax.iers import _cip_data as _data
from orientax.iers._fundamental import fundamental_args_iers03
from orientax.rotation_matrices import Ry, Rz


def _build_series_tables() -> tuple[np.ndarray, ...]:
    """Flatten the pointer-based amplitude table into per-amplitude arrays."""
    n_ls = len(_data.LUNI_SOLAR_FREQUENCIES)
    ls = np.zeros((n_ls, 14))
    ls[:, :5] = np.array(_data.LUNI_SOLAR_FREQUENCIES)
    frequencies = np.vstack([ls, np.array(_data.PLANETARY_FREQUENCIES)])

    pointers = list(_data.AMPLITUDE_POINTERS) + [len(_data.AMPLITUDES) + 1]
    frequency_index = []
    position = []
    for i in range(len(frequencies)):
        for j in range(pointers[i + 1] - pointers[i]):
            frequency_index.append(i)
            position.append(j)
    position = np.array(position)
    return (
        frequencies,
        np.array(frequency_index),
        np.array(_data.AMPLITUDES),
        np.array(_data.AXIS)[position],
        np.array(_data.TRIG)[position],
        np.array(_data.POWER)[position],
    )


(
    _FREQUENCIES,
    _FREQUENCY_INDEX,
    _AMPLITUDES,
    _AXIS,
    _TRIG,
    _POWER,
) = _build_series_tables()


class CipCoords(NamedTuple):
    """Coordinates of the Celestial Intermediate Pole in the GCRS [rad].

    Adding a :class:`~orientax.iers.Corrections` (or any pair) applies
    celestial pole offsets dX, dY.
    """

    x: Array
    y: Array

    def __add__(self, other: Sequence[ArrayLike]) -> CipCoords:
        return CipCoords(self.x + other[0], self.y + other[1])

    @classmethod
    def iau2006(cls, t: ArrayLike) -> CipCoords:
        """Evaluate the IAU 2006/2000A series.

        Args:
            t: TDB Julian centuries since J2000.0.
        """
        return cls(*cip_coords_iau2006(t))

    @classmethod
    def from_matrix(cls, matrix: Array) -> CipCoords:
        """Extract X, Y from a bias-precession-nutation matrix."""
        return cls(matrix[2, 0], matrix[2, 1])

    def celestial_to_intermediate_matrix(self, s: ArrayLike) -> Array:
        """Form the GCRS to CIRS matrix.

        Args:
            s: CIO locator [rad].

        Returns:
            3x3 rotation matrix ``Rz(-(e+s)) @ Ry(d) @ Rz(e)``.
        """
        x, y = self.x, self.y
        r2 = x * x + y * y
        e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
        d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))
        return Rz(-(e + s)) @ Ry(d) @ Rz(e)


def cip_coords_iau2006(t: ArrayLike) -> tuple[Array, Array]:
    """CIP X, Y from the IAU 2006 precession and IAU 2000A nutation series.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Tuple of (x, y) [rad].
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    powers = jnp.stack([t**k for k in range(6)])

    polynomial = jnp.stack(
        [
            jnp.sum(jnp.asarray(_data.POLYNOMIAL_X, dtype=dtype) * powers),
            jnp.sum(jnp.asarray(_data.POLYNOMIAL_Y, dtype=dtype) * powers),
        ]
    )

    phase = jnp.asarray(_FREQUENCIES, dtype=dtype) @ fundamental_args_iers03(t)
    s = jnp.sin(phase)[_FREQUENCY_INDEX]
    c = jnp.cos(phase)[_FREQUENCY_INDEX]
    terms = (
        jnp.asarray(_AMPLITUDES, dtype=dtype)
        * jnp.where(_TRIG == 0, s, c)
        * powers[_POWER]
    )
    periodic = jnp.stack(
        [jnp.sum(jnp.where(_AXIS == 0, terms, 0.0)), jnp.sum(jnp.where(_AXIS == 1, terms, 0.0))]
    )

    x, y = AS2RAD * (polynomial + periodic / 1e6)
    return x, y
