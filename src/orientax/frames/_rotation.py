"""Time-dependent rotations between reference frames.

A :class:`Rotation` carries a direction-cosine matrix ``m`` together with
its time derivative ``dm``, so that a Cartesian state transforms as

    r' = m @ r
    v' = dm @ r + m @ v
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.rotation_matrices import skew


class Rotation(NamedTuple):
    """A rotation matrix and its time derivative.

    Attributes:
        m: 3x3 direction-cosine matrix.
        dm: Time derivative of ``m`` [1/s].
    """

    m: Array
    dm: Array

    @classmethod
    def new(cls, m: ArrayLike) -> Rotation:
        """A rotation with matrix *m* and zero derivative."""
        m = jnp.asarray(m, dtype=get_dtype())
        return cls(m, jnp.zeros((3, 3), dtype=get_dtype()))

    @classmethod
    def identity(cls) -> Rotation:
        return cls.new(jnp.eye(3, dtype=get_dtype()))

    def with_angular_velocity(self, omega: ArrayLike) -> Rotation:
        """Attach the derivative of a frame spinning at *omega* [rad/s].

        The derivative is ``-[omega]x @ m``, with ``omega`` expressed in the
        target frame.
        """
        return Rotation(self.m, -skew(omega) @ self.m)

    def compose(self, other: Rotation) -> Rotation:
        """Apply *self* first, then *other*."""
        return Rotation(other.m @ self.m, other.dm @ self.m + other.m @ self.dm)

    def transpose(self) -> Rotation:
        """The inverse rotation."""
        return Rotation(self.m.T, self.dm.T)

    def rotate_position(self, r: ArrayLike) -> Array:
        return self.m @ jnp.asarray(r, dtype=get_dtype())

    def rotate_velocity(self, r: ArrayLike, v: ArrayLike) -> Array:
        r = jnp.asarray(r, dtype=get_dtype())
        v = jnp.asarray(v, dtype=get_dtype())
        return self.dm @ r + self.m @ v

    def rotate_state(self, r: ArrayLike, v: ArrayLike) -> tuple[Array, Array]:
        """Rotate a position and velocity.

        Args:
            r: Position vector.
            v: Velocity vector, in units of ``r`` per second.

        Returns:
            Tuple ``(r', v')`` in the target frame.
        """
        return self.rotate_position(r), self.rotate_velocity(r, v)
