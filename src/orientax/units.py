"""Typed quantity primitives: angles, distances and velocities.

The values wrap either Python floats or JAX scalars, so they can be passed
through ``jax.jit`` as pytrees (they are :class:`~typing.NamedTuple` s).
"""

from __future__ import annotations

import math
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.constants import AS2RAD, DEG2RAD, MAS2RAD, RAD2DEG, TWO_PI, UAS2RAD
from orientax.rotation_matrices import Rx, Ry, Rz

# ---------------------------------------------------------------------------
# Angle
# ---------------------------------------------------------------------------


class Angle(NamedTuple):
    """An angle stored in radians.

    Attributes:
        radians: The angle [rad].
    """

    radians: ArrayLike

    @classmethod
    def from_radians(cls, value: ArrayLike) -> Angle:
        return cls(value)

    @classmethod
    def from_degrees(cls, value: ArrayLike) -> Angle:
        return cls(value * DEG2RAD)

    @classmethod
    def from_arcseconds(cls, value: ArrayLike) -> Angle:
        return cls(value * AS2RAD)

    @classmethod
    def from_milliarcseconds(cls, value: ArrayLike) -> Angle:
        return cls(value * MAS2RAD)

    @classmethod
    def from_microarcseconds(cls, value: ArrayLike) -> Angle:
        return cls(value * UAS2RAD)

    @classmethod
    def asin(cls, value: float) -> Angle:
        """Inverse sine.

        Raises:
            ValueError: If ``|value| > 1``.
        """
        if not -1.0 <= float(value) <= 1.0:
            raise ValueError(f"asin argument {value} is outside [-1, 1]")
        return cls(jnp.arcsin(value))

    @classmethod
    def acos(cls, value: float) -> Angle:
        """Inverse cosine.

        Raises:
            ValueError: If ``|value| > 1``.
        """
        if not -1.0 <= float(value) <= 1.0:
            raise ValueError(f"acos argument {value} is outside [-1, 1]")
        return cls(jnp.arccos(value))

    @classmethod
    def atan(cls, value: ArrayLike) -> Angle:
        return cls(jnp.arctan(value))

    @classmethod
    def atan2(cls, y: ArrayLike, x: ArrayLike) -> Angle:
        return cls(jnp.arctan2(y, x))

    def to_degrees(self) -> ArrayLike:
        return self.radians * RAD2DEG

    def to_arcseconds(self) -> ArrayLike:
        return self.radians / AS2RAD

    def sin(self) -> Array:
        return jnp.sin(self.radians)

    def cos(self) -> Array:
        return jnp.cos(self.radians)

    def tan(self) -> Array:
        return jnp.tan(self.radians)

    def mod_two_pi(self) -> Angle:
        """Normalise to ``[0, 2*pi)``."""
        return Angle(jnp.mod(self.radians, TWO_PI))

    def mod_two_pi_signed(self) -> Angle:
        """Normalise to ``(-pi, pi]``."""
        r = jnp.mod(self.radians + math.pi, TWO_PI) - math.pi
        return Angle(jnp.where(r <= -math.pi, math.pi, r))

    def rotation_x(self) -> Array:
        return Rx(self.radians)

    def rotation_y(self) -> Array:
        return Ry(self.radians)

    def rotation_z(self) -> Array:
        return Rz(self.radians)

    def __add__(self, other: Angle) -> Angle:
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self.radians - other.radians)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)

    def __mul__(self, factor: ArrayLike) -> Angle:
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: ArrayLike) -> Angle:
        return Angle(self.radians / divisor)

    def __float__(self) -> float:
        return float(self.radians)


# ---------------------------------------------------------------------------
# Distance and velocity
# ---------------------------------------------------------------------------


class Distance(NamedTuple):
    """A distance stored in metres.

    Attributes:
        meters: The distance [m].
    """

    meters: ArrayLike

    @classmethod
    def from_kilometers(cls, value: ArrayLike) -> Distance:
        return cls(value * 1e3)

    @classmethod
    def from_astronomical_units(cls, value: ArrayLike) -> Distance:
        return cls(value * 1.49597870700e11)

    def to_kilometers(self) -> ArrayLike:
        return self.meters / 1e3

    def __add__(self, other: Distance) -> Distance:
        return Distance(self.meters + other.meters)

    def __sub__(self, other: Distance) -> Distance:
        return Distance(self.meters - other.meters)

    def __neg__(self) -> Distance:
        return Distance(-self.meters)

    def __mul__(self, factor: ArrayLike) -> Distance:
        return Distance(self.meters * factor)

    __rmul__ = __mul__

    def __float__(self) -> float:
        return float(self.meters)


class Velocity(NamedTuple):
    """A speed stored in metres per second.

    Attributes:
        meters_per_second: The speed [m/s].
    """

    meters_per_second: ArrayLike

    @classmethod
    def from_kilometers_per_second(cls, value: ArrayLike) -> Velocity:
        return cls(value * 1e3)

    def to_kilometers_per_second(self) -> ArrayLike:
        return self.meters_per_second / 1e3

    def __add__(self, other: Velocity) -> Velocity:
        return Velocity(self.meters_per_second + other.meters_per_second)

    def __sub__(self, other: Velocity) -> Velocity:
        return Velocity(self.meters_per_second - other.meters_per_second)

    def __neg__(self) -> Velocity:
        return Velocity(-self.meters_per_second)

    def __mul__(self, factor: ArrayLike) -> Velocity:
        return Velocity(self.meters_per_second * factor)

    __rmul__ = __mul__

    def __float__(self) -> float:
        return float(self.meters_per_second)
