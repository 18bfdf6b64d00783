"""Solar-system bodies: NAIF identifiers, IAU rotational elements and
physical constants.

The rotational elements follow the IAU Working Group on Cartographic
Coordinates and Rotational Elements.  Each element is

    c0 + c1 * t/dt + c2 * (t/dt)**2 + sum_i c_i * f(theta0_i + theta1_i * T)

where ``t`` is TDB seconds since J2000, ``T`` is ``t`` in Julian centuries,
``dt`` is one day for the prime meridian and one Julian century for the
pole coordinates, and ``f`` is ``cos`` for the declination and ``sin``
otherwise.  All angles are returned in radians, rates in radians per
second.

Typical usage::

    from orientax.bodies import Origin
    ra, dec, w = Origin.JUPITER.rotational_elements(0.0)
"""

from __future__ import annotations

import enum
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import DEG2RAD, SECONDS_PER_DAY, SECONDS_PER_JULIAN_CENTURY
from orientax.errors import UndefinedOriginPropertyError

_DAY = float(SECONDS_PER_DAY)
"""Day [s], as a float so that squared divisors stay in floating point."""

_CENTURY = float(SECONDS_PER_JULIAN_CENTURY)
"""Julian century [s], as a float."""

# ---------------------------------------------------------------------------
# Element tables
# ---------------------------------------------------------------------------


class _Element(NamedTuple):
    """Polynomial and periodic coefficients of one element [deg]."""

    c0: float
    c1: float = 0.0
    c2: float = 0.0
    c: tuple[float, ...] = ()


class _Elements(NamedTuple):
    """Right ascension, declination and prime meridian of one body.

    ``theta0`` [deg] and ``theta1`` [deg/century] define the periodic
    arguments shared by the three elements.
    """

    ra: _Element
    dec: _Element
    pm: _Element
    theta0: tuple[float, ...] = ()
    theta1: tuple[float, ...] = ()


_MOON_THETA0 = (
    125.045, 250.089, 260.008, 176.625, 357.529, 311.589, 134.963,
    276.617, 34.226, 15.134, 119.743, 239.961, 25.053,
)
_MOON_THETA1 = (
    -1935.5364525, -3871.072905, 475263.3328725, 487269.629985,
    35999.0509575, 964468.49931, 477198.869325, 12006.300765,
    63863.5132425, -5806.6093575, 131.84064, 6003.1503825, 473327.79642,
)

_JUPITER_THETA0 = (
    73.32, 24.62, 283.9, 355.8, 119.9, 229.8, 352.25, 113.35, 146.64,
    49.24, 99.360714, 175.895369, 300.323162, 114.012305, 49.511251,
)
_JUPITER_THETA1 = (
    91472.9, 45137.2, 4850.7, 1191.3, 262.1, 64.3, 2382.6, 6070.0,
    182945.8, 90274.4, 4850.4046, 1191.9605, 262.5475, 6070.2476, 64.3,
)

_ELEMENTS: dict[int, _Elements] = {
    # Sun
    10: _Elements(
        ra=_Element(286.13),
        dec=_Element(63.87),
        pm=_Element(84.176, 14.1844),
    ),
    # Venus
    299: _Elements(
        ra=_Element(272.76),
        dec=_Element(67.16),
        pm=_Element(160.20, -1.4813688),
    ),
    # Earth
    399: _Elements(
        ra=_Element(0.0, -0.641),
        dec=_Element(90.0, -0.557),
        pm=_Element(190.147, 360.9856235),
    ),
    # Moon
    301: _Elements(
        ra=_Element(
            269.9949,
            0.0031,
            c=(-3.8787, -0.1204, 0.07, -0.0172, 0.0, 0.0072, 0.0, 0.0, 0.0, -0.0052, 0.0, 0.0, 0.0043),
        ),
        dec=_Element(
            66.5392,
            0.013,
            c=(1.5419, 0.0239, -0.0278, 0.0068, 0.0, -0.0029, 0.0009, 0.0, 0.0, 0.0008, 0.0, 0.0, -0.0009),
        ),
        pm=_Element(
            38.3213,
            13.17635815,
            -1.4e-12,
            c=(
                3.561, 0.1208, -0.0642, 0.0158, 0.0252, -0.0066, -0.0047,
                -0.0046, 0.0028, 0.0052, 0.004, 0.0019, -0.0044,
            ),
        ),
        theta0=_MOON_THETA0,
        theta1=_MOON_THETA1,
    ),
    # Jupiter
    599: _Elements(
        ra=_Element(
            268.056595,
            -0.006499,
            c=(0.0,) * 10 + (0.000117, 0.000938, 0.001432, 0.00003, 0.00215),
        ),
        dec=_Element(
            64.495303,
            0.002413,
            c=(0.0,) * 10 + (0.00005, 0.000404, 0.000617, -0.000013, 0.000926),
        ),
        pm=_Element(284.95, 870.536),
        theta0=_JUPITER_THETA0,
        theta1=_JUPITER_THETA1,
    ),
    # Saturn
    699: _Elements(
        ra=_Element(40.589, -0.036),
        dec=_Element(83.537, -0.004),
        pm=_Element(38.90, 810.7939024),
    ),
    # Uranus
    799: _Elements(
        ra=_Element(257.311),
        dec=_Element(-15.175),
        pm=_Element(203.81, -501.1600928),
    ),
    # Neptune
    899: _Elements(
        ra=_Element(299.36, c=(0.70,)),
        dec=_Element(43.46, c=(-0.51,)),
        pm=_Element(249.978, 541.1397757, c=(-0.48,)),
        theta0=(357.85,),
        theta1=(52.316,),
    ),
    # Pluto
    999: _Elements(
        ra=_Element(132.993),
        dec=_Element(-6.163),
        pm=_Element(302.695, 56.3625225),
    ),
}

# Radii [km]: (equatorial, polar, mean)
_RADII: dict[int, tuple[float, float, float]] = {
    10: (695700.0, 695700.0, 695700.0),
    399: (6378.1366, 6356.7519, 6371.0084),
    301: (1738.1, 1736.0, 1737.4),
}

# Gravitational parameters [km^3/s^2]
_GM: dict[int, float] = {
    10: 132712440041.27942,
    399: 398600.43550702266,
    301: 4902.800118,
}


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _evaluate(
    element: _Element, theta: Array, seconds: Array, dt: float, periodic
) -> Array:
    x = seconds / dt
    value = element.c0 + element.c1 * x + element.c2 * x**2
    if element.c:
        c = jnp.asarray(element.c, dtype=get_dtype())
        value = value + jnp.sum(c * periodic(theta))
    return value * DEG2RAD


def _evaluate_rate(
    element: _Element, theta: Array, theta_rate: Array, seconds: Array, dt: float, periodic
) -> Array:
    rate = element.c1 / dt + 2.0 * element.c2 * seconds / dt**2
    if element.c:
        c = jnp.asarray(element.c, dtype=get_dtype())
        rate = rate + jnp.sum(c * theta_rate * periodic(theta))
    return rate * DEG2RAD


def _neg_sin(x: Array) -> Array:
    return -jnp.sin(x)


class Origin(enum.Enum):
    """A solar-system body or barycenter, valued by its NAIF identifier."""

    SOLAR_SYSTEM_BARYCENTER = 0
    MERCURY_BARYCENTER = 1
    VENUS_BARYCENTER = 2
    EARTH_BARYCENTER = 3
    MARS_BARYCENTER = 4
    JUPITER_BARYCENTER = 5
    SATURN_BARYCENTER = 6
    URANUS_BARYCENTER = 7
    NEPTUNE_BARYCENTER = 8
    PLUTO_BARYCENTER = 9
    SUN = 10
    MERCURY = 199
    VENUS = 299
    MOON = 301
    EARTH = 399
    MARS = 499
    JUPITER = 599
    SATURN = 699
    URANUS = 799
    NEPTUNE = 899
    PLUTO = 999

    @classmethod
    def from_name(cls, name: str) -> Origin:
        """Look up a body by name, case-insensitively.

        Spaces, dashes and underscores are interchangeable, so
        ``"Solar System Barycenter"`` and ``"SOLAR_SYSTEM_BARYCENTER"``
        name the same origin.

        Raises:
            ValueError: If no body has that name.
        """
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown origin: {name}") from None

    @classmethod
    def from_naif_id(cls, naif_id: int) -> Origin:
        return cls(naif_id)

    @property
    def naif_id(self) -> int:
        return self.value

    @property
    def title(self) -> str:
        """Display name, e.g. ``"Solar System Barycenter"``."""
        return self.name.replace("_", " ").title()

    def __str__(self) -> str:
        return self.title

    # -- rotational elements ------------------------------------------------

    @property
    def has_rotational_elements(self) -> bool:
        return self.value in _ELEMENTS

    def _elements(self) -> _Elements:
        try:
            return _ELEMENTS[self.value]
        except KeyError:
            raise UndefinedOriginPropertyError(self.title, "rotational elements") from None

    def rotational_elements(self, seconds: ArrayLike) -> tuple[Array, Array, Array]:
        """Right ascension and declination of the north pole and the prime
        meridian angle.

        Args:
            seconds: TDB seconds since J2000.

        Returns:
            Tuple ``(ra, dec, w)`` [rad].

        Raises:
            UndefinedOriginPropertyError: If the body has no IAU elements.
        """
        el = self._elements()
        seconds = jnp.asarray(seconds, dtype=get_dtype())
        theta = self._theta(el, seconds)
        ra = _evaluate(el.ra, theta, seconds, _CENTURY, jnp.sin)
        dec = _evaluate(el.dec, theta, seconds, _CENTURY, jnp.cos)
        w = _evaluate(el.pm, theta, seconds, _DAY, jnp.sin)
        return ra, dec, w

    def rotational_element_rates(self, seconds: ArrayLike) -> tuple[Array, Array, Array]:
        """Time derivatives of :meth:`rotational_elements` [rad/s].

        Raises:
            UndefinedOriginPropertyError: If the body has no IAU elements.
        """
        el = self._elements()
        seconds = jnp.asarray(seconds, dtype=get_dtype())
        theta = self._theta(el, seconds)
        theta_rate = jnp.asarray(el.theta1, dtype=get_dtype()) * DEG2RAD / _CENTURY
        ra = _evaluate_rate(el.ra, theta, theta_rate, seconds, _CENTURY, jnp.cos)
        dec = _evaluate_rate(el.dec, theta, theta_rate, seconds, _CENTURY, _neg_sin)
        w = _evaluate_rate(el.pm, theta, theta_rate, seconds, _DAY, jnp.cos)
        return ra, dec, w

    @staticmethod
    def _theta(el: _Elements, seconds: Array) -> Array:
        theta0 = jnp.asarray(el.theta0, dtype=get_dtype())
        theta1 = jnp.asarray(el.theta1, dtype=get_dtype())
        return (theta0 + theta1 * seconds / _CENTURY) * DEG2RAD

    # -- physical constants -------------------------------------------------

    def _radius(self, index: int, prop: str) -> float:
        try:
            return _RADII[self.value][index]
        except KeyError:
            raise UndefinedOriginPropertyError(self.title, prop) from None

    @property
    def equatorial_radius(self) -> float:
        """Equatorial radius [km]."""
        return self._radius(0, "equatorial radius")

    @property
    def polar_radius(self) -> float:
        """Polar radius [km]."""
        return self._radius(1, "polar radius")

    @property
    def mean_radius(self) -> float:
        """Mean radius [km]."""
        return self._radius(2, "mean radius")

    @property
    def gravitational_parameter(self) -> float:
        """Gravitational parameter [km^3/s^2]."""
        try:
            return _GM[self.value]
        except KeyError:
            raise UndefinedOriginPropertyError(self.title, "gravitational parameter") from None
