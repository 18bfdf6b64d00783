"""Type definitions for Earth Orientation Parameters (EOP).

- :class:`EopData`: Immutable container holding the tabulated EOP arrays.
- :class:`EopValues`: The interpolated parameters at one epoch.
- :class:`EopInterpolation`: The interpolation scheme used by a provider.

Both records are :class:`~typing.NamedTuple` s, which JAX treats as
pytrees.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax import Array


class EopData(NamedTuple):
    """Tabulated Earth Orientation Parameters.

    Each table covers the contiguous valid prefix of its input columns, so
    the nutation tables can be shorter than the polar motion table.
    Nutation tables of a model that was not loaded are ``None``.

    Attributes:
        mjd: UTC Modified Julian Dates of the polar motion and UT1 rows,
            shape ``(N,)``.
        x_pole: Polar motion x-component [rad], shape ``(N,)``.
        y_pole: Polar motion y-component [rad], shape ``(N,)``.
        ut1_utc: UT1-UTC [s], shape ``(N,)``.
        ut1_tai: UT1-TAI [s], shape ``(N,)``. Continuous across leap seconds.
        mjd_iau1980: Dates of the IAU 1980 nutation rows, shape ``(M,)``.
        dpsi: Nutation correction in longitude [rad], shape ``(M,)``.
        deps: Nutation correction in obliquity [rad], shape ``(M,)``.
        mjd_iau2000: Dates of the IAU 2000 nutation rows, shape ``(K,)``.
        dx: Celestial pole offset X [rad], shape ``(K,)``.
        dy: Celestial pole offset Y [rad], shape ``(K,)``.
    """

    mjd: Array
    x_pole: Array
    y_pole: Array
    ut1_utc: Array
    ut1_tai: Array
    mjd_iau1980: Array | None = None
    dpsi: Array | None = None
    deps: Array | None = None
    mjd_iau2000: Array | None = None
    dx: Array | None = None
    dy: Array | None = None

    @property
    def has_iau1980(self) -> bool:
        return self.dpsi is not None

    @property
    def has_iau2000(self) -> bool:
        return self.dx is not None


class EopValues(NamedTuple):
    """Earth Orientation Parameters interpolated at one epoch.

    Attributes:
        x_pole: Polar motion x-component [rad].
        y_pole: Polar motion y-component [rad].
        ut1_utc: UT1-UTC [s].
        dx: Celestial pole offset X [rad], ``None`` outside the IAU 2000 table.
        dy: Celestial pole offset Y [rad], ``None`` outside the IAU 2000 table.
    """

    x_pole: Array
    y_pole: Array
    ut1_utc: Array
    dx: Array | None
    dy: Array | None


class EopInterpolation(enum.Enum):
    """Interpolation scheme for EOP queries.

    Attributes:
        AKIMA: Akima cubic spline, robust against outliers.
        LAGRANGE: Four-point Lagrange polynomial, as recommended by the IERS
            for polar motion and UT1.
    """

    AKIMA = "akima"
    LAGRANGE = "lagrange"
