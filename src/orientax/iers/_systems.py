"""IERS reference systems.

A :class:`ReferenceSystem` selects the precession, nutation, obliquity,
sidereal time and polar motion models of one IERS convention.  The
classical (equinox-based) frame rotations MOD, TOD and PEF are built from
these.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orientax.config import get_dtype
from orientax.constants import TWO_PI
from orientax.iers._earth_rotation import (
    equation_of_the_equinoxes_iau1994,
    equation_of_the_equinoxes_iau2000,
    equation_of_the_equinoxes_iau2000a,
    equation_of_the_equinoxes_iau2000b,
    equation_of_the_equinoxes_iau2006a,
    gmst_iau1982,
    gmst_iau2000,
    gmst_iau2006,
)
from orientax.iers._nutation import Nutation
from orientax.iers._obliquity import mean_obliquity_iau1980, mean_obliquity_iau2006
from orientax.iers._polar_motion import polar_motion_matrix, tio_locator
from orientax.iers._precession import (
    PrecessionAngles,
    PrecessionIau1976,
    PrecessionIau2000,
    PrecessionIau2006,
)
from orientax.rotation_matrices import Rz
from orientax.time import TimeScale

if TYPE_CHECKING:
    from orientax.time import Time


# ---------------------------------------------------------------------------
# EOP-derived inputs
# ---------------------------------------------------------------------------


class Corrections(NamedTuple):
    """Celestial pole offsets [rad].

    For the IERS 1996 conventions the components are the nutation
    corrections (dpsi, deps); for the later conventions they are the CIP
    offsets (dX, dY).
    """

    x: ArrayLike = 0.0
    y: ArrayLike = 0.0

    @classmethod
    def zero(cls) -> Corrections:
        return cls(0.0, 0.0)

    def is_zero(self) -> bool:
        return bool(self.x == 0.0) and bool(self.y == 0.0)


class PoleCoords(NamedTuple):
    """Coordinates of the CIP with respect to the ITRS [rad]."""

    xp: ArrayLike = 0.0
    yp: ArrayLike = 0.0

    def is_zero(self) -> bool:
        return bool(self.xp == 0.0) and bool(self.yp == 0.0)


# ---------------------------------------------------------------------------
# Reference systems
# ---------------------------------------------------------------------------


class Iau2000Model(enum.Enum):
    """Variant of the IAU 2000 nutation used by the IERS 2003 conventions."""

    A = "IAU2000A"
    B = "IAU2000B"

    def __str__(self) -> str:
        return self.value


class ReferenceSystem(enum.Enum):
    """The IERS conventions.

    Attributes:
        IERS1996: IAU 1976 precession, IAU 1980 nutation, GMST 1982.
        IERS2003A: IAU 2000 precession, IAU 2000A nutation.
        IERS2003B: IAU 2000 precession, IAU 2000B nutation.
        IERS2010: IAU 2006 precession, IAU 2006/2000A nutation.
    """

    IERS1996 = "IERS1996"
    IERS2003A = "IERS2003/IAU2000A"
    IERS2003B = "IERS2003/IAU2000B"
    IERS2010 = "IERS2010"

    @classmethod
    def iers2003(cls, model: Iau2000Model = Iau2000Model.A) -> ReferenceSystem:
        if model is Iau2000Model.B:
            return cls.IERS2003B
        return cls.IERS2003A

    @property
    def model(self) -> Iau2000Model | None:
        """The IAU 2000 nutation variant, for the IERS 2003 conventions."""
        if self is ReferenceSystem.IERS2003A:
            return Iau2000Model.A
        if self is ReferenceSystem.IERS2003B:
            return Iau2000Model.B
        return None

    @property
    def is_iers2003(self) -> bool:
        return self.model is not None

    def __str__(self) -> str:
        return self.value

    # -- precession and obliquity -------------------------------------------

    def precession(self, tt: Time) -> PrecessionAngles:
        t = tt.centuries_since_j2000()
        if self is ReferenceSystem.IERS1996:
            return PrecessionIau1976.from_centuries(t)
        if self is ReferenceSystem.IERS2010:
            return PrecessionIau2006.from_centuries(t)
        return PrecessionIau2000.from_centuries(t)

    def bias_precession_matrix(self, tt: Time) -> Array:
        """Rotation from the ICRF to the mean equator and equinox of date."""
        return self.precession(tt).bias_precession_matrix()

    def mean_obliquity(self, tt: Time) -> Array:
        t = tt.centuries_since_j2000()
        if self is ReferenceSystem.IERS2010:
            return mean_obliquity_iau2006(t)
        return mean_obliquity_iau1980(t)

    # -- nutation -----------------------------------------------------------

    def nutation(self, tdb: Time) -> Nutation:
        t = tdb.centuries_since_j2000()
        if self is ReferenceSystem.IERS1996:
            return Nutation.iau1980(t)
        if self is ReferenceSystem.IERS2003A:
            return Nutation.iau2000a(t)
        if self is ReferenceSystem.IERS2003B:
            return Nutation.iau2000b(t)
        return Nutation.iau2006a(t)

    def nutation_matrix(self, tdb: Time, corrections: Corrections | None = None) -> Array:
        """Rotation from the mean to the true equator and equinox of date.

        For the IERS 2003 and 2010 conventions the CIP offsets are converted
        to nutation corrections and applied.  The IERS 1996 matrix is the
        uncorrected IAU 1980 model.

        Args:
            tdb: TDB time.
            corrections: Celestial pole offsets, zero when omitted.

        Returns:
            3x3 rotation matrix.
        """
        corrections = Corrections.zero() if corrections is None else corrections
        tt = tdb.with_scale(TimeScale.TT)
        epsa = self.mean_obliquity(tt)
        nut = self.nutation(tdb)
        if self is not ReferenceSystem.IERS1996:
            rpb = self.bias_precession_matrix(tt)
            nut = nut + self.ecliptic_corrections(corrections, nut, epsa, rpb)
        return nut.nutation_matrix(epsa)

    def ecliptic_corrections(
        self,
        corrections: Corrections,
        nut: Nutation,
        epsa: ArrayLike,
        rpb: Array,
    ) -> Corrections:
        """Convert celestial pole offsets to corrections in dpsi, deps.

        Args:
            corrections: Offsets in the basis of this system.
            nut: Nutation of date.
            epsa: Mean obliquity of date [rad].
            rpb: Bias-precession matrix of date.

        Returns:
            Corrections (ddpsi, ddeps) [rad].
        """
        if self is ReferenceSystem.IERS1996:
            return corrections
        rbpn = nut.nutation_matrix(epsa) @ rpb
        v = rbpn @ jnp.array([corrections.x, corrections.y, 0.0], dtype=get_dtype())
        return Corrections(v[0] / jnp.sin(epsa), v[1])

    # -- sidereal time ------------------------------------------------------

    def greenwich_mean_sidereal_time(self, tt: Time, ut1: Time) -> Array:
        days = ut1.days_since_j2000()
        if self is ReferenceSystem.IERS1996:
            return gmst_iau1982(days)
        if self is ReferenceSystem.IERS2010:
            return gmst_iau2006(days, tt.centuries_since_j2000())
        return gmst_iau2000(days, tt.centuries_since_j2000())

    def greenwich_apparent_sidereal_time(
        self,
        tt: Time,
        ut1: Time,
        corrections: Corrections | None = None,
    ) -> Array:
        """Greenwich apparent sidereal time.

        Args:
            tt: TT time.
            ut1: UT1 time.
            corrections: Celestial pole offsets, zero when omitted.

        Returns:
            GAST in radians (0 to 2*pi).
        """
        corrections = Corrections.zero() if corrections is None else corrections
        gmst = self.greenwich_mean_sidereal_time(tt, ut1)
        t = tt.centuries_since_j2000()

        if corrections.is_zero():
            if self is ReferenceSystem.IERS1996:
                ee = equation_of_the_equinoxes_iau1994(ut1.centuries_since_j2000())
            elif self is ReferenceSystem.IERS2003A:
                ee = equation_of_the_equinoxes_iau2000a(t)
            elif self is ReferenceSystem.IERS2003B:
                ee = equation_of_the_equinoxes_iau2000b(t)
            else:
                ee = equation_of_the_equinoxes_iau2006a(t)
            return jnp.mod(gmst + ee, TWO_PI)

        tdb = tt.with_scale(TimeScale.TDB)
        epsa = self.mean_obliquity(tt)
        nut = self.nutation(tdb)
        rpb = self.bias_precession_matrix(tt)
        ecliptic = self.ecliptic_corrections(corrections, nut, epsa, rpb)
        if self is ReferenceSystem.IERS1996:
            ee = equation_of_the_equinoxes_iau1994(t) + jnp.cos(epsa) * ecliptic.x
        else:
            ee = equation_of_the_equinoxes_iau2000(t, epsa, (nut + ecliptic).dpsi)
        return jnp.mod(gmst + ee, TWO_PI)

    def earth_rotation(self, tt: Time, ut1: Time, corrections: Corrections | None = None) -> Array:
        """Rotation from the true equator and equinox of date to the PEF."""
        return Rz(self.greenwich_apparent_sidereal_time(tt, ut1, corrections))

    # -- polar motion -------------------------------------------------------

    def polar_motion_matrix(self, tt: Time, pole: PoleCoords) -> Array:
        """Rotation from the PEF (or TIRF) to the ITRF.

        Returns the identity when both pole coordinates are zero.
        """
        if pole.is_zero():
            return jnp.eye(3, dtype=get_dtype())
        if self is ReferenceSystem.IERS1996:
            return polar_motion_matrix(pole.xp, pole.yp)
        return polar_motion_matrix(pole.xp, pole.yp, tio_locator(tt.centuries_since_j2000()))

