"""IAU/IERS Earth orientation models.

Series evaluators for precession, nutation, the CIP and CIO, sidereal time
and polar motion, and the :class:`ReferenceSystem` that groups them by IERS
convention.  Time arguments of the low-level functions are Julian
centuries (``t``) or days (``days``) since J2000.0, as in SOFA.

Typical usage::

    from orientax.iers import CipCoords, ReferenceSystem, cio_locator_iau2006
    xy = CipCoords.iau2006(t)
    s = cio_locator_iau2006(t, xy.x, xy.y)
    npb = ReferenceSystem.IERS2003A.bias_precession_matrix(tt)
"""

from orientax.iers._cio import cio_locator_iau2006
from orientax.iers._cip import CipCoords, cip_coords_iau2006
from orientax.iers._earth_rotation import (
    earth_rotation_angle,
    equation_of_the_equinoxes_complementary_terms,
    equation_of_the_equinoxes_iau1994,
    equation_of_the_equinoxes_iau2000,
    equation_of_the_equinoxes_iau2000a,
    equation_of_the_equinoxes_iau2000b,
    equation_of_the_equinoxes_iau2006a,
    gmst_iau1982,
    gmst_iau2000,
    gmst_iau2006,
)
from orientax.iers._fundamental import (
    fundamental_args_iers03,
    luni_solar_args_mhb2000,
    planetary_args_mhb2000,
)
from orientax.iers._nutation import Nutation
from orientax.iers._obliquity import mean_obliquity_iau1980, mean_obliquity_iau2006
from orientax.iers._polar_motion import polar_motion_matrix, tio_locator
from orientax.iers._precession import (
    PrecessionCorrectionsIau2000,
    PrecessionIau1976,
    PrecessionIau2000,
    PrecessionIau2006,
    frame_bias,
)
from orientax.iers._systems import Corrections, Iau2000Model, PoleCoords, ReferenceSystem

__all__ = [
    "CipCoords",
    "Corrections",
    "Iau2000Model",
    "Nutation",
    "PoleCoords",
    "PrecessionCorrectionsIau2000",
    "PrecessionIau1976",
    "PrecessionIau2000",
    "PrecessionIau2006",
    "ReferenceSystem",
    "cio_locator_iau2006",
    "cip_coords_iau2006",
    "earth_rotation_angle",
    "equation_of_the_equinoxes_complementary_terms",
    "equation_of_the_equinoxes_iau1994",
    "equation_of_the_equinoxes_iau2000",
    "equation_of_the_equinoxes_iau2000a",
    "equation_of_the_equinoxes_iau2000b",
    "equation_of_the_equinoxes_iau2006a",
    "frame_bias",
    "fundamental_args_iers03",
    "gmst_iau1982",
    "gmst_iau2000",
    "gmst_iau2006",
    "luni_solar_args_mhb2000",
    "mean_obliquity_iau1980",
    "mean_obliquity_iau2006",
    "planetary_args_mhb2000",
    "polar_motion_matrix",
    "tio_locator",
]
