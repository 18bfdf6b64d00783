"""Reference frames and the rotations between them.

This sub-module provides:

- **Frames**: :class:`Frame` identifiers for the ICRF, the CIO-based
  intermediate frames (CIRF, TIRF), the ITRF, TEME, the equinox-based
  frames of each IERS convention (MOD, TOD, PEF) and the IAU body-fixed
  frames.
- **Rotations**: :class:`Rotation` pairs of a direction-cosine matrix and
  its time derivative, and :func:`rotation` to build one between any two
  frames.
- **Providers**: :class:`RotationProvider`, the source of UT1, polar
  motion and celestial pole offsets.  :class:`~orientax.eop.EopProvider`
  is one.
"""

from orientax.frames._frames import CIRF, ICRF, ITRF, TEME, TIRF, Frame, FrameKind
from orientax.frames._iau import icrf_to_iau
from orientax.frames._providers import DefaultRotationProvider, RotationProvider
from orientax.frames._rotation import Rotation
from orientax.frames._transforms import (
    cirf_to_tirf,
    icrf_to_cirf,
    icrf_to_mod,
    mod_to_tod,
    pef_to_itrf,
    rotation,
    route,
    tirf_to_itrf,
    tod_to_pef,
    tod_to_teme,
)

__all__ = [
    "CIRF",
    "DefaultRotationProvider",
    "Frame",
    "FrameKind",
    "ICRF",
    "ITRF",
    "Rotation",
    "RotationProvider",
    "TEME",
    "TIRF",
    "cirf_to_tirf",
    "icrf_to_cirf",
    "icrf_to_iau",
    "icrf_to_mod",
    "mod_to_tod",
    "pef_to_itrf",
    "rotation",
    "route",
    "tirf_to_itrf",
    "tod_to_pef",
    "tod_to_teme",
]
