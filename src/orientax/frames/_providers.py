"""Providers of the Earth orientation inputs of frame rotations."""

from __future__ import annotations

from orientax.iers import Corrections, PoleCoords, ReferenceSystem
from orientax.time import OffsetProvider, Time


class RotationProvider(OffsetProvider):
    """Time offsets plus the Earth orientation inputs of frame rotations.

    The base implementation has no Earth orientation data: conversions to
    UT1 raise :class:`~orientax.errors.MissingEopProviderError`, the
    celestial pole offsets are zero and the pole sits at the origin.
    :class:`~orientax.eop.EopProvider` overrides all three.
    """

    def corrections(self, time: Time, system: ReferenceSystem) -> Corrections:
        """Celestial pole offsets at *time* in the basis of *system*."""
        return Corrections.zero()

    def pole_coords(self, time: Time) -> PoleCoords:
        """Polar motion at *time*."""
        return PoleCoords()


class DefaultRotationProvider(RotationProvider):
    """Rotation provider without Earth orientation data."""
