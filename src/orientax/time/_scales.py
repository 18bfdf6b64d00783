"""Continuous astronomical time scales."""

from __future__ import annotations

import enum

from orientax.errors import UnknownTimeScaleError


class TimeScale(enum.Enum):
    """The six continuous time scales.

    Attributes:
        TAI: International Atomic Time.
        TCB: Barycentric Coordinate Time.
        TCG: Geocentric Coordinate Time.
        TDB: Barycentric Dynamical Time.
        TT: Terrestrial Time.
        UT1: Universal Time, tied to the rotation of the Earth.
    """

    TAI = "TAI"
    TCB = "TCB"
    TCG = "TCG"
    TDB = "TDB"
    TT = "TT"
    UT1 = "UT1"

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> TimeScale:
        """Parse a case-insensitive abbreviation such as ``"tdb"``.

        Raises:
            UnknownTimeScaleError: If the abbreviation is not recognised.
        """
        try:
            return cls(abbreviation.strip().upper())
        except ValueError:
            raise UnknownTimeScaleError(abbreviation) from None

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def full_name(self) -> str:
        return _FULL_NAMES[self]

    def __str__(self) -> str:
        return self.value


_FULL_NAMES = {
    TimeScale.TAI: "International Atomic Time",
    TimeScale.TCB: "Barycentric Coordinate Time",
    TimeScale.TCG: "Geocentric Coordinate Time",
    TimeScale.TDB: "Barycentric Dynamical Time",
    TimeScale.TT: "Terrestrial Time",
    TimeScale.UT1: "Universal Time",
}
