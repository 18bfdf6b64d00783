"""Reference frame identifiers.

A :class:`Frame` names one of the supported frames.  The classical
equinox-based frames (MOD, TOD, PEF) carry the IERS convention that
realizes them, and the IAU body-fixed frames carry their body.

Frame names parse case-insensitively::

    Frame.from_name("icrf")            # ICRF
    Frame.from_name("TOD(IERS2010)")   # True of Date, IERS 2010
    Frame.from_name("IAU_MOON")        # Moon body-fixed
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from orientax.bodies import Origin
from orientax.errors import NonBodyFixedFrameError, NonQuasiInertialFrameError, UnknownFrameError
from orientax.iers import ReferenceSystem


class FrameKind(enum.Enum):
    """The family a frame belongs to."""

    ICRF = "ICRF"
    CIRF = "CIRF"
    TIRF = "TIRF"
    ITRF = "ITRF"
    TEME = "TEME"
    MOD = "MOD"
    TOD = "TOD"
    PEF = "PEF"
    IAU = "IAU"


_EQUINOX_KINDS = (FrameKind.MOD, FrameKind.TOD, FrameKind.PEF)

_NAMES: dict[FrameKind, str] = {
    FrameKind.ICRF: "International Celestial Reference Frame",
    FrameKind.CIRF: "Celestial Intermediate Reference Frame",
    FrameKind.TIRF: "Terrestrial Intermediate Reference Frame",
    FrameKind.ITRF: "International Terrestrial Reference Frame",
    FrameKind.TEME: "True Equator Mean Equinox Frame",
    FrameKind.MOD: "Mean of Date Frame",
    FrameKind.TOD: "True of Date Frame",
    FrameKind.PEF: "Pseudo-Earth Fixed Frame",
}

_QUASI_INERTIAL = frozenset(
    {FrameKind.ICRF, FrameKind.CIRF, FrameKind.MOD, FrameKind.TOD, FrameKind.TEME}
)
_BODY_FIXED = frozenset({FrameKind.TIRF, FrameKind.ITRF, FrameKind.PEF, FrameKind.IAU})

_SYSTEM_ALIASES: dict[str, ReferenceSystem] = {
    "IERS2003": ReferenceSystem.IERS2003A,
}

_EQUINOX_PATTERN = re.compile(r"^(MOD|TOD|PEF)(?:\((.+)\))?$")


def _parse_system(name: str) -> ReferenceSystem:
    key = name.strip().upper()
    for system in ReferenceSystem:
        if key in (system.name, system.value.upper()):
            return system
    try:
        return _SYSTEM_ALIASES[key]
    except KeyError:
        raise ValueError(f"unknown reference system: {name}") from None


@dataclass(frozen=True)
class Frame:
    """A reference frame.

    Attributes:
        kind: Frame family.
        system: IERS convention of a MOD, TOD or PEF frame.
        body: Body of an IAU body-fixed frame.
    """

    kind: FrameKind
    system: ReferenceSystem | None = None
    body: Origin | None = None

    def __post_init__(self) -> None:
        if self.kind in _EQUINOX_KINDS and self.system is None:
            object.__setattr__(self, "system", ReferenceSystem.IERS1996)
        if self.kind is FrameKind.IAU and self.body is None:
            raise ValueError("an IAU frame needs a body")

    # -- constructors -------------------------------------------------------

    @classmethod
    def mod(cls, system: ReferenceSystem = ReferenceSystem.IERS1996) -> Frame:
        return cls(FrameKind.MOD, system=system)

    @classmethod
    def tod(cls, system: ReferenceSystem = ReferenceSystem.IERS1996) -> Frame:
        return cls(FrameKind.TOD, system=system)

    @classmethod
    def pef(cls, system: ReferenceSystem = ReferenceSystem.IERS1996) -> Frame:
        return cls(FrameKind.PEF, system=system)

    @classmethod
    def iau(cls, body: Origin) -> Frame:
        return cls(FrameKind.IAU, body=body)

    @classmethod
    def from_name(cls, name: str) -> Frame:
        """Parse a frame abbreviation.

        Accepts ``ICRF``, ``CIRF``, ``TIRF``, ``ITRF``, ``TEME``,
        ``MOD``/``TOD``/``PEF`` with an optional ``(system)`` suffix (IERS
        1996 when omitted) and ``IAU_<body>`` for bodies with rotational
        elements.

        Raises:
            UnknownFrameError: If *name* does not denote a supported frame.
        """
        key = name.strip().upper()
        try:
            return cls(FrameKind(key)) if key in _SIMPLE_KINDS else cls._parse_compound(key)
        except ValueError:
            raise UnknownFrameError(name) from None

    @classmethod
    def _parse_compound(cls, key: str) -> Frame:
        match = _EQUINOX_PATTERN.match(key)
        if match is not None:
            kind = FrameKind(match.group(1))
            system = ReferenceSystem.IERS1996 if match.group(2) is None else _parse_system(match.group(2))
            return cls(kind, system=system)
        prefix, _, body_name = key.partition("_")
        if prefix != "IAU" or not body_name:
            raise ValueError(key)
        body = Origin.from_name(body_name)
        if not body.has_rotational_elements:
            raise ValueError(key)
        return cls.iau(body)

    # -- properties ---------------------------------------------------------

    @property
    def name(self) -> str:
        """Descriptive name, e.g. ``"International Celestial Reference Frame"``."""
        if self.kind is FrameKind.IAU:
            body = self.body.title
            if self.body in (Origin.SUN, Origin.MOON):
                body = f"the {body}"
            return f"IAU Body-Fixed Reference Frame for {body}"
        return _NAMES[self.kind]

    @property
    def abbreviation(self) -> str:
        """Short name, e.g. ``"ICRF"``, ``"MOD(IERS1996)"`` or ``"IAU_MOON"``."""
        if self.kind is FrameKind.IAU:
            return "IAU_" + self.body.title.upper().replace(" ", "_").replace("-", "_")
        if self.kind in _EQUINOX_KINDS:
            return f"{self.kind.value}({self.system})"
        return self.kind.value

    @property
    def is_rotating(self) -> bool:
        return self.kind in _BODY_FIXED

    @property
    def is_equinox_based(self) -> bool:
        return self.kind in _EQUINOX_KINDS

    def try_quasi_inertial(self) -> None:
        """Raise unless this frame is (quasi-)inertial.

        Raises:
            NonQuasiInertialFrameError: For rotating frames.
        """
        if self.kind not in _QUASI_INERTIAL:
            raise NonQuasiInertialFrameError(self.abbreviation)

    def try_body_fixed(self) -> None:
        """Raise unless this frame is fixed to a body.

        Raises:
            NonBodyFixedFrameError: For inertial frames.
        """
        if self.kind not in _BODY_FIXED:
            raise NonBodyFixedFrameError(self.abbreviation)

    def __str__(self) -> str:
        return self.abbreviation


_SIMPLE_KINDS = frozenset(
    k.value for k in (FrameKind.ICRF, FrameKind.CIRF, FrameKind.TIRF, FrameKind.ITRF, FrameKind.TEME)
)

ICRF = Frame(FrameKind.ICRF)
"""International Celestial Reference Frame."""

CIRF = Frame(FrameKind.CIRF)
"""Celestial Intermediate Reference Frame."""

TIRF = Frame(FrameKind.TIRF)
"""Terrestrial Intermediate Reference Frame."""

ITRF = Frame(FrameKind.ITRF)
"""International Terrestrial Reference Frame."""

TEME = Frame(FrameKind.TEME)
"""True Equator Mean Equinox frame of the SGP4 propagator."""
