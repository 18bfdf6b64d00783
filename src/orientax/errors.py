"""Exception types raised by orientax.

All domain errors derive from :class:`ValueError` so callers can catch
either the specific class or the built-in base.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class SubsecondError(ValueError):
    """Raised when a fractional second lies outside ``[0, 1)``."""

    def __init__(self, value: float) -> None:
        super().__init__(f"subsecond must be in the range [0, 1) but was {value}")
        self.value = value


class TimeDeltaError(ValueError):
    """Raised when a time delta cannot be built from a non-finite or out-of-range value."""


class DateError(ValueError):
    """Raised for invalid calendar dates or malformed ISO dates."""


class TimeOfDayError(ValueError):
    """Raised for invalid hour, minute or second values or malformed ISO times."""


class UnknownTimeScaleError(ValueError):
    """Raised when a time scale abbreviation is not recognised."""

    def __init__(self, abbreviation: str) -> None:
        super().__init__(f"unknown time scale: {abbreviation}")
        self.abbreviation = abbreviation


class MissingEopProviderError(ValueError):
    """Raised when a UT1 conversion is requested without an EOP provider."""

    def __init__(self) -> None:
        super().__init__("a UT1-TAI offset provider is required for UT1 conversions")


# ---------------------------------------------------------------------------
# UTC and leap seconds
# ---------------------------------------------------------------------------


class UtcError(ValueError):
    """Raised for invalid UTC inputs."""


class UtcUndefinedError(UtcError):
    """Raised for instants before 1960-01-01, where UTC is undefined."""

    def __init__(self) -> None:
        super().__init__("UTC is not defined for dates before 1960-01-01")


class NonLeapSecondDateError(UtcError):
    """Raised when second 60 is used on a date without a leap second."""

    def __init__(self, date) -> None:
        super().__init__(f"no leap second on {date}")
        self.date = date


class LeapSecondsKernelError(ValueError):
    """Raised when a SPICE leap-second kernel cannot be parsed."""


# ---------------------------------------------------------------------------
# Earth orientation parameters
# ---------------------------------------------------------------------------


class EopError(ValueError):
    """Base class for EOP lookup errors."""


class EopParserError(EopError):
    """Raised when EOP input files cannot be parsed or merged."""


class ExtrapolatedValueError(EopError):
    """Raised when an EOP query lies outside the tabulated range."""

    def __init__(self, value: float, first: float, last: float) -> None:
        super().__init__(
            f"value {value} is outside the EOP data range [{first}, {last}]"
        )
        self.value = value
        self.first = first
        self.last = last


class MissingIau1980Error(EopError):
    """Raised when IAU1980 nutation corrections are requested but not loaded."""

    def __init__(self) -> None:
        super().__init__("IAU1980 nutation corrections (dpsi, deps) are not available")


class MissingIau2000Error(EopError):
    """Raised when IAU2000 nutation corrections are requested but not loaded."""

    def __init__(self) -> None:
        super().__init__("IAU2000 nutation corrections (dx, dy) are not available")


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------


class NonQuasiInertialFrameError(ValueError):
    """Raised when a quasi-inertial frame is required."""

    def __init__(self, frame: str) -> None:
        super().__init__(f"{frame} is not a quasi-inertial frame")
        self.frame = frame


class NonBodyFixedFrameError(ValueError):
    """Raised when a body-fixed frame is required."""

    def __init__(self, frame: str) -> None:
        super().__init__(f"{frame} is not a body-fixed frame")
        self.frame = frame


class UnknownFrameError(ValueError):
    """Raised when a frame name or abbreviation is not recognised."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown frame: {name}")
        self.name = name


class UndefinedOriginPropertyError(ValueError):
    """Raised when an origin lacks a requested property, e.g. rotational elements."""

    def __init__(self, origin: str, prop: str) -> None:
        super().__init__(f"undefined property '{prop}' for origin '{origin}'")
        self.origin = origin
        self.prop = prop


class IncompatibleReferenceSystemsError(ValueError):
    """Raised when frames of different IERS conventions are combined."""


class RotationError(ValueError):
    """Raised when a frame rotation cannot be computed.

    The originating time-offset or EOP error is attached as ``__cause__``.

    Attributes:
        kind: ``"offset"`` or ``"eop"``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind} error: {message}")
        self.kind = kind
