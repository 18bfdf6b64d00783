"""
orientax provides time scales, Earth orientation models and reference frame rotations implemented in JAX.
"""

from .config import set_dtype, get_dtype

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    MAS2RAD,
    TWO_PI,
    J2000_JD,
    JD_MJD_OFFSET,
    MJD2000,
    SECONDS_PER_DAY,
    SECONDS_PER_JULIAN_CENTURY,
    ROTATION_RATE_EARTH,
)

from .rotation_matrices import (
    Rx,
    Ry,
    Rz,
)

from .units import (
    Angle,
    Distance,
    Velocity,
)

from .time import (
    Time,
    TimeDelta,
    TimeScale,
    Utc,
    DefaultOffsetProvider,
    BuiltinLeapSeconds,
)

from .iers import (
    ReferenceSystem,
    Iau2000Model,
    Corrections,
    PoleCoords,
)

from .bodies import Origin

from .frames import (
    Frame,
    Rotation,
    RotationProvider,
    rotation,
)

from .eop import (
    EopProvider,
    load_default_eop,
    load_cached_eop,
)

__all__ = [
    # Config
    "set_dtype",
    "get_dtype",
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "MAS2RAD",
    "TWO_PI",
    "J2000_JD",
    "JD_MJD_OFFSET",
    "MJD2000",
    "SECONDS_PER_DAY",
    "SECONDS_PER_JULIAN_CENTURY",
    "ROTATION_RATE_EARTH",
    # Rotation matrices
    "Rx",
    "Ry",
    "Rz",
    # Units
    "Angle",
    "Distance",
    "Velocity",
    # Time
    "Time",
    "TimeDelta",
    "TimeScale",
    "Utc",
    "DefaultOffsetProvider",
    "BuiltinLeapSeconds",
    # IERS
    "ReferenceSystem",
    "Iau2000Model",
    "Corrections",
    "PoleCoords",
    # Bodies
    "Origin",
    # Frames
    "Frame",
    "Rotation",
    "RotationProvider",
    "rotation",
    # EOP
    "EopProvider",
    "load_default_eop",
    "load_cached_eop",
]
