"""Earth Orientation Parameters (EOP) from IERS bulletins.

Parses the IERS ``finals`` products (CSV or fixed-width), interpolates
polar motion, UT1 and the celestial pole offsets, and converts between TAI
and UT1 for the time package.

Typical usage::

    from orientax.eop import load_default_eop
    from orientax.iers import ReferenceSystem
    eop = load_default_eop()
    pole = eop.polar_motion(60462.0)
    dxdy = eop.corrections(tai, ReferenceSystem.IERS2010)
"""

from orientax.eop._download import IERS_FINALS_2000A_URL, download_eop_file
from orientax.eop._interpolation import Akima, Lagrange
from orientax.eop._parsers import (
    merge_eop_frames,
    parse_csv_file,
    parse_fixed_width_file,
    parse_fixed_width_line,
    read_eop_file,
)
from orientax.eop._providers import (
    EopParser,
    EopProvider,
    eop_data_from_frame,
    load_cached_eop,
    load_default_eop,
    load_eop_from_file,
)
from orientax.eop._types import EopData, EopInterpolation, EopValues

__all__ = [
    "IERS_FINALS_2000A_URL",
    "Akima",
    "EopData",
    "EopInterpolation",
    "EopParser",
    "EopProvider",
    "EopValues",
    "Lagrange",
    "download_eop_file",
    "eop_data_from_frame",
    "load_cached_eop",
    "load_default_eop",
    "load_eop_from_file",
    "merge_eop_frames",
    "parse_csv_file",
    "parse_fixed_width_file",
    "parse_fixed_width_line",
    "read_eop_file",
]
