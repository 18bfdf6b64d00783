"""EOP providers and loaders.

- :class:`EopProvider`: Interpolates polar motion, UT1 and the nutation
  corrections and serves the UT1 offsets of the time package.
- :class:`EopParser`: Builder that reads one or two IERS files into an
  :class:`EopProvider`.
- :func:`load_eop_from_file`: Load from a single IERS file.
- :func:`load_default_eop`: Load the bundled ``finals2000A.all`` data.
- :func:`load_cached_eop`: Load from a local cache, downloading fresh data
  from IERS when stale.
"""

from __future__ import annotations

import importlib.resources
import logging
from pathlib import Path

import jax.numpy as jnp
import polars as pl
from jax import Array

from orientax.config import get_dtype
from orientax.constants import (
    AS2RAD,
    MAS2RAD,
    MJD2000,
    SECONDS_BETWEEN_MJD_AND_J2000,
    SECONDS_PER_DAY,
)
from orientax.eop._download import download_eop_file
from orientax.eop._interpolation import Interpolant, fit
from orientax.eop._parsers import merge_eop_frames, read_eop_file, valid_prefix_length
from orientax.eop._types import EopData, EopInterpolation, EopValues
from orientax.errors import (
    EopParserError,
    ExtrapolatedValueError,
    MissingIau1980Error,
    MissingIau2000Error,
    UtcError,
)
from orientax.frames._providers import RotationProvider
from orientax.iers import Corrections, PoleCoords, ReferenceSystem
from orientax.time import (
    BuiltinLeapSeconds,
    LeapSecondsProvider,
    Time,
    TimeDelta,
    TimeScale,
    Utc,
    tai_to_utc,
    utc_to_tai,
)
from orientax.utils.caching import EOP_FILENAME, eop_cache_file, is_file_stale

logger = logging.getLogger(__name__)

_DEFAULT_MAX_AGE_DAYS: float = 7.0
"""Default maximum age for cached EOP data in days."""

_MIN_ROWS: int = 4
"""Fewest rows a table needs for either interpolation scheme."""

_UT1_TAI_ITERATIONS: int = 2
"""Fixed-point refinements when inverting UT1-TAI."""


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------


def _delta_ut1_tai(
    mjd: list[float], ut1_utc: list[float], leap_seconds: LeapSecondsProvider
) -> list[float]:
    """UT1-TAI [s] from UT1-UTC at the UTC midnights *mjd*."""
    values = []
    for day, dut1 in zip(mjd, ut1_utc):
        seconds = int(round((day - MJD2000) * SECONDS_PER_DAY))
        utc = Utc.from_delta(TimeDelta(seconds))
        tai = utc_to_tai(utc, leap_seconds)
        values.append(dut1 + (utc.to_delta() - tai.delta).to_decimal_seconds())
    return values


def _nutation_table(
    df: pl.DataFrame, columns: tuple[str, str]
) -> tuple[Array, Array, Array] | None:
    n = valid_prefix_length(df, columns)
    if n < _MIN_ROWS:
        logger.debug("No usable %s/%s corrections (%d rows)", *columns, n)
        return None
    dtype = get_dtype()
    rows = df.head(n)
    return (
        jnp.asarray(rows["mjd"].to_numpy(), dtype=dtype),
        jnp.asarray(rows[columns[0]].to_numpy() * MAS2RAD, dtype=dtype),
        jnp.asarray(rows[columns[1]].to_numpy() * MAS2RAD, dtype=dtype),
    )


def eop_data_from_frame(
    df: pl.DataFrame, leap_seconds: LeapSecondsProvider | None = None
) -> EopData:
    """Build :class:`EopData` from a parsed EOP frame.

    Each table keeps the leading rows in which all of its columns are
    present; the trailing rows of an IERS file are predictions with some
    columns left blank.

    Args:
        df: Frame with the columns produced by :func:`read_eop_file`.
        leap_seconds: Leap-second table used to derive UT1-TAI.

    Returns:
        EopData with angles in radians.

    Raises:
        EopParserError: If fewer than four rows carry polar motion and UT1,
            or a date falls before 1960.
    """
    leap_seconds = BuiltinLeapSeconds() if leap_seconds is None else leap_seconds
    n = valid_prefix_length(df, ("mjd", "x_pole", "y_pole", "ut1_utc"))
    if n < _MIN_ROWS:
        raise EopParserError(f"too few EOP rows with polar motion and UT1: {n}")
    if n < len(df):
        logger.debug("Using %d of %d EOP rows for polar motion and UT1", n, len(df))

    rows = df.head(n)
    mjd = rows["mjd"].to_list()
    ut1_utc = rows["ut1_utc"].to_list()
    try:
        ut1_tai = _delta_ut1_tai(mjd, ut1_utc, leap_seconds)
    except UtcError as err:
        raise EopParserError(f"EOP data must start after 1960: {err}") from err

    dtype = get_dtype()
    iau1980 = _nutation_table(df, ("dpsi", "deps"))
    iau2000 = _nutation_table(df, ("dx", "dy"))
    mjd_iau1980, dpsi, deps = iau1980 if iau1980 is not None else (None, None, None)
    mjd_iau2000, dx, dy = iau2000 if iau2000 is not None else (None, None, None)
    return EopData(
        mjd=jnp.asarray(mjd, dtype=dtype),
        x_pole=jnp.asarray(rows["x_pole"].to_numpy() * AS2RAD, dtype=dtype),
        y_pole=jnp.asarray(rows["y_pole"].to_numpy() * AS2RAD, dtype=dtype),
        ut1_utc=jnp.asarray(ut1_utc, dtype=dtype),
        ut1_tai=jnp.asarray(ut1_tai, dtype=dtype),
        mjd_iau1980=mjd_iau1980,
        dpsi=dpsi,
        deps=deps,
        mjd_iau2000=mjd_iau2000,
        dx=dx,
        dy=dy,
    )


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------


def _check_range(mjd: float, table: Array) -> None:
    """Raise unless *mjd* lies within the table, both end nodes included."""
    first = float(table[0])
    last = float(table[-1])
    if not first <= mjd <= last:
        raise ExtrapolatedValueError(mjd, first, last)


class EopProvider(RotationProvider):
    """Earth Orientation Parameters interpolated from IERS tables.

    Queries take UTC Modified Julian Dates.  The first and last tabulated
    dates are valid queries; anything beyond them raises
    :class:`~orientax.errors.ExtrapolatedValueError`, as the tables are never
    extrapolated.

    As an :class:`~orientax.time.OffsetProvider` it converts between TAI
    and UT1, so it can be passed to :meth:`Time.try_to_scale`, and as a
    :class:`~orientax.frames.RotationProvider` it supplies the pole
    coordinates and celestial pole offsets of the frame rotations.

    Args:
        data: Tabulated parameters.
        interpolation: Interpolation scheme.  Defaults to Akima.
        leap_seconds: Leap-second table for converting query times to UTC.

    Examples:
        ```python
        from orientax.eop import load_default_eop
        from orientax.time import Time, TimeScale

        eop = load_default_eop()
        tai = Time.from_iso("2024-07-05T09:09:18.173 TAI")
        ut1 = tai.try_to_scale(TimeScale.UT1, eop)
        ```
    """

    def __init__(
        self,
        data: EopData,
        *,
        interpolation: EopInterpolation = EopInterpolation.AKIMA,
        leap_seconds: LeapSecondsProvider | None = None,
    ) -> None:
        self.data = data
        self.interpolation = interpolation
        self.leap_seconds = BuiltinLeapSeconds() if leap_seconds is None else leap_seconds

        self._x_pole = fit(interpolation, data.mjd, data.x_pole)
        self._y_pole = fit(interpolation, data.mjd, data.y_pole)
        self._ut1_utc = fit(interpolation, data.mjd, data.ut1_utc)
        self._ut1_tai = fit(interpolation, data.mjd, data.ut1_tai)
        self._dpsi: Interpolant | None = None
        self._deps: Interpolant | None = None
        self._dx: Interpolant | None = None
        self._dy: Interpolant | None = None
        if data.has_iau1980:
            self._dpsi = fit(interpolation, data.mjd_iau1980, data.dpsi)
            self._deps = fit(interpolation, data.mjd_iau1980, data.deps)
        if data.has_iau2000:
            self._dx = fit(interpolation, data.mjd_iau2000, data.dx)
            self._dy = fit(interpolation, data.mjd_iau2000, data.dy)

    @classmethod
    def from_file(
        cls,
        filepath: str | Path,
        *,
        interpolation: EopInterpolation = EopInterpolation.AKIMA,
        leap_seconds: LeapSecondsProvider | None = None,
    ) -> EopProvider:
        """Load a provider from one IERS file."""
        parser = EopParser().from_path(filepath).with_interpolation(interpolation)
        if leap_seconds is not None:
            parser = parser.with_leap_seconds(leap_seconds)
        return parser.parse()

    def __repr__(self) -> str:
        first, last = self.mjd_range
        return (
            f"EopProvider(mjd=[{first}, {last}], interpolation={self.interpolation.value}, "
            f"iau1980={self.data.has_iau1980}, iau2000={self.data.has_iau2000})"
        )

    # -- tabulated values ---------------------------------------------------

    @property
    def mjd_range(self) -> tuple[float, float]:
        """First and last UTC MJD of the polar motion and UT1 table."""
        return float(self.data.mjd[0]), float(self.data.mjd[-1])

    def polar_motion(self, mjd: float) -> PoleCoords:
        """Pole coordinates (xp, yp) [rad] at the UTC date *mjd*.

        Raises:
            ExtrapolatedValueError: If *mjd* is outside the table.
        """
        _check_range(mjd, self.data.mjd)
        return PoleCoords(self._x_pole.interpolate(mjd), self._y_pole.interpolate(mjd))

    def delta_ut1_utc(self, mjd: float) -> Array:
        """UT1-UTC [s] at the UTC date *mjd*.

        Raises:
            ExtrapolatedValueError: If *mjd* is outside the table.
        """
        _check_range(mjd, self.data.mjd)
        return self._ut1_utc.interpolate(mjd)

    def delta_ut1_tai(self, mjd: float) -> Array:
        """UT1-TAI [s] at the date *mjd*.

        Raises:
            ExtrapolatedValueError: If *mjd* is outside the table.
        """
        _check_range(mjd, self.data.mjd)
        return self._ut1_tai.interpolate(mjd)

    def nutation_precession_iau1980(self, mjd: float) -> Corrections:
        """Nutation corrections (dpsi, deps) [rad] at the UTC date *mjd*.

        Raises:
            MissingIau1980Error: If no IAU 1980 corrections were loaded.
            ExtrapolatedValueError: If *mjd* is outside their table.
        """
        if self._dpsi is None or self._deps is None:
            raise MissingIau1980Error()
        _check_range(mjd, self.data.mjd_iau1980)
        return Corrections(self._dpsi.interpolate(mjd), self._deps.interpolate(mjd))

    def nutation_precession_iau2000(self, mjd: float) -> Corrections:
        """Celestial pole offsets (dX, dY) [rad] at the UTC date *mjd*.

        Raises:
            MissingIau2000Error: If no IAU 2000 corrections were loaded.
            ExtrapolatedValueError: If *mjd* is outside their table.
        """
        if self._dx is None or self._dy is None:
            raise MissingIau2000Error()
        _check_range(mjd, self.data.mjd_iau2000)
        return Corrections(self._dx.interpolate(mjd), self._dy.interpolate(mjd))

    def interpolate(self, mjd: float) -> EopValues:
        """All parameters at the UTC date *mjd*.

        The celestial pole offsets are ``None`` where the IAU 2000 table
        does not reach.

        Raises:
            ExtrapolatedValueError: If *mjd* is outside the polar motion table.
        """
        pole = self.polar_motion(mjd)
        ut1_utc = self.delta_ut1_utc(mjd)
        try:
            dx, dy = self.nutation_precession_iau2000(mjd)
        except (MissingIau2000Error, ExtrapolatedValueError):
            dx = dy = None
        return EopValues(pole.xp, pole.yp, ut1_utc, dx, dy)

    # -- time-based queries -------------------------------------------------

    def utc_mjd(self, time: Time) -> float:
        """UTC Modified Julian Date of *time*, in any scale."""
        tai = time if time.scale == TimeScale.TAI else time.try_to_scale(TimeScale.TAI, self)
        utc = tai_to_utc(tai, self.leap_seconds)
        return (
            utc.to_delta().to_decimal_seconds() + SECONDS_BETWEEN_MJD_AND_J2000
        ) / SECONDS_PER_DAY

    def pole_coords(self, time: Time) -> PoleCoords:
        """Pole coordinates at *time*."""
        return self.polar_motion(self.utc_mjd(time))

    def corrections(self, time: Time, system: ReferenceSystem) -> Corrections:
        """Celestial pole offsets at *time* in the basis of *system*.

        Raises:
            MissingIau1980Error: For IERS 1996 without IAU 1980 corrections.
            MissingIau2000Error: For the later conventions without IAU 2000
                corrections.
            ExtrapolatedValueError: If *time* is outside the table.
        """
        mjd = self.utc_mjd(time)
        if system is ReferenceSystem.IERS1996:
            return self.nutation_precession_iau1980(mjd)
        return self.nutation_precession_iau2000(mjd)

    # -- OffsetProvider -----------------------------------------------------

    def tai_to_ut1(self, delta: TimeDelta) -> TimeDelta:
        mjd = MJD2000 + delta.to_decimal_seconds() / SECONDS_PER_DAY
        return TimeDelta.from_decimal_seconds(float(self.delta_ut1_tai(mjd)))

    def ut1_to_tai(self, delta: TimeDelta) -> TimeDelta:
        seconds = delta.to_decimal_seconds()
        value = float(self.delta_ut1_tai(MJD2000 + seconds / SECONDS_PER_DAY))
        for _ in range(_UT1_TAI_ITERATIONS):
            tai = seconds - value
            value = float(self.delta_ut1_tai(MJD2000 + tai / SECONDS_PER_DAY))
        return TimeDelta.from_decimal_seconds(-value)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class EopParser:
    """Builder reading IERS files into an :class:`EopProvider`.

    A second file fills in the nutation corrections the first lacks, e.g.
    ``finals.all.csv`` (dpsi, deps) with ``finals2000A.all.csv`` (dX, dY).
    Both files must cover the same dates.

    Examples:
        ```python
        eop = (
            EopParser()
            .from_paths("finals.all.csv", "finals2000A.all.csv")
            .with_interpolation(EopInterpolation.LAGRANGE)
            .parse()
        )
        ```
    """

    def __init__(self) -> None:
        self._paths: tuple[Path, ...] = ()
        self._leap_seconds: LeapSecondsProvider | None = None
        self._interpolation = EopInterpolation.AKIMA

    def from_path(self, filepath: str | Path) -> EopParser:
        self._paths = (Path(filepath),)
        return self

    def from_paths(self, first: str | Path, second: str | Path) -> EopParser:
        self._paths = (Path(first), Path(second))
        return self

    def with_leap_seconds(self, leap_seconds: LeapSecondsProvider) -> EopParser:
        self._leap_seconds = leap_seconds
        return self

    def with_interpolation(self, interpolation: EopInterpolation) -> EopParser:
        self._interpolation = interpolation
        return self

    def parse(self) -> EopProvider:
        """Read the files and build the provider.

        Raises:
            EopParserError: If no file was given, a file is malformed, or
                two files cover different dates.
            FileNotFoundError: If a file does not exist.
        """
        if not self._paths:
            raise EopParserError("no EOP file given; call from_path or from_paths first")
        df = read_eop_file(self._paths[0])
        if len(self._paths) == 2:
            df = merge_eop_frames(df, read_eop_file(self._paths[1]))
        data = eop_data_from_frame(df, self._leap_seconds)
        logger.debug(
            "Loaded EOP data for MJD %.1f to %.1f from %s",
            float(data.mjd[0]),
            float(data.mjd[-1]),
            ", ".join(str(p) for p in self._paths),
        )
        return EopProvider(
            data, interpolation=self._interpolation, leap_seconds=self._leap_seconds
        )


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


def load_eop_from_file(
    filepath: str | Path,
    *,
    interpolation: EopInterpolation = EopInterpolation.AKIMA,
) -> EopProvider:
    """Load EOP data from an IERS CSV or fixed-width file.

    Args:
        filepath: Path to the file (e.g. ``finals2000A.all``).
        interpolation: Interpolation scheme.

    Returns:
        EopProvider over the file's data.

    Raises:
        FileNotFoundError: If the file does not exist.
        EopParserError: If no valid EOP data is found.

    Examples:
        ```python
        from orientax.eop import load_eop_from_file
        eop = load_eop_from_file("path/to/finals2000A.all")
        dut1 = eop.delta_ut1_utc(60462.0)
        ```
    """
    return EopProvider.from_file(filepath, interpolation=interpolation)


def load_default_eop() -> EopProvider:
    """Load the bundled default EOP data (``finals2000A.all``).

    Uses ``importlib.resources`` to locate the data file bundled with the
    package.

    Returns:
        EopProvider loaded from the bundled ``finals2000A.all``.
    """
    data_pkg = importlib.resources.files("orientax.data.eop")
    resource = data_pkg.joinpath(EOP_FILENAME)
    with importlib.resources.as_file(resource) as path:
        return load_eop_from_file(path)


def load_cached_eop(
    filepath: str | Path | None = None,
    *,
    max_age_days: float = _DEFAULT_MAX_AGE_DAYS,
) -> EopProvider:
    """Load EOP data from a local cache, downloading fresh data when stale.

    Checks whether the cached file at *filepath* exists and is younger than
    *max_age_days*.  If the file is missing or stale, a fresh copy of
    ``finals2000A.all`` is downloaded from IERS.  If the download fails or
    the file cannot be parsed, the bundled default data is returned so this
    function never raises on network issues.

    Args:
        filepath: Path to the cached EOP file.  When ``None`` (the default),
            uses ``<cache_dir>/eop/finals2000A.all``.
        max_age_days: Maximum acceptable age of the cached file in days.
            Defaults to 7.

    Returns:
        EopProvider loaded from the cached (or freshly downloaded) file, or
        the bundled default data as a fallback.
    """
    if filepath is None:
        filepath = eop_cache_file()
    else:
        filepath = Path(filepath)

    if is_file_stale(filepath, max_age_days):
        try:
            download_eop_file(filepath)
        except Exception:
            logger.warning(
                "Failed to download EOP data; falling back to bundled data.",
                exc_info=True,
            )
            return load_default_eop()

    try:
        return load_eop_from_file(filepath)
    except Exception:
        logger.warning(
            "Failed to parse cached EOP file %s; falling back to bundled data.",
            filepath,
            exc_info=True,
        )
        return load_default_eop()

