"""Parsers for IERS Earth Orientation Parameter data files.

Two formats are supported and both are read into a Polars DataFrame with
the same columns:

- The semicolon-separated CSV published by the IERS (``finals.all.csv``,
  ``finals2000A.all.csv``).
- The fixed-width standard format (``finals.all``, ``finals2000A.all``),
  also known as Bulletin A/B format.

Columns of the resulting frame, in the units of the IERS files:

``mjd`` (UTC), ``x_pole`` and ``y_pole`` [arcsec], ``ut1_utc`` [s] and the
nutation corrections ``dpsi``, ``deps``, ``dx``, ``dy`` [mas].  Missing
values are null.

The IAU 1980 files carry ``dpsi``, ``deps``; the IAU 2000 files carry
``dx``, ``dy``.  In the fixed-width format the same columns hold either
pair, so the model is taken from the file name (IERS names the IAU 2000
products ``*2000A*``) unless given explicitly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import polars as pl

from orientax.errors import EopParserError

logger = logging.getLogger(__name__)

EOP_COLUMNS: tuple[str, ...] = (
    "mjd",
    "x_pole",
    "y_pole",
    "ut1_utc",
    "dpsi",
    "deps",
    "dx",
    "dy",
)
"""Columns of a parsed EOP frame."""

NUTATION_COLUMNS: tuple[str, ...] = ("dpsi", "deps", "dx", "dy")

# ---------------------------------------------------------------------------
# CSV format
# ---------------------------------------------------------------------------

# The CSV header repeats the "Type" column, so columns are selected by
# position and checked against the expected header names.
_CSV_COLUMNS: dict[int, tuple[str, str]] = {
    0: ("MJD", "mjd"),
    5: ("x_pole", "x_pole"),
    7: ("y_pole", "y_pole"),
    10: ("UT1-UTC", "ut1_utc"),
    15: ("dPsi", "dpsi"),
    17: ("dEpsilon", "deps"),
    19: ("dX", "dx"),
    21: ("dY", "dy"),
}


def _check_csv_header(filepath: Path) -> None:
    with open(filepath) as f:
        header = f.readline().strip().split(";")
    for index, (name, _) in _CSV_COLUMNS.items():
        if index >= len(header) or header[index] != name:
            raise EopParserError(
                f"unexpected EOP CSV header in {filepath}: "
                f"expected column {index} to be '{name}'"
            )


def parse_csv_file(filepath: str | Path) -> pl.DataFrame:
    """Parse an IERS EOP CSV file.

    Args:
        filepath: Path to ``finals.all.csv`` or ``finals2000A.all.csv``.

    Returns:
        Polars DataFrame with the columns of :data:`EOP_COLUMNS`.

    Raises:
        FileNotFoundError: If the file does not exist.
        EopParserError: If the header does not match the IERS layout or a
            cell is not numeric.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")
    _check_csv_header(filepath)

    indices = sorted(_CSV_COLUMNS)
    try:
        df = pl.read_csv(
            filepath,
            separator=";",
            has_header=False,
            skip_rows=1,
            columns=indices,
            new_columns=[_CSV_COLUMNS[i][1] for i in indices],
            infer_schema_length=0,
        )
        df = df.with_columns(pl.col(name).cast(pl.Float64) for name in EOP_COLUMNS)
    except pl.exceptions.PolarsError as err:
        raise EopParserError(f"failed to parse EOP CSV file {filepath}: {err}") from err

    logger.debug("Parsed %d EOP rows from %s", len(df), filepath)
    return df.select(EOP_COLUMNS)


# ---------------------------------------------------------------------------
# Fixed-width format
# ---------------------------------------------------------------------------

# Column ranges for IERS standard format (0-indexed Python slices)
_MJD_RANGE = slice(6, 15)
_PM_X_RANGE = slice(17, 27)
_PM_Y_RANGE = slice(36, 46)
_UT1_UTC_RANGE = slice(58, 68)
_NUT_1_RANGE = slice(96, 106)
_NUT_2_RANGE = slice(115, 125)
_STANDARD_LINE_LENGTH = 187


def _field(line: str, columns: slice) -> float | None:
    try:
        return float(line[columns].strip())
    except ValueError:
        return None


def parse_fixed_width_line(line: str) -> tuple[float | None, ...] | None:
    """Parse a single line from an IERS standard format EOP file.

    Lines shorter than 187 characters are padded with spaces (prediction
    lines may have trailing whitespace trimmed). Lines longer than 187
    characters or without an MJD are skipped (returns None).

    Args:
        line: A single line from the IERS standard format file.

    Returns:
        Tuple of (mjd, x_pole [arcsec], y_pole [arcsec], ut1_utc [s],
        nutation 1 [mas], nutation 2 [mas]) with ``None`` for missing
        values, or None if the line cannot be parsed.
    """
    if len(line) > _STANDARD_LINE_LENGTH:
        return None

    line = line.ljust(_STANDARD_LINE_LENGTH)
    mjd = _field(line, _MJD_RANGE)
    if mjd is None:
        return None

    return (
        mjd,
        _field(line, _PM_X_RANGE),
        _field(line, _PM_Y_RANGE),
        _field(line, _UT1_UTC_RANGE),
        _field(line, _NUT_1_RANGE),
        _field(line, _NUT_2_RANGE),
    )


def parse_fixed_width_file(filepath: str | Path, *, iau1980: bool | None = None) -> pl.DataFrame:
    """Parse an IERS standard (fixed-width) format EOP file.

    Args:
        filepath: Path to ``finals.all``, ``finals2000A.all`` or a file in
            the same format.
        iau1980: Whether the nutation columns hold dpsi, deps. Inferred from
            the file name when ``None``.

    Returns:
        Polars DataFrame with the columns of :data:`EOP_COLUMNS`.

    Raises:
        FileNotFoundError: If the file does not exist.
        EopParserError: If no valid lines were parsed.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")
    if iau1980 is None:
        iau1980 = "2000a" not in filepath.name.lower()

    rows: dict[str, list[float | None]] = {name: [] for name in EOP_COLUMNS}
    first, second = ("dpsi", "deps") if iau1980 else ("dx", "dy")
    other = ("dx", "dy") if iau1980 else ("dpsi", "deps")

    with open(filepath) as f:
        for number, line in enumerate(f, start=1):
            result = parse_fixed_width_line(line.rstrip("\n"))
            if result is None:
                logger.debug("Skipping line %d of %s", number, filepath)
                continue
            mjd, x_pole, y_pole, ut1_utc, nut1, nut2 = result
            rows["mjd"].append(mjd)
            rows["x_pole"].append(x_pole)
            rows["y_pole"].append(y_pole)
            rows["ut1_utc"].append(ut1_utc)
            rows[first].append(nut1)
            rows[second].append(nut2)
            for name in other:
                rows[name].append(None)

    if not rows["mjd"]:
        raise EopParserError(f"no valid EOP data found in {filepath}")

    return pl.DataFrame({name: pl.Series(rows[name], dtype=pl.Float64) for name in EOP_COLUMNS})


# ---------------------------------------------------------------------------
# Dispatch and merging
# ---------------------------------------------------------------------------


def is_csv_file(filepath: str | Path) -> bool:
    """Whether *filepath* starts with the IERS CSV header."""
    with open(filepath) as f:
        return f.readline().startswith("MJD;")


def read_eop_file(filepath: str | Path, *, iau1980: bool | None = None) -> pl.DataFrame:
    """Parse an EOP file in either supported format.

    Args:
        filepath: Path to the file.
        iau1980: Passed to :func:`parse_fixed_width_file`; ignored for CSV.

    Returns:
        Polars DataFrame with the columns of :data:`EOP_COLUMNS`.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")
    if is_csv_file(filepath):
        return parse_csv_file(filepath)
    return parse_fixed_width_file(filepath, iau1980=iau1980)


def merge_eop_frames(primary: pl.DataFrame, secondary: pl.DataFrame) -> pl.DataFrame:
    """Fill the missing nutation corrections of *primary* from *secondary*.

    Rows are matched by MJD; polar motion and UT1 always come from
    *primary*.

    Raises:
        EopParserError: If the frames cover different dates.
    """
    if len(primary) != len(secondary):
        raise EopParserError(
            f"mismatched EOP files: {len(primary)} rows and {len(secondary)} rows"
        )
    joined = primary.join(
        secondary.select("mjd", *NUTATION_COLUMNS),
        on="mjd",
        how="left",
        suffix="_other",
    )
    return joined.select(
        "mjd",
        "x_pole",
        "y_pole",
        "ut1_utc",
        *(pl.coalesce(name, f"{name}_other").alias(name) for name in NUTATION_COLUMNS),
    )


def valid_prefix_length(df: pl.DataFrame, columns: tuple[str, ...]) -> int:
    """Number of leading rows in which all *columns* are present."""
    missing = df.select(pl.any_horizontal([pl.col(c).is_null() for c in columns])).to_series()
    rows = missing.arg_true()
    return int(rows[0]) if len(rows) else len(df)
