"""Location and freshness of cached Earth orientation data.

Downloaded IERS files live below a cache root taken from the
``ORIENTAX_CACHE`` environment variable, or ``~/.cache/orientax`` when it is
unset::

    <root>/eop/finals2000A.all

Freshness is judged from the file modification time, in days, which is the
unit the IERS update cadence is quoted in.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

from orientax.constants import SECONDS_PER_DAY

CACHE_ENV_VAR = "ORIENTAX_CACHE"
"""Environment variable overriding the cache root."""

EOP_FILENAME = "finals2000A.all"
"""File name of the cached IERS finals product."""


def cache_root() -> Path:
    """The cache root, without creating it."""
    env = os.environ.get(CACHE_ENV_VAR)
    if env is not None:
        return Path(env)
    return Path.home() / ".cache" / "orientax"


def get_cache_dir(subdirectory: str | None = None) -> Path:
    """Return a cache directory, creating it if needed.

    Args:
        subdirectory: Optional path below the root (e.g. ``"eop"``).

    Returns:
        The directory.
    """
    directory = cache_root() if subdirectory is None else cache_root() / subdirectory
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_eop_cache_dir() -> Path:
    return get_cache_dir("eop")


def eop_cache_file(filename: str = EOP_FILENAME) -> Path:
    """Path of a cached EOP file; the file itself may not exist yet."""
    return get_eop_cache_dir() / filename


def file_age_seconds(filepath: str | Path) -> float:
    """Seconds since *filepath* was last modified.

    Raises:
        FileNotFoundError: If *filepath* does not exist.
    """
    mtime = Path(filepath).stat().st_mtime
    return max(0.0, time.time() - mtime)


def file_age_days(filepath: str | Path) -> float:
    """Days since *filepath* was last modified.

    Raises:
        FileNotFoundError: If *filepath* does not exist.
    """
    return file_age_seconds(filepath) / SECONDS_PER_DAY


def is_file_stale(filepath: str | Path, max_age_days: float) -> bool:
    """Whether *filepath* is missing or older than *max_age_days*."""
    try:
        return file_age_days(filepath) > max_age_days
    except FileNotFoundError:
        return True
