"""Fetching IERS finals files.

The file is written next to its destination under a temporary name and
moved into place once complete, so an interrupted download never replaces
a usable cache file.  HTTP and transport errors propagate; the fallback
policy belongs to :func:`~orientax.eop.load_cached_eop`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

IERS_FINALS_2000A_URL: str = "https://datacenter.iers.org/data/9/finals2000A.all"
"""IERS Rapid Service finals file (IAU 2000A nutation, dX/dY columns)."""

_DEFAULT_TIMEOUT: float = 120.0
"""HTTP timeout [s]."""


def download_eop_file(
    filepath: str | Path,
    *,
    url: str = IERS_FINALS_2000A_URL,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Path:
    """Download an IERS finals file to *filepath*.

    Keep the ``2000A`` marker in the file name of *filepath*: the
    fixed-width parser uses it to read the nutation columns as dX, dY.

    Args:
        filepath: Destination; missing parent directories are created.
        url: Source URL.
        timeout: HTTP timeout [s].

    Returns:
        The resolved destination path.

    Raises:
        httpx.HTTPStatusError: On a non-2xx response.
        httpx.TransportError: On connection failures and timeouts.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading EOP data from %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        response = client.get(url)
        response.raise_for_status()

    partial = filepath.with_name(filepath.name + ".part")
    partial.write_text(response.text, encoding="utf-8")
    partial.replace(filepath)
    logger.info("EOP data written to %s", filepath)
    return filepath.resolve()
