"""Leap-second tables and providers.

A provider answers how many seconds separate TAI and UTC at a given instant.
:class:`BuiltinLeapSeconds` carries the table published up to 2017;
:class:`LeapSecondsKernel` reads the same information from a SPICE
leap-second kernel (LSK).
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_right
from pathlib import Path
from typing import TYPE_CHECKING

from orientax.constants import SECONDS_PER_DAY
from orientax.errors import LeapSecondsKernelError
from orientax.time._calendar import Date
from orientax.time._deltas import TimeDelta

if TYPE_CHECKING:
    from orientax.time._time import Time
    from orientax.time._utc import Utc

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------

LEAP_SECONDS_UTC_EPOCHS: tuple[int, ...] = (
    -883656000, -867931200, -852033600, -820497600, -788961600, -757425600,
    -725803200, -694267200, -662731200, -631195200, -583934400, -552398400,
    -520862400, -457704000, -378734400, -315576000, -284040000, -236779200,
    -205243200, -173707200, -126273600, -79012800, -31579200, 189345600,
    284040000, 394372800, 488980800, 536500800,
)
"""UTC instants (seconds since J2000) at which TAI - UTC changes."""

LEAP_SECONDS: tuple[int, ...] = tuple(range(10, 38))
"""TAI - UTC [s] from each epoch in :data:`LEAP_SECONDS_UTC_EPOCHS` onward."""

LEAP_SECONDS_TAI_EPOCHS: tuple[int, ...] = tuple(
    epoch + ls - 1 for epoch, ls in zip(LEAP_SECONDS_UTC_EPOCHS, LEAP_SECONDS)
)
"""TAI instants (seconds since J2000) at which each inserted second starts."""


def _find(epochs: tuple[int, ...], leap_seconds: tuple[int, ...], seconds: int) -> int | None:
    if seconds < epochs[0]:
        return None
    return leap_seconds[bisect_right(epochs, seconds) - 1]


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


class LeapSecondsProvider:
    """Answers TAI - UTC queries from a table of leap-second epochs.

    Subclasses provide :attr:`utc_epochs`, :attr:`tai_epochs` and
    :attr:`leap_seconds`.  Queries before the first epoch return ``None`` so
    callers can fall back to the pre-1972 drift model.
    """

    utc_epochs: tuple[int, ...]
    tai_epochs: tuple[int, ...]
    leap_seconds: tuple[int, ...]

    def delta_tai_utc(self, tai: Time) -> TimeDelta | None:
        """TAI - UTC at the TAI instant *tai*, or ``None`` before 1972."""
        ls = _find(self.tai_epochs, self.leap_seconds, tai.delta.seconds)
        return None if ls is None else TimeDelta.from_seconds(ls)

    def delta_utc_tai(self, utc: Utc) -> TimeDelta | None:
        """UTC - TAI for *utc*, or ``None`` before 1972."""
        ls = _find(self.utc_epochs, self.leap_seconds, utc.to_delta().seconds)
        if ls is None:
            return None
        if utc.time.second == 60:
            ls -= 1
        return TimeDelta.from_seconds(-ls)

    def is_leap_second(self, tai: Time) -> bool:
        """Whether *tai* falls inside an inserted leap second."""
        # The first epoch starts the 10 s offset without inserting a second.
        return tai.delta.seconds in self.tai_epochs[1:]

    def is_leap_second_date(self, date: Date) -> bool:
        """Whether the UTC day *date* ends with an inserted leap second."""
        # The first epoch sets the initial 10 s offset and is not a leap second.
        next_day = date.day_number() + 1
        return any(
            (epoch + SECONDS_PER_DAY // 2) // SECONDS_PER_DAY == next_day
            for epoch in self.utc_epochs[1:]
        )


class BuiltinLeapSeconds(LeapSecondsProvider):
    """The leap-second table as of IERS Bulletin C 52 (valid through 2017+)."""

    utc_epochs = LEAP_SECONDS_UTC_EPOCHS
    tai_epochs = LEAP_SECONDS_TAI_EPOCHS
    leap_seconds = LEAP_SECONDS


# ---------------------------------------------------------------------------
# SPICE leap-second kernels
# ---------------------------------------------------------------------------

_DELTA_AT = re.compile(r"DELTET/DELTA_AT\s*=\s*\(([^)]*)\)")
_ENTRY = re.compile(r"(\d+)\s*,\s*@(\d{4})-([A-Za-z]{3})-(\d{1,2})")
_MONTHS = {
    name: number
    for number, name in enumerate(
        ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"),
        start=1,
    )
}


class LeapSecondsKernel(LeapSecondsProvider):
    """Leap seconds read from a SPICE LSK.

    Args:
        leap_seconds: TAI - UTC [s] from each epoch onward.
        utc_epochs: UTC epochs in seconds since J2000, ascending.
    """

    def __init__(self, leap_seconds: list[int], utc_epochs: list[int]) -> None:
        if len(leap_seconds) != len(utc_epochs) or not utc_epochs:
            raise LeapSecondsKernelError("leap-second table is empty or inconsistent")
        self.leap_seconds = tuple(leap_seconds)
        self.utc_epochs = tuple(utc_epochs)
        self.tai_epochs = tuple(
            epoch + ls - 1 for epoch, ls in zip(self.utc_epochs, self.leap_seconds)
        )

    @classmethod
    def from_string(cls, kernel: str) -> LeapSecondsKernel:
        """Parse the ``DELTET/DELTA_AT`` assignment of an LSK.

        Raises:
            LeapSecondsKernelError: If the assignment is missing or empty.
        """
        match = _DELTA_AT.search(kernel)
        if match is None:
            raise LeapSecondsKernelError("kernel has no DELTET/DELTA_AT entry")
        leap_seconds: list[int] = []
        epochs: list[int] = []
        for ls, year, month, day in _ENTRY.findall(match.group(1)):
            try:
                date = Date(int(year), _MONTHS[month.upper()], int(day))
            except KeyError:
                raise LeapSecondsKernelError(f"unknown month {month!r}") from None
            leap_seconds.append(int(ls))
            epochs.append(date.seconds_since_j2000())
        if not epochs:
            raise LeapSecondsKernelError("DELTET/DELTA_AT contains no entries")
        logger.debug("Parsed %d leap-second entries", len(epochs))
        return cls(leap_seconds, epochs)

    @classmethod
    def from_file(cls, path: str | Path) -> LeapSecondsKernel:
        """Read an LSK from *path*.

        Raises:
            FileNotFoundError: If the file does not exist.
            LeapSecondsKernelError: If the kernel cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Leap-second kernel not found: {path}")
        return cls.from_string(path.read_text(encoding="utf-8"))
