"""Instants in a continuous time scale.

A :class:`Time` is a :class:`~orientax.time.TimeDelta` measured from the
J2000 epoch (2000-01-01T12:00:00) in a given :class:`TimeScale`.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING

from orientax.constants import (
    SECONDS_BETWEEN_J1950_AND_J2000,
    SECONDS_BETWEEN_JD_AND_J2000,
    SECONDS_BETWEEN_MJD_AND_J2000,
    SECONDS_PER_DAY,
    SECONDS_PER_JULIAN_CENTURY,
    SECONDS_PER_JULIAN_YEAR,
)
from orientax.errors import TimeOfDayError
from orientax.time._calendar import Date, TimeOfDay
from orientax.time._deltas import TimeDelta
from orientax.time._offsets import DefaultOffsetProvider, OffsetProvider
from orientax.time._scales import TimeScale

if TYPE_CHECKING:
    from orientax.time._leap_seconds import LeapSecondsProvider
    from orientax.time._utc import Utc

_ISO_DATETIME = re.compile(r"(\S+)T(\S+?)(?:\s+([A-Za-z0-9]+))?")


class Epoch(enum.Enum):
    """Reference epochs for Julian-date projections.

    The value is the epoch expressed in seconds since J2000.
    """

    JULIAN_DATE = -SECONDS_BETWEEN_JD_AND_J2000
    MODIFIED_JULIAN_DATE = -SECONDS_BETWEEN_MJD_AND_J2000
    J1950 = -SECONDS_BETWEEN_J1950_AND_J2000
    J2000 = 0


@total_ordering
@dataclass(frozen=True)
class Time:
    """An instant in a continuous time scale.

    Attributes:
        scale: The time scale.
        delta: Time elapsed since J2000 in *scale*.
    """

    scale: TimeScale
    delta: TimeDelta

    # -- constructors -------------------------------------------------------

    @classmethod
    def new(cls, scale: TimeScale, seconds: int, subsecond: float = 0.0) -> Time:
        return cls(scale, TimeDelta(seconds, subsecond))

    @classmethod
    def from_delta(cls, scale: TimeScale, delta: TimeDelta) -> Time:
        return cls(scale, delta)

    @classmethod
    def from_epoch(cls, scale: TimeScale, epoch: Epoch) -> Time:
        return cls(scale, TimeDelta.from_seconds(epoch.value))

    @classmethod
    def from_date_and_time(cls, scale: TimeScale, date: Date, time: TimeOfDay) -> Time:
        """Build from a calendar date and time of day.

        Raises:
            TimeOfDayError: If *time* is a leap second, which continuous scales
                cannot represent.
        """
        if time.second == 60:
            raise TimeOfDayError(f"second 60 is not valid in {scale}")
        seconds = date.seconds_since_j2000() + time.second_of_day()
        return cls(scale, TimeDelta(seconds, time.subsecond))

    @classmethod
    def from_calendar(
        cls,
        scale: TimeScale,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        seconds: float = 0.0,
    ) -> Time:
        return cls.from_date_and_time(
            scale, Date(year, month, day), TimeOfDay.from_hms(hour, minute, seconds)
        )

    @classmethod
    def from_iso(cls, iso: str, scale: TimeScale | None = None) -> Time:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fff] [SCALE]``.

        Args:
            iso: ISO 8601 date-time, optionally followed by a scale abbreviation.
            scale: Scale to use when *iso* carries none.

        Raises:
            ValueError: If the string is malformed, no scale is given, or the
                suffix contradicts *scale*.
        """
        match = _ISO_DATETIME.fullmatch(iso.strip())
        if match is None:
            raise ValueError(f"invalid ISO date-time: {iso!r}")
        date_part, time_part, suffix = match.groups()
        if suffix is not None:
            parsed = TimeScale.from_abbreviation(suffix)
            if scale is not None and parsed != scale:
                raise ValueError(f"scale suffix {suffix} does not match {scale}")
            scale = parsed
        if scale is None:
            raise ValueError(f"no time scale given for {iso!r}")
        return cls.from_date_and_time(scale, Date.from_iso(date_part), TimeOfDay.from_iso(time_part))

    @classmethod
    def from_julian_date(
        cls, scale: TimeScale, julian_date: float, epoch: Epoch = Epoch.JULIAN_DATE
    ) -> Time:
        """Build from a Julian date counted from *epoch*."""
        delta = TimeDelta.from_days(julian_date) + TimeDelta.from_seconds(epoch.value)
        return cls(scale, delta)

    @classmethod
    def from_two_part_julian_date(cls, scale: TimeScale, jd1: float, jd2: float) -> Time:
        """Build from a two-part Julian date ``jd1 + jd2``, as used by SOFA."""
        delta = TimeDelta.from_decimal_seconds(
            (jd1 - 2451545.0) * SECONDS_PER_DAY
        ) + TimeDelta.from_decimal_seconds(jd2 * SECONDS_PER_DAY)
        return cls(scale, delta)

    # -- projections --------------------------------------------------------

    def seconds_since(self, epoch: Epoch) -> float:
        return float(self.delta.seconds - epoch.value) + float(self.delta.subsecond)

    def days_since(self, epoch: Epoch) -> float:
        return self.seconds_since(epoch) / SECONDS_PER_DAY

    def years_since(self, epoch: Epoch) -> float:
        return self.seconds_since(epoch) / SECONDS_PER_JULIAN_YEAR

    def centuries_since(self, epoch: Epoch) -> float:
        return self.seconds_since(epoch) / SECONDS_PER_JULIAN_CENTURY

    def seconds_since_j2000(self) -> float:
        return self.seconds_since(Epoch.J2000)

    def days_since_j2000(self) -> float:
        return self.days_since(Epoch.J2000)

    def years_since_j2000(self) -> float:
        return self.years_since(Epoch.J2000)

    def centuries_since_j2000(self) -> float:
        return self.centuries_since(Epoch.J2000)

    def seconds_since_j1950(self) -> float:
        return self.seconds_since(Epoch.J1950)

    def days_since_j1950(self) -> float:
        return self.days_since(Epoch.J1950)

    def centuries_since_j1950(self) -> float:
        return self.centuries_since(Epoch.J1950)

    def seconds_since_modified_julian_epoch(self) -> float:
        return self.seconds_since(Epoch.MODIFIED_JULIAN_DATE)

    def days_since_modified_julian_epoch(self) -> float:
        return self.days_since(Epoch.MODIFIED_JULIAN_DATE)

    def centuries_since_modified_julian_epoch(self) -> float:
        return self.centuries_since(Epoch.MODIFIED_JULIAN_DATE)

    def seconds_since_julian_epoch(self) -> float:
        return self.seconds_since(Epoch.JULIAN_DATE)

    def days_since_julian_epoch(self) -> float:
        return self.days_since(Epoch.JULIAN_DATE)

    def centuries_since_julian_epoch(self) -> float:
        return self.centuries_since(Epoch.JULIAN_DATE)

    def julian_date(self) -> float:
        return self.days_since(Epoch.JULIAN_DATE)

    def modified_julian_date(self) -> float:
        return self.days_since(Epoch.MODIFIED_JULIAN_DATE)

    def two_part_julian_date(self) -> tuple[float, float]:
        """Return ``(jd1, jd2)`` with *jd1* integral and *jd2* in ``[0, 1)``."""
        seconds = self.delta.seconds + SECONDS_BETWEEN_JD_AND_J2000
        days, rest = divmod(seconds, SECONDS_PER_DAY)
        return float(days), (rest + float(self.delta.subsecond)) / SECONDS_PER_DAY

    def date(self) -> Date:
        return Date.from_seconds_since_j2000(self.delta.seconds)

    def time_of_day(self) -> TimeOfDay:
        return TimeOfDay.from_seconds_since_j2000(self.delta.seconds, self.delta.subsecond)

    # -- scales -------------------------------------------------------------

    def with_scale(self, scale: TimeScale) -> Time:
        """Reinterpret the same delta in another scale without converting it.

        Only meaningful when the elapsed seconds are used as a series
        argument; use :meth:`try_to_scale` to convert instants.
        """
        return Time(scale, self.delta)

    def try_to_scale(self, target: TimeScale, provider: OffsetProvider | None = None) -> Time:
        """Convert to another scale.

        Args:
            target: Target scale.
            provider: Offset provider; defaults to
                :class:`~orientax.time.DefaultOffsetProvider`, which cannot
                convert to or from UT1.

        Raises:
            MissingEopProviderError: If UT1 is involved and *provider* has no
                Earth orientation data.
        """
        provider = DefaultOffsetProvider() if provider is None else provider
        offset = provider.offset(self.scale, target, self.delta)
        return Time(target, self.delta + offset)

    def try_to_utc(
        self,
        leap_seconds: LeapSecondsProvider | None = None,
        offsets: OffsetProvider | None = None,
    ) -> Utc:
        """Convert to UTC via TAI.

        Args:
            leap_seconds: Leap-second provider; defaults to the built-in table.
            offsets: Offset provider used to reach TAI.

        Raises:
            UtcUndefinedError: Before 1960-01-01.
            MissingEopProviderError: If this is a UT1 time and *offsets* has no
                Earth orientation data.
        """
        from orientax.time._utc import tai_to_utc

        tai = self if self.scale == TimeScale.TAI else self.try_to_scale(TimeScale.TAI, offsets)
        return tai_to_utc(tai, leap_seconds)

    # -- arithmetic ---------------------------------------------------------

    def _check_scale(self, other: Time) -> None:
        if self.scale != other.scale:
            raise ValueError(f"cannot combine times in {self.scale} and {other.scale}")

    def __add__(self, other: TimeDelta) -> Time:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return Time(self.scale, self.delta + other)

    def __sub__(self, other: Time | TimeDelta) -> Time | TimeDelta:
        if isinstance(other, TimeDelta):
            return Time(self.scale, self.delta - other)
        if isinstance(other, Time):
            self._check_scale(other)
            return self.delta - other.delta
        return NotImplemented

    def __lt__(self, other: Time) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        self._check_scale(other)
        return self.delta < other.delta

    def __str__(self) -> str:
        return f"{self.date()}T{self.time_of_day()} {self.scale}"

