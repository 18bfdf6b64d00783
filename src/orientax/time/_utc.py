"""Coordinated Universal Time.

UTC is a civil, discontinuous scale and is used here for input and display
only.  Arithmetic happens on TAI after conversion with a
:class:`~orientax.time.LeapSecondsProvider`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from orientax.errors import NonLeapSecondDateError, UtcError, UtcUndefinedError
from orientax.time import _before1972
from orientax.time._calendar import Date, TimeOfDay
from orientax.time._deltas import TimeDelta
from orientax.time._leap_seconds import BuiltinLeapSeconds, LeapSecondsProvider
from orientax.time._scales import TimeScale
from orientax.time._time import Time

_ISO_UTC = re.compile(r"(\S+)T(\S+?)(?:Z|\s+UTC)?")


@dataclass(frozen=True, order=True)
class Utc:
    """A UTC date and time of day.

    Use :meth:`new` or :meth:`builder` to validate leap seconds against a
    provider.

    Attributes:
        date: Calendar date.
        time: Time of day; ``second == 60`` during a leap second.

    Raises:
        UtcUndefinedError: For dates before 1960.
    """

    date: Date
    time: TimeOfDay

    def __post_init__(self) -> None:
        if self.date.year < 1960:
            raise UtcUndefinedError()

    @classmethod
    def new(
        cls, date: Date, time: TimeOfDay, provider: LeapSecondsProvider | None = None
    ) -> Utc:
        """Build a UTC instant, checking that second 60 falls on a leap-second date.

        Raises:
            UtcUndefinedError: For dates before 1960.
            NonLeapSecondDateError: If ``time.second == 60`` on a date without a
                leap second.
        """
        provider = BuiltinLeapSeconds() if provider is None else provider
        if time.second == 60 and not provider.is_leap_second_date(date):
            raise NonLeapSecondDateError(date)
        return cls(date, time)

    @classmethod
    def builder(cls) -> UtcBuilder:
        return UtcBuilder()

    @classmethod
    def from_iso(cls, iso: str, provider: LeapSecondsProvider | None = None) -> Utc:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fff]`` with an optional ``Z`` or `` UTC`` suffix.

        Raises:
            UtcError: If the string is malformed.
        """
        match = _ISO_UTC.fullmatch(iso.strip())
        if match is None:
            raise UtcError(f"invalid ISO UTC string: {iso!r}")
        date_part, time_part = match.groups()
        return cls.new(Date.from_iso(date_part), TimeOfDay.from_iso(time_part), provider)

    @classmethod
    def from_delta(cls, delta: TimeDelta) -> Utc:
        """Build from seconds since J2000 counted in UTC (no leap second)."""
        return cls(
            Date.from_seconds_since_j2000(delta.seconds),
            TimeOfDay.from_seconds_since_j2000(delta.seconds, delta.subsecond),
        )

    def to_delta(self) -> TimeDelta:
        """Seconds since J2000 counted in UTC; 23:59:60 maps onto the next midnight."""
        seconds = self.date.seconds_since_j2000() + self.time.second_of_day()
        return TimeDelta(seconds, self.time.subsecond)

    def to_time(self, provider: LeapSecondsProvider | None = None) -> Time:
        """Convert to TAI."""
        return utc_to_tai(self, provider)

    def __str__(self) -> str:
        return f"{self.date}T{self.time} UTC"


class UtcBuilder:
    """Incremental construction of a :class:`Utc`.

    Examples:
        ```python
        utc = Utc.builder().with_ymd(2016, 12, 31).with_hms(23, 59, 60.0).build()
        ```
    """

    def __init__(self) -> None:
        self._date: Date | None = None
        self._time = TimeOfDay()

    def with_ymd(self, year: int, month: int, day: int) -> UtcBuilder:
        self._date = Date(year, month, day)
        return self

    def with_hms(self, hour: int, minute: int, seconds: float) -> UtcBuilder:
        self._time = TimeOfDay.from_hms(hour, minute, seconds)
        return self

    def build_with_provider(self, provider: LeapSecondsProvider) -> Utc:
        if self._date is None:
            raise UtcError("a date is required; call with_ymd first")
        return Utc.new(self._date, self._time, provider)

    def build(self) -> Utc:
        return self.build_with_provider(BuiltinLeapSeconds())


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def utc_to_tai(utc: Utc, provider: LeapSecondsProvider | None = None) -> Time:
    """Convert *utc* to TAI, using the drift model before 1972."""
    provider = BuiltinLeapSeconds() if provider is None else provider
    delta = provider.delta_utc_tai(utc)
    if delta is None:
        delta = _before1972.delta_utc_tai(utc.to_delta())
    return Time(TimeScale.TAI, utc.to_delta() - delta)


def tai_to_utc(tai: Time, provider: LeapSecondsProvider | None = None) -> Utc:
    """Convert a TAI instant to UTC, reporting second 60 during a leap second.

    Raises:
        UtcUndefinedError: Before 1960-01-01.
    """
    provider = BuiltinLeapSeconds() if provider is None else provider
    delta = provider.delta_tai_utc(tai)
    if delta is None:
        delta = _before1972.delta_tai_utc(tai.delta)
    utc = Utc.from_delta(tai.delta - delta)
    if provider.is_leap_second(tai):
        utc = Utc(utc.date, utc.time.with_second(60))
    return utc
