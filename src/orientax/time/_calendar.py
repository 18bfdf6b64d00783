"""Proleptic Gregorian calendar dates and times of day.

Days are counted from 2000-01-01 (day 0); the J2000 epoch itself lies at
noon of that day.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from orientax.constants import SECONDS_PER_DAY
from orientax.errors import DateError, TimeOfDayError
from orientax.time._deltas import Subsecond

# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------

PREVIOUS_MONTH_END_DAY: tuple[int, ...] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)
"""Day of year on which each preceding month ends (common years)."""

PREVIOUS_MONTH_END_DAY_LEAP: tuple[int, ...] = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335,
)
"""Day of year on which each preceding month ends (leap years)."""

_ISO_DATE = re.compile(r"(-?\d{4,})-(\d{2})-(\d{2})")
_ISO_TIME = re.compile(r"(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?")

_HALF_DAY = SECONDS_PER_DAY // 2


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    ends = PREVIOUS_MONTH_END_DAY_LEAP if is_leap_year(year) else PREVIOUS_MONTH_END_DAY
    if month == 12:
        return 31
    return ends[month] - ends[month - 1]


def last_day_of_year_j2k(year: int) -> int:
    """Day number, relative to 2000-01-01, of December 31 of *year*."""
    return 365 * year + year // 4 - year // 100 + year // 400 - 730120


def _find_year(day_number: int) -> int:
    year = (400 * day_number + 292194288) // 146097
    if day_number <= last_day_of_year_j2k(year - 1):
        year -= 1
    return year


def _find_month(day_of_year: int, leap: bool) -> int:
    if day_of_year < 32:
        return 1
    return (10 * day_of_year + (313 if leap else 323)) // 306


# ---------------------------------------------------------------------------
# Date
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Attributes:
        year: Year, astronomical numbering (year 0 exists).
        month: Month, 1-12.
        day: Day of month.

    Raises:
        DateError: If the month or day is out of range.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise DateError(f"invalid month {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise DateError(
                f"invalid day {self.day} for {self.year:04d}-{self.month:02d}"
            )

    @classmethod
    def from_iso(cls, iso: str) -> Date:
        """Parse ``YYYY-MM-DD``.

        Raises:
            DateError: If the string is malformed or the date invalid.
        """
        match = _ISO_DATE.fullmatch(iso.strip())
        if match is None:
            raise DateError(f"invalid ISO date: {iso!r}")
        year, month, day = (int(g) for g in match.groups())
        return cls(year, month, day)

    @classmethod
    def from_day_number(cls, day_number: int) -> Date:
        """Build the date of the day *day_number* days after 2000-01-01."""
        year = _find_year(day_number)
        leap = is_leap_year(year)
        day_of_year = day_number - last_day_of_year_j2k(year - 1)
        month = _find_month(day_of_year, leap)
        ends = PREVIOUS_MONTH_END_DAY_LEAP if leap else PREVIOUS_MONTH_END_DAY
        return cls(year, month, day_of_year - ends[month - 1])

    @classmethod
    def from_seconds_since_j2000(cls, seconds: int) -> Date:
        return cls.from_day_number((seconds + _HALF_DAY) // SECONDS_PER_DAY)

    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    def day_of_year(self) -> int:
        ends = PREVIOUS_MONTH_END_DAY_LEAP if self.is_leap() else PREVIOUS_MONTH_END_DAY
        return ends[self.month - 1] + self.day

    def day_number(self) -> int:
        """Days since 2000-01-01 (negative before)."""
        return last_day_of_year_j2k(self.year - 1) + self.day_of_year()

    def seconds_since_j2000(self) -> int:
        """Seconds from J2000 (noon) to midnight starting this date."""
        return self.day_number() * SECONDS_PER_DAY - _HALF_DAY

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


# ---------------------------------------------------------------------------
# Time of day
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time, allowing ``second == 60`` for leap seconds.

    Attributes:
        hour: 0-23.
        minute: 0-59.
        second: 0-60.
        subsecond: Fraction of a second in ``[0, 1)``.

    Raises:
        TimeOfDayError: If a component is out of range.
        SubsecondError: If *subsecond* is outside ``[0, 1)``.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    subsecond: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.hour < 24:
            raise TimeOfDayError(f"invalid hour {self.hour}")
        if not 0 <= self.minute < 60:
            raise TimeOfDayError(f"invalid minute {self.minute}")
        if not 0 <= self.second <= 60:
            raise TimeOfDayError(f"invalid second {self.second}")
        object.__setattr__(self, "subsecond", Subsecond(self.subsecond))

    @classmethod
    def from_hms(cls, hour: int, minute: int, seconds: float) -> TimeOfDay:
        """Build from hours, minutes and decimal seconds in ``[0, 61)``."""
        if not 0.0 <= seconds < 61.0:
            raise TimeOfDayError(f"invalid seconds {seconds}")
        whole = int(seconds)
        return cls(hour, minute, whole, seconds - whole)

    @classmethod
    def from_iso(cls, iso: str) -> TimeOfDay:
        """Parse ``HH:MM:SS`` with an optional decimal fraction.

        Raises:
            TimeOfDayError: If the string is malformed or out of range.
        """
        match = _ISO_TIME.fullmatch(iso.strip())
        if match is None:
            raise TimeOfDayError(f"invalid ISO time: {iso!r}")
        hour, minute, second, fraction = match.groups()
        return cls(int(hour), int(minute), int(second), Subsecond.from_digits(fraction or ""))

    @classmethod
    def from_second_of_day(cls, second_of_day: int, subsecond: float = 0.0) -> TimeOfDay:
        """Build from seconds since midnight; 86400 is the leap second 23:59:60."""
        if not 0 <= second_of_day <= SECONDS_PER_DAY:
            raise TimeOfDayError(f"invalid second of day {second_of_day}")
        if second_of_day == SECONDS_PER_DAY:
            return cls(23, 59, 60, subsecond)
        hour, rest = divmod(second_of_day, 3600)
        minute, second = divmod(rest, 60)
        return cls(hour, minute, second, subsecond)

    @classmethod
    def from_seconds_since_j2000(cls, seconds: int, subsecond: float = 0.0) -> TimeOfDay:
        return cls.from_second_of_day((seconds + _HALF_DAY) % SECONDS_PER_DAY, subsecond)

    def second_of_day(self) -> int:
        return 3600 * self.hour + 60 * self.minute + self.second

    def with_second(self, second: int) -> TimeOfDay:
        return TimeOfDay(self.hour, self.minute, second, self.subsecond)

    def __str__(self) -> str:
        millis = int(round(self.subsecond * 1e3, 6))
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{millis:03d}"
