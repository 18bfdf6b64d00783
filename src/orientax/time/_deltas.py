"""Exact time differences.

A :class:`TimeDelta` stores an integral number of seconds plus a fractional
:class:`Subsecond` in ``[0, 1)``.  Negative durations keep a non-negative
fraction, so -0.25 s is ``TimeDelta(-1, 0.75)``.  Splitting the value this
way preserves femtosecond resolution across centuries, which a single
``float`` cannot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator

from orientax.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_JULIAN_CENTURY,
    SECONDS_PER_JULIAN_YEAR,
    SECONDS_PER_MINUTE,
)
from orientax.errors import SubsecondError, TimeDeltaError

_SUBSECOND_TOLERANCE: float = 1e-15
"""Tolerance used when comparing the fractional parts of two deltas."""

_I64_MIN: float = -(2.0**63)
_I64_MAX: float = 2.0**63


class Subsecond(float):
    """A fraction of a second constrained to ``[0, 1)``.

    Raises:
        SubsecondError: If the value is outside ``[0, 1)`` or not finite.
    """

    def __new__(cls, value: float = 0.0) -> Subsecond:
        value = float(value)
        if not 0.0 <= value < 1.0:
            raise SubsecondError(value)
        return super().__new__(cls, value)

    @classmethod
    def from_digits(cls, digits: str) -> Subsecond:
        """Build from the digits after a decimal point, e.g. ``"173"`` for 0.173."""
        return cls(float(f"0.{digits}") if digits else 0.0)


@total_ordering
@dataclass(frozen=True, eq=False)
class TimeDelta:
    """A signed duration with an exact integral part.

    Attributes:
        seconds: Whole seconds (may be negative).
        subsecond: Fraction of a second in ``[0, 1)``.
    """

    seconds: int = 0
    subsecond: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", int(self.seconds))
        object.__setattr__(self, "subsecond", Subsecond(self.subsecond))

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeDelta:
        return cls(seconds, 0.0)

    @classmethod
    def from_decimal_seconds(cls, value: float) -> TimeDelta:
        """Build a delta from a floating-point number of seconds.

        Args:
            value: Duration [s].

        Returns:
            The delta, with the fraction folded into ``[0, 1)``.

        Raises:
            TimeDeltaError: If *value* is NaN, infinite or beyond the 64-bit
                integer range.
        """
        value = float(value)
        if math.isnan(value):
            raise TimeDeltaError("NaN is not a valid time delta")
        if math.isinf(value) or not _I64_MIN <= value < _I64_MAX:
            raise TimeDeltaError(f"{value} s is out of the representable range")
        seconds = math.floor(value)
        subsecond = value - seconds
        if subsecond >= 1.0:
            seconds += 1
            subsecond = 0.0
        return cls(seconds, subsecond)

    @classmethod
    def from_minutes(cls, value: float) -> TimeDelta:
        return cls.from_decimal_seconds(value * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, value: float) -> TimeDelta:
        return cls.from_decimal_seconds(value * SECONDS_PER_HOUR)

    @classmethod
    def from_days(cls, value: float) -> TimeDelta:
        return cls.from_decimal_seconds(value * SECONDS_PER_DAY)

    @classmethod
    def from_julian_years(cls, value: float) -> TimeDelta:
        return cls.from_decimal_seconds(value * SECONDS_PER_JULIAN_YEAR)

    @classmethod
    def from_julian_centuries(cls, value: float) -> TimeDelta:
        return cls.from_decimal_seconds(value * SECONDS_PER_JULIAN_CENTURY)

    @staticmethod
    def range(start: TimeDelta, end: TimeDelta) -> TimeDeltaRange:
        """Inclusive range from *start* to *end* with a one second step."""
        return TimeDeltaRange(start, end)

    # -- queries ------------------------------------------------------------

    def to_seconds(self) -> tuple[int, float]:
        """Return the lossless ``(seconds, subsecond)`` pair."""
        return self.seconds, float(self.subsecond)

    def to_decimal_seconds(self) -> float:
        return self.seconds + float(self.subsecond)

    def is_negative(self) -> bool:
        return self.seconds < 0

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.subsecond == 0.0

    def is_positive(self) -> bool:
        return not self.is_negative() and not self.is_zero()

    # -- arithmetic ---------------------------------------------------------

    def __neg__(self) -> TimeDelta:
        complement = 1.0 - self.subsecond
        if self.subsecond == 0.0 or complement >= 1.0:
            return TimeDelta(-self.seconds, 0.0)
        return TimeDelta(-self.seconds - 1, complement)

    def __add__(self, other: TimeDelta) -> TimeDelta:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        seconds = self.seconds + other.seconds
        subsecond = self.subsecond + other.subsecond
        if subsecond >= 1.0:
            seconds += 1
            subsecond -= 1.0
        return TimeDelta(seconds, subsecond)

    def __sub__(self, other: TimeDelta) -> TimeDelta:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        seconds = self.seconds - other.seconds
        subsecond = self.subsecond - other.subsecond
        if subsecond < 0.0:
            seconds -= 1
            subsecond += 1.0
            # A tiny negative fraction rounds to exactly one.
            if subsecond >= 1.0:
                seconds += 1
                subsecond = 0.0
        return TimeDelta(seconds, subsecond)

    def __mul__(self, factor: float) -> TimeDelta:
        if isinstance(factor, TimeDelta):
            return NotImplemented
        return TimeDelta.from_decimal_seconds(
            self.seconds * factor
        ) + TimeDelta.from_decimal_seconds(float(self.subsecond) * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> TimeDelta:
        if divisor == 0:
            raise ZeroDivisionError("division of a time delta by zero")
        return TimeDelta.from_decimal_seconds(
            self.seconds / divisor
        ) + TimeDelta.from_decimal_seconds(float(self.subsecond) / divisor)

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return (
            self.seconds == other.seconds
            and abs(self.subsecond - other.subsecond) < _SUBSECOND_TOLERANCE
        )

    def __lt__(self, other: TimeDelta) -> bool:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        if self == other:
            return False
        return (self.seconds, self.subsecond) < (other.seconds, other.subsecond)

    def __hash__(self) -> int:
        return hash(self.seconds)

    def __float__(self) -> float:
        return self.to_decimal_seconds()

    def __repr__(self) -> str:
        return f"TimeDelta(seconds={self.seconds}, subsecond={float(self.subsecond)!r})"


class TimeDeltaRange:
    """Inclusive range of time deltas.

    Args:
        start: First delta.
        end: Last delta (included when reached exactly).
        step: Increment, one second by default. Negative steps iterate
            downward.

    Raises:
        ValueError: If *step* is zero.
    """

    def __init__(
        self,
        start: TimeDelta,
        end: TimeDelta,
        step: TimeDelta | None = None,
    ) -> None:
        step = TimeDelta.from_seconds(1) if step is None else step
        if step.is_zero():
            raise ValueError("range step must be non-zero")
        self.start = start
        self.end = end
        self.step = step

    def with_step(self, step: TimeDelta) -> TimeDeltaRange:
        return TimeDeltaRange(self.start, self.end, step)

    def __iter__(self) -> Iterator[TimeDelta]:
        current = self.start
        if self.step.is_negative():
            while current >= self.end:
                yield current
                current = current + self.step
        else:
            while current <= self.end:
                yield current
                current = current + self.step

    def __len__(self) -> int:
        return sum(1 for _ in self)
