"""Tests for orientax.time: deltas, calendar, instants, scales and offsets."""

import itertools
import math

import pytest

from orientax.constants import (
    SECONDS_BETWEEN_J1950_AND_J2000,
    SECONDS_PER_JULIAN_CENTURY,
)
from orientax.errors import (
    DateError,
    MissingEopProviderError,
    SubsecondError,
    TimeDeltaError,
    TimeOfDayError,
    UnknownTimeScaleError,
)
from orientax.time import (
    Date,
    DefaultOffsetProvider,
    Epoch,
    Subsecond,
    Time,
    TimeDelta,
    TimeOfDay,
    TimeScale,
    Utc,
    is_leap_year,
)

# ---------------------------------------------------------------------------
# TimeDelta
# ---------------------------------------------------------------------------


class TestSubsecond:
    def test_valid(self):
        assert Subsecond(0.5) == 0.5

    def test_from_digits(self):
        assert Subsecond.from_digits("173") == pytest.approx(0.173)
        assert Subsecond.from_digits("") == 0.0

    @pytest.mark.parametrize("value", [1.0, -0.1, math.nan, math.inf])
    def test_out_of_range(self, value):
        with pytest.raises(SubsecondError):
            Subsecond(value)


class TestTimeDeltaConstruction:
    def test_from_seconds(self):
        dt = TimeDelta.from_seconds(5)
        assert dt.seconds == 5
        assert dt.subsecond == 0.0

    def test_from_decimal_seconds(self):
        dt = TimeDelta.from_decimal_seconds(1.5)
        assert dt.to_seconds() == (1, 0.5)

    def test_negative_keeps_positive_fraction(self):
        dt = TimeDelta.from_decimal_seconds(-0.25)
        assert dt.seconds == -1
        assert dt.subsecond == pytest.approx(0.75)
        assert dt.to_decimal_seconds() == pytest.approx(-0.25)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 1e300])
    def test_invalid_decimal_seconds(self, value):
        with pytest.raises(TimeDeltaError):
            TimeDelta.from_decimal_seconds(value)

    def test_unit_constructors(self):
        assert TimeDelta.from_minutes(1.5) == TimeDelta.from_seconds(90)
        assert TimeDelta.from_hours(1.0) == TimeDelta.from_seconds(3600)
        assert TimeDelta.from_days(0.5) == TimeDelta.from_seconds(43200)
        assert TimeDelta.from_julian_years(1.0) == TimeDelta.from_seconds(31557600)
        assert TimeDelta.from_julian_centuries(1.0) == TimeDelta.from_seconds(
            SECONDS_PER_JULIAN_CENTURY
        )

    def test_invalid_subsecond(self):
        with pytest.raises(SubsecondError):
            TimeDelta(0, 1.5)


class TestTimeDeltaArithmetic:
    def test_negation(self):
        dt = -TimeDelta(1, 0.25)
        assert dt.seconds == -2
        assert dt.subsecond == pytest.approx(0.75)

    def test_negation_of_whole_seconds(self):
        assert -TimeDelta.from_seconds(3) == TimeDelta.from_seconds(-3)

    def test_addition_carries(self):
        dt = TimeDelta(0, 0.75) + TimeDelta(0, 0.5)
        assert dt.seconds == 1
        assert dt.subsecond == pytest.approx(0.25)

    def test_subtraction_borrows(self):
        dt = TimeDelta(1, 0.25) - TimeDelta(0, 0.5)
        assert dt.seconds == 0
        assert dt.subsecond == pytest.approx(0.75)

    def test_subtraction_of_self_is_zero(self):
        dt = TimeDelta(7, 0.123)
        assert (dt - dt).is_zero()

    def test_multiplication(self):
        assert TimeDelta(2, 0.5) * 2 == TimeDelta.from_seconds(5)
        assert 2 * TimeDelta(2, 0.5) == TimeDelta.from_seconds(5)

    def test_division(self):
        assert (TimeDelta.from_seconds(5) / 2).to_decimal_seconds() == pytest.approx(2.5)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            TimeDelta.from_seconds(1) / 0

    def test_sign_queries(self):
        assert TimeDelta.from_decimal_seconds(-0.5).is_negative()
        assert TimeDelta().is_zero()
        assert TimeDelta(0, 0.1).is_positive()
        assert not TimeDelta().is_positive()

    def test_equality_tolerance(self):
        assert TimeDelta(1, 0.1) == TimeDelta(1, 0.1 + 1e-16)
        assert TimeDelta(1, 0.1) != TimeDelta(1, 0.1 + 1e-12)

    def test_ordering(self):
        assert TimeDelta(1, 0.0) < TimeDelta(1, 0.5)
        assert TimeDelta(-1, 0.9) < TimeDelta(0, 0.0)
        assert max(TimeDelta(3), TimeDelta(1)) == TimeDelta(3)

    def test_precision_over_centuries(self):
        dt = TimeDelta.from_julian_centuries(10.0) + TimeDelta(0, 1e-12)
        assert dt.subsecond == pytest.approx(1e-12, abs=1e-20)


class TestTimeDeltaRange:
    def test_default_step(self):
        values = list(TimeDelta.range(TimeDelta.from_seconds(0), TimeDelta.from_seconds(3)))
        assert [v.seconds for v in values] == [0, 1, 2, 3]

    def test_custom_step(self):
        r = TimeDelta.range(TimeDelta.from_seconds(0), TimeDelta.from_seconds(5)).with_step(
            TimeDelta.from_seconds(2)
        )
        assert [v.seconds for v in r] == [0, 2, 4]
        assert len(r) == 3

    def test_negative_step(self):
        r = TimeDelta.range(TimeDelta.from_seconds(3), TimeDelta.from_seconds(0)).with_step(
            TimeDelta.from_seconds(-1)
        )
        assert [v.seconds for v in r] == [3, 2, 1, 0]

    def test_zero_step_raises(self):
        r = TimeDelta.range(TimeDelta.from_seconds(0), TimeDelta.from_seconds(1))
        with pytest.raises(ValueError):
            r.with_step(TimeDelta())


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------


class TestDate:
    @pytest.mark.parametrize(
        "year, expected", [(2000, True), (1900, False), (2024, True), (2023, False)]
    )
    def test_is_leap_year(self, year, expected):
        assert is_leap_year(year) is expected

    def test_j2000_day_number(self):
        date = Date(2000, 1, 1)
        assert date.day_number() == 0
        assert date.seconds_since_j2000() == -43200

    @pytest.mark.parametrize(
        "day_number, expected",
        [
            (0, Date(2000, 1, 1)),
            (-1, Date(1999, 12, 31)),
            (59, Date(2000, 2, 29)),
            (366, Date(2001, 1, 1)),
            (8961, Date(2024, 7, 14)),
        ],
    )
    def test_from_day_number(self, day_number, expected):
        assert Date.from_day_number(day_number) == expected

    def test_day_number_roundtrip(self):
        for day_number in range(-200000, 200000, 397):
            assert Date.from_day_number(day_number).day_number() == day_number

    def test_day_of_year(self):
        assert Date(2024, 12, 31).day_of_year() == 366
        assert Date(2023, 12, 31).day_of_year() == 365
        assert Date(2023, 3, 1).day_of_year() == 60

    @pytest.mark.parametrize("ymd", [(2023, 2, 29), (2024, 13, 1), (2024, 0, 1), (2024, 4, 31)])
    def test_invalid_dates(self, ymd):
        with pytest.raises(DateError):
            Date(*ymd)

    def test_from_iso(self):
        assert Date.from_iso("2024-07-05") == Date(2024, 7, 5)

    def test_from_iso_invalid(self):
        with pytest.raises(DateError):
            Date.from_iso("2024/07/05")

    def test_str(self):
        assert str(Date(2024, 7, 5)) == "2024-07-05"


class TestTimeOfDay:
    def test_from_hms(self):
        t = TimeOfDay.from_hms(10, 27, 13.145)
        assert (t.hour, t.minute, t.second) == (10, 27, 13)
        assert t.subsecond == pytest.approx(0.145, abs=1e-12)

    def test_from_iso(self):
        t = TimeOfDay.from_iso("12:34:56.789")
        assert (t.hour, t.minute, t.second) == (12, 34, 56)
        assert t.subsecond == pytest.approx(0.789)

    def test_from_iso_invalid(self):
        with pytest.raises(TimeOfDayError):
            TimeOfDay.from_iso("12:34")

    def test_from_second_of_day(self):
        t = TimeOfDay.from_second_of_day(3661)
        assert (t.hour, t.minute, t.second) == (1, 1, 1)
        assert t.second_of_day() == 3661

    def test_leap_second_of_day(self):
        t = TimeOfDay.from_second_of_day(86400)
        assert (t.hour, t.minute, t.second) == (23, 59, 60)

    @pytest.mark.parametrize("hms", [(24, 0, 0), (0, 60, 0), (0, 0, 61)])
    def test_invalid(self, hms):
        with pytest.raises(TimeOfDayError):
            TimeOfDay(*hms)

    def test_str(self):
        assert str(TimeOfDay(9, 9, 18, 0.173)) == "09:09:18.173"


# ---------------------------------------------------------------------------
# Time scales
# ---------------------------------------------------------------------------


class TestTimeScale:
    @pytest.mark.parametrize("abbreviation", ["tdb", "TDB", " Tdb "])
    def test_from_abbreviation(self, abbreviation):
        assert TimeScale.from_abbreviation(abbreviation) is TimeScale.TDB

    def test_unknown(self):
        with pytest.raises(UnknownTimeScaleError):
            TimeScale.from_abbreviation("GPS")

    def test_names(self):
        assert str(TimeScale.TCB) == "TCB"
        assert TimeScale.TT.abbreviation == "TT"
        assert TimeScale.TAI.full_name == "International Atomic Time"


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class TestTimeConstruction:
    def test_j2000(self):
        t = Time.from_calendar(TimeScale.TAI, 2000, 1, 1, 12)
        assert t == Time.new(TimeScale.TAI, 0)

    def test_from_iso_with_scale_suffix(self):
        t = Time.from_iso("2000-01-01T12:00:00 TAI")
        assert t == Time.new(TimeScale.TAI, 0)

    def test_from_iso_with_scale_argument(self):
        t = Time.from_iso("2000-01-01T12:00:00.5", TimeScale.TT)
        assert t == Time.new(TimeScale.TT, 0, 0.5)

    def test_from_iso_without_scale(self):
        with pytest.raises(ValueError):
            Time.from_iso("2000-01-01T12:00:00")

    def test_from_iso_conflicting_scale(self):
        with pytest.raises(ValueError):
            Time.from_iso("2000-01-01T12:00:00 TT", TimeScale.TAI)

    def test_from_iso_unknown_scale(self):
        with pytest.raises(UnknownTimeScaleError):
            Time.from_iso("2000-01-01T12:00:00 XYZ")

    def test_leap_second_rejected(self):
        with pytest.raises(TimeOfDayError):
            Time.from_date_and_time(TimeScale.TAI, Date(2016, 12, 31), TimeOfDay(23, 59, 60))

    def test_from_epoch(self):
        t = Time.from_epoch(TimeScale.TT, Epoch.J1950)
        assert t.delta.seconds == -SECONDS_BETWEEN_J1950_AND_J2000

    def test_from_julian_date(self):
        t = Time.from_julian_date(TimeScale.TT, 2451545.5)
        assert t.delta == TimeDelta.from_seconds(43200)

    def test_from_modified_julian_date(self):
        t = Time.from_julian_date(TimeScale.TT, 51544.5, Epoch.MODIFIED_JULIAN_DATE)
        assert t.delta.is_zero()

    def test_from_two_part_julian_date(self):
        t = Time.from_two_part_julian_date(TimeScale.TT, 2400000.5, 51544.0)
        assert t.delta == TimeDelta.from_seconds(-43200)


class TestTimeProjections:
    def test_julian_dates(self):
        t = Time.new(TimeScale.TT, 0)
        assert t.julian_date() == 2451545.0
        assert t.modified_julian_date() == 51544.5
        assert t.days_since_j1950() == pytest.approx(18262.5)

    def test_two_part_julian_date(self):
        assert Time.new(TimeScale.TT, 0).two_part_julian_date() == (2451545.0, 0.0)
        assert Time.new(TimeScale.TT, 43200).two_part_julian_date() == (2451545.0, 0.5)

    def test_centuries(self):
        t = Time.new(TimeScale.TT, SECONDS_PER_JULIAN_CENTURY)
        assert t.centuries_since_j2000() == 1.0
        assert t.years_since_j2000() == 100.0

    def test_date_and_time_of_day(self):
        t = Time.from_iso("2024-07-05T09:09:18.173 TDB")
        assert t.date() == Date(2024, 7, 5)
        tod = t.time_of_day()
        assert (tod.hour, tod.minute, tod.second) == (9, 9, 18)
        assert tod.subsecond == pytest.approx(0.173)

    def test_str(self):
        assert str(Time.new(TimeScale.TAI, 0)) == "2000-01-01T12:00:00.000 TAI"


class TestTimeArithmetic:
    def test_add_delta(self):
        t = Time.new(TimeScale.TAI, 0) + TimeDelta.from_seconds(10)
        assert t.delta == TimeDelta.from_seconds(10)
        assert t.scale is TimeScale.TAI

    def test_difference(self):
        t1 = Time.new(TimeScale.TT, 100, 0.25)
        t2 = Time.new(TimeScale.TT, 40, 0.5)
        assert t1 - t2 == TimeDelta(59, 0.75)

    def test_subtract_delta(self):
        t = Time.new(TimeScale.TT, 100) - TimeDelta.from_seconds(1)
        assert t == Time.new(TimeScale.TT, 99)

    def test_mixed_scales_rejected(self):
        with pytest.raises(ValueError):
            Time.new(TimeScale.TT, 0) - Time.new(TimeScale.TAI, 0)

    def test_ordering(self):
        assert Time.new(TimeScale.TT, 0) < Time.new(TimeScale.TT, 1)

    def test_with_scale_keeps_delta(self):
        t = Time.new(TimeScale.TT, 123, 0.5).with_scale(TimeScale.TDB)
        assert t == Time.new(TimeScale.TDB, 123, 0.5)


class TestTimeConversions:
    def test_tai_to_tt(self):
        t = Time.new(TimeScale.TAI, 0).try_to_scale(TimeScale.TT)
        assert t.scale is TimeScale.TT
        assert t.delta.to_decimal_seconds() == pytest.approx(32.184, abs=1e-12)

    def test_ut1_without_provider(self):
        with pytest.raises(MissingEopProviderError):
            Time.new(TimeScale.TAI, 0).try_to_scale(TimeScale.UT1)

    def test_try_to_utc(self):
        utc = Time.new(TimeScale.TAI, 0).try_to_utc()
        assert utc == Utc(Date(2000, 1, 1), TimeOfDay(11, 59, 28))

    def test_try_to_utc_from_tt(self):
        utc = Time.new(TimeScale.TT, 0).try_to_utc()
        assert utc.date == Date(2000, 1, 1)
        assert (utc.time.hour, utc.time.minute, utc.time.second) == (11, 58, 55)
        assert utc.time.subsecond == pytest.approx(0.816, abs=1e-9)


# ---------------------------------------------------------------------------
# Offsets
# ---------------------------------------------------------------------------

_OFFSETS = [
    (TimeScale.TAI, TimeScale.TCB, 55.66851419888016),
    (TimeScale.TAI, TimeScale.TCG, 33.239589335894145),
    (TimeScale.TAI, TimeScale.TDB, 32.183882324981056),
    (TimeScale.TAI, TimeScale.TT, 32.184),
    (TimeScale.TCB, TimeScale.TAI, -55.668513317090046),
    (TimeScale.TCB, TimeScale.TCG, -22.4289240199929),
    (TimeScale.TCB, TimeScale.TDB, -23.484631010747805),
    (TimeScale.TCB, TimeScale.TT, -23.484513317090048),
    (TimeScale.TCG, TimeScale.TAI, -33.23958931272851),
    (TimeScale.TCG, TimeScale.TCB, 22.428924359636042),
    (TimeScale.TCG, TimeScale.TDB, -1.0557069988766656),
    (TimeScale.TCG, TimeScale.TT, -1.0555893127285145),
    (TimeScale.TDB, TimeScale.TAI, -32.18388231420531),
    (TimeScale.TDB, TimeScale.TCB, 23.48463137488165),
    (TimeScale.TDB, TimeScale.TCG, 1.0557069992589518),
    (TimeScale.TDB, TimeScale.TT, 1.176857946845189e-4),
    (TimeScale.TT, TimeScale.TAI, -32.184),
    (TimeScale.TT, TimeScale.TCB, 23.484513689085105),
    (TimeScale.TT, TimeScale.TCG, 1.055589313464182),
    (TimeScale.TT, TimeScale.TDB, -1.1768579472004603e-4),
]
"""Offsets at 2024-12-30T10:27:13.145 in the origin scale, computed with Orekit."""

_CONTINUOUS = [s for s in TimeScale if s is not TimeScale.UT1]


def _instant(scale: TimeScale) -> Time:
    return Time.from_date_and_time(
        scale, Date(2024, 12, 30), TimeOfDay.from_hms(10, 27, 13.145)
    )


class TestOffsets:
    """Offsets between the continuous scales."""

    @pytest.mark.parametrize("origin, target, expected", _OFFSETS)
    def test_against_orekit(self, origin, target, expected):
        delta = _instant(origin).delta
        actual = DefaultOffsetProvider().offset(origin, target, delta).to_decimal_seconds()
        atol = 1e-4 if TimeScale.TCB in (origin, target) else 1e-7
        assert actual == pytest.approx(expected, abs=atol)

    @pytest.mark.parametrize("scale", _CONTINUOUS)
    def test_same_scale_is_zero(self, scale):
        delta = _instant(scale).delta
        assert DefaultOffsetProvider().offset(scale, scale, delta).is_zero()

    @pytest.mark.parametrize("origin, target", list(itertools.permutations(_CONTINUOUS, 2)))
    def test_roundtrip(self, origin, target):
        t0 = _instant(origin)
        t1 = t0.try_to_scale(target).try_to_scale(origin)
        assert (t1 - t0).to_decimal_seconds() == pytest.approx(0.0, abs=1e-13)

    def test_ut1_offset_needs_provider(self):
        with pytest.raises(MissingEopProviderError):
            DefaultOffsetProvider().offset(TimeScale.TT, TimeScale.UT1, TimeDelta())


_SWEEP_YEARS = [-50, -25, 0, 24, 50, 75, 100]
"""Julian years from J2000, covering J1950 to J2100."""


def _sweep_delta(years: int) -> TimeDelta:
    return TimeDelta.from_julian_years(years) + TimeDelta(0, 0.25)


class TestOffsetConsistency:
    """Offsets between every ordered pair of continuous scales, J1950 to J2100."""

    @pytest.mark.parametrize("years", _SWEEP_YEARS)
    @pytest.mark.parametrize("origin, target", list(itertools.permutations(_CONTINUOUS, 2)))
    def test_roundtrip(self, origin, target, years):
        t0 = Time.from_delta(origin, _sweep_delta(years))
        t1 = t0.try_to_scale(target).try_to_scale(origin)
        assert (t1 - t0).to_decimal_seconds() == pytest.approx(0.0, abs=1e-15)

    @pytest.mark.parametrize("years", _SWEEP_YEARS)
    @pytest.mark.parametrize("origin, target", list(itertools.permutations(_CONTINUOUS, 2)))
    def test_forward_and_backward_offsets_cancel(self, origin, target, years):
        provider = DefaultOffsetProvider()
        delta = _sweep_delta(years)
        forward = provider.offset(origin, target, delta)
        backward = provider.offset(target, origin, delta + forward)
        assert (forward + backward).to_decimal_seconds() == pytest.approx(0.0, abs=1e-15)

    @pytest.mark.parametrize("years", _SWEEP_YEARS)
    def test_tcb_rate(self, years):
        # TCB - TDB grows by LB/(1 - LB) per TDB second.
        provider = DefaultOffsetProvider()
        delta = _sweep_delta(years)
        day = TimeDelta.from_days(1.0)
        before = provider.offset(TimeScale.TDB, TimeScale.TCB, delta)
        after = provider.offset(TimeScale.TDB, TimeScale.TCB, delta + day)
        rate = 1.550519768e-8 / (1.0 - 1.550519768e-8)
        assert (after - before).to_decimal_seconds() == pytest.approx(rate * 86400.0, abs=1e-15)

    def test_tdb_equals_tcb_offset_at_1977(self):
        # At 1977-01-01T00:00:32.184 TT the scales differ only by TDB0.
        delta = TimeDelta(-725803200 + 32, 0.184)
        offset = DefaultOffsetProvider().offset(TimeScale.TCB, TimeScale.TDB, delta)
        assert offset.to_decimal_seconds() == pytest.approx(-6.55e-5, abs=1e-15)
