"""Tests for UTC, leap seconds and the pre-1972 drift model."""

import pytest

from orientax.errors import (
    LeapSecondsKernelError,
    NonLeapSecondDateError,
    UtcError,
    UtcUndefinedError,
)
from orientax.time import (
    BuiltinLeapSeconds,
    Date,
    LeapSecondsKernel,
    Time,
    TimeDelta,
    TimeOfDay,
    TimeScale,
    Utc,
    tai_to_utc,
    utc_to_tai,
)

LEAP_2016 = 536500800
"""2017-01-01T00:00:00 UTC in seconds since J2000."""

# ---------------------------------------------------------------------------
# Utc
# ---------------------------------------------------------------------------


class TestUtcConstruction:
    @pytest.mark.parametrize(
        "iso",
        ["2024-07-05T09:09:18.173", "2024-07-05T09:09:18.173Z", "2024-07-05T09:09:18.173 UTC"],
    )
    def test_from_iso(self, iso):
        utc = Utc.from_iso(iso)
        assert utc.date == Date(2024, 7, 5)
        assert (utc.time.hour, utc.time.minute, utc.time.second) == (9, 9, 18)
        assert utc.time.subsecond == pytest.approx(0.173)

    def test_from_iso_invalid(self):
        with pytest.raises(UtcError):
            Utc.from_iso("2024-07-05 09:09:18")

    def test_leap_second_on_leap_second_date(self):
        utc = Utc.from_iso("2016-12-31T23:59:60")
        assert utc.time.second == 60

    def test_leap_second_on_ordinary_date(self):
        with pytest.raises(NonLeapSecondDateError):
            Utc.from_iso("2017-12-31T23:59:60")

    def test_undefined_before_1960(self):
        with pytest.raises(UtcUndefinedError):
            Utc(Date(1959, 12, 31), TimeOfDay())

    def test_undefined_is_utc_error(self):
        with pytest.raises(UtcError):
            Utc.from_iso("1959-12-31T00:00:00")

    def test_builder(self):
        utc = Utc.builder().with_ymd(2016, 12, 31).with_hms(23, 59, 60.0).build()
        assert utc == Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))

    def test_builder_rejects_bad_leap_second(self):
        with pytest.raises(NonLeapSecondDateError):
            Utc.builder().with_ymd(2017, 6, 30).with_hms(23, 59, 60.0).build()

    def test_builder_without_date(self):
        with pytest.raises(UtcError):
            Utc.builder().with_hms(12, 0, 0.0).build()

    def test_str(self):
        assert str(Utc.from_iso("2024-07-05T09:09:18.173Z")) == "2024-07-05T09:09:18.173 UTC"

    def test_delta_roundtrip(self):
        utc = Utc.from_iso("2024-07-05T09:09:18.5")
        assert Utc.from_delta(utc.to_delta()) == utc


# ---------------------------------------------------------------------------
# Leap-second providers
# ---------------------------------------------------------------------------


class TestBuiltinLeapSeconds:
    provider = BuiltinLeapSeconds()

    def test_j2000(self):
        assert self.provider.delta_tai_utc(Time.new(TimeScale.TAI, 0)) == TimeDelta.from_seconds(32)
        utc = Utc(Date(2000, 1, 1), TimeOfDay(12))
        assert self.provider.delta_utc_tai(utc) == TimeDelta.from_seconds(-32)

    @pytest.mark.parametrize(
        "iso, expected",
        [
            ("1972-01-01T00:00:10 TAI", 10),
            ("1990-06-01T00:00:00 TAI", 25),
            ("2017-01-01T00:00:37 TAI", 37),
            ("2024-01-01T00:00:00 TAI", 37),
        ],
    )
    def test_delta_tai_utc(self, iso, expected):
        assert self.provider.delta_tai_utc(Time.from_iso(iso)) == TimeDelta.from_seconds(expected)

    def test_delta_utc_tai(self):
        utc = Utc(Date(1990, 1, 1), TimeOfDay())
        assert self.provider.delta_utc_tai(utc) == TimeDelta.from_seconds(-25)

    def test_during_leap_second(self):
        utc = Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))
        assert self.provider.delta_utc_tai(utc) == TimeDelta.from_seconds(-36)

    def test_before_1972(self):
        assert self.provider.delta_tai_utc(Time.from_iso("1971-01-01T00:00:00 TAI")) is None
        assert self.provider.delta_utc_tai(Utc(Date(1971, 1, 1), TimeOfDay())) is None

    def test_is_leap_second(self):
        assert self.provider.is_leap_second(Time.new(TimeScale.TAI, LEAP_2016 + 36))
        assert not self.provider.is_leap_second(Time.new(TimeScale.TAI, LEAP_2016 + 37))

    def test_start_of_1972_is_not_a_leap_second(self):
        first = Time.from_iso("1972-01-01T00:00:09 TAI")
        assert first.delta.seconds == self.provider.tai_epochs[0]
        assert not self.provider.is_leap_second(first)
        assert self.provider.is_leap_second(Time.new(TimeScale.TAI, self.provider.tai_epochs[1]))

    @pytest.mark.parametrize(
        "date, expected",
        [
            (Date(2016, 12, 31), True),
            (Date(1972, 6, 30), True),
            (Date(2015, 6, 30), True),
            (Date(2017, 12, 31), False),
            (Date(1971, 12, 31), False),
        ],
    )
    def test_is_leap_second_date(self, date, expected):
        assert self.provider.is_leap_second_date(date) is expected


class TestLeapSecondsKernel:
    def test_matches_builtin_table(self, data_dir):
        kernel = LeapSecondsKernel.from_file(data_dir / "naif0012.tls")
        builtin = BuiltinLeapSeconds()
        assert len(kernel.leap_seconds) == 28
        assert kernel.leap_seconds == builtin.leap_seconds
        assert kernel.utc_epochs == builtin.utc_epochs
        assert kernel.tai_epochs == builtin.tai_epochs

    def test_same_answers_as_builtin(self, data_dir):
        kernel = LeapSecondsKernel.from_file(data_dir / "naif0012.tls")
        tai = Time.from_iso("2024-07-05T09:09:18.173 TAI")
        assert kernel.delta_tai_utc(tai) == BuiltinLeapSeconds().delta_tai_utc(tai)

    def test_from_string(self):
        kernel = LeapSecondsKernel.from_string(
            "\\begindata\nDELTET/DELTA_AT = ( 10, @1972-JAN-1\n 11, @1972-JUL-1 )\n\\begintext\n"
        )
        assert kernel.leap_seconds == (10, 11)
        assert kernel.utc_epochs == (-883656000, -867931200)

    def test_missing_assignment(self):
        with pytest.raises(LeapSecondsKernelError):
            LeapSecondsKernel.from_string("KPL/LSK\n")

    def test_empty_assignment(self):
        with pytest.raises(LeapSecondsKernelError):
            LeapSecondsKernel.from_string("DELTET/DELTA_AT = ( )")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LeapSecondsKernel.from_file(tmp_path / "missing.tls")

    def test_as_provider(self, data_dir):
        kernel = LeapSecondsKernel.from_file(data_dir / "naif0012.tls")
        utc = Utc.from_iso("2016-12-31T23:59:60", kernel)
        assert utc_to_tai(utc, kernel) == Time.new(TimeScale.TAI, LEAP_2016 + 36)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


class TestUtcConversions:
    def test_utc_to_tai_j2000(self):
        utc = Utc(Date(2000, 1, 1), TimeOfDay(12))
        assert utc.to_time() == Time.new(TimeScale.TAI, 32)

    def test_tai_to_utc_j2000(self):
        assert tai_to_utc(Time.new(TimeScale.TAI, 0)) == Utc(Date(2000, 1, 1), TimeOfDay(11, 59, 28))

    def test_leap_second_reported_as_second_60(self):
        utc = tai_to_utc(Time.new(TimeScale.TAI, LEAP_2016 + 36))
        assert utc == Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))

    def test_no_second_60_at_start_of_1972(self):
        utc = tai_to_utc(Time.from_iso("1972-01-01T00:00:09 TAI"))
        assert utc.date == Date(1971, 12, 31)
        assert utc.time.second == 59

    def test_after_leap_second(self):
        utc = tai_to_utc(Time.new(TimeScale.TAI, LEAP_2016 + 37))
        assert utc == Utc(Date(2017, 1, 1), TimeOfDay())

    def test_leap_second_roundtrip(self):
        for offset in range(30, 45):
            tai = Time.new(TimeScale.TAI, LEAP_2016 + offset, 0.5)
            assert utc_to_tai(tai_to_utc(tai)) == tai

    def test_roundtrip_over_decades(self):
        start = Utc(Date(1972, 1, 1), TimeOfDay()).to_delta()
        for k in range(0, 60):
            utc = Utc.from_delta(start + TimeDelta.from_days(k * 190.25))
            assert tai_to_utc(utc_to_tai(utc)) == utc

    def test_drift_model_1971(self):
        utc = Utc(Date(1971, 1, 1), TimeOfDay())
        tai = utc_to_tai(utc)
        offset = (tai.delta - utc.to_delta()).to_decimal_seconds()
        assert offset == pytest.approx(8.946162, abs=1e-6)

    def test_drift_model_roundtrip(self):
        utc = Utc(Date(1965, 3, 1), TimeOfDay(6, 30, 0))
        back = tai_to_utc(utc_to_tai(utc))
        assert (back.to_delta() - utc.to_delta()).to_decimal_seconds() == pytest.approx(0.0, abs=1e-6)

    def test_before_1960(self):
        with pytest.raises(UtcUndefinedError):
            Time.from_calendar(TimeScale.TAI, 1959, 6, 1).try_to_utc()
