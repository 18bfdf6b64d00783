"""Tests for orientax.eop: parsers, interpolation and providers."""

from __future__ import annotations

import os
import time
from pathlib import Path
from unittest.mock import patch

import httpx
import jax.numpy as jnp
import numpy as np
import polars as pl
import pytest

from orientax.constants import AS2RAD, MAS2RAD
from orientax.eop import (
    IERS_FINALS_2000A_URL,
    Akima,
    EopInterpolation,
    EopParser,
    EopProvider,
    Lagrange,
    download_eop_file,
    eop_data_from_frame,
    load_cached_eop,
    load_default_eop,
    load_eop_from_file,
    merge_eop_frames,
    parse_csv_file,
    parse_fixed_width_file,
    parse_fixed_width_line,
    read_eop_file,
)
from orientax.eop._parsers import EOP_COLUMNS, valid_prefix_length
from orientax.errors import (
    EopParserError,
    ExtrapolatedValueError,
    MissingIau1980Error,
    MissingIau2000Error,
)
from orientax.iers import ReferenceSystem
from orientax.time import Time, TimeScale


@pytest.fixture(scope="module")
def csv_2000a(data_dir: Path) -> Path:
    return data_dir / "finals2000A_2024.csv"


@pytest.fixture(scope="module")
def csv_1980(data_dir: Path) -> Path:
    return data_dir / "finals_2024.csv"


@pytest.fixture(scope="module")
def fixed_2007(data_dir: Path) -> Path:
    return data_dir / "finals2000A_2007.txt"


@pytest.fixture(scope="module")
def line_54195(fixed_2007: Path) -> str:
    lines = fixed_2007.read_text().splitlines()
    return next(line for line in lines if " 54195.00 " in line)


@pytest.fixture(scope="module")
def eop(csv_2000a: Path) -> EopProvider:
    return load_eop_from_file(csv_2000a)


@pytest.fixture(scope="module")
def merged_eop(csv_1980: Path, csv_2000a: Path) -> EopProvider:
    return EopParser().from_paths(csv_1980, csv_2000a).parse()


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------


class TestAkima:
    def test_reproduces_nodes(self):
        x = jnp.arange(8.0)
        y = jnp.sin(x)
        spline = Akima.fit(x, y)
        for xi, yi in zip(x, y):
            assert float(spline.interpolate(xi)) == pytest.approx(float(yi), abs=1e-15)

    def test_reproduces_linear_data(self):
        x = jnp.arange(10.0)
        spline = Akima.fit(x, 2.0 * x + 1.0)
        assert float(spline.interpolate(3.5)) == pytest.approx(8.0, abs=1e-12)
        assert float(spline.interpolate(0.25)) == pytest.approx(1.5, abs=1e-12)

    def test_stays_within_step(self):
        """No overshoot next to a step in the data."""
        x = jnp.arange(8.0)
        y = jnp.array([0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0])
        spline = Akima.fit(x, y)
        values = [float(spline.interpolate(xi)) for xi in np.linspace(0.0, 7.0, 57)]
        assert min(values) >= -1e-12
        assert max(values) <= 1.0 + 1e-12

    def test_clamps_outside_table(self):
        spline = Akima.fit(jnp.arange(4.0), jnp.array([1.0, 2.0, 4.0, 8.0]))
        assert float(spline.interpolate(10.0)) == pytest.approx(8.0)

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            Akima.fit(jnp.arange(4.0), jnp.arange(5.0))

    def test_too_few_nodes(self):
        with pytest.raises(ValueError, match="at least 3"):
            Akima.fit(jnp.arange(2.0), jnp.arange(2.0))


class TestLagrange:
    @staticmethod
    def cubic(x):
        return x**3 - 2.0 * x + 0.5

    @pytest.mark.parametrize("xi", [0.3, 4.3, 8.7])
    def test_reproduces_cubic(self, xi):
        x = jnp.arange(10.0)
        poly = Lagrange.fit(x, self.cubic(x))
        assert float(poly.interpolate(xi)) == pytest.approx(self.cubic(xi), abs=1e-10)

    def test_reproduces_nodes(self):
        x = jnp.arange(6.0)
        y = jnp.exp(x)
        poly = Lagrange.fit(x, y)
        assert float(poly.interpolate(2.0)) == pytest.approx(float(y[2]), rel=1e-14)

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            Lagrange.fit(jnp.arange(5.0), jnp.arange(4.0))

    def test_too_few_nodes(self):
        with pytest.raises(ValueError, match="4 nodes"):
            Lagrange.fit(jnp.arange(3.0), jnp.arange(3.0))


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


class TestParseCsv:
    def test_iau2000_file(self, csv_2000a: Path):
        df = parse_csv_file(csv_2000a)
        assert df.columns == list(EOP_COLUMNS)
        assert len(df) == 92
        first = df.row(0, named=True)
        assert first["mjd"] == 60462.0
        assert first["x_pole"] == pytest.approx(0.033907)
        assert first["y_pole"] == pytest.approx(0.450730)
        assert first["ut1_utc"] == pytest.approx(-0.0204404)
        assert first["dx"] == pytest.approx(0.321)
        assert first["dy"] == pytest.approx(-0.139)
        assert df["dpsi"].null_count() == 92

    def test_iau1980_file(self, csv_1980: Path):
        df = parse_csv_file(csv_1980)
        assert df["dpsi"][0] == pytest.approx(-107.5)
        assert df["deps"][0] == pytest.approx(-8.1)
        assert df["dx"].null_count() == len(df)

    def test_unexpected_header(self, tmp_path: Path):
        path = tmp_path / "bad.csv"
        path.write_text("MJD;Year;Month\n60462;2024;06\n")
        with pytest.raises(EopParserError, match="header"):
            parse_csv_file(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            parse_csv_file(tmp_path / "missing.csv")


class TestParseFixedWidth:
    def test_parse_line(self, line_54195: str):
        mjd, x, y, dut1, nut1, nut2 = parse_fixed_width_line(line_54195)
        assert mjd == 54195.0
        assert x == pytest.approx(0.033178)
        assert y == pytest.approx(0.483095)
        assert dut1 == pytest.approx(-0.0714227)
        assert nut1 == pytest.approx(0.142)
        assert nut2 == pytest.approx(-0.259)

    def test_short_line_is_padded(self, line_54195: str):
        result = parse_fixed_width_line(line_54195[:68])
        assert result is not None
        assert result[3] == pytest.approx(-0.0714227)
        assert result[4] is None
        assert result[5] is None

    def test_too_long_line(self, line_54195: str):
        assert parse_fixed_width_line(line_54195 + " " * 200) is None

    def test_line_without_mjd(self):
        assert parse_fixed_width_line("") is None
        assert parse_fixed_width_line("  header text") is None

    def test_iau2000_file(self, fixed_2007: Path):
        df = parse_fixed_width_file(fixed_2007)
        assert len(df) == 101
        row = df.filter(pl.col("mjd") == 54195.0).row(0, named=True)
        assert row["x_pole"] == pytest.approx(0.033178)
        assert row["ut1_utc"] == pytest.approx(-0.0714227)
        assert row["dx"] == pytest.approx(0.142)
        assert row["dy"] == pytest.approx(-0.259)
        assert df["dpsi"].null_count() == 101

    def test_explicit_iau1980(self, fixed_2007: Path):
        df = parse_fixed_width_file(fixed_2007, iau1980=True)
        row = df.filter(pl.col("mjd") == 54195.0).row(0, named=True)
        assert row["dpsi"] == pytest.approx(0.142)
        assert row["dx"] is None

    def test_no_valid_lines(self, tmp_path: Path):
        path = tmp_path / "finals.all"
        path.write_text("nothing to see here\n")
        with pytest.raises(EopParserError):
            parse_fixed_width_file(path)

    def test_read_dispatches_on_format(self, csv_2000a: Path, fixed_2007: Path):
        assert read_eop_file(csv_2000a)["mjd"][0] == 60462.0
        assert read_eop_file(fixed_2007)["mjd"][0] == 54150.0


class TestMergeFrames:
    def test_merge_fills_nutation(self, csv_1980: Path, csv_2000a: Path):
        merged = merge_eop_frames(parse_csv_file(csv_1980), parse_csv_file(csv_2000a))
        first = merged.row(0, named=True)
        assert first["dpsi"] == pytest.approx(-107.5)
        assert first["dx"] == pytest.approx(0.321)
        assert first["x_pole"] == pytest.approx(0.033907)

    def test_mismatched_lengths(self, csv_1980: Path, csv_2000a: Path):
        with pytest.raises(EopParserError, match="mismatched"):
            merge_eop_frames(parse_csv_file(csv_1980), parse_csv_file(csv_2000a).head(10))

    def test_valid_prefix_length(self):
        df = pl.DataFrame({"a": [1.0, 2.0, None, 4.0], "b": [1.0, 2.0, 3.0, 4.0]})
        assert valid_prefix_length(df, ("a", "b")) == 2
        assert valid_prefix_length(df, ("b",)) == 4


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------


class TestEopProvider:
    def test_range(self, eop: EopProvider):
        assert eop.mjd_range == (60462.0, 60553.0)

    def test_available_models(self, eop: EopProvider):
        assert eop.data.has_iau2000
        assert not eop.data.has_iau1980

    def test_values_at_node(self, eop: EopProvider):
        pole = eop.polar_motion(60462.0)
        assert float(pole.xp) == pytest.approx(0.033907 * AS2RAD, abs=1e-15)
        assert float(pole.yp) == pytest.approx(0.450730 * AS2RAD, abs=1e-15)
        assert float(eop.delta_ut1_utc(60462.0)) == pytest.approx(-0.0204404, abs=1e-12)
        assert float(eop.delta_ut1_tai(60462.0)) == pytest.approx(-37.0204404, abs=1e-12)
        dxdy = eop.nutation_precession_iau2000(60462.0)
        assert float(dxdy.x) == pytest.approx(0.321 * MAS2RAD, abs=1e-15)
        assert float(dxdy.y) == pytest.approx(-0.139 * MAS2RAD, abs=1e-15)

    def test_value_between_nodes(self, eop: EopProvider):
        dut1 = float(eop.delta_ut1_utc(60462.5))
        assert -0.0210632 < dut1 < -0.0204404

    def test_interpolate(self, eop: EopProvider):
        values = eop.interpolate(60463.0)
        assert float(values.x_pole) == pytest.approx(0.034801 * AS2RAD, abs=1e-15)
        assert float(values.ut1_utc) == pytest.approx(-0.0210632, abs=1e-12)
        assert float(values.dx) == pytest.approx(0.316 * MAS2RAD, abs=1e-15)
        assert float(values.dy) == pytest.approx(-0.130 * MAS2RAD, abs=1e-15)

    @pytest.mark.parametrize("mjd", [60461.0, 60553.5])
    def test_extrapolation_raises(self, eop: EopProvider, mjd):
        with pytest.raises(ExtrapolatedValueError):
            eop.polar_motion(mjd)
        with pytest.raises(ExtrapolatedValueError):
            eop.delta_ut1_utc(mjd)

    @pytest.mark.parametrize("mjd", [60462.0, 60553.0])
    def test_table_endpoints_are_valid(self, eop: EopProvider, mjd):
        assert eop.mjd_range[0] <= mjd <= eop.mjd_range[1]
        eop.polar_motion(mjd)
        eop.delta_ut1_utc(mjd)
        eop.interpolate(mjd)

    def test_just_outside_table_raises(self, eop: EopProvider):
        with pytest.raises(ExtrapolatedValueError):
            eop.polar_motion(eop.mjd_range[1] + 1e-6)
        with pytest.raises(ExtrapolatedValueError):
            eop.delta_ut1_utc(eop.mjd_range[0] - 1e-6)

    def test_missing_iau1980(self, eop: EopProvider):
        with pytest.raises(MissingIau1980Error):
            eop.nutation_precession_iau1980(60462.0)

    def test_missing_iau2000(self, csv_1980: Path):
        eop = load_eop_from_file(csv_1980)
        with pytest.raises(MissingIau2000Error):
            eop.nutation_precession_iau2000(60462.0)
        values = eop.interpolate(60462.0)
        assert values.dx is None
        assert values.dy is None

    def test_lagrange_provider(self, csv_2000a: Path):
        eop = load_eop_from_file(csv_2000a, interpolation=EopInterpolation.LAGRANGE)
        assert eop.interpolation is EopInterpolation.LAGRANGE
        assert float(eop.delta_ut1_utc(60463.0)) == pytest.approx(-0.0210632, abs=1e-12)
        akima = load_eop_from_file(csv_2000a)
        assert float(eop.delta_ut1_utc(60480.5)) == pytest.approx(
            float(akima.delta_ut1_utc(60480.5)), abs=1e-5
        )

    def test_fixed_width_provider(self, fixed_2007: Path):
        eop = EopProvider.from_file(fixed_2007)
        assert eop.mjd_range == (54150.0, 54250.0)
        assert float(eop.delta_ut1_utc(54195.0)) == pytest.approx(-0.0714227, abs=1e-12)
        assert float(eop.delta_ut1_tai(54195.0)) == pytest.approx(-33.0714227, abs=1e-12)

    def test_repr(self, eop: EopProvider):
        assert repr(eop).startswith("EopProvider(mjd=[60462.0, 60553.0]")


class TestEopProviderTimeQueries:
    def test_utc_mjd(self, eop: EopProvider):
        tai = Time.from_iso("2024-06-01T00:00:37 TAI")
        assert eop.utc_mjd(tai) == pytest.approx(60462.0, abs=1e-10)

    def test_utc_mjd_from_tt(self, eop: EopProvider):
        tt = Time.from_iso("2024-06-02T00:01:09.184 TT")
        assert eop.utc_mjd(tt) == pytest.approx(60463.0, abs=1e-10)

    def test_pole_coords(self, eop: EopProvider):
        tai = Time.from_iso("2024-06-02T00:00:37 TAI")
        pole = eop.pole_coords(tai)
        assert float(pole.xp) == pytest.approx(0.034801 * AS2RAD, abs=1e-15)

    def test_corrections_by_system(self, merged_eop: EopProvider):
        tai = Time.from_iso("2024-06-01T00:00:37 TAI")
        iau1980 = merged_eop.corrections(tai, ReferenceSystem.IERS1996)
        assert float(iau1980.x) == pytest.approx(-107.5 * MAS2RAD, abs=1e-15)
        assert float(iau1980.y) == pytest.approx(-8.1 * MAS2RAD, abs=1e-15)
        for system in (ReferenceSystem.IERS2003A, ReferenceSystem.IERS2010):
            iau2000 = merged_eop.corrections(tai, system)
            assert float(iau2000.x) == pytest.approx(0.321 * MAS2RAD, abs=1e-15)

    def test_corrections_missing_model(self, eop: EopProvider):
        tai = Time.from_iso("2024-06-01T00:00:37 TAI")
        with pytest.raises(MissingIau1980Error):
            eop.corrections(tai, ReferenceSystem.IERS1996)

    def test_tai_to_ut1(self, eop: EopProvider):
        tai = Time.from_iso("2024-06-01T00:00:37 TAI")
        ut1 = tai.try_to_scale(TimeScale.UT1, eop)
        assert (ut1 - tai.with_scale(TimeScale.UT1)).to_decimal_seconds() == pytest.approx(
            -37.0204404, abs=1e-6
        )

    def test_ut1_roundtrip(self, eop: EopProvider):
        tai = Time.from_iso("2024-07-05T09:09:18.173 TAI")
        ut1 = tai.try_to_scale(TimeScale.UT1, eop)
        back = ut1.try_to_scale(TimeScale.TAI, eop)
        assert (back - tai).to_decimal_seconds() == pytest.approx(0.0, abs=1e-9)

    def test_tt_to_ut1(self, eop: EopProvider):
        tt = Time.from_iso("2024-07-05T09:09:18.173 TT")
        ut1 = tt.try_to_scale(TimeScale.UT1, eop)
        offset = (ut1 - tt.with_scale(TimeScale.UT1)).to_decimal_seconds()
        assert -69.2 < offset < -69.1


# ---------------------------------------------------------------------------
# Parser builder and frame conversion
# ---------------------------------------------------------------------------


class TestEopParser:
    def test_merged_files(self, merged_eop: EopProvider):
        assert merged_eop.data.has_iau1980
        assert merged_eop.data.has_iau2000
        dpsi = merged_eop.nutation_precession_iau1980(60496.0)
        assert float(dpsi.x) == pytest.approx(-107.5 * MAS2RAD, abs=1e-15)

    def test_builder_options(self, csv_2000a: Path, data_dir: Path):
        from orientax.time import LeapSecondsKernel

        kernel = LeapSecondsKernel.from_file(data_dir / "naif0012.tls")
        eop = (
            EopParser()
            .from_path(csv_2000a)
            .with_leap_seconds(kernel)
            .with_interpolation(EopInterpolation.LAGRANGE)
            .parse()
        )
        assert eop.leap_seconds is kernel
        assert eop.interpolation is EopInterpolation.LAGRANGE
        assert float(eop.delta_ut1_tai(60462.0)) == pytest.approx(-37.0204404, abs=1e-12)

    def test_no_path(self):
        with pytest.raises(EopParserError, match="no EOP file"):
            EopParser().parse()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            EopParser().from_path(tmp_path / "missing.csv").parse()

    def test_too_few_rows(self, csv_2000a: Path):
        with pytest.raises(EopParserError, match="too few"):
            eop_data_from_frame(parse_csv_file(csv_2000a).head(3))

    def test_before_1960(self):
        df = pl.DataFrame(
            {name: [0.0] * 4 for name in EOP_COLUMNS},
        ).with_columns(pl.Series("mjd", [36000.0, 36001.0, 36002.0, 36003.0]))
        with pytest.raises(EopParserError, match="1960"):
            eop_data_from_frame(df)

    def test_predictions_are_trimmed(self, csv_2000a: Path):
        df = parse_csv_file(csv_2000a).with_columns(
            pl.when(pl.col("mjd") > 60500.0).then(None).otherwise(pl.col("dx")).alias("dx")
        )
        data = eop_data_from_frame(df)
        assert float(data.mjd[-1]) == 60553.0
        assert float(data.mjd_iau2000[-1]) == 60500.0


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TestLoadDefaultEop:
    def test_bundled_data(self):
        eop = load_default_eop()
        first, last = eop.mjd_range
        assert first == 58849.0
        assert last > 61000.0
        assert eop.data.has_iau2000

    def test_bundled_values(self):
        eop = load_default_eop()
        pole = eop.polar_motion(60496.0)
        assert float(pole.xp) == pytest.approx(0.102112 * AS2RAD, abs=1e-15)
        assert float(pole.yp) == pytest.approx(0.478115 * AS2RAD, abs=1e-15)
        assert float(eop.delta_ut1_utc(60496.0)) == pytest.approx(0.0010719, abs=1e-12)
        dxdy = eop.nutation_precession_iau2000(60496.0)
        assert float(dxdy.x) == pytest.approx(0.395 * MAS2RAD, abs=1e-15)
        assert float(dxdy.y) == pytest.approx(-0.099 * MAS2RAD, abs=1e-15)


def _mock_download(mock_client_cls, text: str) -> None:
    mock_response = mock_client_cls.return_value.__enter__.return_value.get.return_value
    mock_response.text = text
    mock_response.raise_for_status.return_value = None


class TestLoadCachedEop:
    def test_downloads_when_missing(self, tmp_path: Path, fixed_2007: Path):
        dest = tmp_path / "finals2000A.all"
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            _mock_download(mock_client_cls, fixed_2007.read_text())
            eop = load_cached_eop(dest)
        assert dest.exists()
        assert eop.mjd_range == (54150.0, 54250.0)

    def test_uses_fresh_cache(self, tmp_path: Path, fixed_2007: Path):
        dest = tmp_path / "finals2000A.all"
        dest.write_text(fixed_2007.read_text())
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            eop = load_cached_eop(dest)
            mock_client_cls.assert_not_called()
        assert eop.mjd_range == (54150.0, 54250.0)

    def test_refreshes_stale_cache(self, tmp_path: Path, fixed_2007: Path, csv_2000a: Path):
        dest = tmp_path / "finals2000A.all"
        dest.write_text(fixed_2007.read_text())
        old_time = time.time() - 30 * 86400
        os.utime(dest, (old_time, old_time))
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            _mock_download(mock_client_cls, csv_2000a.read_text())
            eop = load_cached_eop(dest, max_age_days=7.0)
        assert eop.mjd_range == (60462.0, 60553.0)

    def test_download_failure_falls_back(self, tmp_path: Path):
        dest = tmp_path / "finals2000A.all"
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            mock_client_cls.return_value.__enter__.return_value.get.side_effect = (
                httpx.ConnectError("offline")
            )
            eop = load_cached_eop(dest)
        assert eop.mjd_range[0] == 58849.0

    def test_parse_failure_falls_back(self, tmp_path: Path):
        dest = tmp_path / "finals2000A.all"
        dest.write_text("garbage\n")
        eop = load_cached_eop(dest)
        assert eop.mjd_range[0] == 58849.0

    def test_default_cache_location(self, monkeypatch, tmp_path: Path, fixed_2007: Path):
        monkeypatch.setenv("ORIENTAX_CACHE", str(tmp_path))
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            _mock_download(mock_client_cls, fixed_2007.read_text())
            load_cached_eop()
        assert (tmp_path / "eop" / "finals2000A.all").exists()


class TestDownloadEopFile:
    def test_creates_parent_dirs(self, tmp_path: Path):
        dest = tmp_path / "deep" / "nested" / "finals2000A.all"
        with patch("orientax.eop._download.httpx.Client") as mock_client_cls:
            _mock_download(mock_client_cls, "mock eop data\n")
            result = download_eop_file(dest)
        assert result == dest.resolve()
        assert dest.read_text() == "mock eop data\n"
        mock_client_cls.return_value.__enter__.return_value.get.assert_called_once_with(
            IERS_FINALS_2000A_URL
        )

    def test_default_url(self):
        assert "iers.org" in IERS_FINALS_2000A_URL
        assert IERS_FINALS_2000A_URL.endswith("finals2000A.all")

    @pytest.mark.network
    def test_download(self, tmp_path: Path):
        dest = tmp_path / "finals2000A.all"
        download_eop_file(dest)
        eop = load_eop_from_file(dest)
        assert eop.data.has_iau2000
        assert eop.mjd_range[1] - eop.mjd_range[0] > 1000.0
