"""Tests for orientax.iers, checked against the SOFA test suite values."""

import jax.numpy as jnp
import numpy as np
import pytest

from orientax.constants import AS2RAD
from orientax.iers import (
    CipCoords,
    Corrections,
    Iau2000Model,
    Nutation,
    PoleCoords,
    PrecessionIau2006,
    ReferenceSystem,
    cio_locator_iau2006,
    earth_rotation_angle,
    equation_of_the_equinoxes_complementary_terms,
    equation_of_the_equinoxes_iau1994,
    equation_of_the_equinoxes_iau2000,
    equation_of_the_equinoxes_iau2000a,
    equation_of_the_equinoxes_iau2000b,
    fundamental_args_iers03,
    gmst_iau1982,
    gmst_iau2000,
    gmst_iau2006,
    mean_obliquity_iau1980,
    mean_obliquity_iau2006,
    polar_motion_matrix,
    tio_locator,
)
from orientax.time import Time, TimeScale


def _centuries(mjd: float) -> float:
    return (mjd - 51544.5) / 36525.0


def _days(mjd: float) -> float:
    return mjd - 51544.5


def _numat(epsa: float, dpsi: float, deps: float) -> np.ndarray:
    # Passive elementary rotations composed in plain numpy.
    def rx(a):
        c, s = np.cos(a), np.sin(a)
        return np.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])

    def rz(a):
        c, s = np.cos(a), np.sin(a)
        return np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])

    return rx(-(epsa + deps)) @ rz(-dpsi) @ rx(epsa)


def _mjd_time(scale: TimeScale, mjd: float) -> Time:
    return Time.from_two_part_julian_date(scale, 2400000.5, mjd)


# ---------------------------------------------------------------------------
# Fundamental arguments and obliquity
# ---------------------------------------------------------------------------


class TestFundamentalArguments:
    def test_iers03_arguments(self):
        expected = [
            5.132369751108684150,
            6.226797973505507345,
            0.2597711366745499518,
            1.946709205396925672,
            -5.973618440951302183,
            5.417338184297289661,
            3.424900460533758000,
            1.744713738913081846,
            3.275506840277781492,
            5.275711665202481138,
            5.371574539440827046,
            5.180636450180413523,
            2.079343830860413523,
            0.1950884762240000000e-1,
        ]
        np.testing.assert_allclose(fundamental_args_iers03(0.8), expected, atol=1e-12)


class TestObliquity:
    def test_iau1980(self):
        assert float(mean_obliquity_iau1980(_centuries(54388.0))) == pytest.approx(
            0.4090751347643816218, abs=1e-14
        )

    def test_iau2006(self):
        assert float(mean_obliquity_iau2006(_centuries(54388.0))) == pytest.approx(
            0.4090749229387258204, abs=1e-14
        )


# ---------------------------------------------------------------------------
# Nutation
# ---------------------------------------------------------------------------


class TestNutation:
    t = _centuries(53736.0)

    @pytest.mark.parametrize(
        "model, dpsi, deps",
        [
            (Nutation.iau1980, -0.9643658353226563966e-5, 0.4060051006879713322e-4),
            (Nutation.iau2000a, -9.630909107115518e-6, 4.063239174001679e-5),
            (Nutation.iau2000b, -9.632552291148363e-6, 4.063197106621159e-5),
            (Nutation.iau2006a, -9.63091202582031e-6, 4.06323849688725e-5),
        ],
    )
    def test_models(self, model, dpsi, deps):
        nut = model(self.t)
        assert float(nut.dpsi) == pytest.approx(dpsi, abs=1e-13)
        assert float(nut.deps) == pytest.approx(deps, abs=1e-13)

    def test_nutation_matrix(self):
        nut = Nutation(jnp.asarray(-0.9630909107115582393e-5), jnp.asarray(0.4063239174001678826e-4))
        epsa = 0.4090789763356509900
        m = np.asarray(nut.nutation_matrix(epsa))
        np.testing.assert_allclose(m, _numat(epsa, float(nut.dpsi), float(nut.deps)), atol=1e-15)
        assert m[0, 0] == pytest.approx(0.9999999999536227949, abs=1e-15)
        assert m[1, 1] == pytest.approx(0.9999999991354655028, abs=1e-15)
        assert m[0, 1] == pytest.approx(0.8836238544090873336e-5, abs=1e-15)
        assert m[0, 2] == pytest.approx(0.3830835237722400669e-5, abs=1e-15)

    def test_adding_corrections(self):
        nut = Nutation(jnp.asarray(1.0), jnp.asarray(2.0)) + Corrections(0.5, -0.5)
        assert float(nut.dpsi) == 1.5
        assert float(nut.deps) == 1.5


# ---------------------------------------------------------------------------
# CIP and CIO
# ---------------------------------------------------------------------------


class TestCip:
    def test_xy_series(self):
        xy = CipCoords.iau2006(_centuries(53736.0))
        assert float(xy.x) == pytest.approx(5.791308486706011e-4, abs=1e-15)
        assert float(xy.y) == pytest.approx(4.020579816732958e-5, abs=1e-15)

    def test_cio_locator(self):
        s = cio_locator_iau2006(
            _centuries(53736.0), 0.5791308486706011000e-3, 0.4020579816732961219e-4
        )
        assert float(s) == pytest.approx(-1.220032213076463e-8, abs=1e-16)

    def test_celestial_to_intermediate_matrix(self):
        xy = CipCoords(jnp.asarray(0.5791308486706011000e-3), jnp.asarray(0.4020579816732961219e-4))
        expected = [
            [0.9999998323037157138, 0.5581984869168499149e-9, -0.5791308491611282180e-3],
            [-0.2384261642670440317e-7, 0.9999999991917468964, -0.4020579110169668931e-4],
            [0.5791308486706011000e-3, 0.4020579816732961219e-4, 0.9999998314954627590],
        ]
        np.testing.assert_allclose(
            xy.celestial_to_intermediate_matrix(-0.1220040848472271978e-7), expected, atol=1e-12
        )

    def test_from_matrix_agrees_with_series(self):
        t = _centuries(53736.0)
        npb = Nutation.iau2006a(t).nutation_matrix(
            mean_obliquity_iau2006(t)
        ) @ PrecessionIau2006.from_centuries(t).bias_precession_matrix()
        from_matrix = CipCoords.from_matrix(npb)
        series = CipCoords.iau2006(t)
        assert float(from_matrix.x) == pytest.approx(float(series.x), abs=5e-11)
        assert float(from_matrix.y) == pytest.approx(float(series.y), abs=5e-11)


# ---------------------------------------------------------------------------
# Earth rotation
# ---------------------------------------------------------------------------


class TestEarthRotation:
    def test_earth_rotation_angle(self):
        assert float(earth_rotation_angle(_days(54388.0))) == pytest.approx(
            0.4022837240028158, abs=1e-12
        )

    def test_gmst_iau1982(self):
        assert float(gmst_iau1982(_days(53736.0))) == pytest.approx(1.754174981860675, abs=1e-12)

    def test_gmst_iau2000(self):
        gmst = gmst_iau2000(_days(53736.0), _centuries(53736.0))
        assert float(gmst) == pytest.approx(1.7541749722107407, abs=1e-12)

    def test_gmst_iau2006(self):
        gmst = gmst_iau2006(_days(53736.0), _centuries(53736.0))
        assert float(gmst) == pytest.approx(1.7541749718700912, abs=1e-12)

    def test_equation_of_the_equinoxes_iau1994(self):
        ee = equation_of_the_equinoxes_iau1994(_centuries(41234.0))
        assert float(ee) == pytest.approx(5.357758254609257e-5, abs=1e-15)

    def test_equation_of_the_equinoxes_iau2000a(self):
        ee = equation_of_the_equinoxes_iau2000a(_centuries(53736.0))
        assert float(ee) == pytest.approx(-8.834192459222587e-6, abs=1e-15)

    def test_equation_of_the_equinoxes_iau2000b(self):
        ee = equation_of_the_equinoxes_iau2000b(_centuries(53736.0))
        assert float(ee) == pytest.approx(-8.835700060003032e-6, abs=1e-15)

    def test_equation_of_the_equinoxes_iau2000(self):
        ee = equation_of_the_equinoxes_iau2000(
            _centuries(53736.0), 0.4090789763356509900, -0.9630909107115582393e-5
        )
        assert float(ee) == pytest.approx(-8.834193235367966e-6, abs=1e-15)

    def test_complementary_terms(self):
        ct = equation_of_the_equinoxes_complementary_terms(_centuries(53736.0))
        assert float(ct) == pytest.approx(2.046085004885125e-9, abs=1e-17)


class TestPolarMotion:
    def test_tio_locator(self):
        assert float(tio_locator(_centuries(52541.0))) == pytest.approx(
            -6.216698469981019e-12, rel=1e-12
        )

    def test_polar_motion_matrix(self):
        expected = [
            [0.9999999999999674721, -0.1367174580728846989e-10, 0.2550602379999972345e-6],
            [0.1414624947957029801e-10, 0.9999999999982695317, -0.1860359246998866389e-5],
            [-0.2550602379741215021e-6, 0.1860359247002414021e-5, 0.9999999999982370039],
        ]
        rpom = polar_motion_matrix(2.55060238e-7, 1.860359247e-6, -0.1367174580728891460e-10)
        np.testing.assert_allclose(rpom, expected, atol=1e-12)


# ---------------------------------------------------------------------------
# Reference systems
# ---------------------------------------------------------------------------


class TestReferenceSystem:
    tt = _mjd_time(TimeScale.TT, 53736.0)
    ut1 = _mjd_time(TimeScale.UT1, 53736.0)

    @pytest.mark.parametrize(
        "system, expected",
        [
            (ReferenceSystem.IERS1996, 1.7541661360206453),
            (ReferenceSystem.IERS2003A, 1.7541661380182814),
            (ReferenceSystem.IERS2003B, 1.7541661365106807),
            (ReferenceSystem.IERS2010, 1.7541661376750192),
        ],
    )
    def test_greenwich_apparent_sidereal_time(self, system, expected):
        gast = system.greenwich_apparent_sidereal_time(self.tt, self.ut1)
        assert float(gast) == pytest.approx(expected, abs=1e-11)

    def test_sidereal_time_with_1996_corrections(self):
        system = ReferenceSystem.IERS1996
        ddpsi = -55.0655e-3 * AS2RAD
        corrected = system.greenwich_apparent_sidereal_time(
            self.tt, self.ut1, Corrections(ddpsi, -6.3580e-3 * AS2RAD)
        )
        plain = system.greenwich_apparent_sidereal_time(self.tt, self.ut1)
        epsa = system.mean_obliquity(self.tt)
        assert float(corrected - plain) == pytest.approx(float(jnp.cos(epsa)) * ddpsi, abs=1e-14)

    def test_iers1996_nutation_ignores_corrections(self):
        tdb = self.tt.with_scale(TimeScale.TDB)
        system = ReferenceSystem.IERS1996
        np.testing.assert_array_equal(
            system.nutation_matrix(tdb, Corrections(1e-6, 1e-6)), system.nutation_matrix(tdb)
        )

    def test_iers2010_nutation_matrix(self):
        tdb = self.tt.with_scale(TimeScale.TDB)
        t = tdb.centuries_since_j2000()
        expected = Nutation.iau2006a(t).nutation_matrix(mean_obliquity_iau2006(t))
        np.testing.assert_allclose(
            ReferenceSystem.IERS2010.nutation_matrix(tdb), expected, atol=1e-14
        )

    def test_corrections_change_nutation(self):
        tdb = self.tt.with_scale(TimeScale.TDB)
        system = ReferenceSystem.IERS2003A
        corrected = system.nutation_matrix(tdb, Corrections(1e-9, -1e-9))
        plain = system.nutation_matrix(tdb)
        assert float(jnp.max(jnp.abs(corrected - plain))) > 1e-10

    def test_polar_motion_zero_pole_is_identity(self):
        m = ReferenceSystem.IERS2010.polar_motion_matrix(self.tt, PoleCoords())
        np.testing.assert_array_equal(m, np.eye(3))

    def test_polar_motion_iers1996_has_no_tio(self):
        pole = PoleCoords(0.0349282 * AS2RAD, 0.4833163 * AS2RAD)
        m = ReferenceSystem.IERS1996.polar_motion_matrix(self.tt, pole)
        np.testing.assert_allclose(m, polar_motion_matrix(pole.xp, pole.yp), atol=0)

    def test_iers2003_factory(self):
        assert ReferenceSystem.iers2003() is ReferenceSystem.IERS2003A
        assert ReferenceSystem.iers2003(Iau2000Model.B) is ReferenceSystem.IERS2003B
        assert ReferenceSystem.IERS2003B.model is Iau2000Model.B
        assert ReferenceSystem.IERS2010.model is None
        assert ReferenceSystem.IERS2003A.is_iers2003

    def test_str(self):
        assert str(ReferenceSystem.IERS2003A) == "IERS2003/IAU2000A"
        assert str(ReferenceSystem.IERS1996) == "IERS1996"

    def test_corrections_and_pole_defaults(self):
        assert Corrections.zero().is_zero()
        assert not Corrections(1e-9, 0.0).is_zero()
        assert PoleCoords().is_zero()
