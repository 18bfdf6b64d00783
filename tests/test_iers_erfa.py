"""Cross-checks of orientax.iers against pyerfa over a span of dates."""

import numpy as np
import pytest

from orientax.iers import (
    CipCoords,
    Nutation,
    PrecessionIau1976,
    PrecessionIau2000,
    PrecessionIau2006,
    cio_locator_iau2006,
    earth_rotation_angle,
    equation_of_the_equinoxes_complementary_terms,
    equation_of_the_equinoxes_iau1994,
    equation_of_the_equinoxes_iau2000a,
    equation_of_the_equinoxes_iau2000b,
    equation_of_the_equinoxes_iau2006a,
    frame_bias,
    gmst_iau1982,
    gmst_iau2000,
    gmst_iau2006,
    mean_obliquity_iau1980,
    mean_obliquity_iau2006,
    polar_motion_matrix,
    tio_locator,
)
from orientax.time import DefaultOffsetProvider, TimeDelta, TimeScale

erfa = pytest.importorskip("erfa")

MJDS = [33282.0, 41234.0, 51544.5, 53736.0, 54388.0, 60496.25, 69807.0]
"""Dates spanning 1950 to 2050 (MJD)."""


def _centuries(mjd: float) -> float:
    return (mjd - 51544.5) / 36525.0


def _days(mjd: float) -> float:
    return mjd - 51544.5


# ---------------------------------------------------------------------------
# Precession and bias
# ---------------------------------------------------------------------------


class TestPrecessionAgainstErfa:
    def test_frame_bias(self):
        rb, _, _ = erfa.bp00(2400000.5, 51544.5)
        np.testing.assert_allclose(frame_bias(), rb, atol=1e-15)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_iau1976(self, mjd):
        prec = PrecessionIau1976.from_centuries(_centuries(mjd))
        np.testing.assert_allclose(prec.precession_matrix(), erfa.pmat76(2400000.5, mjd), atol=1e-12)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_iau2000(self, mjd):
        _, rp, rbp = erfa.bp00(2400000.5, mjd)
        prec = PrecessionIau2000.from_centuries(_centuries(mjd))
        np.testing.assert_allclose(prec.precession_matrix(), rp, atol=1e-12)
        np.testing.assert_allclose(prec.bias_precession_matrix(), rbp, atol=1e-12)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_iau2006(self, mjd):
        prec = PrecessionIau2006.from_centuries(_centuries(mjd))
        np.testing.assert_allclose(prec.bias_precession_matrix(), erfa.pmat06(2400000.5, mjd), atol=1e-12)


# ---------------------------------------------------------------------------
# Nutation and obliquity
# ---------------------------------------------------------------------------


class TestNutationAgainstErfa:
    @pytest.mark.parametrize("mjd", MJDS)
    @pytest.mark.parametrize(
        "model, reference",
        [
            (Nutation.iau1980, "nut80"),
            (Nutation.iau2000a, "nut00a"),
            (Nutation.iau2000b, "nut00b"),
            (Nutation.iau2006a, "nut06a"),
        ],
    )
    def test_angles(self, mjd, model, reference):
        dpsi, deps = getattr(erfa, reference)(2400000.5, mjd)
        nut = model(_centuries(mjd))
        assert float(nut.dpsi) == pytest.approx(float(dpsi), abs=1e-13)
        assert float(nut.deps) == pytest.approx(float(deps), abs=1e-13)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_obliquity(self, mjd):
        t = _centuries(mjd)
        assert float(mean_obliquity_iau1980(t)) == pytest.approx(float(erfa.obl80(2400000.5, mjd)), abs=1e-14)
        assert float(mean_obliquity_iau2006(t)) == pytest.approx(float(erfa.obl06(2400000.5, mjd)), abs=1e-14)

    def test_nutation_matrix(self):
        epsa = erfa.obl80(2400000.5, 53736.0)
        dpsi, deps = erfa.nut00a(2400000.5, 53736.0)
        nut = Nutation(dpsi, deps)
        np.testing.assert_allclose(nut.nutation_matrix(epsa), erfa.numat(epsa, dpsi, deps), atol=1e-14)


# ---------------------------------------------------------------------------
# CIP and CIO
# ---------------------------------------------------------------------------


class TestCipAgainstErfa:
    @pytest.mark.parametrize("mjd", MJDS)
    def test_xy_and_s(self, mjd):
        t = _centuries(mjd)
        x, y = erfa.xy06(2400000.5, mjd)
        xy = CipCoords.iau2006(t)
        assert float(xy.x) == pytest.approx(float(x), abs=1e-14)
        assert float(xy.y) == pytest.approx(float(y), abs=1e-14)
        s = cio_locator_iau2006(t, x, y)
        assert float(s) == pytest.approx(float(erfa.s06(2400000.5, mjd, x, y)), abs=1e-15)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_celestial_to_intermediate_matrix(self, mjd):
        x, y = erfa.xy06(2400000.5, mjd)
        s = erfa.s06(2400000.5, mjd, x, y)
        m = CipCoords(x, y).celestial_to_intermediate_matrix(s)
        np.testing.assert_allclose(m, erfa.c2ixys(x, y, s), atol=1e-14)


# ---------------------------------------------------------------------------
# Earth rotation and polar motion
# ---------------------------------------------------------------------------


class TestEarthRotationAgainstErfa:
    @pytest.mark.parametrize("mjd", MJDS)
    def test_earth_rotation_angle(self, mjd):
        assert float(earth_rotation_angle(_days(mjd))) == pytest.approx(
            float(erfa.era00(2400000.5, mjd)), abs=1e-12
        )

    @pytest.mark.parametrize("mjd", MJDS)
    def test_gmst(self, mjd):
        days, t = _days(mjd), _centuries(mjd)
        assert float(gmst_iau1982(days)) == pytest.approx(float(erfa.gmst82(2400000.5, mjd)), abs=1e-12)
        assert float(gmst_iau2000(days, t)) == pytest.approx(
            float(erfa.gmst00(2400000.5, mjd, 2400000.5, mjd)), abs=1e-12
        )
        assert float(gmst_iau2006(days, t)) == pytest.approx(
            float(erfa.gmst06(2400000.5, mjd, 2400000.5, mjd)), abs=1e-12
        )

    @pytest.mark.parametrize("mjd", MJDS)
    def test_equation_of_the_equinoxes(self, mjd):
        t = _centuries(mjd)
        cases = [
            (equation_of_the_equinoxes_iau1994, erfa.eqeq94),
            (equation_of_the_equinoxes_iau2000a, erfa.ee00a),
            (equation_of_the_equinoxes_iau2000b, erfa.ee00b),
            (equation_of_the_equinoxes_complementary_terms, erfa.eect00),
        ]
        for ours, reference in cases:
            assert float(ours(t)) == pytest.approx(float(reference(2400000.5, mjd)), abs=1e-14)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_equation_of_the_equinoxes_iau2006a(self, mjd):
        # ee06a is GST06A - GMST06 from the CIO-based series; the equinox form
        # used here agrees to a few 1e-12 rad.
        t = _centuries(mjd)
        expected = float(erfa.ee06a(2400000.5, mjd))
        assert float(equation_of_the_equinoxes_iau2006a(t)) == pytest.approx(expected, abs=5e-12)

    @pytest.mark.parametrize("mjd", MJDS)
    def test_polar_motion(self, mjd):
        xp, yp = 2.55060238e-7, 1.860359247e-6
        sp = erfa.sp00(2400000.5, mjd)
        assert float(tio_locator(_centuries(mjd))) == pytest.approx(float(sp), abs=1e-20)
        np.testing.assert_allclose(polar_motion_matrix(xp, yp, sp), erfa.pom00(xp, yp, sp), atol=1e-15)


# ---------------------------------------------------------------------------
# Time scales
# ---------------------------------------------------------------------------


class TestTimeScalesAgainstErfa:
    @pytest.mark.parametrize(
        "origin, target, reference",
        [
            (TimeScale.TT, TimeScale.TCG, "tttcg"),
            (TimeScale.TCG, TimeScale.TT, "tcgtt"),
            (TimeScale.TDB, TimeScale.TCB, "tdbtcb"),
            (TimeScale.TCB, TimeScale.TDB, "tcbtdb"),
        ],
    )
    @pytest.mark.parametrize("mjd", MJDS)
    def test_linear_offsets(self, origin, target, reference, mjd):
        whole = int(mjd)
        jd1, jd2 = 2400000.5 + whole, mjd - whole
        out1, out2 = getattr(erfa, reference)(jd1, jd2)
        expected = ((out1 - jd1) + (out2 - jd2)) * 86400.0
        delta = TimeDelta.from_days(mjd - 51544.5)
        actual = DefaultOffsetProvider().offset(origin, target, delta).to_decimal_seconds()
        assert actual == pytest.approx(expected, abs=1e-10)
