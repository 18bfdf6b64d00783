"""Tests for orientax.frames: frame identifiers, routing and rotations.

The celestial-to-terrestrial reference matrices are those of the SOFA
"Earth attitude" cookbook for 2007-04-05T12:00:00 UTC, evaluated with the
EOP values of :class:`tests.conftest.FixedRotationProvider`.
"""

import jax.numpy as jnp
import numpy as np
import pytest

from orientax.bodies import Origin
from orientax.errors import (
    ExtrapolatedValueError,
    IncompatibleReferenceSystemsError,
    MissingEopProviderError,
    NonBodyFixedFrameError,
    NonQuasiInertialFrameError,
    RotationError,
    UndefinedOriginPropertyError,
    UnknownFrameError,
)
from orientax.eop import load_eop_from_file
from orientax.frames import (
    CIRF,
    ICRF,
    ITRF,
    TEME,
    TIRF,
    Frame,
    FrameKind,
    Rotation,
    cirf_to_tirf,
    icrf_to_cirf,
    icrf_to_mod,
    mod_to_tod,
    pef_to_itrf,
    rotation,
    route,
    tirf_to_itrf,
    tod_to_pef,
    tod_to_teme,
)
from orientax.iers import ReferenceSystem
from orientax.rotation_matrices import Rz, skew
from orientax.time import Time, TimeDelta, TimeScale, Utc

TT = Time.from_two_part_julian_date(TimeScale.TT, 2454195.5, 0.500754444444444)
"""2007-04-05T12:00:00 UTC in TT."""


def _c2t(system, provider):
    npb = icrf_to_mod(TT, system, provider).compose(mod_to_tod(TT, system, provider))
    c2t = npb.compose(tod_to_pef(TT, system, provider))
    return npb, c2t, c2t.compose(pef_to_itrf(TT, system, provider))


# ---------------------------------------------------------------------------
# Frame identifiers
# ---------------------------------------------------------------------------


class TestFrameNames:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ICRF", ICRF),
            ("icrf", ICRF),
            ("CIRF", CIRF),
            ("TIRF", TIRF),
            ("ITRF", ITRF),
            ("teme", TEME),
            ("MOD", Frame.mod(ReferenceSystem.IERS1996)),
            ("TOD(IERS2010)", Frame.tod(ReferenceSystem.IERS2010)),
            ("pef(iers2003)", Frame.pef(ReferenceSystem.IERS2003A)),
            ("MOD(IERS2003/IAU2000B)", Frame.mod(ReferenceSystem.IERS2003B)),
            ("IAU_EARTH", Frame.iau(Origin.EARTH)),
            ("iau_moon", Frame.iau(Origin.MOON)),
        ],
    )
    def test_from_name(self, name, expected):
        assert Frame.from_name(name) == expected

    @pytest.mark.parametrize(
        "name",
        ["FOO_EARTH", "IAU_RUPERT", "IAU_EARTH_BARYCENTER", "TOD(IERS2042)", "GCRF", ""],
    )
    def test_unknown_name(self, name):
        with pytest.raises(UnknownFrameError):
            Frame.from_name(name)

    def test_abbreviations(self):
        assert ICRF.abbreviation == "ICRF"
        assert Frame.mod(ReferenceSystem.IERS2010).abbreviation == "MOD(IERS2010)"
        assert Frame.tod(ReferenceSystem.IERS2003A).abbreviation == "TOD(IERS2003/IAU2000A)"
        assert Frame.iau(Origin.MOON).abbreviation == "IAU_MOON"
        assert str(TEME) == "TEME"

    def test_abbreviation_roundtrip(self):
        frames = [ICRF, CIRF, TIRF, ITRF, TEME, Frame.iau(Origin.JUPITER)]
        frames += [f(s) for f in (Frame.mod, Frame.tod, Frame.pef) for s in ReferenceSystem]
        for frame in frames:
            assert Frame.from_name(frame.abbreviation) == frame

    def test_names(self):
        assert ICRF.name == "International Celestial Reference Frame"
        assert Frame.pef().name == "Pseudo-Earth Fixed Frame"
        assert Frame.iau(Origin.MOON).name == "IAU Body-Fixed Reference Frame for the Moon"
        assert Frame.iau(Origin.EARTH).name == "IAU Body-Fixed Reference Frame for Earth"

    def test_default_system(self):
        assert Frame(FrameKind.TOD).system is ReferenceSystem.IERS1996

    def test_iau_frame_needs_body(self):
        with pytest.raises(ValueError):
            Frame(FrameKind.IAU)


class TestFrameProperties:
    @pytest.mark.parametrize("frame", [ICRF, CIRF, TEME, Frame.mod(), Frame.tod()])
    def test_quasi_inertial(self, frame):
        assert not frame.is_rotating
        frame.try_quasi_inertial()
        with pytest.raises(NonBodyFixedFrameError):
            frame.try_body_fixed()

    @pytest.mark.parametrize("frame", [TIRF, ITRF, Frame.pef(), Frame.iau(Origin.MOON)])
    def test_body_fixed(self, frame):
        assert frame.is_rotating
        frame.try_body_fixed()
        with pytest.raises(NonQuasiInertialFrameError):
            frame.try_quasi_inertial()

    def test_equinox_based(self):
        assert Frame.mod().is_equinox_based
        assert Frame.pef(ReferenceSystem.IERS2010).is_equinox_based
        assert not TEME.is_equinox_based
        assert not ITRF.is_equinox_based


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------


class TestRoute:
    def test_icrf_to_itrf_uses_cio_chain(self):
        assert route(ICRF, ITRF) == (ICRF, CIRF, TIRF, ITRF)

    def test_itrf_to_icrf(self):
        assert route(ITRF, ICRF) == (ITRF, TIRF, CIRF, ICRF)

    def test_icrf_to_teme(self):
        system = ReferenceSystem.IERS1996
        assert route(ICRF, TEME) == (ICRF, Frame.mod(system), Frame.tod(system), TEME)

    def test_pef_to_icrf(self):
        system = ReferenceSystem.IERS2003A
        assert route(Frame.pef(system), ICRF) == (
            Frame.pef(system),
            Frame.tod(system),
            Frame.mod(system),
            ICRF,
        )

    def test_itrf_to_pef(self):
        pef = Frame.pef(ReferenceSystem.IERS2010)
        assert route(ITRF, pef) == (ITRF, pef)

    def test_iau_frames(self):
        earth = Frame.iau(Origin.EARTH)
        moon = Frame.iau(Origin.MOON)
        assert route(ICRF, earth) == (ICRF, earth)
        assert route(earth, moon) == (earth, ICRF, moon)

    def test_same_frame(self):
        assert route(ITRF, ITRF) == (ITRF,)

    def test_incompatible_systems(self):
        with pytest.raises(IncompatibleReferenceSystemsError):
            route(Frame.mod(ReferenceSystem.IERS1996), Frame.tod(ReferenceSystem.IERS2010))

    def test_teme_to_other_system(self):
        path = route(TEME, Frame.mod(ReferenceSystem.IERS2010))
        assert path[0] == TEME
        assert ICRF in path

    def test_body_without_elements(self):
        with pytest.raises(UndefinedOriginPropertyError):
            route(ICRF, Frame.iau(Origin.EARTH_BARYCENTER))


# ---------------------------------------------------------------------------
# Celestial to terrestrial chains
# ---------------------------------------------------------------------------


class TestCelestialToTerrestrial:
    def test_iers1996(self, fixed_provider):
        npb, c2t, c2t_pm = _c2t(ReferenceSystem.IERS1996, fixed_provider)
        np.testing.assert_allclose(
            npb.m,
            [
                [9.999984026404259e-1, -1.639348666725915e-3, -7.122166424041306e-4],
                [1.6393166389094148e-3, 9.999986552821435e-1, -4.5550653090356625e-5],
                [7.122903580761061e-4, 4.438303173715299e-5, 9.999997453362638e-1],
            ],
            atol=1e-12,
        )
        np.testing.assert_allclose(
            c2t.m,
            [
                [0.973104317592265, 0.230363826166883, -0.000703332813776],
                [-0.230363798723533, 0.973104570754697, 0.000120888299841],
                [0.000712264667137, 0.000044385492226, 0.999999745354454],
            ],
            atol=1e-4,
        )
        np.testing.assert_allclose(
            c2t_pm.m,
            [
                [0.973104317712772, 0.230363826174782, -0.000703163477127],
                [-0.230363800391868, 0.973104570648022, 0.000118545116892],
                [0.000711560100206, 0.000046626645796, 0.999999745754058],
            ],
            atol=1e-4,
        )

    def test_iers2003(self, fixed_provider):
        npb, c2t, c2t_pm = _c2t(ReferenceSystem.IERS2003A, fixed_provider)
        np.testing.assert_allclose(
            npb.m,
            [
                [0.999998402755640, -0.001639289519579, -0.000712191013215],
                [0.001639257491365, 0.999998655379006, -0.000045552787478],
                [0.000712264729795, 0.000044385250265, 0.999999745354420],
            ],
            atol=1e-9,
        )
        np.testing.assert_allclose(
            c2t.m,
            [
                [0.973104317573209, 0.230363826247361, -0.000703332818999],
                [-0.230363798803834, 0.973104570735656, 0.000120888549787],
                [0.000712264729795, 0.000044385250265, 0.999999745354420],
            ],
            atol=1e-9,
        )
        np.testing.assert_allclose(
            c2t_pm.m,
            [
                [0.973104317697618, 0.230363826238780, -0.000703163482352],
                [-0.230363800455689, 0.973104570632883, 0.000118545366826],
                [0.000711560162864, 0.000046626403835, 0.999999745754024],
            ],
            atol=1e-9,
        )

    def test_iers2003b_close_to_iers2003a(self, fixed_provider):
        _, _, a = _c2t(ReferenceSystem.IERS2003A, fixed_provider)
        _, _, b = _c2t(ReferenceSystem.IERS2003B, fixed_provider)
        np.testing.assert_allclose(a.m, b.m, atol=1e-8)

    def test_iau2006_cio_chain(self, fixed_provider):
        npb = icrf_to_cirf(TT, fixed_provider)
        np.testing.assert_allclose(
            npb.m,
            [
                [0.999999746339445, -0.000000005138822, -0.000712264730072],
                [-0.000000026475227, 0.999999999014975, -0.000044385242827],
                [0.000712264729599, 0.000044385250426, 0.999999745354420],
            ],
            atol=1e-11,
        )
        c2t = npb.compose(cirf_to_tirf(TT, fixed_provider))
        np.testing.assert_allclose(
            c2t.m,
            [
                [0.973104317573127, 0.230363826247709, -0.000703332818845],
                [-0.230363798804182, 0.973104570735574, 0.000120888549586],
                [0.000712264729599, 0.000044385250426, 0.999999745354420],
            ],
            atol=1e-11,
        )
        c2t_pm = c2t.compose(tirf_to_itrf(TT, fixed_provider))
        expected = [
            [0.973104317697535, 0.230363826239128, -0.000703163482198],
            [-0.230363800456037, 0.973104570632801, 0.000118545366625],
            [0.000711560162668, 0.000046626403995, 0.999999745754024],
        ]
        np.testing.assert_allclose(c2t_pm.m, expected, atol=1e-11)
        np.testing.assert_allclose(rotation(ICRF, ITRF, TT, fixed_provider).m, expected, atol=1e-11)

    def test_cio_and_equinox_chains_agree(self, fixed_provider):
        cio = rotation(ICRF, ITRF, TT, fixed_provider)
        _, _, equinox = _c2t(ReferenceSystem.IERS2010, fixed_provider)
        np.testing.assert_allclose(cio.m, equinox.m, atol=1e-8)

    def test_without_provider_uses_uncorrected_cip(self, fixed_provider):
        plain = icrf_to_cirf(TT)
        corrected = icrf_to_cirf(TT, fixed_provider)
        difference = float(jnp.max(jnp.abs(plain.m - corrected.m)))
        assert 1e-10 < difference < 1e-8


# ---------------------------------------------------------------------------
# TEME
# ---------------------------------------------------------------------------


class TestTeme:
    def test_tod_to_teme(self):
        tdb = Time.from_two_part_julian_date(TimeScale.TDB, 2400000.5, 41234.0)
        eoe = 5.357758254609257e-5
        rot = tod_to_teme(tdb)
        expected = [
            [np.cos(eoe), np.sin(eoe), 0.0],
            [-np.sin(eoe), np.cos(eoe), 0.0],
            [0.0, 0.0, 1.0],
        ]
        np.testing.assert_allclose(rot.m, expected, atol=1e-15)
        np.testing.assert_allclose(rot.m, Rz(eoe), atol=1e-15)
        roundtrip = rot.compose(rotation(TEME, Frame.tod(), tdb))
        np.testing.assert_allclose(roundtrip.m, np.eye(3), atol=1e-15)

    def test_icrf_teme_roundtrip(self, fixed_provider):
        forward = rotation(ICRF, TEME, TT, fixed_provider)
        backward = rotation(TEME, ICRF, TT, fixed_provider)
        np.testing.assert_allclose(forward.compose(backward).m, np.eye(3), atol=1e-14)

    def test_teme_without_provider(self):
        rotation(ICRF, TEME, TT)

    def test_teme_to_itrf(self, fixed_provider):
        rot = rotation(TEME, ITRF, TT, fixed_provider)
        np.testing.assert_allclose(rot.m @ rot.m.T, np.eye(3), atol=1e-14)


# ---------------------------------------------------------------------------
# Rotations
# ---------------------------------------------------------------------------


class TestRotation:
    def test_identity(self):
        rot = Rotation.identity()
        np.testing.assert_array_equal(rot.m, np.eye(3))
        np.testing.assert_array_equal(rot.dm, np.zeros((3, 3)))

    def test_compose_and_transpose(self):
        a = Rotation.new(Rz(0.3))
        b = Rotation.new(Rz(0.4))
        np.testing.assert_allclose(a.compose(b).m, Rz(0.7), atol=1e-15)
        np.testing.assert_allclose(a.compose(a.transpose()).m, np.eye(3), atol=1e-15)

    def test_angular_velocity(self):
        omega = 7.2921150e-5
        rot = Rotation.new(jnp.eye(3)).with_angular_velocity([0.0, 0.0, omega])
        r, v = rot.rotate_state([7000.0, 0.0, 0.0], [0.0, 7.5, 0.0])
        np.testing.assert_allclose(r, [7000.0, 0.0, 0.0])
        np.testing.assert_allclose(v, [0.0, 7.5 - omega * 7000.0, 0.0], atol=1e-12)

    def test_compose_derivative(self):
        omega = 1e-3
        a = Rotation.new(Rz(0.2)).with_angular_velocity([0.0, 0.0, omega])
        b = Rotation.new(Rz(0.5)).with_angular_velocity([0.0, 0.0, 2.0 * omega])
        ab = a.compose(b)
        np.testing.assert_allclose(ab.m, Rz(0.7), atol=1e-15)
        np.testing.assert_allclose(ab.dm, Rotation.new(Rz(0.7)).with_angular_velocity([0.0, 0.0, 3.0 * omega]).dm, atol=1e-15)


class TestFrameRotations:
    def test_same_frame_is_identity(self, fixed_provider):
        rot = rotation(ITRF, ITRF, TT, fixed_provider)
        np.testing.assert_array_equal(rot.m, np.eye(3))

    @pytest.mark.parametrize(
        "origin, target",
        [
            (ICRF, ITRF),
            (ICRF, TEME),
            (CIRF, Frame.pef(ReferenceSystem.IERS2010)),
            (Frame.tod(ReferenceSystem.IERS2003B), ITRF),
            (ICRF, Frame.iau(Origin.MOON)),
            (Frame.iau(Origin.EARTH), ITRF),
        ],
    )
    def test_roundtrip(self, fixed_provider, origin, target):
        forward = rotation(origin, target, TT, fixed_provider)
        backward = rotation(target, origin, TT, fixed_provider)
        np.testing.assert_allclose(forward.compose(backward).m, np.eye(3), atol=1e-14)
        np.testing.assert_allclose(backward.m, forward.m.T, atol=1e-15)
        np.testing.assert_allclose(forward.m @ forward.m.T, np.eye(3), atol=1e-14)

    @pytest.mark.parametrize("target", [ITRF, Frame.pef(ReferenceSystem.IERS1996), Frame.iau(Origin.EARTH)])
    def test_derivative_matches_finite_difference(self, fixed_provider, target):
        h = TimeDelta.from_seconds(1)
        rot = rotation(ICRF, target, TT, fixed_provider)
        after = rotation(ICRF, target, TT + h, fixed_provider).m
        before = rotation(ICRF, target, TT - h, fixed_provider).m
        np.testing.assert_allclose(rot.dm, (after - before) / 2.0, atol=1e-10)

    def test_iau_earth_derivative_is_spin(self):
        rot = rotation(ICRF, Frame.iau(Origin.EARTH), TT)
        _, _, w_dot = Origin.EARTH.rotational_element_rates(TT.seconds_since_j2000())
        assert float(w_dot) == pytest.approx(360.9856235 / 86400.0 * np.pi / 180.0, rel=1e-12)
        np.testing.assert_allclose(rot.m @ rot.m.T, np.eye(3), atol=1e-14)
        np.testing.assert_allclose(rot.dm, -skew([0.0, 0.0, float(w_dot)]) @ rot.m, atol=1e-11)

    def test_iau_moon_derivative(self):
        h = TimeDelta.from_seconds(10)
        moon = Frame.iau(Origin.MOON)
        rot = rotation(ICRF, moon, TT)
        after = rotation(ICRF, moon, TT + h).m
        before = rotation(ICRF, moon, TT - h).m
        np.testing.assert_allclose(rot.dm, (after - before) / 20.0, atol=1e-12)

    def test_icrf_to_iau_earth(self):
        tai = Utc.from_iso("2024-07-05T09:09:18.173").to_time()
        r = jnp.array([-5530.018, -3487.090, -1850.035])
        v = jnp.array([1.295344, -5.024569, 5.639194])
        r1, v1 = rotation(ICRF, Frame.iau(Origin.EARTH), tai).rotate_state(r, v)
        np.testing.assert_allclose(r1, [-5740.259, 3121.136, -1863.183], rtol=1e-5)
        np.testing.assert_allclose(v1, [-3.532379, -3.152378, 5.642297], rtol=1e-5)

    def test_time_scale_of_epoch_is_irrelevant(self, fixed_provider):
        tai = TT.with_scale(TimeScale.TAI) - TimeDelta.from_decimal_seconds(32.184)
        a = rotation(ICRF, ITRF, TT, fixed_provider)
        b = rotation(ICRF, ITRF, tai, fixed_provider)
        np.testing.assert_allclose(a.m, b.m, atol=1e-14)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestRotationErrors:
    @pytest.mark.parametrize("target", [ITRF, TIRF, Frame.pef()])
    def test_ut1_without_provider(self, target):
        with pytest.raises(RotationError) as info:
            rotation(ICRF, target, TT)
        assert isinstance(info.value.__cause__, MissingEopProviderError)
        assert info.value.kind == "offset"

    def test_legs_without_ut1_need_no_provider(self):
        rotation(ICRF, CIRF, TT)
        rotation(ICRF, Frame.tod(ReferenceSystem.IERS2010), TT)
        rotation(TIRF, ITRF, TT)

    def test_eop_out_of_range(self, data_dir):
        eop = load_eop_from_file(data_dir / "finals2000A_2024.csv")
        with pytest.raises(RotationError) as info:
            rotation(ICRF, ITRF, TT, eop)
        assert isinstance(info.value.__cause__, ExtrapolatedValueError)

    def test_undefined_body(self):
        with pytest.raises(UndefinedOriginPropertyError):
            rotation(ICRF, Frame.iau(Origin.MARS_BARYCENTER), TT)

    def test_incompatible_systems(self, fixed_provider):
        with pytest.raises(IncompatibleReferenceSystemsError):
            rotation(
                Frame.pef(ReferenceSystem.IERS1996),
                Frame.pef(ReferenceSystem.IERS2010),
                TT,
                fixed_provider,
            )


# ---------------------------------------------------------------------------
# With EOP data
# ---------------------------------------------------------------------------


class TestRotationWithEop:
    def test_itrf_with_eop(self, data_dir):
        eop = load_eop_from_file(data_dir / "finals2000A_2024.csv")
        tai = Utc.from_iso("2024-07-05T09:09:18.173").to_time()
        rot = rotation(ICRF, ITRF, tai, eop)
        np.testing.assert_allclose(rot.m @ rot.m.T, np.eye(3), atol=1e-14)
        equinox = rotation(ICRF, Frame.mod(ReferenceSystem.IERS2010), tai, eop).compose(
            rotation(Frame.mod(ReferenceSystem.IERS2010), ITRF, tai, eop)
        )
        np.testing.assert_allclose(rot.m, equinox.m, atol=1e-8)

    def test_polar_motion_from_eop(self, data_dir):
        eop = load_eop_from_file(data_dir / "finals2000A_2024.csv")
        tai = Utc.from_iso("2024-07-05T00:00:00").to_time()
        rot = pef_to_itrf(tai, ReferenceSystem.IERS1996, eop)
        pole = eop.polar_motion(60496.0)
        assert float(rot.m[0, 2]) == pytest.approx(float(pole.xp), rel=1e-6)
        assert float(rot.m[2, 1]) == pytest.approx(float(pole.yp), rel=1e-6)
