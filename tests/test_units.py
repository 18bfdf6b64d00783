"""Tests for orientax.units and orientax.rotation_matrices."""

import math

import jax.numpy as jnp
import numpy as np
import pytest

from orientax.rotation_matrices import Rx, Ry, Rz, skew
from orientax.units import Angle, Distance, Velocity

# ---------------------------------------------------------------------------
# Angle
# ---------------------------------------------------------------------------


class TestAngle:
    def test_constructors(self):
        assert float(Angle.from_degrees(180.0)) == pytest.approx(math.pi, abs=1e-15)
        assert float(Angle.from_arcseconds(3600.0)) == pytest.approx(math.radians(1.0), abs=1e-15)
        assert float(Angle.from_milliarcseconds(1000.0)) == pytest.approx(
            float(Angle.from_arcseconds(1.0)), abs=1e-20
        )
        assert float(Angle.from_microarcseconds(1e6)) == pytest.approx(
            float(Angle.from_arcseconds(1.0)), abs=1e-20
        )

    def test_conversions(self):
        angle = Angle.from_radians(math.pi / 2.0)
        assert float(angle.to_degrees()) == pytest.approx(90.0, abs=1e-12)
        assert float(angle.to_arcseconds()) == pytest.approx(324000.0, abs=1e-8)

    def test_trigonometry(self):
        angle = Angle.from_degrees(30.0)
        assert float(angle.sin()) == pytest.approx(0.5, abs=1e-15)
        assert float(angle.cos()) == pytest.approx(math.sqrt(3.0) / 2.0, abs=1e-15)
        assert float(Angle.atan2(1.0, -1.0)) == pytest.approx(3.0 * math.pi / 4.0, abs=1e-15)
        assert float(Angle.atan(1.0)) == pytest.approx(math.pi / 4.0, abs=1e-15)

    def test_inverse_trigonometry_domain(self):
        assert float(Angle.asin(1.0)) == pytest.approx(math.pi / 2.0, abs=1e-15)
        assert float(Angle.acos(-1.0)) == pytest.approx(math.pi, abs=1e-15)
        with pytest.raises(ValueError):
            Angle.asin(1.5)
        with pytest.raises(ValueError):
            Angle.acos(-2.0)

    def test_arithmetic(self):
        a = Angle.from_radians(1.0)
        b = Angle.from_radians(0.25)
        assert float(a + b) == pytest.approx(1.25)
        assert float(a - b) == pytest.approx(0.75)
        assert float(-a) == pytest.approx(-1.0)
        assert float(2.0 * a) == pytest.approx(2.0)
        assert float(a / 4.0) == pytest.approx(0.25)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0.0),
            (math.pi, math.pi),
            (-math.pi, math.pi),
            (3.0 * math.pi / 2.0, -math.pi / 2.0),
            (-3.0 * math.pi / 2.0, math.pi / 2.0),
            (7.0, 7.0 - 2.0 * math.pi),
        ],
    )
    def test_mod_two_pi_signed(self, value, expected):
        assert float(Angle(value).mod_two_pi_signed()) == pytest.approx(expected, abs=1e-12)

    def test_mod_two_pi(self):
        assert float(Angle(-math.pi / 2.0).mod_two_pi()) == pytest.approx(3.0 * math.pi / 2.0, abs=1e-15)
        assert float(Angle(5.0 * math.pi).mod_two_pi()) == pytest.approx(math.pi, abs=1e-12)

    def test_rotations(self):
        angle = Angle(0.3)
        np.testing.assert_array_equal(angle.rotation_x(), Rx(0.3))
        np.testing.assert_array_equal(angle.rotation_y(), Ry(0.3))
        np.testing.assert_array_equal(angle.rotation_z(), Rz(0.3))


class TestDistanceAndVelocity:
    def test_distance(self):
        d = Distance.from_kilometers(6378.1366)
        assert float(d) == pytest.approx(6378136.6)
        assert float(d.to_kilometers()) == pytest.approx(6378.1366)
        assert float(Distance.from_astronomical_units(1.0)) == 1.49597870700e11
        assert float(d + d - d) == pytest.approx(6378136.6)
        assert float(2.0 * -d) == pytest.approx(-12756273.2)

    def test_velocity(self):
        v = Velocity.from_kilometers_per_second(7.5)
        assert float(v) == pytest.approx(7500.0)
        assert float(v.to_kilometers_per_second()) == pytest.approx(7.5)
        assert float(v * 2.0 - v + (-v)) == pytest.approx(0.0)


# ---------------------------------------------------------------------------
# Rotation matrices
# ---------------------------------------------------------------------------


class TestRotationMatrices:
    def test_rz_rotates_frame(self):
        v = Rz(math.pi / 2.0) @ jnp.array([1.0, 0.0, 0.0])
        np.testing.assert_allclose(v, [0.0, -1.0, 0.0], atol=1e-15)

    def test_rx_rotates_frame(self):
        v = Rx(math.pi / 2.0) @ jnp.array([0.0, 1.0, 0.0])
        np.testing.assert_allclose(v, [0.0, 0.0, -1.0], atol=1e-15)

    def test_ry_rotates_frame(self):
        v = Ry(math.pi / 2.0) @ jnp.array([0.0, 0.0, 1.0])
        np.testing.assert_allclose(v, [-1.0, 0.0, 0.0], atol=1e-15)

    @pytest.mark.parametrize("R", [Rx, Ry, Rz])
    def test_orthonormal(self, R):
        m = R(0.7)
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-15)
        assert float(jnp.linalg.det(m)) == pytest.approx(1.0, abs=1e-15)

    def test_skew(self):
        v = jnp.array([1.0, 2.0, 3.0])
        w = jnp.array([-0.5, 4.0, 0.25])
        np.testing.assert_allclose(skew(v) @ w, jnp.cross(v, w), atol=1e-15)
        np.testing.assert_allclose(skew(v), -skew(v).T)
