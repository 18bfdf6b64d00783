"""Tests for orientax.bodies."""

import math

import pytest

from orientax.bodies import Origin
from orientax.errors import UndefinedOriginPropertyError

# ---------------------------------------------------------------------------
# Identification
# ---------------------------------------------------------------------------


class TestOriginLookup:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Earth", Origin.EARTH),
            ("moon", Origin.MOON),
            ("Solar System Barycenter", Origin.SOLAR_SYSTEM_BARYCENTER),
            ("pluto-barycenter", Origin.PLUTO_BARYCENTER),
            ("JUPITER_BARYCENTER", Origin.JUPITER_BARYCENTER),
        ],
    )
    def test_from_name(self, name, expected):
        assert Origin.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown origin"):
            Origin.from_name("Rupert")

    def test_naif_ids(self):
        assert Origin.from_naif_id(399) is Origin.EARTH
        assert Origin.from_naif_id(301) is Origin.MOON
        assert Origin.SUN.naif_id == 10
        assert Origin.SOLAR_SYSTEM_BARYCENTER.naif_id == 0

    def test_unknown_naif_id(self):
        with pytest.raises(ValueError):
            Origin.from_naif_id(42)

    def test_title(self):
        assert Origin.SOLAR_SYSTEM_BARYCENTER.title == "Solar System Barycenter"
        assert str(Origin.MOON) == "Moon"


# ---------------------------------------------------------------------------
# Rotational elements
# ---------------------------------------------------------------------------


class TestRotationalElements:
    def test_jupiter(self):
        ra, dec, w = Origin.JUPITER.rotational_elements(0.0)
        assert float(ra) == pytest.approx(4.678480799964803, rel=1e-8)
        assert float(dec) == pytest.approx(1.1256642372977634, rel=1e-8)
        assert float(w) == pytest.approx(4.973315703557842, rel=1e-8)

    def test_jupiter_rates(self):
        ra_dot, dec_dot, w_dot = Origin.JUPITER.rotational_element_rates(0.0)
        assert float(ra_dot) == pytest.approx(-1.3266588500099516e-13, rel=1e-8)
        assert float(dec_dot) == pytest.approx(3.004482367136341e-15, rel=1e-8)
        assert float(w_dot) == pytest.approx(0.00017585323445765458, rel=1e-8)

    def test_earth_at_j2000(self):
        ra, dec, w = Origin.EARTH.rotational_elements(0.0)
        assert float(ra) == pytest.approx(0.0, abs=1e-15)
        assert float(dec) == pytest.approx(math.pi / 2.0, abs=1e-15)
        assert float(w) == pytest.approx(math.radians(190.147), abs=1e-15)

    def test_earth_one_day_later(self):
        _, _, w = Origin.EARTH.rotational_elements(86400.0)
        assert float(w) == pytest.approx(math.radians(190.147 + 360.9856235), rel=1e-14)

    @pytest.mark.parametrize("body", [Origin.MOON, Origin.JUPITER, Origin.NEPTUNE])
    def test_rates_match_finite_difference(self, body):
        seconds = 7.5e8
        h = 100.0
        after = body.rotational_elements(seconds + h)
        before = body.rotational_elements(seconds - h)
        rates = body.rotational_element_rates(seconds)
        for a, b, rate in zip(after, before, rates):
            assert float(rate) == pytest.approx(float(a - b) / (2.0 * h), abs=1e-12)

    def test_has_rotational_elements(self):
        assert Origin.EARTH.has_rotational_elements
        assert Origin.MOON.has_rotational_elements
        assert not Origin.EARTH_BARYCENTER.has_rotational_elements

    def test_undefined_elements(self):
        with pytest.raises(UndefinedOriginPropertyError, match="rotational elements"):
            Origin.EARTH_BARYCENTER.rotational_elements(0.0)
        with pytest.raises(UndefinedOriginPropertyError):
            Origin.SOLAR_SYSTEM_BARYCENTER.rotational_element_rates(0.0)


# ---------------------------------------------------------------------------
# Physical constants
# ---------------------------------------------------------------------------


class TestPhysicalConstants:
    def test_earth(self):
        assert Origin.EARTH.equatorial_radius == 6378.1366
        assert Origin.EARTH.polar_radius == 6356.7519
        assert Origin.EARTH.mean_radius == 6371.0084
        assert Origin.EARTH.gravitational_parameter == pytest.approx(398600.4355, rel=1e-10)

    def test_moon(self):
        assert Origin.MOON.mean_radius == 1737.4
        assert Origin.MOON.gravitational_parameter == pytest.approx(4902.800118)

    def test_sun(self):
        assert Origin.SUN.equatorial_radius == 695700.0
        assert Origin.SUN.gravitational_parameter == pytest.approx(1.32712440041e11, rel=1e-10)

    def test_undefined_radius(self):
        with pytest.raises(UndefinedOriginPropertyError, match="equatorial radius") as info:
            Origin.EARTH_BARYCENTER.equatorial_radius
        assert info.value.origin == "Earth Barycenter"
        assert info.value.prop == "equatorial radius"

    def test_undefined_gravitational_parameter(self):
        with pytest.raises(UndefinedOriginPropertyError, match="gravitational parameter"):
            Origin.SOLAR_SYSTEM_BARYCENTER.gravitational_parameter
