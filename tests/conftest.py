from pathlib import Path

import jax.numpy as jnp
import pytest

from orientax.config import set_dtype
from orientax.constants import AS2RAD
from orientax.frames import RotationProvider
from orientax.iers import Corrections, PoleCoords, ReferenceSystem
from orientax.time import TimeDelta

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch the dtype (``test_config.py``) would otherwise leak
    their setting into later modules.
    """
    set_dtype(jnp.float64)


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


class FixedRotationProvider(RotationProvider):
    """Constant Earth orientation values for 2007-04-05 (IERS Conventions, ch. 5 example)."""

    def tai_to_ut1(self, delta):
        return TimeDelta.from_decimal_seconds(-33.072073684954375)

    def ut1_to_tai(self, delta):
        return TimeDelta.from_decimal_seconds(33.072073684954375)

    def corrections(self, time, system):
        if system is ReferenceSystem.IERS1996:
            return Corrections(-55.0655e-3 * AS2RAD, -6.3580e-3 * AS2RAD)
        if system is ReferenceSystem.IERS2010:
            return Corrections(0.1750e-3 * AS2RAD, -0.2259e-3 * AS2RAD)
        return Corrections(0.1725e-3 * AS2RAD, -0.2650e-3 * AS2RAD)

    def pole_coords(self, time):
        return PoleCoords(0.0349282 * AS2RAD, 0.4833163 * AS2RAD)


@pytest.fixture
def fixed_provider() -> FixedRotationProvider:
    return FixedRotationProvider()
