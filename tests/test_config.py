"""Tests for the orientax.config module."""

import jax
import jax.numpy as jnp
import pytest

from orientax.config import get_dtype, set_dtype
from orientax.frames import Rotation
from orientax.iers import earth_rotation_angle
from orientax.rotation_matrices import Rz


@pytest.fixture(autouse=True)
def reset_dtype():
    """Restore float64 after each test."""
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_roundtrip(self):
        for dtype in (jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_half_precision_rejected(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.float16)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes follow the configured dtype."""

    def test_rotation_matrix_float32(self):
        set_dtype(jnp.float32)
        assert Rz(0.1).dtype == jnp.float32

    def test_rotation_matrix_float64(self):
        assert Rz(0.1).dtype == jnp.float64

    def test_earth_rotation_angle_float64(self):
        assert earth_rotation_angle(2843.5).dtype == jnp.float64

    def test_identity_rotation_float32(self):
        set_dtype(jnp.float32)
        rot = Rotation.identity()
        assert rot.m.dtype == jnp.float32
        assert rot.dm.dtype == jnp.float32
