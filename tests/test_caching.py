"""Tests for orientax.utils.caching."""

import os
import time
from pathlib import Path

import pytest

from orientax.utils.caching import (
    cache_root,
    eop_cache_file,
    file_age_days,
    file_age_seconds,
    get_cache_dir,
    get_eop_cache_dir,
    is_file_stale,
)


def _backdate(path: Path, seconds: float) -> None:
    then = time.time() - seconds
    os.utime(path, (then, then))


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


class TestCacheDirectories:
    def test_default_root(self, monkeypatch, tmp_path):
        monkeypatch.delenv("ORIENTAX_CACHE", raising=False)
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        assert cache_root() == tmp_path / ".cache" / "orientax"
        assert not cache_root().exists()
        assert get_cache_dir().is_dir()

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ORIENTAX_CACHE", str(tmp_path / "custom"))
        assert get_cache_dir() == tmp_path / "custom"

    def test_subdirectory(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ORIENTAX_CACHE", str(tmp_path))
        result = get_cache_dir("a/b")
        assert result == tmp_path / "a" / "b"
        assert result.is_dir()
        assert get_cache_dir("a/b") == result

    def test_eop_paths(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ORIENTAX_CACHE", str(tmp_path))
        assert get_eop_cache_dir() == tmp_path / "eop"
        assert eop_cache_file() == tmp_path / "eop" / "finals2000A.all"
        assert eop_cache_file("finals.all").name == "finals.all"
        assert not eop_cache_file().exists()


# ---------------------------------------------------------------------------
# Freshness
# ---------------------------------------------------------------------------


class TestFileAge:
    def test_recent_file(self, tmp_path):
        f = tmp_path / "finals2000A.all"
        f.write_text("data")
        assert 0.0 <= file_age_seconds(str(f)) < 5.0

    def test_backdated_file(self, tmp_path):
        f = tmp_path / "finals2000A.all"
        f.write_text("data")
        _backdate(f, 2 * 86400)
        assert 2.0 - 1e-3 < file_age_days(f) < 2.0 + 1e-3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            file_age_days(tmp_path / "missing")

    def test_missing_file_is_stale(self, tmp_path):
        assert is_file_stale(tmp_path / "missing", max_age_days=1e6)

    def test_stale_after_max_age(self, tmp_path):
        f = tmp_path / "finals2000A.all"
        f.write_text("data")
        _backdate(f, 8 * 86400)
        assert is_file_stale(f, max_age_days=7.0)
        assert not is_file_stale(f, max_age_days=9.0)

    def test_fresh_file(self, tmp_path):
        f = tmp_path / "finals2000A.all"
        f.write_text("data")
        assert not is_file_stale(f, max_age_days=0.5)
