"""Cache directory helpers for downloaded Earth orientation data."""

from orientax.utils.caching import (
    CACHE_ENV_VAR,
    EOP_FILENAME,
    cache_root,
    eop_cache_file,
    file_age_days,
    file_age_seconds,
    get_cache_dir,
    get_eop_cache_dir,
    is_file_stale,
)

__all__ = [
    "CACHE_ENV_VAR",
    "EOP_FILENAME",
    "cache_root",
    "eop_cache_file",
    "file_age_days",
    "file_age_seconds",
    "get_cache_dir",
    "get_eop_cache_dir",
    "is_file_stale",
]
