"""Configuration and environment helpers for the cache.

Reads typed environment variables and exposes the defaults used by
AgedCache (currently the fallback retention for put()).
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# Retention applied when put() is called without one
DEFAULT_RETENTION_MS = _env_int("AGED_CACHE_DEFAULT_RETENTION_MS", 60_000)
