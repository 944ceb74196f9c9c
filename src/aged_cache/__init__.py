"""In-memory key-value cache with per-entry retention and lazy eviction."""

from aged_cache.core.cache import AgedCache, CacheEntry
from aged_cache.core.clock import ManualClock, SystemClock
from aged_cache.core.errors import AgedCacheError, InvalidArgumentError
from aged_cache.core.interfaces import Clock

__all__ = [
    "AgedCache",
    "AgedCacheError",
    "CacheEntry",
    "Clock",
    "InvalidArgumentError",
    "ManualClock",
    "SystemClock",
]
