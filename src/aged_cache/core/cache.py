"""In-memory cache with per-entry retention and lazy eviction.

Each value is stamped with an absolute expiry time when it is stored.
Expired entries are only dropped when a caller touches the cache through
get(), size() or is_empty(); there is no background sweeper.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Generic, Hashable, List, Optional, TypeVar

from aged_cache import config
from aged_cache.core.clock import SystemClock
from aged_cache.core.errors import InvalidArgumentError
from aged_cache.core.interfaces import Clock

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(slots=True)
class CacheEntry(Generic[K, V]):
    # Stores value + absolute expiration time in clock milliseconds
    key: K
    value: V
    expires_at_ms: int

    @classmethod
    def create(cls, key: K, value: V, retention_ms: int, clock: Clock) -> "CacheEntry[K, V]":
        return cls(key=key, value=value, expires_at_ms=clock.millis() + retention_ms)

    def is_expired(self, clock: Clock) -> bool:
        # Still live at exactly expires_at_ms
        return clock.millis() > self.expires_at_ms

    def refresh(self, value: V, retention_ms: int, clock: Clock) -> None:
        self.value = value
        self.expires_at_ms = clock.millis() + retention_ms


class AgedCache(Generic[K, V]):
    """Thread-safe, insertion-ordered cache whose entries expire individually.

    Every public operation holds the same lock for its full duration,
    including the cleanup pass it triggers.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._store: "OrderedDict[K, CacheEntry[K, V]]" = OrderedDict()
        self._lock = threading.Lock()

    def put(self, key: K, value: V, retention_ms: Optional[int] = None) -> None:
        """Insert or refresh ``key``.

        A new key is appended at the end of insertion order. An existing key
        keeps its position but gets the new value and a new expiry computed
        from the current clock reading.

        Raises:
          InvalidArgumentError if key or value is None, or if retention_ms
          is not an integer. The cache is left untouched in that case.
        """
        if key is None or value is None:
            raise InvalidArgumentError("Neither key nor value can be None")

        if retention_ms is None:
            retention_ms = config.DEFAULT_RETENTION_MS
        if isinstance(retention_ms, bool) or not isinstance(retention_ms, int):
            raise InvalidArgumentError(f"retention_ms must be an int, got {type(retention_ms).__name__}")

        with self._lock:
            existing = self._find(key)
            if existing is None:
                self._store[key] = CacheEntry.create(key, value, retention_ms, self._clock)
                logger.debug("Inserted key %r (retention %d ms)", key, retention_ms)
            else:
                existing.refresh(value, retention_ms, self._clock)
                logger.debug("Refreshed key %r (retention %d ms)", key, retention_ms)

    def get(self, key: K) -> Optional[V]:
        """Return the live value for ``key`` or None if missing or expired."""
        with self._lock:
            self._clean()
            entry = self._find(key)
            if entry is None or entry.is_expired(self._clock):
                return None
            return entry.value

    def size(self) -> int:
        with self._lock:
            self._clean()
            return len(self._store)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def _find(self, key: K) -> Optional[CacheEntry[K, V]]:
        # Caller must hold the lock
        return self._store.get(key)

    def _clean(self) -> None:
        # Caller must hold the lock. Collect first, then unlink, so removal
        # never touches the iteration in progress.
        expired: List[K] = [k for k, entry in self._store.items() if entry.is_expired(self._clock)]
        for k in expired:
            del self._store[k]

        if expired:
            logger.debug("Evicted %d expired entries, %d remaining", len(expired), len(self._store))
