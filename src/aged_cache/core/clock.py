"""Clock implementations.

SystemClock reads wall-clock UTC milliseconds; ManualClock only moves when
told to, which makes expiry deterministic in tests.
"""

from __future__ import annotations

import threading
import time

from aged_cache.core.errors import InvalidArgumentError


class SystemClock:
    # Milliseconds since the Unix epoch (UTC)
    def millis(self) -> int:
        return time.time_ns() // 1_000_000


class ManualClock:
    def __init__(self, *, start_ms: int = 0) -> None:
        self._now = int(start_ms)
        self._lock = threading.Lock()

    def millis(self) -> int:
        with self._lock:
            return self._now

    def set(self, ms: int) -> None:
        with self._lock:
            if ms < self._now:
                raise InvalidArgumentError("Clock cannot move backwards")
            self._now = int(ms)

    def advance(self, ms: int) -> int:
        # Returns the new reading
        if ms < 0:
            raise InvalidArgumentError("Clock cannot move backwards")
        with self._lock:
            self._now += int(ms)
            return self._now
