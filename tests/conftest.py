import pytest

from aged_cache.core.cache import AgedCache
from aged_cache.core.clock import ManualClock


@pytest.fixture
def clock():
    return ManualClock(start_ms=1_000)


@pytest.fixture
def cache(clock):
    return AgedCache(clock=clock)
