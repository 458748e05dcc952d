import random
import typing as tp

import pytest

from boundedcache import BaseCache, FIFOCache, LFUCache, LRUCache


class ReferenceCache:
    """
    Slow model of every eviction policy.

    Each entry keeps a frequency, the clock of its last access and the clock of
    its insertion; the victim is found with a linear scan.
    """

    def __init__(self, capacity: int, policy: str) -> None:
        self.capacity = capacity
        self.policy = policy
        self.values: tp.Dict[tp.Any, tp.Any] = {}
        self.frequency: tp.Dict[tp.Any, int] = {}
        self.touched: tp.Dict[tp.Any, int] = {}
        self.inserted: tp.Dict[tp.Any, int] = {}
        self.clock = 0

    def _tick(self) -> int:
        self.clock += 1
        return self.clock

    def _rank(self, key: tp.Any) -> tp.Any:
        if self.policy == "lru":
            return self.touched[key]
        if self.policy == "lfu":
            return (self.frequency[key], self.touched[key])
        return self.inserted[key]

    def _drop(self, key: tp.Any) -> None:
        for table in (self.values, self.frequency, self.touched, self.inserted):
            del table[key]

    def get(self, key: tp.Any) -> tp.Any:
        if key not in self.values:
            return None
        self.frequency[key] += 1
        self.touched[key] = self._tick()
        return self.values[key]

    def put(self, key: tp.Any, value: tp.Any) -> None:
        if key in self.values:
            self.values[key] = value
            self.frequency[key] += 1
            self.touched[key] = self._tick()
            return
        if len(self.values) >= self.capacity:
            self._drop(min(self.values, key=self._rank))
        now = self._tick()
        self.values[key] = value
        self.frequency[key] = 1
        self.touched[key] = now
        self.inserted[key] = now

    def remove_key(self, key: tp.Any) -> None:
        if key in self.values:
            self._drop(key)

    def eviction_order(self) -> tp.List[tp.Any]:
        return sorted(self.values, key=self._rank)


@pytest.fixture(params=[LRUCache, LFUCache, FIFOCache], ids=["lru", "lfu", "fifo"])
def cache_class(request: pytest.FixtureRequest) -> tp.Type[BaseCache[tp.Any, tp.Any]]:
    return tp.cast(tp.Type[BaseCache[tp.Any, tp.Any]], request.param)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(0)
