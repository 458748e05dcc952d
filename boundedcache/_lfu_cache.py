import logging
from collections import OrderedDict, defaultdict
from typing import DefaultDict, Dict, Iterator, Optional, Tuple

from boundedcache._base import BaseCache, K, V
from boundedcache._exceptions import CacheInvariantError

__all__ = ["LFUCache"]

logger = logging.getLogger("boundedcache.lfu")


class LFUCache(BaseCache[K, V]):
    """
    Cache that evicts the least frequently used entry.

    Keys are grouped into per-frequency buckets that keep their keys in recency
    order, so the victim is the oldest key of the lowest frequency bucket. Every
    operation runs in amortized constant time.
    """

    policy = "lfu"

    def __init__(self, capacity: int):
        super().__init__(capacity)

        self.cache: Dict[K, Tuple[V, int]] = {}  # key -> (value, frequency)
        self.freq_count: DefaultDict[int, "OrderedDict[K, None]"] = defaultdict(OrderedDict)
        self.min_freq = 0  # lowest frequency with a non-empty bucket, 0 when empty

    def _touch(self, key: K, value: V) -> None:
        _, freq = self.cache[key]
        # Move the key to the most recent end of the next frequency bucket
        bucket = self.freq_count[freq]
        del bucket[key]
        if not bucket:
            del self.freq_count[freq]
            if freq == self.min_freq:
                self.min_freq += 1
        freq += 1
        self.freq_count[freq][key] = None
        self.cache[key] = (value, freq)

    def _evict(self) -> None:
        bucket = self.freq_count.get(self.min_freq)
        if not bucket:
            raise CacheInvariantError(f"Eviction was triggered but frequency bucket {self.min_freq} is empty")

        evicted_key, _ = bucket.popitem(last=False)
        if not bucket:
            del self.freq_count[self.min_freq]
        del self.cache[evicted_key]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evicted least frequently used key {evicted_key!r} (frequency {self.min_freq})")

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        entry = self.cache.get(key)
        if entry is None:
            return default

        value, _ = entry
        self._touch(key, value)
        return value

    def put(self, key: K, value: V) -> None:
        if key in self.cache:
            self._touch(key, value)
            return

        if len(self.cache) >= self.capacity:
            self._evict()

        # New keys always start at frequency 1
        self.cache[key] = (value, 1)
        self.freq_count[1][key] = None
        self.min_freq = 1

    def remove_key(self, key: K) -> None:
        entry = self.cache.pop(key, None)
        if entry is None:
            return

        _, freq = entry
        bucket = self.freq_count[freq]
        del bucket[key]
        if not bucket:
            del self.freq_count[freq]
            if freq == self.min_freq:
                self.min_freq = min(self.freq_count) if self.freq_count else 0
        logger.debug(f"Removed key {key!r}")

    def frequency(self, key: K) -> Optional[int]:
        """Return how many times ``key`` was accessed, without counting this call."""
        entry = self.cache.get(key)
        return None if entry is None else entry[1]

    def clear(self) -> None:
        self.cache.clear()
        self.freq_count.clear()
        self.min_freq = 0

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[K]:
        for freq in sorted(self.freq_count):
            yield from self.freq_count[freq]

    def __contains__(self, key: object) -> bool:
        return key in self.cache
