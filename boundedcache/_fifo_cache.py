import logging
from collections import OrderedDict
from typing import Iterator, Optional

from boundedcache._base import BaseCache, K, V
from boundedcache._exceptions import CacheInvariantError

__all__ = ["FIFOCache"]

logger = logging.getLogger("boundedcache.fifo")


class FIFOCache(BaseCache[K, V]):
    """
    Cache that evicts the entry inserted first.

    Reads and value updates do not change an entry's position.
    """

    policy = "fifo"

    def __init__(self, capacity: int):
        super().__init__(capacity)

        self._entries: "OrderedDict[K, V]" = OrderedDict()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._entries.get(key, default)

    def put(self, key: K, value: V) -> None:
        if key not in self._entries and len(self._entries) >= self.capacity:
            if not self._entries:
                raise CacheInvariantError("Eviction was triggered on an empty insertion queue")
            evicted_key, _ = self._entries.popitem(last=False)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Evicted first inserted key {evicted_key!r}")

        self._entries[key] = value

    def remove_key(self, key: K) -> None:
        if key in self._entries:
            del self._entries[key]
            logger.debug(f"Removed key {key!r}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        yield from self._entries

    def __contains__(self, key: object) -> bool:
        return key in self._entries
