from __future__ import annotations

import logging
import typing as tp
from dataclasses import dataclass

from typing_extensions import Literal

from boundedcache._base import BaseCache
from boundedcache._exceptions import UnknownPolicyError
from boundedcache._fifo_cache import FIFOCache
from boundedcache._lfu_cache import LFUCache
from boundedcache._lru_cache import LRUCache

__all__ = ["CacheOptions", "Policy", "create_cache"]

logger = logging.getLogger("boundedcache.config")

Policy = Literal["lru", "lfu", "fifo"]

_POLICIES: tp.Dict[str, tp.Type[BaseCache[tp.Any, tp.Any]]] = {
    LRUCache.policy: LRUCache,
    LFUCache.policy: LFUCache,
    FIFOCache.policy: FIFOCache,
}


@dataclass
class CacheOptions:
    """
    Configuration options for building a bounded cache.

    Attributes:
    ----------
    capacity : int
        Maximum number of entries the cache holds. Must be a positive integer,
        validated when the cache is created.

        Default: 128

    policy : str
        Eviction policy used once the cache is full.

        - ``"lru"``: evict the least recently used entry.
        - ``"lfu"``: evict the least frequently used entry, the least recently
          used one among equally frequent entries.
        - ``"fifo"``: evict the entry inserted first.

        Default: ``"lru"``

        Examples:
        --------
        >>> options = CacheOptions(capacity=2, policy="lfu")
        >>> cache = create_cache(options)
        >>> cache.capacity
        2
    """

    capacity: int = 128
    policy: Policy = "lru"


def create_cache(options: CacheOptions | None = None) -> BaseCache[tp.Any, tp.Any]:
    """
    Build an empty cache configured by ``options``.

    Args:
        options: Cache configuration. Defaults to ``CacheOptions()``.

    Returns:
        An empty cache implementing the requested eviction policy.

    Raises:
        UnknownPolicyError: If ``options.policy`` names no known policy.
        InvalidCapacityError: If ``options.capacity`` is not positive.
    """
    options = options if options is not None else CacheOptions()

    try:
        cache_class = _POLICIES[options.policy]
    except KeyError:
        raise UnknownPolicyError(
            f"Unknown eviction policy {options.policy!r}, expected one of: {', '.join(_POLICIES)}"
        ) from None

    logger.debug(f"Creating {cache_class.__name__} with capacity {options.capacity}")
    return cache_class(options.capacity)
