from boundedcache._base import BaseCache as BaseCache
from boundedcache._config import (
    CacheOptions as CacheOptions,
    Policy as Policy,
    create_cache as create_cache,
)
from boundedcache._exceptions import (
    CacheError as CacheError,
    CacheInvariantError as CacheInvariantError,
    InvalidCapacityError as InvalidCapacityError,
    UnknownPolicyError as UnknownPolicyError,
)
from boundedcache._fifo_cache import FIFOCache as FIFOCache
from boundedcache._lfu_cache import LFUCache as LFUCache
from boundedcache._lru_cache import LRUCache as LRUCache

__all__ = (
    ## Caches
    "BaseCache",
    "LRUCache",
    "LFUCache",
    "FIFOCache",
    ## Configuration
    "CacheOptions",
    "Policy",
    "create_cache",
    ## Errors
    "CacheError",
    "InvalidCapacityError",
    "UnknownPolicyError",
    "CacheInvariantError",
)
