from __future__ import annotations

import abc
import typing as tp

from boundedcache._exceptions import InvalidCapacityError

K = tp.TypeVar("K")
V = tp.TypeVar("V")

__all__ = ["BaseCache"]


class BaseCache(abc.ABC, tp.Generic[K, V]):
    """
    Fixed-capacity key-value container shared by every eviction policy.

    Subclasses keep a key mapping and an ordering structure in sync and evict
    exactly one entry whenever inserting a new key would exceed ``capacity``.

    Args:
        capacity: Maximum number of entries. Must be a positive integer.

    Raises:
        TypeError: If ``capacity`` is not an integer.
        InvalidCapacityError: If ``capacity`` is zero or negative.
    """

    policy: tp.ClassVar[str]
    """Short name of the eviction policy, as accepted by ``CacheOptions.policy``."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"Capacity must be an integer, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacityError("Capacity must be positive")

        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @abc.abstractmethod
    def get(self, key: K, default: tp.Optional[V] = None) -> tp.Optional[V]:
        """
        Return the value stored under ``key`` and record the access.

        Args:
            key: The key to look up.
            default: Returned when ``key`` is not cached.

        Returns:
            The cached value, or ``default`` if the key is absent. A miss has no
            side effects.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def put(self, key: K, value: V) -> None:
        """
        Insert ``value`` under ``key`` or replace the value of an existing key.

        Updating an existing key counts as an access and never evicts. Inserting
        a new key into a full cache evicts exactly one other entry first.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def remove_key(self, key: K) -> None:
        """Drop ``key`` from the cache. Absent keys are ignored."""
        raise NotImplementedError()

    @abc.abstractmethod
    def clear(self) -> None:
        raise NotImplementedError()

    @abc.abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError()

    @abc.abstractmethod
    def __iter__(self) -> tp.Iterator[K]:
        """Iterate over keys in eviction order, next victim first."""
        raise NotImplementedError()

    @abc.abstractmethod
    def __contains__(self, key: object) -> bool:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, capacity={self._capacity})"
