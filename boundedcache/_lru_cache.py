from __future__ import annotations

import logging
import typing as tp

from boundedcache._base import BaseCache, K, V
from boundedcache._exceptions import CacheInvariantError

__all__ = ["LRUCache"]

logger = logging.getLogger("boundedcache.lru")


class _Node:
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: tp.Any = None, value: tp.Any = None) -> None:
        self.key = key
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LRUCache(BaseCache[K, V]):
    """
    Cache that evicts the least recently used entry.

    Entries live in a circular doubly linked list around a sentinel node, ordered
    from least (``root.next``) to most (``root.prev``) recently used. A key to node
    index lets every access relink the touched node itself in constant time.
    """

    policy = "lru"

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

        self._root = _Node()
        self._nodes: tp.Dict[K, _Node] = {}

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    def _append(self, node: _Node) -> None:
        last = self._root.prev
        last.next = node
        node.prev = last
        node.next = self._root
        self._root.prev = node

    def _move_to_end(self, node: _Node) -> None:
        self._unlink(node)
        self._append(node)

    def _evict(self) -> None:
        oldest = self._root.next
        if oldest is self._root or self._nodes.pop(oldest.key, None) is not oldest:
            raise CacheInvariantError("Eviction was triggered but the recency list and key index disagree")

        self._unlink(oldest)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evicted least recently used key {oldest.key!r}")

    def get(self, key: K, default: tp.Optional[V] = None) -> tp.Optional[V]:
        node = self._nodes.get(key)
        if node is None:
            return default

        self._move_to_end(node)
        return tp.cast(V, node.value)

    def put(self, key: K, value: V) -> None:
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._move_to_end(node)
            return

        if len(self._nodes) >= self._capacity:
            self._evict()

        node = _Node(key, value)
        self._nodes[key] = node
        self._append(node)

    def remove_key(self, key: K) -> None:
        node = self._nodes.pop(key, None)
        if node is not None:
            self._unlink(node)
            logger.debug(f"Removed key {key!r}")

    def clear(self) -> None:
        self._nodes.clear()
        self._root.prev = self._root.next = self._root

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> tp.Iterator[K]:
        node = self._root.next
        while node is not self._root:
            yield node.key
            node = node.next

    def __contains__(self, key: object) -> bool:
        return key in self._nodes
