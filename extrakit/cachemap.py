"""Two-level cache: an LRU cache of primary keys, each holding a line of hinted values."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from extrakit.cacheline import CacheLine
from extrakit.lrucache import LRUCache

K = TypeVar("K", bound=Hashable)
H = TypeVar("H", bound=Hashable)
V = TypeVar("V")

_ALL = object()


class CacheMap(Generic[K, H, V]):
    """Cache several states of heavy objects, keyed by a primary key and a hint.

    *size* limits the number of primary keys and *depth* the number of
    hints kept per key; 0 means unlimited for either.
    """

    def __init__(self, size: int = 0, depth: int = 0) -> None:
        if depth < 0:
            raise ValueError("depth can't be negative")
        self._cache: LRUCache[K, CacheLine[H, V]] = LRUCache(size)
        self._depth = depth

    def get(self, key: K, hint: H, default: V | None = None) -> V | None:
        """Return the value stored under *key* and *hint*, or *default*."""
        line = self._cache.get(key)
        if line is None:
            return default
        return line.get(hint, default)

    def find_if(self, pred: Callable[[H], bool], key: K, default: V | None = None) -> V | None:
        """Return the first value under *key* whose hint satisfies *pred*."""
        line = self._cache.get(key)
        if line is None:
            return default
        return line.find_if(pred, default)

    def insert(self, key: K, hint: H, value: V) -> None:
        """Store *value* under *key* and *hint*, replacing any previous value."""
        line, _ = self._cache.emplace(key, CacheLine(self._depth))
        line.emplace(hint, value)

    def move_front(self, key: K) -> bool:
        """Mark *key* as most recently used; return whether it was found."""
        return self._cache.move_front(key)

    def erase(self, key: K, hint: object = _ALL) -> int:
        """Remove one hinted value, or every value for *key* when no hint is given.

        Returns the number of values removed. A key left without values is dropped.
        """
        line = self._cache.get(key)
        if line is None:
            return 0
        if hint is _ALL:
            removed = len(line)
            self._cache.erase(key)
            return removed
        removed = 1 if line.erase(hint) else 0  # type: ignore[arg-type]
        if not len(line):
            self._cache.erase(key)
        return removed

    def clear(self) -> None:
        self._cache.clear()

    def resize(self, n: int) -> None:
        """Limit the number of primary keys."""
        self._cache.resize(n)

    def set_depth(self, n: int) -> None:
        """Limit the number of hints kept per key, trimming existing lines."""
        if n < 0:
            raise ValueError("depth can't be negative")
        self._depth = n
        for _, line in self._cache.items():
            line.resize(n)

    def depth(self) -> int:
        """Return the per-key hint limit, or ``sys.maxsize`` when unlimited."""
        return sys.maxsize if self._depth == 0 else self._depth

    def capacity(self) -> int:
        """Return the primary key limit, or ``sys.maxsize`` when unlimited."""
        return self._cache.capacity()

    def __len__(self) -> int:
        return len(self._cache)

    def count(self, key: K, hint: object = _ALL) -> int:
        """Count values under *key*, or under *key* and *hint* when given."""
        line = self._cache.get(key)
        if line is None:
            return 0
        if hint is _ALL:
            return len(line)
        return line.count(hint)  # type: ignore[arg-type]

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, depth={self._depth})"