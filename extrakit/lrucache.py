"""Least-recently-used cache with an ordered, front-to-back view."""

from __future__ import annotations

import sys
from collections import OrderedDict
from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

UNLIMITED = 0


class LRUCache(Generic[K, V]):
    """A bounded mapping that evicts the entry at the back when it overflows.

    New entries go to the front. Eviction is done lazily, before each
    insertion, so between insertions the cache may hold one entry more
    than its capacity; ``shrink()`` trims it down to the capacity at once.
    A capacity of 0 means the cache is unlimited.
    """

    def __init__(
        self,
        capacity: int = UNLIMITED,
        default_factory: Callable[[], V] | None = None,
    ) -> None:
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._limit = UNLIMITED
        self.default_factory = default_factory
        self.resize(capacity)

    def resize(self, n: int) -> None:
        """Change the capacity and evict entries that no longer fit."""
        if n < 0:
            raise ValueError("capacity can't be negative")
        self._limit = n
        self.shrink()

    def shrink(self) -> None:
        """Evict entries from the back until the capacity is respected."""
        if self._limit == UNLIMITED:
            return
        while len(self._entries) > self._limit:
            self._entries.popitem(last=True)

    def _insert_front(self, key: K, value: V) -> V:
        self.shrink()
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)
        return value

    def __getitem__(self, key: K) -> V:
        """Return the value for *key*, creating it with the default factory if absent.

        Creating an entry may evict others. Without a default factory a
        missing key raises KeyError.
        """
        try:
            return self._entries[key]
        except KeyError:
            if self.default_factory is None:
                raise
        return self._insert_front(key, self.default_factory())

    def emplace(self, key: K, value: V) -> tuple[V, bool]:
        """Insert *value* at the front unless *key* is present.

        Returns the stored value and whether an insertion took place.
        """
        if key in self._entries:
            return self._entries[key], False
        return self._insert_front(key, value), True

    def move_front(self, key: K) -> bool:
        """Move the entry for *key* to the front; return whether it was found."""
        if key not in self._entries:
            return False
        self._entries.move_to_end(key, last=False)
        return True

    def erase(self, key: K) -> bool:
        """Remove the entry for *key*; return whether it was present."""
        return self._entries.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._entries.clear()

    def capacity(self) -> int:
        """Return the capacity, or ``sys.maxsize`` when unlimited."""
        return sys.maxsize if self._limit == UNLIMITED else self._limit

    def __len__(self) -> int:
        return len(self._entries)

    def count(self, key: K) -> int:
        return 1 if key in self._entries else 0

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for *key* without changing the order."""
        return self._entries.get(key, default)

    def front(self) -> tuple[K, V]:
        """Return the most recently inserted (or moved) entry."""
        if not self._entries:
            raise IndexError("front() on an empty cache")
        return next(iter(self._entries.items()))

    def back(self) -> tuple[K, V]:
        """Return the entry that would be evicted next."""
        if not self._entries:
            raise IndexError("back() on an empty cache")
        return next(reversed(self._entries.items()))

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs from front to back."""
        return iter(self._entries.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._entries.items())!r}, capacity={self._limit})"


_MISSING = object()