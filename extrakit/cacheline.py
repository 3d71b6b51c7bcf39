"""Small deque-backed map used as the second layer of a cache map."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CacheLine(Generic[K, V]):
    """An ordered list of ``(key, value)`` entries with an optional size limit.

    New keys are inserted at the front; when the limit is exceeded the
    entry at the back is dropped. A capacity of 0 means unlimited.
    Iteration yields ``(key, value)`` pairs from front to back.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity can't be negative")
        self._entries: deque[tuple[K, V]] = deque()
        self._capacity = capacity

    def _index(self, key: K) -> int | None:
        return next((i for i, (k, _) in enumerate(self._entries) if k == key), None)

    def emplace(self, key: K, value: V) -> None:
        """Store *value* under *key*, replacing it in place if the key exists."""
        index = self._index(key)
        if index is not None:
            self._entries[index] = (key, value)
            return
        self._entries.appendleft((key, value))
        if self._capacity > 0 and len(self._entries) > self._capacity:
            self._entries.pop()

    def erase(self, key: K) -> bool:
        """Remove *key*; the last entry takes its place. Return whether it was present."""
        index = self._index(key)
        if index is None:
            return False
        self._entries[index] = self._entries[-1]
        self._entries.pop()
        return True

    def resize(self, n: int) -> None:
        """Drop entries from the back until at most *n* remain, and set the limit to *n*."""
        if n < 0:
            raise ValueError("capacity can't be negative")
        while len(self._entries) > n:
            self._entries.pop()
        self._capacity = n

    def clear(self) -> None:
        self._entries.clear()

    def get(self, key: K, default: V | None = None) -> V | None:
        index = self._index(key)
        return default if index is None else self._entries[index][1]

    def find_if(self, pred: Callable[[K], bool], default: V | None = None) -> V | None:
        """Return the value of the first entry whose key satisfies *pred*."""
        return next((v for k, v in self._entries if pred(k)), default)

    def __contains__(self, key: object) -> bool:
        return self._index(key) is not None  # type: ignore[arg-type]

    def count(self, key: K) -> int:
        """Return the number of entries stored under *key* (0 or 1)."""
        return sum(1 for k, _ in self._entries if k == key)

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._entries)!r}, capacity={self._capacity})"