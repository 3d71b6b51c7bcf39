"""Small insertion-ordered map with a hard size limit."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

MAX_SIZE = 256

_MISSING = object()


class FlatMap(Generic[K, V]):
    """A flat list of ``(key, value)`` pairs searched linearly.

    Holds at most ``MAX_SIZE`` entries; inserting beyond that raises
    OverflowError. Erasing moves the last entry into the freed slot.
    """

    def __init__(
        self,
        items: Iterable[tuple[K, V]] | Mapping[K, V] = (),
        default_factory: Callable[[], V] | None = None,
    ) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []
        self.default_factory = default_factory
        self.update(items)

    def _index(self, key: object) -> int | None:
        h = hash(key)
        return next(
            (i for i, k in enumerate(self._keys) if hash(k) == h and k == key),
            None,
        )

    def move_front(self, key: K) -> bool:
        """Swap the entry for *key* with the first entry; return whether it was found."""
        index = self._index(key)
        if index is None:
            return False
        self._keys[0], self._keys[index] = self._keys[index], self._keys[0]
        self._values[0], self._values[index] = self._values[index], self._values[0]
        return True

    def insert(self, key: K, value: V) -> bool:
        """Append *value* under *key* unless the key is present; return whether inserted."""
        if len(self._keys) >= MAX_SIZE:
            raise OverflowError("FlatMap overflow")
        if self._index(key) is not None:
            return False
        self._keys.append(key)
        self._values.append(value)
        return True

    def update(self, items: Iterable[tuple[K, V]] | Mapping[K, V]) -> None:
        """Insert every pair from *items*, keeping existing keys unchanged."""
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    def erase(self, key: K) -> bool:
        """Remove *key*; the last entry takes its place. Return whether it was present."""
        index = self._index(key)
        if index is None:
            return False
        self._keys[index] = self._keys[-1]
        self._values[index] = self._values[-1]
        self._keys.pop()
        self._values.pop()
        return True

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()

    def __getitem__(self, key: K) -> V:
        """Return the value for *key*, creating it with the default factory if absent."""
        index = self._index(key)
        if index is not None:
            return self._values[index]
        if self.default_factory is None:
            raise KeyError(key)
        value = self.default_factory()
        self.insert(key, value)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        index = self._index(key)
        if index is not None:
            self._values[index] = value
        else:
            self.insert(key, value)

    def get(self, key: K, fallback: V | None = None) -> V | None:
        index = self._index(key)
        return fallback if index is None else self._values[index]

    def front(self) -> tuple[K, V]:
        if not self._keys:
            raise IndexError("front() on an empty map")
        return self._keys[0], self._values[0]

    def back(self) -> tuple[K, V]:
        if not self._keys:
            raise IndexError("back() on an empty map")
        return self._keys[-1], self._values[-1]

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs in storage order."""
        return iter(list(zip(self._keys, self._values)))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return self._index(key) is not None

    def merge(self, other: FlatMap[K, V]) -> None:
        """Add the entries of *other* whose keys are not present yet."""
        for key, value in other.items():
            if key not in self:
                self[key] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"