"""Half-open range of integer positions given by offset and length."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class IndexRange:
    """Positions ``offset`` up to, but not including, ``offset + length``.

    The default range, offset -1 and length -1, is an invalid placeholder.
    """

    offset: int = -1
    length: int = -1

    @property
    def end(self) -> int:
        return self.offset + self.length

    def contains(self, item: int | IndexRange) -> bool:
        """Return whether a position, or both ends of another range, lie inside."""
        if isinstance(item, IndexRange):
            return self.contains(item.offset) and self.contains(item.end - 1)
        return self.offset <= item < self.end

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (int, IndexRange)):
            return self.contains(item)
        return False

    def intersects(self, other: IndexRange) -> bool:
        """Return whether either end of *other* lies inside this range."""
        return self.contains(other.offset) or self.contains(other.end - 1)

    def touches(self, other: IndexRange) -> bool:
        """Return whether the two ranges are adjacent, one ending where the other starts."""
        return self.offset == other.end or self.end == other.offset

    def __iadd__(self, delta: int) -> IndexRange:
        self.offset += delta
        return self

    def __isub__(self, delta: int) -> IndexRange:
        self.offset -= delta
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexRange):
            return NotImplemented
        return self.offset == other.offset and self.length == other.length

    __hash__ = None  # type: ignore[assignment]