"""Value types for 2D geometry and small helpers on sizes, rectangles and margins."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import ClassVar, Union

Number = Union[int, float]


def _trunc_div(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b > 0) else -quotient
    return a / b


class Alignment(enum.IntFlag):
    """Horizontal and vertical alignment flags; they combine with ``|``."""

    LEFT = 0x1
    RIGHT = 0x2
    HCENTER = 0x4
    TOP = 0x20
    BOTTOM = 0x40
    VCENTER = 0x80
    CENTER = HCENTER | VCENTER


class AspectRatioMode(enum.Enum):
    """How a size is scaled into another one."""

    IGNORE = "ignore"
    KEEP = "keep"
    KEEP_BY_EXPANDING = "keep_by_expanding"


class RectFitPolicy(enum.Enum):
    """Whether a source rectangle is always stretched to its bounds or only cropped."""

    STRETCH_SOURCE = "stretch"
    CROP_SOURCE = "crop"


@dataclass
class AdjustOption:
    """Options for fitting one rectangle into another."""

    alignment: Alignment = Alignment.CENTER
    mode: AspectRatioMode = AspectRatioMode.IGNORE
    policy: RectFitPolicy = RectFitPolicy.CROP_SOURCE


@dataclass(frozen=True)
class Point:
    x: Number
    y: Number

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    width: Number
    height: Number

    def is_valid(self) -> bool:
        """Return whether neither dimension is negative."""
        return self.width >= 0 and self.height >= 0

    def bounded_to(self, other: Size) -> Size:
        return Size(min(self.width, other.width), min(self.height, other.height))

    def expanded_to(self, other: Size) -> Size:
        return Size(max(self.width, other.width), max(self.height, other.height))

    def scaled(self, target: Size, mode: AspectRatioMode = AspectRatioMode.IGNORE) -> Size:
        """Scale to *target*, keeping the aspect ratio unless *mode* ignores it.

        Integer sizes are scaled with integer arithmetic, truncating.
        """
        if mode is AspectRatioMode.IGNORE or self.width == 0 or self.height == 0:
            return target
        rw = _trunc_div(target.height * self.width, self.height)
        if mode is AspectRatioMode.KEEP:
            use_height = rw <= target.width
        else:
            use_height = rw >= target.width
        if use_height:
            return Size(rw, target.height)
        return Size(target.width, _trunc_div(target.width * self.height, self.width))


@dataclass(frozen=True)
class Margins:
    left: Number = 0
    top: Number = 0
    right: Number = 0
    bottom: Number = 0


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges lie inside it.

    ``right()`` is ``x + width - 1``, as for pixel grids.
    """

    x: Number
    y: Number
    width: Number
    height: Number

    _EDGE: ClassVar[int] = 1

    def left(self) -> Number:
        return self.x

    def top(self) -> Number:
        return self.y

    def right(self) -> Number:
        return self.x + self.width - self._EDGE

    def bottom(self) -> Number:
        return self.y + self.height - self._EDGE

    def size(self) -> Size:
        return Size(self.width, self.height)

    def center(self) -> Point:
        return Point(
            _trunc_div(self.left() + self.right(), 2),
            _trunc_div(self.top() + self.bottom(), 2),
        )

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def with_size(self, size: Size) -> Rect:
        """Return a rectangle with the same top-left corner and the given size."""
        return replace(self, width=size.width, height=size.height)

    def moved_to(self, x: Number, y: Number) -> Rect:
        return replace(self, x=x, y=y)

    def moved_left(self, x: Number) -> Rect:
        return replace(self, x=x)

    def moved_top(self, y: Number) -> Rect:
        return replace(self, y=y)

    def moved_right(self, x: Number) -> Rect:
        """Return the rectangle moved so that its right edge is at *x*."""
        return replace(self, x=x - self.width + self._EDGE)

    def moved_bottom(self, y: Number) -> Rect:
        """Return the rectangle moved so that its bottom edge is at *y*."""
        return replace(self, y=y - self.height + self._EDGE)


class RectF(Rect):
    """A real-valued rectangle: ``right()`` is ``x + width``."""

    _EDGE: ClassVar[int] = 0

    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


def _as_size(item: Size | Rect) -> Size:
    return item.size() if isinstance(item, Rect) else item


def max_side(item: Size | Rect) -> int:
    """Return the longer side, truncated to an integer."""
    size = _as_size(item)
    return int(max(size.width, size.height))


def min_side(item: Size | Rect) -> int:
    """Return the shorter side, truncated to an integer."""
    size = _as_size(item)
    return int(min(size.width, size.height))


def horizontal_margins(margins: Margins) -> Number:
    return margins.left + margins.right


def vertical_margins(margins: Margins) -> Number:
    return margins.top + margins.bottom


def margins_size(margins: Margins) -> Size:
    return Size(horizontal_margins(margins), vertical_margins(margins))


def clamped_size(size: Size, min_size: Size, max_size: Size) -> Size:
    """Expand *size* to at least *min_size*, then bound it to *max_size*."""
    return min_size.expanded_to(size).bounded_to(max_size)