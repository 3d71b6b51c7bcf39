"""Rounding polygon corners into paths, and building star polygons."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

from extrakit.distances import manhattan_distance
from extrakit.geometry import Point, Rect

Distance = Callable[[Point, Point], float]
Shape = Union[Rect, Sequence[Point]]

_SINE_TABLE_SIZE = 256
_SINE_TABLE = [math.sin(2 * math.pi * i / _SINE_TABLE_SIZE) for i in range(_SINE_TABLE_SIZE)]
_STEP_FACTOR = 0.5 * _SINE_TABLE_SIZE / math.pi
_STEP = 2.0 * math.pi / _SINE_TABLE_SIZE


@dataclass(frozen=True)
class PathElement:
    """One drawing command: its kind and the points it takes."""

    class Kind(enum.Enum):
        MOVE = "move"
        LINE = "line"
        QUAD = "quad"

    kind: PathElement.Kind
    points: tuple[Point, ...]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass
class Path:
    """A sequence of move, line and quadratic-curve commands."""

    elements: list[PathElement] = field(default_factory=list)

    def move_to(self, point: Point) -> None:
        self.elements.append(PathElement(PathElement.Kind.MOVE, (point,)))

    def line_to(self, point: Point) -> None:
        self.elements.append(PathElement(PathElement.Kind.LINE, (point,)))

    def quad_to(self, control: Point, end: Point) -> None:
        self.elements.append(PathElement(PathElement.Kind.QUAD, (control, end)))

    def add_polygon(self, polygon: Iterable[Point]) -> None:
        """Start a new subpath at the first vertex and draw lines through the rest."""
        vertices = list(polygon)
        if not vertices:
            return
        self.move_to(vertices[0])
        for vertex in vertices[1:]:
            self.line_to(vertex)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)


def _rect_polygon(rect: Rect) -> list[Point]:
    """The closed polygon of a rectangle taken with real-valued edges."""
    left, top = rect.x, rect.y
    right, bottom = rect.x + rect.width, rect.y + rect.height
    return [Point(left, top), Point(right, top), Point(right, bottom), Point(left, bottom), Point(left, top)]


def _as_points(shape: Iterable[Point | tuple[float, float]]) -> list[Point]:
    return [p if isinstance(p, Point) else Point(*p) for p in shape]


def _line_start(curr: Point, nxt: Point, r: float) -> Point:
    return Point((1.0 - r) * curr.x + r * nxt.x, (1.0 - r) * curr.y + r * nxt.y)


def _line_end(curr: Point, nxt: Point, r: float) -> Point:
    return Point(r * curr.x + (1.0 - r) * nxt.x, r * curr.y + (1.0 - r) * nxt.y)


class PolygonRounder:
    """Turn polygons into paths whose corners are rounded by quadratic curves.

    The *distance* function measures edges; a corner radius is taken as a
    fraction of the edge length, at most one half.
    """

    def __init__(self, distance: Distance = manhattan_distance) -> None:
        self.distance = distance

    def _ratio(self, curr: Point, nxt: Point, radius: float) -> float:
        length = self.distance(curr, nxt)
        if length == 0:
            return 0.5
        return min(0.5, radius / length)

    def round(self, shape: Shape, radius: float) -> Path:
        """Round every corner of *shape* with the same *radius*.

        A polygon with fewer than 3 vertices is copied unchanged.
        """
        points = _rect_polygon(shape)[:-1] if isinstance(shape, Rect) else _as_points(shape)
        path = Path()
        n = len(points)
        if n < 3:
            path.add_polygon(points)
            return path

        radius = max(0.0, radius)
        for i, curr in enumerate(points):
            nxt = points[(i + 1) % n]
            r = self._ratio(curr, nxt, radius)
            start = _line_start(curr, nxt, r)
            if i == 0:
                path.move_to(start)
            else:
                path.quad_to(curr, start)
            path.line_to(_line_end(curr, nxt, r))

        first, second = points[0], points[1]
        path.quad_to(first, _line_start(first, second, self._ratio(first, second, radius)))
        return path

    def round_corners(self, shape: Shape, radii: Sequence[float]) -> Path:
        """Round each corner with its own radius; corners without one stay sharp.

        A rectangle takes at most 4 radii. If all radii are zero, or none
        are given, the polygon is copied unchanged. A closing vertex equal
        to the first one is ignored.
        """
        if isinstance(shape, Rect):
            if len(radii) > 4:
                raise ValueError("a rectangle can't have more than 4 corners")
            polygon = _rect_polygon(shape)
        else:
            polygon = _as_points(shape)

        path = Path()
        closed = bool(polygon) and polygon[0] == polygon[-1]
        n = len(polygon) - int(closed)
        length = min(len(radii), n)
        if n < 3 or not any(abs(r) > 1e-12 for r in radii[:length]):
            path.add_polygon(polygon)
            return path

        def radius(i: int) -> float:
            return max(radii[i], 0.0) if i < length else 0.0

        r0 = radius(0)
        curr, nxt = polygon[0], polygon[1]
        path.move_to(_line_start(curr, nxt, self._ratio(curr, nxt, r0)))
        path.line_to(_line_end(curr, nxt, self._ratio(curr, nxt, radius(1))))

        for i in range(1, n - 1):
            curr, nxt = polygon[i], polygon[i + 1]
            if i >= length:
                path.line_to(curr)
                path.line_to(nxt)
                continue
            path.quad_to(curr, _line_start(curr, nxt, self._ratio(curr, nxt, radius(i))))
            path.line_to(_line_end(curr, nxt, self._ratio(curr, nxt, radius(i + 1))))

        curr, nxt = polygon[n - 1], polygon[0]
        path.quad_to(curr, _line_start(curr, nxt, self._ratio(curr, nxt, radius(n - 1))))
        path.line_to(_line_end(curr, nxt, self._ratio(curr, nxt, r0)))

        curr, nxt = polygon[0], polygon[1]
        path.quad_to(curr, _line_start(curr, nxt, self._ratio(curr, nxt, r0)))
        return path


def fast_sin(angle: float) -> float:
    """Sine from a 256-entry table with second-order interpolation."""
    si = int(angle * _STEP_FACTOR)
    d = angle - si * _STEP
    ci = si + _SINE_TABLE_SIZE // 4
    si &= _SINE_TABLE_SIZE - 1
    ci &= _SINE_TABLE_SIZE - 1
    return _SINE_TABLE[si] + (_SINE_TABLE[ci] - 0.5 * _SINE_TABLE[si] * d) * d


def fast_cos(angle: float) -> float:
    """Cosine from a 256-entry table with second-order interpolation."""
    ci = int(angle * _STEP_FACTOR)
    d = angle - ci * _STEP
    si = ci + _SINE_TABLE_SIZE // 4
    si &= _SINE_TABLE_SIZE - 1
    ci &= _SINE_TABLE_SIZE - 1
    return _SINE_TABLE[si] - (_SINE_TABLE[ci] + 0.5 * _SINE_TABLE[si] * d) * d


def star_polygon(side_count: int, factor: float, rect: Rect, precise: bool = True) -> list[Point]:
    """Return the vertices of a star inscribed in *rect*.

    Odd vertices lie on the ellipse of the rectangle, even ones on an
    inner ellipse scaled by *factor* (clamped to [0, 1]). A star has
    twice *side_count* vertices; fewer than 3 sides give 3 vertices.
    """
    if side_count < 0:
        raise ValueError("side count can't be negative")
    count = 3 if side_count < 3 else side_count * 2
    factor = min(max(factor, 0.0), 1.0)
    sin, cos = (math.sin, math.cos) if precise else (fast_sin, fast_cos)

    rw = rect.width * 0.5
    rh = rect.height * 0.5
    cx = rect.x + rect.width / 2
    cy = rect.y + rect.height / 2
    diff = 2 * math.pi / count

    vertices = []
    for i in range(count):
        angle = math.pi / 2 + i * diff
        scale = 1.0 if i & 1 else factor
        vertices.append(Point(cx + scale * rw * cos(angle), cy + scale * rh * sin(angle)))
    return vertices