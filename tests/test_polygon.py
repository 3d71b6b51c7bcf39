import math

import pytest
from hypothesis import given, strategies as st

from extrakit.distances import euclid_distance
from extrakit.geometry import Point, Rect, RectF
from extrakit.polygon import (
    Path,
    PathElement,
    PolygonRounder,
    fast_cos,
    fast_sin,
    star_polygon,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
MOVE, LINE, QUAD = PathElement.Kind.MOVE, PathElement.Kind.LINE, PathElement.Kind.QUAD


def plain(points):
    path = Path()
    path.add_polygon(points)
    return path


def test_add_polygon_records_move_then_lines():
    path = plain(SQUARE)
    assert [e.kind for e in path] == [MOVE, LINE, LINE, LINE]
    assert [e.end for e in path] == SQUARE


def test_add_polygon_of_nothing_adds_nothing():
    assert len(plain([])) == 0


def test_round_with_too_few_points_copies_polygon():
    assert PolygonRounder().round(SQUARE[:2], 3.0) == plain(SQUARE[:2])


def test_round_zero_radius_passes_through_vertices():
    path = PolygonRounder().round(SQUARE, 0.0)
    assert path.elements[0] == PathElement(MOVE, (SQUARE[0],))
    controls = [e.points[0] for e in path if e.kind is QUAD]
    assert controls == SQUARE[1:] + SQUARE[:1]


def test_negative_radius_acts_as_zero():
    rounder = PolygonRounder()
    assert rounder.round(SQUARE, -4.0) == rounder.round(SQUARE, 0.0)


def test_large_radius_starts_at_edge_midpoint():
    path = PolygonRounder(euclid_distance).round(SQUARE, 100.0)
    assert path.elements[0].end == Point(5.0, 0.0)


@given(st.floats(0, 30, allow_nan=False))
def test_rounded_path_is_closed(radius):
    path = PolygonRounder().round(SQUARE, radius)
    assert path.elements[0].kind is MOVE
    assert path.elements[-1].kind is QUAD
    assert path.elements[-1].end == path.elements[0].end


@given(st.floats(0.5, 30, allow_nan=False))
def test_uniform_radii_match_single_radius(radius):
    rounder = PolygonRounder()
    assert rounder.round_corners(SQUARE, [radius] * 4) == rounder.round(SQUARE, radius)


def test_rect_rounding_matches_corner_rounding():
    rounder = PolygonRounder()
    rect = Rect(0, 0, 10, 10)
    assert rounder.round(rect, 2.0) == rounder.round_corners(rect, [2.0] * 4)
    assert rounder.round(rect, 2.0) == rounder.round(SQUARE, 2.0)


def test_zero_radii_give_plain_polygon():
    assert PolygonRounder().round_corners(SQUARE, [0.0, 0.0, 0.0, 0.0]) == plain(SQUARE)


def test_no_radii_give_plain_polygon():
    assert PolygonRounder().round_corners(SQUARE, []) == plain(SQUARE)


def test_rect_with_too_many_radii_raises():
    with pytest.raises(ValueError):
        PolygonRounder().round_corners(RectF(0, 0, 5, 5), [1.0] * 5)


def test_missing_radii_leave_corners_sharp():
    path = PolygonRounder().round_corners(SQUARE, [3.0])
    assert PathElement(LINE, (SQUARE[2],)) in path.elements


def test_closing_vertex_is_ignored():
    rounder = PolygonRounder()
    radii = [2.0, 1.0, 3.0, 2.0]
    assert rounder.round_corners(SQUARE + [SQUARE[0]], radii) == rounder.round_corners(SQUARE, radii)


def test_star_vertex_count():
    sides = 5
    assert len(star_polygon(sides, 0.5, RectF(0, 0, 10, 10))) == 2 * sides
    assert len(star_polygon(2, 0.5, RectF(0, 0, 10, 10))) == 3


def test_star_negative_side_count_raises():
    with pytest.raises(ValueError):
        star_polygon(-1, 0.5, RectF(0, 0, 10, 10))


@given(st.integers(3, 12), st.floats(0, 1, allow_nan=False))
def test_star_vertices_lie_on_two_circles(sides, factor):
    rect = RectF(-4.0, 2.0, 20.0, 20.0)
    center = rect.center()
    for i, vertex in enumerate(star_polygon(sides, factor, rect)):
        expected = rect.width / 2 if i % 2 else factor * rect.width / 2
        assert euclid_distance(vertex, center) == pytest.approx(expected, abs=1e-9)


def test_star_factor_is_clamped():
    rect = RectF(0, 0, 10, 10)
    assert star_polygon(5, 3.0, rect) == star_polygon(5, 1.0, rect)
    assert star_polygon(5, -1.0, rect) == star_polygon(5, 0.0, rect)


@given(st.integers(3, 12), st.floats(0, 1, allow_nan=False))
def test_fast_star_is_close_to_precise(sides, factor):
    rect = RectF(0, 0, 10, 10)
    fast = star_polygon(sides, factor, rect, precise=False)
    exact = star_polygon(sides, factor, rect, precise=True)
    for a, b in zip(fast, exact):
        assert a.x == pytest.approx(b.x, abs=1e-3)
        assert a.y == pytest.approx(b.y, abs=1e-3)


def test_fast_trig_at_zero():
    assert fast_sin(0.0) == 0.0
    assert fast_cos(0.0) == 1.0


@given(st.floats(-20, 20, allow_nan=False))
def test_fast_trig_approximates_math(angle):
    assert fast_sin(angle) == pytest.approx(math.sin(angle), abs=1e-4)
    assert fast_cos(angle) == pytest.approx(math.cos(angle), abs=1e-4)