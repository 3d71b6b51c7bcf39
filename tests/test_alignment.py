import pytest
from hypothesis import given, strategies as st

from extrakit.alignment import adjusted_rect, aligned_rect, quadrant
from extrakit.geometry import (
    AdjustOption,
    Alignment,
    AspectRatioMode,
    Point,
    Rect,
    RectF,
    RectFitPolicy,
)

ALIGNMENTS = [
    Alignment.LEFT | Alignment.TOP,
    Alignment.RIGHT | Alignment.BOTTOM,
    Alignment.CENTER,
    Alignment.HCENTER | Alignment.TOP,
    Alignment.LEFT | Alignment.VCENTER,
    Alignment.RIGHT,
    Alignment(0),
]


def test_top_left_moves_to_bounds_corner():
    result = aligned_rect(Rect(50, 60, 10, 20), Rect(5, 5, 100, 100), Alignment.LEFT | Alignment.TOP)
    assert result == Rect(5, 5, 10, 20)


def test_bottom_right_touches_bounds_edges():
    source, bounds = Rect(0, 0, 10, 20), Rect(3, 4, 100, 90)
    result = aligned_rect(source, bounds, Alignment.RIGHT | Alignment.BOTTOM)
    assert result.right() == bounds.right()
    assert result.bottom() == bounds.bottom()
    assert result.size() == source.size()


def test_no_alignment_means_top_left():
    source, bounds = Rect(40, 40, 10, 10), Rect(0, 0, 50, 50)
    assert aligned_rect(source, bounds, 0) == aligned_rect(source, bounds, Alignment.LEFT | Alignment.TOP)


def test_source_larger_in_both_dimensions_gives_bounds():
    bounds = Rect(1, 2, 10, 10)
    assert aligned_rect(Rect(0, 0, 20, 20), bounds, Alignment.CENTER) == bounds


def test_source_larger_in_one_dimension_is_cropped():
    bounds = Rect(0, 0, 100, 100)
    result = aligned_rect(Rect(0, 0, 200, 10), bounds, Alignment.LEFT | Alignment.TOP)
    assert result.width == bounds.width
    assert result.height == 10


def test_float_center_alignment_shares_center():
    bounds = RectF(0.0, 0.0, 10.0, 10.0)
    result = aligned_rect(RectF(7.0, 7.0, 2.0, 2.0), bounds, Alignment.CENTER)
    assert result.center() == bounds.center()


def test_adjusted_default_centers_small_source():
    source, bounds = RectF(0.0, 0.0, 4.0, 2.0), RectF(0.0, 0.0, 20.0, 20.0)
    result = adjusted_rect(source, bounds)
    assert result.size() == source.size()
    assert result.center() == bounds.center()


def test_adjusted_stretch_ignoring_ratio_gives_bounds():
    bounds = Rect(0, 0, 50, 50)
    option = AdjustOption(policy=RectFitPolicy.STRETCH_SOURCE)
    assert adjusted_rect(Rect(0, 0, 4, 4), bounds, option) == bounds


def test_adjusted_crop_with_both_sides_out_gives_bounds():
    bounds = Rect(0, 0, 50, 50)
    assert adjusted_rect(Rect(0, 0, 80, 90), bounds, AdjustOption()) == bounds


def test_adjusted_keep_ratio_stretch():
    source, bounds = RectF(0.0, 0.0, 20.0, 10.0), RectF(0.0, 0.0, 100.0, 100.0)
    option = AdjustOption(mode=AspectRatioMode.KEEP, policy=RectFitPolicy.STRETCH_SOURCE)
    result = adjusted_rect(source, bounds, option)
    assert result.width == bounds.width
    assert result.width / result.height == pytest.approx(source.width / source.height)
    assert result.center() == bounds.center()


def test_adjusted_keep_ratio_crop_leaves_fitting_source():
    source, bounds = RectF(0.0, 0.0, 20.0, 10.0), RectF(0.0, 0.0, 100.0, 100.0)
    result = adjusted_rect(source, bounds, AdjustOption(mode=AspectRatioMode.KEEP))
    assert result.size() == source.size()


def test_adjusted_expanding_stretch_is_cropped_to_bounds():
    bounds = RectF(0.0, 0.0, 100.0, 100.0)
    option = AdjustOption(mode=AspectRatioMode.KEEP_BY_EXPANDING, policy=RectFitPolicy.STRETCH_SOURCE)
    assert adjusted_rect(RectF(0.0, 0.0, 20.0, 10.0), bounds, option) == bounds


def test_quadrant():
    center = Point(0, 0)
    assert quadrant(center, center) == Alignment(0)
    assert quadrant(center, Point(3, 4)) == Alignment.RIGHT | Alignment.BOTTOM
    assert quadrant(center, Point(-3, -4)) == Alignment.LEFT | Alignment.TOP
    assert quadrant(center, Point(0, -1)) == Alignment.RIGHT | Alignment.TOP