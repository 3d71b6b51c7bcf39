"""Aligning and fitting rectangles inside bounds."""

from __future__ import annotations

from extrakit.geometry import (
    AdjustOption,
    Alignment,
    AspectRatioMode,
    Number,
    Point,
    Rect,
    RectF,
    RectFitPolicy,
)


def _half(value: Number, rect: Rect) -> Number:
    if isinstance(rect, RectF) or not isinstance(value, int):
        return value / 2
    return value // 2 if value >= 0 else -((-value) // 2)


def aligned_rect(source: Rect, bounds: Rect, alignment: Alignment | int) -> Rect:
    """Place *source* inside *bounds* according to *alignment*.

    The source is cropped to the bounds; if it is larger in both
    dimensions the bounds are returned. No alignment means top-left.
    """
    if source.width > bounds.width and source.height > bounds.height:
        return bounds

    result = source.with_size(source.size().bounded_to(bounds.size()))
    align = Alignment(alignment) if alignment else Alignment.LEFT | Alignment.TOP

    if align & Alignment.LEFT:
        result = result.moved_left(bounds.left())
    if align & Alignment.RIGHT:
        result = result.moved_right(bounds.right())
    if align & Alignment.TOP:
        result = result.moved_top(bounds.top())
    if align & Alignment.BOTTOM:
        result = result.moved_bottom(bounds.bottom())
    if align & Alignment.VCENTER:
        result = result.moved_top(
            bounds.top() + _half(bounds.height, bounds) - _half(result.height, result)
        )
    if align & Alignment.HCENTER:
        result = result.moved_left(
            bounds.left() + _half(bounds.width, bounds) - _half(result.width, result)
        )
    return result


def adjusted_rect(source: Rect, bounds: Rect, option: AdjustOption | None = None) -> Rect:
    """Fit *source* into *bounds* by the mode, policy and alignment of *option*."""
    option = option or AdjustOption()
    result = source

    width_out = source.width > bounds.width
    height_out = source.height > bounds.height
    stretch = option.policy is RectFitPolicy.STRETCH_SOURCE

    if option.mode is AspectRatioMode.IGNORE:
        if stretch or (width_out and height_out):
            return bounds
        result = result.with_size(result.size().bounded_to(bounds.size()))
    elif option.mode is AspectRatioMode.KEEP:
        if stretch or width_out or height_out:
            result = result.with_size(result.size().scaled(bounds.size(), AspectRatioMode.KEEP))
    elif option.mode is AspectRatioMode.KEEP_BY_EXPANDING:
        if stretch or (width_out and height_out):
            result = result.with_size(
                result.size().scaled(bounds.size(), AspectRatioMode.KEEP_BY_EXPANDING)
            )

    align = option.alignment or Alignment.CENTER
    return aligned_rect(result, bounds, align)


def quadrant(center: Point, pos: Point) -> Alignment:
    """Return the quadrant of *pos* around *center* as alignment flags.

    A position equal to the center gives no flags.
    """
    if pos == center:
        return Alignment(0)
    align = Alignment.RIGHT if pos.x >= center.x else Alignment.LEFT
    align |= Alignment.BOTTOM if pos.y >= center.y else Alignment.TOP
    return align