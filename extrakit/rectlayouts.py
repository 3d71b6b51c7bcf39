"""Laying out rectangles in grids and in horizontal or vertical boxes."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from extrakit.alignment import aligned_rect
from extrakit.geometry import Alignment, Number, Rect, RectF, Size

_log = logging.getLogger(__name__)


def _div(a: Number, b: Number, real: bool) -> Number:
    """Divide; integer operands truncate toward zero unless *real* is set."""
    if real or not (isinstance(a, int) and isinstance(b, int)):
        return a / b
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Orientation(enum.Enum):
    """Direction in which a box layout stacks its items."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class BoxOptions:
    """Spacing, item alignment and direction of a box layout."""

    spacing: int = 0
    align: Alignment = Alignment.CENTER
    orientation: Orientation = Orientation.HORIZONTAL


def grid_bounding_size(rows: int, cols: int, item_size: Size) -> Size:
    """Return the size of a grid of *rows* by *cols* items of *item_size*."""
    return Size(cols * item_size.width, rows * item_size.height)


def max_grid_size(frame_size: Size, item_size: Size) -> tuple[int, int]:
    """Return how many ``(rows, cols)`` of *item_size* fit inside *frame_size*.

    A non-positive item dimension is replaced by the frame's dimension.
    """
    w = item_size.width
    h = item_size.height
    if w <= 0:
        w = frame_size.width
    if h <= 0:
        h = frame_size.height
    if w == 0 or h == 0:
        raise ValueError("item and frame sizes are both empty")
    rows = math.floor(_div(frame_size.height, h, False))
    cols = math.floor(_div(frame_size.width, w, False))
    return int(rows), int(cols)


def min_grid_size(frame_size: Size, item_size: Size, item_count: int) -> tuple[int, int]:
    """Return the smallest ``(rows, cols)`` grid that holds *item_count* items.

    All row and column counts below the maximum are tried; the grid must fit
    strictly inside the frame. If none qualifies, the maximal grid is returned.
    """
    max_rows, max_cols = max_grid_size(frame_size, item_size)
    rows, cols = max_rows, max_cols
    min_diff = item_count
    for i in range(1, max_rows):
        for j in range(1, max_cols):
            k = i * j
            d = k - item_count
            s = grid_bounding_size(i, j, item_size)
            fits = s.width < frame_size.width and s.height < frame_size.height
            if fits and k >= item_count and d <= min_diff:
                min_diff = d
                rows, cols = i, j
                if min_diff == 0:
                    return rows, cols
    return rows, cols


def grid_layout(source: Rect, rows: int, cols: int, k: int | None = None) -> list[Rect]:
    """Split *source* into a grid of equal cells, row by row.

    At most *k* cells are returned (all of them when *k* is None).
    """
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    total = rows * cols
    n = total if k is None else min(total, k)
    real = isinstance(source, RectF)
    rect_type = type(source)
    w = _div(source.width, cols, real)
    h = _div(source.height, rows, real)
    cells = (
        rect_type(source.x + c * w, source.y + r * h, w, h)
        for r in range(rows)
        for c in range(cols)
    )
    return [cell for _, cell in zip(range(max(n, 0)), cells)]


def box_bounding_rect(options: BoxOptions, rects: Iterable[Rect]) -> Rect:
    """Return the zero-based bounding rectangle of *rects* stacked per *options*."""
    items = list(rects)
    if not items:
        return Rect(0, 0, 0, 0)
    sp = max(0, options.spacing)
    n = len(items)
    if options.orientation is Orientation.VERTICAL:
        h = sum(r.height for r in items) + sp * (n - 1)
        w = max(0, *(r.width for r in items))
    else:
        w = sum(r.width for r in items) + sp * (n - 1)
        h = max(0, *(r.height for r in items))
    return type(items[0])(0, 0, w, h)


def box_bounding_size(options: BoxOptions, n: int, item_size: Size) -> Size:
    """Return the size of *n* items of *item_size* stacked per *options*.

    Gives the invalid size ``(-1, -1)`` for no items or an invalid item size.
    """
    if n < 1 or not item_size.is_valid():
        return Size(-1, -1)
    sp = max(0, options.spacing)
    if options.orientation is Orientation.VERTICAL:
        return Size(item_size.width, n * item_size.height + sp * (n - 1))
    return Size(n * item_size.width + sp * (n - 1), item_size.height)


def box_layout(
    frame: Rect, options: BoxOptions, rects: Iterable[Rect]
) -> tuple[Rect, list[Rect]]:
    """Place *rects* one after another inside *frame*.

    Each item gets a slot as long as itself along the orientation and as wide
    as the frame across it, and is aligned in that slot. Returns the bounding
    rectangle of the layout and the placed rectangles.
    """
    items = list(rects)
    rect_type = type(frame)
    if not items:
        return rect_type(0, 0, 0, 0), []
    if not frame.is_valid():
        _log.warning("unable to layout: frame rect is not valid")
        return rect_type(0, 0, 0, 0), []

    sp = max(0, options.spacing)
    x, y = frame.x, frame.y
    w, h = frame.width, frame.height
    placed: list[Rect] = []
    if options.orientation is Orientation.VERTICAL:
        h = 0
        for item in items:
            slot = rect_type(x, y, w, item.height)
            placed.append(aligned_rect(item, slot, options.align))
            h += item.height
            y += item.height + sp
        h += sp * (len(items) - 1)
    else:
        w = 0
        for item in items:
            slot = rect_type(x, y, item.width, h)
            placed.append(aligned_rect(item, slot, options.align))
            w += item.width
            x += item.width + sp
        w += sp * (len(items) - 1)
    return rect_type(frame.x, frame.y, w, h), placed


def box_arrange(frame: Rect, options: BoxOptions, n: int) -> list[Rect]:
    """Divide *frame* into *n* slots stacked per *options*."""
    if n < 1:
        return []
    if not frame.is_valid():
        _log.warning("unable to arrange rects: frame is not valid")
        return []

    real = isinstance(frame, RectF)
    rect_type = type(frame)
    sp_count = n - 1
    sp: Number = float(max(0, options.spacing)) if real else max(0, options.spacing)
    x, y = frame.x, frame.y
    result: list[Rect] = []
    if options.orientation is Orientation.VERTICAL:
        ih = _div(frame.height, n, real)
        if n > 1:
            ih -= _div(sp, sp_count, real) - 1
        for _ in range(n):
            result.append(rect_type(x, y, frame.width, ih))
            y += ih + sp
    else:
        iw = _div(frame.width, n, real)
        if n > 1:
            iw -= _div(sp, sp_count, real) - 1
        for _ in range(n):
            result.append(rect_type(x, y, iw, frame.height))
            x += iw + sp
    return result