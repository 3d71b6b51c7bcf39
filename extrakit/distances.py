"""Distances between points."""

from __future__ import annotations

import math

from extrakit.geometry import Point


def euclid_distance(p1: Point, p2: Point) -> float:
    """Straight-line distance: precise, but needs a square root."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return math.sqrt(dx * dx + dy * dy)


def manhattan_distance(p1: Point, p2: Point) -> float:
    """Sum of the axis distances: cheap, but only an estimate of the straight line."""
    return abs(p1.x - p2.x) + abs(p1.y - p2.y)