"""Containers, caches and 2D geometry helpers: LRU caches, flat maps, index ranges,
rectangle alignment, box and grid layouts, rounded polygons and star shapes."""

__version__ = "1.0.0"