# extrakit

A small library of general-purpose containers and 2D geometry helpers. It has no runtime dependencies.

## Containers

- `extrakit.lrucache.LRUCache` is a mapping with a capacity. `capacity=0` means it has no limit. New entries go to the front. `move_front(key)` moves an existing entry to the front.
  - Eviction is lazy. Entries are dropped from the back just before each new insertion, so between insertions the cache can hold one entry more than its capacity.
  - `shrink()` trims the cache to its capacity immediately.
  - `resize(n)` changes the capacity and trims the cache.
  - With a `default_factory`, `cache[key]` creates missing entries. Without one, a missing key raises `KeyError`.
- `extrakit.cacheline.CacheLine` is a small keyed sequence with an optional capacity. New keys go to the front, and the back entry is dropped when the capacity is exceeded. `erase` moves the last entry into the freed slot.
- `extrakit.cachemap.CacheMap` is a two-level cache. Values are stored under a primary key and a secondary "hint".
  - `size` limits the number of primary keys (an `LRUCache`).
  - `depth` limits the hints kept per key (a `CacheLine`).
  - `0` means unlimited for either limit.
  - `find_if` looks a value up by a predicate on the hint.
- `extrakit.flatmap.FlatMap` is an insertion-ordered map searched linearly. It holds at most 256 entries (`MAX_SIZE`). Inserting beyond that raises `OverflowError`.
  - `merge(other)` adds only the keys that are not already present.
  - `move_front(key)` swaps the entry with the first one.
- `extrakit.indexrange.IndexRange` is an `offset`/`length` pair covering positions `offset` up to, but not including, `offset + length`. It provides:
  - `contains` and `in`
  - `intersects`
  - `touches`
  - `+=` and `-=`, which shift the offset

```python
from extrakit.lrucache import LRUCache
from extrakit.cachemap import CacheMap

cache = LRUCache(capacity=2)
cache.emplace("a", 1)
cache.emplace("b", 2)
cache.emplace("c", 3)   # no eviction yet: 3 entries
cache.shrink()          # evicts "a", the back entry
assert "a" not in cache and len(cache) == 2

thumbs = CacheMap(size=100, depth=4)
thumbs.insert("photo.png", (64, 64), b"...")
assert thumbs.get("photo.png", (64, 64)) == b"..."
assert thumbs.find_if(lambda hint: hint[0] <= 64, "photo.png") == b"..."
```

## Algorithms

`extrakit.algorithms` provides three functions:

- `contains(container, value)` tests membership. Mappings and sets are checked by key.
- `split_runs(items, pred)` yields the non-empty runs of items between the elements that match `pred`.
- `filter_reduce(items, pred, action)` calls `action(run)` for each such run and returns `action`.

```python
from extrakit.algorithms import split_runs

list(split_runs("ab,,cd,", lambda c: c == ","))  # [['a', 'b'], ['c', 'd']]
```

## Geometry

`extrakit.geometry` provides these value types:

- `Point`, `Size` and `Margins`.
- `Rect`: an integer rectangle whose `right()` is `x + width - 1`.
- `RectF`: a real-valued rectangle whose `right()` is `x + width`.

It also provides the `Alignment` flags, `AspectRatioMode`, `RectFitPolicy` and `AdjustOption`, and these helpers:

- `max_side` and `min_side`
- `horizontal_margins` and `vertical_margins`
- `margins_size`
- `clamped_size`

`extrakit.alignment` provides these functions:

- `aligned_rect(source, bounds, alignment)` places `source` inside `bounds`. It crops `source` to `bounds`, and returns `bounds` if `source` is larger in both dimensions. No alignment means top-left.
- `adjusted_rect(source, bounds, option)` fits a rectangle using the mode, policy and alignment of an `AdjustOption`.
- `quadrant(center, pos)` returns the alignment flags of `pos` relative to `center`.

```python
from extrakit.geometry import Rect, Alignment
from extrakit.alignment import aligned_rect

aligned_rect(Rect(0, 0, 10, 10), Rect(0, 0, 100, 100), Alignment.CENTER)
# Rect(x=45, y=45, width=10, height=10)
```

`extrakit.distances` provides `euclid_distance` and `manhattan_distance`.

`extrakit.polygon` provides the following:

- `PolygonRounder(distance)`:
  - `round(shape, radius)` turns a polygon or rectangle into a `Path` whose corners are rounded by quadratic curves.
  - `round_corners(shape, radii)` does the same with a separate radius for each corner. A rectangle takes at most 4 radii.
- `star_polygon(side_count, factor, rect, precise)` returns the vertices of a star inscribed in a rectangle. With `precise=False` it uses the table-based `fast_sin` and `fast_cos`.

`extrakit.rectlayouts` provides two kinds of layout:

- Grids:
  - `grid_layout`
  - `grid_bounding_size`
  - `max_grid_size`
  - `min_grid_size`
- Boxes, configured with `BoxOptions` (spacing, alignment, `Orientation`):
  - `box_layout`
  - `box_arrange`
  - `box_bounding_rect`
  - `box_bounding_size`

When the frame is invalid, `box_layout` and `box_arrange` log a warning and return empty results.

## What it does not do

The package only computes things; it draws nothing. A `Path` is a list of move, line and quadratic-curve elements (`PathElement`) for you to render with a graphics library of your choice. It has no widgets, windows, event handling or animation.

## Running the tests

```
pip install -e ".[test]"
pytest
```