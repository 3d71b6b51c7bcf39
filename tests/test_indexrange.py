from hypothesis import given
from hypothesis import strategies as st

from extrakit.indexrange import IndexRange


def test_default_is_invalid_placeholder():
    r = IndexRange()
    assert (r.offset, r.length) == (-1, -1)
    assert r.contains(-1) is False


def test_contains_position_is_half_open():
    r = IndexRange(2, 3)
    assert r.contains(2) is True
    assert r.contains(4) is True
    assert r.contains(5) is False
    assert r.contains(1) is False
    assert 3 in r


def test_contains_range():
    outer = IndexRange(0, 10)
    assert outer.contains(IndexRange(2, 3)) is True
    assert outer.contains(IndexRange(8, 5)) is False


def test_intersects():
    r = IndexRange(0, 5)
    assert r.intersects(IndexRange(4, 3)) is True
    assert r.intersects(IndexRange(-2, 3)) is True
    assert r.intersects(IndexRange(5, 2)) is False


def test_touches_adjacent_ranges():
    left = IndexRange(0, 3)
    right = IndexRange(3, 4)
    assert left.touches(right) is True
    assert right.touches(left) is True
    assert left.touches(IndexRange(4, 1)) is False


def test_shift_operators_move_offset_only():
    r = IndexRange(5, 2)
    r += 3
    assert r == IndexRange(8, 2)
    r -= 8
    assert r == IndexRange(0, 2)


def test_equality():
    assert IndexRange(1, 4) == IndexRange(1, 4)
    assert IndexRange(1, 4) != IndexRange(1, 5)
    assert IndexRange(1, 4) != IndexRange(4, 1)


@given(st.integers(-50, 50), st.integers(1, 50), st.integers(-100, 100))
def test_shift_preserves_membership(offset, length, pos):
    r = IndexRange(offset, length)
    before = r.contains(pos)
    r += 7
    assert r.contains(pos + 7) == before
    assert r.contains(r)
    assert r.intersects(r)