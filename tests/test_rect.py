import itertools

import pytest

from abyss.dungeon.rect import Point, Rect


def test_new_sets_far_corner_from_size():
    r = Rect.new(3, 4, 10, 12)
    assert (r.x1, r.y1, r.x2, r.y2) == (3, 4, 13, 16)
    assert r.width == 10
    assert r.height == 12


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 5), (5, -3)])
def test_new_rejects_non_positive_size(w, h):
    with pytest.raises(ValueError):
        Rect.new(0, 0, w, h)


def test_center_uses_floor_division():
    assert Rect.new(0, 0, 5, 5).center() == Point(2, 2)
    assert Rect.new(10, 20, 11, 13).center() == Point(15, 26)
    # Point unpacks like a tuple
    x, y = Rect.new(0, 0, 4, 4).center()
    assert (x, y) == (2, 2)


def test_shared_edge_counts_as_intersection():
    a = Rect.new(0, 0, 5, 5)
    b = Rect.new(5, 0, 5, 5)
    assert a.does_intersect(b)
    assert b.does_intersect(a)


def test_separated_rects_do_not_intersect():
    a = Rect.new(0, 0, 5, 5)
    assert not a.does_intersect(Rect.new(6, 0, 5, 5))
    assert not a.does_intersect(Rect.new(0, 6, 5, 5))
    # Overlapping on one axis only is not enough
    assert not a.does_intersect(Rect.new(2, 10, 2, 2))


def test_contained_rect_intersects():
    assert Rect.new(0, 0, 20, 20).does_intersect(Rect.new(5, 5, 2, 2))


def test_intersection_is_symmetric():
    rects = [Rect.new(x, y, w, h) for x, y, w, h in itertools.product((0, 3, 9), (0, 4), (2, 6), (3, 5))]
    for a, b in itertools.product(rects, repeat=2):
        assert a.does_intersect(b) == b.does_intersect(a)


def test_interior_skips_top_and_left_border():
    r = Rect.new(2, 3, 3, 2)
    cells = list(r.interior())
    assert cells == [Point(3, 4), Point(4, 4), Point(5, 4), Point(3, 5), Point(4, 5), Point(5, 5)]
    assert len(cells) == r.width * r.height


def test_rect_is_immutable():
    r = Rect.new(0, 0, 2, 2)
    with pytest.raises(AttributeError):
        r.x1 = 5  # type: ignore[misc]
