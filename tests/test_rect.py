import pytest

from nothingkit.rect import (
    Line,
    Rect,
    RectSide,
    horizontal_thicc_line,
    rect_boundary2,
    rect_from_points,
    rect_from_vecs,
    rect_impulse,
    rect_object_impact,
    rect_snap,
    rects_overlap,
    rects_overlap_area,
    vertical_thicc_line,
)
from nothingkit.vec import Vec

_SIDES = (RectSide.LEFT, RectSide.RIGHT, RectSide.TOP, RectSide.BOTTOM)


def test_rect_from_vecs_keeps_fields():
    r = rect_from_vecs(Vec(1.0, 2.0), Vec(3.0, 4.0))
    assert r == Rect(1.0, 2.0, 3.0, 4.0)
    assert r.position() == Vec(1.0, 2.0)


def test_rect_from_points_is_order_independent():
    p1 = Vec(5.0, -1.0)
    p2 = Vec(-2.0, 8.0)
    r = rect_from_points(p1, p2)
    assert r == rect_from_points(p2, p1)
    assert r.contains_point(p1)
    assert r.contains_point(p2)


def test_overlap_area_with_self():
    r = Rect(1.0, 2.0, 30.0, 40.0)
    assert rects_overlap_area(r, r) == r


def test_disjoint_rects():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(20.0, 20.0, 5.0, 5.0)
    assert not rects_overlap(a, b)
    area = rects_overlap_area(a, b)
    assert area.w == 0.0 and area.h == 0.0


def test_overlap_is_symmetric():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    assert rects_overlap(a, b)
    assert rects_overlap(b, a)
    assert rects_overlap_area(a, b) == rects_overlap_area(b, a)


def test_touching_rects_do_not_overlap():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 10.0, 10.0)
    assert not rects_overlap(a, b)


def test_boundary_contains_both():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(-5.0, 20.0, 3.0, 4.0)
    bound = rect_boundary2(a, b)
    for r in (a, b):
        assert bound.contains_point(r.position())
        assert bound.contains_point(Vec(r.x + r.w, r.y + r.h))


def test_grow_round_trip_and_center():
    r = Rect(3.0, 4.0, 10.0, 6.0)
    assert r.grow(2.0).grow(-2.0) == r
    assert r.grow(2.0).center() == r.center()
    assert r.contains_point(r.center())


def test_sides():
    r = Rect(1.0, 2.0, 10.0, 20.0)
    left = r.side(RectSide.LEFT)
    assert left.p1.x == left.p2.x == r.x
    assert left.length() == r.h
    bottom = r.side(RectSide.BOTTOM)
    assert bottom.p1.y == bottom.p2.y == r.y + r.h
    assert bottom.length() == r.w


def test_line_length_symmetric():
    line = Line(Vec(1.0, 7.0), Vec(-3.0, 2.0))
    assert line.length() == Line(line.p2, line.p1).length()


def test_rounded_half_away_from_zero():
    assert Rect(2.5, -2.5, 4.0, 7.0).rounded() == (3, -3, 4, 7)


def test_object_impact_bottom():
    obj = Rect(0.0, 0.0, 100.0, 100.0)
    obstacle = Rect(0.0, 90.0, 100.0, 100.0)
    impact = rect_object_impact(obj, obstacle)
    assert [bool(impact[side]) for side in _SIDES] == [False, False, False, True]


def test_object_impact_without_overlap():
    obj = Rect(0.0, 0.0, 10.0, 10.0)
    obstacle = Rect(50.0, 50.0, 10.0, 10.0)
    impact = rect_object_impact(obj, obstacle)
    assert [bool(impact[side]) for side in _SIDES] == [False, False, False, False]


def test_rect_snap_pushes_out_horizontally():
    pivot = Rect(0.0, 0.0, 10.0, 10.0)
    r = Rect(8.0, 2.0, 10.0, 3.0)
    snapped, orient = rect_snap(pivot, r)
    assert not rects_overlap(pivot, snapped)
    assert snapped.x == pivot.x + pivot.w
    assert snapped.y == r.y
    assert orient == Vec(0.0, 1.0)


def test_rect_impulse_separates():
    r1 = Rect(0.0, 0.0, 10.0, 10.0)
    r2 = Rect(8.0, 1.0, 10.0, 10.0)
    new1, new2, orient = rect_impulse(r1, r2)
    assert not rects_overlap(new1, new2)
    assert new1.x + new1.w == new2.x
    assert (new1.y, new2.y) == (r1.y, r2.y)
    assert orient == Vec(0.0, 1.0)


def test_thicc_lines():
    a = horizontal_thicc_line(10.0, 2.0, 5.0, 4.0)
    assert a == horizontal_thicc_line(2.0, 10.0, 5.0, 4.0)
    assert a.h == 4.0
    assert a.center().y == 5.0
    b = vertical_thicc_line(9.0, 1.0, 3.0, 2.0)
    assert b == vertical_thicc_line(1.0, 9.0, 3.0, 2.0)
    assert b.w == 2.0
    assert b.center().x == 3.0


def test_side_rejects_unknown():
    with pytest.raises(ValueError):
        Rect(0.0, 0.0, 1.0, 1.0).side(7)