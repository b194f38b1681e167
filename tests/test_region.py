# -*- coding: utf-8 -*-
"""
Region Node Tests.

Tests for incremental feature accumulation (area, bounds, moments),
merging, child ordering and pre-order traversal of ``Region``.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import pytest

from mserkit.region import BoundingBox, Point, Region, _link


def _region(level, *pixels):
    region = Region(level, Point(*pixels[0]) if pixels else None)
    for x, y in pixels:
        region._accumulate(x, y)
    return region


class TestBoundingBox:

    def test_size(self):
        b = BoundingBox(1, 2, 4, 7)
        assert b.width == 3
        assert b.height == 5

    def test_contains(self):
        outer = BoundingBox(0, 0, 4, 4)
        assert outer.contains(BoundingBox(1, 1, 3, 3))
        assert outer.contains(outer)
        assert not outer.contains(BoundingBox(1, 1, 5, 3))
        assert not BoundingBox(1, 1, 3, 3).contains(outer)


class TestEmptyRegion:

    def test_defaults(self):
        region = Region(7)
        assert region.level == 7
        assert region.area == 0
        assert region.point is None
        assert region.bounds is None
        assert region.centroid is None
        assert region.central_moments == (0.0, 0.0, 0.0)
        assert region.variation == 0.0
        assert region.stable is False
        assert region.parent is None
        assert region.children == []


class TestAccumulate:

    def test_single_pixel(self):
        region = _region(3, (4, 5))
        assert region.area == 1
        assert region.bounds == BoundingBox(4, 5, 5, 6)
        assert region.point == Point(4, 5)
        assert region.raw_moments == (4, 5)
        assert region.centroid == (4.0, 5.0)

    def test_bounds_grow_in_every_direction(self):
        region = _region(3, (2, 2), (0, 2), (2, 0), (3, 4))
        assert region.bounds == BoundingBox(0, 0, 4, 5)
        assert region.area == 4

    def test_moments(self):
        region = _region(1, (0, 0), (2, 0))
        assert region.raw_moments == (2, 0)
        mu20, mu11, mu02 = region.central_moments
        assert mu20 == pytest.approx(2.0)
        assert mu11 == pytest.approx(0.0)
        assert mu02 == pytest.approx(0.0)

    def test_diagonal_covariance(self):
        region = _region(1, (0, 0), (1, 1), (2, 2))
        mu20, mu11, mu02 = region.central_moments
        assert mu20 == pytest.approx(2.0)
        assert mu11 == pytest.approx(2.0)
        assert mu02 == pytest.approx(2.0)


class TestMerge:

    def test_merge_combines_features(self):
        a = _region(1, (0, 0))
        b = _region(1, (3, 2), (3, 3))
        parent = _region(4, (1, 1))
        parent._merge(a)
        parent._merge(b)
        assert parent.area == 4
        assert parent.bounds == BoundingBox(0, 0, 4, 4)
        assert parent.raw_moments == (7, 6)
        assert a.parent is parent
        assert b.parent is parent

    def test_merge_into_empty_region(self):
        child = _region(1, (5, 6), (6, 6))
        parent = Region(2, Point(5, 6))
        parent._merge(child)
        assert parent.area == 2
        assert parent.bounds == BoundingBox(5, 6, 7, 7)

    def test_merge_prepends_child(self):
        parent = Region(9)
        first = _region(1, (0, 0))
        second = _region(2, (1, 0))
        parent._merge(first)
        parent._merge(second)
        assert parent.children == [second, first]

    def test_children_list_is_fresh(self):
        parent = Region(9)
        parent._merge(_region(1, (0, 0)))
        listing = parent.children
        listing.clear()
        assert len(parent.children) == 1


class TestLinkAndWalk:

    def test_link_sets_order_and_parents(self):
        parent = Region(9)
        kids = [Region(1), Region(2), Region(3)]
        _link(parent, kids)
        assert parent.children == kids
        assert all(k.parent is parent for k in kids)

    def test_link_replaces_children(self):
        parent = Region(9)
        _link(parent, [Region(1), Region(2)])
        replacement = Region(5)
        _link(parent, [replacement])
        assert parent.children == [replacement]

    def test_link_empty(self):
        parent = Region(9)
        _link(parent, [Region(1)])
        _link(parent, [])
        assert parent.children == []

    def test_walk_pre_order(self):
        root, a, b, a1, a2 = (Region(level) for level in (9, 5, 6, 1, 2))
        _link(root, [a, b])
        _link(a, [a1, a2])
        assert list(root.walk()) == [root, a, a1, a2, b]

    def test_repr(self):
        assert 'level=3' in repr(_region(3, (0, 0)))
