# -*- coding: utf-8 -*-
"""
Region Tree - Extremal region nodes and their read accessors.

Defines ``Region``, the node type shared by the extremal region (ER)
component tree and the MSER forest extracted from it, together with the
``Point`` and ``BoundingBox`` named tuples used for its geometry.

Regions are linked intrusively: ``parent`` is a back reference, ``child``
is the head of the ordered list of children and ``next`` is the next
sibling. The tree builder and the two analysis passes mutate these links
in place; callers only read regions through the properties below.

Coordinate Conventions
----------------------
- ``x`` is the column and ``y`` the row, both in absolute grid
  coordinates (the grid's origin offset is included).
- ``BoundingBox`` maxima are exclusive, so a single pixel at ``(x, y)``
  has bounds ``(x, y, x + 1, y + 1)``.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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

# Standard library
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple


class Point(NamedTuple):
    """Pixel location in absolute grid coordinates."""

    x: int
    y: int


class BoundingBox(NamedTuple):
    """Axis-aligned pixel rectangle.

    Attributes
    ----------
    x_min : int
        First column (inclusive).
    y_min : int
        First row (inclusive).
    x_max : int
        Last column (exclusive).
    y_max : int
        Last row (exclusive).
    """

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.y_max - self.y_min

    def contains(self, other: 'BoundingBox') -> bool:
        """Whether *other* lies entirely inside this box."""
        return (
            self.x_min <= other.x_min and self.y_min <= other.y_min
            and other.x_max <= self.x_max and other.y_max <= self.y_max
        )


class Region:
    """
    A node of the extremal region tree.

    An extremal region at ``level`` is a maximal 4-connected set of
    pixels whose intensities are all ``<= level``. Area, bounding box and
    coordinate moments are accumulated incrementally while the tree is
    built and are never recomputed from pixel data.

    ``variation`` and ``stable`` are meaningful only after
    :func:`mserkit.stability.evaluate_stability` has run.

    Parameters
    ----------
    level : int
        Threshold at which the region is sealed.
    point : Point, optional
        Seed pixel known to belong to the region.
    """

    __slots__ = (
        '_level', '_point', '_area',
        '_x_min', '_y_min', '_x_max', '_y_max',
        '_sum_x', '_sum_y', '_sum_xx', '_sum_xy', '_sum_yy',
        '_variation', '_stable',
        '_parent', '_child', '_next',
    )

    def __init__(self, level: int, point: Optional[Point] = None) -> None:
        self._level = level
        self._point = point
        self._area = 0
        self._x_min = self._y_min = self._x_max = self._y_max = 0
        self._sum_x = self._sum_y = 0
        self._sum_xx = self._sum_xy = self._sum_yy = 0
        self._variation = 0.0
        self._stable = False
        self._parent: Optional['Region'] = None
        self._child: Optional['Region'] = None
        self._next: Optional['Region'] = None

    # -----------------------------------------------------------------
    # Read accessors
    # -----------------------------------------------------------------
    @property
    def level(self) -> int:
        """Threshold level of the region."""
        return self._level

    @property
    def area(self) -> int:
        """Number of pixels in the region."""
        return self._area

    @property
    def point(self) -> Optional[Point]:
        """A pixel that belongs to the region."""
        return self._point

    @property
    def bounds(self) -> Optional[BoundingBox]:
        """Bounding box of all pixels, or ``None`` for an empty region."""
        if self._area == 0:
            return None
        return BoundingBox(self._x_min, self._y_min, self._x_max, self._y_max)

    @property
    def variation(self) -> float:
        """Relative area growth over the ``delta`` level window."""
        return self._variation

    @property
    def stable(self) -> bool:
        """Whether the region was selected as maximally stable."""
        return self._stable

    @property
    def parent(self) -> Optional['Region']:
        return self._parent

    @property
    def children(self) -> List['Region']:
        """Children in sibling-list order.

        The list is built on each call; sibling order follows the merge
        order of the builder and carries no spatial meaning.
        """
        children = []
        child = self._child
        while child is not None:
            children.append(child)
            child = child._next
        return children

    @property
    def raw_moments(self) -> Tuple[int, int]:
        """First-order coordinate sums ``(sum(x), sum(y))``."""
        return (self._sum_x, self._sum_y)

    @property
    def central_moments(self) -> Tuple[float, float, float]:
        """Second-order central moments ``(mu20, mu11, mu02)``.

        Derived from the accumulated raw sums; all zero for an empty
        region.
        """
        if self._area == 0:
            return (0.0, 0.0, 0.0)
        mean_x = self._sum_x / self._area
        mean_y = self._sum_y / self._area
        return (
            self._sum_xx - mean_x * self._sum_x,
            self._sum_xy - mean_x * self._sum_y,
            self._sum_yy - mean_y * self._sum_y,
        )

    @property
    def centroid(self) -> Optional[Tuple[float, float]]:
        """Mean pixel position ``(x, y)``, or ``None`` for an empty region."""
        if self._area == 0:
            return None
        return (self._sum_x / self._area, self._sum_y / self._area)

    def walk(self) -> Iterator['Region']:
        """Yield this region and all of its descendants in pre-order."""
        pending = [self]
        while pending:
            region = pending.pop()
            yield region
            pending.extend(reversed(region.children))

    def __repr__(self) -> str:
        return (
            f"Region(level={self._level!r}, area={self._area!r}, "
            f"point={self._point!r}, bounds={self.bounds!r})"
        )

    # -----------------------------------------------------------------
    # Internal mutation (builder and analysis passes only)
    # -----------------------------------------------------------------
    def _accumulate(self, x: int, y: int) -> None:
        """Add a single pixel to the region."""
        if self._area == 0:
            self._x_min, self._y_min = x, y
            self._x_max, self._y_max = x + 1, y + 1
        else:
            if x < self._x_min:
                self._x_min = x
            elif x >= self._x_max:
                self._x_max = x + 1
            if y < self._y_min:
                self._y_min = y
            elif y >= self._y_max:
                self._y_max = y + 1
        self._area += 1
        self._sum_x += x
        self._sum_y += y
        self._sum_xx += x * x
        self._sum_xy += x * y
        self._sum_yy += y * y

    def _merge(self, child: 'Region') -> None:
        """Absorb *child* and splice it in as the first child."""
        if child._area:
            if self._area == 0:
                self._x_min, self._y_min = child._x_min, child._y_min
                self._x_max, self._y_max = child._x_max, child._y_max
            else:
                self._x_min = min(self._x_min, child._x_min)
                self._y_min = min(self._y_min, child._y_min)
                self._x_max = max(self._x_max, child._x_max)
                self._y_max = max(self._y_max, child._y_max)
        self._area += child._area
        self._sum_x += child._sum_x
        self._sum_y += child._sum_y
        self._sum_xx += child._sum_xx
        self._sum_xy += child._sum_xy
        self._sum_yy += child._sum_yy

        child._parent = self
        child._next = self._child
        self._child = child


def _link(parent: Region, children: Sequence[Region]) -> None:
    """Make *children* the complete ordered child list of *parent*.

    Replaces any previous children. Only the links change; area and the
    other accumulated features are left as they are.
    """
    parent._child = children[0] if children else None
    for i, child in enumerate(children):
        child._parent = parent
        child._next = children[i + 1] if i + 1 < len(children) else None
