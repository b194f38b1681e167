# -*- coding: utf-8 -*-
"""
Intensity Grid - Read-only 8-bit raster view consumed by the tree builder.

Wraps a 2D integer NumPy array of intensity levels together with an origin
offset so that sub-rectangles of a larger raster can be processed in their
original coordinate frame. All pixel addressing is ``(x, y)`` = ``(col,
row)`` in absolute coordinates; the backing array is indexed
``[y - min_y, x - min_x]``.

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
from typing import Any, List, Tuple

# Third-party
import numpy as np

# MSERKit internal
from mserkit.exceptions import ValidationError
from mserkit.region import BoundingBox


class IntensityGrid:
    """Read-only grid of integer intensity levels with an origin offset.

    Parameters
    ----------
    data : array_like
        2D integer array, shape ``(rows, cols)``. Values must lie in
        ``[0, levels - 1]``. Boolean arrays are accepted as levels 0/1.
    origin : Tuple[int, int]
        Absolute ``(x, y)`` coordinate of ``data[0, 0]``. Default
        ``(0, 0)``.

    Raises
    ------
    ValidationError
        If *data* is not 2D, is not of integer dtype, or holds values
        outside the level range.

    Examples
    --------
    >>> grid = IntensityGrid(np.array([[1, 2, 2], [2, 1, 1]], dtype=np.uint8))
    >>> grid.width, grid.height
    (3, 2)
    >>> grid.at(2, 1)
    1

    A sub-view keeps absolute coordinates:

    >>> inner = grid.sub_grid(1, 0, 3, 2)
    >>> inner.min_x, inner.at(2, 1)
    (1, 1)
    """

    #: Number of representable levels (8-bit). The builder sizes its
    #: boundary buckets and the sentinel level from this value.
    LEVELS = 256

    def __init__(self, data: Any, origin: Tuple[int, int] = (0, 0)) -> None:
        array = np.asarray(data)
        if array.ndim != 2:
            raise ValidationError(
                f"Expected 2D intensity array, got shape {array.shape}"
            )
        if array.dtype == np.bool_:
            array = array.astype(np.uint8)
        elif not np.issubdtype(array.dtype, np.integer):
            raise ValidationError(
                f"Intensity array must have an integer dtype, "
                f"got {array.dtype}"
            )
        if array.size:
            low, high = int(array.min()), int(array.max())
            if low < 0 or high >= self.LEVELS:
                raise ValidationError(
                    f"Intensity levels must be in [0, {self.LEVELS - 1}], "
                    f"got range [{low}, {high}]"
                )

        view = array.view()
        view.flags.writeable = False
        self._data = view
        self._min_x = int(origin[0])
        self._min_y = int(origin[1])

    # -----------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def area(self) -> int:
        """Pixel count, ``width * height``."""
        return self._data.shape[0] * self._data.shape[1]

    @property
    def min_x(self) -> int:
        return self._min_x

    @property
    def min_y(self) -> int:
        return self._min_y

    @property
    def max_x(self) -> int:
        """One past the last column."""
        return self._min_x + self.width

    @property
    def max_y(self) -> int:
        """One past the last row."""
        return self._min_y + self.height

    @property
    def origin(self) -> Tuple[int, int]:
        return (self._min_x, self._min_y)

    @property
    def bounds(self) -> BoundingBox:
        return BoundingBox(self._min_x, self._min_y, self.max_x, self.max_y)

    @property
    def levels(self) -> int:
        return self.LEVELS

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the backing array, shape ``(height, width)``."""
        return self._data

    # -----------------------------------------------------------------
    # Pixel access
    # -----------------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies inside the grid."""
        return self._min_x <= x < self.max_x and self._min_y <= y < self.max_y

    def at(self, x: int, y: int) -> int:
        """Intensity level at absolute pixel ``(x, y)``.

        Raises
        ------
        IndexError
            If ``(x, y)`` is outside the grid.
        """
        if not self.contains(x, y):
            raise IndexError(
                f"Pixel ({x}, {y}) outside grid bounds {self.bounds}"
            )
        return int(self._data[y - self._min_y, x - self._min_x])

    def values(self) -> List[int]:
        """All levels as a flat row-major list of Python ints."""
        return self._data.ravel().tolist()

    # -----------------------------------------------------------------
    # Derived grids
    # -----------------------------------------------------------------
    def sub_grid(
        self, x_min: int, y_min: int, x_max: int, y_max: int,
    ) -> 'IntensityGrid':
        """View of the rectangle ``[x_min, x_max) x [y_min, y_max)``.

        Coordinates are absolute; the returned grid shares memory with
        this one and keeps ``(x_min, y_min)`` as its origin.

        Raises
        ------
        ValidationError
            If the rectangle is inverted or not inside this grid.
        """
        if x_min > x_max or y_min > y_max:
            raise ValidationError(
                f"Inverted rectangle ({x_min}, {y_min}, {x_max}, {y_max})"
            )
        if not self.bounds.contains(BoundingBox(x_min, y_min, x_max, y_max)):
            raise ValidationError(
                f"Rectangle ({x_min}, {y_min}, {x_max}, {y_max}) is not "
                f"inside grid bounds {tuple(self.bounds)}"
            )
        view = self._data[
            y_min - self._min_y:y_max - self._min_y,
            x_min - self._min_x:x_max - self._min_x,
        ]
        return IntensityGrid(view, origin=(x_min, y_min))

    def inverted(self) -> 'IntensityGrid':
        """Grid with every level ``v`` replaced by ``levels - 1 - v``.

        Dark extremal regions of the inverted grid are the bright
        extremal regions of this one.
        """
        flipped = (self.LEVELS - 1) - self._data.astype(np.int64)
        return IntensityGrid(flipped, origin=self.origin)

    def __repr__(self) -> str:
        return (
            f"IntensityGrid(width={self.width}, height={self.height}, "
            f"origin={self.origin})"
        )
