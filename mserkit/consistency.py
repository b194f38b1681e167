# -*- coding: utf-8 -*-
"""
Tree Consistency - Structural invariant checks for extremal region trees.

Provides ``region_mask`` to recover the pixel set of a region directly
from the grid, and ``check_tree`` to verify that a tree produced by the
builder satisfies its invariants:

- every child's ``parent`` points back at the region listing it;
- levels and areas never decrease towards the root;
- a region's area covers the sum of its children's areas;
- a child's bounds lie inside its parent's bounds;
- with a grid: each region's area equals the size of the 4-connected
  component of ``grid <= level`` containing its seed point, and the
  root covers the whole grid.

Violations raise ``TreeConsistencyError``. They point at a bug in the
builder or in an analysis pass and are meant to fail tests, not to be
handled at run time.

Dependencies
------------
scipy

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

# Standard library
from typing import Optional

# Third-party
import numpy as np
from scipy.ndimage import generate_binary_structure, label

# MSERKit internal
from mserkit.exceptions import TreeConsistencyError
from mserkit.grid import IntensityGrid
from mserkit.region import Region

# 4-connectivity, matching the builder's neighbourhood.
_FOUR_CONNECTED = generate_binary_structure(2, 1)


def region_mask(grid: IntensityGrid, region: Region) -> np.ndarray:
    """Boolean mask of the pixels belonging to *region*.

    The mask is the 4-connected component of ``grid.data <= region.level``
    that contains ``region.point``.

    Parameters
    ----------
    grid : IntensityGrid
        Grid the region was built from.
    region : Region
        Region with a seed point inside *grid*.

    Returns
    -------
    np.ndarray
        Bool array of shape ``(grid.height, grid.width)``.
    """
    labeled, _ = label(grid.data <= region.level, structure=_FOUR_CONNECTED)
    x, y = region.point
    component = labeled[y - grid.min_y, x - grid.min_x]
    return labeled == component


def check_tree(root: Region, grid: Optional[IntensityGrid] = None) -> None:
    """Verify the structural invariants of the tree rooted at *root*.

    Parameters
    ----------
    root : Region
        Root of an extremal region tree or of an MSER forest tree.
    grid : IntensityGrid, optional
        If given, also check region areas against the pixel data. Only
        meaningful for a tree freshly built from *grid*.

    Raises
    ------
    TreeConsistencyError
        On the first violated invariant.
    """
    if root.parent is not None:
        raise TreeConsistencyError(f"Root {root!r} has a parent")

    for region in root.walk():
        children = region.children
        child_area = 0
        for child in children:
            if child.parent is not region:
                raise TreeConsistencyError(
                    f"{child!r} is listed under {region!r} but its parent "
                    f"is {child.parent!r}"
                )
            if child.level > region.level:
                raise TreeConsistencyError(
                    f"Child level {child.level} above parent level "
                    f"{region.level}"
                )
            if child.area > region.area:
                raise TreeConsistencyError(
                    f"Child area {child.area} above parent area "
                    f"{region.area}"
                )
            if region.bounds is not None and child.bounds is not None:
                if not region.bounds.contains(child.bounds):
                    raise TreeConsistencyError(
                        f"Child bounds {child.bounds} outside parent "
                        f"bounds {region.bounds}"
                    )
            child_area += child.area
        if child_area > region.area:
            raise TreeConsistencyError(
                f"Children of {region!r} cover {child_area} pixels, "
                f"more than the region's area {region.area}"
            )

        if grid is not None:
            expected = int(region_mask(grid, region).sum())
            if region.area != expected:
                raise TreeConsistencyError(
                    f"{region!r} has area {region.area}, but its component "
                    f"in the grid has {expected} pixels"
                )

    if grid is not None and root.area != grid.area:
        raise TreeConsistencyError(
            f"Root area {root.area} does not cover the grid ({grid.area} "
            f"pixels)"
        )
