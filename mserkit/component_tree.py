# -*- coding: utf-8 -*-
"""
Component Tree Builder - Linear-time extremal region tree construction.

Builds the tree of extremal regions (ERs) of an intensity grid. An ER at
level ``t`` is a maximal 4-connected set of pixels with intensity
``<= t``; as ``t`` rises, ERs grow and merge, and the nesting of ERs
across all thresholds forms a tree whose root is the whole grid.

The builder floods the grid from its first pixel, always moving to the
lowest unvisited boundary pixel. Pending boundary pixels live in one
LIFO bucket per intensity level, which replaces a general priority queue
with O(1) push/pop. A stack of open regions tracks the component being
grown at each level below the current flooding level; when the flood has
to rise to a higher level, the open regions below that level are sealed
and merged upward.

Time and auxiliary memory are both O(pixels).

Attribution
-----------
Algorithm: D. Nistér and H. Stewénius, "Linear Time Maximally Stable
Extremal Regions", ECCV 2008, LNCS 5303, pp. 183-196.

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
import logging
import time
from typing import List, Optional

# MSERKit internal
from mserkit.grid import IntensityGrid
from mserkit.region import Point, Region

logger = logging.getLogger(__name__)

# Neighbour offsets in visiting order: +x, +y, -x, -y.
_EDGES = ((1, 0), (0, 1), (-1, 0), (0, -1))


def build_component_tree(grid: IntensityGrid) -> Optional[Region]:
    """Build the extremal region tree of *grid*.

    Parameters
    ----------
    grid : IntensityGrid
        Source levels. Any origin offset is honoured: region points and
        bounds are reported in the grid's absolute coordinates.

    Returns
    -------
    Region or None
        Root region covering the whole grid, at the highest level present
        in the grid. ``None`` if the grid has zero area.

    Examples
    --------
    >>> import numpy as np
    >>> from mserkit import IntensityGrid, build_component_tree
    >>> grid = IntensityGrid(np.array([[1, 2, 2], [2, 1, 1]], dtype=np.uint8))
    >>> root = build_component_tree(grid)
    >>> root.level, root.area
    (2, 6)
    >>> sorted(child.area for child in root.children)
    [1, 2]
    """
    width, height = grid.width, grid.height
    if width == 0 or height == 0:
        logger.debug("Empty grid %r, no component tree", grid)
        return None

    start = time.perf_counter()
    levels = grid.levels
    pixels = grid.values()
    min_x, min_y = grid.min_x, grid.min_y

    accessible = bytearray(width * height)
    boundary: List[List[tuple]] = [[] for _ in range(levels)]
    priority = levels

    # Sentinel frame; never sealed, so it never becomes anyone's parent.
    stack = [Region(levels)]

    cur_index, cur_edge = 0, 0
    cur_level = pixels[0]
    accessible[0] = 1

    while True:
        cur_y, cur_x = divmod(cur_index, width)
        stack.append(Region(cur_level, Point(cur_x + min_x, cur_y + min_y)))

        descended = False
        while True:
            cur_y, cur_x = divmod(cur_index, width)
            while cur_edge < 4:
                dx, dy = _EDGES[cur_edge]
                nx, ny = cur_x + dx, cur_y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    n_index = ny * width + nx
                    if not accessible[n_index]:
                        accessible[n_index] = 1
                        n_level = pixels[n_index]
                        if n_level >= cur_level:
                            boundary[n_level].append((n_index, 0))
                            if n_level < priority:
                                priority = n_level
                        else:
                            # Resume this pixel later, flood the lower
                            # neighbour first.
                            boundary[cur_level].append((cur_index, cur_edge + 1))
                            if cur_level < priority:
                                priority = cur_level
                            cur_index, cur_edge, cur_level = n_index, 0, n_level
                            descended = True
                            break
                cur_edge += 1
            if descended:
                break

            stack[-1]._accumulate(cur_x + min_x, cur_y + min_y)

            if priority == levels:
                root = stack[-1]
                logger.debug(
                    "Built component tree for %dx%d grid in %.3f s "
                    "(root level %d)",
                    width, height, time.perf_counter() - start, root.level,
                )
                return root

            cur_index, cur_edge = boundary[priority].pop()
            while priority < levels and not boundary[priority]:
                priority += 1

            new_level = pixels[cur_index]
            if new_level != cur_level:
                cur_level = new_level
                new_y, new_x = divmod(cur_index, width)
                _process_stack(
                    new_level, Point(new_x + min_x, new_y + min_y), stack,
                )


def _process_stack(new_level: int, point: Point, stack: List[Region]) -> None:
    """Seal open regions below *new_level* and merge them upward.

    Pops the top region and merges it into the region beneath while that
    region's level is below *new_level*. If the flood rises to a level
    that has no open region yet, a new region is opened at *new_level*
    (seeded at *point*) between the popped region and the one beneath.
    Modifies *stack* in place.
    """
    while True:
        top = stack.pop()
        if new_level < stack[-1].level:
            region = Region(new_level, point)
            region._merge(top)
            stack.append(region)
            return
        stack[-1]._merge(top)
        if new_level <= stack[-1].level:
            return
