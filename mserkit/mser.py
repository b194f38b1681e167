# -*- coding: utf-8 -*-
"""
MSER Extraction - Parameters and end-to-end entry points.

Composes the three core stages into the public pipeline:

1. :func:`~mserkit.component_tree.build_component_tree` builds the
   extremal region tree of a grid.
2. :func:`~mserkit.stability.evaluate_stability` scores every region.
3. :func:`~mserkit.forest.extract_forest` prunes near-duplicates and
   returns the forest of maximally stable regions.

``MSERParams`` carries the tuning knobs. Area limits are fractions of the
image area and are converted to pixel counts here, before the stability
pass. Out-of-range values are replaced by their defaults instead of being
rejected.

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
import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional

# MSERKit internal
from mserkit.component_tree import build_component_tree
from mserkit.forest import extract_forest
from mserkit.grid import IntensityGrid
from mserkit.region import Region
from mserkit.stability import evaluate_stability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MSERParams:
    """Tuning parameters for MSER selection.

    Attributes
    ----------
    delta : int
        Level window over which area growth is measured. Default 1.
    min_area : float
        Smallest region, as a fraction of the image area. Default 0.0.
    max_area : float
        Largest region, as a fraction of the image area. Default 1.0.
    max_variation : float
        Largest accepted variation. Default 1.0; pass ``math.inf`` to
        disable the limit.
    min_diversity : float
        Minimum relative area difference between nested MSERs, in
        ``[0, 1)``. Default 0.0 (no diversity pruning).
    """

    delta: int = 1
    min_area: float = 0.0
    max_area: float = 1.0
    max_variation: float = 1.0
    min_diversity: float = 0.0

    def normalized(self) -> 'MSERParams':
        """Copy with every out-of-range value replaced by its default.

        - ``delta <= 0`` becomes 1
        - ``min_area < 0`` becomes 0.0
        - ``max_area <= 0`` becomes 1.0
        - ``max_variation <= 0`` becomes 1.0
        - ``min_diversity`` outside ``[0, 1)`` becomes 0.0
        """
        defaults = MSERParams()
        changes = {}
        if self.delta <= 0:
            changes['delta'] = defaults.delta
        if self.min_area < 0:
            changes['min_area'] = defaults.min_area
        if self.max_area <= 0:
            changes['max_area'] = defaults.max_area
        if self.max_variation <= 0:
            changes['max_variation'] = defaults.max_variation
        if not 0.0 <= self.min_diversity < 1.0:
            changes['min_diversity'] = defaults.min_diversity
        if changes:
            logger.debug("Normalized MSER parameters: %s", changes)
            return dataclasses.replace(self, **changes)
        return self


def select_mser(
    root: Region,
    size: int,
    params: Optional[MSERParams] = None,
) -> List[Region]:
    """Run stability evaluation and forest extraction on a built tree.

    Parameters
    ----------
    root : Region
        Root of an extremal region tree. Mutated in place.
    size : int
        Pixel count of the image the tree was built from; the area
        fractions in *params* are relative to it.
    params : MSERParams, optional
        Selection parameters. Defaults to ``MSERParams()``.

    Returns
    -------
    List[Region]
        Roots of the MSER forest.
    """
    params = (params or MSERParams()).normalized()
    min_area = int(params.min_area * size)
    max_area = int(params.max_area * size)

    evaluate_stability(
        root, params.delta, min_area, max_area, params.max_variation,
    )
    forest = extract_forest(root, params.min_diversity)
    logger.debug(
        "Selected %d MSER tree(s) from %d pixels (delta=%d, area=[%d, %d])",
        len(forest), size, params.delta, min_area, max_area,
    )
    return forest


def extract_mser(
    grid: IntensityGrid,
    params: Optional[MSERParams] = None,
) -> List[Region]:
    """Extract the MSER forest of *grid*.

    Equivalent to building the component tree and passing it to
    :func:`select_mser` with ``size = grid.area``.

    Parameters
    ----------
    grid : IntensityGrid
        Source levels.
    params : MSERParams, optional
        Selection parameters. Defaults to ``MSERParams()``.

    Returns
    -------
    List[Region]
        Roots of the MSER forest; empty for a zero-area grid.

    Examples
    --------
    >>> import numpy as np
    >>> from mserkit import IntensityGrid, MSERParams, extract_mser
    >>> image = np.full((20, 20), 200, dtype=np.uint8)
    >>> image[5:15, 5:15] = 40
    >>> forest = extract_mser(IntensityGrid(image), MSERParams(delta=5))
    >>> [(r.level, r.area) for r in forest]
    [(40, 100)]
    """
    tree = build_component_tree(grid)
    if tree is None:
        return []
    return select_mser(tree, grid.area, params)
