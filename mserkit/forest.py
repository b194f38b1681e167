# -*- coding: utf-8 -*-
"""
Forest Extractor - Diversity pruning and MSER forest assembly.

Implements the second analysis pass. Starting from a tree whose stability
flags have been set by :func:`mserkit.stability.evaluate_stability`, each
stable region is suppressed when a nested region of similar size is at
least as stable:

- an ancestor whose area is below ``area / (1 - min_diversity)`` that is
  stable with an equal or lower variation, or
- a descendant whose area is above ``area * (1 - min_diversity)`` that is
  stable with a strictly lower variation.

Surviving regions are re-linked in place so that each one's children are
its nearest surviving descendants. Unstable regions drop out and their
surviving descendants take their place in the parent's child list.

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
from typing import Iterable, List

# MSERKit internal
from mserkit.region import Region, _link


def extract_forest(root: Region, min_diversity: float) -> List[Region]:
    """Prune near-duplicate stable regions and return the MSER forest.

    The tree is re-linked in place and must not be analysed again
    afterwards.

    Parameters
    ----------
    root : Region
        Root of a tree processed by ``evaluate_stability``.
    min_diversity : float
        Minimum relative area difference between nested MSERs, in
        ``[0, 1)``. ``0`` disables diversity pruning.

    Returns
    -------
    List[Region]
        Forest roots. Each has ``parent is None`` and its ``children``
        are the surviving regions nested directly inside it.
    """
    return _extract(root, min_diversity)


def _extract(region: Region, min_diversity: float) -> List[Region]:
    if region._stable:
        min_parent_area = int(region._area / (1.0 - min_diversity) + 0.5)
        ancestor = region
        while (ancestor._parent is not None
               and ancestor._parent._area < min_parent_area):
            ancestor = ancestor._parent
            if ancestor._stable and ancestor._variation <= region._variation:
                region._stable = False
                break

    if region._stable:
        max_child_area = int(region._area * (1.0 - min_diversity) + 0.5)
        if not _dominates(region, region._variation, max_child_area):
            region._stable = False

    # Children are collected up front: re-linking a stable child clears
    # its sibling pointer.
    forest: List[Region] = []
    for child in region.children:
        forest.extend(_extract(child, min_diversity))

    if not region._stable:
        return forest

    _link(region, forest)
    region._parent = None
    region._next = None
    return [region]


def _dominates(region: Region, variation: float, max_child_area: int) -> bool:
    """False if a stable region larger than *max_child_area* under
    *region* has a variation below *variation*."""
    if region._area <= max_child_area:
        return True
    if region._stable and region._variation < variation:
        return False
    child = region._child
    while child is not None:
        if not _dominates(child, variation, max_child_area):
            return False
        child = child._next
    return True


def count_regions(forest: Iterable[Region]) -> int:
    """Total number of regions in *forest*, descendants included."""
    return sum(1 for tree in forest for _ in tree.walk())
