# -*- coding: utf-8 -*-
"""
Stability Evaluator - Per-region variation and MSER stability flags.

Implements the first analysis pass over an extremal region tree. For every
region ``r`` the pass finds the ancestor ``p`` reached by climbing while
the next ancestor's level stays within ``r.level + delta`` and sets

    ``r.variation = (p.area - r.area) / r.area``

A region is locally acceptable when its variation does not exceed that of
``p``, its area lies within ``[min_area, max_area]`` and its variation is
at most ``max_variation``. It is marked stable when it is acceptable and
its variation is a strict minimum with respect to at least one child, or
when it is an acceptable leaf. This marks the local minima of the
variation curve along the root-to-leaf paths of the tree.

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

# MSERKit internal
from mserkit.region import Region


def evaluate_stability(
    root: Region,
    delta: int,
    min_area: int,
    max_area: int,
    max_variation: float,
) -> None:
    """Compute ``variation`` and ``stable`` for every region under *root*.

    Mutates the tree in place. Running it twice with the same arguments
    on an unmodified tree gives the same flags; it must not be run on a
    tree that :func:`mserkit.forest.extract_forest` has already re-linked.

    Parameters
    ----------
    root : Region
        Root of the extremal region tree.
    delta : int
        Width of the level window used to measure area growth.
    min_area : int
        Smallest accepted region area, in pixels.
    max_area : int
        Largest accepted region area, in pixels.
    max_variation : float
        Largest accepted variation.
    """
    _evaluate(root, delta, min_area, max_area, max_variation)


def _evaluate(
    region: Region,
    delta: int,
    min_area: int,
    max_area: int,
    max_variation: float,
) -> None:
    window_top = region
    ceiling = region._level + delta
    while window_top._parent is not None and window_top._parent._level <= ceiling:
        window_top = window_top._parent

    region._variation = (window_top._area - region._area) / region._area
    acceptable = (
        region._variation <= window_top._variation
        and min_area <= region._area <= max_area
        and region._variation <= max_variation
    )

    child = region._child
    while child is not None:
        _evaluate(child, delta, min_area, max_area, max_variation)
        if acceptable and region._variation < child._variation:
            region._stable = True
        child = child._next

    if region._child is None and acceptable:
        region._stable = True
