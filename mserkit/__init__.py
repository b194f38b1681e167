# -*- coding: utf-8 -*-
"""
MSERKit - Maximally Stable Extremal Region toolkit.

Builds the extremal region component tree of an 8-bit grayscale raster in
linear time and selects the forest of maximally stable extremal regions
(MSERs) from it, for blob, text and feature detection.

Dependencies
------------
numpy
scipy
shapely

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from mserkit.exceptions import (
    MserError,
    ValidationError,
    TreeConsistencyError,
)
from mserkit.vocabulary import (
    DetectionType,
    Polarity,
    ProcessorCategory,
)
from mserkit.region import BoundingBox, Point, Region
from mserkit.grid import IntensityGrid
from mserkit.component_tree import build_component_tree
from mserkit.stability import evaluate_stability
from mserkit.forest import count_regions, extract_forest
from mserkit.mser import MSERParams, extract_mser, select_mser
from mserkit.consistency import check_tree, region_mask

__all__ = [
    'MserError',
    'ValidationError',
    'TreeConsistencyError',
    'DetectionType',
    'Polarity',
    'ProcessorCategory',
    'BoundingBox',
    'Point',
    'Region',
    'IntensityGrid',
    'build_component_tree',
    'evaluate_stability',
    'count_regions',
    'extract_forest',
    'MSERParams',
    'extract_mser',
    'select_mser',
    'check_tree',
    'region_mask',
]
