# -*- coding: utf-8 -*-
"""
Detection Sub-module - Sparse vector detections.

Provides the ``ImageDetector`` ABC, the detection data models and field
dictionary, and ``MSERDetector``, which reports maximally stable extremal
regions as bounding-box detections.

Key Classes
-----------
``ImageDetector`` (ABC), ``Detection``, ``DetectionSet``,
``FieldDefinition``, ``Fields``, ``DATA_DICTIONARY``, ``MSERDetector``

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
2026-02-06

Modified
--------
2026-10-19
"""

from mserkit.image_processing.detection.base import ImageDetector
from mserkit.image_processing.detection.fields import (
    DATA_DICTIONARY,
    FieldDefinition,
    Fields,
    is_dictionary_field,
    list_fields,
    lookup_field,
)
from mserkit.image_processing.detection.models import Detection, DetectionSet
from mserkit.image_processing.detection.mser import MSERDetector

__all__ = [
    'ImageDetector',
    'Detection',
    'DetectionSet',
    'DATA_DICTIONARY',
    'FieldDefinition',
    'Fields',
    'is_dictionary_field',
    'list_fields',
    'lookup_field',
    'MSERDetector',
]
