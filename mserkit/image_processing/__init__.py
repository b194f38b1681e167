# -*- coding: utf-8 -*-
"""
Image Processing - Processor framework and detectors.

Provides the ``ImageProcessor`` base class with version checking and
declarative tunable parameters, the versioning decorators, and the
``detection`` sub-package holding ``MSERDetector``.

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
2026-01-30

Modified
--------
2026-10-19
"""

from mserkit.image_processing.base import ImageProcessor
from mserkit.image_processing.params import Desc, Options, ParamSpec, Range
from mserkit.image_processing.versioning import processor_tags, processor_version

__all__ = [
    'ImageProcessor',
    'Desc',
    'Options',
    'ParamSpec',
    'Range',
    'processor_tags',
    'processor_version',
]
