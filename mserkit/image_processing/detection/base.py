# -*- coding: utf-8 -*-
"""
Image Detector Base Class - Abstract interface for sparse vector detectors.

Defines the ``ImageDetector`` ABC for processors that produce sparse
vector detections (bounding boxes, points, polygons) rather than dense
raster arrays.

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

# Standard library
from abc import abstractmethod
from typing import Any, Tuple

# Third-party
import numpy as np

# MSERKit internal
from mserkit.image_processing.base import ImageProcessor
from mserkit.image_processing.detection.models import DetectionSet


class ImageDetector(ImageProcessor):
    """
    Abstract base class for image detectors producing sparse outputs.

    Subclasses must implement:

    - ``detect()`` -- run detection on image data
    - ``output_fields`` (property) -- declare the property names each
      detection carries

    Examples
    --------
    >>> detector = SomeDetector(delta=5)
    >>> detections = detector.detect(image)
    >>> len(detections)
    42
    """

    @abstractmethod
    def detect(self, source: np.ndarray, **kwargs: Any) -> DetectionSet:
        """
        Run detection on source imagery.

        Parameters
        ----------
        source : np.ndarray
            Input image, shape ``(rows, cols)``.

        Returns
        -------
        DetectionSet
            Detections with metadata.
        """
        ...

    @property
    @abstractmethod
    def output_fields(self) -> Tuple[str, ...]:
        """Property names present in every detection's ``properties``."""
        ...
