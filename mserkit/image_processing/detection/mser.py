# -*- coding: utf-8 -*-
"""
MSER Detector - Maximally stable extremal regions as sparse detections.

Wraps the MSER pipeline (component tree, stability evaluation, forest
extraction) in an ``ImageDetector``. Each region of the extracted forest
becomes one bounding-box ``Detection`` whose properties describe the
region's threshold level, variation, nesting depth and shape.

Dark regions (darker than their surroundings) come straight from the
component tree. Bright regions are found by running the same pipeline on
the inverted image; their reported ``mser.level`` is converted back to
the original intensity scale.

Dependencies
------------
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

# Standard library
import logging
from typing import Annotated, Any, List, Tuple

# Third-party
import numpy as np
from shapely.geometry import box

# MSERKit internal
from mserkit.exceptions import ValidationError
from mserkit.grid import IntensityGrid
from mserkit.mser import MSERParams, extract_mser
from mserkit.region import Region
from mserkit.image_processing.detection.base import ImageDetector
from mserkit.image_processing.detection.fields import Fields
from mserkit.image_processing.detection.models import Detection, DetectionSet
from mserkit.image_processing.params import Desc, Options, Range
from mserkit.image_processing.versioning import processor_tags, processor_version
from mserkit.vocabulary import DetectionType, Polarity, ProcessorCategory

logger = logging.getLogger(__name__)


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.FEATURES,
    description='Maximally stable extremal region detection',
    detection_types=[DetectionType.PHENOMENON_SIGNATURE],
)
class MSERDetector(ImageDetector):
    """Detect maximally stable extremal regions in an 8-bit image.

    Parameters
    ----------
    delta : int
        Level window over which area growth is measured. ``0`` selects
        the default of 1.
    min_area : float
        Smallest region as a fraction of the image area.
    max_area : float
        Largest region as a fraction of the image area. ``0`` selects
        the default of 1.0.
    max_variation : float
        Largest accepted variation. ``0`` selects the default of 1.0;
        ``math.inf`` disables the limit.
    min_diversity : float
        Minimum relative area difference between nested regions.
        Values of 1.0 select the default of 0.0 (no pruning).
    polarity : str
        ``'dark'`` (default), ``'bright'`` or ``'both'``.

    Examples
    --------
    >>> from mserkit.image_processing.detection import MSERDetector
    >>> detector = MSERDetector(delta=5, max_area=0.25)
    >>> detections = detector.detect(gray_uint8)
    >>> [d.properties['mser.level'] for d in detections]

    Override a parameter for a single call:

    >>> bright = detector.detect(gray_uint8, polarity='bright')
    """

    delta: Annotated[int, Range(min=0, max=255),
                     Desc('Level window for area growth')] = 1
    min_area: Annotated[float, Range(min=0.0, max=1.0),
                        Desc('Minimum region area (fraction of image)')] = 0.0
    max_area: Annotated[float, Range(min=0.0, max=1.0),
                        Desc('Maximum region area (fraction of image)')] = 1.0
    max_variation: Annotated[float, Range(min=0.0),
                             Desc('Maximum region variation')] = 1.0
    min_diversity: Annotated[float, Range(min=0.0, max=1.0),
                             Desc('Minimum area difference of nested regions')] = 0.0
    polarity: Annotated[str, Options('dark', 'bright', 'both'),
                        Desc('Region polarity')] = 'dark'

    @property
    def output_fields(self) -> Tuple[str, ...]:
        return (
            Fields.mser.LEVEL,
            Fields.mser.VARIATION,
            Fields.mser.POLARITY,
            Fields.mser.DEPTH,
            Fields.mser.CHILD_COUNT,
            Fields.mser.SEED_X,
            Fields.mser.SEED_Y,
            Fields.mser.CENTROID_X,
            Fields.mser.CENTROID_Y,
            Fields.physical.AREA,
            Fields.physical.WIDTH,
            Fields.physical.LENGTH,
        )

    @staticmethod
    def _build_detections(
        forest: List[Region],
        polarity: Polarity,
        max_level: int,
    ) -> List[Detection]:
        """One ``Detection`` per region of *forest*, in pre-order."""
        detections: List[Detection] = []
        pending = [(tree, 0) for tree in reversed(forest)]
        while pending:
            region, depth = pending.pop()
            children = region.children
            pending.extend((child, depth + 1) for child in reversed(children))

            bounds = region.bounds
            centroid_x, centroid_y = region.centroid
            level = region.level
            if polarity is Polarity.BRIGHT:
                level = max_level - level

            properties = {
                Fields.mser.LEVEL: level,
                Fields.mser.VARIATION: float(region.variation),
                Fields.mser.POLARITY: polarity.value,
                Fields.mser.DEPTH: depth,
                Fields.mser.CHILD_COUNT: len(children),
                Fields.mser.SEED_X: region.point.x,
                Fields.mser.SEED_Y: region.point.y,
                Fields.mser.CENTROID_X: centroid_x,
                Fields.mser.CENTROID_Y: centroid_y,
                Fields.physical.AREA: float(region.area),
                Fields.physical.WIDTH: float(bounds.width),
                Fields.physical.LENGTH: float(bounds.height),
            }
            detections.append(Detection(
                pixel_geometry=box(
                    float(bounds.x_min), float(bounds.y_min),
                    float(bounds.x_max), float(bounds.y_max),
                ),
                properties=properties,
                confidence=1.0 / (1.0 + float(region.variation)),
            ))
        return detections

    def detect(self, source: np.ndarray, **kwargs: Any) -> DetectionSet:
        """Run MSER detection on a 2D 8-bit image.

        Parameters
        ----------
        source : np.ndarray
            2D integer array with levels in ``[0, 255]``, shape
            ``(rows, cols)``.
        progress_callback : callable, optional
            Called with the completed fraction after each polarity pass.

        Returns
        -------
        DetectionSet
            One bounding-box detection per MSER.

        Raises
        ------
        ValidationError
            If *source* is not 2D or holds values outside ``[0, 255]``.
        """
        params = self._resolve_params(kwargs)

        source = np.asarray(source)
        if source.ndim != 2:
            raise ValidationError(
                f"MSER detector requires 2D input, got shape {source.shape}"
            )
        grid = IntensityGrid(source)

        mser_params = MSERParams(
            delta=params['delta'],
            min_area=params['min_area'],
            max_area=params['max_area'],
            max_variation=params['max_variation'],
            min_diversity=params['min_diversity'],
        )
        polarity = Polarity(params['polarity'])
        if polarity is Polarity.BOTH:
            passes = (Polarity.DARK, Polarity.BRIGHT)
        else:
            passes = (polarity,)

        self._report_progress(kwargs, 0.0)
        detections: List[Detection] = []
        for i, pass_polarity in enumerate(passes):
            pass_grid = grid if pass_polarity is Polarity.DARK else grid.inverted()
            forest = extract_mser(pass_grid, mser_params)
            detections.extend(
                self._build_detections(forest, pass_polarity, grid.levels - 1)
            )
            self._report_progress(kwargs, (i + 1) / len(passes))

        logger.debug(
            "%s found %d region(s) in %s image (polarity=%s)",
            type(self).__name__, len(detections), source.shape, polarity.value,
        )
        return DetectionSet(
            detections=detections,
            detector_name=type(self).__name__,
            detector_version=self.__processor_version__,
            output_fields=self.output_fields,
            metadata={
                'input_shape': tuple(source.shape),
                'polarity': polarity.value,
                'parameters': params,
            },
        )
