# -*- coding: utf-8 -*-
"""
Detection Data Models - Sparse vector detection output types.

Provides ``Detection`` for a single detected feature carrying a shapely
geometry in pixel space, and ``DetectionSet`` for the detections of one
detector run.

Coordinate Conventions
----------------------
- **Pixel space**: shapely ``(x, y)`` = ``(col, row)``, in the absolute
  coordinates of the grid that was processed.

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
import warnings
from typing import Any, Dict, Iterator, List, Optional, Tuple

# Third-party
from shapely.geometry import mapping as shapely_mapping

# MSERKit internal
from mserkit.image_processing.detection.fields import is_dictionary_field


class Detection:
    """
    A single sparse detection.

    Parameters
    ----------
    pixel_geometry : shapely.geometry.base.BaseGeometry
        Geometry in pixel space.
    properties : Dict[str, Any]
        Detection attributes, keyed by data dictionary names
        (e.g., ``'mser.level'``).
    confidence : float, optional
        Detection confidence in [0, 1]; None if not applicable.
    """

    def __init__(
        self,
        pixel_geometry: Any,
        properties: Dict[str, Any],
        confidence: Optional[float] = None,
    ) -> None:
        self.pixel_geometry = pixel_geometry
        self.properties = properties
        self.confidence = confidence

    def to_geojson_feature(self) -> Dict[str, Any]:
        """
        Convert to a GeoJSON Feature dictionary.

        Returns
        -------
        Dict[str, Any]
            Feature with ``'type'``, ``'geometry'`` and ``'properties'``
            keys. Confidence is added to the properties when set.
        """
        props = dict(self.properties)
        if self.confidence is not None:
            props['confidence'] = self.confidence
        return {
            'type': 'Feature',
            'geometry': shapely_mapping(self.pixel_geometry),
            'properties': props,
        }

    def __repr__(self) -> str:
        return (
            f"Detection(geom_type={self.pixel_geometry.geom_type!r}, "
            f"confidence={self.confidence!r})"
        )


class DetectionSet:
    """
    Collection of detections from a single detector run.

    Parameters
    ----------
    detections : List[Detection]
        Individual detections.
    detector_name : str
        Name of the detector class.
    detector_version : str
        ``__processor_version__`` of the detector.
    output_fields : Tuple[str, ...], optional
        Property names declared by the detector. Names outside the data
        dictionary emit a ``UserWarning``.
    metadata : Dict[str, Any], optional
        Additional run metadata (input shape, parameters, counts).
    """

    def __init__(
        self,
        detections: List[Detection],
        detector_name: str,
        detector_version: str,
        output_fields: Tuple[str, ...] = (),
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.detections = detections
        self.detector_name = detector_name
        self.detector_version = detector_version
        self.output_fields = output_fields
        self.metadata = metadata or {}

        for name in self.output_fields:
            if not is_dictionary_field(name):
                warnings.warn(
                    f"Field '{name}' is not in the data dictionary. "
                    f"Consider using a standardized field name.",
                    UserWarning,
                    stacklevel=2,
                )

    def __len__(self) -> int:
        return len(self.detections)

    def __iter__(self) -> Iterator[Detection]:
        return iter(self.detections)

    def __getitem__(self, index: int) -> Detection:
        return self.detections[index]

    def to_geojson(self) -> Dict[str, Any]:
        """
        Convert to a GeoJSON FeatureCollection.

        Detector metadata goes into the top-level ``'properties'`` key.
        """
        return {
            'type': 'FeatureCollection',
            'features': [d.to_geojson_feature() for d in self.detections],
            'properties': {
                'detector_name': self.detector_name,
                'detector_version': self.detector_version,
                'output_fields': self.output_fields,
                **self.metadata,
            },
        }

    def filter_by_confidence(self, min_confidence: float) -> 'DetectionSet':
        """
        New set holding the detections with confidence ``>= min_confidence``.

        Detections without a confidence value are dropped.
        """
        kept = [
            d for d in self.detections
            if d.confidence is not None and d.confidence >= min_confidence
        ]
        return DetectionSet(
            detections=kept,
            detector_name=self.detector_name,
            detector_version=self.detector_version,
            output_fields=self.output_fields,
            metadata=self.metadata,
        )

    def __repr__(self) -> str:
        return (
            f"DetectionSet(detector={self.detector_name!r}, "
            f"version={self.detector_version!r}, "
            f"count={len(self.detections)})"
        )
