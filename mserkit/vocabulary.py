# -*- coding: utf-8 -*-
"""
MSERKit Vocabulary - Enumerations shared across processors.

Defines the controlled vocabularies used to tag processors with
capability metadata and to select region polarity.

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

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    SEGMENTATION = "segmentation"
    FEATURES = "features"
    ANALYZE = "analyze"


class DetectionType(Enum):
    """Type/fidelity of detection a detector processor performs."""

    PHENOMENON_SIGNATURE = "phenomenon_signature"
    CHARACTERIZATION = "characterization"
    CLASSIFICATION = "classification"


class Polarity(Enum):
    """Which extremal regions to extract.

    ``DARK`` regions are connected sets whose pixels are all at or below a
    threshold (darker than their boundary). ``BRIGHT`` regions are the
    same on the inverted image. ``BOTH`` reports the two sets together.
    """

    DARK = "dark"
    BRIGHT = "bright"
    BOTH = "both"
