# -*- coding: utf-8 -*-
"""
Detection Field Dictionary - Standardized names for detection properties.

Defines the data dictionary of property names that detectors attach to
each ``Detection``. Names are hierarchical (``domain.field``) so that
consumers can group related attributes.

Domains
-------
mser
    Extremal-region attributes (threshold level, variation, polarity,
    nesting depth, seed and centroid position).
physical
    Pixel-space size measurements (area, width, length).

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
2026-02-11

Modified
--------
2026-10-19
"""

from typing import Dict, List, Optional


class FieldDefinition:
    """Definition of a single field in the data dictionary.

    Parameters
    ----------
    name : str
        Hierarchical dotted name (e.g., ``'mser.variation'``).
    dtype : str
        ``'float'``, ``'int'``, ``'str'`` or ``'bool'``.
    description : str
        Human-readable description.
    units : str, optional
        Units, or None for dimensionless fields.
    """

    __slots__ = ('name', 'dtype', 'description', 'units', 'domain')

    def __init__(
        self,
        name: str,
        dtype: str,
        description: str,
        units: Optional[str] = None,
    ) -> None:
        self.name = name
        self.dtype = dtype
        self.description = description
        self.units = units
        self.domain = name.split('.')[0]

    def __repr__(self) -> str:
        text = f"FieldDefinition({self.name!r}, {self.dtype!r}"
        if self.units is not None:
            text += f", units={self.units!r}"
        return text + ")"


def _build_dictionary() -> Dict[str, FieldDefinition]:
    _f = FieldDefinition
    entries = [
        # mser -- extremal region attributes
        _f('mser.level', 'int', 'Intensity threshold of the region'),
        _f('mser.variation', 'float', 'Relative area growth over the delta window'),
        _f('mser.polarity', 'str', 'Region polarity (dark or bright)'),
        _f('mser.depth', 'int', 'Nesting depth in the MSER forest'),
        _f('mser.child_count', 'int', 'Number of MSERs nested directly inside'),
        _f('mser.seed_x', 'int', 'Seed pixel column', 'px'),
        _f('mser.seed_y', 'int', 'Seed pixel row', 'px'),
        _f('mser.centroid_x', 'float', 'Centroid column', 'px'),
        _f('mser.centroid_y', 'float', 'Centroid row', 'px'),

        # physical -- pixel-space size
        _f('physical.area', 'float', 'Region area', 'px^2'),
        _f('physical.width', 'float', 'Bounding box width', 'px'),
        _f('physical.length', 'float', 'Bounding box height', 'px'),
    ]
    return {e.name: e for e in entries}


DATA_DICTIONARY: Dict[str, FieldDefinition] = _build_dictionary()
"""Registry of standardized detection field definitions, keyed by name."""


def lookup_field(name: str) -> Optional[FieldDefinition]:
    """Definition for *name*, or None if it is not in the dictionary."""
    return DATA_DICTIONARY.get(name)


def is_dictionary_field(name: str) -> bool:
    return name in DATA_DICTIONARY


def list_fields(domain: Optional[str] = None) -> List[FieldDefinition]:
    """Field definitions sorted by name, optionally for one *domain*."""
    fields = [
        f for f in DATA_DICTIONARY.values()
        if domain is None or f.domain == domain
    ]
    return sorted(fields, key=lambda f: f.name)


class _Domain:
    """Namespace for field name constants within a domain."""


class Fields:
    """Field name constants with IDE autocomplete.

    >>> Fields.mser.VARIATION
    'mser.variation'
    >>> Fields.physical.AREA
    'physical.area'
    """

    mser = _Domain()
    physical = _Domain()


for _name in DATA_DICTIONARY:
    _domain_name, _attr_name = _name.split('.', 1)
    setattr(getattr(Fields, _domain_name), _attr_name.upper(), _name)
