# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag decorators.

Provides the ``@processor_version`` class decorator, which stamps a
semantic version on a processor class, and ``@processor_tags``, which
stamps capability metadata (category, description, detection types) used
to discover processors.

Author
------
Steven Siebert

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
import importlib.metadata
from typing import Optional, Sequence, Type, TypeVar

# MSERKit vocabulary
from mserkit.vocabulary import DetectionType, ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that sets ``__processor_version__``.

    The version is the single source of truth for both the algorithm and
    its output format. When omitted, the installed ``mserkit``
    distribution version is used (``'unknown'`` if not installed).

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyDetector(ImageDetector):
    ...     ...
    >>> MyDetector.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('mserkit')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
    detection_types: Optional[Sequence[DetectionType]] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` with the category, description and
    detection types of the processor.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` or an element of
        *detection_types* is not a ``DetectionType``. Checked eagerly so
        typos fail at import time.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )
    for d in detection_types or ():
        if not isinstance(d, DetectionType):
            raise TypeError(
                f"detection_types must be DetectionType members, got {d!r}"
            )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
            'detection_types': tuple(detection_types or ()),
        }
        return cls
    return decorator
