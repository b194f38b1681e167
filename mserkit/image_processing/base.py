# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interface for image processors.

Defines ``ImageProcessor``, the common base of every MSERKit processor. It
provides version checking at first instantiation and ``typing.Annotated``
tunable parameter declarations with automatic ``__init__`` generation and
per-call overrides through ``**kwargs``.

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

# Standard library
import logging
import warnings
from abc import ABC
from typing import Any, Dict, Tuple

# MSERKit internal
from mserkit.image_processing.params import ParamSpec, collect_param_specs, _make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a version
    via ``@processor_version('x.y.z')`` trigger a ``UserWarning`` the first
    time they are instantiated. The check lives in ``__new__`` so that
    class decorators have already run.

    **Tunable parameters**: subclasses declare parameters as ``Annotated``
    class-body fields using the markers of
    :mod:`mserkit.image_processing.params`. ``__init_subclass__`` collects
    them into ``__param_specs__`` and generates a keyword-only ``__init__``
    unless the subclass defines its own. ``_resolve_params(kwargs)``
    merges instance values with per-call overrides.
    """

    _version_warned_classes: set = set()

    #: Built by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with per-call overrides in *kwargs*.

        Keys of *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored. Every resolved value is
        validated against its spec.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates its range or choices.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Call the optional ``progress_callback`` keyword with *fraction*."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))
