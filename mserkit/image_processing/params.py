# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides the constraint markers ``Range``, ``Options`` and ``Desc`` for use
inside ``typing.Annotated`` class-body fields of ``ImageProcessor``
subclasses, the ``ParamSpec`` record built from each field, and the
collection and ``__init__``-generation helpers used by
``ImageProcessor.__init_subclass__``.

Usage
-----
::

    from typing import Annotated
    from mserkit.image_processing.params import Range, Options, Desc

    class MyDetector(ImageDetector):
        delta: Annotated[int, Range(min=0, max=255), Desc('Level window')] = 1
        polarity: Annotated[str, Options('dark', 'bright'), Desc('Polarity')] = 'dark'

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
2026-02-10

Modified
--------
2026-10-19
"""

# Standard library
import inspect
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

Number = Union[int, float]


# =====================================================================
# Constraint markers (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker: an ``Annotated`` field carrying at least one
    ``ParamMeta`` instance is a tunable parameter."""


class Range(ParamMeta):
    """Inclusive numeric range. Either bound may be omitted."""

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[Number] = None,
                 max: Optional[Number] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        bounds = []
        if self.min is not None:
            bounds.append(f"min={self.min!r}")
        if self.max is not None:
            bounds.append(f"max={self.max!r}")
        return f"Range({', '.join(bounds)})"


class Options(ParamMeta):
    """Discrete set of allowed values."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

_MISSING = object()


class ParamSpec:
    """Resolved constraints of one tunable parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected type. ``int`` values are accepted for ``float``.
    default : Any
        Default value (``None`` when the parameter is required).
    description : str
        Text from ``Desc``, or ``''``.
    min_value, max_value : int, float or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any = _MISSING,
        description: str = '',
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self._has_default = default is not _MISSING
        self.default = default if self._has_default else None
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Check *value* against the type, range and choices constraints.

        Raises
        ------
        TypeError
            If *value* has the wrong type. ``bool`` is not accepted for
            numeric parameters.
        ValueError
            If *value* is out of range or not an allowed choice.
        """
        expected = self.param_type
        if expected in (int, float):
            allowed = (int, float) if expected is float else (int,)
            if isinstance(value, bool) or not isinstance(value, allowed):
                raise TypeError(
                    f"Parameter '{self.name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        elif expected is not object and not isinstance(value, expected):
            raise TypeError(
                f"Parameter '{self.name}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            text += f", default={self.default!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


# =====================================================================
# Collection and __init__ generation
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build ``ParamSpec``s from the ``Annotated`` fields of *cls*.

    Fields are ordered parent class first, in declaration order.

    Raises
    ------
    TypeError
        If a field carries both ``Range`` and ``Options``.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    names = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)

    specs = []
    for name in names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, _MISSING),
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` for *param_specs*.

    The generated method validates every value, stores it as an instance
    attribute, rejects unknown keywords and finally calls
    ``self.__post_init__()`` when the class defines one.
    """
    known = {spec.name for spec in param_specs}

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - known
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in param_specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)

        if hasattr(self, '__post_init__'):
            self.__post_init__()

    parameters = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in param_specs:
        parameters.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if spec.required else spec.default,
        ))
    __init__.__signature__ = inspect.Signature(parameters)
    __init__.__qualname__ = '__init__'
    return __init__
