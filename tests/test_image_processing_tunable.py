# -*- coding: utf-8 -*-
"""
Annotated Tunable Parameter Tests.

Tests for the typing.Annotated-based tunable parameter system: constraint
markers (Range, Options, Desc), ParamSpec introspection, __init_subclass__
annotation collection, auto-generated __init__, __post_init__ hook,
_resolve_params runtime resolution, validation, and inheritance.

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

import inspect
from typing import Annotated

import pytest

from mserkit.image_processing.base import ImageProcessor
from mserkit.image_processing.detection import ImageDetector, MSERDetector
from mserkit.image_processing.detection.models import DetectionSet
from mserkit.image_processing.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from mserkit.image_processing.versioning import processor_version


class _Probe(ImageDetector):
    """Minimal concrete detector; subclasses add Annotated fields."""

    @property
    def output_fields(self):
        return ()

    def detect(self, source, **kwargs):
        return DetectionSet([], type(self).__name__, '1.0.0')


# ---------------------------------------------------------------------------
# Constraint marker construction
# ---------------------------------------------------------------------------

class TestRange:
    """Test Range constraint marker."""

    def test_basic(self):
        r = Range(min=0.0, max=1.0)
        assert r.min == 0.0
        assert r.max == 1.0

    def test_defaults_none(self):
        r = Range()
        assert r.min is None
        assert r.max is None

    def test_min_only(self):
        r = Range(min=0)
        assert r.min == 0
        assert r.max is None

    def test_is_param_meta(self):
        assert isinstance(Range(), ParamMeta)

    def test_repr(self):
        assert 'min=0' in repr(Range(min=0, max=1))


class TestOptions:
    """Test Options constraint marker."""

    def test_basic(self):
        assert Options('dark', 'bright').choices == ('dark', 'bright')

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            Options()

    def test_is_param_meta(self):
        assert isinstance(Options('a'), ParamMeta)


class TestDesc:

    def test_basic(self):
        assert Desc('Level window').text == 'Level window'


# ---------------------------------------------------------------------------
# ParamSpec construction and validation
# ---------------------------------------------------------------------------

class TestParamSpec:
    """Test ParamSpec introspection record."""

    def test_basic_construction(self):
        spec = ParamSpec(
            name='delta', param_type=int, default=1,
            description='Level window', min_value=0, max_value=255,
        )
        assert spec.name == 'delta'
        assert spec.param_type is int
        assert spec.default == 1
        assert spec.required is False
        assert spec.min_value == 0
        assert spec.max_value == 255

    def test_required_when_no_default(self):
        spec = ParamSpec(name='mode', param_type=str)
        assert spec.required is True
        assert spec.default is None

    def test_none_default_is_not_required(self):
        assert ParamSpec('x', object, default=None).required is False

    def test_validate_int_accepted_as_float(self):
        ParamSpec('x', float, 0.5).validate(1)  # no error

    def test_validate_float_rejected_as_int(self):
        with pytest.raises(TypeError, match="must be int"):
            ParamSpec('delta', int, 1).validate(1.5)

    def test_validate_bool_rejected_as_number(self):
        with pytest.raises(TypeError, match="delta"):
            ParamSpec('delta', int, 1).validate(True)

    def test_validate_type_wrong_raises(self):
        with pytest.raises(TypeError, match="x"):
            ParamSpec('x', float, 0.5).validate('bad')

    def test_validate_min_boundary(self):
        spec = ParamSpec('x', float, 0.5, min_value=0.0)
        spec.validate(0.0)  # exact boundary OK
        with pytest.raises(ValueError, match="below minimum"):
            spec.validate(-0.1)

    def test_validate_max_boundary(self):
        spec = ParamSpec('x', float, 0.5, max_value=1.0)
        spec.validate(1.0)  # exact boundary OK
        with pytest.raises(ValueError, match="above maximum"):
            spec.validate(1.1)

    def test_validate_choices_invalid(self):
        spec = ParamSpec('m', str, 'a', choices=('a', 'b'))
        spec.validate('b')
        with pytest.raises(ValueError, match="not in allowed choices"):
            spec.validate('c')

    def test_repr(self):
        assert 'required=True' in repr(ParamSpec('x', float))
        r = repr(ParamSpec('x', float, 0.5))
        assert 'required=False' in r
        assert 'default=0.5' in r


# ---------------------------------------------------------------------------
# collect_param_specs
# ---------------------------------------------------------------------------

class TestCollectParamSpecs:
    """Test annotation collection from Annotated class-body fields."""

    def test_empty_class(self):
        class C:
            pass
        assert collect_param_specs(C) == ()

    def test_plain_annotations_ignored(self):
        class C:
            x: int = 5
        assert collect_param_specs(C) == ()

    def test_annotated_without_param_meta_ignored(self):
        class C:
            x: Annotated[int, 'just a note'] = 5
        assert collect_param_specs(C) == ()

    def test_declaration_order(self):
        class C:
            b: Annotated[int, Range(min=0)] = 1
            a: Annotated[str, Options('x', 'y')] = 'x'
        assert [s.name for s in collect_param_specs(C)] == ['b', 'a']

    def test_range_and_options_mutually_exclusive(self):
        class C:
            x: Annotated[int, Range(min=0), Options(1, 2)] = 1
        with pytest.raises(TypeError, match="mutually exclusive"):
            collect_param_specs(C)

    def test_inheritance_parent_first(self):
        class Parent:
            sigma: Annotated[float, Desc('sigma')] = 2.0

        class Child(Parent):
            mode: Annotated[str, Options('a', 'b')] = 'a'

        assert [s.name for s in collect_param_specs(Child)] == ['sigma', 'mode']

    def test_child_override_narrows_constraint(self):
        class Parent:
            sigma: Annotated[float, Range(min=0)] = 2.0

        class Child(Parent):
            sigma: Annotated[float, Range(min=1.0, max=5.0)] = 3.0

        (spec,) = collect_param_specs(Child)
        assert (spec.min_value, spec.max_value, spec.default) == (1.0, 5.0, 3.0)


# ---------------------------------------------------------------------------
# Generated __init__ and __post_init__
# ---------------------------------------------------------------------------

class TestGeneratedInit:

    def _make(self):
        @processor_version('1.0.0')
        class P(_Probe):
            delta: Annotated[int, Range(min=0, max=255), Desc('d')] = 1
            polarity: Annotated[str, Options('dark', 'bright'), Desc('p')] = 'dark'

        return P

    def test_defaults(self):
        p = self._make()()
        assert p.delta == 1
        assert p.polarity == 'dark'

    def test_custom_values(self):
        p = self._make()(delta=7, polarity='bright')
        assert (p.delta, p.polarity) == (7, 'bright')

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            self._make()(7)

    def test_unexpected_kwargs_raises(self):
        with pytest.raises(TypeError, match="unexpected"):
            self._make()(sigma=3)

    def test_range_validation(self):
        with pytest.raises(ValueError, match="above maximum"):
            self._make()(delta=300)

    def test_choices_validation(self):
        with pytest.raises(ValueError, match="not in allowed choices"):
            self._make()(polarity='grey')

    def test_required_missing_raises(self):
        @processor_version('1.0.0')
        class P(_Probe):
            mode: Annotated[str, Options('a', 'b')]

        with pytest.raises(TypeError, match="missing required"):
            P()
        assert P(mode='b').mode == 'b'

    def test_signature_introspectable(self):
        sig = inspect.signature(self._make().__init__)
        assert list(sig.parameters) == ['self', 'delta', 'polarity']
        assert sig.parameters['delta'].default == 1
        assert sig.parameters['delta'].kind is inspect.Parameter.KEYWORD_ONLY

    def test_post_init_called(self):
        @processor_version('1.0.0')
        class P(_Probe):
            mode: Annotated[str, Options('a', 'b', 'A', 'B')] = 'A'

            def __post_init__(self):
                self.mode = self.mode.lower()

        assert P(mode='B').mode == 'b'

    def test_custom_init_not_overwritten(self):
        @processor_version('1.0.0')
        class P(_Probe):
            sigma: Annotated[float, Range(min=0.1), Desc('sigma')] = 2.0

            def __init__(self, sigma=2.0, extra='custom'):
                self.sigma = sigma
                self.extra = extra

        p = P(sigma=3.0, extra='hello')
        assert p.extra == 'hello'
        assert P.__param_specs__[0].name == 'sigma'

    def test_base_class_empty(self):
        assert ImageProcessor.__param_specs__ == ()


# ---------------------------------------------------------------------------
# _resolve_params
# ---------------------------------------------------------------------------

class TestResolveParams:
    """Test _resolve_params runtime resolution."""

    def _make_processor(self):
        @processor_version('1.0.0')
        class P(_Probe):
            threshold: Annotated[float, Range(min=0, max=1), Desc('t')] = 0.5
            method: Annotated[str, Options('hard', 'soft'), Desc('m')] = 'hard'

        return P

    def test_defaults_resolved(self):
        params = self._make_processor()()._resolve_params({})
        assert params == {'threshold': 0.5, 'method': 'hard'}

    def test_kwargs_override_construction(self):
        p = self._make_processor()(threshold=0.3)
        assert p._resolve_params({})['threshold'] == 0.3
        assert p._resolve_params({'threshold': 0.9})['threshold'] == 0.9
        assert p.threshold == 0.3

    def test_validation_on_resolve(self):
        p = self._make_processor()()
        with pytest.raises(ValueError, match="above maximum"):
            p._resolve_params({'threshold': 2.0})

    def test_type_error_on_resolve(self):
        p = self._make_processor()()
        with pytest.raises(TypeError, match="threshold"):
            p._resolve_params({'threshold': 'bad'})

    def test_non_param_kwargs_ignored(self):
        p = self._make_processor()()
        params = p._resolve_params({
            'threshold': 0.7,
            'progress_callback': lambda f: None,
        })
        assert params == {'threshold': 0.7, 'method': 'hard'}


# ---------------------------------------------------------------------------
# MSERDetector declarations
# ---------------------------------------------------------------------------

class TestMSERDetectorParams:

    def test_param_names(self):
        names = [s.name for s in MSERDetector.__param_specs__]
        assert names == [
            'delta', 'min_area', 'max_area',
            'max_variation', 'min_diversity', 'polarity',
        ]

    def test_polarity_choices(self):
        spec = {s.name: s for s in MSERDetector.__param_specs__}['polarity']
        assert spec.choices == ('dark', 'bright', 'both')
        assert spec.default == 'dark'

    def test_descriptions_present(self):
        assert all(s.description for s in MSERDetector.__param_specs__)
