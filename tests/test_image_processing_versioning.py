# -*- coding: utf-8 -*-
"""
Processor Versioning Tests.

Tests for the @processor_version and @processor_tags decorators and the
missing-version warning raised by ImageProcessor at first instantiation.

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

import warnings

import pytest

from mserkit.image_processing.base import ImageProcessor
from mserkit.image_processing.detection import ImageDetector, MSERDetector
from mserkit.image_processing.detection.models import DetectionSet
from mserkit.image_processing.versioning import processor_tags, processor_version
from mserkit.vocabulary import DetectionType, ProcessorCategory


class _Probe(ImageDetector):

    @property
    def output_fields(self):
        return ()

    def detect(self, source, **kwargs):
        return DetectionSet([], type(self).__name__, '0')


def _version_warnings(records):
    return [
        x for x in records
        if issubclass(x.category, UserWarning)
        and 'processor version' in str(x.message).lower()
    ]


# ---------------------------------------------------------------------------
# @processor_version decorator
# ---------------------------------------------------------------------------

class TestProcessorVersionDecorator:
    """Test that @processor_version stamps the version correctly."""

    def test_stamps_version_on_class(self):
        @processor_version('2.1.0')
        class _Versioned(_Probe):
            pass

        assert _Versioned.__processor_version__ == '2.1.0'

    def test_version_string_preserved_exactly(self):
        @processor_version('0.0.1-alpha')
        class _Alpha(_Probe):
            pass

        assert _Alpha.__processor_version__ == '0.0.1-alpha'

    def test_works_on_plain_class(self):
        @processor_version('3.0.0')
        class _Plain:
            pass

        assert _Plain.__processor_version__ == '3.0.0'

    def test_decorated_class_is_same_class(self):
        class _Original(_Probe):
            pass

        assert processor_version('1.0.0')(_Original) is _Original

    def test_falls_back_to_package_version(self):
        @processor_version()
        class _Default(_Probe):
            pass

        assert isinstance(_Default.__processor_version__, str)
        assert _Default.__processor_version__

    def test_mser_detector_is_versioned(self):
        assert MSERDetector.__processor_version__ == '1.0.0'


# ---------------------------------------------------------------------------
# Version warning at instantiation
# ---------------------------------------------------------------------------

class TestMissingVersionWarning:
    """Unversioned concrete subclasses warn on first instantiation."""

    def test_warns_for_undecorated_concrete_class(self):
        class _Unversioned(_Probe):
            pass

        ImageProcessor._version_warned_classes.discard(_Unversioned)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Unversioned()

            found = _version_warnings(w)
            assert len(found) == 1
            assert '_Unversioned' in str(found[0].message)

    def test_warns_only_once(self):
        class _OnceOnly(_Probe):
            pass

        ImageProcessor._version_warned_classes.discard(_OnceOnly)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _OnceOnly()
            _OnceOnly()
            _OnceOnly()
            assert len(_version_warnings(w)) == 1

    def test_no_warning_for_decorated_class(self):
        @processor_version('1.0.0')
        class _Versioned(_Probe):
            pass

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Versioned()
            assert _version_warnings(w) == []

    def test_abstract_subclass_not_instantiable(self):
        with pytest.raises(TypeError):
            ImageDetector()


# ---------------------------------------------------------------------------
# @processor_tags decorator
# ---------------------------------------------------------------------------

class TestProcessorTags:

    def test_stamps_tags(self):
        @processor_tags(
            category=ProcessorCategory.SEGMENTATION,
            description='probe',
            detection_types=[DetectionType.CLASSIFICATION],
        )
        class _Tagged(_Probe):
            pass

        tags = _Tagged.__processor_tags__
        assert tags['category'] is ProcessorCategory.SEGMENTATION
        assert tags['description'] == 'probe'
        assert tags['detection_types'] == (DetectionType.CLASSIFICATION,)

    def test_defaults(self):
        @processor_tags()
        class _Bare(_Probe):
            pass

        assert _Bare.__processor_tags__ == {
            'category': None,
            'description': None,
            'detection_types': (),
        }

    def test_rejects_string_category(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='features')

    def test_rejects_string_detection_type(self):
        with pytest.raises(TypeError, match="DetectionType"):
            processor_tags(detection_types=['classification'])

    def test_mser_detector_tags(self):
        tags = MSERDetector.__processor_tags__
        assert tags['category'] is ProcessorCategory.FEATURES
        assert tags['detection_types'] == (DetectionType.PHENOMENON_SIGNATURE,)
        assert 'stable' in tags['description'].lower()
