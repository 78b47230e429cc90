# -*- coding: utf-8 -*-
"""
Versioning Tests - ``@processor_version``, ``@processor_tags`` and the
missing-version warning.

Dependencies
------------
pytest

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
2026-10-12

Modified
--------
2026-10-14
"""

import warnings
from abc import abstractmethod

import pytest

from pixlab.image_processing.base import ImageProcessor, ImageTransform
from pixlab.image_processing.edges import CannyEdges
from pixlab.image_processing.point import Invert
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import ProcessorCategory


def _version_warnings(records):
    return [
        x for x in records
        if issubclass(x.category, UserWarning)
        and 'processor version' in str(x.message).lower()
    ]


class TestProcessorVersion:
    """Test the version decorator."""

    def test_stamps_version(self):
        @processor_version('2.1.0')
        class _Stamped(ImageTransform):
            def apply(self, source, **kwargs):
                return source.clone()

        assert _Stamped.__processor_version__ == '2.1.0'

    def test_returns_same_class(self):
        class _Original(ImageTransform):
            def apply(self, source, **kwargs):
                return source.clone()

        assert processor_version('1.0.0')(_Original) is _Original

    def test_library_processors_versioned(self):
        assert Invert.__processor_version__ == '1.0.0'
        assert CannyEdges.__processor_version__ == '1.0.0'


class TestMissingVersionWarning:
    """Unversioned concrete subclasses warn once at first instantiation."""

    def test_warns_once(self):
        class _Unversioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source.clone()

        ImageProcessor._version_warned_classes.discard(_Unversioned)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Unversioned()
            _Unversioned()
            found = _version_warnings(w)
        assert len(found) == 1
        assert '_Unversioned' in str(found[0].message)

    def test_no_warning_when_versioned(self):
        @processor_version('1.0.0')
        class _Versioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source.clone()

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            _Versioned()
            assert _version_warnings(w) == []

    def test_abstract_subclass_not_instantiable(self):
        class _AbstractMiddle(ImageProcessor):
            @abstractmethod
            def process(self):
                ...

        with pytest.raises(TypeError):
            _AbstractMiddle()


class TestProcessorTags:
    """Test the capability tag decorator."""

    def test_stamps_tags(self):
        @processor_tags(category=ProcessorCategory.POINT, description='demo')
        class _Tagged:
            pass

        assert _Tagged.__processor_tags__ == {
            'category': ProcessorCategory.POINT,
            'description': 'demo',
        }

    def test_rejects_non_enum_category(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='point')

    def test_library_processors_tagged(self):
        assert Invert.__processor_tags__['category'] is ProcessorCategory.POINT
        assert CannyEdges.__processor_tags__['category'] is ProcessorCategory.EDGES
