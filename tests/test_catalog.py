# -*- coding: utf-8 -*-
"""
Operation Catalog Tests - Name lookup, category filtering, presets and
dispatch of every registered operation.

Dependencies
------------
pytest

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
2026-10-15

Modified
--------
2026-10-16
"""

import numpy as np
import pytest

from pixlab import apply_operation, get_operation, list_operations
from pixlab.catalog import operation_category, operation_class, operation_parameters
from pixlab.exceptions import ValidationError
from pixlab.image_processing.base import ImageTransform
from pixlab.image_processing.morphology import MorphologicalFilter
from pixlab.image_processing.point import BitwiseCombine
from pixlab.vocabulary import ProcessorCategory


_SINGLE_CHANNEL_CATEGORIES = {
    ProcessorCategory.THRESHOLD,
    ProcessorCategory.EDGES,
    ProcessorCategory.MORPHOLOGY,
}

_TWO_OPERAND = {'bitwise_and', 'bitwise_or', 'bitwise_xor'}


class TestListing:
    """Test operation discovery."""

    def test_sorted_and_complete(self):
        names = list_operations()
        assert names == sorted(names)
        assert len(names) == 45
        for name in ('equalize_hsv', 'auto_contrast', 'unsharp_mask',
                     'sauvola_threshold', 'canny', 'blackhat'):
            assert name in names

    def test_filter_by_category(self):
        assert list_operations('edges') == ['canny', 'prewitt', 'sobel']
        assert list_operations(ProcessorCategory.HISTOGRAM) == [
            'equalize_gray', 'equalize_hsv', 'equalize_rgb',
        ]

    def test_categories_partition(self):
        total = sum(len(list_operations(c)) for c in ProcessorCategory)
        assert total == len(list_operations())

    def test_unknown_category(self):
        with pytest.raises(ValidationError):
            list_operations('segmentation')


class TestLookup:
    """Test class and parameter lookup."""

    def test_operation_class(self):
        assert operation_class('dilate') is MorphologicalFilter
        assert issubclass(operation_class('gamma_correction'), ImageTransform)

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match='Unknown operation'):
            operation_class('sepia')

    def test_category(self):
        assert operation_category('quantize') is ProcessorCategory.POINT
        assert operation_category('median_filter') is ProcessorCategory.FILTERS

    def test_presets_hidden_from_parameters(self):
        names = [spec.name for spec in operation_parameters('open')]
        assert names == ['kernel_size', 'element']
        assert operation_parameters('bitwise_xor') == ()

    def test_parameters_carry_ranges(self):
        spec = {s.name: s for s in operation_parameters('auto_contrast')}
        assert spec['min_percentile'].min_value == 0.0
        assert spec['max_percentile'].max_value == 100.0
        assert spec['max_percentile'].default == 98.0


class TestDispatch:
    """Test instantiation and application."""

    def test_preset_applied(self):
        op = get_operation('bitwise_or')
        assert isinstance(op, BitwiseCombine)
        assert op.operation == 'or'

    def test_params_forwarded(self):
        assert get_operation('gaussian_filter', kernel_size=7).kernel_size == 7

    def test_unexpected_param(self):
        with pytest.raises(TypeError):
            get_operation('invert', amount=2)

    @pytest.mark.parametrize('name', [
        'invert', 'sobel', 'otsu_threshold', 'sharpen_filter', 'min_max_stretch',
    ])
    def test_parameterless_operation_rejects_params(self, name):
        with pytest.raises(TypeError, match='unexpected'):
            get_operation(name, threshold=200)

    def test_apply_with_operand(self, gray_ramp):
        mask = gray_ramp.clone()
        result = apply_operation('bitwise_xor', gray_ramp, operand=mask)
        assert not result.samples.any()

    def test_apply_with_params(self, gray_ramp):
        result = apply_operation('fixed_threshold', gray_ramp, threshold=100)
        assert result.samples.tolist() == [0, 0, 255, 255]

    @pytest.mark.parametrize('name', list_operations())
    def test_every_operation_runs(self, name, rgb_image):
        before = rgb_image.clone()
        params = {}
        operand = None
        if name == 'convolution':
            params['kernel'] = np.full((3, 3), 1.0 / 9.0)
        if name in _TWO_OPERAND:
            operand = rgb_image.clone()

        result = apply_operation(name, rgb_image, operand=operand, **params)

        assert rgb_image == before
        assert (result.width, result.height) == (16, 12)
        if operation_category(name) in _SINGLE_CHANNEL_CATEGORIES or name == 'equalize_gray':
            assert result.channels == 1
        else:
            assert result.channels == 3

    @pytest.mark.parametrize('name', list_operations())
    def test_every_operation_versioned(self, name):
        assert operation_class(name).__processor_version__
