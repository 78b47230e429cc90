# -*- coding: utf-8 -*-
"""
Spatial Filter Tests - Tests for convolution, box, Gaussian, sharpen,
Laplacian, unsharp mask, median, min and max filters.

Tests known responses on tiny images, replicate-border behaviour, shape
preservation and kernel-size recovery using fixtures from conftest.py.

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
2026-10-13

Modified
--------
2026-10-16
"""

import pytest
import numpy as np

from pixlab.buffer import PixelBuffer
from pixlab.exceptions import ValidationError
from pixlab.image_processing.filters import (
    AverageFilter,
    Convolution,
    GaussianFilter,
    LaplacianFilter,
    MaxFilter,
    MedianFilter,
    MinFilter,
    SharpenFilter,
    UnsharpMask,
    convolve,
)
from pixlab.image_processing.filters._validation import (
    normalize_kernel_size,
    validate_kernel,
)
from pixlab.image_processing.filters.kernels import (
    SOBEL_X,
    box_kernel,
    gaussian_kernel,
)


def _row(values):
    return PixelBuffer(len(values), 1, 1, bytes(values))


# ---------------------------------------------------------------------------
# Validation helper tests
# ---------------------------------------------------------------------------

class TestValidation:
    """Test shared validation helpers."""

    def test_kernel_size_odd_passthrough(self):
        assert normalize_kernel_size(5) == 5

    def test_kernel_size_even_bumped(self):
        assert normalize_kernel_size(4) == 5

    def test_kernel_size_minimum(self):
        assert normalize_kernel_size(1) == 3
        assert normalize_kernel_size(-7) == 3

    def test_kernel_size_type(self):
        with pytest.raises(ValidationError):
            normalize_kernel_size(3.0)
        with pytest.raises(ValidationError):
            normalize_kernel_size(True)

    def test_kernel_not_square(self):
        with pytest.raises(ValidationError):
            validate_kernel([[1, 2, 3]])

    def test_kernel_empty(self):
        with pytest.raises(ValidationError):
            validate_kernel(np.zeros((0, 0)))

    def test_even_kernel_padded(self):
        kernel = validate_kernel([[1, 2], [3, 4]])
        assert kernel.shape == (3, 3)
        assert kernel[0, 0] == 1
        assert kernel[2].sum() == 0
        assert kernel[:, 2].sum() == 0


# ---------------------------------------------------------------------------
# Kernel tests
# ---------------------------------------------------------------------------

class TestKernels:
    """Test kernel construction."""

    def test_box_sums_to_one(self):
        assert box_kernel(5).sum() == pytest.approx(1.0)

    def test_gaussian_normalized_and_symmetric(self):
        kernel = gaussian_kernel(5, 1.4)
        assert kernel.shape == (5, 5)
        assert kernel.sum() == pytest.approx(1.0)
        np.testing.assert_allclose(kernel, kernel.T)
        np.testing.assert_allclose(kernel, kernel[::-1, ::-1])
        assert kernel[2, 2] == kernel.max()

    def test_constants_read_only(self):
        with pytest.raises(ValueError):
            SOBEL_X[0, 0] = 5.0


# ---------------------------------------------------------------------------
# Convolution tests
# ---------------------------------------------------------------------------

class TestConvolution:
    """Test custom-kernel correlation."""

    def test_even_kernel_takes_upper_left(self):
        result = convolve(_row([10, 20, 30]), [[1, 0], [0, 0]])
        assert result.samples.tolist() == [10, 10, 20]

    def test_not_flipped(self):
        kernel = [[0, 0, 0], [0, 0, 1], [0, 0, 0]]
        assert convolve(_row([10, 20, 30]), kernel).samples.tolist() == [20, 30, 30]

    def test_identity_kernel(self, rgb_image):
        kernel = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
        assert convolve(rgb_image, kernel) == rgb_image

    def test_result_clamped(self):
        result = convolve(_row([100, 200]), [[0, 0, 0], [0, 3, 0], [0, 0, 0]])
        assert result.samples.tolist() == [255, 255]

    def test_kernel_per_call(self, gray_ramp):
        conv = Convolution()
        kernel = np.zeros((3, 3))
        kernel[1, 1] = 1.0
        assert conv.apply(gray_ramp, kernel=kernel) == gray_ramp

    def test_missing_kernel(self, gray_ramp):
        with pytest.raises(ValidationError):
            Convolution().apply(gray_ramp)

    def test_bad_kernel_rejected_at_init(self):
        with pytest.raises(ValidationError):
            Convolution(kernel=[[1, 2, 3], [4, 5, 6]])


# ---------------------------------------------------------------------------
# Smoothing tests
# ---------------------------------------------------------------------------

class TestSmoothing:
    """Test box and Gaussian smoothing."""

    def test_average_replicates_border(self):
        assert AverageFilter().apply(_row([0, 0, 90])).samples.tolist() == [0, 30, 60]

    def test_average_flat(self, flat_gray):
        assert AverageFilter(kernel_size=5).apply(flat_gray) == flat_gray

    def test_average_even_size_bumped(self):
        assert AverageFilter(kernel_size=4).kernel_size == 5

    def test_gaussian_flat(self, flat_gray):
        assert GaussianFilter(kernel_size=7, sigma=2.0).apply(flat_gray) == flat_gray

    def test_gaussian_spreads_impulse(self, impulse_gray):
        result = GaussianFilter().apply(impulse_gray)
        center = result.get_sample(3, 3, 0)
        assert 0 < result.get_sample(2, 3, 0) < center
        assert result.get_sample(0, 0, 0) == 0

    def test_gaussian_sigma_clamped(self):
        assert GaussianFilter(sigma=0.0).sigma == 0.1

    def test_shape_preserved(self, rgba_image):
        result = GaussianFilter(kernel_size=5).apply(rgba_image)
        assert result.shape == rgba_image.shape


# ---------------------------------------------------------------------------
# Sharpening tests
# ---------------------------------------------------------------------------

class TestSharpening:
    """Test sharpen, Laplacian and unsharp masking."""

    def test_sharpen_flat(self, flat_gray):
        assert SharpenFilter().apply(flat_gray) == flat_gray

    def test_sharpen_impulse(self, impulse_gray):
        result = SharpenFilter().apply(impulse_gray)
        assert result.get_sample(3, 3, 0) == 255
        assert result.get_sample(2, 3, 0) == 0

    def test_laplacian_flat_is_zero(self, flat_gray):
        assert not LaplacianFilter().apply(flat_gray).samples.any()

    def test_laplacian_impulse(self, impulse_gray):
        result = LaplacianFilter().apply(impulse_gray)
        assert result.get_sample(3, 3, 0) == 255
        assert result.get_sample(2, 2, 0) == 0

    def test_unsharp_flat(self, flat_gray):
        assert UnsharpMask().apply(flat_gray) == flat_gray

    def test_unsharp_zero_amount_identity(self, rgb_image):
        assert UnsharpMask(amount=0.0).apply(rgb_image) == rgb_image

    def test_unsharp_boosts_edge(self):
        data = np.zeros((5, 6), dtype=np.uint8)
        data[:, 3:] = 200
        result = UnsharpMask().apply(PixelBuffer.from_array(data))
        assert result.get_sample(2, 2, 0) == 0
        assert result.get_sample(3, 2, 0) > 200


# ---------------------------------------------------------------------------
# Rank filter tests
# ---------------------------------------------------------------------------

class TestRankFilters:
    """Test median, min and max filters."""

    def test_median_removes_impulse(self, impulse_gray):
        assert not MedianFilter().apply(impulse_gray).samples.any()

    def test_median_flat(self, flat_gray):
        assert MedianFilter(kernel_size=5).apply(flat_gray) == flat_gray

    def test_median_is_input_sample(self, random_gray):
        result = MedianFilter().apply(random_gray)
        assert set(np.unique(result.samples)) <= set(np.unique(random_gray.samples))

    def test_min_removes_impulse(self, impulse_gray):
        assert not MinFilter().apply(impulse_gray).samples.any()

    def test_max_grows_impulse(self, impulse_gray):
        result = MaxFilter().apply(impulse_gray)
        plane = result.plane(0)
        assert (plane[2:5, 2:5] == 255).all()
        assert int(plane.sum()) == 9 * 255

    def test_max_five(self, impulse_gray):
        plane = MaxFilter(kernel_size=5).apply(impulse_gray).plane(0)
        assert int((plane == 255).sum()) == 25

    def test_ordering(self, random_gray):
        low = MinFilter().apply(random_gray).array.astype(int)
        mid = MedianFilter().apply(random_gray).array.astype(int)
        high = MaxFilter().apply(random_gray).array.astype(int)
        assert (low <= mid).all()
        assert (mid <= high).all()

    def test_even_size_bumped(self):
        assert MedianFilter(kernel_size=4).kernel_size == 5

    def test_channels_independent(self, rgb_image):
        result = MaxFilter().apply(rgb_image)
        single = PixelBuffer.from_array(rgb_image.plane(1).copy())
        np.testing.assert_array_equal(result.plane(1), MaxFilter().apply(single).plane(0))
