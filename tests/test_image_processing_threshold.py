# -*- coding: utf-8 -*-
"""
Threshold Tests - Global (fixed, Otsu, triangle, mean, double) and local
(adaptive, Niblack, Sauvola) binarization.

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
2026-10-13

Modified
--------
2026-10-16
"""

import numpy as np
import pytest

from pixlab.buffer import PixelBuffer
from pixlab.image_processing.histogram import histogram_of
from pixlab.image_processing.threshold import (
    AdaptiveThreshold,
    DoubleThreshold,
    FixedThreshold,
    MeanThreshold,
    NiblackThreshold,
    OtsuThreshold,
    SauvolaThreshold,
    TriangleThreshold,
    binarize,
    local_mean,
    local_statistics,
    otsu_threshold_value,
    triangle_threshold_value,
)


def _row(values):
    return PixelBuffer(len(values), 1, 1, bytes(values))


# =====================================================================
# Global thresholds
# =====================================================================

class TestBinarize:
    """Test the shared comparison."""

    def test_inclusive(self):
        gray = np.array([[99, 100, 101]], dtype=np.uint8)
        assert binarize(gray, 100).tolist() == [[0, 255, 255]]

    def test_per_pixel_threshold(self):
        gray = np.array([[50, 50]], dtype=np.uint8)
        threshold = np.array([[49.5, 50.5]])
        assert binarize(gray, threshold).tolist() == [[255, 0]]


class TestFixedThreshold:
    """Test fixed-level binarization."""

    def test_default(self, gray_ramp):
        assert FixedThreshold().apply(gray_ramp).samples.tolist() == [0, 0, 255, 255]

    def test_threshold_at_sample(self, gray_ramp):
        result = FixedThreshold(threshold=85).apply(gray_ramp)
        assert result.samples.tolist() == [0, 255, 255, 255]

    def test_color_input_single_channel(self, rgb_image):
        result = FixedThreshold().apply(rgb_image)
        assert result.channels == 1
        assert set(np.unique(result.samples).tolist()) <= {0, 255}

    def test_threshold_clamped(self):
        assert FixedThreshold(threshold=300).threshold == 255


class TestOtsuThreshold:
    """Test between-class variance thresholding."""

    def test_bimodal_value(self):
        buf = _row([10, 20, 200, 210])
        assert OtsuThreshold().compute_threshold(buf) == 20

    def test_bimodal_output(self):
        result = OtsuThreshold().apply(_row([10, 20, 200, 210]))
        assert result.samples.tolist() == [0, 255, 255, 255]

    def test_separates_clusters(self):
        values = [30, 32, 34, 36, 38, 180, 185, 190, 195, 200]
        t = OtsuThreshold().compute_threshold(_row(values))
        assert 38 <= t < 180

    def test_flat_image(self, flat_gray):
        assert OtsuThreshold().compute_threshold(flat_gray) == 0
        result = OtsuThreshold().apply(flat_gray)
        assert (result.samples == 255).all()

    def test_empty_histogram(self):
        assert otsu_threshold_value(np.zeros(256)) == 0


class TestTriangleThreshold:
    """Test the triangle method."""

    def test_peak_at_low_end(self):
        hist = np.zeros(256)
        hist[0] = 10
        hist[1:5] = 1
        assert triangle_threshold_value(hist) == 1

    def test_peak_at_high_end(self):
        hist = np.zeros(256)
        hist[255] = 10
        hist[251:255] = 1
        assert triangle_threshold_value(hist) == 254

    def test_single_bin(self):
        hist = np.zeros(256)
        hist[77] = 5
        assert triangle_threshold_value(hist) == 77

    def test_image(self):
        buf = _row([0] * 10 + [1, 2, 3, 4])
        assert TriangleThreshold().compute_threshold(buf) == 1
        assert TriangleThreshold().apply(buf).samples.tolist() == [0] * 10 + [255] * 4


class TestMeanThreshold:
    """Test mean-intensity thresholding."""

    def test_rounded_mean(self, gray_ramp):
        assert MeanThreshold().compute_threshold(gray_ramp) == 128

    def test_output(self, gray_ramp):
        assert MeanThreshold().apply(gray_ramp).samples.tolist() == [0, 0, 255, 255]


class TestDoubleThreshold:
    """Test three-level output."""

    def test_levels(self):
        result = DoubleThreshold().apply(_row([0, 50, 100, 150, 200]))
        assert result.samples.tolist() == [0, 128, 128, 255, 255]

    def test_custom_bounds(self, gray_ramp):
        result = DoubleThreshold(low=100, high=200).apply(gray_ramp)
        assert result.samples.tolist() == [0, 0, 128, 255]


# =====================================================================
# Local thresholds
# =====================================================================

class TestLocalStatistics:
    """Test windowed mean and deviation."""

    def test_flat(self, flat_gray):
        mean, std = local_statistics(flat_gray.plane(0), 3)
        np.testing.assert_allclose(mean, 128.0)
        np.testing.assert_allclose(std, 0.0)

    def test_known_window(self):
        gray = np.array([[0, 0, 90]], dtype=np.uint8)
        mean, std = local_statistics(gray, 3)
        assert mean[0, 1] == pytest.approx(30.0)
        assert std[0, 1] == pytest.approx(np.sqrt(1800.0))

    def test_mean_matches_statistics(self, random_gray):
        gray = random_gray.plane(0)
        mean, _ = local_statistics(gray, 5)
        np.testing.assert_allclose(local_mean(gray, 5), mean)

    def test_matches_direct_scan(self, random_gray):
        gray = random_gray.plane(0).astype(np.float64)
        padded = np.pad(gray, 1, mode='edge')
        window = padded[4:7, 9:12]
        mean, std = local_statistics(random_gray.plane(0), 3)
        assert mean[4, 9] == pytest.approx(window.mean())
        assert std[4, 9] == pytest.approx(window.std())


class TestAdaptiveThreshold:
    """Test mean-offset thresholding."""

    def test_flat_above_offset_mean(self, flat_gray):
        assert (AdaptiveThreshold(block_size=3).apply(flat_gray).samples == 255).all()

    def test_negative_offset(self, flat_gray):
        result = AdaptiveThreshold(block_size=3, c=-5.0).apply(flat_gray)
        assert not result.samples.any()

    def test_isolates_bright_pixel(self, impulse_gray):
        result = AdaptiveThreshold(block_size=3, c=-5.0).apply(impulse_gray)
        assert result.get_sample(3, 3, 0) == 255
        assert int(result.samples.sum()) == 255

    def test_block_size_bumped(self):
        assert AdaptiveThreshold(block_size=10).block_size == 11


class TestNiblackSauvola:
    """Test deviation-based local thresholds."""

    def test_niblack_flat(self, flat_gray):
        assert (NiblackThreshold(window_size=3).apply(flat_gray).samples == 255).all()

    def test_niblack_isolates_bright_pixel(self, impulse_gray):
        result = NiblackThreshold(window_size=3).apply(impulse_gray)
        assert result.get_sample(3, 3, 0) == 255
        assert result.get_sample(2, 3, 0) == 0

    def test_sauvola_flat(self, flat_gray):
        assert (SauvolaThreshold(window_size=3).apply(flat_gray).samples == 255).all()

    def test_sauvola_dark_page(self):
        data = np.full((5, 5), 220, dtype=np.uint8)
        data[2, 2] = 20
        result = SauvolaThreshold(window_size=3).apply(PixelBuffer.from_array(data))
        assert result.get_sample(2, 2, 0) == 0
        assert result.get_sample(0, 0, 0) == 255

    def test_color_input_single_channel(self, rgb_image):
        assert SauvolaThreshold().apply(rgb_image).channels == 1
        assert NiblackThreshold().apply(rgb_image).channels == 1
