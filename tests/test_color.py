# -*- coding: utf-8 -*-
"""
Color Conversion Tests - RGB/HSV/CMYK conversions and the Color model.

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
2026-10-12

Modified
--------
2026-10-15
"""

import itertools

import numpy as np
import pytest

from pixlab.buffer import PixelBuffer
from pixlab.color import (
    Color,
    cmyk_to_rgb,
    hsv_to_rgb,
    hsv_to_rgb_array,
    luminance,
    rgb_to_cmyk,
    rgb_to_hsv,
    rgb_to_hsv_array,
)


_STEPS = (0.0, 0.2, 0.5, 0.8, 1.0)


class TestRgbToHsv:
    """Test the forward HSV conversion."""

    def test_pure_red(self):
        assert rgb_to_hsv(1.0, 0.0, 0.0) == (0.0, 1.0, 1.0)

    def test_red_pixel_from_buffer(self):
        buf = PixelBuffer(1, 1, 3, bytes([255, 0, 0]))
        r, g, b = (buf.get_sample(0, 0, c) / 255.0 for c in range(3))
        assert rgb_to_hsv(r, g, b) == (0.0, 1.0, 1.0)

    @pytest.mark.parametrize('rgb,hue', [
        ((0.0, 1.0, 0.0), 120.0),
        ((0.0, 0.0, 1.0), 240.0),
        ((1.0, 1.0, 0.0), 60.0),
        ((1.0, 0.0, 1.0), 300.0),
    ])
    def test_primary_hues(self, rgb, hue):
        h, s, v = rgb_to_hsv(*rgb)
        assert h == pytest.approx(hue)
        assert s == pytest.approx(1.0)
        assert v == pytest.approx(1.0)

    def test_gray_has_zero_hue_and_saturation(self):
        assert rgb_to_hsv(0.4, 0.4, 0.4) == (0.0, 0.0, pytest.approx(0.4))

    def test_black(self):
        assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)

    def test_hue_in_range(self):
        h, _, _ = rgb_to_hsv(1.0, 0.0, 0.01)
        assert 0.0 <= h < 360.0


class TestHsvToRgb:
    """Test the inverse HSV conversion."""

    def test_hue_wraps(self):
        assert hsv_to_rgb(360.0, 1.0, 1.0) == pytest.approx(hsv_to_rgb(0.0, 1.0, 1.0))

    def test_sector_boundaries(self):
        assert hsv_to_rgb(120.0, 1.0, 1.0) == pytest.approx((0.0, 1.0, 0.0))
        assert hsv_to_rgb(240.0, 1.0, 1.0) == pytest.approx((0.0, 0.0, 1.0))

    def test_round_trip(self):
        for rgb in itertools.product(_STEPS, repeat=3):
            assert hsv_to_rgb(*rgb_to_hsv(*rgb)) == pytest.approx(rgb, abs=1e-9)


class TestCmyk:
    """Test subtractive conversions."""

    def test_black_is_pure_key(self):
        assert rgb_to_cmyk(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)

    def test_red(self):
        assert rgb_to_cmyk(1.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 1.0, 0.0))

    def test_round_trip(self):
        for rgb in itertools.product(_STEPS, repeat=3):
            assert cmyk_to_rgb(*rgb_to_cmyk(*rgb)) == pytest.approx(rgb, abs=1e-9)


class TestArrayConversions:
    """Test the vectorized variants against the scalar functions."""

    def test_matches_scalar(self):
        rng = np.random.default_rng(5)
        rgb = rng.random((30, 3))
        rgb[0] = (0.3, 0.3, 0.3)
        hsv = rgb_to_hsv_array(rgb)
        for row, expected in zip(hsv, (rgb_to_hsv(*p) for p in rgb)):
            assert tuple(row) == pytest.approx(expected)

    def test_round_trip(self):
        rng = np.random.default_rng(6)
        rgb = rng.random((4, 5, 3))
        np.testing.assert_allclose(hsv_to_rgb_array(rgb_to_hsv_array(rgb)), rgb, atol=1e-9)

    def test_preserves_leading_shape(self):
        assert rgb_to_hsv_array(np.zeros((2, 3, 3))).shape == (2, 3, 3)


class TestLuminance:
    """Test the grayscale weighting."""

    def test_weights(self):
        assert luminance(np.array([[255.0, 0.0, 0.0]]))[0] == pytest.approx(76.245)

    def test_single_channel_passthrough(self):
        data = np.array([[[3], [9]]], dtype=np.uint8)
        np.testing.assert_array_equal(luminance(data), [[3.0, 9.0]])


class TestColor:
    """Test the synchronized color model."""

    def test_set_hsv_updates_rgb(self):
        color = Color()
        color.set_hsv(120.0, 1.0, 1.0)
        assert color.rgb == pytest.approx((0.0, 1.0, 0.0))
        assert color.hex_rgb == '#00FF00'

    def test_set_cmyk_black(self):
        color = Color(1.0, 1.0, 1.0)
        color.set_cmyk(0.0, 0.0, 0.0, 1.0)
        assert color.rgb == (0.0, 0.0, 0.0)
        assert color.hsv == (0.0, 0.0, 0.0)

    def test_set_rgb_updates_cmyk(self):
        color = Color()
        color.set_rgb(1.0, 0.0, 0.0)
        assert color.cmyk == pytest.approx((0.0, 1.0, 1.0, 0.0))
        assert color.hsv == (0.0, 1.0, 1.0)

    def test_components_clamped(self):
        assert Color(2.0, -1.0, 0.5).rgb == (1.0, 0.0, 0.5)

    def test_byte_round_trip(self):
        color = Color.from_bytes(255, 128, 0)
        assert color.to_bytes() == (255, 128, 0)
        assert color.hex_rgb == '#FF8000'

    def test_hex_rounds(self):
        # 0.5 * 255 = 127.5 rounds up to 0x80
        assert Color(0.5, 0.5, 0.5).hex_rgb == '#808080'

    def test_repr(self):
        assert repr(Color(0.0, 0.0, 1.0)) == 'Color(#0000FF)'
