# -*- coding: utf-8 -*-
"""
Shared test fixtures - Small deterministic pixel buffers.

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
2026-10-17
"""

import numpy as np
import pytest

from pixlab.buffer import PixelBuffer


@pytest.fixture
def gray_ramp():
    """2x2 single-channel buffer with samples [0, 85, 170, 255]."""
    return PixelBuffer(2, 2, 1, bytes([0, 85, 170, 255]))


@pytest.fixture
def flat_gray():
    """4x4 single-channel buffer where every sample is 128."""
    return PixelBuffer(4, 4, 1, bytes([128] * 16))


@pytest.fixture
def rgb_image():
    """16x12 RGB buffer of reproducible random samples."""
    rng = np.random.default_rng(1234)
    return PixelBuffer.from_array(
        rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)
    )


@pytest.fixture
def rgba_image():
    """10x8 RGBA buffer of reproducible random samples."""
    rng = np.random.default_rng(99)
    return PixelBuffer.from_array(
        rng.integers(0, 256, size=(8, 10, 4), dtype=np.uint8)
    )


@pytest.fixture
def random_gray():
    """20x15 single-channel buffer of reproducible random samples."""
    rng = np.random.default_rng(7)
    return PixelBuffer.from_array(
        rng.integers(0, 256, size=(15, 20), dtype=np.uint8)
    )


@pytest.fixture
def impulse_gray():
    """7x7 black single-channel buffer with one white pixel at the centre."""
    data = np.zeros((7, 7), dtype=np.uint8)
    data[3, 3] = 255
    return PixelBuffer.from_array(data)
