# -*- coding: utf-8 -*-
"""
PixLab - Image-processing laboratory library.

Pixel-buffer management plus the point operations, convolution filters,
histogram enhancement, thresholding, edge detection and morphology
operators behind an interactive image-processing laboratory. Every
operation consumes a ``PixelBuffer`` and returns a new one.

Dependencies
------------
numpy
scipy
Pillow

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
2026-10-05

Modified
--------
2026-10-19
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from pixlab.exceptions import (
    PixlabError,
    ValidationError,
    DecodeError,
    EncodeError,
    DimensionMismatchError,
    DependencyError,
)
from pixlab.vocabulary import (
    ProcessorCategory,
    EqualizationMode,
    StructuringElementShape,
    MorphologyOperation,
    BitwiseOperation,
    ImageFormat,
)
from pixlab.buffer import PixelBuffer, to_uint8
from pixlab.color import (
    Color,
    luminance,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
)
from pixlab.catalog import apply_operation, get_operation, list_operations

__all__ = [
    'PixlabError',
    'ValidationError',
    'DecodeError',
    'EncodeError',
    'DimensionMismatchError',
    'DependencyError',
    'ProcessorCategory',
    'EqualizationMode',
    'StructuringElementShape',
    'MorphologyOperation',
    'BitwiseOperation',
    'ImageFormat',
    'PixelBuffer',
    'to_uint8',
    'Color',
    'luminance',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'rgb_to_cmyk',
    'cmyk_to_rgb',
    'apply_operation',
    'get_operation',
    'list_operations',
]
