# -*- coding: utf-8 -*-
"""
PixLab Vocabulary - Enumerations shared across the processing library.

Canonical identifiers for processor categories, histogram equalization
modes, structuring element shapes, morphological and bitwise operations,
and the image file formats handled by the codec layer. String values are
the names exposed to the front end and accepted by processors that take
an option name.

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
2026-10-05

Modified
--------
2026-10-14
"""

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a panel of the laboratory front end.
    """

    HISTOGRAM = "histogram"
    POINT = "point"
    FILTERS = "filters"
    THRESHOLD = "threshold"
    EDGES = "edges"
    MORPHOLOGY = "morphology"


class EqualizationMode(Enum):
    """Histogram equalization strategies."""

    GRAY = "gray"
    RGB = "rgb"
    HSV = "hsv"


class StructuringElementShape(Enum):
    """Structuring element shapes for morphological operators."""

    RECT = "rect"
    CROSS = "cross"
    ELLIPSE = "ellipse"


class MorphologyOperation(Enum):
    """Morphological operators and their compositions."""

    ERODE = "erode"
    DILATE = "dilate"
    OPEN = "open"
    CLOSE = "close"
    GRADIENT = "gradient"
    TOPHAT = "tophat"
    BLACKHAT = "blackhat"


class BitwiseOperation(Enum):
    """Channel-wise bitwise combinations of two buffers."""

    AND = "and"
    OR = "or"
    XOR = "xor"


class ImageFormat(Enum):
    """File formats supported by the codec layer."""

    PNG = "png"
    JPEG = "jpeg"
    BMP = "bmp"


def option_values(enum_cls: type) -> tuple:
    """Return the string values of *enum_cls* in declaration order."""
    return tuple(member.value for member in enum_cls)
