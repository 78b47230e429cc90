# -*- coding: utf-8 -*-
"""
Image Processing Module - Point, neighbourhood and segmentation operations.

Every operation is an ``ImageTransform``: it takes a ``PixelBuffer``,
never modifies it, and returns a newly allocated ``PixelBuffer``. Tunable
parameters are declared with ``Annotated`` fields, set at construction
and overridable per call through ``apply(source, **overrides)``.

Sub-modules
-----------
histogram.py
    Histograms, CDFs and ``HistogramEqualization`` (gray, RGB, HSV).
point.py
    Lookup-table transforms: contrast, brightness, gamma, log, power,
    invert, clip, quantize, gain/bias, min/max stretch, bitwise ops.
filters/
    Convolution (custom, box, Gaussian, sharpen, Laplacian, unsharp) and
    rank filters (median, min, max).
threshold/
    Global (fixed, Otsu, triangle, mean, double) and local (adaptive,
    Niblack, Sauvola) binarization.
edges.py
    Sobel, Prewitt and Canny-style edge maps.
morphology.py
    Structuring elements and ``MorphologicalFilter``.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Options``, ``Odd``, ``Desc`` constraint markers.

Usage
-----
    >>> from pixlab import PixelBuffer
    >>> from pixlab.image_processing import GaussianFilter, OtsuThreshold
    >>>
    >>> photo = PixelBuffer.load('photo.png')
    >>> smooth = GaussianFilter(kernel_size=5, sigma=1.2).apply(photo)
    >>> binary = OtsuThreshold().apply(smooth)

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
2026-10-07

Modified
--------
2026-10-17
"""

from pixlab.image_processing.base import (
    ChannelwiseTransformMixin,
    GrayscaleTransformMixin,
    ImageProcessor,
    ImageTransform,
)
from pixlab.image_processing.histogram import (
    HistogramEqualization,
    channel_histograms,
    compute_histogram,
    cumulative_distribution,
    equalization_lut,
    equalize,
    luminance_histogram,
)
from pixlab.image_processing.point import (
    AutoContrast,
    BitwiseCombine,
    BitwiseNot,
    BrightnessContrast,
    ClipBrightness,
    GainBias,
    GammaCorrection,
    Invert,
    LinearContrast,
    LogTransform,
    LookupTableTransform,
    MinMaxStretch,
    PowerTransform,
    Quantize,
)
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
from pixlab.image_processing.threshold import (
    AdaptiveThreshold,
    DoubleThreshold,
    FixedThreshold,
    MeanThreshold,
    NiblackThreshold,
    OtsuThreshold,
    SauvolaThreshold,
    TriangleThreshold,
)
from pixlab.image_processing.edges import CannyEdges, PrewittEdges, SobelEdges
from pixlab.image_processing.morphology import (
    MorphologicalFilter,
    make_structuring_element,
)
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.image_processing.params import Desc, Odd, Options, ParamSpec, Range

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ChannelwiseTransformMixin',
    'GrayscaleTransformMixin',
    'HistogramEqualization',
    'compute_histogram',
    'luminance_histogram',
    'channel_histograms',
    'cumulative_distribution',
    'equalization_lut',
    'equalize',
    'LookupTableTransform',
    'LinearContrast',
    'AutoContrast',
    'BrightnessContrast',
    'GammaCorrection',
    'LogTransform',
    'PowerTransform',
    'Invert',
    'BitwiseNot',
    'ClipBrightness',
    'Quantize',
    'GainBias',
    'MinMaxStretch',
    'BitwiseCombine',
    'Convolution',
    'AverageFilter',
    'GaussianFilter',
    'SharpenFilter',
    'LaplacianFilter',
    'UnsharpMask',
    'MedianFilter',
    'MinFilter',
    'MaxFilter',
    'convolve',
    'FixedThreshold',
    'OtsuThreshold',
    'TriangleThreshold',
    'MeanThreshold',
    'DoubleThreshold',
    'AdaptiveThreshold',
    'NiblackThreshold',
    'SauvolaThreshold',
    'SobelEdges',
    'PrewittEdges',
    'CannyEdges',
    'MorphologicalFilter',
    'make_structuring_element',
    'processor_version',
    'processor_tags',
    'Range',
    'Options',
    'Odd',
    'Desc',
    'ParamSpec',
]
