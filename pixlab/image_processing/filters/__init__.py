# -*- coding: utf-8 -*-
"""
Spatial Filters - Convolution and order-statistic neighbourhood filters.

All filters inherit from ``ChannelwiseTransformMixin`` and
``ImageTransform``, applying a 2D operation to every channel plane
independently with replicate-border sampling.

Linear Filters
    ``Convolution``: arbitrary square kernel
    ``AverageFilter``: box averaging
    ``GaussianFilter``: Gaussian smoothing
    ``SharpenFilter``, ``LaplacianFilter``: fixed 3x3 high-pass kernels
    ``UnsharpMask``: unsharp masking

Rank Filters
    ``MedianFilter``: median (edge-preserving denoising)
    ``MinFilter``: local minimum
    ``MaxFilter``: local maximum

Dependencies
------------
scipy

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
2026-10-09

Modified
--------
2026-10-16
"""

from pixlab.image_processing.filters.kernels import (
    LAPLACIAN,
    PREWITT_X,
    PREWITT_Y,
    SHARPEN,
    SOBEL_X,
    SOBEL_Y,
    box_kernel,
    gaussian_kernel,
)
from pixlab.image_processing.filters.linear import (
    AverageFilter,
    Convolution,
    GaussianFilter,
    LaplacianFilter,
    SharpenFilter,
    UnsharpMask,
    convolve,
    correlate_plane,
)
from pixlab.image_processing.filters.rank import MaxFilter, MedianFilter, MinFilter

__all__ = [
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
    'correlate_plane',
    'box_kernel',
    'gaussian_kernel',
    'SOBEL_X',
    'SOBEL_Y',
    'PREWITT_X',
    'PREWITT_Y',
    'SHARPEN',
    'LAPLACIAN',
]
