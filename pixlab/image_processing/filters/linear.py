# -*- coding: utf-8 -*-
"""
Linear Spatial Filters - Convolution-based smoothing and sharpening.

Every filter correlates each channel plane with a square kernel using
replicate-border sampling (``scipy.ndimage`` mode ``'nearest'``) in
float64, then stores the result with the library rounding rule.

- ``Convolution``: arbitrary user-supplied kernel.
- ``AverageFilter``: uniform ``1 / size**2`` box kernel.
- ``GaussianFilter``: normalized 2D Gaussian kernel.
- ``SharpenFilter`` / ``LaplacianFilter``: fixed 3x3 kernels.
- ``UnsharpMask``: ``v + amount * (v - gaussian(v))``.

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

# Standard library
from typing import Annotated, Any, Dict

# Third-party
import numpy as np
from scipy.ndimage import correlate, uniform_filter

# PixLab internal
from pixlab.buffer import PixelBuffer, to_uint8
from pixlab.exceptions import ValidationError
from pixlab.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from pixlab.image_processing.params import Desc, Odd, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.image_processing.filters._validation import BORDER_MODE, validate_kernel
from pixlab.image_processing.filters.kernels import (
    LAPLACIAN,
    SHARPEN,
    gaussian_kernel,
)
from pixlab.vocabulary import ProcessorCategory


def correlate_plane(plane: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Weighted neighbourhood sum of a 2D plane with replicate borders.

    Parameters
    ----------
    plane : np.ndarray
        2D array of samples.
    kernel : np.ndarray
        Odd-sized square float64 kernel. Not flipped.

    Returns
    -------
    np.ndarray
        float64 array, same shape as *plane*, unclamped.
    """
    return correlate(
        plane.astype(np.float64), kernel, mode=BORDER_MODE,
    )


def convolve(source: PixelBuffer, kernel: np.ndarray) -> PixelBuffer:
    """Filter every channel of *source* with *kernel*.

    Raises
    ------
    ValidationError
        If *kernel* is not square.
    """
    return Convolution(kernel=kernel).apply(source)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Convolution with a custom kernel')
class Convolution(ChannelwiseTransformMixin, ImageTransform):
    """Correlate every channel with a user-supplied square kernel.

    The kernel is applied as written (``kernel[ky][kx]`` weights the
    sample at offset ``(kx - size // 2, ky - size // 2)``). Results are
    clamped to ``[0, 255]``.

    Parameters
    ----------
    kernel : array-like
        Square matrix of weights. Even sizes are accepted and sampled
        with the centre at ``size // 2``.

    Examples
    --------
    >>> emboss = Convolution(kernel=[[-2, -1, 0], [-1, 1, 1], [0, 1, 2]])
    >>> result = emboss.apply(buf)
    """

    kernel: Annotated[object, Desc('Square weight matrix')] = None

    def __init__(self, kernel: Any = None) -> None:
        if kernel is not None:
            kernel = validate_kernel(kernel)
        self.kernel = kernel

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        if params['kernel'] is None:
            raise ValidationError("Convolution requires a kernel")
        kernel = validate_kernel(params['kernel'])
        return to_uint8(correlate_plane(plane, kernel))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Box (mean) smoothing')
class AverageFilter(ChannelwiseTransformMixin, ImageTransform):
    """Arithmetic mean over a ``kernel_size x kernel_size`` window.

    Backed by ``scipy.ndimage.uniform_filter`` (separable).

    Parameters
    ----------
    kernel_size : int
        Odd window side, ``>= 3``. Default 3.
    """

    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Square kernel side length (odd)')] = 3

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        working = plane.astype(np.float64)
        return to_uint8(
            uniform_filter(working, size=params['kernel_size'], mode=BORDER_MODE)
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Gaussian smoothing')
class GaussianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Gaussian smoothing with an explicit ``kernel_size`` window.

    The kernel is sampled at integer offsets over the full window and
    normalized to unit sum, so the support is exactly ``kernel_size``
    regardless of ``sigma``.

    Parameters
    ----------
    kernel_size : int
        Odd window side, ``>= 3``. Default 3.
    sigma : float
        Standard deviation in pixels. Default 1.0.

    Examples
    --------
    >>> blur = GaussianFilter(kernel_size=5, sigma=1.4)
    >>> smoothed = blur.apply(buf)
    """

    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Square kernel side length (odd)')] = 3
    sigma: Annotated[float, Range(min=0.1, max=50.0),
                     Desc('Gaussian standard deviation')] = 1.0

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        kernel = gaussian_kernel(params['kernel_size'], params['sigma'])
        return to_uint8(correlate_plane(plane, kernel))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='3x3 sharpening kernel')
class SharpenFilter(ChannelwiseTransformMixin, ImageTransform):
    """Correlate with ``[[0,-1,0],[-1,5,-1],[0,-1,0]]``."""

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(correlate_plane(plane, SHARPEN))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='3x3 Laplacian high-pass kernel')
class LaplacianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Correlate with the 8-neighbour Laplacian; negative responses clip to 0."""

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(correlate_plane(plane, LAPLACIAN))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Unsharp masking')
class UnsharpMask(ChannelwiseTransformMixin, ImageTransform):
    """``v + amount * (v - blurred)`` with a 5x5, sigma 1.0 Gaussian blur.

    The blurred plane is stored as bytes before the difference is taken.

    Parameters
    ----------
    amount : float
        Sharpening strength. Default 1.5.
    """

    amount: Annotated[float, Range(min=0.0, max=10.0),
                      Desc('Sharpening strength')] = 1.5

    _BLUR_KERNEL = gaussian_kernel(5, 1.0)

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        original = plane.astype(np.float64)
        blurred = to_uint8(correlate_plane(plane, self._BLUR_KERNEL))
        return to_uint8(original + params['amount'] * (original - blurred))
