# -*- coding: utf-8 -*-
"""
Edge Detection - Gradient-operator and Canny-style edge maps.

All detectors reduce the input to luminance and return a single-channel
edge map of the same width and height.

- ``SobelEdges`` / ``PrewittEdges``: gradient magnitude
  ``sqrt(gx**2 + gy**2)`` clamped to 255.
- ``CannyEdges``: Gaussian blur (5x5, sigma 1.4), Sobel magnitude, then a
  two-threshold classification where a weak pixel is kept only when one
  of its 8 neighbours is strong. This is a single pass; weak chains are
  not followed transitively.

The gradient operators only evaluate interior pixels. The outermost rows
and columns of every edge map are 0.

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
2026-10-11

Modified
--------
2026-10-17
"""

# Standard library
import logging
from typing import Annotated, Any, Dict

# Third-party
import numpy as np
from scipy.ndimage import correlate, maximum_filter

# PixLab internal
from pixlab.buffer import to_uint8
from pixlab.image_processing.base import GrayscaleTransformMixin, ImageTransform
from pixlab.image_processing.filters.kernels import (
    PREWITT_X,
    PREWITT_Y,
    SOBEL_X,
    SOBEL_Y,
    gaussian_kernel,
)
from pixlab.image_processing.filters.linear import correlate_plane
from pixlab.image_processing.params import Desc, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def interior_mask(shape: tuple) -> np.ndarray:
    """Boolean mask that is ``True`` everywhere except the outermost ring."""
    mask = np.zeros(shape, dtype=bool)
    mask[1:-1, 1:-1] = True
    return mask


def gradient_magnitude(
    gray: np.ndarray,
    kernel_x: np.ndarray,
    kernel_y: np.ndarray,
) -> np.ndarray:
    """Unclamped gradient magnitude of the interior pixels.

    Parameters
    ----------
    gray : np.ndarray
        2D array of samples.
    kernel_x, kernel_y : np.ndarray
        3x3 directional kernels, applied by correlation.

    Returns
    -------
    np.ndarray
        float64 array shaped like *gray*; the outermost ring is 0.
    """
    values = gray.astype(np.float64)
    gx = correlate(values, kernel_x, mode='nearest')
    gy = correlate(values, kernel_y, mode='nearest')
    magnitude = np.sqrt(gx * gx + gy * gy)
    magnitude[~interior_mask(gray.shape)] = 0.0
    return magnitude


class GradientEdges(GrayscaleTransformMixin, ImageTransform):
    """Base for 3x3 gradient-operator edge maps.

    Subclasses set ``KERNEL_X`` and ``KERNEL_Y``.
    """

    KERNEL_X: np.ndarray
    KERNEL_Y: np.ndarray

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(gradient_magnitude(gray, self.KERNEL_X, self.KERNEL_Y))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.EDGES,
                description='Sobel gradient magnitude')
class SobelEdges(GradientEdges):
    """Sobel gradient magnitude edge map."""

    KERNEL_X = SOBEL_X
    KERNEL_Y = SOBEL_Y


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.EDGES,
                description='Prewitt gradient magnitude')
class PrewittEdges(GradientEdges):
    """Prewitt gradient magnitude edge map."""

    KERNEL_X = PREWITT_X
    KERNEL_Y = PREWITT_Y


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.EDGES,
                description='Canny-style two-threshold edge detector')
class CannyEdges(GrayscaleTransformMixin, ImageTransform):
    """Simplified Canny edge detector.

    Pixels with magnitude ``>= high`` are edges. Pixels with
    ``low <= magnitude < high`` are edges only when an 8-neighbour has
    magnitude ``>= high``. No non-maximum suppression is performed.

    Parameters
    ----------
    low : float
        Weak edge threshold. Default 50.
    high : float
        Strong edge threshold. Default 150.

    Examples
    --------
    >>> edges = CannyEdges(low=30, high=90).apply(photo)
    """

    low: Annotated[float, Range(min=0.0, max=1500.0),
                   Desc('Weak edge threshold')] = 50.0
    high: Annotated[float, Range(min=0.0, max=1500.0),
                    Desc('Strong edge threshold')] = 150.0

    _BLUR_KERNEL = gaussian_kernel(5, 1.4)

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        low, high = params['low'], params['high']
        blurred = to_uint8(correlate_plane(gray, self._BLUR_KERNEL))
        magnitude = gradient_magnitude(blurred, SOBEL_X, SOBEL_Y)

        strong = magnitude >= high
        weak = (magnitude >= low) & ~strong
        near_strong = maximum_filter(
            strong.astype(np.uint8), size=3, mode='constant', cval=0,
        ).astype(bool)

        edges = (strong | (weak & near_strong)) & interior_mask(gray.shape)
        logger.debug(
            "Canny: %d strong, %d weak, %d edge pixels",
            int(strong.sum()), int(weak.sum()), int(edges.sum()),
        )
        return np.where(edges, 255, 0).astype(np.uint8)
