# -*- coding: utf-8 -*-
"""
Histogram Engine - Intensity histograms, CDFs and histogram equalization.

Computes 256-bin histograms of a single channel or of the luminance
reduction, derives cumulative distribution functions and equalization
lookup tables, and provides ``HistogramEqualization`` in three flavors:

- ``'gray'``: equalize the luminance reduction (single-channel output).
- ``'rgb'``: equalize R, G and B independently (alpha untouched).
- ``'hsv'``: equalize only the HSV value component, keeping hue and
  saturation of every pixel.

A flat single-valued histogram has ``cdf_min == total`` and would divide
by zero; it resolves to the identity mapping.

Dependencies
------------
numpy

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
2026-10-08

Modified
--------
2026-10-16
"""

# Standard library
import logging
from typing import Annotated, Any, Dict, List, Optional

# Third-party
import numpy as np

# PixLab internal
from pixlab.buffer import PixelBuffer, to_uint8
from pixlab.color import hsv_to_rgb_array, rgb_to_hsv_array
from pixlab.image_processing.base import ImageTransform
from pixlab.image_processing.params import Desc, Options
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import EqualizationMode, ProcessorCategory, option_values

logger = logging.getLogger(__name__)


HISTOGRAM_BINS = 256


def histogram_of(values: np.ndarray) -> np.ndarray:
    """256-bin histogram of an array of ``uint8`` samples."""
    return np.bincount(
        np.asarray(values, dtype=np.uint8).ravel(), minlength=HISTOGRAM_BINS
    ).astype(np.int64)


def compute_histogram(
    source: PixelBuffer,
    channel: Optional[int] = None,
) -> np.ndarray:
    """Compute the 256-bin histogram of one channel or of the luminance.

    Parameters
    ----------
    source : PixelBuffer
        Input image.
    channel : int, optional
        Channel index. ``None`` selects the luminance reduction (the
        only channel of a single-channel image). Out-of-range indices
        are clamped to the nearest valid channel.

    Returns
    -------
    np.ndarray
        int64 array of shape ``(256,)`` summing to ``width * height``.

    Examples
    --------
    >>> hist = compute_histogram(buf, channel=0)
    >>> int(hist.sum()) == buf.width * buf.height
    True
    """
    if channel is None:
        return histogram_of(source.to_grayscale().plane(0))

    valid = min(max(int(channel), 0), source.channels - 1)
    if valid != channel:
        logger.warning(
            "Histogram channel %r adjusted to %d for a %d-channel image",
            channel, valid, source.channels,
        )
    return histogram_of(source.plane(valid))


def luminance_histogram(source: PixelBuffer) -> np.ndarray:
    """Histogram of the luminance reduction of *source*."""
    return compute_histogram(source, None)


def channel_histograms(source: PixelBuffer) -> List[np.ndarray]:
    """One histogram per channel, in channel order."""
    return [compute_histogram(source, c) for c in range(source.channels)]


def cumulative_distribution(histogram: np.ndarray) -> np.ndarray:
    """Prefix sum of *histogram* (the unnormalized CDF)."""
    return np.cumsum(np.asarray(histogram, dtype=np.int64))


def _cdf_bounds(histogram: np.ndarray):
    """CDF of *histogram* with its total count and first non-zero count."""
    cdf = cumulative_distribution(histogram)
    nonzero = np.flatnonzero(cdf)
    cdf_min = int(cdf[nonzero[0]]) if nonzero.size else 0
    return cdf, int(cdf[-1]), cdf_min


def equalization_curve(histogram: np.ndarray) -> np.ndarray:
    """Normalized equalization mapping ``(cdf - cdf_min) / (total - cdf_min)``.

    ``cdf_min`` is the first non-zero cumulative count. When every pixel
    falls in a single bin (``total == cdf_min``) the mapping is undefined
    and the identity curve ``i / 255`` is returned.

    Returns
    -------
    np.ndarray
        float64 array of shape ``(256,)`` with values in ``[0, 1]`` for
        every populated bin.
    """
    cdf, total, cdf_min = _cdf_bounds(histogram)

    if total == cdf_min:
        logger.debug("Flat histogram (cdf_min == total); identity mapping")
        return np.arange(HISTOGRAM_BINS, dtype=np.float64) / 255.0
    return (cdf - cdf_min) / float(total - cdf_min)


def equalization_lut(histogram: np.ndarray) -> np.ndarray:
    """Byte lookup table ``round(curve * 255)`` for histogram equalization.

    Scaled as ``(cdf - cdf_min) * 255 / (total - cdf_min)`` so exact halves
    round up.
    """
    cdf, total, cdf_min = _cdf_bounds(histogram)
    if total == cdf_min:
        logger.debug("Flat histogram (cdf_min == total); identity mapping")
        return np.arange(HISTOGRAM_BINS, dtype=np.uint8)
    return to_uint8((cdf - cdf_min) * 255.0 / float(total - cdf_min))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.HISTOGRAM,
                description='Histogram equalization (gray, RGB or HSV value)')
class HistogramEqualization(ImageTransform):
    """Histogram equalization.

    Parameters
    ----------
    mode : str
        ``'gray'`` (default), ``'rgb'`` or ``'hsv'``. Images with fewer
        than three channels always use ``'gray'``.

    Examples
    --------
    >>> eq = HistogramEqualization(mode='hsv')
    >>> result = eq.apply(photo)
    """

    mode: Annotated[str, Options(*option_values(EqualizationMode)),
                    Desc('Equalization strategy')] = 'gray'

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Equalize *source*.

        Returns
        -------
        PixelBuffer
            Single-channel for ``'gray'``; same shape as *source*
            otherwise.
        """
        params = self._resolve_params(kwargs)
        mode = EqualizationMode(params['mode'])
        if mode is EqualizationMode.GRAY or source.channels < 3:
            return self._equalize_gray(source)
        if mode is EqualizationMode.RGB:
            return self._equalize_rgb(source)
        return self._equalize_hsv(source)

    def _equalize_gray(self, source: PixelBuffer) -> PixelBuffer:
        gray = source.to_grayscale().plane(0)
        lut = equalization_lut(histogram_of(gray))
        return PixelBuffer.from_array(lut[gray])

    def _equalize_rgb(self, source: PixelBuffer) -> PixelBuffer:
        result = source.array.copy()
        for c in range(3):
            plane = source.plane(c)
            result[:, :, c] = equalization_lut(histogram_of(plane))[plane]
        return PixelBuffer.from_array(result)

    def _equalize_hsv(self, source: PixelBuffer) -> PixelBuffer:
        rgb = source.array[:, :, :3]
        hsv = rgb_to_hsv_array(rgb / 255.0)

        # V is max(R, G, B); index bins with the exact byte maximum.
        value_bins = rgb.max(axis=-1)
        curve = equalization_curve(histogram_of(value_bins))
        hsv[:, :, 2] = curve[value_bins]

        result = source.array.copy()
        result[:, :, :3] = to_uint8(hsv_to_rgb_array(hsv) * 255.0)
        return PixelBuffer.from_array(result)


def equalize(source: PixelBuffer, mode: str = 'gray') -> PixelBuffer:
    """Functional shortcut for ``HistogramEqualization(mode=mode).apply``."""
    return HistogramEqualization(mode=mode).apply(source)


def histogram_summary(histogram: np.ndarray) -> Dict[str, float]:
    """Count, mean, standard deviation, min and max of a histogram.

    Used by the histogram panel next to the plotted bars. Empty
    histograms report zeros.
    """
    hist = np.asarray(histogram, dtype=np.float64)
    count = hist.sum()
    if count == 0:
        return {'count': 0, 'mean': 0.0, 'std': 0.0, 'min': 0, 'max': 0}
    levels = np.arange(hist.size, dtype=np.float64)
    mean = float((levels * hist).sum() / count)
    var = float((((levels - mean) ** 2) * hist).sum() / count)
    populated = np.flatnonzero(hist)
    return {
        'count': int(count),
        'mean': mean,
        'std': float(np.sqrt(var)),
        'min': int(populated[0]),
        'max': int(populated[-1]),
    }
