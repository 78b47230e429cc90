# -*- coding: utf-8 -*-
"""
Global Thresholding - Single-threshold and three-level binarization.

Every thresholder works on the luminance reduction of its input and
returns a single-channel buffer:

- ``FixedThreshold``: ``255`` where ``intensity >= threshold``.
- ``OtsuThreshold``: threshold maximizing between-class variance.
- ``TriangleThreshold``: histogram bin farthest from the peak-to-tail
  line.
- ``MeanThreshold``: mean image intensity.
- ``DoubleThreshold``: ``0`` / ``128`` / ``255`` three-level output.

The automatic thresholders also expose ``compute_threshold(source)`` so
the chosen value can be displayed next to the result.

Dependencies
------------
numpy

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
2026-10-10

Modified
--------
2026-10-17
"""

# Standard library
import logging
from abc import abstractmethod
from typing import Annotated, Any, Dict

# Third-party
import numpy as np

# PixLab internal
from pixlab.buffer import PixelBuffer
from pixlab.image_processing.base import GrayscaleTransformMixin, ImageTransform
from pixlab.image_processing.histogram import histogram_of
from pixlab.image_processing.params import Desc, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def binarize(gray: np.ndarray, threshold: float) -> np.ndarray:
    """``255`` where ``gray >= threshold``, else ``0``."""
    return np.where(gray >= threshold, 255, 0).astype(np.uint8)


def otsu_threshold_value(histogram: np.ndarray) -> int:
    """Threshold maximizing the between-class variance ``wB*wF*(mB-mF)**2``.

    Candidate ``t`` puts bins ``0..t`` in the background. Candidates with
    an empty class contribute no variance; ties keep the lowest ``t``.
    A histogram with a single populated bin has no valid split and yields
    ``0``.

    Parameters
    ----------
    histogram : np.ndarray
        256-bin histogram.

    Returns
    -------
    int
        Threshold in ``[0, 255]``.
    """
    hist = np.asarray(histogram, dtype=np.float64)
    levels = np.arange(hist.size, dtype=np.float64)
    total = hist.sum()

    weight_bg = np.cumsum(hist)
    weight_fg = total - weight_bg
    sum_bg = np.cumsum(levels * hist)
    sum_total = sum_bg[-1]

    valid = (weight_bg > 0) & (weight_fg > 0)
    variance = np.zeros_like(hist)
    mean_bg = sum_bg[valid] / weight_bg[valid]
    mean_fg = (sum_total - sum_bg[valid]) / weight_fg[valid]
    variance[valid] = weight_bg[valid] * weight_fg[valid] * (mean_bg - mean_fg) ** 2

    return int(np.argmax(variance))


def triangle_threshold_value(histogram: np.ndarray) -> int:
    """Triangle (Zack) threshold.

    A line is drawn from the histogram peak to the farther of the first
    and last populated bins. The bin between them with the greatest
    perpendicular distance to that line is the threshold; the peak is
    returned when no bin lies off the line.

    Parameters
    ----------
    histogram : np.ndarray
        256-bin histogram.

    Returns
    -------
    int
        Threshold in ``[0, 255]``.
    """
    hist = np.asarray(histogram, dtype=np.float64)
    peak = int(np.argmax(hist))
    populated = np.flatnonzero(hist)
    if populated.size == 0:
        return peak
    first, last = int(populated[0]), int(populated[-1])

    tail = last if (peak - first) < (last - peak) else first
    dx = float(peak - tail)
    dy = hist[peak] - hist[tail]
    norm = np.hypot(dx, dy)
    if norm == 0:
        return peak

    lo, hi = min(tail, peak), max(tail, peak)
    bins = np.arange(lo, hi + 1, dtype=np.float64)
    distance = np.abs(dx * hist[lo:hi + 1] - dy * (bins - tail) - dx * hist[tail]) / norm
    best = int(np.argmax(distance))
    if distance[best] <= 0:
        return peak
    return lo + best


def mean_threshold_value(gray: np.ndarray) -> int:
    """Mean intensity of *gray*, rounded to the nearest byte value."""
    return int(np.floor(np.mean(gray, dtype=np.float64) + 0.5))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Binarize at a fixed intensity')
class FixedThreshold(GrayscaleTransformMixin, ImageTransform):
    """Binary threshold at a user-chosen intensity.

    Parameters
    ----------
    threshold : int
        Samples ``>= threshold`` become 255. Default 127.

    Examples
    --------
    >>> buf = PixelBuffer(2, 2, 1, bytes([0, 85, 170, 255]))
    >>> FixedThreshold(threshold=128).apply(buf).samples.tolist()
    [0, 0, 255, 255]
    """

    threshold: Annotated[int, Range(min=0, max=255),
                         Desc('Intensity threshold')] = 127

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return binarize(gray, params['threshold'])


class HistogramThreshold(GrayscaleTransformMixin, ImageTransform):
    """Base for thresholders that derive one global value from the image.

    Subclasses implement ``_threshold_value`` on the grayscale plane.
    """

    def compute_threshold(self, source: PixelBuffer) -> int:
        """Threshold that ``apply`` would use for *source*."""
        return self._threshold_value(source.to_grayscale().plane(0))

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        threshold = self._threshold_value(gray)
        logger.debug("%s chose threshold %d", type(self).__name__, threshold)
        return binarize(gray, threshold)

    @abstractmethod
    def _threshold_value(self, gray: np.ndarray) -> int:
        ...


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description="Otsu's automatic threshold")
class OtsuThreshold(HistogramThreshold):
    """Binarize at the threshold maximizing between-class variance.

    A constant image has no valid split; the threshold is then 0 and every
    sample becomes 255.
    """

    def _threshold_value(self, gray: np.ndarray) -> int:
        return otsu_threshold_value(histogram_of(gray))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Triangle automatic threshold')
class TriangleThreshold(HistogramThreshold):
    """Binarize at the triangle-method threshold (suits unimodal histograms)."""

    def _threshold_value(self, gray: np.ndarray) -> int:
        return triangle_threshold_value(histogram_of(gray))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Mean intensity threshold')
class MeanThreshold(HistogramThreshold):
    """Binarize at the mean intensity."""

    def _threshold_value(self, gray: np.ndarray) -> int:
        return mean_threshold_value(gray)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Three-level (low / high) threshold')
class DoubleThreshold(GrayscaleTransformMixin, ImageTransform):
    """Three-level output: 255 at or above ``high``, 128 from ``low`` up to
    ``high``, 0 below ``low``.

    Parameters
    ----------
    low : int
        Lower threshold. Default 50.
    high : int
        Upper threshold. Default 150.
    """

    low: Annotated[int, Range(min=0, max=255), Desc('Low threshold')] = 50
    high: Annotated[int, Range(min=0, max=255), Desc('High threshold')] = 150

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        result = np.zeros_like(gray, dtype=np.uint8)
        result[gray >= params['low']] = 128
        result[gray >= params['high']] = 255
        return result
