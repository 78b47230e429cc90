# -*- coding: utf-8 -*-
"""
Local Thresholding - Per-pixel thresholds from windowed statistics.

Each pixel is compared against a threshold derived from the mean and
standard deviation of a square window centred on it, with replicate
borders:

- ``AdaptiveThreshold``: ``max(0, mean - c)``.
- ``NiblackThreshold``: ``mean + k * std``.
- ``SauvolaThreshold``: ``mean * (1 + k * (std / R - 1))``.

Window sums are computed with a single ``scipy.ndimage.correlate`` pass
per statistic on float64 data, so the sums of 8-bit samples are exact and
the results match a direct per-window scan. The standard deviation is the
population value (divide by the window area).

Dependencies
------------
scipy

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
2026-10-16
"""

# Standard library
from typing import Annotated, Any, Dict, Tuple

# Third-party
import numpy as np
from scipy.ndimage import correlate

# PixLab internal
from pixlab.image_processing.base import GrayscaleTransformMixin, ImageTransform
from pixlab.image_processing.filters._validation import BORDER_MODE
from pixlab.image_processing.params import Desc, Odd, Range
from pixlab.image_processing.threshold.global_threshold import binarize
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import ProcessorCategory


def local_statistics(gray: np.ndarray, window_size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Windowed mean and population standard deviation.

    Parameters
    ----------
    gray : np.ndarray
        2D array of samples.
    window_size : int
        Odd window side length.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(mean, std)``, float64 arrays shaped like *gray*.
    """
    values = gray.astype(np.float64)
    ones = np.ones((window_size, window_size))
    count = float(window_size * window_size)

    total = correlate(values, ones, mode=BORDER_MODE)
    total_sq = correlate(values * values, ones, mode=BORDER_MODE)

    mean = total / count
    spread = np.maximum(count * total_sq - total * total, 0.0)
    std = np.sqrt(spread) / count
    return mean, std


def local_mean(gray: np.ndarray, window_size: int) -> np.ndarray:
    """Windowed mean with replicate borders."""
    ones = np.ones((window_size, window_size))
    return correlate(gray.astype(np.float64), ones, mode=BORDER_MODE) / ones.size


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Local mean minus offset')
class AdaptiveThreshold(GrayscaleTransformMixin, ImageTransform):
    """Mean-offset adaptive threshold.

    A pixel is foreground when its value is at least
    ``max(0, local_mean - c)``.

    Parameters
    ----------
    block_size : int
        Odd window side, ``>= 3``. Default 15.
    c : float
        Offset subtracted from the local mean. Default 5.

    Examples
    --------
    >>> binary = AdaptiveThreshold(block_size=25, c=10).apply(scan)
    """

    block_size: Annotated[int, Range(min=3), Odd(),
                          Desc('Window side length (odd)')] = 15
    c: Annotated[float, Range(min=-255.0, max=255.0),
                 Desc('Offset from the local mean')] = 5.0

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        threshold = np.maximum(local_mean(gray, params['block_size']) - params['c'], 0.0)
        return binarize(gray, threshold)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Niblack local threshold')
class NiblackThreshold(GrayscaleTransformMixin, ImageTransform):
    """Niblack threshold ``mean + k * std``.

    Parameters
    ----------
    window_size : int
        Odd window side, ``>= 3``. Default 15.
    k : float
        Standard deviation weight. Default 0.2.
    """

    window_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Window side length (odd)')] = 15
    k: Annotated[float, Range(min=-1.0, max=1.0),
                 Desc('Standard deviation weight')] = 0.2

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        mean, std = local_statistics(gray, params['window_size'])
        return binarize(gray, mean + params['k'] * std)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.THRESHOLD,
                description='Sauvola local threshold')
class SauvolaThreshold(GrayscaleTransformMixin, ImageTransform):
    """Sauvola threshold ``mean * (1 + k * (std / R - 1))``.

    Parameters
    ----------
    window_size : int
        Odd window side, ``>= 3``. Default 15.
    k : float
        Sensitivity. Default 0.5.
    dynamic_range : float
        ``R``, the dynamic range of the standard deviation. Default 128.
    """

    window_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Window side length (odd)')] = 15
    k: Annotated[float, Range(min=0.0, max=1.0), Desc('Sensitivity')] = 0.5
    dynamic_range: Annotated[float, Range(min=1.0, max=255.0),
                             Desc('Standard deviation dynamic range R')] = 128.0

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        mean, std = local_statistics(gray, params['window_size'])
        threshold = mean * (1.0 + params['k'] * (std / params['dynamic_range'] - 1.0))
        return binarize(gray, threshold)
