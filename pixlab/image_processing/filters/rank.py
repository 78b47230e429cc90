# -*- coding: utf-8 -*-
"""
Rank Filters - Order-statistic neighbourhood filters.

Provides median, minimum and maximum filters over square windows with
replicate-border sampling, backed by ``scipy.ndimage`` (C-optimized).
Window sizes are always odd, so the neighbourhood holds an odd number of
samples and the median is a sample of the input.

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
2026-10-09
"""

# Standard library
from typing import Annotated, Any, Dict

# Third-party
import numpy as np
from scipy.ndimage import maximum_filter, median_filter, minimum_filter

# PixLab internal
from pixlab.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from pixlab.image_processing.params import Desc, Odd, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.image_processing.filters._validation import BORDER_MODE
from pixlab.vocabulary import ProcessorCategory


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Median (salt-and-pepper) filter')
class MedianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Spatial median filter for noise removal.

    Replaces each sample with the median of its local neighbourhood.
    Excellent for removing salt-and-pepper noise while preserving edges.

    Parameters
    ----------
    kernel_size : int
        Square window side length in pixels, odd and ``>= 3``.
        Default is 3.

    Examples
    --------
    >>> from pixlab.image_processing.filters import MedianFilter
    >>> f = MedianFilter(kernel_size=5)
    >>> denoised = f.apply(noisy)
    """

    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Square kernel side length (odd)')] = 3

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return median_filter(plane, size=params['kernel_size'], mode=BORDER_MODE)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Local minimum filter')
class MinFilter(ChannelwiseTransformMixin, ImageTransform):
    """Local minimum filter.

    Replaces each sample with the minimum value in its square
    neighbourhood. Darkens and removes bright specks.

    Parameters
    ----------
    kernel_size : int
        Square window side length, odd and ``>= 3``. Default is 3.
    """

    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Square kernel side length (odd)')] = 3

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return minimum_filter(plane, size=params['kernel_size'], mode=BORDER_MODE)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Local maximum filter')
class MaxFilter(ChannelwiseTransformMixin, ImageTransform):
    """Local maximum filter.

    Replaces each sample with the maximum value in its square
    neighbourhood. Brightens and removes dark specks.

    Parameters
    ----------
    kernel_size : int
        Square window side length, odd and ``>= 3``. Default is 3.
    """

    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Square kernel side length (odd)')] = 3

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        return maximum_filter(plane, size=params['kernel_size'], mode=BORDER_MODE)
