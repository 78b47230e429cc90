# -*- coding: utf-8 -*-
"""
Threshold Engine - Global and local binarization.

Global
    ``FixedThreshold``, ``OtsuThreshold``, ``TriangleThreshold``,
    ``MeanThreshold``, ``DoubleThreshold``

Local
    ``AdaptiveThreshold``, ``NiblackThreshold``, ``SauvolaThreshold``

All thresholders reduce color input to luminance first and return a
single-channel buffer.

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

from pixlab.image_processing.threshold.global_threshold import (
    DoubleThreshold,
    FixedThreshold,
    HistogramThreshold,
    MeanThreshold,
    OtsuThreshold,
    TriangleThreshold,
    binarize,
    mean_threshold_value,
    otsu_threshold_value,
    triangle_threshold_value,
)
from pixlab.image_processing.threshold.local_threshold import (
    AdaptiveThreshold,
    NiblackThreshold,
    SauvolaThreshold,
    local_mean,
    local_statistics,
)

__all__ = [
    'FixedThreshold',
    'HistogramThreshold',
    'OtsuThreshold',
    'TriangleThreshold',
    'MeanThreshold',
    'DoubleThreshold',
    'AdaptiveThreshold',
    'NiblackThreshold',
    'SauvolaThreshold',
    'binarize',
    'otsu_threshold_value',
    'triangle_threshold_value',
    'mean_threshold_value',
    'local_mean',
    'local_statistics',
]
