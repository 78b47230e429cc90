# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared kernel size and kernel matrix checks.

Provides reusable helpers for spatial image filters. Every filter in this
subpackage calls these to enforce consistent constraints on window sizes
(odd, >= 3) and on user-supplied convolution kernels.

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
2026-10-15
"""

# Standard library
import logging

# Third-party
import numpy as np

# PixLab internal
from pixlab.exceptions import ValidationError

logger = logging.getLogger(__name__)


#: Boundary mode used for every neighbourhood operation (replicate-border).
BORDER_MODE = 'nearest'

MIN_KERNEL_SIZE = 3


def normalize_kernel_size(kernel_size: int, name: str = 'kernel_size') -> int:
    """Return *kernel_size* clamped to ``>= 3`` and bumped to an odd value.

    Parameters
    ----------
    kernel_size : int
        Requested side length.
    name : str
        Parameter name for log messages. Default ``'kernel_size'``.

    Raises
    ------
    ValidationError
        If ``kernel_size`` is not an integer.
    """
    if isinstance(kernel_size, bool) or not isinstance(kernel_size, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(kernel_size).__name__}"
        )
    size = max(int(kernel_size), MIN_KERNEL_SIZE)
    if size % 2 == 0:
        size += 1
    if size != kernel_size:
        logger.warning("%s %r adjusted to %d", name, kernel_size, size)
    return size


def validate_kernel(kernel: np.ndarray) -> np.ndarray:
    """Check a convolution kernel and return it as a centred float64 array.

    Kernels must be square. An even side length ``n`` is zero-padded on
    the bottom and right to ``n + 1``; the neighbourhood then spans
    ``n // 2`` samples before the centre and ``n // 2 - 1`` after it.

    Parameters
    ----------
    kernel : array-like
        Square matrix of weights.

    Returns
    -------
    np.ndarray
        float64 array with an odd side length.

    Raises
    ------
    ValidationError
        If the kernel is not a non-empty square 2D matrix.
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1] or kernel.size == 0:
        raise ValidationError(
            f"kernel must be a non-empty square 2D matrix, got shape {kernel.shape}"
        )
    if kernel.shape[0] % 2 == 0:
        kernel = np.pad(kernel, ((0, 1), (0, 1)))
    return kernel
