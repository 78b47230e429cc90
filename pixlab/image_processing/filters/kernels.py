# -*- coding: utf-8 -*-
"""
Convolution Kernels - Fixed and parametric weight matrices.

Box and Gaussian kernels are built on demand for a given size; the
directional gradient kernels (Sobel, Prewitt) and the 3x3 sharpen and
Laplacian kernels are module constants. All kernels are float64 and are
applied by correlation (no flip).

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

# Third-party
import numpy as np


SOBEL_X = np.array([[-1.0, 0.0, 1.0],
                    [-2.0, 0.0, 2.0],
                    [-1.0, 0.0, 1.0]])

SOBEL_Y = np.array([[-1.0, -2.0, -1.0],
                    [0.0, 0.0, 0.0],
                    [1.0, 2.0, 1.0]])

PREWITT_X = np.array([[-1.0, 0.0, 1.0],
                      [-1.0, 0.0, 1.0],
                      [-1.0, 0.0, 1.0]])

PREWITT_Y = np.array([[-1.0, -1.0, -1.0],
                      [0.0, 0.0, 0.0],
                      [1.0, 1.0, 1.0]])

SHARPEN = np.array([[0.0, -1.0, 0.0],
                    [-1.0, 5.0, -1.0],
                    [0.0, -1.0, 0.0]])

LAPLACIAN = np.array([[-1.0, -1.0, -1.0],
                      [-1.0, 8.0, -1.0],
                      [-1.0, -1.0, -1.0]])

for _kernel in (SOBEL_X, SOBEL_Y, PREWITT_X, PREWITT_Y, SHARPEN, LAPLACIAN):
    _kernel.setflags(write=False)
del _kernel


def box_kernel(size: int) -> np.ndarray:
    """Uniform ``size x size`` kernel with weights ``1 / size**2``."""
    return np.full((size, size), 1.0 / (size * size))


def gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    """Normalized 2D Gaussian kernel.

    Parameters
    ----------
    size : int
        Odd side length.
    sigma : float
        Standard deviation in pixels, ``> 0``.

    Returns
    -------
    np.ndarray
        ``(size, size)`` float64 array summing to 1.
    """
    half = size // 2
    offsets = np.arange(-half, half + 1, dtype=np.float64)
    yy, xx = np.meshgrid(offsets, offsets, indexing='ij')
    kernel = np.exp(-(xx ** 2 + yy ** 2) / (2.0 * sigma * sigma))
    return kernel / kernel.sum()
