# -*- coding: utf-8 -*-
"""
Morphology Engine - Structuring-element erosion, dilation and compositions.

Operates on the luminance reduction of the input and returns a
single-channel buffer. Erosion and dilation take the minimum and maximum
over the true cells of a square structuring element with replicate
borders (``scipy.ndimage`` footprint filters, mode ``'nearest'``).

Operations
    ``erode``, ``dilate``, ``open`` (dilate after erode), ``close``
    (erode after dilate), ``gradient`` (dilate minus erode), ``tophat``
    (image minus opening) and ``blackhat`` (closing minus image).

Structuring elements
    ``rect`` (all cells), ``cross`` (centre row and column) and
    ``ellipse`` (cells with ``x**2 + y**2 <= r**2``, ``r = size // 2``).

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
2026-10-16
"""

# Standard library
from typing import Annotated, Any, Dict, Union

# Third-party
import numpy as np
from scipy.ndimage import maximum_filter, minimum_filter

# PixLab internal
from pixlab.image_processing.base import GrayscaleTransformMixin, ImageTransform
from pixlab.image_processing.filters._validation import BORDER_MODE, normalize_kernel_size
from pixlab.image_processing.params import Desc, Odd, Options, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import (
    MorphologyOperation,
    ProcessorCategory,
    StructuringElementShape,
    option_values,
)


def make_structuring_element(
    size: int,
    shape: Union[str, StructuringElementShape] = 'rect',
) -> np.ndarray:
    """Build a square boolean structuring element.

    Parameters
    ----------
    size : int
        Side length. Clamped to ``>= 3`` and bumped to odd.
    shape : str or StructuringElementShape
        ``'rect'``, ``'cross'`` or ``'ellipse'``.

    Returns
    -------
    np.ndarray
        ``(size, size)`` boolean mask.

    Raises
    ------
    ValueError
        If *shape* is not a known element shape.

    Examples
    --------
    >>> make_structuring_element(3, 'cross').astype(int)
    array([[0, 1, 0],
           [1, 1, 1],
           [0, 1, 0]])
    """
    size = normalize_kernel_size(size, 'size')
    shape = StructuringElementShape(shape)
    center = size // 2

    if shape is StructuringElementShape.RECT:
        return np.ones((size, size), dtype=bool)
    if shape is StructuringElementShape.CROSS:
        element = np.zeros((size, size), dtype=bool)
        element[center, :] = True
        element[:, center] = True
        return element

    offsets = np.arange(size) - center
    yy, xx = np.meshgrid(offsets, offsets, indexing='ij')
    return (xx * xx + yy * yy) <= center * center


def erode(gray: np.ndarray, element: np.ndarray) -> np.ndarray:
    """Minimum over the true cells of *element*."""
    return minimum_filter(gray, footprint=element, mode=BORDER_MODE)


def dilate(gray: np.ndarray, element: np.ndarray) -> np.ndarray:
    """Maximum over the true cells of *element*."""
    return maximum_filter(gray, footprint=element, mode=BORDER_MODE)


def _difference(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return (a.astype(np.int16) - b.astype(np.int16)).clip(0, 255).astype(np.uint8)


def morphology(
    gray: np.ndarray,
    operation: Union[str, MorphologyOperation],
    element: np.ndarray,
) -> np.ndarray:
    """Apply a morphological *operation* to a 2D ``uint8`` plane."""
    operation = MorphologyOperation(operation)
    if operation is MorphologyOperation.ERODE:
        return erode(gray, element)
    if operation is MorphologyOperation.DILATE:
        return dilate(gray, element)
    if operation is MorphologyOperation.OPEN:
        return dilate(erode(gray, element), element)
    if operation is MorphologyOperation.CLOSE:
        return erode(dilate(gray, element), element)
    if operation is MorphologyOperation.GRADIENT:
        return _difference(dilate(gray, element), erode(gray, element))
    if operation is MorphologyOperation.TOPHAT:
        return _difference(gray, dilate(erode(gray, element), element))
    return _difference(erode(dilate(gray, element), element), gray)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.MORPHOLOGY,
                description='Erode, dilate, open, close and derived operators')
class MorphologicalFilter(GrayscaleTransformMixin, ImageTransform):
    """Grayscale morphology with a shaped structuring element.

    Parameters
    ----------
    operation : str
        One of ``'erode'``, ``'dilate'``, ``'open'``, ``'close'``,
        ``'gradient'``, ``'tophat'``, ``'blackhat'``. Default ``'erode'``.
    kernel_size : int
        Odd element side length, ``>= 3``. Default 3.
    element : str
        ``'rect'`` (default), ``'cross'`` or ``'ellipse'``.

    Examples
    --------
    >>> closed = MorphologicalFilter(operation='close', kernel_size=5,
    ...                              element='ellipse').apply(mask)
    """

    operation: Annotated[str, Options(*option_values(MorphologyOperation)),
                         Desc('Morphological operator')] = 'erode'
    kernel_size: Annotated[int, Range(min=3), Odd(),
                           Desc('Structuring element side length (odd)')] = 3
    element: Annotated[str, Options(*option_values(StructuringElementShape)),
                       Desc('Structuring element shape')] = 'rect'

    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        element = make_structuring_element(params['kernel_size'], params['element'])
        return morphology(gray, params['operation'], element)
