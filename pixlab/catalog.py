# -*- coding: utf-8 -*-
"""
Operation Catalog - Name-based access to every image operation.

The interactive front end selects operations by name and passes slider
values as keyword arguments. This module maps each operation name to the
processor class implementing it (imported lazily on first use) plus any
preset parameters, so that ``'bitwise_xor'`` and ``'bitwise_and'`` can
share ``BitwiseCombine`` and ``'open'``/``'close'`` can share
``MorphologicalFilter``.

Examples
--------
>>> from pixlab.catalog import apply_operation, list_operations
>>> 'otsu_threshold' in list_operations('threshold')
True
>>> result = apply_operation('gaussian_filter', photo, kernel_size=5)
>>> masked = apply_operation('bitwise_and', photo, operand=mask)

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
2026-10-12

Modified
--------
2026-10-17
"""

# Standard library
import importlib
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

# PixLab internal
from pixlab.buffer import PixelBuffer
from pixlab.exceptions import ValidationError
from pixlab.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


_POINT = 'pixlab.image_processing.point'
_HISTOGRAM = 'pixlab.image_processing.histogram'
_FILTERS = 'pixlab.image_processing.filters'
_THRESHOLD = 'pixlab.image_processing.threshold'
_EDGES = 'pixlab.image_processing.edges'
_MORPHOLOGY = 'pixlab.image_processing.morphology'

# Operation registry: maps names to (module_path, class_name, preset params)
_OPERATION_REGISTRY: Dict[str, Tuple[str, str, Dict[str, Any]]] = {
    # Histogram
    'equalize_gray': (_HISTOGRAM, 'HistogramEqualization', {'mode': 'gray'}),
    'equalize_rgb': (_HISTOGRAM, 'HistogramEqualization', {'mode': 'rgb'}),
    'equalize_hsv': (_HISTOGRAM, 'HistogramEqualization', {'mode': 'hsv'}),
    # Point
    'linear_contrast': (_POINT, 'LinearContrast', {}),
    'auto_contrast': (_POINT, 'AutoContrast', {}),
    'brightness_contrast': (_POINT, 'BrightnessContrast', {}),
    'gain_bias': (_POINT, 'GainBias', {}),
    'min_max_stretch': (_POINT, 'MinMaxStretch', {}),
    'gamma_correction': (_POINT, 'GammaCorrection', {}),
    'log_transform': (_POINT, 'LogTransform', {}),
    'power_transform': (_POINT, 'PowerTransform', {}),
    'invert': (_POINT, 'Invert', {}),
    'clip_brightness': (_POINT, 'ClipBrightness', {}),
    'quantize': (_POINT, 'Quantize', {}),
    'bitwise_and': (_POINT, 'BitwiseCombine', {'operation': 'and'}),
    'bitwise_or': (_POINT, 'BitwiseCombine', {'operation': 'or'}),
    'bitwise_xor': (_POINT, 'BitwiseCombine', {'operation': 'xor'}),
    'bitwise_not': (_POINT, 'BitwiseNot', {}),
    # Filters
    'convolution': (_FILTERS, 'Convolution', {}),
    'average_filter': (_FILTERS, 'AverageFilter', {}),
    'gaussian_filter': (_FILTERS, 'GaussianFilter', {}),
    'sharpen_filter': (_FILTERS, 'SharpenFilter', {}),
    'laplacian_filter': (_FILTERS, 'LaplacianFilter', {}),
    'unsharp_mask': (_FILTERS, 'UnsharpMask', {}),
    'median_filter': (_FILTERS, 'MedianFilter', {}),
    'min_filter': (_FILTERS, 'MinFilter', {}),
    'max_filter': (_FILTERS, 'MaxFilter', {}),
    # Threshold
    'fixed_threshold': (_THRESHOLD, 'FixedThreshold', {}),
    'otsu_threshold': (_THRESHOLD, 'OtsuThreshold', {}),
    'triangle_threshold': (_THRESHOLD, 'TriangleThreshold', {}),
    'mean_threshold': (_THRESHOLD, 'MeanThreshold', {}),
    'double_threshold': (_THRESHOLD, 'DoubleThreshold', {}),
    'adaptive_threshold': (_THRESHOLD, 'AdaptiveThreshold', {}),
    'niblack_threshold': (_THRESHOLD, 'NiblackThreshold', {}),
    'sauvola_threshold': (_THRESHOLD, 'SauvolaThreshold', {}),
    # Edges
    'sobel': (_EDGES, 'SobelEdges', {}),
    'prewitt': (_EDGES, 'PrewittEdges', {}),
    'canny': (_EDGES, 'CannyEdges', {}),
    # Morphology
    'erode': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'erode'}),
    'dilate': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'dilate'}),
    'open': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'open'}),
    'close': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'close'}),
    'morphological_gradient': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'gradient'}),
    'tophat': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'tophat'}),
    'blackhat': (_MORPHOLOGY, 'MorphologicalFilter', {'operation': 'blackhat'}),
}


def _lookup(name: str) -> Tuple[type, Dict[str, Any]]:
    if name not in _OPERATION_REGISTRY:
        raise ValidationError(
            f"Unknown operation: {name!r}. "
            f"Available operations: {sorted(_OPERATION_REGISTRY.keys())}"
        )
    module_path, class_name, preset = _OPERATION_REGISTRY[name]
    module = importlib.import_module(module_path)
    return getattr(module, class_name), preset


def operation_class(name: str) -> type:
    """Processor class registered under *name*.

    Raises
    ------
    ValidationError
        If *name* is not a registered operation.
    """
    return _lookup(name)[0]


def operation_category(name: str) -> Optional[ProcessorCategory]:
    """Front-end panel of the operation registered under *name*."""
    tags = getattr(operation_class(name), '__processor_tags__', {})
    return tags.get('category')


def list_operations(
    category: Optional[Union[str, ProcessorCategory]] = None,
) -> List[str]:
    """Sorted names of the registered operations.

    Parameters
    ----------
    category : str or ProcessorCategory, optional
        Restrict to one panel (``'point'``, ``'filters'``, ...).

    Raises
    ------
    ValidationError
        If *category* is not a known category.
    """
    if category is None:
        return sorted(_OPERATION_REGISTRY)
    try:
        category = ProcessorCategory(category)
    except ValueError as exc:
        raise ValidationError(f"Unknown category: {category!r}") from exc
    return sorted(
        name for name in _OPERATION_REGISTRY
        if operation_category(name) is category
    )


def operation_parameters(name: str) -> tuple:
    """``ParamSpec`` tuple describing the tunable parameters of *name*.

    Parameters fixed by the registry preset (e.g. the ``operation`` of
    ``'bitwise_and'``) are omitted.
    """
    cls, preset = _lookup(name)
    return tuple(spec for spec in cls.__param_specs__ if spec.name not in preset)


def get_operation(name: str, **params: Any):
    """Instantiate the operation *name* configured with *params*.

    Returns
    -------
    ImageTransform
        Configured processor; call ``apply(source)`` on it.

    Raises
    ------
    ValidationError
        If *name* is not a registered operation or a choice parameter
        has an unknown value.
    TypeError
        If *params* contains a name the operation does not accept.
    """
    cls, preset = _lookup(name)
    return cls(**{**preset, **params})


def apply_operation(
    name: str,
    source: PixelBuffer,
    operand: Optional[PixelBuffer] = None,
    **params: Any,
) -> PixelBuffer:
    """Run operation *name* on *source* and return the new buffer.

    Parameters
    ----------
    name : str
        Registered operation name.
    source : PixelBuffer
        Input image. Never modified.
    operand : PixelBuffer, optional
        Second image for two-operand operations (``bitwise_and`` ...).
    **params
        Tunable parameter values.

    Returns
    -------
    PixelBuffer
        Newly allocated result.
    """
    operation = get_operation(name, **params)
    logger.debug("Applying %s to %r", name, source)
    if operand is not None:
        return operation.apply(source, operand=operand)
    return operation.apply(source)


__all__ = [
    'list_operations',
    'get_operation',
    'apply_operation',
    'operation_class',
    'operation_category',
    'operation_parameters',
]
