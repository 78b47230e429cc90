# -*- coding: utf-8 -*-
"""
Point Operations - Per-sample lookup-table transforms.

Every operation here maps each sample independently of its neighbours.
All but ``MinMaxStretch`` and ``BitwiseCombine`` build a single 256-entry
lookup table from their parameters (and, for ``AutoContrast``, from the
image statistics) and apply it to every channel of every pixel, alpha
included.

- ``LinearContrast``: piecewise-linear stretch of ``[min_in, max_in]``
  onto ``[min_out, max_out]``.
- ``AutoContrast``: ``LinearContrast`` with input bounds taken from
  luminance percentiles.
- ``BrightnessContrast``: ``factor * (v - 128) + 128 + brightness``.
- ``GammaCorrection``, ``LogTransform``, ``PowerTransform``.
- ``Invert`` / ``BitwiseNot``, ``ClipBrightness``, ``Quantize``.
- ``GainBias``: ``alpha * v + beta``.
- ``MinMaxStretch``: per-channel full-range stretch.
- ``BitwiseCombine``: channel-wise AND / OR / XOR of two buffers.

Degenerate parameter combinations (``min_in >= max_in``, ``min > max``)
produce an unmodified copy of the input.

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
2026-10-08

Modified
--------
2026-10-19
"""

# Standard library
import logging
from abc import abstractmethod
from typing import Annotated, Any, Dict, Optional, Tuple

# Third-party
import numpy as np

# PixLab internal
from pixlab.buffer import PixelBuffer, require_same_size, to_uint8
from pixlab.exceptions import DimensionMismatchError, ValidationError
from pixlab.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from pixlab.image_processing.params import Desc, Options, Range
from pixlab.image_processing.versioning import processor_tags, processor_version
from pixlab.vocabulary import BitwiseOperation, ProcessorCategory, option_values

logger = logging.getLogger(__name__)


_LEVELS = np.arange(256, dtype=np.float64)


def identity_lut() -> np.ndarray:
    """The 256-entry identity mapping."""
    return np.arange(256, dtype=np.uint8)


def linear_contrast_lut(
    min_in: float,
    max_in: float,
    min_out: float = 0,
    max_out: float = 255,
) -> np.ndarray:
    """Lookup table stretching ``[min_in, max_in]`` onto ``[min_out, max_out]``.

    Samples at or below ``min_in`` map to ``min_out``; samples at or above
    ``max_in`` map to ``max_out``. When ``min_in >= max_in`` the stretch
    is undefined and the identity table is returned.

    Returns
    -------
    np.ndarray
        ``uint8`` array of shape ``(256,)``.
    """
    if min_in >= max_in:
        logger.debug(
            "Contrast bounds min_in=%s >= max_in=%s; identity mapping",
            min_in, max_in,
        )
        return identity_lut()
    # Multiply before dividing so exact halves survive for rounding.
    mapped = min_out + (_LEVELS - min_in) * (max_out - min_out) / float(max_in - min_in)
    mapped[_LEVELS <= min_in] = min_out
    mapped[_LEVELS >= max_in] = max_out
    return to_uint8(mapped)


class LookupTableTransform(ImageTransform):
    """Base class for operations expressed as one 256-entry lookup table.

    Subclasses implement ``build_lut``. ``apply`` indexes the table with
    every sample of the source, so the output has the same shape as the
    input.
    """

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Map every sample of *source* through the lookup table.

        Returns
        -------
        PixelBuffer
            New buffer, same shape as *source*.
        """
        params = self._resolve_params(kwargs)
        lut = self.build_lut(source, params)
        return PixelBuffer.from_array(lut[source.array])

    @abstractmethod
    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        """Return the ``uint8`` table of shape ``(256,)`` for this call."""
        ...


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Manual linear contrast stretch')
class LinearContrast(LookupTableTransform):
    """Piecewise-linear contrast stretch.

    Parameters
    ----------
    min_in, max_in : int
        Input range to stretch. ``min_in >= max_in`` leaves the image
        unchanged.
    min_out, max_out : int
        Output range. Default ``0`` and ``255``.

    Examples
    --------
    >>> stretch = LinearContrast(min_in=50, max_in=200)
    >>> result = stretch.apply(buf)
    """

    min_in: Annotated[int, Range(min=0, max=255), Desc('Input minimum')] = 0
    max_in: Annotated[int, Range(min=0, max=255), Desc('Input maximum')] = 255
    min_out: Annotated[int, Range(min=0, max=255), Desc('Output minimum')] = 0
    max_out: Annotated[int, Range(min=0, max=255), Desc('Output maximum')] = 255

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        return linear_contrast_lut(
            params['min_in'], params['max_in'],
            params['min_out'], params['max_out'],
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Percentile-based automatic contrast stretch')
class AutoContrast(LookupTableTransform):
    """Linear contrast stretch between two luminance percentiles.

    The luminance samples (the samples themselves for a single-channel
    image) are sorted and the values at rank ``int(n * p / 100)`` (clamped
    to ``n - 1``) become ``min_in`` and ``max_in`` of a full-range
    ``LinearContrast``.

    Parameters
    ----------
    min_percentile : float
        Lower percentile in ``[0, 100]``. Default ``2.0``.
    max_percentile : float
        Upper percentile in ``[0, 100]``. Default ``98.0``.
    """

    min_percentile: Annotated[float, Range(min=0.0, max=100.0),
                              Desc('Lower percentile')] = 2.0
    max_percentile: Annotated[float, Range(min=0.0, max=100.0),
                              Desc('Upper percentile')] = 98.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        low, high = self.percentile_bounds(
            source, params['min_percentile'], params['max_percentile'],
        )
        logger.debug("AutoContrast bounds: %d..%d", low, high)
        return linear_contrast_lut(low, high, 0, 255)

    @staticmethod
    def percentile_bounds(
        source: PixelBuffer,
        min_percentile: float,
        max_percentile: float,
    ) -> Tuple[int, int]:
        """Sample values at the two percentile ranks of the luminance."""
        ordered = np.sort(source.to_grayscale().samples)
        n = ordered.size

        def rank(p: float) -> int:
            return min(int(n * p / 100.0), n - 1)

        return int(ordered[rank(min_percentile)]), int(ordered[rank(max_percentile)])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Brightness offset and contrast factor')
class BrightnessContrast(LookupTableTransform):
    """Classic brightness/contrast adjustment.

    ``v' = factor * (v - 128) + 128 + brightness`` with
    ``factor = 259 * (contrast + 255) / (255 * (259 - contrast))``.
    """

    brightness: Annotated[float, Range(min=-255.0, max=255.0),
                          Desc('Additive brightness offset')] = 0.0
    contrast: Annotated[float, Range(min=-255.0, max=255.0),
                        Desc('Contrast amount')] = 0.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        contrast = params['contrast']
        factor = 259.0 * (contrast + 255.0) / (255.0 * (259.0 - contrast))
        return to_uint8(factor * (_LEVELS - 128.0) + 128.0 + params['brightness'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Gamma correction')
class GammaCorrection(LookupTableTransform):
    """``v' = round(255 * (v / 255) ** gamma)``."""

    gamma: Annotated[float, Range(min=0.01, max=10.0), Desc('Gamma exponent')] = 1.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(255.0 * np.power(_LEVELS / 255.0, params['gamma']))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Logarithmic intensity transform')
class LogTransform(LookupTableTransform):
    """``v' = c' * ln(1 + v)`` with ``c' = c * 255 / ln(256)``.

    With ``c = 1`` the brightest sample maps exactly to 255.
    """

    c: Annotated[float, Range(min=0.01, max=10.0), Desc('Scale constant')] = 1.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        scale = params['c'] * 255.0 / np.log(256.0)
        return to_uint8(scale * np.log1p(_LEVELS))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Power-law intensity transform')
class PowerTransform(LookupTableTransform):
    """``v' = 255 * c * (v / 255) ** power``, clamped."""

    power: Annotated[float, Range(min=0.01, max=10.0), Desc('Exponent')] = 1.0
    c: Annotated[float, Range(min=0.01, max=10.0), Desc('Scale constant')] = 1.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(
            255.0 * params['c'] * np.power(_LEVELS / 255.0, params['power'])
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Negative image')
class Invert(LookupTableTransform):
    """``v' = 255 - v``. Applying it twice restores the input exactly."""

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        return 255 - identity_lut()


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Bitwise NOT of every sample')
class BitwiseNot(Invert):
    """Bitwise complement; identical to ``Invert`` on 8-bit samples."""


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Clamp samples into a brightness window')
class ClipBrightness(LookupTableTransform):
    """Clamp every sample into ``[min_value, max_value]``.

    ``min_value > max_value`` leaves the image unchanged.
    """

    min_value: Annotated[int, Range(min=0, max=255), Desc('Lower bound')] = 0
    max_value: Annotated[int, Range(min=0, max=255), Desc('Upper bound')] = 255

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        low, high = params['min_value'], params['max_value']
        if low > high:
            logger.debug("Clip bounds %d > %d; identity mapping", low, high)
            return identity_lut()
        return np.clip(identity_lut(), low, high).astype(np.uint8)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Reduce the number of intensity levels')
class Quantize(LookupTableTransform):
    """Uniform quantization to ``levels`` evenly spaced values.

    ``k = round(v * (levels - 1) / 255)`` and ``v' = round(k * 255 / (levels - 1))``,
    the evenly spaced level nearest to ``v``.

    Parameters
    ----------
    levels : int
        Number of output levels, clamped to ``[2, 256]``. Default 8.

    Examples
    --------
    >>> Quantize(levels=2).apply(buf).samples.tolist()
    [0, 0, 255, 255]
    """

    levels: Annotated[int, Range(min=2, max=256), Desc('Output levels')] = 8

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        intervals = params['levels'] - 1
        index = np.floor(_LEVELS * intervals / 255.0 + 0.5)
        return to_uint8(index * 255.0 / intervals)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Linear gain and bias')
class GainBias(LookupTableTransform):
    """``v' = alpha * v + beta``, clamped."""

    alpha: Annotated[float, Range(min=0.1, max=3.0), Desc('Gain')] = 1.5
    beta: Annotated[float, Range(min=-100.0, max=100.0), Desc('Bias')] = 0.0

    def build_lut(self, source: PixelBuffer, params: Dict[str, Any]) -> np.ndarray:
        return to_uint8(params['alpha'] * _LEVELS + params['beta'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Per-channel min/max stretch to full range')
class MinMaxStretch(ChannelwiseTransformMixin, ImageTransform):
    """Stretch each channel's ``[min, max]`` onto ``[0, 255]``.

    Flat channels (``min == max``) are left unchanged.
    """

    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        low, high = int(plane.min()), int(plane.max())
        if low == high:
            return plane.copy()
        return linear_contrast_lut(low, high, 0, 255)[plane]


_BITWISE_UFUNCS = {
    BitwiseOperation.AND: np.bitwise_and,
    BitwiseOperation.OR: np.bitwise_or,
    BitwiseOperation.XOR: np.bitwise_xor,
}


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Bitwise AND / OR / XOR of two images')
class BitwiseCombine(ImageTransform):
    """Channel-wise bitwise combination of two buffers.

    The second buffer is passed as the ``operand`` keyword. The first
    ``min(channels)`` channels are combined; any further channels of the
    first buffer are copied through. Buffers of different width or height
    cannot be combined and yield an unmodified copy of the first buffer.

    Parameters
    ----------
    operation : str
        ``'and'`` (default), ``'or'`` or ``'xor'``.

    Examples
    --------
    >>> masked = BitwiseCombine(operation='and').apply(image, operand=mask)
    """

    operation: Annotated[str, Options(*option_values(BitwiseOperation)),
                         Desc('Bitwise operator')] = 'and'

    def apply(
        self,
        source: PixelBuffer,
        operand: Optional[PixelBuffer] = None,
        **kwargs: Any,
    ) -> PixelBuffer:
        """Combine *source* with *operand*.

        Raises
        ------
        ValidationError
            If no *operand* is supplied.
        """
        if operand is None:
            raise ValidationError(
                f"{type(self).__name__} requires a second buffer "
                f"passed as 'operand'"
            )
        params = self._resolve_params(kwargs)
        try:
            require_same_size(source, operand)
        except DimensionMismatchError as exc:
            logger.warning(
                "Bitwise %s skipped: %s; returning the first operand unchanged",
                params['operation'], exc,
            )
            return source.clone()

        ufunc = _BITWISE_UFUNCS[BitwiseOperation(params['operation'])]
        n = min(source.channels, operand.channels)
        result = source.array.copy()
        result[:, :, :n] = ufunc(source.array[:, :, :n], operand.array[:, :, :n])
        return PixelBuffer.from_array(result)
