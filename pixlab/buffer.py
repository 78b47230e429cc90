# -*- coding: utf-8 -*-
"""
Pixel Buffer - Owned 8-bit raster storage shared by every operation.

Defines ``PixelBuffer``, the single image type consumed and produced by
the processing library. A buffer owns a contiguous ``uint8`` array of
``height x width x channels`` samples in row-major, channel-interleaved
order, so ``samples`` is exactly the byte layout handed over by codecs and
texture uploaders. Every operation returns a newly allocated buffer; no
two buffers share storage after ``clone()``.

Also provides ``to_uint8``, the single float-to-byte storage rule used
throughout the library (round half up, then clamp to ``[0, 255]``).

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
2026-10-05

Modified
--------
2026-10-19
"""

# Standard library
from pathlib import Path
from typing import Optional, Tuple, Union

# Third-party
import numpy as np

# PixLab internal
from pixlab.color import luminance
from pixlab.exceptions import DimensionMismatchError, ValidationError


VALID_CHANNELS = (1, 3, 4)


def to_uint8(values: Union[np.ndarray, float]) -> np.ndarray:
    """Convert floating-point samples to bytes for storage.

    Rounds half up (``floor(v + 0.5)``) and clamps to ``[0, 255]``.

    Parameters
    ----------
    values : np.ndarray or float
        Sample values of any shape.

    Returns
    -------
    np.ndarray
        ``uint8`` array, same shape as *values*.
    """
    rounded = np.floor(np.asarray(values, dtype=np.float64) + 0.5)
    return np.clip(rounded, 0.0, 255.0).astype(np.uint8)


class PixelBuffer:
    """Row-major, channel-interleaved 8-bit raster.

    Parameters
    ----------
    width : int
        Number of columns, ``> 0``.
    height : int
        Number of rows, ``> 0``.
    channels : int
        Samples per pixel: 1 (gray), 3 (RGB) or 4 (RGBA). Default 3.
    samples : bytes-like or np.ndarray, optional
        Initial samples, ``width * height * channels`` long. Copied.
        When omitted the buffer is zero-filled.

    Raises
    ------
    ValidationError
        If dimensions are not positive, ``channels`` is not one of
        ``(1, 3, 4)``, or ``samples`` has the wrong length.

    Examples
    --------
    >>> from pixlab.buffer import PixelBuffer
    >>> buf = PixelBuffer(2, 2, 1, bytes([0, 85, 170, 255]))
    >>> buf.get_sample(1, 1, 0)
    255
    >>> buf.get_sample(5, 5, 0)
    0
    """

    def __init__(
        self,
        width: int,
        height: int,
        channels: int = 3,
        samples: Optional[Union[bytes, bytearray, np.ndarray]] = None,
    ) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValidationError(
                f"width and height must be > 0, got {width}x{height}"
            )
        if channels not in VALID_CHANNELS:
            raise ValidationError(
                f"channels must be one of {VALID_CHANNELS}, got {channels}"
            )
        shape = (int(height), int(width), int(channels))

        if samples is None:
            self._data = np.zeros(shape, dtype=np.uint8)
            return

        if isinstance(samples, np.ndarray):
            flat = samples.reshape(-1)
            if flat.dtype != np.uint8:
                flat = to_uint8(flat)
        else:
            flat = np.frombuffer(bytes(samples), dtype=np.uint8)
        expected = shape[0] * shape[1] * shape[2]
        if flat.size != expected:
            raise ValidationError(
                f"Expected {expected} samples for "
                f"{width}x{height}x{channels}, got {flat.size}"
            )
        self._data = flat.reshape(shape).copy()

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def create(cls, width: int, height: int, channels: int = 3) -> 'PixelBuffer':
        """Allocate a zero-filled buffer."""
        return cls(width, height, channels)

    @classmethod
    def from_bytes(
        cls,
        width: int,
        height: int,
        channels: int,
        data: Union[bytes, bytearray],
    ) -> 'PixelBuffer':
        """Build a buffer from a raw interleaved byte string."""
        return cls(width, height, channels, data)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelBuffer':
        """Build a buffer from a ``(rows, cols)`` or ``(rows, cols, channels)`` array.

        Non-``uint8`` arrays are converted with :func:`to_uint8`.

        Raises
        ------
        ValidationError
            If the array is not 2D or 3D.
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        if array.ndim != 3:
            raise ValidationError(
                f"Expected 2D or 3D array, got shape {array.shape}"
            )
        if array.dtype != np.uint8:
            array = to_uint8(array)
        rows, cols, channels = array.shape
        return cls(cols, rows, channels, np.ascontiguousarray(array))

    @classmethod
    def decode(cls, data: bytes) -> 'PixelBuffer':
        """Decode an encoded image (PNG, JPEG, BMP, ...).

        Raises
        ------
        DecodeError
            If the codec cannot parse *data*.
        """
        from pixlab.IO import decode
        return decode(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'PixelBuffer':
        """Read and decode an image file.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        DecodeError
            If the file cannot be parsed.
        """
        from pixlab.IO import read
        return read(path)

    def encode(self, format: str = 'png') -> bytes:
        """Encode to ``'png'``, ``'jpeg'`` or ``'bmp'`` bytes."""
        from pixlab.IO import encode
        return encode(self, format)

    def save(self, path: Union[str, Path]) -> None:
        """Encode and write to *path*, format chosen by extension."""
        from pixlab.IO import write
        write(self, path)

    # -----------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def shape(self) -> Tuple[int, int, int]:
        """``(height, width, channels)``."""
        return self._data.shape

    @property
    def pixel_count(self) -> int:
        return self._data.shape[0] * self._data.shape[1]

    def same_size(self, other: 'PixelBuffer') -> bool:
        """Whether *other* has the same width and height."""
        return self.width == other.width and self.height == other.height

    # -----------------------------------------------------------------
    # Sample access
    # -----------------------------------------------------------------
    @property
    def array(self) -> np.ndarray:
        """The ``(height, width, channels)`` sample array (not a copy)."""
        return self._data

    @property
    def samples(self) -> np.ndarray:
        """Flat ``uint8`` view in row-major, channel-interleaved order."""
        return self._data.reshape(-1)

    def to_bytes(self) -> bytes:
        return self._data.tobytes()

    def plane(self, channel: int) -> np.ndarray:
        """Return a 2D view of one channel."""
        return self._data[:, :, channel]

    def _in_range(self, x: int, y: int, c: int) -> bool:
        return (
            0 <= x < self.width
            and 0 <= y < self.height
            and 0 <= c < self.channels
        )

    def get_sample(self, x: int, y: int, c: int) -> int:
        """Sample at column *x*, row *y*, channel *c*; 0 when out of range."""
        if not self._in_range(x, y, c):
            return 0
        return int(self._data[y, x, c])

    def set_sample(self, x: int, y: int, c: int, value: int) -> None:
        """Write one sample; out-of-range coordinates are ignored."""
        if not self._in_range(x, y, c):
            return
        self._data[y, x, c] = min(max(int(value), 0), 255)

    # -----------------------------------------------------------------
    # Derived buffers
    # -----------------------------------------------------------------
    def clone(self) -> 'PixelBuffer':
        """Independent deep copy."""
        return PixelBuffer(self.width, self.height, self.channels, self._data)

    def to_grayscale(self) -> 'PixelBuffer':
        """Single-channel luminance view, ``0.299R + 0.587G + 0.114B``.

        A one-channel buffer is cloned. Alpha is ignored.
        """
        if self.channels == 1:
            return self.clone()
        return PixelBuffer.from_array(to_uint8(luminance(self._data)))

    # -----------------------------------------------------------------
    # Dunder
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.shape == other.shape
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"channels={self.channels})"
        )


def require_same_size(first: PixelBuffer, second: PixelBuffer) -> None:
    """Raise when two buffers differ in width or height.

    Raises
    ------
    DimensionMismatchError
        If the buffers have different dimensions.
    """
    if not first.same_size(second):
        raise DimensionMismatchError(
            f"Buffers differ in size: {first.width}x{first.height} "
            f"vs {second.width}x{second.height}"
        )
