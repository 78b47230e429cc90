# -*- coding: utf-8 -*-
"""
IO Module - Codec boundary between image files and pixel buffers.

Decodes PNG, JPEG and BMP files (and anything else Pillow can open) into
``PixelBuffer`` objects and encodes buffers back to PNG, JPEG or BMP.
Convenience functions pick the codec from the file extension.

Dependencies
------------
Pillow

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
2026-10-06

Modified
--------
2026-10-13
"""

# Standard library
import importlib
from pathlib import Path
from typing import Dict, Optional, Union

# PixLab internal
from pixlab.buffer import PixelBuffer
from pixlab.exceptions import EncodeError
from pixlab.IO.base import ImageReader, ImageWriter
from pixlab.IO.pillow_io import (
    PillowReader,
    PillowWriter,
    decode_bytes,
    encode_buffer,
    resolve_format,
)


# Writer registry: maps format strings to (module_path, class_name)
_WRITER_REGISTRY: Dict[str, tuple] = {
    'png': ('pixlab.IO.pillow_io', 'PillowWriter'),
    'jpeg': ('pixlab.IO.pillow_io', 'PillowWriter'),
    'bmp': ('pixlab.IO.pillow_io', 'PillowWriter'),
}

# Extension-to-format mapping for auto-detection
_EXTENSION_MAP: Dict[str, str] = {
    '.png': 'png',
    '.jpg': 'jpeg',
    '.jpeg': 'jpeg',
    '.bmp': 'bmp',
}


def get_writer(format: str, filepath: Union[str, Path]) -> ImageWriter:
    """Create an ImageWriter for the given format.

    Parameters
    ----------
    format : str
        Output format. One of ``'png'``, ``'jpeg'`` (or ``'jpg'``),
        ``'bmp'``.
    filepath : str or Path
        Output file path.

    Returns
    -------
    ImageWriter
        Concrete writer instance for the requested format.

    Raises
    ------
    EncodeError
        If *format* is not a recognized format string.
    """
    key = resolve_format(format).value
    if key not in _WRITER_REGISTRY:
        raise EncodeError(
            f"Unknown writer format: {format!r}. "
            f"Supported formats: {sorted(_WRITER_REGISTRY.keys())}"
        )
    module_path, class_name = _WRITER_REGISTRY[key]
    module = importlib.import_module(module_path)
    writer_cls = getattr(module, class_name)
    return writer_cls(filepath, format=key)


def write(
    buffer: PixelBuffer,
    path: Union[str, Path],
    format: Optional[str] = None,
) -> None:
    """Write a buffer to a file, auto-detecting format from extension.

    Parameters
    ----------
    buffer : PixelBuffer
        Image to write.
    path : str or Path
        Output file path.
    format : str, optional
        Output format override. If ``None``, detected from the extension.

    Raises
    ------
    EncodeError
        If *format* is ``None`` and the extension is not recognized.

    Examples
    --------
    >>> from pixlab.IO import write
    >>> write(processed, 'result.png')
    """
    path = Path(path)
    if format is None:
        ext = path.suffix.lower()
        if ext not in _EXTENSION_MAP:
            raise EncodeError(
                f"Cannot determine writer format from extension '{ext}'. "
                f"Supported extensions: {sorted(_EXTENSION_MAP.keys())}. "
                f"Provide an explicit format= argument."
            )
        format = _EXTENSION_MAP[ext]

    with get_writer(format, path) as writer:
        writer.write(buffer)


def read(path: Union[str, Path]) -> PixelBuffer:
    """Read and decode an image file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    DecodeError
        If the file cannot be decoded.
    """
    with PillowReader(path) as reader:
        return reader.read()


def decode(data: bytes) -> PixelBuffer:
    """Decode encoded image bytes. See :func:`decode_bytes`."""
    return decode_bytes(data)


def encode(buffer: PixelBuffer, format: str = 'png') -> bytes:
    """Encode a buffer to bytes. See :func:`encode_buffer`."""
    return encode_buffer(buffer, format)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'PillowReader',
    'PillowWriter',
    'get_writer',
    'write',
    'read',
    'decode',
    'encode',
]
