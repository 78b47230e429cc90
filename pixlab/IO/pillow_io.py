# -*- coding: utf-8 -*-
"""
Pillow Codec - Decode and encode PNG, JPEG and BMP images.

Reads any raster Pillow can open into a ``PixelBuffer`` and writes a
``PixelBuffer`` as PNG, JPEG (quality 90) or BMP. Decoded images are
normalized to 8-bit gray, RGB or RGBA: palette images become RGB (RGBA
when they carry transparency), gray+alpha becomes RGBA and higher
bit-depth gray becomes 8-bit gray.

Dependencies
------------
Pillow

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
2026-10-06

Modified
--------
2026-10-19
"""

# Standard library
import io
import logging
from pathlib import Path
from typing import Optional, Union

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
    # Oversized images raise DecompressionBombError, an Exception subclass.
    _DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)
except ImportError:
    _HAS_PIL = False
    _DECODE_ERRORS = (OSError, ValueError, SyntaxError)

# PixLab internal
from pixlab.buffer import PixelBuffer, to_uint8
from pixlab.exceptions import DecodeError, DependencyError, EncodeError
from pixlab.IO.base import ImageReader, ImageWriter
from pixlab.vocabulary import ImageFormat

logger = logging.getLogger(__name__)


# Pillow format names per output format
_PIL_FORMATS = {
    ImageFormat.PNG: 'PNG',
    ImageFormat.JPEG: 'JPEG',
    ImageFormat.BMP: 'BMP',
}

JPEG_QUALITY = 90


def _require_pil() -> None:
    if not _HAS_PIL:
        raise DependencyError(
            "Pillow is required for image decoding and encoding. "
            "Install with: pip install Pillow"
        )


def _normalize_mode(image: 'Image.Image') -> 'Image.Image':
    """Convert a decoded Pillow image to L, RGB or RGBA."""
    mode = image.mode
    if mode in ('L', 'RGB', 'RGBA'):
        return image
    if mode == 'P':
        target = 'RGBA' if 'transparency' in image.info else 'RGB'
        return image.convert(target)
    if mode == '1':
        return image.convert('L')
    if mode.startswith('I') or mode == 'F':
        # Scale wide gray down to 8 bits instead of saturating.
        wide = np.asarray(image, dtype=np.float64)
        if mode.startswith('I;16') or wide.max() > 255.0:
            wide = wide / 65535.0 * 255.0
        elif mode == 'F' and wide.max() <= 1.0:
            wide = wide * 255.0
        return Image.fromarray(to_uint8(wide))
    if 'A' in image.getbands():
        return image.convert('RGBA')
    return image.convert('RGB')


def _to_buffer(image: 'Image.Image') -> PixelBuffer:
    image = _normalize_mode(image)
    return PixelBuffer.from_array(np.asarray(image, dtype=np.uint8))


def resolve_format(format: Union[str, ImageFormat]) -> ImageFormat:
    """Map ``'png'``, ``'jpg'``, ``'jpeg'`` or ``'bmp'`` to an ``ImageFormat``.

    Raises
    ------
    EncodeError
        If the format is not supported.
    """
    if isinstance(format, ImageFormat):
        return format
    key = str(format).lower().lstrip('.')
    if key == 'jpg':
        key = 'jpeg'
    try:
        return ImageFormat(key)
    except ValueError:
        raise EncodeError(
            f"Unsupported image format: {format!r}. Supported formats: "
            f"{[f.value for f in ImageFormat]}"
        ) from None


def decode_bytes(data: bytes) -> PixelBuffer:
    """Decode an in-memory encoded image.

    Parameters
    ----------
    data : bytes
        Encoded file contents.

    Returns
    -------
    PixelBuffer
        Decoded buffer with 1, 3 or 4 channels.

    Raises
    ------
    DecodeError
        If Pillow cannot identify or fully decode *data*.
    """
    _require_pil()
    try:
        with Image.open(io.BytesIO(bytes(data))) as image:
            image.load()
            return _to_buffer(image)
    except _DECODE_ERRORS as exc:
        raise DecodeError(f"Cannot decode image: {exc}") from exc


def encode_buffer(
    buffer: PixelBuffer,
    format: Union[str, ImageFormat] = ImageFormat.PNG,
) -> bytes:
    """Encode *buffer* to PNG, JPEG or BMP bytes.

    JPEG output drops the alpha channel.

    Raises
    ------
    EncodeError
        If the format is unsupported or Pillow fails to encode.
    """
    _require_pil()
    fmt = resolve_format(format)

    array = buffer.array
    if buffer.channels == 1:
        array = array[:, :, 0]
    elif buffer.channels == 4 and fmt is ImageFormat.JPEG:
        array = array[:, :, :3]
    image = Image.fromarray(np.ascontiguousarray(array))

    out = io.BytesIO()
    options = {'quality': JPEG_QUALITY} if fmt is ImageFormat.JPEG else {}
    try:
        image.save(out, format=_PIL_FORMATS[fmt], **options)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(f"Cannot encode image as {fmt.value}: {exc}") from exc
    return out.getvalue()


class PillowReader(ImageReader):
    """Read PNG, JPEG, BMP (and anything else Pillow opens) into a buffer.

    Parameters
    ----------
    filepath : str or Path
        Image file path.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    DecodeError
        If the file is not a recognizable image.

    Examples
    --------
    >>> from pixlab.IO.pillow_io import PillowReader
    >>> with PillowReader('lena.png') as reader:
    ...     buf = reader.read()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_pil()
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        try:
            with Image.open(self.filepath) as image:
                self.metadata = {
                    'format': image.format,
                    'mode': image.mode,
                    'width': image.width,
                    'height': image.height,
                }
        except _DECODE_ERRORS as exc:
            raise DecodeError(
                f"Cannot decode image {self.filepath}: {exc}"
            ) from exc

    def read(self) -> PixelBuffer:
        try:
            with Image.open(self.filepath) as image:
                image.load()
                buffer = _to_buffer(image)
        except _DECODE_ERRORS as exc:
            raise DecodeError(
                f"Cannot decode image {self.filepath}: {exc}"
            ) from exc
        logger.info(
            "Loaded image: %s (%dx%d, %d channels)",
            self.filepath, buffer.width, buffer.height, buffer.channels,
        )
        return buffer


class PillowWriter(ImageWriter):
    """Write a buffer as PNG, JPEG or BMP.

    Parameters
    ----------
    filepath : str or Path
        Output path.
    format : str or ImageFormat, optional
        Output format. Inferred from the extension when omitted.

    Raises
    ------
    EncodeError
        If the format is unsupported.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        format: Optional[Union[str, ImageFormat]] = None,
    ) -> None:
        _require_pil()
        super().__init__(filepath)
        self.format = resolve_format(
            format if format is not None else self.filepath.suffix
        )

    def write(self, buffer: PixelBuffer) -> None:
        self.filepath.write_bytes(encode_buffer(buffer, self.format))
        logger.info(
            "Saved image: %s (%s, %dx%d)",
            self.filepath, self.format.value, buffer.width, buffer.height,
        )
