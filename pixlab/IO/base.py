# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for raster readers and writers.

Defines abstract base classes for reading image files into a
``PixelBuffer`` and writing a ``PixelBuffer`` back to disk. Concrete
codec implementations inherit from these classes.

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
2026-10-06
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from pixlab.buffer import PixelBuffer


class ImageReader(ABC):
    """
    Abstract base class for all image readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file
    metadata : Dict[str, Any]
        Format-specific metadata extracted from the file
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image reader.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file

        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist
        DecodeError
            If the file header cannot be parsed
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """
        Populate ``self.metadata`` with at least ``width``, ``height``
        and ``format``.
        """
        pass

    @abstractmethod
    def read(self) -> PixelBuffer:
        """
        Decode the full image.

        Returns
        -------
        PixelBuffer
            Decoded samples with 1, 3 or 4 channels.
        """
        pass

    def get_shape(self) -> Tuple[int, int]:
        """
        Get the ``(rows, cols)`` shape recorded in the metadata.
        """
        return self.metadata['height'], self.metadata['width']

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for all image writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    @abstractmethod
    def write(self, buffer: PixelBuffer) -> None:
        """
        Encode *buffer* and write it to ``self.filepath``.

        Raises
        ------
        EncodeError
            If the buffer cannot be encoded in the target format
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
