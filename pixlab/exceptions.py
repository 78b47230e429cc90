# -*- coding: utf-8 -*-
"""
PixLab Exception Hierarchy - Domain-specific exceptions for PixLab operations.

Provides a small exception hierarchy that lets the interactive front end
catch PixLab-specific errors distinctly from Python built-in exceptions.
All PixLab exceptions subclass both ``PixlabError`` and the appropriate
built-in exception for backward compatibility.

Slider-driven parameter problems are never raised: numeric parameters are
clamped by :mod:`pixlab.image_processing.params` and degenerate
combinations resolve to identity results inside each operation.

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
2026-10-05

Modified
--------
2026-10-19
"""


class PixlabError(Exception):
    """Base exception for all PixLab errors."""


class ValidationError(PixlabError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for malformed buffers, unknown option or operation names,
    and other input validation failures that indicate a programming
    error rather than a transient slider value.
    """


class DecodeError(PixlabError, ValueError):
    """Image bytes or file could not be decoded.

    Raised when the codec cannot parse the input (truncated file,
    unsupported container, not an image at all).
    """


class EncodeError(PixlabError, ValueError):
    """Image could not be encoded to the requested format."""


class DimensionMismatchError(PixlabError, ValueError):
    """Two-operand operation received buffers of different size.

    Raised by :func:`pixlab.buffer.require_same_size`. Bitwise operators
    catch it and return a clone of the first operand.
    """


class DependencyError(PixlabError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when the codec layer is used without Pillow installed.
    """
