# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

Defines the ``ImageProcessor`` common base class and the ``ImageTransform``
ABC for buffer-to-buffer operations. ``ImageProcessor`` provides version
checking at first instantiation and ``typing.Annotated``-based tunable
parameter declarations with automatic ``__init__`` generation and runtime
resolution through ``**kwargs``.

Two mixins cover the common shapes of an operation:

- ``ChannelwiseTransformMixin`` runs a 2D kernel on every channel plane
  independently (filters).
- ``GrayscaleTransformMixin`` reduces the input to luminance first and
  returns a single-channel result (thresholds, edges, morphology).

Every ``apply`` returns a newly allocated ``PixelBuffer`` and never
mutates its input.

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
2026-10-07

Modified
--------
2026-10-19
"""

# Standard library
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# PixLab internal
from pixlab.buffer import PixelBuffer
from pixlab.image_processing.params import ParamSpec, collect_param_specs, _make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    Provides two cross-cutting capabilities:

    **Version checking**: Concrete subclasses that do not declare a processor
    version via ``@processor_version('x.y.z')`` will trigger a
    ``UserWarning`` at first instantiation.  The check uses ``__new__``
    rather than ``__init_subclass__`` so that decorators have been applied
    by the time the check runs.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using constraint markers from
    :mod:`pixlab.image_processing.params` (``Range``, ``Options``, ``Odd``,
    ``Desc``). ``__init_subclass__`` collects these into ``__param_specs__``
    and auto-generates an ``__init__`` (unless the subclass defines its
    own). At runtime, ``_resolve_params(kwargs)`` merges instance defaults
    with keyword-argument overrides and coerces them into range.
    """

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    #: Tuple of :class:`~pixlab.image_processing.params.ParamSpec` built
    #: automatically by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        # Generate a keyword-only __init__ (even with no params, so unknown
        # keywords raise) unless this class or a base wrote its own.
        inherited = cls.__init__
        hand_written = (
            '__init__' in cls.__dict__
            or (inherited is not object.__init__
                and not getattr(inherited, '__generated_init__', False))
        )
        if not hand_written:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @property
    def params(self) -> Dict[str, Any]:
        """Current value of every declared tunable parameter."""
        return {spec.name: getattr(self, spec.name)
                for spec in type(self).__param_specs__}

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance defaults with runtime *kwargs* overrides.

        For each declared parameter in ``__param_specs__``:

        1. If present in *kwargs*, use the *kwargs* value.
        2. Otherwise use the instance attribute (``self.<name>``).

        Every resolved value is coerced by its spec (range clamping, odd
        bumping, enum unwrapping).

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments.  May contain non-param keys
            (e.g. a second operand); those are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValidationError
            If a value is not one of the allowed choices.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            resolved[spec.name] = spec.coerce(value)
        return resolved


class ImageTransform(ImageProcessor):
    """
    Abstract base class for buffer-to-buffer transforms.

    Subclasses implement ``apply`` which takes the original buffer and
    returns a newly allocated result buffer.
    """

    @abstractmethod
    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """
        Apply the transform to a source buffer.

        Parameters
        ----------
        source : PixelBuffer
            Input image. Never modified.
        **kwargs
            Per-call overrides of the tunable parameters.

        Returns
        -------
        PixelBuffer
            Transformed image.
        """
        ...

    def __call__(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        return self.apply(source, **kwargs)


class ChannelwiseTransformMixin:
    """Mixin that applies a 2D transform to every channel plane.

    When mixed into an ``ImageTransform`` subclass, this provides
    ``apply()`` by resolving the tunable parameters once and calling the
    subclass's ``_apply_2d()`` on each ``(rows, cols)`` plane, then
    stacking the results back into a buffer with the input's channel
    count.

    Usage
    -----
    Subclasses should inherit from both the mixin and ``ImageTransform``::

        class MyFilter(ChannelwiseTransformMixin, ImageTransform):
            def _apply_2d(self, plane, params):
                ...
    """

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Apply the transform to each channel of *source*.

        Returns
        -------
        PixelBuffer
            New buffer, same shape as *source*.
        """
        params = self._resolve_params(kwargs)
        planes = [
            self._apply_2d(source.plane(c), params)
            for c in range(source.channels)
        ]
        return PixelBuffer.from_array(np.stack(planes, axis=-1))

    @abstractmethod
    def _apply_2d(self, plane: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        """Transform a single ``uint8`` plane; return a ``uint8`` plane."""
        ...


class GrayscaleTransformMixin:
    """Mixin for operations defined on the luminance reduction of the input.

    Provides ``apply()`` by converting *source* with
    ``PixelBuffer.to_grayscale()`` and handing the 2D ``uint8`` plane to
    the subclass's ``_apply_gray()``. The result is always a
    single-channel buffer.
    """

    def apply(self, source: PixelBuffer, **kwargs: Any) -> PixelBuffer:
        """Apply the transform to the grayscale reduction of *source*.

        Returns
        -------
        PixelBuffer
            New single-channel buffer, same width and height.
        """
        params = self._resolve_params(kwargs)
        gray = source.to_grayscale().plane(0)
        return PixelBuffer.from_array(self._apply_gray(gray, params))

    @abstractmethod
    def _apply_gray(self, gray: np.ndarray, params: Dict[str, Any]) -> np.ndarray:
        """Transform a 2D ``uint8`` plane; return a 2D ``uint8`` plane."""
        ...
