# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Options``, ``Odd``, ``Desc``)
for use inside ``typing.Annotated`` annotations on ``ImageProcessor``
subclasses, plus the ``ParamSpec`` introspection class and
collection/init-generation utilities consumed by
``ImageProcessor.__init_subclass__``.

Parameters are normally driven by interactive sliders that can hold
transient out-of-range values, so numeric constraints are *recovered*
rather than raised: values outside a ``Range`` are clamped to the nearest
bound and even values of an ``Odd`` parameter are bumped to the next odd
value. Wrong types and unknown ``Options`` choices still raise.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from pixlab.image_processing.params import Range, Odd, Desc

    class MyFilter(ImageTransform):
        kernel_size: Annotated[int, Range(min=3, max=51), Odd(),
                               Desc('Window side length')] = 3

Parameters are automatically collected into ``cls.__param_specs__`` at class
definition time. An ``__init__`` is auto-generated unless the class defines
its own.

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
2026-10-07

Modified
--------
2026-10-19
"""

# Standard library
import inspect
import logging
import numbers
from enum import Enum
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# PixLab internal
from pixlab.exceptions import ValidationError

logger = logging.getLogger(__name__)


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types.

    Any ``Annotated`` class-body field whose metadata includes at least one
    ``ParamMeta`` subclass instance is treated as a tunable parameter by
    ``ImageProcessor.__init_subclass__``.
    """


class Range(ParamMeta):
    """Inclusive numeric range constraint. Out-of-range values are clamped.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values.  Must supply at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Odd(ParamMeta):
    """Integer parameter that must be odd. Even values are bumped up."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Odd()"


class Desc(ParamMeta):
    """Human-readable parameter description.

    Parameters
    ----------
    text : str
        Description text shown in the front end.
    """

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec - processed introspection data class
# =====================================================================

_SENTINEL = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Built automatically from ``Annotated`` declarations by
    ``collect_param_specs``.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type (``float``, ``int``, ``str``, ``bool``, …).
    default : Any
        Default value, or *_SENTINEL* if the parameter is required.
    description : str
        Human-readable description.
    min_value : int, float, or None
        Inclusive minimum (from ``Range``).
    max_value : int, float, or None
        Inclusive maximum (from ``Range``).
    choices : tuple or None
        Allowed values (from ``Options``).
    odd : bool
        Whether the value is forced odd (from ``Odd``).
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices', 'odd',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
        choices: Optional[Tuple],
        odd: bool = False,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices
        self.odd = odd

    @property
    def required(self) -> bool:
        """Whether this parameter is required (has no default)."""
        return not self._has_default

    def coerce(self, value: Any) -> Any:
        """Check *value* against this spec and return the usable value.

        Rules:

        * ``int`` is accepted when ``param_type`` is ``float``; numpy
          scalars are converted to the plain Python type.
        * ``Enum`` members are replaced by their ``.value``.
        * Values outside the ``Range`` are clamped to the nearest bound.
        * Even values of an ``Odd`` parameter are bumped to the next odd
          value (or stepped down when that would exceed the maximum).
        * Type-check is skipped when ``param_type`` is ``object``.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValidationError
            If *value* is not in the allowed choices.
        """
        if isinstance(value, Enum):
            value = value.value

        # -- type check --
        if self.param_type is float:
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
            value = float(value)
        elif self.param_type is int:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
            value = int(value)
        elif self.param_type is not object:
            if not isinstance(value, self.param_type):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )

        # -- range clamp --
        if self.min_value is None and self.max_value is None and not self.odd:
            return self._check_choices(value)
        clamped = value
        if self.min_value is not None and clamped < self.min_value:
            clamped = self.min_value
        if self.max_value is not None and clamped > self.max_value:
            clamped = self.max_value
        if self.odd and clamped % 2 == 0:
            if self.max_value is not None and clamped + 1 > self.max_value:
                clamped -= 1
            else:
                clamped += 1
        if clamped != value:
            logger.warning(
                "Parameter '%s' value %r adjusted to %r",
                self.name, value, clamped,
            )
            value = type(value)(clamped)
        return self._check_choices(value)

    def _check_choices(self, value: Any) -> Any:
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )
        return value

    def __repr__(self) -> str:
        parts = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            parts += f", default={self.default!r}"
        if self.min_value is not None:
            parts += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            parts += f", max_value={self.max_value!r}"
        if self.choices is not None:
            parts += f", choices={self.choices!r}"
        if self.odd:
            parts += ", odd=True"
        return parts + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def _declared_names(cls: type, hints: dict) -> list:
    """Annotated field names of *cls*, base classes first."""
    names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)
    return names


def _build_spec(cls: type, name: str, hint: Any) -> Optional[ParamSpec]:
    """Turn one ``Annotated`` hint into a ``ParamSpec``, or ``None``."""
    if get_origin(hint) is not Annotated:
        return None
    metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
    if not metas:
        return None

    def marker(kind: type) -> Optional[ParamMeta]:
        found = [m for m in metas if isinstance(m, kind)]
        return found[-1] if found else None

    bounds = marker(Range)
    options = marker(Options)
    desc = marker(Desc)
    if bounds is not None and options is not None:
        raise TypeError(
            f"Parameter '{name}' on {cls.__qualname__}: "
            f"Range and Options are mutually exclusive."
        )

    default = getattr(cls, name, _SENTINEL)
    return ParamSpec(
        name=name,
        param_type=hint.__args__[0],
        default=None if default is _SENTINEL else default,
        has_default=default is not _SENTINEL,
        description=desc.text if desc is not None else '',
        min_value=bounds.min if bounds is not None else None,
        max_value=bounds.max if bounds is not None else None,
        choices=options.choices if options is not None else None,
        odd=marker(Odd) is not None,
    )


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields whose ``Annotated`` metadata includes at least one
    ``ParamMeta`` instance are collected. Base-class fields come first,
    then each class's own fields in declaration order.

    Raises
    ------
    TypeError
        If a field has both ``Range`` and ``Options`` constraints.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    specs = (_build_spec(cls, name, hints[name]) for name in _declared_names(cls, hints))
    return tuple(spec for spec in specs if spec is not None)


# =====================================================================
# __init__ generation
# =====================================================================

def _init_signature(param_specs: Tuple[ParamSpec, ...]) -> inspect.Signature:
    """Signature ``(self, *, name=default, ...)`` for the generated init."""
    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in param_specs:
        extra = {'default': spec.default} if not spec.required else {}
        params.append(
            inspect.Parameter(spec.name, inspect.Parameter.KEYWORD_ONLY, **extra)
        )
    return inspect.Signature(params)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` from *param_specs*.

    Unknown keywords are rejected, missing keywords fall back to the spec
    default, and every value is stored after ``spec.coerce``. A
    ``__post_init__`` hook runs last when the class defines one.
    """
    known = frozenset(spec.name for spec in param_specs)

    def __init__(self, **kwargs):
        unexpected = sorted(set(kwargs) - known)
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(unexpected)}"
            )
        for spec in param_specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif spec.required:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            else:
                value = spec.default
            object.__setattr__(self, spec.name, spec.coerce(value))

        post_init = getattr(self, '__post_init__', None)
        if post_init is not None:
            post_init()

    __init__.__signature__ = _init_signature(param_specs)
    __init__.__generated_init__ = True
    __init__.__qualname__ = '__init__'
    return __init__
