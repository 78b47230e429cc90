# -*- coding: utf-8 -*-
"""
Color Space Conversion - RGB, HSV and CMYK sample conversions.

Pure functions converting normalized ``[0, 1]`` sample triples between RGB,
HSV (hue in degrees ``[0, 360)``) and CMYK, plus vectorized array variants
used by the histogram engine, the ``luminance`` weighting shared by every
grayscale reduction, and the ``Color`` value object that keeps all three
representations synchronized for the color picker panel.

Dependencies
------------
numpy

Author
------
Jason Fritz

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
2026-10-15
"""

# Standard library
from typing import Tuple

# Third-party
import numpy as np


# Below this chroma the hue is undefined and forced to 0.
_EPSILON = float(np.finfo(np.float32).eps)

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(samples: np.ndarray) -> np.ndarray:
    """Weighted grayscale intensity of a ``(..., channels)`` array.

    Uses ``0.299R + 0.587G + 0.114B``. Arrays with fewer than three
    channels reuse channel 0 for R, G and B, which returns it unchanged.
    Any alpha channel is ignored.

    Parameters
    ----------
    samples : np.ndarray
        Array whose last axis holds the channels.

    Returns
    -------
    np.ndarray
        float64 array with the channel axis removed.
    """
    data = np.asarray(samples, dtype=np.float64)
    if data.shape[-1] < 3:
        return data[..., 0].copy()
    wr, wg, wb = LUMA_WEIGHTS
    return wr * data[..., 0] + wg * data[..., 1] + wb * data[..., 2]


# =====================================================================
# Scalar conversions
# =====================================================================

def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert normalized RGB to ``(h, s, v)``.

    ``h`` is in degrees ``[0, 360)``; ``s`` and ``v`` are in ``[0, 1]``.
    Achromatic input (``max - min < eps``) yields ``h = 0``.

    Examples
    --------
    >>> rgb_to_hsv(1.0, 0.0, 0.0)
    (0.0, 1.0, 1.0)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    v = max_c
    s = delta / max_c if max_c > 0.0 else 0.0

    if delta < _EPSILON:
        h = 0.0
    elif max_c == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif max_c == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)

    return float(h % 360.0), float(s), float(v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert ``(h, s, v)`` back to normalized RGB.

    The hue sector is ``floor(h / 60) mod 6``.
    """
    h = h % 360.0
    c = v * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = v - c

    sector = int(h // 60.0) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return float(r + m), float(g + m), float(b + m)


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """Convert normalized RGB to ``(c, m, y, k)``.

    Pure black returns ``(0, 0, 0, 1)``.
    """
    k = 1.0 - max(r, g, b)
    if k >= 1.0 - _EPSILON:
        return 0.0, 0.0, 0.0, 1.0
    scale = 1.0 - k
    return (
        (1.0 - r - k) / scale,
        (1.0 - g - k) / scale,
        (1.0 - b - k) / scale,
        k,
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert ``(c, m, y, k)`` to normalized RGB."""
    return (
        (1.0 - c) * (1.0 - k),
        (1.0 - m) * (1.0 - k),
        (1.0 - y) * (1.0 - k),
    )


# =====================================================================
# Array conversions
# =====================================================================

def rgb_to_hsv_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`rgb_to_hsv` over a ``(..., 3)`` float array."""
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c

    chromatic = delta >= _EPSILON
    safe_delta = np.where(chromatic, delta, 1.0)
    safe_max = np.where(max_c > 0.0, max_c, 1.0)

    s = np.where(max_c > 0.0, delta / safe_max, 0.0)
    h = np.select(
        [max_c == r, max_c == g],
        [
            60.0 * (((g - b) / safe_delta) % 6.0),
            60.0 * ((b - r) / safe_delta + 2.0),
        ],
        default=60.0 * ((r - g) / safe_delta + 4.0),
    )
    h = np.where(chromatic, h, 0.0) % 360.0
    return np.stack([h, s, max_c], axis=-1)


def hsv_to_rgb_array(hsv: np.ndarray) -> np.ndarray:
    """Vectorized :func:`hsv_to_rgb` over a ``(..., 3)`` float array."""
    hsv = np.asarray(hsv, dtype=np.float64)
    h = hsv[..., 0] % 360.0
    s = hsv[..., 1]
    v = hsv[..., 2]

    c = v * s
    x = c * (1.0 - np.abs((h / 60.0) % 2.0 - 1.0))
    m = v - c
    zero = np.zeros_like(c)
    sector = np.floor(h / 60.0).astype(np.int64) % 6

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])
    return np.stack([r + m, g + m, b + m], axis=-1)


# =====================================================================
# Color value object
# =====================================================================

class Color:
    """A color held simultaneously in RGB, HSV and CMYK.

    Setting any representation recomputes the other two, mirroring the
    linked RGB/HSV/CMYK editors of the color panel.

    Parameters
    ----------
    r, g, b : float
        Normalized RGB components. Default black.

    Examples
    --------
    >>> color = Color()
    >>> color.set_hsv(120.0, 1.0, 1.0)
    >>> color.hex_rgb
    '#00FF00'
    """

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0) -> None:
        self.set_rgb(r, g, b)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int) -> 'Color':
        """Build from 8-bit components."""
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self._rgb

    @property
    def hsv(self) -> Tuple[float, float, float]:
        return self._hsv

    @property
    def cmyk(self) -> Tuple[float, float, float, float]:
        return self._cmyk

    def set_rgb(self, r: float, g: float, b: float) -> None:
        self._rgb = (_unit(r), _unit(g), _unit(b))
        self._hsv = rgb_to_hsv(*self._rgb)
        self._cmyk = rgb_to_cmyk(*self._rgb)

    def set_hsv(self, h: float, s: float, v: float) -> None:
        self._hsv = (float(h) % 360.0, _unit(s), _unit(v))
        self._rgb = hsv_to_rgb(*self._hsv)
        self._cmyk = rgb_to_cmyk(*self._rgb)

    def set_cmyk(self, c: float, m: float, y: float, k: float) -> None:
        self._cmyk = (_unit(c), _unit(m), _unit(y), _unit(k))
        self._rgb = cmyk_to_rgb(*self._cmyk)
        self._hsv = rgb_to_hsv(*self._rgb)

    def to_bytes(self) -> Tuple[int, int, int]:
        """RGB as 8-bit components (round half up)."""
        return tuple(
            min(max(int(np.floor(v * 255.0 + 0.5)), 0), 255)
            for v in self._rgb
        )

    @property
    def hex_rgb(self) -> str:
        """``#RRGGBB`` in upper case."""
        return '#{:02X}{:02X}{:02X}'.format(*self.to_bytes())

    def __repr__(self) -> str:
        return f"Color({self.hex_rgb})"


def _unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)
