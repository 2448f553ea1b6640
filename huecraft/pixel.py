"""Pixel value types and RGB <-> HSL conversion.

Two flavours of conversion are provided:

- scalar helpers (``rgb_to_hsl`` / ``hsl_to_rgb``) for single colours, and
- vectorised helpers (``rgb_to_hsl_array`` / ``hsl_to_rgb_array``) that the
  raster operations use on whole ``(H, W, 3)`` arrays.

The scalar helpers delegate to the vectorised ones so both always agree.

Conventions
-----------
- RGB channels are integers in [0, 255].
- Hue is in degrees, [0, 360). Achromatic colours have hue 0.
- Saturation and lightness are floats in [0, 1].
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import OutOfRangeError

Array = np.ndarray


def require_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise OutOfRangeError(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value):
        raise OutOfRangeError(f"{name} must be finite, got {value!r}")
    return value


def rgb_to_hsl_array(pixels: Array) -> tuple[Array, Array, Array]:
    """Convert an RGB array to hue, saturation and lightness planes.

    Parameters
    ----------
    pixels : np.ndarray
        Array of shape (..., 3) holding channel values in [0, 255].

    Returns
    -------
    tuple[np.ndarray, np.ndarray, np.ndarray]
        Hue in degrees [0, 360), saturation and lightness in [0, 1], each of
        shape ``pixels.shape[:-1]`` and dtype float64.
    """
    arr = np.asarray(pixels, dtype=np.float64) / 255.0
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    cmax = arr.max(axis=-1)
    cmin = arr.min(axis=-1)
    delta = cmax - cmin
    light = (cmax + cmin) / 2.0

    chromatic = delta > 0
    # max > min keeps lightness strictly inside (0, 1), so the denominator is positive
    denom = np.where(chromatic, 1.0 - np.abs(2.0 * light - 1.0), 1.0)
    sat = np.where(chromatic, delta / denom, 0.0)
    sat = np.clip(sat, 0.0, 1.0)

    safe = np.where(chromatic, delta, 1.0)
    hue = np.where(
        cmax == r,
        np.mod((g - b) / safe, 6.0),
        np.where(cmax == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    hue = np.where(chromatic, hue * 60.0, 0.0)
    hue = np.mod(hue, 360.0)
    return hue, sat, light


def hsl_to_rgb_array(hue: Array, sat: Array, light: Array) -> Array:
    """Convert hue, saturation and lightness planes back to RGB.

    Hue is wrapped modulo 360; saturation and lightness are clamped to [0, 1].
    Each output channel is rounded to the nearest integer and clamped to
    [0, 255].

    Returns
    -------
    np.ndarray
        Array of shape ``hue.shape + (3,)``, dtype=uint8.
    """
    h = np.mod(np.asarray(hue, dtype=np.float64), 360.0)
    s = np.clip(np.asarray(sat, dtype=np.float64), 0.0, 1.0)
    l = np.clip(np.asarray(light, dtype=np.float64), 0.0, 1.0)

    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    hp = h / 60.0
    x = c * (1.0 - np.abs(np.mod(hp, 2.0) - 1.0))
    m = l - c / 2.0
    zero = np.zeros_like(c)

    sector = np.floor(hp).astype(np.int64) % 6
    conds = [sector == i for i in range(6)]
    rp = np.select(conds, [c, x, zero, zero, x, c])
    gp = np.select(conds, [x, c, c, x, zero, zero])
    bp = np.select(conds, [zero, zero, x, c, c, x])

    rgb = np.stack([rp + m, gp + m, bp + m], axis=-1) * 255.0
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert a single RGB colour to ``(hue, saturation, lightness)``."""
    pixel = RGB(r, g, b)
    h, s, l = rgb_to_hsl_array(np.array([[pixel.r, pixel.g, pixel.b]], dtype=np.uint8))
    return float(h[0]), float(s[0]), float(l[0])


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert a single HSL colour to ``(r, g, b)`` integers."""
    colour = HSL(h, s, l)
    out = hsl_to_rgb_array(
        np.array([colour.h]), np.array([colour.s]), np.array([colour.l])
    )[0]
    return int(out[0]), int(out[1]), int(out[2])


@dataclass(frozen=True)
class RGB:
    """An RGB colour with integer channels in [0, 255].

    Construction rejects out-of-range values; use :meth:`clamped` to turn an
    arbitrary numeric result into a valid pixel.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            try:
                as_int = int(value)
            except (TypeError, ValueError):
                raise OutOfRangeError(f"channel {name} must be an integer, got {value!r}") from None
            if as_int != value or not 0 <= as_int <= 255:
                raise OutOfRangeError(f"channel {name} must be an integer in [0, 255], got {value!r}")
            object.__setattr__(self, name, as_int)

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> "RGB":
        """Truncate each channel toward zero and clamp it to [0, 255]."""
        channels = []
        for name, value in zip("rgb", (r, g, b)):
            value = require_finite(name, value)
            channels.append(min(max(int(value), 0), 255))
        return cls(*channels)

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def to_hsl(self) -> "HSL":
        return HSL(*rgb_to_hsl(self.r, self.g, self.b))


@dataclass(frozen=True)
class HSL:
    """An HSL colour.

    The hue is wrapped into [0, 360) and saturation/lightness are clamped to
    [0, 1] on construction, so every instance is normalised.
    """

    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        h = require_finite("hue", self.h) % 360.0
        if h >= 360.0:  # -tiny % 360 rounds up to 360.0
            h = 0.0
        s = min(max(require_finite("saturation", self.s), 0.0), 1.0)
        l = min(max(require_finite("lightness", self.l), 0.0), 1.0)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "s", s)
        object.__setattr__(self, "l", l)

    def shift_hue(self, delta: float) -> "HSL":
        return HSL(self.h + require_finite("hue delta", delta), self.s, self.l)

    def shift_saturation(self, delta: float) -> "HSL":
        return HSL(self.h, self.s + require_finite("saturation delta", delta), self.l)

    def shift_lightness(self, delta: float) -> "HSL":
        return HSL(self.h, self.s, self.l + require_finite("lightness delta", delta))

    def to_rgb(self) -> RGB:
        return RGB(*hsl_to_rgb(self.h, self.s, self.l))


__all__ = [
    "RGB",
    "HSL",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
    "require_finite",
]
