"""Per-pixel tone operations: grayscale, invert, sepia and black/white.

Every function takes a :class:`Raster` and returns a new one; the input is
never modified. Float results are truncated toward zero and clamped to
[0, 255].
"""
from __future__ import annotations

import logging

import numpy as np

from ..raster import Raster, require_raster

logger = logging.getLogger(__name__)

Array = np.ndarray

# Rows produce R, G, B; columns weight the input r, g, b.
SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float64,
)

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def to_channels(values: Array) -> Array:
    """Truncate float channel values toward zero and clamp to uint8."""
    return np.clip(np.trunc(values), 0, 255).astype(np.uint8)


def grayscale(raster: Raster) -> Raster:
    """Set every channel to the truncated mean ``(r + g + b) // 3``."""
    raster = require_raster(raster)
    logger.debug("grayscale %dx%d", raster.width, raster.height)
    mean = raster.pixels.astype(np.uint16).sum(axis=-1) // 3
    out = np.repeat(mean[..., None], 3, axis=-1).astype(np.uint8)
    return Raster(out, copy=False)


def invert(raster: Raster) -> Raster:
    """Replace each channel ``v`` with ``255 - v``."""
    raster = require_raster(raster)
    logger.debug("invert %dx%d", raster.width, raster.height)
    return Raster(255 - raster.pixels, copy=False)


def sepia(raster: Raster) -> Raster:
    """Apply the classic sepia matrix.

    ``R = .393r + .769g + .189b``, ``G = .349r + .686g + .168b``,
    ``B = .272r + .534g + .131b``; saturated channels clip at 255.
    """
    raster = require_raster(raster)
    logger.debug("sepia %dx%d", raster.width, raster.height)
    rgb = raster.pixels.astype(np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    # explicit left-to-right sums keep truncation stable at integer boundaries
    toned = np.stack(
        [row[0] * r + row[1] * g + row[2] * b for row in SEPIA_MATRIX], axis=-1
    )
    return Raster(to_channels(toned), copy=False)


def luminance(pixels: Array) -> Array:
    """Perceived brightness ``sqrt(.299 r^2 + .587 g^2 + .114 b^2)`` per pixel."""
    arr = np.asarray(pixels, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    return np.sqrt(wr * (r * r) + wg * (g * g) + wb * (b * b))


def median_luminance(raster: Raster) -> float:
    """Median luminance of all pixels.

    For an even pixel count this is the mean of the two central values.
    """
    raster = require_raster(raster)
    return float(np.median(luminance(raster.pixels)))


def black_white_threshold(raster: Raster) -> Raster:
    """Stylize to pure black and white around the median luminance.

    Pixels whose luminance is at or above the median become white, the rest
    black, so a uniform image comes out entirely white.
    """
    raster = require_raster(raster)
    lum = luminance(raster.pixels)
    median = float(np.median(lum))
    logger.debug(
        "black/white %dx%d, median luminance %.3f", raster.width, raster.height, median
    )
    out = np.where((lum >= median)[..., None], np.uint8(255), np.uint8(0))
    out = np.broadcast_to(out, raster.pixels.shape).astype(np.uint8)
    return Raster(out, copy=False)


__all__ = [
    "SEPIA_MATRIX",
    "LUMA_WEIGHTS",
    "grayscale",
    "invert",
    "sepia",
    "luminance",
    "median_luminance",
    "black_white_threshold",
]
