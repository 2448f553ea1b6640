"""Hue, saturation and lightness adjustments.

Each pixel is converted to HSL, one component is shifted by an additive
delta, and the result is converted back to RGB. Hue wraps around the colour
wheel; saturation and lightness are clamped to [0, 1] after the shift.
"""
from __future__ import annotations

import logging

import numpy as np

from ..pixel import require_finite, hsl_to_rgb_array, rgb_to_hsl_array
from ..raster import Raster, require_raster

logger = logging.getLogger(__name__)


def _shift(raster: Raster, component: int, delta: float) -> Raster:
    hsl = list(rgb_to_hsl_array(raster.pixels))
    if component == 0:
        hsl[0] = np.mod(hsl[0] + delta, 360.0)
    else:
        hsl[component] = np.clip(hsl[component] + delta, 0.0, 1.0)
    return Raster(hsl_to_rgb_array(*hsl), copy=False)


def set_hue(raster: Raster, degrees_delta: float) -> Raster:
    """Rotate every pixel's hue by ``degrees_delta`` degrees (mod 360)."""
    raster = require_raster(raster)
    delta = require_finite("hue delta", degrees_delta)
    logger.debug("hue %+g on %dx%d", delta, raster.width, raster.height)
    return _shift(raster, 0, delta)


def set_saturation(raster: Raster, delta: float) -> Raster:
    """Add ``delta`` to every pixel's saturation, clamped to [0, 1]."""
    raster = require_raster(raster)
    delta = require_finite("saturation delta", delta)
    logger.debug("saturation %+g on %dx%d", delta, raster.width, raster.height)
    return _shift(raster, 1, delta)


def set_lightness(raster: Raster, delta: float) -> Raster:
    """Add ``delta`` to every pixel's lightness, clamped to [0, 1]."""
    raster = require_raster(raster)
    delta = require_finite("lightness delta", delta)
    logger.debug("lightness %+g on %dx%d", delta, raster.width, raster.height)
    return _shift(raster, 2, delta)


__all__ = ["set_hue", "set_saturation", "set_lightness"]
