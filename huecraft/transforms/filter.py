"""Stylized "filter" composite: warming, vignette and grain.

The pipeline runs three stages over the target image:

1. warm     : ``r = r * 1.2`` (clipped at 255), ``g`` unchanged, ``b = b / 1.5``
2. vignette : blend 65% image with 35% of a halo overlay
3. grain    : blend 95% image with 5% of a grain overlay

Overlays may have any size; each is resampled to the target's size with
nearest-neighbor mapping before blending. Overlays are read-only inputs.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..errors import OutOfRangeError
from ..pixel import require_finite
from ..raster import Raster, require_raster
from ..utils.resize import resize_nearest
from .tone import to_channels

logger = logging.getLogger(__name__)

WARM_RED_GAIN = 1.2
WARM_BLUE_DIVISOR = 1.5

# (target weight, overlay weight)
VIGNETTE_WEIGHTS = (0.65, 0.35)
GRAIN_WEIGHTS = (0.95, 0.05)


def warm(raster: Raster) -> Raster:
    """Boost red and cut blue to give the image a warmer cast."""
    raster = require_raster(raster)
    rgb = raster.pixels.astype(np.float64)
    rgb[..., 0] = WARM_RED_GAIN * rgb[..., 0]
    rgb[..., 2] = rgb[..., 2] / WARM_BLUE_DIVISOR
    return Raster(to_channels(rgb), copy=False)


def blend(
    target: Raster,
    overlay: Raster,
    overlay_weight: float,
    target_weight: Optional[float] = None,
) -> Raster:
    """Weighted sum of ``target`` and ``overlay`` resampled to the target size.

    Parameters
    ----------
    target : Raster
        Image being composited onto.
    overlay : Raster
        Image of any size; it is nearest-neighbor resampled, never modified.
    overlay_weight : float
        Weight of the overlay in [0, 1].
    target_weight : float | None
        Weight of the target; defaults to ``1 - overlay_weight``.

    Returns
    -------
    Raster
        ``trunc(target_weight * target + overlay_weight * overlay)`` clamped
        to [0, 255].
    """
    target = require_raster(target, "target")
    overlay = require_raster(overlay, "overlay")
    overlay_weight = require_finite("overlay_weight", overlay_weight)
    if not 0.0 <= overlay_weight <= 1.0:
        raise OutOfRangeError("overlay_weight must be in [0, 1]")
    if target_weight is None:
        target_weight = 1.0 - overlay_weight
    target_weight = require_finite("target_weight", target_weight)
    if not 0.0 <= target_weight <= 1.0:
        raise OutOfRangeError("target_weight must be in [0, 1]")

    aligned = resize_nearest(overlay.pixels, target.height, target.width)
    mixed = target_weight * target.pixels.astype(np.float64) + overlay_weight * aligned.astype(
        np.float64
    )
    return Raster(to_channels(mixed), copy=False)


def apply_filter(raster: Raster, halo: Raster, grain: Raster) -> Raster:
    """Apply the warm + vignette + grain filter.

    Parameters
    ----------
    raster : Raster
        Image to stylize.
    halo : Raster
        Vignette overlay (dark border, light centre).
    grain : Raster
        Decorative grain overlay.

    Returns
    -------
    Raster
        New raster with the same dimensions as ``raster``.
    """
    raster = require_raster(raster)
    halo = require_raster(halo, "halo")
    grain = require_raster(grain, "grain")
    logger.debug(
        "filter %dx%d (halo %dx%d, grain %dx%d)",
        raster.width,
        raster.height,
        halo.width,
        halo.height,
        grain.width,
        grain.height,
    )

    out = warm(raster)
    out = blend(out, halo, VIGNETTE_WEIGHTS[1], VIGNETTE_WEIGHTS[0])
    out = blend(out, grain, GRAIN_WEIGHTS[1], GRAIN_WEIGHTS[0])
    return out


__all__ = [
    "WARM_RED_GAIN",
    "WARM_BLUE_DIVISOR",
    "VIGNETTE_WEIGHTS",
    "GRAIN_WEIGHTS",
    "warm",
    "blend",
    "apply_filter",
]
