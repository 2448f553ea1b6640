"""Geometric transformations for rasters."""
from __future__ import annotations

import logging

import numpy as np

from ..raster import Raster, require_raster

logger = logging.getLogger(__name__)


def rotate_clockwise(raster: Raster) -> Raster:
    """Rotate 90° clockwise.

    A W x H raster becomes H x W; the input pixel at ``(x, y)`` lands at
    ``(H - 1 - y, x)``.
    """
    raster = require_raster(raster)
    logger.debug("rotate %dx%d clockwise", raster.width, raster.height)
    return Raster(np.rot90(raster.pixels, k=3, axes=(0, 1)).copy(), copy=False)


__all__ = ["rotate_clockwise"]
