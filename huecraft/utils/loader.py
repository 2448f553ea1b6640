"""Image loading and saving utilities using Pillow.

All processing in this project happens on :class:`~huecraft.raster.Raster`
objects backed by NumPy arrays. These helpers only convert between image
files and rasters.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import ResourceUnavailableError
from ..raster import Raster, require_raster

logger = logging.getLogger(__name__)


def load_raster(path: Union[str, Path]) -> Raster:
    """Load an image file into a :class:`Raster`.

    Any alpha channel or palette is flattened by converting to RGB.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Raises
    ------
    ResourceUnavailableError
        If the file does not exist or cannot be decoded.
    """
    p = Path(path)
    if not p.is_file():
        raise ResourceUnavailableError(f"path does not point to an image: {p}")
    try:
        with Image.open(p) as im:
            im = im.convert("RGB")
            arr = np.array(im, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as err:
        raise ResourceUnavailableError(f"could not decode image {p}: {err}") from err

    logger.info("Loaded %s (%dx%d)", p, arr.shape[1], arr.shape[0])
    return Raster(arr, copy=False)


def save_raster(raster: Raster, path: Union[str, Path]) -> None:
    """Save a raster to an image file via Pillow.

    Parameters
    ----------
    raster : Raster
        Image to encode.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    raster = require_raster(raster)
    p = Path(path)
    im = Image.fromarray(raster.pixels)
    im.save(p)
    logger.info("Saved %s (%dx%d)", p, raster.width, raster.height)


__all__ = ["load_raster", "save_raster"]
