"""Raster transformations and a unified entry-point for application.

Exported API
------------
- apply_transform(raster, method, ...)

Supported methods
-----------------
- "grayscale"  : mean of the three channels
- "invert"     : 255 - v per channel
- "sepia"      : classic sepia matrix
- "bw"         : black/white around the median luminance
- "rotate"     : 90 degrees clockwise
- "hue"        : shift hue by ``hue`` degrees
- "saturation" : shift saturation by ``saturation``
- "lightness"  : shift lightness by ``lightness``
- "filter"     : warm + vignette (``halo``) + grain (``grain``)

Implementation notes
--------------------
All transforms operate on NumPy arrays inside :class:`~huecraft.raster.Raster`
and return a new raster; inputs are never modified.
"""
from __future__ import annotations

from typing import Literal, Optional

from ..errors import InvalidInputError, ResourceUnavailableError
from ..raster import Raster
from .filter import apply_filter, blend, warm
from .geometry import rotate_clockwise
from .hsl import set_hue, set_lightness, set_saturation
from .tone import black_white_threshold, grayscale, invert, median_luminance, sepia

TRANSFORM_METHODS = [
    "grayscale",
    "invert",
    "sepia",
    "bw",
    "rotate",
    "hue",
    "saturation",
    "lightness",
    "filter",
]


def apply_transform(
    raster: Raster,
    method: Literal[
        "grayscale", "invert", "sepia", "bw", "rotate", "hue", "saturation", "lightness", "filter"
    ],
    *,
    hue: float = 0,
    saturation: float = 0.0,
    lightness: float = 0.0,
    halo: Optional[Raster] = None,
    grain: Optional[Raster] = None,
) -> Raster:
    """Apply the selected transform to a raster.

    Parameters
    ----------
    raster : Raster
        Image to transform.
    method : str
        Transform to apply (case-insensitive), one of ``TRANSFORM_METHODS``.
    hue, saturation, lightness : float
        Deltas used by the matching HSL methods.
    halo, grain : Raster | None
        Overlays required by the ``"filter"`` method.

    Returns
    -------
    Raster
        The transformed image.
    """
    m = method.lower()
    if m == "grayscale":
        return grayscale(raster)
    if m == "invert":
        return invert(raster)
    if m == "sepia":
        return sepia(raster)
    if m == "bw":
        return black_white_threshold(raster)
    if m == "rotate":
        return rotate_clockwise(raster)
    if m == "hue":
        return set_hue(raster, hue)
    if m == "saturation":
        return set_saturation(raster, saturation)
    if m == "lightness":
        return set_lightness(raster, lightness)
    if m == "filter":
        if halo is None or grain is None:
            raise ResourceUnavailableError("filter requires both a halo and a grain overlay")
        return apply_filter(raster, halo, grain)

    raise InvalidInputError(f"Unknown transform method: {method}")


__all__ = [
    "TRANSFORM_METHODS",
    "apply_transform",
    "grayscale",
    "invert",
    "sepia",
    "black_white_threshold",
    "median_luminance",
    "rotate_clockwise",
    "set_hue",
    "set_saturation",
    "set_lightness",
    "warm",
    "blend",
    "apply_filter",
]
