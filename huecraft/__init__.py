from __future__ import annotations

# Public API re-exported from the implementation modules.
from huecraft.errors import (  # noqa: F401
    HuecraftError,
    InvalidInputError,
    OutOfRangeError,
    ResourceUnavailableError,
)
from huecraft.pixel import HSL, RGB, hsl_to_rgb, rgb_to_hsl  # noqa: F401
from huecraft.raster import Raster  # noqa: F401
from huecraft.transforms import (  # noqa: F401
    TRANSFORM_METHODS,
    apply_filter,
    apply_transform,
    black_white_threshold,
    grayscale,
    invert,
    rotate_clockwise,
    sepia,
    set_hue,
    set_lightness,
    set_saturation,
)
from huecraft.utils.loader import load_raster, save_raster  # noqa: F401
from huecraft.utils.resize import map_coordinate, resize_nearest  # noqa: F401

__all__ = [
    "HuecraftError",
    "InvalidInputError",
    "OutOfRangeError",
    "ResourceUnavailableError",
    "RGB",
    "HSL",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "Raster",
    "TRANSFORM_METHODS",
    "apply_transform",
    "grayscale",
    "invert",
    "sepia",
    "black_white_threshold",
    "rotate_clockwise",
    "set_hue",
    "set_saturation",
    "set_lightness",
    "apply_filter",
    "load_raster",
    "save_raster",
    "map_coordinate",
    "resize_nearest",
]
