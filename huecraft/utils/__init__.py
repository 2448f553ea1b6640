"""Utility functions for huecraft.

Modules:
- loader: Load/save Pillow <-> Raster conversion utilities.
- resize: Nearest-neighbor coordinate mapping and resizing.
"""
from .loader import load_raster, save_raster
from .resize import map_coordinate, sample_indices, resize_nearest

__all__ = [
    "load_raster",
    "save_raster",
    "map_coordinate",
    "sample_indices",
    "resize_nearest",
]
