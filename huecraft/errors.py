"""Exception types raised by huecraft.

Each error also derives from the builtin the library historically raised
(``ValueError`` for bad inputs, ``OSError`` for unreadable files), so callers
that already catch those keep working.
"""
from __future__ import annotations


class HuecraftError(Exception):
    """Base class for all huecraft errors."""


class InvalidInputError(HuecraftError, ValueError):
    """A raster is missing, empty, or not shaped like an RGB image."""


class OutOfRangeError(HuecraftError, ValueError):
    """A parameter or channel value lies outside its documented domain."""


class ResourceUnavailableError(HuecraftError, OSError):
    """An image (usually an overlay) could not be found or decoded."""


__all__ = [
    "HuecraftError",
    "InvalidInputError",
    "OutOfRangeError",
    "ResourceUnavailableError",
]
