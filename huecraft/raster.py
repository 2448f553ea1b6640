"""In-memory RGB raster.

A :class:`Raster` wraps an ``(H, W, 3)`` ``uint8`` NumPy array. Pixels are
addressed as ``(x, y)`` with ``x`` the column in [0, width) and ``y`` the row
in [0, height), while the backing array keeps NumPy's row-major
``pixels[y, x]`` layout so vectorised operations can work on it directly.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .errors import InvalidInputError
from .pixel import RGB

Array = np.ndarray


class Raster:
    """A fixed-size grid of RGB pixels that owns its storage."""

    __slots__ = ("_pixels",)

    def __init__(self, pixels: Array, *, copy: bool = True) -> None:
        if not isinstance(pixels, np.ndarray) or pixels.ndim != 3 or pixels.shape[2] != 3:
            raise InvalidInputError("pixels must be an RGB array with shape (H, W, 3)")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise InvalidInputError("raster must have non-zero width and height")
        if pixels.dtype != np.uint8:
            if not np.issubdtype(pixels.dtype, np.integer):
                raise InvalidInputError("pixels must hold integer channel values")
            if pixels.min() < 0 or pixels.max() > 255:
                raise InvalidInputError("channel values must lie in [0, 255]")
            pixels = pixels.astype(np.uint8)
        elif copy:
            pixels = pixels.copy()
        self._pixels = np.ascontiguousarray(pixels)

    @classmethod
    def blank(cls, width: int, height: int, fill: Iterable[int] = (0, 0, 0)) -> "Raster":
        """Allocate a ``width`` x ``height`` raster filled with one colour."""
        if width < 1 or height < 1:
            raise InvalidInputError("width and height must be >= 1")
        colour = RGB(*fill)
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[...] = (colour.r, colour.g, colour.b)
        return cls(pixels, copy=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Iterable[int]]]) -> "Raster":
        """Build a raster from nested rows of ``(r, g, b)`` triples.

        ``rows[y][x]`` becomes the pixel at ``(x, y)``.
        """
        if not rows or not rows[0]:
            raise InvalidInputError("rows must contain at least one pixel")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidInputError("all rows must have the same length")
        pixels = np.array(
            [[tuple(RGB(*px)) for px in row] for row in rows], dtype=np.uint8
        )
        return cls(pixels, copy=False)

    @property
    def pixels(self) -> Array:
        """The backing ``(H, W, 3)`` uint8 array (not a copy)."""
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside raster of size {self.width}x{self.height}"
            )

    def get(self, x: int, y: int) -> RGB:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return RGB(int(r), int(g), int(b))

    def set(self, x: int, y: int, pixel: RGB | Iterable[int]) -> None:
        self._check_bounds(x, y)
        if not isinstance(pixel, RGB):
            pixel = RGB(*pixel)
        self._pixels[y, x] = (pixel.r, pixel.g, pixel.b)

    def copy(self) -> "Raster":
        return Raster(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Raster(width={self.width}, height={self.height})"


def require_raster(raster: object, name: str = "raster") -> Raster:
    """Return ``raster`` unchanged or raise :class:`InvalidInputError`."""
    if raster is None:
        raise InvalidInputError(f"{name} is required")
    if not isinstance(raster, Raster):
        raise InvalidInputError(f"{name} must be a Raster, got {type(raster).__name__}")
    return raster


__all__ = ["Raster", "require_raster"]
