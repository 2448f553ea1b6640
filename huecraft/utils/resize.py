"""Nearest-neighbor resampling utilities for NumPy arrays.

Used to align an overlay image of arbitrary size with a target image before
blending. Indices are computed directly from the target index rather than
accumulated, so every target pixel maps to the source pixel whose span covers
it and the result never reads outside the source.
"""
from __future__ import annotations

import numpy as np

from ..errors import InvalidInputError, OutOfRangeError

Array = np.ndarray


def map_coordinate(target_index: int, target_extent: int, source_extent: int) -> int:
    """Map one index of the target grid onto the source grid.

    Parameters
    ----------
    target_index : int
        Index in [0, target_extent).
    target_extent : int
        Size of the target axis (>=1).
    source_extent : int
        Size of the source axis (>=1).

    Returns
    -------
    int
        ``floor(target_index * source_extent / target_extent)``, saturated at
        ``source_extent - 1``.
    """
    if target_extent < 1 or source_extent < 1:
        raise InvalidInputError("extents must be >= 1")
    if not 0 <= target_index < target_extent:
        raise OutOfRangeError(
            f"target_index {target_index} outside [0, {target_extent})"
        )
    return min(target_index * source_extent // target_extent, source_extent - 1)


def sample_indices(target_extent: int, source_extent: int) -> Array:
    """Vectorised :func:`map_coordinate` for a whole axis.

    Returns
    -------
    np.ndarray
        int64 array of length ``target_extent`` with values in
        [0, source_extent).
    """
    if target_extent < 1 or source_extent < 1:
        raise InvalidInputError("extents must be >= 1")
    idx = np.arange(target_extent, dtype=np.int64) * source_extent // target_extent
    return np.minimum(idx, source_extent - 1)


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGB image to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image. Always a new array; ``arr`` is left untouched.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise InvalidInputError("arr must be an RGB image with shape (H, W, 3)")
    if new_h < 1 or new_w < 1:
        raise InvalidInputError("new_h and new_w must be >= 1")

    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    yi = sample_indices(new_h, H)
    xi = sample_indices(new_w, W)
    out = arr[yi[:, None], xi[None, :], :]
    return out.astype(np.uint8)


__all__ = ["map_coordinate", "sample_indices", "resize_nearest"]
