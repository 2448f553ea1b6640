"""Tests for nearest-neighbor coordinate mapping and resizing."""

import numpy as np
import pytest

from huecraft.errors import InvalidInputError, OutOfRangeError
from huecraft.utils.resize import map_coordinate, resize_nearest, sample_indices


def test_map_coordinate_downsampling():
    # source twice as large: every target index skips one source index
    assert [map_coordinate(i, 4, 8) for i in range(4)] == [0, 2, 4, 6]


def test_map_coordinate_upsampling_repeats():
    assert [map_coordinate(i, 6, 3) for i in range(6)] == [0, 0, 1, 1, 2, 2]


def test_map_coordinate_never_leaves_source():
    for target in (1, 3, 7, 50):
        for source in (1, 2, 5, 49, 101):
            for i in range(target):
                assert 0 <= map_coordinate(i, target, source) < source


def test_map_coordinate_validation():
    with pytest.raises(OutOfRangeError):
        map_coordinate(4, 4, 8)
    with pytest.raises(OutOfRangeError):
        map_coordinate(-1, 4, 8)
    with pytest.raises(InvalidInputError):
        map_coordinate(0, 0, 8)


def test_sample_indices_matches_scalar():
    idx = sample_indices(13, 5)
    assert idx.tolist() == [map_coordinate(i, 13, 5) for i in range(13)]


def test_resize_nearest_shape_and_values():
    arr = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
    out = resize_nearest(arr, 4, 6)
    assert out.shape == (4, 6, 3)
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out[0, 0], arr[0, 0])
    np.testing.assert_array_equal(out[3, 5], arr[1, 2])
    np.testing.assert_array_equal(out[1, 1], arr[0, 0])


def test_resize_nearest_same_size_returns_copy():
    arr = np.zeros((2, 2, 3), dtype=np.uint8)
    out = resize_nearest(arr, 2, 2)
    out[0, 0] = 255
    assert arr[0, 0, 0] == 0


def test_resize_nearest_validation():
    with pytest.raises(InvalidInputError):
        resize_nearest(np.zeros((2, 2), dtype=np.uint8), 1, 1)
    with pytest.raises(InvalidInputError):
        resize_nearest(np.zeros((2, 2, 3), dtype=np.uint8), 0, 1)
