"""Tests for clockwise rotation."""

from huecraft.pixel import RGB
from huecraft.raster import Raster
from huecraft.transforms.geometry import rotate_clockwise

A = (10, 20, 30)
B = (40, 50, 60)


def test_row_becomes_column():
    out = rotate_clockwise(Raster.from_rows([[A, B]]))
    assert out.size == (1, 2)
    assert out == Raster.from_rows([[A], [B]])


def test_mapping_on_non_square(noise_raster):
    out = rotate_clockwise(noise_raster)
    w, h = noise_raster.size
    assert out.size == (h, w)
    for x in range(w):
        for y in range(h):
            assert out.get(h - 1 - y, x) == noise_raster.get(x, y)


def test_top_left_moves_to_top_right():
    raster = Raster.blank(3, 2)
    raster.set(0, 0, (255, 0, 0))
    out = rotate_clockwise(raster)
    assert out.get(1, 0) == RGB(255, 0, 0)


def test_four_rotations_are_identity(noise_raster):
    out = noise_raster
    for _ in range(4):
        out = rotate_clockwise(out)
    assert out == noise_raster


def test_input_untouched(noise_raster):
    before = noise_raster.copy()
    rotate_clockwise(noise_raster)
    assert noise_raster == before
