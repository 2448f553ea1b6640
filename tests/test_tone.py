"""Tests for grayscale, invert, sepia and black/white."""

import numpy as np
import pytest

from huecraft.errors import InvalidInputError
from huecraft.pixel import RGB
from huecraft.raster import Raster
from huecraft.transforms.tone import (
    black_white_threshold,
    grayscale,
    invert,
    luminance,
    median_luminance,
    sepia,
)


class TestGrayscale:
    def test_primaries(self, primaries):
        out = grayscale(primaries)
        expected = [[(85, 85, 85), (85, 85, 85)], [(85, 85, 85), (255, 255, 255)]]
        assert out == Raster.from_rows(expected)

    def test_truncates_mean(self):
        out = grayscale(Raster.from_rows([[(1, 1, 0), (2, 2, 1)]]))
        assert out.get(0, 0) == RGB(0, 0, 0)
        assert out.get(1, 0) == RGB(1, 1, 1)

    def test_channels_equal_and_idempotent(self, noise_raster):
        once = grayscale(noise_raster)
        px = once.pixels
        assert (px[..., 0] == px[..., 1]).all() and (px[..., 1] == px[..., 2]).all()
        assert grayscale(once) == once

    def test_does_not_mutate_input(self, primaries):
        before = primaries.copy()
        grayscale(primaries)
        assert primaries == before


class TestInvert:
    def test_values(self, primaries):
        out = invert(primaries)
        assert out.get(0, 0) == RGB(0, 255, 255)
        assert out.get(1, 1) == RGB(0, 0, 0)

    def test_self_inverse(self, noise_raster):
        assert invert(invert(noise_raster)) == noise_raster


class TestSepia:
    def test_white_saturates(self):
        out = sepia(Raster.blank(2, 2, (255, 255, 255)))
        # B = 0.937 * 255 = 238.935 -> 238; R and G overflow and clamp
        assert out.get(0, 0) == RGB(255, 255, 238)

    def test_truncates(self):
        out = sepia(Raster.from_rows([[(100, 50, 20)]]))
        r = 0.393 * 100 + 0.769 * 50 + 0.189 * 20
        g = 0.349 * 100 + 0.686 * 50 + 0.168 * 20
        b = 0.272 * 100 + 0.534 * 50 + 0.131 * 20
        assert out.get(0, 0) == RGB(int(r), int(g), int(b))

    def test_black_stays_black(self):
        assert sepia(Raster.blank(1, 3)) == Raster.blank(1, 3)

    def test_new_raster_same_size(self, noise_raster):
        before = noise_raster.copy()
        out = sepia(noise_raster)
        assert out is not noise_raster
        assert out.size == noise_raster.size
        assert noise_raster == before


class TestBlackWhite:
    def test_only_black_and_white(self, noise_raster):
        px = black_white_threshold(noise_raster).pixels
        is_white = (px == 255).all(axis=-1)
        is_black = (px == 0).all(axis=-1)
        assert (is_white | is_black).all()

    def test_uniform_image_is_white(self):
        out = black_white_threshold(Raster.blank(3, 3, (40, 90, 10)))
        assert out == Raster.blank(3, 3, (255, 255, 255))

    def test_even_count_uses_mean_of_central_pair(self, gradient_raster):
        # 64 pixels, 4 per gray level; median sits between levels 7 and 8
        lum = luminance(gradient_raster.pixels)
        expected = (np.sort(lum.ravel())[31] + np.sort(lum.ravel())[32]) / 2
        assert median_luminance(gradient_raster) == pytest.approx(expected)
        out = black_white_threshold(gradient_raster)
        assert out.get(7, 0) == RGB(0, 0, 0)
        assert out.get(8, 0) == RGB(255, 255, 255)

    def test_odd_count_median_is_middle_value(self):
        raster = Raster.from_rows([[(0, 0, 0), (100, 100, 100), (200, 200, 200)]])
        assert median_luminance(raster) == pytest.approx(100.0)
        out = black_white_threshold(raster)
        assert out.get(0, 0) == RGB(0, 0, 0)
        assert out.get(1, 0) == RGB(255, 255, 255)
        assert out.get(2, 0) == RGB(255, 255, 255)

    def test_luminance_formula(self):
        lum = luminance(np.array([[10, 20, 30]], dtype=np.uint8))
        assert lum[0] == pytest.approx(np.sqrt(0.299 * 100 + 0.587 * 400 + 0.114 * 900))


@pytest.mark.parametrize("op", [grayscale, invert, sepia, black_white_threshold])
def test_rejects_missing_raster(op):
    with pytest.raises(InvalidInputError):
        op(None)
