import numpy as np
import pytest

from huecraft.raster import Raster


@pytest.fixture
def primaries() -> Raster:
    """2x2 raster: red, green on the top row; blue, white below."""
    return Raster.from_rows(
        [
            [(255, 0, 0), (0, 255, 0)],
            [(0, 0, 255), (255, 255, 255)],
        ]
    )


@pytest.fixture
def noise_raster() -> Raster:
    """Deterministic 7x5 raster of random colours (odd dims catch axis mixups)."""
    rng = np.random.default_rng(1337)
    return Raster(rng.integers(0, 256, size=(5, 7, 3), dtype=np.uint8))


@pytest.fixture
def gradient_raster() -> Raster:
    """Horizontal black-to-white gradient, 16 wide and 4 tall."""
    pixels = np.zeros((4, 16, 3), dtype=np.uint8)
    for x in range(16):
        pixels[:, x, :] = x * 17
    return Raster(pixels)
