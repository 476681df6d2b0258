
import numpy as np
import pytest



@pytest.fixture
def rgb_grid():
    """Every 17th octet on each channel plus 500 random colors."""
    steps = list(range(0, 256, 17))
    grid = [(r, g, b) for r in steps for g in steps for b in steps]
    rng = np.random.default_rng(1234)
    grid.extend(tuple(int(v) for v in row) for row in rng.integers(0, 256, size=(500, 3)))
    return grid
