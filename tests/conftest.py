import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from lifegrid.engine.grid import Grid


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def grid_from_rows(rows):
    """Build a grid from strings where 'O' is alive and '.' is dead."""
    return Grid.from_array(np.array([[ch == "O" for ch in row] for row in rows]))


@pytest.fixture
def make_grid():
    return grid_from_rows
