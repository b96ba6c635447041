"""
Pytest configuration and shared fixtures for the engine test suite.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure src/ is on PYTHONPATH so 'game_of_life' imports without installing
SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from game_of_life.parallel import ParallelEngine  # noqa: E402
from game_of_life.sequential import SequentialEngine  # noqa: E402


@pytest.fixture(params=[SequentialEngine, ParallelEngine], ids=["sequential", "parallel"])
def engine_cls(request):
    """Both engine classes; for tests of the shared contract."""
    return request.param


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def blinker_grid():
    """5x5 grid with a horizontal blinker through the centre."""
    grid = np.zeros((5, 5), dtype=bool)
    grid[2, 1:4] = True
    return grid


@pytest.fixture
def vertical_blinker_grid():
    grid = np.zeros((5, 5), dtype=bool)
    grid[1:4, 2] = True
    return grid
