"""
Conway's Game of Life - sequential engine

Cells are updated one at a time in row-major order. The grid does not wrap:
neighbor positions outside the grid count as dead.
"""

import numpy as np

from .engine import LifeEngine
from .grid import count_neighbors_open, next_cell_state


class SequentialEngine(LifeEngine):
    """Single-threaded engine with an open (clamped) boundary."""

    def _compute_next(self) -> np.ndarray:
        current_grid = self._grid
        rows, columns = current_grid.shape
        next_grid = np.zeros_like(current_grid)

        for row in range(rows):
            for column in range(columns):
                neighbors = count_neighbors_open(current_grid, row, column)
                next_grid[row, column] = next_cell_state(bool(current_grid[row, column]), neighbors)

        return next_grid
