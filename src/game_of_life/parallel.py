"""
Conway's Game of Life - row-parallel engine

Each generation fans out one task per row to a thread pool and joins them all
before the new grid is swapped in. Workers read only the previous grid and
write only their own row, so no locking is needed inside a sweep.

The grid wraps around (toroidal boundary). SequentialEngine does not, so the
two engines disagree on cells near the edges.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .engine import LifeEngine
from .errors import InvalidArgument
from .grid import next_row_toroidal

logger = logging.getLogger(__name__)


class ParallelEngine(LifeEngine):
    """
    Fork-join engine with a toroidal boundary.

    Args:
        max_workers: Thread pool size per generation; executor default if None
    """

    def __init__(self, rows_or_grid, columns: int | None = None, *,
                 rng: np.random.Generator | None = None, max_workers: int | None = None):
        if max_workers is not None and (isinstance(max_workers, bool)
                                        or not isinstance(max_workers, int) or max_workers <= 0):
            raise InvalidArgument(f"max_workers must be a positive integer, got {max_workers!r}")
        self.max_workers = max_workers
        super().__init__(rows_or_grid, columns, rng=rng)

    def _evolve_row(self, current_grid: np.ndarray, next_grid: np.ndarray, row: int) -> None:
        next_grid[row] = next_row_toroidal(current_grid, row)

    def _compute_next(self) -> np.ndarray:
        current_grid = self._grid
        rows = current_grid.shape[0]
        next_grid = np.empty_like(current_grid)

        # Leaving the with-block waits for every row task
        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="life_row") as pool:
            futures = [pool.submit(self._evolve_row, current_grid, next_grid, row)
                       for row in range(rows)]
        for future in futures:
            future.result()  # re-raise worker errors

        logger.debug("swept %d rows", rows)
        return next_grid
