"""Common state and lifecycle for the Game of Life engines."""

import logging

import numpy as np

from .grid import as_grid, random_grid

logger = logging.getLogger(__name__)


class LifeEngine:
    """
    Owns an immutable initial grid and the current generation.

    Construct either from dimensions (random 50/50 cells) or from an explicit
    grid, which is copied. Subclasses implement _compute_next(), which must
    read self._grid and return a new array without mutating it.

    Args:
        rows_or_grid: Number of rows, or an explicit 2-D grid
        columns: Number of columns (dimension form only)
        rng: Random generator for the dimension form; unseeded if omitted
    """

    def __init__(self, rows_or_grid, columns: int | None = None, *,
                 rng: np.random.Generator | None = None):
        if columns is None:
            grid = as_grid(rows_or_grid)
        else:
            grid = random_grid(rows_or_grid, columns, rng=rng)

        self._initial_grid = grid
        self._initial_grid.flags.writeable = False
        self._grid = grid.copy()
        self._generation = 0
        logger.debug("%s constructed with %dx%d grid", type(self).__name__, *grid.shape)

    @classmethod
    def from_grid(cls, grid, **kwargs):
        return cls(grid, **kwargs)

    @classmethod
    def random(cls, rows: int, columns: int, rng: np.random.Generator | None = None, **kwargs):
        return cls(rows, columns, rng=rng, **kwargs)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def columns(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._grid.shape

    def current_generation(self) -> np.ndarray:
        """Return a copy of the current grid; safe for the caller to mutate."""
        return self._grid.copy()

    def restart(self) -> None:
        self._grid = self._initial_grid.copy()
        self._generation = 0
        logger.debug("%s restarted", type(self).__name__)

    def next_generation(self) -> None:
        """Advance one generation. The new grid replaces the old one only once complete."""
        new_grid = self._compute_next()
        self._grid = new_grid
        self._generation += 1
        logger.debug("%s advanced to generation %d", type(self).__name__, self._generation)

    def _compute_next(self) -> np.ndarray:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, columns={self.columns}, generation={self.generation})"
