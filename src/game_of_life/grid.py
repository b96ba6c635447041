"""
Grid helpers shared by both engines.

A grid is a 2-D numpy array of dtype bool, shape (rows, columns); True is alive.
Row/column order follows numpy: grid[row, column].
"""

import numpy as np

from .errors import InvalidArgument


def check_positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return int(value)


def as_grid(grid) -> np.ndarray:
    """
    Return a fresh boolean copy of ``grid``.

    The caller's storage is never aliased. Raises InvalidArgument when the
    grid is missing, not two-dimensional, or has an empty dimension.
    """
    if grid is None:
        raise InvalidArgument("grid must not be None")
    try:
        copy = np.array(grid, dtype=bool)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"grid is not a rectangular array: {exc}") from exc
    if copy.ndim != 2:
        raise InvalidArgument(f"grid must be two-dimensional, got {copy.ndim} dimension(s)")
    if copy.shape[0] == 0 or copy.shape[1] == 0:
        raise InvalidArgument(f"grid dimensions must be positive, got {copy.shape}")
    return copy


def random_grid(rows: int, columns: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Initialize a grid where each cell is alive with probability 0.5."""
    rows = check_positive_int("rows", rows)
    columns = check_positive_int("columns", columns)
    if rng is None:
        rng = np.random.default_rng()
    return rng.random((rows, columns)) < 0.5


def next_cell_state(alive: bool, neighbors: int) -> bool:
    """Apply B3/S23 to a single cell."""
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


def count_neighbors_open(grid: np.ndarray, row: int, column: int) -> int:
    """
    Count live neighbors for the cell at (row, column).
    Positions outside the grid are dead (no wrapping).
    """
    rows, columns = grid.shape
    count = 0
    for dr in range(-1, 2):
        for dc in range(-1, 2):
            if dr == 0 and dc == 0:
                continue  # Skip the cell itself
            r = row + dr
            c = column + dc
            if 0 <= r < rows and 0 <= c < columns and grid[r, c]:
                count += 1
    return count


def count_neighbors_toroidal(grid: np.ndarray, row: int, column: int) -> int:
    """
    Count live neighbors for the cell at (row, column).
    Uses toroidal wrapping (edges connect to opposite sides).
    """
    rows, columns = grid.shape
    count = 0
    for dr in range(-1, 2):
        for dc in range(-1, 2):
            if dr == 0 and dc == 0:
                continue
            if grid[(row + dr) % rows, (column + dc) % columns]:
                count += 1
    return count


def next_row_toroidal(grid: np.ndarray, row: int) -> np.ndarray:
    """
    Compute the next state of one row on a torus.

    Only ``grid`` is read. The three wrapped rows around ``row`` are summed per
    column, then rolled left and right so every offset is counted once, the
    same way count_neighbors_toroidal counts them.
    """
    rows = grid.shape[0]
    band = grid[[(row - 1) % rows, row, (row + 1) % rows]].astype(np.int16)
    column_sums = band.sum(axis=0)
    neighbors = column_sums + np.roll(column_sums, 1) + np.roll(column_sums, -1)
    alive = grid[row]
    neighbors -= alive
    return (neighbors == 3) | (alive & (neighbors == 2))


def step_toroidal(grid: np.ndarray) -> np.ndarray:
    """
    Compute the next generation of a whole grid on a torus.
    Vectorized with numpy.roll; used as the reference for the row kernel.
    """
    cells = grid.astype(np.int16)
    neighbors = np.zeros_like(cells)

    for dy in range(-1, 2):
        for dx in range(-1, 2):
            if dx == 0 and dy == 0:
                continue
            neighbors += np.roll(np.roll(cells, dy, axis=0), dx, axis=1)

    # Birth: dead cell with exactly 3 neighbors
    birth = ~grid & (neighbors == 3)
    # Survival: live cell with 2 or 3 neighbors
    survive = grid & ((neighbors == 2) | (neighbors == 3))

    return birth | survive


def count_alive(grid: np.ndarray) -> int:
    """Count total live cells in the grid."""
    return int(np.count_nonzero(grid))
