"""Well-known seed patterns, as small boolean arrays."""

import numpy as np

from .errors import InvalidArgument


def blinker() -> np.ndarray:
    """Period-2 oscillator, horizontal phase."""
    return np.ones((1, 3), dtype=bool)


def block() -> np.ndarray:
    """2x2 still life."""
    return np.ones((2, 2), dtype=bool)


def glider() -> np.ndarray:
    """Glider pattern travelling down and to the right."""
    grid = np.zeros((3, 3), dtype=bool)

    #   #
    #     #
    # # # #
    grid[0, 1] = True
    grid[1, 2] = True
    grid[2, 0:3] = True

    return grid


def glider_gun() -> np.ndarray:
    """Gosper Glider Gun (9x36)."""
    grid = np.zeros((9, 36), dtype=bool)
    ox, oy = 0, 4  # Offset

    # Left square
    grid[oy:oy + 2, ox:ox + 2] = True

    # Left part
    grid[oy:oy + 3, ox + 10] = True
    grid[oy - 1, ox + 11] = grid[oy + 3, ox + 11] = True
    grid[oy - 2, ox + 12:ox + 14] = grid[oy + 4, ox + 12:ox + 14] = True
    grid[oy + 1, ox + 14] = True
    grid[oy - 1, ox + 15] = grid[oy + 3, ox + 15] = True
    grid[oy:oy + 3, ox + 16] = True
    grid[oy + 1, ox + 17] = True

    # Right part
    grid[oy - 2:oy + 1, ox + 20:ox + 22] = True
    grid[oy - 3, ox + 22] = grid[oy + 1, ox + 22] = True
    grid[oy - 4, ox + 24] = grid[oy - 3, ox + 24] = True
    grid[oy + 1, ox + 24] = grid[oy + 2, ox + 24] = True

    # Right square
    grid[oy - 2:oy, ox + 34:ox + 36] = True

    return grid


def place(pattern: np.ndarray, rows: int, columns: int, top: int = 0, left: int = 0) -> np.ndarray:
    """Return an empty rows x columns grid with ``pattern`` stamped at (top, left)."""
    height, width = pattern.shape
    if rows <= 0 or columns <= 0:
        raise InvalidArgument(f"grid dimensions must be positive, got {rows}x{columns}")
    if top < 0 or left < 0 or top + height > rows or left + width > columns:
        raise InvalidArgument(
            f"{height}x{width} pattern at ({top}, {left}) does not fit a {rows}x{columns} grid")

    grid = np.zeros((rows, columns), dtype=bool)
    grid[top:top + height, left:left + width] = pattern
    return grid
