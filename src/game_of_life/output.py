"""Text rendering of generations and the simulate drivers built on it."""

import asyncio
import logging

import numpy as np

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def render(grid: np.ndarray, alive_cell: str = "#", dead_cell: str = ".") -> str:
    """Render the grid as one line per row, one character per cell."""
    lines = []
    for row in grid:
        lines.append("".join(alive_cell if cell else dead_cell for cell in row) + "\n")
    return "".join(lines)


def _banner(generation: int, columns: int) -> str:
    return f"Generation {generation}\n" + "-" * columns + "\n"


def _check_simulate_args(engine, generations, writer) -> None:
    if engine is None:
        raise InvalidArgument("engine must not be None")
    if writer is None:
        raise InvalidArgument("writer must not be None")
    if isinstance(generations, bool) or not isinstance(generations, int):
        raise InvalidArgument(f"generations must be an integer, got {generations!r}")
    if generations <= 0:
        raise InvalidArgument(f"generations must be positive, got {generations}")


def simulate(engine, generations: int, writer, alive_cell: str = "#", dead_cell: str = ".") -> None:
    """
    Write ``generations`` snapshots of the engine to ``writer``.

    Each snapshot is followed by a "Generation N" banner and a dashed rule,
    then the engine is advanced.

    Args:
        engine: A SequentialEngine or ParallelEngine
        generations: Number of generations to render (> 0)
        writer: Text stream with a write() method
        alive_cell: Character for live cells
        dead_cell: Character for dead cells
    """
    _check_simulate_args(engine, generations, writer)
    logger.debug("simulating %d generations", generations)

    for _ in range(generations):
        grid = engine.current_generation()
        writer.write(render(grid, alive_cell, dead_cell))
        writer.write(_banner(engine.generation, grid.shape[1]))
        engine.next_generation()


async def simulate_async(engine, generations: int, writer,
                         alive_cell: str = "#", dead_cell: str = ".") -> None:
    """
    Asyncio form of simulate(); the advance runs in a worker thread so the
    event loop stays responsive while a large generation is computed.
    """
    _check_simulate_args(engine, generations, writer)
    logger.debug("simulating %d generations (async)", generations)

    for _ in range(generations):
        grid = engine.current_generation()
        writer.write(render(grid, alive_cell, dead_cell))
        writer.write(_banner(engine.generation, grid.shape[1]))
        await asyncio.to_thread(engine.next_generation)
