"""
Conway's Game of Life - sequential and row-parallel engines

Rules (B3/S23):
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)
"""

from .engine import LifeEngine
from .errors import InvalidArgument
from .output import render, simulate, simulate_async
from .parallel import ParallelEngine
from .sequential import SequentialEngine

__all__ = [
    "InvalidArgument",
    "LifeEngine",
    "ParallelEngine",
    "SequentialEngine",
    "render",
    "simulate",
    "simulate_async",
]

__version__ = "0.1.0"
