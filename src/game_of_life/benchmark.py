"""
Benchmark: SequentialEngine vs ParallelEngine

Both engines start from the same seeded random grid for each size. The
sequential engine updates one cell at a time in pure Python with an open
boundary, while the parallel engine runs a numpy row kernel on a torus, so the
speedup column mostly reflects vectorisation rather than threading. Results
can be saved to CSV for plotting.
"""

import csv
import logging
import time
from pathlib import Path

import numpy as np

from .grid import check_positive_int, random_grid
from .parallel import ParallelEngine
from .sequential import SequentialEngine

logger = logging.getLogger(__name__)

GRID_SIZES = [16, 32, 64, 128]
GENERATIONS = 20
SEED = 42

CSV_FIELDS = [
    "size",
    "generations",
    "sequential_ms",
    "parallel_ms",
    "speedup",
    "sequential_mcells_s",
    "parallel_mcells_s",
]


def time_engine(engine, generations: int) -> float:
    """Advance ``engine`` by ``generations`` and return the elapsed time in ms."""
    start_time = time.perf_counter()
    for _ in range(generations):
        engine.next_generation()
    return (time.perf_counter() - start_time) * 1000


def _throughput(size: int, generations: int, elapsed_ms: float) -> float:
    if elapsed_ms <= 0:
        return float("inf")
    return size * size * generations / elapsed_ms / 1000


def run_benchmark(sizes: list[int] | None = None, generations: int = GENERATIONS, seed: int = SEED,
                  max_workers: int | None = None, csv_path: str | Path | None = None) -> list[dict]:
    """
    Run benchmarks for different grid sizes.

    Args:
        sizes: List of square grid sizes to test
        generations: Number of generations per test
        seed: Random seed for reproducibility
        max_workers: Thread pool size for the parallel engine
        csv_path: Where to save the results; nothing is written if None

    Returns:
        One dict per size, keyed by CSV_FIELDS
    """
    if sizes is None:
        sizes = GRID_SIZES
    check_positive_int("generations", generations)
    sizes = [check_positive_int("size", size) for size in sizes]

    print("=" * 60)
    print("BENCHMARK: Sequential vs Parallel Game of Life")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    results = []

    for size in sizes:
        grid = random_grid(size, size, rng=rng)
        sequential_ms = time_engine(SequentialEngine(grid), generations)
        parallel_ms = time_engine(ParallelEngine(grid, max_workers=max_workers), generations)
        speedup = sequential_ms / parallel_ms if parallel_ms > 0 else float("inf")

        result = {
            "size": size,
            "generations": generations,
            "sequential_ms": sequential_ms,
            "parallel_ms": parallel_ms,
            "speedup": speedup,
            "sequential_mcells_s": _throughput(size, generations, sequential_ms),
            "parallel_mcells_s": _throughput(size, generations, parallel_ms),
        }
        logger.info("size %d: sequential %.2f ms, parallel %.2f ms", size, sequential_ms, parallel_ms)
        print(f"Size {size:>5}x{size:<5} done: {sequential_ms:>10.2f} ms | {parallel_ms:>10.2f} ms")
        results.append(result)

    # Summary table
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Size':>8} | {'Sequential (ms)':>15} | {'Parallel (ms)':>13} | {'Speedup':>8}")
    print("-" * 60)
    for r in results:
        print(f"{r['size']:>8} | {r['sequential_ms']:>15.2f} | "
              f"{r['parallel_ms']:>13.2f} | {r['speedup']:>7.2f}x")
    print("=" * 60)

    if csv_path is not None:
        write_results(results, csv_path)
        print(f"\nResults saved to {csv_path}")

    return results


def write_results(results: list[dict], csv_path: str | Path) -> Path:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow({
                "size": r["size"],
                "generations": r["generations"],
                "sequential_ms": f"{r['sequential_ms']:.4f}",
                "parallel_ms": f"{r['parallel_ms']:.4f}",
                "speedup": f"{r['speedup']:.4f}",
                "sequential_mcells_s": f"{r['sequential_mcells_s']:.4f}",
                "parallel_mcells_s": f"{r['parallel_mcells_s']:.4f}",
            })
    return csv_path
