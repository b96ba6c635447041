"""
Command-line driver.

Usage: game-of-life [rows] [columns] [generations] [sequential|parallel]
       game-of-life --benchmark [csv_path]
"""

import logging
import os
import sys
from pathlib import Path

from .errors import InvalidArgument
from .output import simulate
from .parallel import ParallelEngine
from .sequential import SequentialEngine

ROWS = 20
COLUMNS = 40
GENERATIONS = 10
ENGINES = {
    "sequential": SequentialEngine,
    "parallel": ParallelEngine,
}

LOG_LEVEL_ENV = "GAME_OF_LIFE_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}") from None


def _run_benchmark(args: list[str]) -> None:
    from .benchmark import run_benchmark

    csv_path = Path(args[0]) if args else None
    run_benchmark(csv_path=csv_path)
    if csv_path is not None:
        from .plotting import save_speedup_chart

        chart = save_speedup_chart(csv_path, csv_path.with_suffix(".png"))
        print(f"Chart saved to {chart}")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    _configure_logging()

    try:
        # Check for benchmark mode first
        if argv and argv[0] == "--benchmark":
            _run_benchmark(argv[1:])
            return 0

        rows = _parse_int("rows", argv[0]) if len(argv) > 0 else ROWS
        columns = _parse_int("columns", argv[1]) if len(argv) > 1 else COLUMNS
        generations = _parse_int("generations", argv[2]) if len(argv) > 2 else GENERATIONS
        engine_name = argv[3] if len(argv) > 3 else "sequential"
        if engine_name not in ENGINES:
            raise InvalidArgument(f"engine must be one of {', '.join(ENGINES)}, got {engine_name!r}")

        engine = ENGINES[engine_name](rows, columns)
        simulate(engine, generations, sys.stdout)
    except InvalidArgument as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
