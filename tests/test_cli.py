import pytest

from game_of_life import benchmark
from game_of_life.cli import main


def test_renders_requested_generations(capsys):
    assert main(["3", "4", "2"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert "Generation 0" in out
    assert "Generation 1" in out
    assert "Generation 2" not in out
    assert out.count("----") == 2
    assert len(out) == 2 * (3 + 2)


def test_parallel_engine_selectable(capsys):
    assert main(["2", "2", "1", "parallel"]) == 0
    assert "Generation 0" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["0", "5"],
    ["3", "x"],
    ["3", "3", "0"],
    ["3", "3", "1", "quantum"],
])
def test_invalid_arguments_report_error(capsys, argv):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: ")
    assert captured.out == ""


def test_benchmark_mode_writes_csv_and_chart(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(benchmark, "GRID_SIZES", [4])
    csv_path = tmp_path / "bench.csv"

    assert main(["--benchmark", str(csv_path)]) == 0

    assert csv_path.exists()
    assert csv_path.with_suffix(".png").exists()
    assert "Chart saved to" in capsys.readouterr().out
