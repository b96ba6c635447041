import numpy as np
import pytest

from game_of_life.errors import InvalidArgument
from game_of_life.grid import count_alive
from game_of_life.patterns import blinker, block, glider, glider_gun, place
from game_of_life.sequential import SequentialEngine


def test_pattern_shapes_and_populations():
    assert blinker().shape == (1, 3)
    assert block().shape == (2, 2)
    assert glider().shape == (3, 3)
    assert count_alive(glider()) == 5
    assert glider_gun().shape == (9, 36)
    assert count_alive(glider_gun()) == 36


def test_place_stamps_pattern():
    grid = place(block(), 4, 5, top=1, left=2)
    expected = np.zeros((4, 5), dtype=bool)
    expected[1:3, 2:4] = True
    assert np.array_equal(grid, expected)


@pytest.mark.parametrize("rows, columns, top, left", [
    (2, 2, 0, 1),
    (3, 3, 2, 0),
    (5, 5, -1, 0),
    (0, 5, 0, 0),
])
def test_place_rejects_patterns_that_do_not_fit(rows, columns, top, left):
    with pytest.raises(InvalidArgument):
        place(block(), rows, columns, top=top, left=left)


def test_placed_blinker_has_period_two():
    start = place(blinker(), 5, 5, top=2, left=1)
    engine = SequentialEngine(start)
    engine.next_generation()
    assert not np.array_equal(engine.current_generation(), start)
    engine.next_generation()
    assert np.array_equal(engine.current_generation(), start)
