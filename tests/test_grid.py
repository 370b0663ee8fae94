import pytest

from match3.engine.grid import Grid
from match3.engine.types import Position


def filled_grid(layout):
    grid = Grid(len(layout[0]), len(layout))
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            grid.set(Position(r, c), ch)
    return grid


def test_positions_are_row_major():
    grid = Grid(3, 2)
    assert [p.as_tuple() for p in grid.positions()] == [
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)
    ]


@pytest.mark.parametrize('pos', [(-1, 0), (0, -1), (2, 0), (0, 3), (-5, 99)])
def test_out_of_bounds_reads_empty(pos):
    grid = filled_grid(['ABC', 'DEF'])
    assert grid.piece(Position(*pos)) is None


def test_swap_twice_restores_grid():
    grid = filled_grid(['ABC', 'DEF'])
    before = grid.copy()
    grid.swap(Position(0, 0), Position(1, 2))
    assert grid.rows() == (('F', 'B', 'C'), ('D', 'E', 'A'))
    grid.swap(Position(0, 0), Position(1, 2))
    assert grid == before


def test_copy_is_independent():
    grid = filled_grid(['AB'])
    clone = grid.copy()
    clone.clear(Position(0, 0))
    assert grid.piece(Position(0, 0)) == 'A'
    assert clone.empty_positions() == [Position(0, 0)]


def test_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 3)
