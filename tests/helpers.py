from __future__ import annotations

from itertools import chain
from typing import Iterable, Sequence

from match3.engine.board import Board
from match3.engine.generators import IterableGenerator
from match3.engine.grid import Grid
from match3.engine.matching import find_runs
from match3.engine.types import Position


def board_from_layout(layout: Sequence[str], refill: Iterable = (), **kwargs) -> Board:
    """Build a board whose initial fill is ``layout`` (one string per row), then ``refill``.

    The layout must not already contain a run or construction will eat into the refill values.
    """
    height = len(layout)
    width = len(layout[0])
    pieces = chain((ch for row in layout for ch in row), refill)
    return Board(IterableGenerator(pieces), width, height, **kwargs)


def as_strings(board: Board) -> list[str]:
    return [''.join(row) for row in board.rows()]


def has_match(rows) -> bool:
    grid = Grid(len(rows[0]), len(rows))
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            grid.set(Position(r, c), value)
    return bool(find_runs(grid))
