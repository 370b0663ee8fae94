from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

from match3.engine.generators import PieceGenerator
from match3.engine.grid import Grid
from match3.engine.types import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GravityMove:
    source: Position
    target: Position
    piece: Any


def refill(grid: Grid[Any], generator: PieceGenerator[Any]) -> Tuple[List[GravityMove], List[Position]]:
    """Drop pieces into empty cells and top the columns up from the generator.

    Columns are handled left to right and each column bottom to top: an empty
    cell takes the nearest piece above it, or a fresh piece when nothing is
    left above. Returns the moves made and the positions that were spawned.
    """
    moves: List[GravityMove] = []
    spawned: List[Position] = []
    for col in range(grid.width):
        for row in range(grid.height - 1, -1, -1):
            target = Position(row, col)
            if grid.piece(target) is not None:
                continue
            above = row - 1
            while above >= 0 and grid.piece(Position(above, col)) is None:
                above -= 1
            if above >= 0:
                source = Position(above, col)
                piece = grid.piece(source)
                grid.set(target, piece)
                grid.clear(source)
                moves.append(GravityMove(source=source, target=target, piece=piece))
            else:
                grid.set(target, generator.next())
                spawned.append(target)
    logger.debug("refill moved %d pieces, spawned %d", len(moves), len(spawned))
    return moves, spawned
