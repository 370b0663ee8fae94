from match3.engine.board import Board
from match3.engine.generators import IterableGenerator, PieceGenerator, RandomGenerator, SequenceGenerator
from match3.engine.gravity import GravityMove
from match3.engine.grid import Grid
from match3.engine.types import BoardEvent, BoardListener, Match, MatchEvent, Position, RefillEvent

__all__ = [
    "Board",
    "BoardEvent",
    "BoardListener",
    "GravityMove",
    "Grid",
    "IterableGenerator",
    "Match",
    "MatchEvent",
    "PieceGenerator",
    "Position",
    "RandomGenerator",
    "RefillEvent",
    "SequenceGenerator",
]
