"""The match-three board engine.

A ``Board`` owns a fixed grid of pieces, validates and applies swaps, and
cascades scan/clear/refill passes until no run of three remains. Everything
runs synchronously inside the public call that triggered it; listeners are
invoked inline and their exceptions reach the caller untouched.
"""
from __future__ import annotations

import logging
from typing import Generic, List, Optional, Tuple, TypeVar

from match3.engine.generators import PieceGenerator
from match3.engine.gravity import GravityMove, refill
from match3.engine.grid import Grid
from match3.engine.matching import creates_match, find_runs, scan_matches
from match3.engine.types import (
    BoardEvent,
    BoardListener,
    Match,
    MatchEvent,
    Position,
    PositionLike,
    RefillEvent,
)
from match3.errors import CascadeLimitExceeded

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Board(Generic[T]):
    """Match-three board over pieces of type T.

    After construction and after each ``move``, ``gravity_moves`` and ``spawned``
    hold every drop and every generator fill made while that call cascaded, in
    the order they happened. A rejected move leaves both empty.
    """

    def __init__(
        self,
        generator: PieceGenerator[T],
        width: int,
        height: int,
        *,
        max_cascade_passes: int | None = None,
    ):
        self.generator = generator
        self._grid: Grid[T] = Grid(width, height)
        self._listeners: List[BoardListener] = []
        self._matches: List[Match[T]] = []
        self.gravity_moves: List[GravityMove] = []
        self.spawned: List[Position] = []
        self.max_cascade_passes = max_cascade_passes
        for p in self._grid.positions():
            self._grid.set(p, generator.next())
        passes = self._resolve()
        logger.debug("board %dx%d settled after %d passes", width, height, passes)

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def positions(self) -> List[Position]:
        """All positions in row-major order."""
        return self._grid.positions()

    def piece(self, p: PositionLike) -> Optional[T]:
        """The piece at ``p``, or None when ``p`` lies outside the board."""
        return self._grid.piece(Position.of(p))

    def rows(self) -> Tuple[Tuple[Optional[T], ...], ...]:
        return self._grid.rows()

    def add_listener(self, listener: BoardListener) -> None:
        """Call ``listener`` with every Match and Refill event, after earlier listeners.

        Exceptions raised by a listener abort the resolve loop where it stands. A
        raise on a Refill event leaves empty cells behind, so the board must be
        discarded once a listener has failed mid-resolve.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: BoardListener) -> None:
        """Drop the earliest registration of ``listener``; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def can_move(self, a: PositionLike, b: PositionLike) -> bool:
        return creates_match(self._grid, Position.of(a), Position.of(b))

    def move(self, a: PositionLike, b: PositionLike) -> bool:
        """Swap a and b and cascade if the swap is legal. Returns whether it was applied."""
        first, second = Position.of(a), Position.of(b)
        if not self.can_move(first, second):
            logger.debug("rejected move %s <-> %s", first, second)
            self.gravity_moves = []
            self.spawned = []
            return False
        self._grid.swap(first, second)
        passes = self._resolve()
        logger.debug("move %s <-> %s resolved in %d passes", first, second, passes)
        return True

    def valid_moves(self, *, adjacent_only: bool = True) -> List[Tuple[Position, Position]]:
        """Enumerate legal swaps, each pair once with the first in row-major order.

        ``adjacent_only=False`` also lists the distant same-row and same-column
        pairs that ``can_move`` accepts.
        """
        moves: List[Tuple[Position, Position]] = []
        for p in self.positions():
            if adjacent_only:
                candidates = [Position(p.row, p.col + 1), Position(p.row + 1, p.col)]
            else:
                candidates = [Position(p.row, c) for c in range(p.col + 1, self.width)]
                candidates += [Position(r, p.col) for r in range(p.row + 1, self.height)]
            for q in candidates:
                if self.can_move(p, q):
                    moves.append((p, q))
        return moves

    def has_valid_moves(self) -> bool:
        return bool(self.valid_moves())

    def is_quiescent(self) -> bool:
        """True when no run of three exists anywhere on the board."""
        return not find_runs(self._grid)

    def _alert(self, event: BoardEvent) -> None:
        # Copy so a listener registering another listener does not see it this round.
        for listener in list(self._listeners):
            listener(event)

    def _record_match(self, match: Match[T]) -> None:
        self._alert(MatchEvent(match=match))
        self._matches.append(match)

    def _resolve(self) -> int:
        """Run scan -> clear -> refill until a scan finds nothing. Returns the pass count."""
        passes = 0
        self._matches = []
        self.gravity_moves = []
        self.spawned = []
        while scan_matches(self._grid, self._record_match):
            passes += 1
            if self.max_cascade_passes is not None and passes > self.max_cascade_passes:
                self._matches = []
                raise CascadeLimitExceeded(self.max_cascade_passes)
            self._clear_matches()
        return passes

    def _clear_matches(self) -> None:
        for match in self._matches:
            for p in match.positions:
                self._grid.clear(p)
        self._matches = []
        self._alert(RefillEvent())
        moves, spawned = refill(self._grid, self.generator)
        self.gravity_moves.extend(moves)
        self.spawned.extend(spawned)

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height})"
