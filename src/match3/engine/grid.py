from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar

from match3.engine.types import Position

T = TypeVar("T")


class Grid(Generic[T]):
    """Fixed ``height x width`` cell storage. ``None`` marks an empty cell."""

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[List[Optional[T]]] = [[None] * width for _ in range(height)]

    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.row < self.height and 0 <= p.col < self.width

    def positions(self) -> List[Position]:
        return [Position(row, col) for row in range(self.height) for col in range(self.width)]

    def piece(self, p: Position) -> Optional[T]:
        # Out-of-bounds lookups answer None so run probes never need their own checks.
        if not self.in_bounds(p):
            return None
        return self._cells[p.row][p.col]

    def set(self, p: Position, value: Optional[T]) -> None:
        self._cells[p.row][p.col] = value

    def clear(self, p: Position) -> None:
        self._cells[p.row][p.col] = None

    def swap(self, a: Position, b: Position) -> None:
        cells = self._cells
        cells[a.row][a.col], cells[b.row][b.col] = cells[b.row][b.col], cells[a.row][a.col]

    def copy(self) -> "Grid[T]":
        clone: Grid[T] = Grid(self.width, self.height)
        clone._cells = [list(row) for row in self._cells]
        return clone

    def empty_positions(self) -> List[Position]:
        return [p for p in self.positions() if self._cells[p.row][p.col] is None]

    def rows(self) -> Tuple[Tuple[Optional[T], ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, rows={self.rows()!r})"
