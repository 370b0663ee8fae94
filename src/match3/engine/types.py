from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Position:
    """A (row, col) cell address. Row 0 is the top, col 0 the left.

    Positions are never bounds-checked on creation; the grid answers ``None``
    for anything outside of it.
    """
    row: int
    col: int

    @classmethod
    def of(cls, value: "PositionLike") -> "Position":
        if isinstance(value, Position):
            return value
        row, col = value
        return cls(row=row, col=col)

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.col


PositionLike = Union[Position, Tuple[int, int]]


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    matched: T
    positions: Tuple[Position, Position, Position]


@dataclass(frozen=True, slots=True)
class MatchEvent(Generic[T]):
    match: Match[T]
    kind: Literal["Match"] = "Match"


@dataclass(frozen=True, slots=True)
class RefillEvent:
    kind: Literal["Refill"] = "Refill"


BoardEvent = Union[MatchEvent[Any], RefillEvent]
BoardListener = Callable[[BoardEvent], None]
