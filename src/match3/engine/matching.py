"""Run detection: swap lookahead and full-board scanning.

Only windows of exactly ``RUN_LENGTH`` cells are considered. A line of four
equal pieces is therefore two overlapping windows, never one longer match.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from match3.constants import RUN_LENGTH
from match3.engine.grid import Grid
from match3.engine.types import Match, Position

T = TypeVar("T")

Window = Tuple[Position, ...]


def horizontal_run_through(grid: Grid[T], pos: Position, target: T) -> bool:
    """Return True if some in-bounds window in pos's row containing pos is all ``target``."""
    for start in range(pos.col - (RUN_LENGTH - 1), pos.col + 1):
        if start < 0 or start + RUN_LENGTH > grid.width:
            continue
        if all(grid.piece(Position(pos.row, c)) == target for c in range(start, start + RUN_LENGTH)):
            return True
    return False


def vertical_run_through(grid: Grid[T], pos: Position, target: T) -> bool:
    """Return True if some in-bounds window in pos's column containing pos is all ``target``."""
    for start in range(pos.row - (RUN_LENGTH - 1), pos.row + 1):
        if start < 0 or start + RUN_LENGTH > grid.height:
            continue
        if all(grid.piece(Position(r, pos.col)) == target for r in range(start, start + RUN_LENGTH)):
            return True
    return False


def creates_match(grid: Grid[T], a: Position, b: Position) -> bool:
    """Return True if swapping a and b would complete a run through either cell.

    Legal pairs share a row or a column; they do not have to be neighbours.
    The swap is evaluated on a copy so the caller's grid is never touched.
    """
    piece_a = grid.piece(a)
    piece_b = grid.piece(b)
    if piece_a is None or piece_b is None:
        return False
    if piece_a == piece_b:
        return False
    if a.row != b.row and a.col != b.col:
        return False
    swapped = grid.copy()
    swapped.swap(a, b)
    return (
        horizontal_run_through(swapped, a, piece_b)
        or horizontal_run_through(swapped, b, piece_a)
        or vertical_run_through(swapped, a, piece_b)
        or vertical_run_through(swapped, b, piece_a)
    )


def horizontal_windows(grid: Grid[T]) -> Iterator[Window]:
    for row in range(grid.height):
        for col in range(grid.width - (RUN_LENGTH - 1)):
            yield tuple(Position(row, col + i) for i in range(RUN_LENGTH))


def vertical_windows(grid: Grid[T]) -> Iterator[Window]:
    for row in range(grid.height - (RUN_LENGTH - 1)):
        for col in range(grid.width):
            yield tuple(Position(row + i, col) for i in range(RUN_LENGTH))


def run_at(grid: Grid[T], window: Window) -> Optional[Match[T]]:
    first = grid.piece(window[0])
    if first is None:
        return None
    if all(grid.piece(p) == first for p in window[1:]):
        return Match(matched=first, positions=window)  # type: ignore[arg-type]
    return None


def _first_run(grid: Grid[T], windows: Iterable[Window]) -> Optional[Match[T]]:
    for window in windows:
        match = run_at(grid, window)
        if match is not None:
            return match
    return None


def scan_matches(
    grid: Grid[T], on_match: Callable[[Match[T]], None] | None = None
) -> List[Match[T]]:
    """Scan one resolve pass worth of matches.

    Horizontal windows are checked row-major first, then vertical windows.
    Each orientation stops at its first run, so a pass yields at most one
    horizontal and one vertical match. ``on_match`` fires as each one is found.
    """
    matches: List[Match[T]] = []
    for windows in (horizontal_windows(grid), vertical_windows(grid)):
        match = _first_run(grid, windows)
        if match is None:
            continue
        if on_match is not None:
            on_match(match)
        matches.append(match)
    return matches


def find_runs(grid: Grid[T]) -> List[Match[T]]:
    """Every window that currently forms a run, in both orientations."""
    runs: List[Match[T]] = []
    for windows in (horizontal_windows(grid), vertical_windows(grid)):
        for window in windows:
            match = run_at(grid, window)
            if match is not None:
                runs.append(match)
    return runs
