from match3.engine.grid import Grid
from match3.engine.matching import (
    creates_match,
    find_runs,
    horizontal_run_through,
    scan_matches,
    vertical_run_through,
)
from match3.engine.types import Match, Position


def filled_grid(layout):
    grid = Grid(len(layout[0]), len(layout))
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            grid.set(Position(r, c), ch)
    return grid


def line(*cells):
    return tuple(Position(r, c) for r, c in cells)


def test_run_probes_only_use_windows_containing_position():
    grid = filled_grid(['ABBB'])
    assert horizontal_run_through(grid, Position(0, 1), 'B')
    # (0,0) is not part of the BBB window, so no run passes through it.
    assert not horizontal_run_through(grid, Position(0, 0), 'B')
    assert not vertical_run_through(grid, Position(0, 1), 'B')


def test_vertical_probe_respects_bounds():
    grid = filled_grid(['A', 'A'])
    assert not vertical_run_through(grid, Position(1, 0), 'A')


def test_scan_reports_first_run_per_orientation_horizontal_first():
    grid = filled_grid(['BAAA', 'BAAB', 'AABA'])
    found = []
    matches = scan_matches(grid, found.append)
    assert matches == found
    assert matches == [
        Match('A', line((0, 1), (0, 2), (0, 3))),
        Match('A', line((0, 1), (1, 1), (2, 1))),
    ]


def test_scan_stops_after_first_run_of_an_orientation():
    grid = filled_grid(['AAA', 'BBB'])
    assert scan_matches(grid) == [Match('A', line((0, 0), (0, 1), (0, 2)))]
    assert len(find_runs(grid)) == 2


def test_longer_lines_are_overlapping_windows():
    grid = filled_grid(['AAAA'])
    assert find_runs(grid) == [
        Match('A', line((0, 0), (0, 1), (0, 2))),
        Match('A', line((0, 1), (0, 2), (0, 3))),
    ]


def test_scan_ignores_empty_cells():
    grid = Grid(3, 1)
    assert scan_matches(grid) == []


def test_creates_match_leaves_grid_untouched():
    grid = filled_grid(['ABAA'])
    before = grid.copy()
    assert creates_match(grid, Position(0, 0), Position(0, 1))
    assert grid == before


def test_creates_match_short_circuits():
    grid = filled_grid(['ABA', 'BAB'])
    # no shared row or column
    assert not creates_match(grid, Position(0, 0), Position(1, 2))
    # identical pieces in the same row
    assert not creates_match(grid, Position(0, 0), Position(0, 2))
    # off the board
    assert not creates_match(grid, Position(0, 0), Position(0, 5))
