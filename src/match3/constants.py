GRID_ROWS = 8
GRID_COLS = 8

# Only runs of exactly this many cells are detected; longer lines are reported
# as overlapping windows.
RUN_LENGTH = 3

# Default piece values handed to RandomGenerator when a caller does not supply any.
TILE_TYPES = (
    'nature',
    'blood',
    'shapeshift',
    'spirit',
    'hex',
    'secrets',
    'witchfire',
)

# Bootstrap board used by debug_board.py: a 4 wide, 3 high board fed by "ABA".
DEMO_SEQUENCE = "ABA"
DEMO_WIDTH = 4
DEMO_HEIGHT = 3
