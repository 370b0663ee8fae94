import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import logging
from match3.constants import DEMO_SEQUENCE, DEMO_WIDTH, DEMO_HEIGHT
from match3.engine.board import Board
from match3.engine.generators import SequenceGenerator

logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

def show(board):
    for row in board.rows():
        print(' '.join(str(p) for p in row))
    print()

board = Board(SequenceGenerator(DEMO_SEQUENCE), DEMO_WIDTH, DEMO_HEIGHT)
events = []
board.add_listener(events.append)
show(board)

moves = board.valid_moves(adjacent_only=False)
print('valid moves:', [(a.as_tuple(), b.as_tuple()) for a, b in moves])
if moves:
    a, b = moves[0]
    print('moving', a.as_tuple(), '<->', b.as_tuple(), '->', board.move(a, b))
    print('events', [e.kind for e in events])
    show(board)
