import logging
from typing import Dict, Optional, Tuple

from esper import World

from match3.components.board import BoardShape
from match3.components.board_position import BoardPosition
from match3.components.tile import TileType
from match3.constants import GRID_COLS, GRID_ROWS
from match3.engine.board import Board
from match3.engine.generators import PieceGenerator
from match3.engine.types import BoardEvent, MatchEvent, Position
from match3.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_GRAVITY_APPLIED,
    EVENT_MATCH_FOUND,
    EVENT_REFILL_STARTED,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_REQUEST,
    EVENT_TILE_SWAP_VALID,
)

logger = logging.getLogger(__name__)


class BoardSystem:
    """Bridges the board engine to an ECS world and the event bus.

    Each cell is mirrored by an entity with BoardPosition + TileType so a
    renderer can query the world; swap requests arriving on the bus are
    validated and applied through the engine.
    """

    def __init__(self, world: World, event_bus: EventBus, generator: PieceGenerator,
                 rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.world = world
        self.event_bus = event_bus
        self.board: Board = Board(generator, width=cols, height=rows)
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, BoardShape(rows=rows, cols=cols))
        self._entities: Dict[Tuple[int, int], int] = {}
        self._init_tiles()
        self.board.add_listener(self.on_board_event)
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def _init_tiles(self):
        for pos in self.board.positions():
            ent = self.world.create_entity()
            self.world.add_component(ent, BoardPosition(row=pos.row, col=pos.col))
            self.world.add_component(ent, TileType(piece=self.board.piece(pos)))
            self._entities[pos.as_tuple()] = ent

    def _get_entity_at(self, row: int, col: int) -> Optional[int]:
        return self._entities.get((row, col))

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        if not self.board.can_move(src, dst):
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst)
            return
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        self.board.move(src, dst)
        self.sync()
        fall_payload = [
            {'from': move.source.as_tuple(), 'to': move.target.as_tuple(), 'piece': move.piece}
            for move in self.board.gravity_moves
        ]
        spawned = [p.as_tuple() for p in self.board.spawned]
        self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=fall_payload, spawned=spawned)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="swap")

    def on_board_event(self, event: BoardEvent):
        if isinstance(event, MatchEvent):
            positions = [p.as_tuple() for p in event.match.positions]
            self.event_bus.emit(EVENT_MATCH_FOUND, positions=positions, matched=event.match.matched)
        else:
            self.event_bus.emit(EVENT_REFILL_STARTED)

    def sync(self) -> int:
        """Copy engine pieces onto the mirrored TileType components. Returns how many changed."""
        changed = 0
        for (row, col), ent in self._entities.items():
            tile: TileType = self.world.component_for_entity(ent, TileType)
            piece = self.board.piece(Position(row, col))
            if tile.piece != piece:
                tile.piece = piece
                changed += 1
        logger.debug("synced %d tiles", changed)
        return changed

    def piece_map(self) -> Dict[Tuple[int, int], object]:
        """Pieces as seen through the world, keyed by (row, col)."""
        mapping = {}
        for ent, position in self.world.get_component(BoardPosition):
            tile: TileType = self.world.component_for_entity(ent, TileType)
            mapping[(position.row, position.col)] = tile.piece
        return mapping
