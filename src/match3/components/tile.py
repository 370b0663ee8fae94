from dataclasses import dataclass
from typing import Any

@dataclass(slots=True)
class TileType:
    """Mirror of the piece currently held by the engine at this entity's BoardPosition.

    Written only by BoardSystem after each engine call; never edited to drive the board.
    """
    piece: Any
