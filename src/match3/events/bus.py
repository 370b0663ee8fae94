from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps lambdas and bound methods of unreferenced systems alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SWAPS
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"  # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_VALID = "tile_swap_valid"      # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"  # payload: src=(r,c), dst=(r,c)


# ============================================================================
# RESOLUTION
# ============================================================================
EVENT_MATCH_FOUND = "match_found"        # payload: positions=list[(r,c)], matched=piece
EVENT_REFILL_STARTED = "refill_started"  # payload: None
EVENT_GRAVITY_APPLIED = "gravity_applied"  # payload: moves=list[dict(from,to,piece)], spawned=list[(r,c)]
EVENT_BOARD_CHANGED = "board_changed"    # payload: reason=str
