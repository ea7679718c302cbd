from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button


# ============================================================================
# BOARD & HAND
# ============================================================================
EVENT_PIECE_DROP_REQUEST = "piece_drop_request"    # payload: piece_index=int, row=int, col=int
EVENT_MOVE_STARTED = "move_started"                # payload: piece_index=int
EVENT_MOVE_REJECTED = "move_rejected"              # payload: piece_index=int, reason=str
EVENT_PIECE_PLACED = "piece_placed"                # payload: piece_index=int, row=int, col=int, points=int
EVENT_HAND_REFILLED = "hand_refilled"              # payload: pieces=list[Piece]
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str


# ============================================================================
# UNDO & ACTIONS
# ============================================================================
EVENT_UNDO_REQUEST = "undo_request"        # payload: None
EVENT_UNDO_APPLIED = "undo_applied"        # payload: score=int, remaining=int
EVENT_PAUSE_REQUEST = "pause_request"      # payload: None


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_SAVED = "game_saved"                # payload: path=Path
EVENT_GAME_LOADED = "game_loaded"              # payload: path=Path, restored=bool
