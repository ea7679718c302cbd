from __future__ import annotations

from typing import Any

from esper import World

from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_HAND_REFILLED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_STARTED,
    EVENT_PIECE_DROP_REQUEST,
    EVENT_PIECE_PLACED,
    EventBus,
)
from blockpuzzle.factories.pieces import deal_hand
from blockpuzzle.systems.board_ops import get_board, get_game_state, get_piece_holder, get_scorer


class PlacementSystem:
    """Drops hand pieces onto the board.

    Every drop announces EVENT_MOVE_STARTED before touching the board so the
    undo history can record; a drop that turns out illegal is followed by
    EVENT_MOVE_REJECTED.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PIECE_DROP_REQUEST, self.on_drop_request)

    def on_drop_request(self, sender, **kwargs: Any) -> None:
        piece_index = kwargs.get("piece_index")
        row = kwargs.get("row")
        col = kwargs.get("col")
        if piece_index is None or row is None or col is None:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PLAYING:
            return
        holder = get_piece_holder(self.world)
        if not 0 <= piece_index < holder.capacity:
            return

        self.event_bus.emit(EVENT_MOVE_STARTED, piece_index=piece_index)

        piece = holder.pieces[piece_index]
        board = get_board(self.world)
        if piece is None:
            self.event_bus.emit(EVENT_MOVE_REJECTED, piece_index=piece_index, reason="empty_slot")
            return
        if not board.fits(piece, row, col):
            self.event_bus.emit(EVENT_MOVE_REJECTED, piece_index=piece_index, reason="does_not_fit")
            return

        points = board.put(piece, row, col)
        holder.take(piece_index)
        get_scorer(self.world).add(points)
        self.event_bus.emit(EVENT_PIECE_PLACED, piece_index=piece_index, row=row, col=col, points=points)

        if holder.is_empty:
            pieces = deal_hand(self.world.random, holder.capacity)
            holder.refill(pieces)
            self.event_bus.emit(EVENT_HAND_REFILLED, pieces=list(pieces))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="piece_placed")
