from __future__ import annotations

import logging
from typing import Any, BinaryIO

from esper import World

from blockpuzzle.components.undo_history import UndoHistory, UndoState
from blockpuzzle.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_STARTED,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter
from blockpuzzle.systems.board_ops import get_board, get_piece_holder, get_scorer, get_undo_history

logger = logging.getLogger(__name__)


class UndoSystem:
    """Undoes moves made from the current hand.

    A state is recorded before every move. Once the hand is full again (a
    refill) the next record wipes the history, so undo never crosses a refill.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_STARTED, self._on_move_started)
        self.event_bus.subscribe(EVENT_MOVE_REJECTED, self._on_move_rejected)
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self._on_undo_request)

    @property
    def history(self) -> UndoHistory:
        return get_undo_history(self.world)

    @property
    def depth(self) -> int:
        return len(self.history)

    def __len__(self) -> int:
        return self.depth

    def can_undo(self) -> bool:
        holder = get_piece_holder(self.world)
        return len(holder.available_pieces()) < holder.capacity

    def record_state(self) -> None:
        """Snapshot score, board cells and hand slots before a move is applied."""
        history = self.history
        if not self.can_undo():
            # hand was just refilled
            if len(history):
                logger.debug("Hand refilled; dropping %d undo states", len(history))
            history.clear()

        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        scorer = get_scorer(self.world)
        cells = [[cell.copy() for cell in row] for row in board.cells]
        pieces = tuple(holder.pieces[:holder.capacity])
        history.push(UndoState(score=scorer.current_score, cells=cells, pieces=pieces))
        logger.debug("Recorded undo state #%d (score=%d)", len(history), scorer.current_score)

    def discard_last_state(self) -> None:
        """Drop the most recent state without applying it."""
        self.history.pop()
        logger.debug("Discarded undo state; %d left", len(self.history))

    def clear(self) -> None:
        self.history.clear()

    def restore_last(self) -> UndoState:
        """Pop the most recent state and write it back into score, board and hand."""
        state = self.history.pop()
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        scorer = get_scorer(self.world)

        scorer.current_score = state.score
        board.cells = state.cells
        holder.pieces[:holder.capacity] = state.pieces[:holder.capacity]
        logger.debug("Restored undo state (score=%d); %d left", state.score, len(self.history))
        return state

    # Persistence --------------------------------------------------------

    def write(self, stream: BinaryIO) -> None:
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        out = BinaryWriter(stream)
        states = self.history.states
        out.write_int(len(states))
        # bottom to top, so reading pushes them back in the same order
        for state in states:
            state.write(out, board.cell_count, holder.capacity)

    def read(self, stream: BinaryIO) -> None:
        """Append the states stored in ``stream`` to the history.

        Grid size and hand capacity come from the live board and hand, not
        from the stream.
        """
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        reader = BinaryReader(stream)
        count = reader.read_count()
        loaded = [
            UndoState.read(reader, board.cell_count, board.cell_size, holder.capacity)
            for _ in range(count)
        ]
        history = self.history
        for state in loaded:
            history.push(state)
        logger.debug("Loaded %d undo states", count)

    # Event handlers -----------------------------------------------------

    def _on_move_started(self, sender: Any, **payload: Any) -> None:
        self.record_state()

    def _on_move_rejected(self, sender: Any, **payload: Any) -> None:
        self.discard_last_state()

    def _on_undo_request(self, sender: Any, **payload: Any) -> None:
        if not self.can_undo() or not len(self.history):
            return
        state = self.restore_last()
        self.event_bus.emit(EVENT_UNDO_APPLIED, score=state.score, remaining=len(self.history))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="undo")
