from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from blockpuzzle.components.board import CellGrid, make_grid
from blockpuzzle.components.piece import Piece
from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter


class UndoHistoryEmptyError(IndexError):
    """Raised when discarding or restoring with no recorded state."""


@dataclass(frozen=True, slots=True)
class UndoState:
    """Score, board cells and hand slots captured before one move.

    The grid belongs to the snapshot alone; restoring hands it over to the board.
    """
    score: int
    cells: CellGrid
    pieces: Tuple[Optional[Piece], ...]

    def write(self, out: BinaryWriter, cell_count: int, capacity: int) -> None:
        out.write_int(self.score)
        for r in range(cell_count):
            for c in range(cell_count):
                self.cells[r][c].write(out)
        for i in range(capacity):
            piece = self.pieces[i]
            if piece is None:
                out.write_bool(False)
            else:
                out.write_bool(True)
                piece.write(out)

    @classmethod
    def read(cls, reader: BinaryReader, cell_count: int, cell_size: float, capacity: int) -> UndoState:
        score = reader.read_int()
        cells = make_grid(cell_count, cell_size)
        for r in range(cell_count):
            for c in range(cell_count):
                cells[r][c].read(reader)
        pieces = tuple(
            Piece.read(reader) if reader.read_bool() else None
            for _ in range(capacity)
        )
        return cls(score=score, cells=cells, pieces=pieces)


@dataclass(slots=True)
class UndoHistory:
    """Snapshots recorded since the hand was last refilled, bottom first."""
    states: List[UndoState] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.states)

    def push(self, state: UndoState) -> None:
        self.states.append(state)

    def pop(self) -> UndoState:
        if not self.states:
            raise UndoHistoryEmptyError("No recorded state to pop")
        return self.states.pop()

    def clear(self) -> None:
        self.states.clear()
