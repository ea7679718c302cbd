from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from blockpuzzle.components.piece import Piece


@dataclass(slots=True)
class PieceHolder:
    """The player's hand: a fixed number of slots, emptied as pieces are played.

    capacity: number of slots (the full complement after a refill).
    pieces: one entry per slot, None once the slot's piece was placed.
    """
    capacity: int
    pieces: List[Optional[Piece]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("PieceHolder capacity must be positive")
        if len(self.pieces) < self.capacity:
            self.pieces.extend([None] * (self.capacity - len(self.pieces)))
        elif len(self.pieces) > self.capacity:
            raise ValueError(f"PieceHolder holds at most {self.capacity} pieces")

    def available_pieces(self) -> List[Piece]:
        return [piece for piece in self.pieces if piece is not None]

    @property
    def is_full(self) -> bool:
        return len(self.available_pieces()) == self.capacity

    @property
    def is_empty(self) -> bool:
        return all(piece is None for piece in self.pieces)

    def take(self, index: int) -> Optional[Piece]:
        """Remove and return the piece in slot ``index`` (None if already empty)."""
        piece = self.pieces[index]
        self.pieces[index] = None
        return piece

    def refill(self, pieces: Sequence[Piece]) -> None:
        if len(pieces) != self.capacity:
            raise ValueError(f"Refill needs exactly {self.capacity} pieces, got {len(pieces)}")
        self.pieces[:] = list(pieces)
