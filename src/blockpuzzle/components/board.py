from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from blockpuzzle.components.cell import Cell
from blockpuzzle.components.piece import Piece

CellGrid = List[List[Cell]]


def make_grid(cell_count: int, cell_size: float) -> CellGrid:
    return [[Cell.at(r, c, cell_size) for c in range(cell_count)] for r in range(cell_count)]


@dataclass(slots=True)
class Board:
    """Square grid of cells. ``cells`` may be replaced wholesale (undo does)."""
    cell_count: int
    cell_size: float
    cells: CellGrid = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = make_grid(self.cell_count, self.cell_size)

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.cell_count and 0 <= col < self.cell_count

    def fits(self, piece: Piece, row: int, col: int) -> bool:
        for dr, dc in piece.filled_offsets():
            r, c = row + dr, col + dc
            if not self.in_bounds(r, c) or self.cells[r][c].is_filled:
                return False
        return True

    def put(self, piece: Piece, row: int, col: int) -> int:
        """Fill the piece's cells; returns how many cells were filled."""
        filled = 0
        for dr, dc in piece.filled_offsets():
            self.cells[row + dr][col + dc].set(piece.color_index)
            filled += 1
        return filled

    def filled_positions(self) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell.is_filled
        ]
