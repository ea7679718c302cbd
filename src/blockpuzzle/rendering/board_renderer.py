from __future__ import annotations

from typing import TYPE_CHECKING

from blockpuzzle.constants import BAND_COLOR, EMPTY_CELL_COLOR, PALETTE

if TYPE_CHECKING:
    from blockpuzzle.components.board import Board
    from blockpuzzle.components.piece import Piece
    from blockpuzzle.components.piece_holder import PieceHolder
    from blockpuzzle.ui.layout import GameLayout, Rect


def color_for(color_index: int):
    if 0 <= color_index < len(PALETTE):
        return PALETTE[color_index]
    return EMPTY_CELL_COLOR


class BoardRenderer:
    def __init__(self, padding: int = 2):
        self._padding = padding
        # (row, col) -> (left, bottom, size) from the last frame, used for hit testing
        self.cell_rects: dict[tuple[int, int], tuple[float, float, float]] = {}

    def layout_cells(self, board: Board, layout: GameLayout) -> None:
        size = layout.cell_size
        area = layout.board_area
        self.cell_rects = {}
        for r in range(board.cell_count):
            for c in range(board.cell_count):
                # row 0 is the top row on screen
                left = area.x + c * size
                bottom = area.y + (board.cell_count - 1 - r) * size
                self.cell_rects[(r, c)] = (left, bottom, size)

    def cell_at_point(self, x: float, y: float) -> tuple[int, int] | None:
        for pos, (left, bottom, size) in self.cell_rects.items():
            if left <= x <= left + size and bottom <= y <= bottom + size:
                return pos
        return None

    def render(self, arcade, board: Board, holder: PieceHolder, layout: GameLayout, selected: int | None) -> None:
        pad = self._padding
        for (r, c), (left, bottom, size) in self.cell_rects.items():
            cell = board.cells[r][c]
            arcade.draw_lbwh_rectangle_filled(left + pad, bottom + pad, size - 2 * pad, size - 2 * pad, color_for(cell.color_index))

        hand = layout.hand_area
        arcade.draw_lbwh_rectangle_filled(hand.x, hand.y, hand.width, hand.height, BAND_COLOR)
        for index, piece in enumerate(holder.pieces):
            slot = layout.hand_slot(index, holder.capacity)
            if index == selected:
                arcade.draw_lbwh_rectangle_outline(slot.x + 4, slot.y + 4, slot.width - 8, slot.height - 8, arcade.color.WHITE, 2)
            if piece is not None:
                self._render_piece(arcade, piece, slot, layout.cell_size // 2)

    def _render_piece(self, arcade, piece: Piece, slot: Rect, size: int) -> None:
        left = slot.x + (slot.width - piece.cols * size) / 2
        top = slot.y + (slot.height + piece.rows * size) / 2
        color = color_for(piece.color_index)
        for r, c in piece.filled_offsets():
            arcade.draw_lbwh_rectangle_filled(left + c * size + 1, top - (r + 1) * size + 1, size - 2, size - 2, color)
