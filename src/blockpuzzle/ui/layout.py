from __future__ import annotations

from dataclasses import dataclass

from blockpuzzle.constants import (
    BOARD_GAP,
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HAND_AREA_HEIGHT_PCT,
    ICON_GAP,
    ICON_SIZE,
)


@dataclass(slots=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def set(self, x: float, y: float, width: float, height: float) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height


@dataclass(slots=True)
class GameLayout:
    """Screen rectangles for one window size (y grows upwards, arcade style)."""
    cell_size: int
    board_area: Rect
    hand_area: Rect
    undo_area: Rect
    pause_area: Rect

    def hand_slot(self, index: int, capacity: int) -> Rect:
        slot_w = self.hand_area.width / capacity
        return Rect(self.hand_area.x + index * slot_w, self.hand_area.y, slot_w, self.hand_area.height)


def compute_layout(window_width: int, window_height: int, cell_count: int) -> GameLayout:
    """Hand band at the bottom, board above it, icon row above the board."""
    hand_h = (window_height - BOTTOM_MARGIN) * HAND_AREA_HEIGHT_PCT
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(max_board_w, max_board_h) / cell_count)
    if cell_size < 8:
        cell_size = 8
    board_size = cell_size * cell_count

    hand_area = Rect(0.0, float(BOTTOM_MARGIN), float(window_width), hand_h)
    board_area = Rect((window_width - board_size) / 2, hand_area.y + hand_h + BOARD_GAP, board_size, board_size)

    icon_y = board_area.y + board_size + BOARD_GAP
    center_x = window_width / 2
    undo_area = Rect(center_x - ICON_GAP / 2 - ICON_SIZE, icon_y, ICON_SIZE, ICON_SIZE)
    pause_area = Rect(center_x + ICON_GAP / 2, icon_y, ICON_SIZE, ICON_SIZE)
    return GameLayout(
        cell_size=cell_size,
        board_area=board_area,
        hand_area=hand_area,
        undo_area=undo_area,
        pause_area=pause_area,
    )
