from __future__ import annotations

from typing import TYPE_CHECKING

from blockpuzzle.constants import PAUSE_ICON_COLOR, UNDO_ICON_COLOR

if TYPE_CHECKING:
    from blockpuzzle.systems.action_icons_system import ActionIconsSystem
    from blockpuzzle.ui.layout import Rect


class ActionIconsRenderer:
    """Draws the undo arrow (only while undo is possible) and the pause bars."""

    def __init__(self, icons: ActionIconsSystem):
        self._icons = icons

    def render(self, arcade) -> None:
        icons = self._icons
        if icons.undo_visible():
            self._draw_undo(arcade, icons.undo_area)
        if icons.show_pause:
            self._draw_pause(arcade, icons.pause_area)

    @staticmethod
    def _draw_undo(arcade, area: Rect) -> None:
        cx = area.x + area.width / 2
        cy = area.y + area.height / 2
        arcade.draw_polygon_filled(
            [
                (area.x, cy),
                (cx, area.y + area.height),
                (cx, area.y),
            ],
            UNDO_ICON_COLOR,
        )
        arcade.draw_lrbt_rectangle_filled(cx, area.x + area.width, cy - area.height / 6, cy + area.height / 6, UNDO_ICON_COLOR)

    @staticmethod
    def _draw_pause(arcade, area: Rect) -> None:
        bar_w = area.width / 3
        arcade.draw_lbwh_rectangle_filled(area.x, area.y, bar_w, area.height, PAUSE_ICON_COLOR)
        arcade.draw_lbwh_rectangle_filled(area.x + 2 * bar_w, area.y, bar_w, area.height, PAUSE_ICON_COLOR)
