from __future__ import annotations

from esper import World

from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import EVENT_BOARD_CHANGED, EventBus
from blockpuzzle.rendering.action_icons_renderer import ActionIconsRenderer
from blockpuzzle.rendering.board_renderer import BoardRenderer
from blockpuzzle.systems.action_icons_system import ActionIconsSystem
from blockpuzzle.systems.board_ops import get_board, get_game_state, get_piece_holder, get_scorer
from blockpuzzle.ui.layout import GameLayout, compute_layout


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, action_icons: ActionIconsSystem | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.action_icons = action_icons
        self.selected_slot: int | None = None
        self._layout: GameLayout | None = None
        self._last_window_size: tuple[int, int] | None = None
        self._board_renderer = BoardRenderer()
        self._icons_renderer = ActionIconsRenderer(action_icons) if action_icons is not None else None
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    @property
    def layout(self) -> GameLayout:
        self._ensure_layout()
        return self._layout

    def notify_resize(self, width: int, height: int) -> None:
        self._last_window_size = None

    def on_board_changed(self, sender, **kwargs) -> None:
        # Undo or a refill may leave the selection pointing at an empty slot.
        if self.selected_slot is not None:
            holder = get_piece_holder(self.world)
            if holder.pieces[self.selected_slot] is None:
                self.selected_slot = None

    def _ensure_layout(self) -> None:
        size = (int(self.window.width), int(self.window.height))
        if size == self._last_window_size and self._layout is not None:
            return
        self._last_window_size = size
        board = get_board(self.world)
        self._layout = compute_layout(size[0], size[1], board.cell_count)
        self._board_renderer.layout_cells(board, self._layout)
        if self.action_icons is not None:
            self.action_icons.update_layout(self._layout)

    def get_cell_at_point(self, x: float, y: float) -> tuple[int, int] | None:
        self._ensure_layout()
        return self._board_renderer.cell_at_point(x, y)

    def get_hand_slot_at_point(self, x: float, y: float) -> int | None:
        layout = self.layout
        capacity = get_piece_holder(self.world).capacity
        for index in range(capacity):
            if layout.hand_slot(index, capacity).contains(x, y):
                return index
        return None

    def process(self) -> None:
        # Local import keeps tests headless without creating a window.
        import arcade
        self._ensure_layout()
        try:
            arcade.get_window()
        except Exception:
            return

        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        self._board_renderer.render(arcade, board, holder, self._layout, self.selected_slot)
        scorer = get_scorer(self.world)
        board_area = self._layout.board_area
        arcade.draw_text(
            f"{scorer.current_score}",
            board_area.x,
            board_area.y + board_area.height + 16,
            arcade.color.WHITE,
            24,
        )
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.PAUSED:
            arcade.draw_lbwh_rectangle_filled(0, 0, self.window.width, self.window.height, (0, 0, 0, 160))
            arcade.draw_text(
                "Paused",
                self.window.width / 2,
                self.window.height / 2,
                arcade.color.WHITE,
                32,
                anchor_x="center",
            )
        if self._icons_renderer is not None:
            self._icons_renderer.render(arcade)
