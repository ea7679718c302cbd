from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_PIECE_DROP_REQUEST
from blockpuzzle.systems.board_ops import get_game_state


class InputSystem:
    """Click a hand piece to pick it up, then click a board cell to drop its top-left corner there."""

    def __init__(self, event_bus: EventBus, render_system):
        self.event_bus = event_bus
        self.render_system = render_system
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != 1:
            return
        rs = self.render_system
        state = get_game_state(rs.world)
        # Selection survives a pause untouched.
        if state is not None and state.mode == GameMode.PAUSED:
            return
        slot = rs.get_hand_slot_at_point(x, y)
        if slot is not None:
            rs.selected_slot = slot
            return
        cell = rs.get_cell_at_point(x, y)
        if cell is None or rs.selected_slot is None:
            return
        piece_index = rs.selected_slot
        rs.selected_slot = None
        self.event_bus.emit(EVENT_PIECE_DROP_REQUEST, piece_index=piece_index, row=cell[0], col=cell[1])
