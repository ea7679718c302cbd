from __future__ import annotations

from enum import Enum
from typing import Any

from esper import World

from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import EVENT_MOUSE_PRESS, EVENT_PAUSE_REQUEST, EVENT_UNDO_REQUEST, EventBus
from blockpuzzle.systems.board_ops import get_game_state
from blockpuzzle.systems.undo_system import UndoSystem
from blockpuzzle.ui.layout import GameLayout, Rect


class Action(Enum):
    NONE = "none"
    UNDO = "undo"
    PAUSE = "pause"


class ActionIconsSystem:
    """Touch targets for the undo and (optional) pause icons.

    Sits on top of an UndoSystem; the undo target only counts while an undo is
    possible, mirroring the icon only being drawn in that case.
    """

    def __init__(self, world: World, event_bus: EventBus, undo_system: UndoSystem, *, show_pause: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.undo_system = undo_system
        self.show_pause = show_pause
        self.undo_area = Rect()
        self.pause_area = Rect()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def update_layout(self, layout: GameLayout) -> None:
        a = layout.undo_area
        self.undo_area.set(a.x, a.y, a.width, a.height)
        if self.show_pause:
            p = layout.pause_area
            self.pause_area.set(p.x, p.y, p.width, p.height)

    def undo_visible(self) -> bool:
        return self.undo_system.can_undo()

    def on_press(self, x: float, y: float) -> Action:
        """Resolve a press at window coordinates, firing the matching request."""
        state = get_game_state(self.world)
        paused = state is not None and state.mode == GameMode.PAUSED
        if not paused and self.undo_area.contains(x, y) and self.undo_visible():
            self.event_bus.emit(EVENT_UNDO_REQUEST)
            return Action.UNDO
        if self.show_pause and self.pause_area.contains(x, y):
            self.event_bus.emit(EVENT_PAUSE_REQUEST)
            return Action.PAUSE
        return Action.NONE

    def on_mouse_press(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get("x")
        y = kwargs.get("y")
        # Left button only; arcade reports 1 for it.
        if x is None or y is None or kwargs.get("button", 1) != 1:
            return
        self.on_press(float(x), float(y))
