from __future__ import annotations

from esper import World

from blockpuzzle.events.bus import EVENT_PAUSE_REQUEST, EventBus
from blockpuzzle.utils.game_state import toggle_pause


class GameFlowSystem:
    """Switches between playing and paused when the pause action fires."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PAUSE_REQUEST, self._on_pause_request)

    def _on_pause_request(self, sender, **payload) -> None:
        toggle_pause(self.world, self.event_bus)
