from __future__ import annotations

from esper import World

from blockpuzzle.components.game_state import GameMode, GameState
from blockpuzzle.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""
    for _, state in world.get_component(GameState):
        previous_mode = state.mode
        if previous_mode != mode:
            state.mode = mode
            event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
        return


def toggle_pause(world: World, event_bus: EventBus) -> GameMode:
    current = GameMode.PLAYING
    for _, state in world.get_component(GameState):
        current = state.mode
        break
    new_mode = GameMode.PLAYING if current == GameMode.PAUSED else GameMode.PAUSED
    set_game_mode(world, event_bus, new_mode)
    return new_mode
