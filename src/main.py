"""Entry point for the block puzzle prototype.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color, key
from blockpuzzle.world import create_world
from blockpuzzle.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_PAUSE_REQUEST, EVENT_UNDO_REQUEST
from blockpuzzle.components.game_state import GameState, GameMode
from blockpuzzle.systems.action_icons_system import ActionIconsSystem
from blockpuzzle.systems.game_flow_system import GameFlowSystem
from blockpuzzle.systems.input import InputSystem
from blockpuzzle.systems.placement_system import PlacementSystem
from blockpuzzle.systems.render import RenderSystem
from blockpuzzle.systems.save_game_system import SaveGameSystem
from blockpuzzle.systems.undo_system import UndoSystem


class BlockPuzzleWindow(Window):
    def __init__(self):
        super().__init__(480, 800, "Block Puzzle", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Core game systems
        self.undo_system = UndoSystem(self.world, self.event_bus)
        self.placement_system = PlacementSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)

        # Interface systems
        self.action_icons_system = ActionIconsSystem(self.world, self.event_bus, self.undo_system)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.action_icons_system)
        self.input_system = InputSystem(self.event_bus, self.render_system)

        self.save_game_system = SaveGameSystem(self.world, self.event_bus, self.undo_system)
        self.save_game_system.load()

        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.P or symbol == key.ESCAPE:
            self.event_bus.emit(EVENT_PAUSE_REQUEST)
        elif symbol == key.U and self._mode() == GameMode.PLAYING:
            self.event_bus.emit(EVENT_UNDO_REQUEST)

    def on_close(self):
        self.save_game_system.save()
        super().on_close()

    def _mode(self) -> GameMode | None:
        for _, state in self.world.get_component(GameState):
            return state.mode
        return None


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    window = BlockPuzzleWindow()
    run()

if __name__ == "__main__":
    main()
