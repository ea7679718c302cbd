from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import EVENT_GAME_MODE_CHANGED
from blockpuzzle.systems.board_ops import get_game_state
from blockpuzzle.utils.game_state import set_game_mode, toggle_pause
from tests.helpers import make_game


def test_set_game_mode_emits_only_on_change():
    bus, world, undo = make_game()
    changes = []
    bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda s, **k: changes.append((k["previous_mode"], k["new_mode"])))

    set_game_mode(world, bus, GameMode.PLAYING)
    assert changes == []
    set_game_mode(world, bus, GameMode.PAUSED)
    assert changes == [(GameMode.PLAYING, GameMode.PAUSED)]
    assert get_game_state(world).mode == GameMode.PAUSED


def test_toggle_pause_flips_between_modes():
    bus, world, undo = make_game()
    assert toggle_pause(world, bus) == GameMode.PAUSED
    assert toggle_pause(world, bus) == GameMode.PLAYING
    assert get_game_state(world).mode == GameMode.PLAYING
