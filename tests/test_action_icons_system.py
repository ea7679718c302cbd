from blockpuzzle.components.game_state import GameMode
from blockpuzzle.events.bus import EVENT_MOUSE_PRESS, EVENT_PAUSE_REQUEST, EVENT_PIECE_DROP_REQUEST
from blockpuzzle.systems.action_icons_system import Action, ActionIconsSystem
from blockpuzzle.systems.board_ops import get_board, get_game_state, get_scorer
from blockpuzzle.systems.game_flow_system import GameFlowSystem
from blockpuzzle.systems.placement_system import PlacementSystem
from blockpuzzle.ui.layout import compute_layout
from tests.helpers import make_game


def _center(rect):
    return rect.x + rect.width / 2, rect.y + rect.height / 2


def _setup(show_pause=True):
    bus, world, undo = make_game()
    PlacementSystem(world, bus)
    GameFlowSystem(world, bus)
    icons = ActionIconsSystem(world, bus, undo, show_pause=show_pause)
    icons.update_layout(compute_layout(480, 800, 10))
    return bus, world, undo, icons


def test_undo_icon_inactive_with_full_hand():
    bus, world, undo, icons = _setup()
    assert not icons.undo_visible()
    assert icons.on_press(*_center(icons.undo_area)) is Action.NONE


def test_undo_icon_restores_last_move():
    bus, world, undo, icons = _setup()
    bus.emit(EVENT_PIECE_DROP_REQUEST, piece_index=0, row=2, col=3)
    assert get_scorer(world).current_score == 1
    assert icons.undo_visible()

    assert icons.on_press(*_center(icons.undo_area)) is Action.UNDO
    assert get_scorer(world).current_score == 0
    assert not get_board(world).cell_at(2, 3).is_filled
    assert undo.depth == 0


def test_mouse_press_event_routes_to_icons():
    bus, world, undo, icons = _setup()
    bus.emit(EVENT_PIECE_DROP_REQUEST, piece_index=0, row=0, col=0)
    x, y = _center(icons.undo_area)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert undo.depth == 1
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert undo.depth == 0


def test_pause_icon_toggles_mode_and_blocks_undo():
    bus, world, undo, icons = _setup()
    bus.emit(EVENT_PIECE_DROP_REQUEST, piece_index=0, row=0, col=0)
    pauses = []
    bus.subscribe(EVENT_PAUSE_REQUEST, lambda s, **k: pauses.append(True))

    assert icons.on_press(*_center(icons.pause_area)) is Action.PAUSE
    assert get_game_state(world).mode == GameMode.PAUSED
    assert icons.on_press(*_center(icons.undo_area)) is Action.NONE
    assert undo.depth == 1

    assert icons.on_press(*_center(icons.pause_area)) is Action.PAUSE
    assert get_game_state(world).mode == GameMode.PLAYING
    assert pauses == [True, True]


def test_undo_only_variant_has_no_pause_target():
    bus, world, undo, icons = _setup(show_pause=False)
    layout = compute_layout(480, 800, 10)
    assert icons.on_press(*_center(layout.pause_area)) is Action.NONE
    assert get_game_state(world).mode == GameMode.PLAYING


def test_press_outside_icons_does_nothing():
    bus, world, undo, icons = _setup()
    assert icons.on_press(1.0, 1.0) is Action.NONE
