import random

from esper import World

from blockpuzzle.components.board import Board
from blockpuzzle.components.game_state import GameMode, GameState
from blockpuzzle.components.piece_holder import PieceHolder
from blockpuzzle.components.scorer import Scorer
from blockpuzzle.components.undo_history import UndoHistory
from blockpuzzle.constants import CELL_COUNT, CELL_SIZE, HAND_CAPACITY
from blockpuzzle.events.bus import EventBus
from blockpuzzle.factories.pieces import deal_hand


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    cell_count: int = CELL_COUNT,
    cell_size: float = CELL_SIZE,
    hand_capacity: int = HAND_CAPACITY,
    deal_initial_hand: bool = True,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource.
    world.create_entity(GameState(mode=initial_mode))

    world.create_entity(Board(cell_count=cell_count, cell_size=cell_size))
    holder = PieceHolder(capacity=hand_capacity)
    if deal_initial_hand:
        holder.refill(deal_hand(world.random, hand_capacity))
    world.create_entity(holder)
    world.create_entity(Scorer())
    world.create_entity(UndoHistory())
    return world
