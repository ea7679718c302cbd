from __future__ import annotations

import random
from typing import Optional, Sequence

from esper import World

from blockpuzzle.components.piece import Piece
from blockpuzzle.events.bus import EventBus
from blockpuzzle.factories.pieces import create_piece
from blockpuzzle.systems.board_ops import get_piece_holder
from blockpuzzle.systems.undo_system import UndoSystem
from blockpuzzle.world import create_world


def make_game(
    *,
    cell_count: int = 10,
    hand_capacity: int = 3,
    seed: int = 7,
) -> tuple[EventBus, World, UndoSystem]:
    """Fresh bus + world + undo system with a hand of single-cell squares."""
    bus = EventBus()
    world = create_world(
        bus,
        cell_count=cell_count,
        cell_size=10,
        hand_capacity=hand_capacity,
        rng=random.Random(seed),
    )
    undo = UndoSystem(world, bus)
    set_hand(world, [create_piece("square_1")] * hand_capacity)
    return bus, world, undo


def set_hand(world: World, pieces: Sequence[Optional[Piece]]) -> None:
    holder = get_piece_holder(world)
    holder.pieces[:] = list(pieces)
