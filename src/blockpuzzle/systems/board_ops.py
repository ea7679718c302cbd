from __future__ import annotations

from esper import World

from blockpuzzle.components.board import Board
from blockpuzzle.components.game_state import GameState
from blockpuzzle.components.piece_holder import PieceHolder
from blockpuzzle.components.scorer import Scorer
from blockpuzzle.components.undo_history import UndoHistory


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_piece_holder(world: World) -> PieceHolder:
    for _, holder in world.get_component(PieceHolder):
        return holder
    raise RuntimeError("PieceHolder not found")


def get_scorer(world: World) -> Scorer:
    for _, scorer in world.get_component(Scorer):
        return scorer
    raise RuntimeError("Scorer not found")


def get_undo_history(world: World) -> UndoHistory:
    for _, history in world.get_component(UndoHistory):
        return history
    raise RuntimeError("UndoHistory not found")


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None
