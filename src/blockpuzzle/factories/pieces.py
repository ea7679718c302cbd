from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Mapping

from blockpuzzle.components.piece import Piece, Shape, shape_from_rows


@dataclass(frozen=True)
class PieceSpec:
    slug: str
    shape: Shape
    color_index: int
    rotations: int


_PIECE_SPECS: Mapping[str, PieceSpec] = {
    "square_1": PieceSpec("square_1", shape_from_rows("X"), 0, 1),
    "square_2": PieceSpec("square_2", shape_from_rows("XX", "XX"), 1, 1),
    "square_3": PieceSpec("square_3", shape_from_rows("XXX", "XXX", "XXX"), 2, 1),
    "line_2": PieceSpec("line_2", shape_from_rows("XX"), 3, 2),
    "line_3": PieceSpec("line_3", shape_from_rows("XXX"), 4, 2),
    "line_4": PieceSpec("line_4", shape_from_rows("XXXX"), 5, 2),
    "line_5": PieceSpec("line_5", shape_from_rows("XXXXX"), 6, 2),
    "small_l": PieceSpec("small_l", shape_from_rows("X.", "XX"), 7, 4),
    "big_l": PieceSpec("big_l", shape_from_rows("X..", "X..", "XXX"), 8, 4),
}


def rotate_shape(shape: Shape, quarter_turns: int) -> Shape:
    """Rotate clockwise by ``quarter_turns``."""
    for _ in range(quarter_turns % 4):
        shape = tuple(zip(*shape[::-1]))
    return shape


def piece_slugs() -> List[str]:
    return list(_PIECE_SPECS.keys())


def create_piece(slug: str, rotation: int = 0) -> Piece:
    try:
        spec = _PIECE_SPECS[slug]
    except KeyError as exc:
        raise ValueError(f"Unknown piece '{slug}'") from exc
    rotation %= spec.rotations
    return Piece(shape=rotate_shape(spec.shape, rotation), color_index=spec.color_index, rotation=rotation)


def random_piece(rng: random.Random) -> Piece:
    spec = rng.choice(list(_PIECE_SPECS.values()))
    return create_piece(spec.slug, rng.randrange(spec.rotations))


def deal_hand(rng: random.Random, capacity: int) -> List[Piece]:
    return [random_piece(rng) for _ in range(capacity)]
