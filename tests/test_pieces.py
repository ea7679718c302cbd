import io
import random

import pytest

from blockpuzzle.components.piece import Piece, shape_from_rows
from blockpuzzle.factories.pieces import create_piece, deal_hand, piece_slugs, rotate_shape
from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter


def test_rotate_small_l_clockwise():
    shape = shape_from_rows("X.", "XX")
    assert rotate_shape(shape, 1) == shape_from_rows("XX", "X.")
    assert rotate_shape(shape, 4) == shape


def test_line_rotation_turns_row_into_column():
    piece = create_piece("line_4", 1)
    assert (piece.rows, piece.cols) == (4, 1)
    assert piece.rotation == 1
    assert piece.cell_count == 4


def test_rotation_wraps_per_shape():
    assert create_piece("square_3", 3).rotation == 0
    assert create_piece("big_l", 6).rotation == 2


def test_unknown_piece_rejected():
    with pytest.raises(ValueError):
        create_piece("t_shape")


def test_ragged_shape_rejected():
    with pytest.raises(ValueError):
        Piece(shape=((True, True), (True,)), color_index=0)


def test_piece_binary_layout_and_read_back():
    piece = create_piece("small_l", 1)
    stream = io.BytesIO()
    piece.write(BinaryWriter(stream))
    data = stream.getvalue()
    # colour, rotation, cols, rows, then 4 mask bytes
    assert data[:16] == b"\x00\x00\x00\x07\x00\x00\x00\x01\x00\x00\x00\x02\x00\x00\x00\x02"
    assert data[16:] == b"\x01\x01\x01\x00"
    assert Piece.read(BinaryReader(io.BytesIO(data))) == piece


def test_deal_hand_uses_known_pieces():
    hand = deal_hand(random.Random(3), 3)
    assert len(hand) == 3
    colours = {create_piece(slug).color_index for slug in piece_slugs()}
    assert all(piece.color_index in colours for piece in hand)
