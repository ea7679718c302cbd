import io
import struct

import pytest

from blockpuzzle.factories.pieces import create_piece
from blockpuzzle.systems.board_ops import get_board, get_piece_holder, get_scorer
from tests.helpers import make_game, set_hand


def _record_moves(world, undo, moves):
    board = get_board(world)
    holder = get_piece_holder(world)
    scorer = get_scorer(world)
    for index, row, col in moves:
        undo.record_state()
        piece = holder.take(index)
        board.put(piece, row, col)
        scorer.add(piece.cell_count * 10)


def _snapshot_view(state):
    return (
        state.score,
        [[cell.color_index for cell in row] for row in state.cells],
        state.pieces,
    )


def test_round_trip_preserves_order_and_contents():
    bus, world, undo = make_game()
    set_hand(world, [create_piece("line_3", 1), create_piece("small_l", 2), create_piece("square_2")])
    _record_moves(world, undo, [(0, 0, 0), (2, 5, 5)])
    assert undo.depth == 2

    stream = io.BytesIO()
    undo.write(stream)
    stream.seek(0)

    _, other_world, other_undo = make_game()
    other_undo.read(stream)
    assert stream.read() == b""
    assert other_undo.depth == 2

    original = [_snapshot_view(undo.restore_last()) for _ in range(2)]
    restored = [_snapshot_view(other_undo.restore_last()) for _ in range(2)]
    assert restored == original


def test_read_uses_live_cell_size_for_positions():
    bus, world, undo = make_game()
    _record_moves(world, undo, [(0, 1, 2)])
    stream = io.BytesIO()
    undo.write(stream)
    stream.seek(0)

    _, other_world, other_undo = make_game()
    other_undo.read(stream)
    cell = other_undo.history.states[0].cells[1][2]
    assert (cell.x, cell.y, cell.size) == (20, 10, 10)


def test_empty_history_writes_zero_count():
    bus, world, undo = make_game()
    stream = io.BytesIO()
    undo.write(stream)
    assert stream.getvalue() == b"\x00\x00\x00\x00"

    stream.seek(0)
    _, _, other_undo = make_game()
    other_undo.read(stream)
    assert other_undo.depth == 0


def test_byte_layout_for_small_board():
    bus, world, undo = make_game(cell_count=2, hand_capacity=2)
    set_hand(world, [create_piece("square_1"), None])
    get_scorer(world).current_score = 7
    get_board(world).cell_at(1, 0).set(3)
    undo.record_state()

    stream = io.BytesIO()
    undo.write(stream)
    expected = (
        struct.pack(">i", 1)                 # count
        + struct.pack(">i", 7)               # score
        + struct.pack(">4i", -1, -1, 3, -1)  # cells, row-major
        + b"\x01"                            # slot 0 present
        + struct.pack(">4i", 0, 0, 1, 1)     # colour, rotation, cols, rows
        + b"\x01"                            # shape mask
        + b"\x00"                            # slot 1 empty
    )
    assert stream.getvalue() == expected


def test_truncated_stream_raises_and_leaves_history_alone():
    bus, world, undo = make_game()
    _record_moves(world, undo, [(0, 0, 0), (1, 3, 3)])
    stream = io.BytesIO()
    undo.write(stream)
    data = stream.getvalue()

    _, _, other_undo = make_game()
    with pytest.raises(EOFError):
        other_undo.read(io.BytesIO(data[:-3]))
    assert other_undo.depth == 0


def test_read_appends_on_top_of_existing_history():
    bus, world, undo = make_game()
    _record_moves(world, undo, [(0, 0, 0)])
    stream = io.BytesIO()
    undo.write(stream)
    stream.seek(0)
    undo.read(stream)
    assert undo.depth == 2
