from __future__ import annotations

import logging
from pathlib import Path

from esper import World

from blockpuzzle.components.board import make_grid
from blockpuzzle.components.piece import Piece
from blockpuzzle.constants import SAVE_MAGIC, SAVE_VERSION
from blockpuzzle.events.bus import EVENT_BOARD_CHANGED, EVENT_GAME_LOADED, EVENT_GAME_SAVED, EventBus
from blockpuzzle.factories.pieces import deal_hand
from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter
from blockpuzzle.systems.board_ops import get_board, get_piece_holder, get_scorer
from blockpuzzle.systems.undo_system import UndoSystem

logger = logging.getLogger(__name__)


class SaveGameSystem:
    """Persists the running game, undo history included, to a single file.

    The header records grid size and hand capacity so a save is only replayed
    into a game of the same dimensions; the undo records themselves do not
    carry them.
    """

    def __init__(self, world: World, event_bus: EventBus, undo_system: UndoSystem, *, save_path: Path | None = None):
        self.world = world
        self.event_bus = event_bus
        self.undo_system = undo_system
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()

    @staticmethod
    def _default_save_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "game.sav"

    @property
    def save_path(self) -> Path:
        return self._save_path

    def has_save(self) -> bool:
        return self._save_path.is_file()

    def save(self) -> None:
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        scorer = get_scorer(self.world)
        self._save_path.parent.mkdir(parents=True, exist_ok=True)
        with self._save_path.open("wb") as handle:
            out = BinaryWriter(handle)
            out.write_bytes(SAVE_MAGIC)
            out.write_int(SAVE_VERSION)
            out.write_int(board.cell_count)
            out.write_int(holder.capacity)
            out.write_int(scorer.current_score)
            for row in board.cells:
                for cell in row:
                    cell.write(out)
            for piece in holder.pieces:
                out.write_bool(piece is not None)
                if piece is not None:
                    piece.write(out)
            self.undo_system.write(handle)
        logger.info("Saved game to %s (%d undo states)", self._save_path, len(self.undo_system))
        self.event_bus.emit(EVENT_GAME_SAVED, path=self._save_path)

    def load(self) -> bool:
        """Restore the saved game; on any failure start a fresh one and return False."""
        try:
            self._load()
        except FileNotFoundError:
            logger.info("No save file at %s; starting a new game", self._save_path)
            self.new_game()
            restored = False
        except (OSError, EOFError, ValueError) as exc:
            logger.warning("Could not load %s (%s); starting a new game", self._save_path, exc)
            self.new_game()
            restored = False
        else:
            restored = True
        self.event_bus.emit(EVENT_GAME_LOADED, path=self._save_path, restored=restored)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="load")
        return restored

    def new_game(self) -> None:
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        board.cells = make_grid(board.cell_count, board.cell_size)
        holder.refill(deal_hand(self.world.random, holder.capacity))
        get_scorer(self.world).current_score = 0
        self.undo_system.clear()

    def _load(self) -> None:
        board = get_board(self.world)
        holder = get_piece_holder(self.world)
        with self._save_path.open("rb") as handle:
            reader = BinaryReader(handle)
            magic = reader.read_bytes(len(SAVE_MAGIC))
            if magic != SAVE_MAGIC:
                raise ValueError("not a save file")
            version = reader.read_int()
            if version != SAVE_VERSION:
                raise ValueError(f"unsupported save version {version}")
            cell_count = reader.read_int()
            capacity = reader.read_int()
            if cell_count != board.cell_count or capacity != holder.capacity:
                raise ValueError(
                    f"save is for a {cell_count}x{cell_count} board with {capacity} pieces, "
                    f"game is {board.cell_count}x{board.cell_count} with {holder.capacity}"
                )
            score = reader.read_int()
            cells = make_grid(board.cell_count, board.cell_size)
            for row in cells:
                for cell in row:
                    cell.read(reader)
            pieces = [Piece.read(reader) if reader.read_bool() else None for _ in range(capacity)]

            self.undo_system.clear()
            self.undo_system.read(handle)

        board.cells = cells
        holder.pieces[:] = pieces
        get_scorer(self.world).current_score = score
