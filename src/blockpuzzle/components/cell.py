from __future__ import annotations

from dataclasses import dataclass

from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter

EMPTY = -1


@dataclass(slots=True)
class Cell:
    """One board position.

    x, y: board-local pixel origin derived from the grid indices.
    color_index: palette index of the piece that filled it, or EMPTY.
    """
    x: float
    y: float
    size: float
    color_index: int = EMPTY

    @classmethod
    def at(cls, row: int, col: int, cell_size: float) -> Cell:
        return cls(x=col * cell_size, y=row * cell_size, size=cell_size)

    @property
    def is_filled(self) -> bool:
        return self.color_index != EMPTY

    def set(self, color_index: int) -> None:
        self.color_index = color_index

    def clear(self) -> None:
        self.color_index = EMPTY

    def copy(self) -> Cell:
        return Cell(self.x, self.y, self.size, self.color_index)

    # Only the colour is persisted; position comes from the grid it is read into.
    def write(self, out: BinaryWriter) -> None:
        out.write_int(self.color_index)

    def read(self, reader: BinaryReader) -> None:
        self.color_index = reader.read_int()
