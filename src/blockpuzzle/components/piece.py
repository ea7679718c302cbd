from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from blockpuzzle.serializer.binary import BinaryReader, BinaryWriter

Shape = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece shape held in a hand slot.

    shape: rows of booleans, row 0 is the top of the piece.
    rotation: quarter turns applied when the piece was generated (kept for saves).
    """
    shape: Shape
    color_index: int
    rotation: int = 0

    def __post_init__(self) -> None:
        if not self.shape or not self.shape[0]:
            raise ValueError("Piece shape must have at least one row and column")
        width = len(self.shape[0])
        if any(len(row) != width for row in self.shape):
            raise ValueError("Piece shape rows must have equal length")

    @property
    def rows(self) -> int:
        return len(self.shape)

    @property
    def cols(self) -> int:
        return len(self.shape[0])

    @property
    def cell_count(self) -> int:
        return sum(1 for _ in self.filled_offsets())

    def filled_offsets(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.shape):
            for c, filled in enumerate(row):
                if filled:
                    yield r, c

    def write(self, out: BinaryWriter) -> None:
        out.write_int(self.color_index)
        out.write_int(self.rotation)
        out.write_int(self.cols)
        out.write_int(self.rows)
        for row in self.shape:
            for filled in row:
                out.write_bool(filled)

    @classmethod
    def read(cls, reader: BinaryReader) -> Piece:
        color_index = reader.read_int()
        rotation = reader.read_int()
        cols = reader.read_count()
        rows = reader.read_count()
        shape = tuple(
            tuple(reader.read_bool() for _ in range(cols))
            for _ in range(rows)
        )
        return cls(shape=shape, color_index=color_index, rotation=rotation)


def shape_from_rows(*rows: str) -> Shape:
    """Build a shape from strings such as ``"X.", "XX"``."""
    return tuple(tuple(ch == "X" for ch in row) for row in rows)
