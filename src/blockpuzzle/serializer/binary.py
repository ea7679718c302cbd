"""Big-endian primitive streams shared by the cell, piece, undo and save codecs.

Ints are 4-byte signed big-endian, booleans a single 0/1 byte.
"""
from __future__ import annotations

import struct
from typing import BinaryIO

_INT = struct.Struct(">i")


class BinaryWriter:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_int(self, value: int) -> None:
        self.stream.write(_INT.pack(int(value)))

    def write_bool(self, value: bool) -> None:
        self.stream.write(b"\x01" if value else b"\x00")

    def write_bytes(self, data: bytes) -> None:
        self.stream.write(data)


class BinaryReader:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_bytes(self, size: int) -> bytes:
        data = self.stream.read(size)
        if data is None or len(data) < size:
            got = 0 if data is None else len(data)
            raise EOFError(f"Expected {size} bytes, stream ended after {got}")
        return data

    def read_int(self) -> int:
        return _INT.unpack(self.read_bytes(_INT.size))[0]

    def read_bool(self) -> bool:
        raw = self.read_bytes(1)[0]
        if raw not in (0, 1):
            raise ValueError(f"Invalid boolean byte {raw:#04x}")
        return raw == 1

    def read_count(self) -> int:
        """Read an int that must be a non-negative length or count."""
        value = self.read_int()
        if value < 0:
            raise ValueError(f"Negative count {value} in stream")
        return value
