"""Reading fixed-size integers from a binary file in a chosen byte order."""

from __future__ import annotations

import struct
import sys
from enum import IntEnum
from os import PathLike
from types import TracebackType
from typing import BinaryIO, Optional, Type, Union


class Endianness(IntEnum):
    """Byte order of the numbers stored in a file."""

    LITTLE = 0
    BIG = 1


def native_endianness() -> Endianness:
    """Return the byte order of the running machine."""
    return Endianness.LITTLE if sys.byteorder == "little" else Endianness.BIG


_PREFIX = {Endianness.LITTLE: "<", Endianness.BIG: ">"}


class BinaryFile:
    """A binary file opened for reading numbers of a given byte order."""

    def __init__(self, path: Union[str, PathLike], endianness: Endianness) -> None:
        self.endianness = Endianness(endianness)
        self._file: BinaryIO = open(path, "rb")

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> BinaryFile:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def read(self, count: int) -> bytes:
        """Read exactly count bytes; raise EOFError if the file ends first."""
        if count < 0:
            raise ValueError("count must not be negative")
        data = self._file.read(count)
        if len(data) != count:
            raise EOFError(f"wanted {count} bytes, got {len(data)}")
        return data

    def _unpack(self, code: str) -> int:
        fmt = _PREFIX[self.endianness] + code
        (value,) = struct.unpack(fmt, self.read(struct.calcsize(fmt)))
        return value

    def read_ubyte(self) -> int:
        return self._unpack("B")

    def read_byte(self) -> int:
        return self._unpack("b")

    def read_uword(self) -> int:
        return self._unpack("H")

    def read_word(self) -> int:
        return self._unpack("h")

    def read_udword(self) -> int:
        return self._unpack("I")

    def read_dword(self) -> int:
        return self._unpack("i")