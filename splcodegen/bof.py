"""Reading and writing binary object files (BOF) for the stack machine.

A BOF starts with a header: the four magic bytes ``BO32`` followed by five
32-bit words. The text section and the data section follow as words.
Words are stored little-endian.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, Union

MAGIC = b"BO32"
MAGIC_BUFFER_SIZE = len(MAGIC)
BYTES_PER_WORD = 4

_WORD = struct.Struct("<I")
_SIGNED_WORD = struct.Struct("<i")
_HEADER = struct.Struct(f"<{MAGIC_BUFFER_SIZE}s5I")
HEADER_SIZE = _HEADER.size

_WORD_MASK = (1 << (8 * BYTES_PER_WORD)) - 1


class BOFError(Exception):
    """Raised when a binary object file cannot be read or written."""


def _to_signed(value: int) -> int:
    return _SIGNED_WORD.unpack(_WORD.pack(value & _WORD_MASK))[0]


@dataclass
class BOFHeader:
    """The header of a binary object file; addresses and lengths are in words."""

    text_start_address: int = 0
    text_length: int = 0
    data_start_address: int = 0
    data_length: int = 0
    stack_bottom_addr: int = 0
    magic: bytes = MAGIC

    def to_bytes(self) -> bytes:
        """Return the header in its on-disk form."""
        if len(self.magic) != MAGIC_BUFFER_SIZE:
            raise BOFError(f"Magic number must be {MAGIC_BUFFER_SIZE} bytes long")
        return _HEADER.pack(
            self.magic,
            self.text_start_address & _WORD_MASK,
            self.text_length & _WORD_MASK,
            self.data_start_address & _WORD_MASK,
            self.data_length & _WORD_MASK,
            self.stack_bottom_addr & _WORD_MASK,
        )

    def has_correct_magic(self) -> bool:
        """Does this header carry the BOF magic number?"""
        return self.magic == MAGIC


def parse_header(data: bytes, name: str = "<bytes>") -> BOFHeader:
    """Decode a header from the first bytes of ``data``.

    Raises BOFError when there are too few bytes or the magic number is wrong.
    """
    if len(data) < HEADER_SIZE:
        raise BOFError(f"Cannot read header from {name}")
    magic, *words = _HEADER.unpack_from(data)
    header = BOFHeader(*(_to_signed(w) for w in words), magic=magic)
    if not header.has_correct_magic():
        raise BOFError(f"Wrong magic number code in file '{name}'!")
    return header


def read_header(stream: BinaryIO, name: str = "<stream>") -> BOFHeader:
    """Read and return the header at the current position of ``stream``."""
    return parse_header(stream.read(HEADER_SIZE), name)


def write_header(stream: BinaryIO, header: BOFHeader) -> None:
    """Write ``header`` to ``stream``."""
    data = header.to_bytes()
    if stream.write(data) != len(data):
        raise BOFError("Cannot write header")


def read_word(stream: BinaryIO, name: str = "<stream>") -> int:
    """Read the next word from ``stream`` as a signed integer."""
    data = stream.read(BYTES_PER_WORD)
    if len(data) != BYTES_PER_WORD:
        raise BOFError(
            f"Cannot read a word from {name} (got {len(data)} bytes), at EOF"
        )
    return _SIGNED_WORD.unpack(data)[0]


def write_word(stream: BinaryIO, word: int) -> None:
    """Write ``word`` to ``stream``; values wrap to 32 bits."""
    data = _WORD.pack(word & _WORD_MASK)
    if stream.write(data) != len(data):
        raise BOFError(f"Cannot write {BYTES_PER_WORD} bytes")


def file_bytes(path: Union[str, os.PathLike]) -> int:
    """Return the size in bytes of the file at ``path``."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise BOFError(f"Cannot stat {os.fspath(path)} to get its size!") from exc