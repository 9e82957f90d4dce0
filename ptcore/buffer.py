"""A growable byte buffer and hexadecimal dumps of byte sequences."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

_BYTES_PER_LINE = 16


def format_hex(data: bytes | bytearray) -> str:
    """Render bytes as two-digit hex values, each followed by a space.

    A newline follows every sixteenth byte.
    """
    parts = []
    for index, byte in enumerate(data, start=1):
        parts.append(f"{byte:02x} ")
        if index % _BYTES_PER_LINE == 0:
            parts.append("\n")
    return "".join(parts)


def hex_fprintf(out: TextIO, data: bytes | bytearray) -> None:
    """Write the rendering of :func:`format_hex` to ``out``."""
    out.write(format_hex(data))


def hex_dump(data: bytes | bytearray) -> None:
    """Write the rendering of :func:`format_hex` to standard output."""
    hex_fprintf(sys.stdout, data)


@dataclass
class Buffer:
    """A sequence of bytes that can be resized and overwritten."""

    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)

    @property
    def size(self) -> int:
        """Number of bytes held."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def copy(self) -> Buffer:
        """Return an independent copy of this buffer."""
        return Buffer(bytearray(self.data))

    def resize(self, size: int) -> None:
        """Grow or shrink the buffer to ``size`` bytes; new bytes are zero."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        current = len(self.data)
        if size < current:
            del self.data[size:]
        elif size > current:
            self.data.extend(bytes(size - current))

    def write_bytes(self, data: bytes | bytearray) -> None:
        """Replace the content with ``data``, resizing to fit it exactly."""
        self.resize(len(data))
        self.data[:] = data

    def format(self) -> str:
        """Return the hexadecimal rendering of the content."""
        return format_hex(self.data)

    def dump(self, out: TextIO | None = None) -> None:
        """Write the hexadecimal rendering to ``out`` (standard output by default)."""
        hex_fprintf(out if out is not None else sys.stdout, self.data)