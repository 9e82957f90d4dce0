"""Bit-level reading and writing on single bytes and byte sequences.

Bits are numbered from the most significant bit of each byte: bit 0 is
the leftmost bit, bit 7 the rightmost.
"""

from __future__ import annotations

import sys
from typing import TextIO

_BYTE_MASK = 0xFF


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= _BYTE_MASK:
        raise ValueError(f"{name} must fit in one byte, got {value}")


def _read_bits(data: bytes | bytearray, offset_in_bits: int, length_in_bits: int) -> int:
    """Return ``length_in_bits`` bits of ``data`` starting at ``offset_in_bits`` as an integer."""
    if offset_in_bits < 0 or length_in_bits < 0:
        raise ValueError("offset and length must be non-negative")
    total = len(data) * 8
    if offset_in_bits + length_in_bits > total:
        raise ValueError(
            f"cannot read {length_in_bits} bits at offset {offset_in_bits} "
            f"from {len(data)} byte(s)"
        )
    value = int.from_bytes(bytes(data), "big")
    return (value >> (total - offset_in_bits - length_in_bits)) & ((1 << length_in_bits) - 1)


# ---------------------------------------------------------------------------
# Single byte
# ---------------------------------------------------------------------------


def byte_make_mask(offset_in_bits: int, num_bits: int) -> int:
    """Return a byte mask with ``num_bits`` ones starting at bit ``offset_in_bits``.

    Ones that would fall past the end of the byte are dropped.
    """
    if offset_in_bits < 0 or num_bits < 0:
        raise ValueError("offset and number of bits must be non-negative")
    end = min(8, offset_in_bits + num_bits)
    return (_BYTE_MASK >> min(8, offset_in_bits)) & ~(_BYTE_MASK >> end) & _BYTE_MASK


def byte_extract(byte: int, offset_in_bits: int, num_bits: int, offset_in_bits_out: int) -> int:
    """Take ``num_bits`` bits of ``byte`` at ``offset_in_bits`` and move them to ``offset_in_bits_out``."""
    _check_byte(byte, "byte")
    result = byte & byte_make_mask(offset_in_bits, num_bits)
    shift = offset_in_bits_out - offset_in_bits
    if shift < 0:
        result <<= -shift
    elif shift > 0:
        result >>= shift
    return result & _BYTE_MASK


def byte_write_bits(
    byte_out: int,
    offset_in_bits_out: int,
    byte_in: int,
    offset_in_bits_in: int,
    size_in_bits: int,
) -> int:
    """Return ``byte_out`` with ``size_in_bits`` bits copied from ``byte_in``.

    The bits are read at ``offset_in_bits_in`` and written at
    ``offset_in_bits_out``. Raises ``ValueError`` if the read would leave
    the input byte.
    """
    _check_byte(byte_out, "byte_out")
    _check_byte(byte_in, "byte_in")
    if size_in_bits == 0:
        return byte_out
    if offset_in_bits_in > 7:
        raise ValueError(f"offset_in_bits_in = {offset_in_bits_in} > 7")
    if offset_in_bits_in + size_in_bits > 8:
        raise ValueError(
            f"offset_in_bits_in + size_in_bits = {offset_in_bits_in} + {size_in_bits} > 8"
        )

    moved = byte_extract(byte_in, offset_in_bits_in, size_in_bits, offset_in_bits_out)
    cleared = byte_out & ~byte_make_mask(offset_in_bits_out, size_in_bits) & _BYTE_MASK
    return cleared | moved


def byte_dump(byte: int, out: TextIO | None = None) -> None:
    """Write a byte in hexadecimal to ``out`` (standard output by default)."""
    _check_byte(byte, "byte")
    bits_fprintf(out if out is not None else sys.stdout, bytes([byte]), 8, 0)


# ---------------------------------------------------------------------------
# Byte sequences
# ---------------------------------------------------------------------------


def bits_extract(data: bytes | bytearray, offset_in_bits: int, length_in_bits: int) -> bytes:
    """Return ``length_in_bits`` bits of ``data`` from ``offset_in_bits``, right-aligned.

    The result holds the smallest whole number of bytes able to carry the bits.
    """
    value = _read_bits(data, offset_in_bits, length_in_bits)
    return value.to_bytes((length_in_bits + 7) // 8, "big")


def bits_write(
    out: bytearray,
    offset_in_bits_out: int,
    data: bytes | bytearray,
    offset_in_bits_in: int,
    length_in_bits: int,
) -> None:
    """Copy ``length_in_bits`` bits from ``data`` into ``out`` in place.

    Reading starts at bit ``offset_in_bits_in`` of ``data`` and writing at bit
    ``offset_in_bits_out`` of ``out``; both offsets must be below 8. Bits of
    ``out`` outside the written span are left untouched.
    """
    if not 0 <= offset_in_bits_in < 8:
        raise ValueError(f"offset_in ({offset_in_bits_in}) must be < 8")
    if not 0 <= offset_in_bits_out < 8:
        raise ValueError(f"offset_out ({offset_in_bits_out}) must be < 8")

    value = _read_bits(data, offset_in_bits_in, length_in_bits)
    if length_in_bits == 0:
        return

    span = (offset_in_bits_out + length_in_bits + 7) // 8
    if len(out) < span:
        raise ValueError(f"output holds {len(out)} byte(s), {span} needed")
    shift = span * 8 - offset_in_bits_out - length_in_bits
    mask = ((1 << length_in_bits) - 1) << shift
    current = int.from_bytes(bytes(out[:span]), "big")
    current = (current & ~mask) | (value << shift)
    out[:span] = current.to_bytes(span, "big")


def format_bits(data: bytes | bytearray, num_bits: int, offset_in_bits: int = 0) -> str:
    """Render ``num_bits`` bits of ``data`` starting at ``offset_in_bits``.

    Whole bytes are shown as two hex digits, aligned nibbles as one hex
    digit and other bits as 0 or 1. Bits outside the range show as dots
    up to the byte boundaries, and a space separates bytes.
    """
    if not 0 <= offset_in_bits < 8:
        raise ValueError(f"offset_in_bits ({offset_in_bits}) must be < 8")
    if num_bits < 0 or offset_in_bits + num_bits > len(data) * 8:
        raise ValueError(f"cannot show {num_bits} bits from {len(data)} byte(s)")

    parts = ["." * offset_in_bits]
    position = offset_in_bits
    remaining = num_bits
    while remaining:
        index, offset = divmod(position, 8)
        byte = data[index]
        if remaining >= 8 and offset == 0:
            step = 8
            parts.append(f"{byte:02x}")
        elif remaining >= 4 and offset % 4 == 0:
            step = 4
            nibble = byte & 0x0F if offset == 4 else byte >> 4
            parts.append(f"{nibble:x}")
        else:
            step = 1
            parts.append("1" if byte & (0x80 >> offset) else "0")
        position += step
        remaining -= step
        if position % 8 == 0 and remaining:
            parts.append(" ")
    parts.append("." * (-position % 8))
    return "".join(parts)


def bits_fprintf(
    out: TextIO, data: bytes | bytearray, num_bits: int, offset_in_bits: int = 0
) -> None:
    """Write the rendering of :func:`format_bits` to ``out``."""
    out.write(format_bits(data, num_bits, offset_in_bits))


def bits_dump(data: bytes | bytearray, num_bits: int, offset_in_bits: int = 0) -> None:
    """Write the rendering of :func:`format_bits` to standard output."""
    bits_fprintf(sys.stdout, data, num_bits, offset_in_bits)