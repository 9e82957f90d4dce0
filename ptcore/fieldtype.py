"""Data types a field can carry, their sizes, and bit-level values."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

_POINTER_SIZE = struct.calcsize("P")
# name, next-value callback, fields, number of fields, size, current value
_GENERATOR_SIZE = struct.calcsize("PPPNNd")


class FieldType(Enum):
    """Kinds of value stored in a field."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    BITS = "bits"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINT128 = "uint128"
    UINTMAX = "uintmax"
    DOUBLE = "double"
    STRING = "string"
    GENERATOR = "generator"

    def to_string(self) -> str:
        """Return the human readable name of this type."""
        return self.value

    def __str__(self) -> str:
        return self.value


_TYPE_SIZES = {
    FieldType.IPV4: 4,
    FieldType.IPV6: 16,
    FieldType.UINT8: struct.calcsize("B"),
    FieldType.UINT16: struct.calcsize("H"),
    FieldType.UINT32: struct.calcsize("I"),
    FieldType.UINT64: struct.calcsize("Q"),
    FieldType.UINT128: 2 * struct.calcsize("Q"),
    FieldType.UINTMAX: struct.calcsize("Q"),
    FieldType.DOUBLE: struct.calcsize("d"),
    FieldType.STRING: _POINTER_SIZE,
    FieldType.GENERATOR: _GENERATOR_SIZE,
}


def type_size(field_type: FieldType) -> int:
    """Return the size in bytes of a value of ``field_type``.

    Bit-level values have no byte size; asking for one raises ``ValueError``.
    """
    if field_type is FieldType.BITS:
        raise ValueError("bit-level fields have no byte size: use their size in bits instead")
    try:
        return _TYPE_SIZES[field_type]
    except KeyError:
        raise ValueError(f"type not supported: {field_type!r}") from None


@dataclass
class BitValue:
    """A bit-level value: ``size_in_bits`` bits of ``bits`` starting at bit ``offset_in_bits``.

    Bits are numbered from the most significant bit of the first byte.
    Without ``bits``, the smallest zeroed buffer able to hold the value is used.
    """

    size_in_bits: int
    offset_in_bits: int = 0
    bits: bytearray | None = None

    def __post_init__(self) -> None:
        if self.size_in_bits < 0:
            raise ValueError(f"size_in_bits must be non-negative, got {self.size_in_bits}")
        if not 0 <= self.offset_in_bits < 8:
            raise ValueError(f"offset_in_bits must be in [0, 8), got {self.offset_in_bits}")
        needed = (self.offset_in_bits + self.size_in_bits + 7) // 8
        if self.bits is None:
            self.bits = bytearray(needed)
        else:
            self.bits = bytearray(self.bits)
            if len(self.bits) < needed:
                raise ValueError(
                    f"{len(self.bits)} byte(s) cannot hold {self.size_in_bits} bits "
                    f"at offset {self.offset_in_bits}"
                )

    @property
    def num_bytes(self) -> int:
        """Number of bytes held in ``bits``."""
        return len(self.bits)

    @property
    def value(self) -> int:
        """The bits as an unsigned integer."""
        total = len(self.bits) * 8
        raw = int.from_bytes(bytes(self.bits), "big")
        shift = total - self.offset_in_bits - self.size_in_bits
        return (raw >> shift) & ((1 << self.size_in_bits) - 1)

    def copy(self) -> BitValue:
        """Return an independent copy of this value."""
        return BitValue(self.size_in_bits, self.offset_in_bits, bytearray(self.bits))