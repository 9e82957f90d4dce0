"""Fields: named, typed values making up parts of protocol headers or generator settings."""

from __future__ import annotations

import io
import ipaddress
import sys
from dataclasses import dataclass
from typing import Any, TextIO

from ptcore.bits import bits_write, format_bits
from ptcore.fieldtype import BitValue, FieldType, type_size

_INTEGER_WIDTHS = {
    FieldType.UINT8: 8,
    FieldType.UINT16: 16,
    FieldType.UINT32: 32,
    FieldType.UINT64: 64,
    FieldType.UINT128: 128,
    FieldType.UINTMAX: 64,
}


def _normalize(field_type: FieldType, value: Any) -> Any:
    """Check ``value`` against ``field_type`` and return it in its stored form."""
    if value is None:
        return None
    if field_type is FieldType.IPV4:
        return value if isinstance(value, ipaddress.IPv4Address) else ipaddress.IPv4Address(value)
    if field_type is FieldType.IPV6:
        return value if isinstance(value, ipaddress.IPv6Address) else ipaddress.IPv6Address(value)
    if field_type is FieldType.BITS:
        if not isinstance(value, BitValue):
            raise TypeError("a bit-level field holds a BitValue")
        return value
    width = _INTEGER_WIDTHS.get(field_type)
    if width is not None:
        if not isinstance(value, int):
            raise TypeError(f"a {field_type} field holds an integer, got {type(value).__name__}")
        if not 0 <= value < (1 << width):
            raise ValueError(f"{value} does not fit in {field_type}")
        return value
    if field_type is FieldType.DOUBLE:
        if not isinstance(value, (int, float)):
            raise TypeError(f"a double field holds a number, got {type(value).__name__}")
        return float(value)
    if field_type is FieldType.STRING:
        if not isinstance(value, str):
            raise TypeError(f"a string field holds a str, got {type(value).__name__}")
        return value
    if field_type is FieldType.GENERATOR:
        return value
    raise ValueError(f"type not supported: {field_type!r}")


@dataclass
class Field:
    """A value of a given type identified by ``key``."""

    key: str
    type: FieldType
    value: Any = None

    def __post_init__(self) -> None:
        self.value = _normalize(self.type, self.value)

    def copy(self) -> Field:
        """Return a copy of this field; strings, generators and bits are copied too."""
        if self.type is FieldType.BITS:
            value = self.value.copy() if self.value is not None else None
            return Field(self.key, self.type, value)
        return create_field(self.type, self.key, self.value)

    def release(self) -> None:
        """Release the value held, releasing a generator if there is one."""
        value, self.value = self.value, None
        if self.type is FieldType.GENERATOR and value is not None:
            value.release()

    def set_value(self, value: Any) -> None:
        """Replace the value held.

        For a bit-level field, ``value`` is a byte sequence whose leading
        bits are written into the field.
        """
        if value is None:
            raise TypeError("cannot set a field to None")
        if self.type is FieldType.BITS:
            if self.value is None:
                raise ValueError(f"bit-level field '{self.key}' has no storage")
            bits_write(
                self.value.bits,
                self.value.offset_in_bits,
                value,
                0,
                self.value.size_in_bits,
            )
            return
        self.value = _normalize(self.type, value)

    def matches(self, other: Field | None) -> bool:
        """Return whether ``other`` has the same key and type."""
        return other is not None and self.type is other.type and self.key == other.key

    def size(self) -> int:
        """Return the size in bytes of the value; bit-level fields raise ``ValueError``."""
        if self.type is FieldType.BITS:
            raise ValueError("bit-level fields have no byte size: use size_in_bits instead")
        return type_size(self.type)

    def size_in_bits(self) -> int:
        """Return the size in bits of the value."""
        if self.type is FieldType.BITS:
            return self.value.size_in_bits
        return 8 * self.size()

    def dump(self, out: TextIO | None = None) -> None:
        """Write ``Field <key>`` to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(f"Field {self.key}")


def create_field(field_type: FieldType, key: str, value: Any = None) -> Field:
    """Create a field of ``field_type``; a generator value is copied.

    Bit-level fields must be built with :func:`bits`.
    """
    if field_type is FieldType.BITS:
        raise ValueError("invalid field type (bits): use bits() instead")
    if field_type is FieldType.GENERATOR and value is not None:
        value = value.copy()
    return Field(key, field_type, value)


def address(key: str, value: ipaddress.IPv4Address | ipaddress.IPv6Address) -> Field:
    """Create an IPv4 or IPv6 field according to the family of ``value``."""
    if isinstance(value, ipaddress.IPv4Address):
        return ipv4(key, value)
    if isinstance(value, ipaddress.IPv6Address):
        return ipv6(key, value)
    raise ValueError(f"invalid address family: {value!r}")


def ipv4(key: str, value: Any) -> Field:
    """Create an IPv4 address field."""
    return create_field(FieldType.IPV4, key, value)


def ipv6(key: str, value: Any) -> Field:
    """Create an IPv6 address field."""
    return create_field(FieldType.IPV6, key, value)


def bits(key: str, value: bytes | bytearray, offset_in_bits: int, size_in_bits: int) -> Field:
    """Create a bit-level field from ``size_in_bits`` bits of ``value`` at ``offset_in_bits``.

    The bits are stored right-aligned in the smallest whole number of bytes.
    """
    num_bytes = (size_in_bits + 7) // 8
    stored = BitValue(size_in_bits, 8 * num_bytes - size_in_bits)
    bits_write(stored.bits, stored.offset_in_bits, value, offset_in_bits, size_in_bits)
    return Field(key, FieldType.BITS, stored)


def uint8(key: str, value: int) -> Field:
    """Create an 8-bit unsigned integer field."""
    return create_field(FieldType.UINT8, key, value)


def uint16(key: str, value: int) -> Field:
    """Create a 16-bit unsigned integer field."""
    return create_field(FieldType.UINT16, key, value)


def uint32(key: str, value: int) -> Field:
    """Create a 32-bit unsigned integer field."""
    return create_field(FieldType.UINT32, key, value)


def uint64(key: str, value: int) -> Field:
    """Create a 64-bit unsigned integer field."""
    return create_field(FieldType.UINT64, key, value)


def uint128(key: str, value: int) -> Field:
    """Create a 128-bit unsigned integer field."""
    return create_field(FieldType.UINT128, key, value)


def uintmax(key: str, value: int) -> Field:
    """Create a field holding the widest unsigned integer."""
    return create_field(FieldType.UINTMAX, key, value)


def double(key: str, value: float) -> Field:
    """Create a floating-point field."""
    return create_field(FieldType.DOUBLE, key, value)


def string(key: str, value: str) -> Field:
    """Create a string field."""
    return create_field(FieldType.STRING, key, value)


def generator(key: str, value: Any) -> Field:
    """Create a field holding a copy of a generator."""
    return create_field(FieldType.GENERATOR, key, value)


def format_value(value: Any, field_type: FieldType) -> str:
    """Render a value of ``field_type`` as text.

    Bit-level and 128-bit values cannot be rendered this way and raise ``ValueError``.
    """
    if field_type in (FieldType.IPV4, FieldType.IPV6):
        return str(value)
    if field_type in (
        FieldType.UINT8,
        FieldType.UINT16,
        FieldType.UINT32,
        FieldType.UINT64,
        FieldType.UINTMAX,
    ):
        return str(value)
    if field_type is FieldType.DOUBLE:
        return f"{value:f}"
    if field_type is FieldType.STRING:
        return value
    if field_type is FieldType.GENERATOR:
        buffer = io.StringIO()
        value.dump(buffer)
        return buffer.getvalue()
    if field_type is FieldType.BITS:
        raise ValueError("type not supported (bits): use value_dump_hex instead")
    raise ValueError(f"type not supported ({field_type})")


def value_dump(value: Any, field_type: FieldType, out: TextIO | None = None) -> None:
    """Write the rendering of :func:`format_value` to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(format_value(value, field_type))


def value_dump_hex(
    data: bytes | bytearray,
    num_bytes: int,
    offset_in_bits: int = 0,
    out: TextIO | None = None,
) -> None:
    """Write ``num_bytes`` bytes of ``data`` in hexadecimal to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(format_bits(data, num_bytes * 8, offset_in_bits))