# ptcore

Building blocks for traceroute-style network probing, in plain Python with
no third-party runtime dependencies.

## What is inside

- `ptcore.bits` – byte masks (`byte_make_mask`), bit extraction
  (`byte_extract`, `bits_extract`), bit writing (`byte_write_bits`,
  `bits_write`) and a compact hex/bit renderer (`format_bits`,
  `bits_fprintf`, `bits_dump`, `byte_dump`). Bit 0 is the most significant
  bit of a byte.
- `ptcore.fieldtype` – `FieldType`, the kinds of value a field can hold,
  `type_size` for their size in bytes, and `BitValue` for values that are
  not a whole number of bytes.
- `ptcore.field` – `Field`, a typed value with a key, and constructors such
  as `uint8`, `uint16`, `uint32`, `uint64`, `uint128`, `uintmax`, `double`,
  `string`, `ipv4`, `ipv6`, `address`, `bits` and `generator`; plus
  `format_value`, `value_dump` and `value_dump_hex`.
- `ptcore.generator` – `Generator`, a named sequence of values configured by
  fields, and a registry (`register_generator`, `search_generator`,
  `create_generator`). A `"uniform"` generator is registered on import: it
  starts at 1.0 and adds its `mean` field (2.0 by default) at each step.
- `ptcore.buffer` – `Buffer`, a resizable byte buffer, and `format_hex`,
  `hex_fprintf`, `hex_dump`.
- `ptcore.dynarray` – `DynArray`, a growable array with element release hooks.
- `ptcore.linkedlist` – `LinkedList`, a FIFO list with release and format hooks.
- `ptcore.objects` – `ManagedObject`, an element bundled with copy, release,
  render and compare callbacks.
- `ptcore.pair` – `Pair` and `make_pair`, ordered by first then second element.
- `ptcore.treeset` – `TreeSet` and `make_set`, an ordered set driven by a
  three-way comparison callback.
- `ptcore.treemap` – `TreeMap` and `make_map`, an ordered map built on a set
  of pairs.
- `ptcore.common` – `get_timestamp`, `indent_text`, `print_indent`.

## Installation

```
pip install .
```

## Examples

Bits:

```python
from ptcore.bits import bits_extract, format_bits

data = bytes([0b00111010, 0b11111010, 0b11000000, 0b00000000])
print(bits_extract(data, 2, 21).hex())  # 1d7d60
print(format_bits(b"\x4a\x10", 16, 0))  # 4a 10
```

Fields:

```python
from ptcore import field

ttl = field.uint8("ttl", 64)
print(ttl.size())          # 1
print(ttl.size_in_bits())  # 8
```

Generators:

```python
from ptcore import field
from ptcore.generator import create_generator

delays = create_generator("uniform")
delays.set_field(field.double("mean", 0.5))
print(delays.next_value())  # 1.5
```

Ordered map:

```python
from ptcore.treemap import TreeMap

def compare(a, b):
    return (a > b) - (a < b)

ports = TreeMap(compare)
ports.update("https", 443)
ports["http"] = 80
print(list(ports))          # [('http', 80), ('https', 443)]
print(ports.find("https"))  # 443
```

## What ptcore does not do

ptcore holds data structures and helpers only. It does not build, send or
capture packets, carries no protocol definitions, has no probing loop and
no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```