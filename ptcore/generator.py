"""Generators: named objects producing a sequence of values, configured by fields."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from ptcore.field import Field, double


class Generator:
    """A sequence of values.

    Each call to :meth:`next_value` adds ``get_next_value(self)`` to the
    current ``value``. ``fields`` hold the generator's settings.
    """

    def __init__(
        self,
        name: str,
        get_next_value: Callable[[Generator], float],
        fields: list[Field] | None = None,
        value: float = 0.0,
    ) -> None:
        self.name = name
        self.get_next_value = get_next_value
        self.fields: list[Field] = list(fields) if fields is not None else []
        self.value = float(value)

    def __repr__(self) -> str:
        return f"Generator({self.name!r}, value={self.value!r})"

    @property
    def num_fields(self) -> int:
        """Number of fields embedded in the generator."""
        return len(self.fields)

    def copy(self) -> Generator:
        """Return a copy of this generator with its own copies of the fields."""
        return Generator(
            self.name,
            self.get_next_value,
            [field.copy() for field in self.fields],
            self.value,
        )

    def release(self) -> None:
        """Release every field and drop them."""
        for field in self.fields:
            field.release()
        self.fields.clear()

    def set_field(self, field: Field) -> None:
        """Set the value of the field with the same key and type as ``field``.

        Raises ``KeyError`` if the generator has no such field.
        """
        for current in self.fields:
            if current.matches(field):
                current.set_value(field.value)
                return
        raise KeyError(f"generator '{self.name}' has no {field.type} field '{field.key}'")

    def get_field(self, key: str) -> Field:
        """Return the field named ``key``; raise ``KeyError`` if there is none."""
        for field in self.fields:
            if field.key == key:
                return field
        raise KeyError(f"generator '{self.name}' has no field '{key}'")

    def extract_value(self, key: str):
        """Return the value of the field named ``key``."""
        return self.get_field(key).value

    def next_value(self) -> float:
        """Advance the generator and return its new current value."""
        self.value += self.get_next_value(self)
        return self.value

    def dump(self, out: TextIO | None = None) -> None:
        """Write the generator name and its fields to ``out`` (standard output by default)."""
        stream = out if out is not None else sys.stdout
        stream.write(f"*** GENERATOR : {self.name} ***\n")
        for field in self.fields:
            stream.write(f"\t{field.key} : ")
            field.dump(stream)
            stream.write("\n")


_REGISTRY: dict[str, Generator] = {}


def register_generator(generator: Generator) -> None:
    """Register a generator under its name unless that name is already taken."""
    _REGISTRY.setdefault(generator.name, generator)


def search_generator(name: str | None) -> Generator | None:
    """Return the registered generator called ``name``, or ``None``."""
    if name is None:
        return None
    return _REGISTRY.get(name)


def create_generator(name: str) -> Generator:
    """Return a fresh copy of the registered generator called ``name``.

    Raises ``KeyError`` if no such generator is registered.
    """
    template = search_generator(name)
    if template is None:
        raise KeyError(f"Unknown generator {name}")
    return template.copy()


def _uniform_next_value(generator: Generator) -> float:
    return generator.extract_value("mean")


register_generator(
    Generator("uniform", _uniform_next_value, [double("mean", 2.0)], value=1.0)
)