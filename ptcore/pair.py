"""A pair of managed objects, ordered by first then second element."""

from __future__ import annotations

import sys
from typing import Any

from ptcore.objects import ManagedObject


class Pair:
    """Two managed objects. The constructor stores copies of both."""

    def __init__(self, first: ManagedObject, second: ManagedObject) -> None:
        self.first = first.copy()
        self.second = second.copy()

    @classmethod
    def _from_objects(cls, first: ManagedObject, second: ManagedObject) -> Pair:
        pair = cls.__new__(cls)
        pair.first = first
        pair.second = second
        return pair

    def __repr__(self) -> str:
        return f"Pair({self.first.element!r}, {self.second.element!r})"

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"

    def copy(self) -> Pair:
        """Return a copy of this pair, both elements copied."""
        return Pair(self.first, self.second)

    def release(self) -> None:
        """Release both elements."""
        self.first.release()
        self.second.release()

    def compare(self, other: Pair) -> int:
        """Compare first elements, then second elements if the first are equal."""
        result = self.first.compare(other.first)
        if result == 0:
            result = self.second.compare(other.second)
        return result

    def dump(self) -> None:
        """Write the pair as ``(first, second)`` to standard output."""
        sys.stdout.write(str(self))


def make_pair(dummy_pair: Pair, first: Any, second: Any) -> Pair:
    """Build a pair of ``first`` and ``second`` using the callbacks of ``dummy_pair``."""
    return Pair._from_objects(dummy_pair.first.make(first), dummy_pair.second.make(second))