"""An element bundled with the callbacks used to copy, release, render and compare it."""

from __future__ import annotations

import sys
from typing import Any, Callable

ElementDup = Callable[[Any], Any]
ElementFree = Callable[[Any], None]
ElementDump = Callable[[Any], str]
ElementCompare = Callable[[Any, Any], int]


class ManagedObject:
    """An element together with its management callbacks.

    ``element_dup`` copies an element, ``element_free`` releases one,
    ``element_dump`` renders one as text and ``element_compare`` returns a
    negative, zero or positive number like a three-way comparison. An
    element handed to the constructor is copied through ``element_dup``
    when that callback is set.
    """

    def __init__(
        self,
        element: Any = None,
        element_dup: ElementDup | None = None,
        element_free: ElementFree | None = None,
        element_dump: ElementDump | None = None,
        element_compare: ElementCompare | None = None,
    ) -> None:
        self.element_dup = element_dup
        self.element_free = element_free
        self.element_dump = element_dump
        self.element_compare = element_compare
        if element is not None and element_dup is not None:
            element = element_dup(element)
        self.element = element

    def __repr__(self) -> str:
        return f"ManagedObject({self.element!r})"

    def __str__(self) -> str:
        if self.element_dump is None:
            return "?"
        return self.element_dump(self.element)

    def make(self, element: Any) -> ManagedObject:
        """Return a new object holding ``element`` with the same callbacks."""
        return ManagedObject(
            element,
            self.element_dup,
            self.element_free,
            self.element_dump,
            self.element_compare,
        )

    def copy(self) -> ManagedObject:
        """Return a copy of this object, its element copied through ``element_dup``."""
        return self.make(self.element)

    def release(self) -> None:
        """Release the element through ``element_free``, at most once."""
        if self.element_free is not None and self.element is not None:
            element, self.element = self.element, None
            self.element_free(element)

    def compare(self, other: ManagedObject) -> int:
        """Compare the elements of two objects sharing the same comparison callback."""
        if self.element_compare is None:
            raise TypeError("object has no comparison callback")
        if other.element_compare != self.element_compare:
            raise ValueError("objects use different comparison callbacks")
        return self.element_compare(self.element, other.element)

    def dump(self) -> None:
        """Write the rendering of the element to standard output."""
        if self.element_dump is None:
            raise TypeError("object has no dump callback")
        sys.stdout.write(self.element_dump(self.element))