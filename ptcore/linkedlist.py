"""A singly linked list of homogeneous elements with release and format hooks."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Callable, Iterable, Iterator, TextIO

ElementFree = Callable[[Any], None]
ElementFormat = Callable[[Any], str]


class LinkedList:
    """A FIFO list: elements are pushed at the tail and popped from the head.

    ``element_free`` is called on each element when the list is released.
    ``element_format`` renders one element as text; without it the list
    renders as an empty string.
    """

    def __init__(
        self,
        element_free: ElementFree | None = None,
        element_format: ElementFormat | None = None,
        elements: Iterable[Any] = (),
    ) -> None:
        self.element_free = element_free
        self.element_format = element_format
        self._cells: deque[Any] = deque(elements)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._cells)!r})"

    @property
    def head(self) -> Any:
        """The first element, or ``None`` if the list is empty."""
        return self._cells[0] if self._cells else None

    @property
    def tail(self) -> Any:
        """The last element, or ``None`` if the list is empty."""
        return self._cells[-1] if self._cells else None

    def push(self, element: Any) -> None:
        """Append ``element`` at the tail."""
        self._cells.append(element)

    def pop(self, element_free: ElementFree | None = None) -> Any:
        """Remove and return the head element.

        ``element_free`` is called on the removed element if given.
        Raises ``IndexError`` if the list is empty.
        """
        if not self._cells:
            raise IndexError("pop from an empty list")
        element = self._cells.popleft()
        if element_free is not None:
            element_free(element)
        return element

    def release(self) -> None:
        """Empty the list, calling ``element_free`` on each element if set."""
        if self.element_free is not None:
            for element in self._cells:
                self.element_free(element)
        self._cells.clear()

    def format(self) -> str:
        """Render the list as ``[ a b c ]``, or ``""`` without an element formatter."""
        if self.element_format is None:
            return ""
        return "[" + "".join(" " + self.element_format(e) for e in self._cells) + " ]"

    def fprintf(self, out: TextIO) -> None:
        """Write the rendering of :meth:`format` to ``out``."""
        out.write(self.format())

    def dump(self) -> None:
        """Write the rendering of :meth:`format` to standard output."""
        self.fprintf(sys.stdout)