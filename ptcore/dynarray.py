"""A dynamic array of arbitrary elements with explicit element release hooks."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO


class DynArray:
    """An ordered, growable collection of elements."""

    def __init__(self, elements: list[Any] | None = None) -> None:
        self._elements: list[Any] = list(elements) if elements is not None else []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, i: int) -> Any:
        return self._elements[i]

    def __repr__(self) -> str:
        return f"DynArray({self._elements!r})"

    def copy(self, element_dup: Callable[[Any], Any] | None = None) -> DynArray:
        """Return a new array; each element passes through ``element_dup`` if given."""
        if element_dup is None:
            return DynArray(self._elements)
        return DynArray([element_dup(element) for element in self._elements])

    def push(self, element: Any) -> None:
        """Append ``element`` at the end."""
        self._elements.append(element)

    def delete(
        self,
        i: int,
        n: int = 1,
        element_free: Callable[[Any], None] | None = None,
    ) -> None:
        """Remove ``n`` elements starting at index ``i``.

        ``element_free`` is called on each removed element. Raises
        ``IndexError`` if the range does not lie within the array.
        """
        if i < 0 or n < 0 or i + n > len(self._elements):
            raise IndexError(
                f"cannot delete {n} element(s) at {i} from an array of {len(self._elements)}"
            )
        removed = self._elements[i:i + n]
        if element_free is not None:
            for element in removed:
                element_free(element)
        del self._elements[i:i + n]

    def clear(self, element_free: Callable[[Any], None] | None = None) -> None:
        """Remove every element, calling ``element_free`` on each if given."""
        if element_free is not None:
            for element in self._elements:
                element_free(element)
        self._elements.clear()

    def get(self, i: int) -> Any:
        """Return the element at ``i``, or ``None`` if ``i`` is out of range."""
        if 0 <= i < len(self._elements):
            return self._elements[i]
        return None

    def set(self, i: int, element: Any) -> None:
        """Store ``element`` at index ``i``; index ``len(self)`` appends.

        Raises ``IndexError`` beyond that.
        """
        if i < 0 or i > len(self._elements):
            raise IndexError(f"index {i} out of range for an array of {len(self._elements)}")
        if i == len(self._elements):
            self._elements.append(element)
        else:
            self._elements[i] = element

    def release(self, element_free: Callable[[Any], None] | None = None) -> None:
        """Empty the array, calling ``element_free`` on each element that is not ``None``."""
        if element_free is not None:
            for element in self._elements:
                if element is not None:
                    element_free(element)
        self._elements.clear()

    def format(self, element_format: Callable[[Any], str] = str) -> str:
        """Render the array as ``[ a, b, c ]`` using ``element_format`` for each element."""
        return "[ " + ", ".join(element_format(element) for element in self._elements) + " ]"

    def dump(
        self,
        element_format: Callable[[Any], str] = str,
        out: TextIO | None = None,
    ) -> None:
        """Write the rendering of :meth:`format` to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.format(element_format))