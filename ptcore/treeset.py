"""An ordered set whose ordering and element management come from callbacks."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from ptcore.objects import ElementCompare, ElementDump, ElementDup, ElementFree, ManagedObject


class TreeSet:
    """A set of elements kept in the order given by ``element_compare``.

    Two elements are the same when ``element_compare`` returns zero.
    Inserted elements are copied through ``element_dup`` when it is set;
    otherwise the set holds references. ``element_free`` is called on
    elements leaving the set.
    """

    def __init__(
        self,
        element_compare: ElementCompare | None,
        element_dup: ElementDup | None = None,
        element_free: ElementFree | None = None,
        element_dump: ElementDump | None = None,
    ) -> None:
        if element_compare is None:
            raise ValueError("a set needs a comparison callback")
        self.dummy_element = ManagedObject(
            None, element_dup, element_free, element_dump, element_compare
        )
        self._elements: list[Any] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __contains__(self, element: Any) -> bool:
        return self._locate(element)[1]

    def __repr__(self) -> str:
        return f"TreeSet({self._elements!r})"

    def _locate(self, element: Any) -> tuple[int, bool]:
        compare = self.dummy_element.element_compare
        low, high = 0, len(self._elements)
        while low < high:
            middle = (low + high) // 2
            result = compare(self._elements[middle], element)
            if result < 0:
                low = middle + 1
            elif result > 0:
                high = middle
            else:
                return middle, True
        return low, False

    def insert(self, element: Any) -> bool:
        """Add a copy of ``element`` unless an equal one is present.

        Returns ``True`` if it was added, ``False`` if already present.
        """
        dup = self.dummy_element.element_dup
        stored = dup(element) if dup is not None else element
        index, found = self._locate(stored)
        if found:
            free = self.dummy_element.element_free
            if dup is not None and free is not None:
                free(stored)
            return False
        self._elements.insert(index, stored)
        return True

    def find(self, element: Any) -> Any:
        """Return the stored element equal to ``element``, or ``None``."""
        index, found = self._locate(element)
        return self._elements[index] if found else None

    def erase(self, element: Any) -> bool:
        """Remove and release the element equal to ``element``; return whether one was removed."""
        index, found = self._locate(element)
        if not found:
            return False
        removed = self._elements.pop(index)
        free = self.dummy_element.element_free
        if free is not None:
            free(removed)
        return True

    def release(self) -> None:
        """Empty the set, releasing every element."""
        free = self.dummy_element.element_free
        if free is not None:
            for element in self._elements:
                free(element)
        self._elements.clear()

    def format(self) -> str:
        """Render the set as ``{ a b c }``; elements without a renderer show as ``?``."""
        dump = self.dummy_element.element_dump
        parts = (" " + (dump(e) if dump is not None else "?") for e in self._elements)
        return "{" + "".join(parts) + " }"

    def dump(self) -> None:
        """Write the rendering of :meth:`format` to standard output."""
        sys.stdout.write(self.format())


def make_set(dummy_element: ManagedObject) -> TreeSet:
    """Create an empty set managed by the callbacks of ``dummy_element``."""
    if dummy_element.element_compare is None:
        raise ValueError("a set needs a comparison callback")
    tree_set = TreeSet(
        dummy_element.element_compare,
        dummy_element.element_dup,
        dummy_element.element_free,
        dummy_element.element_dump,
    )
    tree_set.dummy_element = dummy_element.copy()
    return tree_set