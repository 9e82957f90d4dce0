"""An ordered map from keys to data, built on an ordered set of pairs."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from ptcore.objects import ElementCompare, ElementDump, ElementDup, ElementFree, ManagedObject
from ptcore.pair import Pair, make_pair
from ptcore.treeset import TreeSet


def _pair_compare(pair1: Pair, pair2: Pair) -> int:
    return pair1.first.compare(pair2.first)


def _pair_format(pair: Pair) -> str:
    return str(pair)


def _pair_copy(pair: Pair) -> Pair:
    return pair.copy()


def _pair_release(pair: Pair) -> None:
    pair.release()


class TreeMap:
    """A map whose keys are ordered by ``key_compare``.

    Two keys are the same when ``key_compare`` returns zero. Keys and data
    are copied through ``key_dup`` and ``data_dup`` when those are set,
    and released through ``key_free`` and ``data_free`` when they leave
    the map.
    """

    def __init__(
        self,
        key_compare: ElementCompare | None,
        key_dup: ElementDup | None = None,
        key_free: ElementFree | None = None,
        key_dump: ElementDump | None = None,
        data_dup: ElementDup | None = None,
        data_free: ElementFree | None = None,
        data_dump: ElementDump | None = None,
    ) -> None:
        if key_compare is None:
            raise ValueError("a map needs a key comparison callback")
        dummy_key = ManagedObject(None, key_dup, key_free, key_dump, key_compare)
        dummy_data = ManagedObject(None, data_dup, data_free, data_dump, None)
        self._dummy_pair = Pair(dummy_key, dummy_data)
        self._set = TreeSet(_pair_compare, _pair_copy, _pair_release, _pair_format)

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, data)`` tuples in key order."""
        for pair in self._set:
            yield pair.first.element, pair.second.element

    def __contains__(self, key: Any) -> bool:
        probe = make_pair(self._dummy_pair, key, None)
        try:
            return self._set.find(probe) is not None
        finally:
            probe.release()

    def __getitem__(self, key: Any) -> Any:
        return self.find(key)

    def __setitem__(self, key: Any, data: Any) -> None:
        self.update(key, data)

    def __repr__(self) -> str:
        return f"TreeMap({list(self)!r})"

    def update(self, key: Any, data: Any) -> None:
        """Bind ``data`` to ``key``, replacing and releasing any previous data."""
        pair = make_pair(self._dummy_pair, key, data)
        if not self._set.insert(pair):
            stored = self._set.find(pair)
            stored.second, pair.second = pair.second, stored.second
        pair.release()

    def find(self, key: Any) -> Any:
        """Return the data bound to ``key``; raise ``KeyError`` if there is none."""
        probe = make_pair(self._dummy_pair, key, None)
        try:
            stored = self._set.find(probe)
        finally:
            probe.release()
        if stored is None:
            raise KeyError(key)
        return stored.second.element

    def release(self) -> None:
        """Empty the map, releasing every key and data."""
        self._set.release()

    def format(self) -> str:
        """Render the map as ``{ (k1, d1) (k2, d2) }``."""
        return self._set.format()

    def dump(self) -> None:
        """Write the rendering of :meth:`format` to standard output."""
        sys.stdout.write(self.format())


def make_map(dummy_key: ManagedObject, dummy_data: ManagedObject) -> TreeMap:
    """Create an empty map managed by the callbacks of ``dummy_key`` and ``dummy_data``."""
    if dummy_key.element_compare is None:
        raise ValueError("a map needs a key comparison callback")
    return TreeMap(
        dummy_key.element_compare,
        dummy_key.element_dup,
        dummy_key.element_free,
        dummy_key.element_dump,
        dummy_data.element_dup,
        dummy_data.element_free,
        dummy_data.element_dump,
    )