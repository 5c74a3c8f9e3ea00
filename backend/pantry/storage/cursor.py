"""
Iteration handle over a keyed container that allows removing the current item.
"""
from typing import Iterator, Optional, TypeVar

V = TypeVar("V")


class RemovableCursor(Iterator[V]):
    """
    Walks the keys present when iteration started and yields their live values.
    remove() drops the item most recently yielded. Any other mutation of the
    backing dict while a cursor is open is undefined.
    """

    def __init__(self, items: dict[str, V]):
        self._items = items
        self._keys = iter(list(items))
        self._current: Optional[str] = None

    def __iter__(self) -> "RemovableCursor[V]":
        return self

    def __next__(self) -> V:
        for key in self._keys:
            if key in self._items:
                self._current = key
                return self._items[key]
        self._current = None
        raise StopIteration

    def remove(self) -> V:
        if self._current is None:
            raise RuntimeError("remove() called before next() or twice for the same item")
        key, self._current = self._current, None
        return self._items.pop(key)
