"""Random-order supply of catalog items without immediate repeats."""

from __future__ import annotations

import random
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BoundedRandomPool(Generic[T]):
    """A shuffled deck that reshuffles itself when empty.

    Items are returned in random order until the deck is exhausted, then the
    original item set is reshuffled. The first item after a reshuffle is never
    the last item before it (unless the pool holds a single item), so two
    consecutive pops never return the same item.

    ``len()`` and ``is_empty()`` describe the fixed source set, not how many
    draws remain before the next reshuffle.

    Example:
        >>> pool = BoundedRandomPool(["sled push", "bike sprint"], rng=random.Random(7))
        >>> first, second = pool.pop(), pool.pop()
        >>> first != second
        True
    """

    def __init__(self, items: Iterable[T], rng: random.Random | None = None):
        unique: list[T] = []
        for item in items:
            if item not in unique:
                unique.append(item)
        self._items: tuple[T, ...] = tuple(unique)
        self._rng = rng or random.Random()
        self._order: list[int] = []
        self._last_index: int | None = None
        self._reshuffle()

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def pop(self) -> T | None:
        """Return the next item, or ``None`` if the pool has no source items."""
        if not self._items:
            return None
        if not self._order:
            self._reshuffle()
        index = self._order.pop()
        self._last_index = index
        return self._items[index]

    def pop_where(self, predicate: Callable[[T], bool]) -> T | None:
        """Pop until an item satisfies ``predicate``.

        Any window of ``2 * len(self) - 1`` consecutive pops contains a full
        shuffled order, so every item is considered before giving up. Items
        that fail the predicate are consumed. Returns ``None`` if no source
        item satisfies it.
        """
        for _ in range(2 * len(self._items)):
            item = self.pop()
            if item is not None and predicate(item):
                return item
        return None

    def _reshuffle(self) -> None:
        # Pops come off the end of the order list
        self._order = list(range(len(self._items)))
        self._rng.shuffle(self._order)
        if self._last_index is not None and len(self._order) > 1:
            if self._order[-1] == self._last_index:
                self._order[0], self._order[-1] = self._order[-1], self._order[0]
