"""Lazy enumeration of threshold-sized subsets."""
from __future__ import annotations

import itertools
import math
from typing import Generic, Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


class SubsetEnumerator(Generic[T]):
    """Restartable iterable over every ``size``-combination of ``items``.

    Combinations are produced lazily in lexicographic order of the input
    positions; iterating again starts over from the first combination.
    """

    __slots__ = ("_items", "_size")

    def __init__(self, items: Sequence[T], size: int) -> None:
        if size < 0:
            raise ValueError(f"Subset size must be non-negative, got {size}")
        self._items: Tuple[T, ...] = tuple(items)
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return math.comb(len(self._items), self._size)

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        for indices in self.index_combinations():
            yield tuple(self._items[index] for index in indices)

    def index_combinations(self) -> Iterator[Tuple[int, ...]]:
        return itertools.combinations(range(len(self._items)), self._size)


__all__ = ["SubsetEnumerator"]
