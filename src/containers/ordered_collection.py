"""
Ordered collection.

Growable array with amortized O(1) append, indexed access, in-place
ascending sort and binary-search lookup.
"""

import logging
from bisect import bisect_left
from typing import Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

import config.settings as settings
from src.errors import AllocationFailure, IndexOutOfRange

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _binary_search(items: Sequence, item, size: int) -> Optional[int]:
    """Return an index of `item` in the sorted prefix items[:size], or None."""
    position = bisect_left(items, item, 0, size)
    if position < size and items[position] == item:
        return position
    return None


class OrderedCollection(Generic[T]):
    """
    Dynamically growing array.

    Storage is a fixed block of slots that doubles when full. Only the
    first `size()` slots hold elements.

    lookup() assumes the contents are sorted: call sort_ascending() after
    the last append. On unsorted data lookup() returns wrong answers; it
    does not raise. Prefer the SortedView returned by sort_ascending(),
    which cannot be queried before sorting.
    """

    def __init__(self, initial_capacity: int = settings.INITIAL_CAPACITY):
        """
        Initialize an empty collection.

        Args:
            initial_capacity: Number of slots to reserve up front

        Raises:
            ValueError: If initial_capacity is not positive
        """
        if initial_capacity <= 0:
            raise ValueError("Capacity must be greater than 0")

        self._slots: List[Optional[T]] = [None] * initial_capacity
        self._size = 0

    @classmethod
    def from_iterable(
        cls,
        items: Iterable[T],
        initial_capacity: int = settings.INITIAL_CAPACITY
    ) -> "OrderedCollection[T]":
        """Build a collection by appending every item in order."""
        collection = cls(initial_capacity)
        for item in items:
            collection.append(item)
        return collection

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _grow(self) -> None:
        """Double the storage, keeping existing elements in place."""
        new_capacity = self.capacity * 2
        try:
            new_slots: List[Optional[T]] = [None] * new_capacity
        except MemoryError as e:
            raise AllocationFailure(
                f"Cannot grow collection from {self.capacity} to {new_capacity} slots"
            ) from e

        new_slots[:self._size] = self._slots[:self._size]
        self._slots = new_slots
        logger.debug(f"Grew collection to capacity={new_capacity}")

    def append(self, item: T) -> None:
        """Add an element at the end."""
        if self._size == self.capacity:
            self._grow()
        self._slots[self._size] = item
        self._size += 1

    def get(self, index: int) -> T:
        """
        Get an element by position.

        Raises:
            IndexOutOfRange: If index < 0 or index >= size()
        """
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(index, self._size)
        return self._slots[index]

    def size(self) -> int:
        return self._size

    def sort_ascending(self) -> "SortedView[T]":
        """
        Sort the elements in place, ascending.

        Sorting an already sorted collection leaves it unchanged.

        Returns:
            SortedView over the sorted contents
        """
        self._slots[:self._size] = sorted(self._slots[:self._size])
        return SortedView(self._slots[:self._size])

    def lookup(self, item: T) -> Optional[int]:
        """
        Binary search for `item`.

        Requires sort_ascending() since the last append. With duplicates,
        any matching index may be returned.

        Returns:
            Index of a matching element, or None if not found
        """
        return _binary_search(self._slots, item, self._size)

    def to_list(self) -> List[T]:
        return list(self._slots[:self._size])

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._slots[index]

    def __repr__(self) -> str:
        return f"OrderedCollection(size={self._size}, capacity={self.capacity})"


class SortedView(Generic[T]):
    """
    Frozen, ascending snapshot of an OrderedCollection.

    Normally produced by OrderedCollection.sort_ascending(). The items are
    sorted on construction, so a view is always ordered. Appends made to
    the source collection afterwards are not visible here.
    """

    def __init__(self, items: Sequence[T]):
        self._items = tuple(sorted(items))

    def lookup(self, item: T) -> Optional[int]:
        """Return an index of `item`, or None if not present."""
        return _binary_search(self._items, item, len(self._items))

    def get(self, index: int) -> T:
        """
        Raises:
            IndexOutOfRange: If index < 0 or index >= size()
        """
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        return self._items[index]

    def size(self) -> int:
        return len(self._items)

    def __contains__(self, item: T) -> bool:
        return self.lookup(item) is not None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SortedView(size={len(self._items)})"
