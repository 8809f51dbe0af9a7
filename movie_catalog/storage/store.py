"""
In-memory record store for the movie catalog.

The store owns a fixed-capacity list of slots. Live records always occupy
the contiguous prefix [0, count); every slot past count is empty. The list
doubles when an insert finds it full.
"""

import logging
from typing import Iterator, List, Optional

from movie_catalog.errors import IndexOutOfRangeError, OutOfMemoryError
from movie_catalog.models import Movie

logger = logging.getLogger(__name__)


DEFAULT_CAPACITY = 10


def _allocate(capacity: int) -> List[Optional[Movie]]:
    try:
        return [None] * capacity
    except MemoryError as e:
        raise OutOfMemoryError(f"Cannot allocate {capacity} record slots") from e


class RecordStore:
    """
    Slot-array owner for Movie records.

    Handles insertion with gap reuse, compacting removal, title lookup and
    ordering, and capacity doubling.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, max_capacity: Optional[int] = None):
        """
        Initialize the store.

        Args:
            capacity: Number of slots allocated up front (must be positive)
            max_capacity: Optional ceiling for growth; resizing past it fails
                with OutOfMemoryError

        Raises:
            ValueError: If capacity is not positive or exceeds max_capacity
            OutOfMemoryError: If the initial slot array cannot be allocated
        """
        if capacity < 1:
            raise ValueError("Capacity must be at least 1")
        if max_capacity is not None and capacity > max_capacity:
            raise ValueError("Capacity cannot exceed max_capacity")

        self.max_capacity = max_capacity
        self._slots = _allocate(capacity)
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Movie]:
        for i in range(self._count):
            movie = self._slots[i]
            if movie is not None:
                yield movie

    def __getitem__(self, index: int) -> Movie:
        return self.get(index)

    def __repr__(self) -> str:
        return f"<RecordStore(count={self._count}, capacity={self.capacity})>"

    def slot(self, index: int) -> Optional[Movie]:
        """
        Return the raw content of a slot, None when it is empty.

        Raises:
            IndexOutOfRangeError: If index is outside [0, capacity)
        """
        if index < 0 or index >= self.capacity:
            raise IndexOutOfRangeError(f"Slot {index} outside capacity {self.capacity}")
        return self._slots[index]

    def get(self, index: int) -> Movie:
        """
        Get the live record at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, count) or the slot is empty
        """
        if index < 0 or index >= self._count or self._slots[index] is None:
            raise IndexOutOfRangeError(f"Invalid index or movie already deleted: {index}")
        return self._slots[index]

    def resize(self) -> int:
        """
        Double the slot capacity.

        The new slot list is built before it replaces the old one, so a
        failure leaves the store untouched.

        Returns:
            The new capacity

        Raises:
            OutOfMemoryError: If the new capacity exceeds max_capacity or the
                allocation fails
        """
        new_capacity = self.capacity * 2
        if self.max_capacity is not None and new_capacity > self.max_capacity:
            raise OutOfMemoryError(
                f"Cannot grow store to {new_capacity} slots (limit {self.max_capacity})"
            )

        slots = _allocate(new_capacity)
        slots[:self.capacity] = self._slots
        self._slots = slots

        logger.debug("Record store resized to %d slots", new_capacity)
        return new_capacity

    def insert(self, movie: Movie) -> int:
        """
        Place a record into the first empty slot below count, else append it.

        Args:
            movie: Record to take ownership of

        Returns:
            Index the record was stored at

        Raises:
            OutOfMemoryError: If the store is full and cannot grow
        """
        if self._count == self.capacity:
            self.resize()

        for i in range(self._count):
            if self._slots[i] is None:
                self._slots[i] = movie
                return i

        index = self._count
        self._slots[index] = movie
        self._count += 1
        return index

    def remove_at(self, index: int) -> Movie:
        """
        Remove the record at index and close the gap.

        Every later record moves one slot to the left, the vacated tail slot
        is emptied and count drops by one.

        Returns:
            The removed record

        Raises:
            IndexOutOfRangeError: If index does not address a live record
        """
        movie = self.get(index)

        self._slots[index:self._count - 1] = self._slots[index + 1:self._count]
        self._slots[self._count - 1] = None
        self._count -= 1
        return movie

    def find_by_title(self, title: str) -> Optional[Movie]:
        """Return the first record whose title equals title exactly."""
        for movie in self:
            if movie.title == title:
                return movie
        return None

    def sort_by_title(self) -> None:
        """Order live records by title (stable, code point order)."""
        live = sorted(self._slots[:self._count], key=lambda m: m.title)
        self._slots[:self._count] = live

    def clear(self) -> None:
        """Release every record, keeping the allocated capacity."""
        for i in range(self.capacity):
            self._slots[i] = None
        self._count = 0

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()
