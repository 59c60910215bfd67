import logging
import sys
from copy import deepcopy
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

from ordering import OrderingPolicy
from random_choice import RandomChoice

T = TypeVar('T')

logger = logging.getLogger(__name__)

# Hints beyond this only size the buffer lazily, as inserts arrive.
PREALLOCATE_LIMIT = 1 << 16


def _parent_of(index: int) -> int:
    return (index - 1) // 2


def _children_of(index: int) -> tuple:
    return 2 * index + 1, 2 * index + 2


class BinaryHeap(Generic[T]):
    """Array-backed binary heap ordered as a min-heap or a max-heap.

    The buffer may be longer than the live region: slots freed by
    ``extract_top`` are cleared and reused by later inserts.
    """

    def __init__(
        self,
        ordering: OrderingPolicy = OrderingPolicy.MIN_ON_TOP,
        capacity: int = 0,
        chooser: Optional[RandomChoice] = None,
    ) -> None:
        if (
            not isinstance(capacity, int)
            or isinstance(capacity, bool)
            or capacity < 0
            or capacity > sys.maxsize
        ):
            raise ValueError("capacity must be a non-negative integer")
        self._ordering = ordering
        self._chooser = chooser if chooser is not None else RandomChoice()
        self._capacity_hint = capacity
        self._data: List[Optional[T]] = [None] * min(capacity, PREALLOCATE_LIMIT)
        self._size = 0
        logger.debug("created %r heap with capacity hint %d", ordering, capacity)

    @classmethod
    def new_min(cls, capacity: int = 0, chooser: Optional[RandomChoice] = None) -> 'BinaryHeap[T]':
        return cls(OrderingPolicy.MIN_ON_TOP, capacity, chooser)

    @classmethod
    def new_max(cls, capacity: int = 0, chooser: Optional[RandomChoice] = None) -> 'BinaryHeap[T]':
        return cls(OrderingPolicy.MAX_ON_TOP, capacity, chooser)

    @property
    def ordering(self) -> OrderingPolicy:
        return self._ordering

    def insert(self, value: T) -> None:
        if self._size == len(self._data):
            if self._capacity_hint and self._size == self._capacity_hint:
                logger.debug("growing past capacity hint %d", self._capacity_hint)
            self._data.append(value)
        else:
            self._data[self._size] = value
        self._size += 1
        self._sift_up(self._size - 1)

    def insert_all(self, values: Iterable[T]) -> None:
        for value in values:
            self.insert(value)

    def find_top(self) -> Optional[T]:
        if self._size == 0:
            return None
        return self._data[0]

    def extract_top(self) -> Optional[T]:
        if self._size == 0:
            return None
        result = self._data[0]
        self._size -= 1
        self._data[0] = self._data[self._size]
        self._data[self._size] = None
        if self._size > 0:
            self._sift_down(0)
        return result

    peek = find_top
    pop = extract_top

    def occurrence_of(self, value: Optional[T]) -> int:
        """Count live elements equal to ``value``.

        ``None`` counts as zero so the result of ``find_top`` on an empty
        heap can be passed straight through.
        """
        if value is None:
            return 0
        return sum(1 for element in self if element == value)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._data)

    def copy(self) -> 'BinaryHeap[T]':
        """Independent heap holding the live elements and a snapshot of the chooser."""
        clone: BinaryHeap[T] = BinaryHeap(self._ordering, 0, deepcopy(self._chooser))
        clone._data = self._data[:self._size]
        clone._size = self._size
        return clone

    def _heap_property_satisfied(self, parent: int, child: int) -> bool:
        return self._ordering.dominates(self._data[parent], self._data[child])

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = _parent_of(index)
            if self._heap_property_satisfied(parent, index):
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            violating = [
                child for child in _children_of(index)
                if child < self._size and not self._heap_property_satisfied(index, child)
            ]
            if not violating:
                break
            # Only a child that dominates its sibling can move up.
            targets = [
                child for child in violating
                if all(self._heap_property_satisfied(child, other) for other in violating)
            ]
            if len(targets) > 1:
                target = self._chooser.choose(targets)
                logger.debug("tie at index %d, moving down to %d", index, target)
            else:
                target = targets[0]
            self._swap(index, target)
            index = target

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return (
            f"BinaryHeap(elements={self._data[:self._size]}, "
            f"size={self._size}, ordering={self._ordering!r})"
        )

    def __str__(self) -> str:
        return f"BinaryHeap(size={self._size})"

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]
