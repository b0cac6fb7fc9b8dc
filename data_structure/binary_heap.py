"""
Binary min-heap with a custom comparator.

`heapq` orders by `<` only; a comparator can carry runtime information
(tie-breaking on a source index, reversed order, ...) that `__lt__` cannot.
Inverting the comparator gives a max-heap.

The array is read as a tree rooted at index 0: the children of i are
2i+1 and 2i+2, its parent is (i-1)//2. Every parent compares less than or
equal to both of its children.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from typing_extensions import Self

from localtypes import Comparator

T = TypeVar("T")


def _left_child_index(index: int) -> int:
    return 2 * index + 1


def _right_child_index(index: int) -> int:
    return 2 * index + 2


def _parent_index(index: int) -> int:
    assert index > 0
    return (index - 1) // 2


class MinHeap(Generic[T]):
    """
    Min-heap ordered by a comparator.

    Example:
        >>> heap = MinHeap[int](lambda a, b: a - b)
        >>> for value in (3, 1, 2):
        ...     heap.insert(value)
        >>> heap.take_min()
        1
        >>> len(heap)
        2
    """

    def __init__(self, compare: Comparator[T]) -> None:
        self._data: list[T] = []
        self._compare = compare

    @classmethod
    def from_iterable(cls, values: Iterable[T], compare: Comparator[T]) -> Self:
        """Builds a heap in O(n) by sifting down every internal node."""
        heap = cls(compare)
        heap._data = list(values)
        for index in reversed(range(len(heap._data) // 2)):
            heap._sift_down(index)
        return heap

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def is_empty(self) -> bool:
        return not self._data

    def insert(self, value: T) -> None:
        # The new leaf may be smaller than its parent
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def peek_min(self) -> T:
        if not self._data:
            raise IndexError("peek_min from an empty heap")
        return self._data[0]

    def take_min(self) -> T:
        """
        Removes and returns the smallest element.

        The last leaf replaces the root and is sifted down.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._data:
            raise IndexError("take_min from an empty heap")

        last = self._data.pop()
        if not self._data:
            return last

        minimum = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return minimum

    def is_valid(self) -> bool:
        """Checks the heap property on every parent/child pair."""
        return all(
            self._compare(self._data[_parent_index(i)], self._data[i]) <= 0
            for i in range(1, len(self._data))
        )

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        current = index

        while True:
            # Swap the parent with the smallest of itself and its children,
            # then continue on the child that received it.
            smallest = current
            left = _left_child_index(current)
            right = _right_child_index(current)

            if left < size and self._compare(data[left], data[smallest]) < 0:
                smallest = left
            if right < size and self._compare(data[right], data[smallest]) < 0:
                smallest = right

            if smallest == current:
                return

            data[current], data[smallest] = data[smallest], data[current]
            current = smallest

    def _sift_up(self, index: int) -> None:
        data = self._data
        current = index

        while current > 0:
            parent = _parent_index(current)
            if self._compare(data[parent], data[current]) <= 0:
                return
            data[parent], data[current] = data[current], data[parent]
            current = parent
