"""
Quick sort over any container that can step forwards and backwards.

The algorithm only needs to swap, read, and move an index one step, so the
same code sorts a list (integer indices) and a LinkedList (cursors). Ranges
are half-open, so a container must be able to name the slot after its last
element: for a linked list that is the AFTER_LAST sentinel.

Cursors cannot be ordered cheaply, so the partition tracks region sizes and
tests loop termination on those counts instead of comparing indices.
"""

from collections.abc import MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar

from typing_extensions import TypeAliasType

from data_structure.linked_list import Cursor, LinkedList
from localtypes import Comparator
from quick_sort.pivot_select import median_of_three_pivot

T = TypeVar("T")
Idx = TypeVar("Idx")


class QuickSortableContainer(Protocol[T, Idx]):
    def swap(self, a: Idx, b: Idx) -> None: ...

    def get(self, index: Idx) -> T: ...

    def next_index(self, index: Idx) -> Idx: ...

    def prev_index(self, index: Idx) -> Idx: ...

    def select_pivot_index(
        self, begin: Idx, end: Idx, compare: Comparator[T]
    ) -> Idx: ...


@dataclass(frozen=True)
class PartitionResult(Generic[Idx]):
    """Left part is [begin, left), right part is [right, end)."""

    left: Idx
    right: Idx
    left_size: int
    right_size: int


# Containers


class SequenceContainer(Generic[T]):
    """A mutable sequence addressed by integer indices."""

    def __init__(self, arr: MutableSequence[T]) -> None:
        self.arr = arr

    def swap(self, a: int, b: int) -> None:
        self.arr[a], self.arr[b] = self.arr[b], self.arr[a]

    def get(self, index: int) -> T:
        return self.arr[index]

    def next_index(self, index: int) -> int:
        return index + 1

    def prev_index(self, index: int) -> int:
        return index - 1

    def select_pivot_index(self, begin: int, end: int, compare: Comparator[T]) -> int:
        return median_of_three_pivot(self.arr, compare, begin, end)


class LinkedListEnd(Enum):
    AFTER_LAST = "AFTER_LAST"


AFTER_LAST = LinkedListEnd.AFTER_LAST

LinkedListIndex = TypeAliasType("LinkedListIndex", Cursor | LinkedListEnd)


class LinkedListContainer(Generic[T]):
    """A LinkedList addressed by cursors, with AFTER_LAST past the tail."""

    def __init__(self, linked_list: LinkedList[T]) -> None:
        self.linked_list = linked_list

    def swap(self, a: LinkedListIndex, b: LinkedListIndex) -> None:
        if a is AFTER_LAST or b is AFTER_LAST:
            raise IndexError("Cannot swap with AFTER_LAST index")
        self.linked_list.swap(a, b)

    def get(self, index: LinkedListIndex) -> T:
        if index is AFTER_LAST:
            raise IndexError("Cannot get AFTER_LAST index")
        return self.linked_list.get(index)

    def next_index(self, index: LinkedListIndex) -> LinkedListIndex:
        if index is AFTER_LAST:
            raise IndexError("Cannot get next index of AFTER_LAST index")
        following = self.linked_list.next_cursor(index)
        return AFTER_LAST if following is None else following

    def prev_index(self, index: LinkedListIndex) -> LinkedListIndex:
        if index is AFTER_LAST:
            last = self.linked_list.end()
            if last is None:
                raise IndexError("Empty list has no last element")
            return last
        preceding = self.linked_list.prev_cursor(index)
        if preceding is None:
            raise IndexError("No index before the head of the list")
        return preceding

    def select_pivot_index(
        self, begin: LinkedListIndex, end: LinkedListIndex, compare: Comparator[T]
    ) -> LinkedListIndex:
        # Reaching the middle of a linked range is linear, so take the first element
        return begin


# Algorithms


def container_agnostic_fat_partition(
    container: QuickSortableContainer[T, Idx],
    compare: Comparator[T],
    begin: Idx,
    end: Idx,
    initial_pivot_index: Idx,
    size: int,
) -> PartitionResult[Idx]:
    """
    Fat partition of [begin, end) holding `size` elements.

    Same regions as partition.fat_partition_tracking_pivot: the range ends up
    as [begin, left) < pivot, [left, right) == pivot, [right, end) > pivot.
    """
    if size == 0:
        return PartitionResult(begin, end, 0, 0)

    pivot_index = initial_pivot_index
    left = begin
    eq = begin
    right = container.prev_index(end)

    # Positions relative to begin: left == left_size,
    # eq == left_and_eq_size, right == size - 1 - right_size
    left_size = 0
    right_size = 0
    left_and_eq_size = 0

    while left_and_eq_size + 1 + right_size <= size:
        if eq == pivot_index:
            eq = container.next_index(eq)
            left_and_eq_size += 1
            continue

        order = compare(container.get(eq), container.get(pivot_index))
        if order < 0:
            if left != eq:
                container.swap(eq, left)
                if left == pivot_index:
                    pivot_index = eq
            left = container.next_index(left)
            eq = container.next_index(eq)
            left_size += 1
            left_and_eq_size += 1
        elif order > 0:
            container.swap(eq, right)
            if right == pivot_index:
                pivot_index = eq
            right = container.prev_index(right)
            right_size += 1
        else:
            eq = container.next_index(eq)
            left_and_eq_size += 1

    right_start = container.next_index(right)
    assert eq == right_start
    assert left != right_start
    return PartitionResult(left, right_start, left_size, right_size)


def container_agnostic_quick_sort(
    container: QuickSortableContainer[T, Idx],
    compare: Comparator[T],
    begin: Idx,
    end: Idx,
    size: int,
) -> None:
    """Sorts the `size` elements of [begin, end) in place."""
    while size > 1:
        if size == 2:
            second = container.next_index(begin)
            if compare(container.get(begin), container.get(second)) > 0:
                container.swap(begin, second)
            return

        pivot_index = container.select_pivot_index(begin, end, compare)
        result = container_agnostic_fat_partition(
            container, compare, begin, end, pivot_index, size
        )

        # Recurse on the smaller part, loop on the larger one
        if result.left_size < result.right_size:
            container_agnostic_quick_sort(
                container, compare, begin, result.left, result.left_size
            )
            begin, size = result.right, result.right_size
        else:
            container_agnostic_quick_sort(
                container, compare, result.right, end, result.right_size
            )
            end, size = result.left, result.left_size


def quick_sort_sequence(arr: MutableSequence[T], compare: Comparator[T]) -> None:
    container_agnostic_quick_sort(SequenceContainer(arr), compare, 0, len(arr), len(arr))


def quick_sort_linked_list(linked_list: LinkedList[T], compare: Comparator[T]) -> None:
    begin = linked_list.begin()
    if begin is None:
        return
    container_agnostic_quick_sort(
        LinkedListContainer(linked_list), compare, begin, AFTER_LAST, len(linked_list)
    )
