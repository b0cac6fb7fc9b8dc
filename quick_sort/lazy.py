"""
Lazy quick sort: order statistics on demand.

Each partition step narrows the range in which an element can end up. To
know the element at sorted position i, only the ranges containing i need to
be partitioned; the other side of every split can stay unsorted without
affecting position i.

The splits form a binary tree over the array. A node is Unsorted until it is
first partitioned, PartiallySorted while it holds a split with children of
its own, and FullySorted once both children are. Later queries reuse every
split made so far, so asking for all positions costs about as much as one
full quick sort.
"""

import logging
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from typing_extensions import Self, TypeAliasType

from localtypes import Comparator, KeyFunc, key_to_comparator
from quick_sort.partition import fat_partition_tracking_pivot
from quick_sort.pivot_select import median_of_three_pivot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Unsorted:
    """Range not partitioned yet."""


class FullySorted:
    """Range holds its final values."""


@dataclass
class PartiallySorted:
    """
    Range split by a fat partition: [range_lo, left) < pivot,
    [left, right) == pivot, [right, range_hi) > pivot.
    """

    left: int
    right: int
    left_child: "NodeState"
    right_child: "NodeState"


NodeState = TypeAliasType("NodeState", Unsorted | PartiallySorted | FullySorted)

UNSORTED = Unsorted()
FULLY_SORTED = FullySorted()


class LazyQuickSorter(Generic[T]):
    """
    Sorts a mutable sequence in place, only as far as queries require.

    Example:
        >>> sorter = LazyQuickSorter([7, 4, 399, 1, 99, -3], lambda a, b: a - b)
        >>> sorter.at(0), sorter.at(5)
        (-3, 399)
    """

    def __init__(self, arr: MutableSequence[T], compare: Comparator[T]) -> None:
        self.arr = arr
        self.compare = compare
        self._root: NodeState = UNSORTED

    @classmethod
    def by_key(cls, arr: MutableSequence[T], key: KeyFunc[T]) -> Self:
        return cls(arr, key_to_comparator(key))

    def __len__(self) -> int:
        return len(self.arr)

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def at(self, index: int) -> T:
        """
        Returns the element at position index of the sorted order.

        Raises:
            IndexError: If index is outside the sequence.
        """
        if not 0 <= index < len(self.arr):
            raise IndexError(f"Index {index} out of range for length {len(self.arr)}")
        self._ensure_sorted(index)
        return self.arr[index]

    def is_fully_sorted(self) -> bool:
        return isinstance(self._root, FullySorted)

    def _ensure_sorted(self, target: int) -> None:
        """Splits the ranges containing target, root first, until arr[target] is final."""
        # Each entry is a split on the way down and whether target went left
        path: list[tuple[PartiallySorted, bool]] = []
        node = self._root
        lo, hi = 0, len(self.arr)

        while True:
            node = self._split(node, lo, hi)
            self._attach(path[-1] if path else None, node)

            if isinstance(node, FullySorted):
                break
            if target < node.left:
                path.append((node, True))
                hi = node.left
                node = node.left_child
            elif target >= node.right:
                path.append((node, False))
                lo = node.right
                node = node.right_child
            else:
                # Equal region, already final
                break

        for depth in range(len(path) - 1, -1, -1):
            split = path[depth][0]
            if not (
                isinstance(split.left_child, FullySorted)
                and isinstance(split.right_child, FullySorted)
            ):
                break
            self._attach(path[depth - 1] if depth else None, FULLY_SORTED)

    def _attach(self, parent: tuple[PartiallySorted, bool] | None, state: NodeState) -> None:
        if parent is None:
            self._root = state
            return
        split, is_left = parent
        if is_left:
            split.left_child = state
        else:
            split.right_child = state

    def _split(self, node: NodeState, lo: int, hi: int) -> NodeState:
        """State of the range [lo, hi) after one step: small ranges are sorted, unsorted ones partitioned."""
        if isinstance(node, (FullySorted, PartiallySorted)):
            return node

        size = hi - lo
        assert size > 0

        if size == 1:
            return FULLY_SORTED

        if size == 2:
            if self.compare(self.arr[lo], self.arr[lo + 1]) > 0:
                self.arr[lo], self.arr[lo + 1] = self.arr[lo + 1], self.arr[lo]
            return FULLY_SORTED

        pivot_index = median_of_three_pivot(self.arr, self.compare, lo, hi)
        left, right = fat_partition_tracking_pivot(self.arr, self.compare, pivot_index, lo, hi)
        logger.debug(f"Partitioned [{lo}, {hi}) at [{left}, {right})")

        if left == lo and right == hi:
            return FULLY_SORTED
        # Sides that are empty are trivially sorted
        return PartiallySorted(
            left,
            right,
            FULLY_SORTED if left == lo else UNSORTED,
            FULLY_SORTED if right == hi else UNSORTED,
        )
