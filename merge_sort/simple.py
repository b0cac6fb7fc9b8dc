"""
Top-down merge sorts, both stable.
"""

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from localtypes import Comparator, resolve_bounds
from merge_sort.merge import (
    merge_two_sorted_sequences,
    smart_merge_two_adjacent_sorted_sequences_inplace,
)

T = TypeVar("T")


def merge_sorted(seq: Sequence[T], compare: Comparator[T]) -> list[T]:
    """Returns a new sorted list built from copies of the halves of seq."""
    if len(seq) <= 1:
        return list(seq)

    mid = len(seq) // 2
    left = merge_sorted(seq[:mid], compare)
    right = merge_sorted(seq[mid:], compare)

    result: list[T] = [None] * len(seq)  # type: ignore[list-item]

    def write(index: int, element: T) -> None:
        result[index] = element

    merge_two_sorted_sequences(left, right, compare, write)
    return result


def merge_sort_inplace(
    arr: MutableSequence[T],
    compare: Comparator[T],
    lo: int = 0,
    hi: int | None = None,
) -> None:
    """Sorts arr[lo:hi] in place."""
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if hi - lo <= 1:
        return

    mid = lo + (hi - lo) // 2
    merge_sort_inplace(arr, compare, lo, mid)
    merge_sort_inplace(arr, compare, mid, hi)
    smart_merge_two_adjacent_sorted_sequences_inplace(arr, mid, compare, lo, hi)
