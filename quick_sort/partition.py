"""
Partition schemes for quick sort.

- Lomuto: single left-to-right scan.
- Hoare: scans from both ends, fewer swaps than Lomuto.
- Fat (Dutch national flag): adds an "equal" region, which keeps quick sort
  fast when many elements compare equal.

Pivot selection is left to the caller (see pivot_select). All schemes work in
place on arr[lo:hi], need at least 3 elements, and may move the pivot.

The comparator must describe a consistent order: reflexive, transitive,
antisymmetric, and not changing while the partition runs.
"""

from collections.abc import MutableSequence
from typing import TypeVar

from localtypes import Comparator, resolve_bounds

T = TypeVar("T")


def _partition_bounds(
    arr: MutableSequence[T], pivot_index: int, lo: int, hi: int | None
) -> tuple[int, int]:
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if hi - lo <= 2:
        raise ValueError("the range should have at least 3 elements")
    if not lo <= pivot_index < hi:
        raise IndexError(f"Pivot index {pivot_index} outside [{lo}, {hi})")
    return lo, hi


def lomuto_partition(
    arr: MutableSequence[T],
    compare: Comparator[T],
    pivot_index: int,
    lo: int = 0,
    hi: int | None = None,
) -> int:
    """
    Lomuto partition.

    Returns p such that arr[lo:p] < pivot, arr[p] == pivot and arr[p+1:hi] >= pivot.
    """
    lo, hi = _partition_bounds(arr, pivot_index, lo, hi)
    last = hi - 1

    # Park the pivot at the end
    arr[pivot_index], arr[last] = arr[last], arr[pivot_index]
    pivot = arr[last]

    # arr[lo:left] < pivot and arr[left:j] >= pivot
    left = lo
    for j in range(lo, last):
        if compare(arr[j], pivot) < 0:
            arr[left], arr[j] = arr[j], arr[left]
            left += 1

    # Move the pivot to the separation point
    arr[left], arr[last] = arr[last], arr[left]
    return left


def hoare_partition(
    arr: MutableSequence[T],
    compare: Comparator[T],
    pivot_index: int,
    lo: int = 0,
    hi: int | None = None,
) -> int:
    """
    Hoare partition.

    Returns p such that every element of arr[lo:p] is <= every element of
    arr[p:hi], with both sides non-empty (lo < p < hi).
    """
    lo, hi = _partition_bounds(arr, pivot_index, lo, hi)
    pivot = arr[pivot_index]

    left = lo
    right = hi - 1

    # arr[lo:left] <= pivot and arr[right+1:hi] >= pivot
    while True:
        while compare(arr[left], pivot) < 0:
            left += 1
        while compare(arr[right], pivot) > 0:
            right -= 1

        if left >= right:
            if left == right:
                # arr[left] == pivot: either side of it is a valid split,
                # pick the one that leaves both sides non-empty
                return left + 1 if left == lo else left
            assert left == right + 1
            return left

        arr[left], arr[right] = arr[right], arr[left]
        left += 1
        right -= 1


def fat_partition(
    arr: MutableSequence[T],
    compare: Comparator[T],
    pivot_index: int,
    lo: int = 0,
    hi: int | None = None,
) -> tuple[int, int]:
    """
    Fat (three-way) partition around the pivot value.

    Returns (l, r) such that arr[lo:l] < pivot, arr[l:r] == pivot and
    arr[r:hi] > pivot. The equal region holds at least the pivot, so
    lo <= l < r <= hi.
    """
    lo, hi = _partition_bounds(arr, pivot_index, lo, hi)
    pivot = arr[pivot_index]

    left = lo
    eq = lo
    right = hi - 1

    # Regions: arr[lo:left] < pivot, arr[left:eq] == pivot,
    # arr[eq:right+1] unprocessed, arr[right+1:hi] > pivot
    while eq <= right:
        order = compare(arr[eq], pivot)
        if order < 0:
            # Rotates the equal region by one when it is not empty
            arr[eq], arr[left] = arr[left], arr[eq]
            left += 1
            eq += 1
        elif order > 0:
            arr[eq], arr[right] = arr[right], arr[eq]
            right -= 1
        else:
            eq += 1

    assert eq == right + 1
    return left, eq


def fat_partition_tracking_pivot(
    arr: MutableSequence[T],
    compare: Comparator[T],
    initial_pivot_index: int,
    lo: int = 0,
    hi: int | None = None,
) -> tuple[int, int]:
    """
    Fat partition comparing against the pivot's slot rather than a saved value.

    Same contract as fat_partition. The pivot index follows the pivot as it
    gets swapped, and the pivot slot itself is counted as equal without a
    comparison.
    """
    lo, hi = _partition_bounds(arr, initial_pivot_index, lo, hi)
    pivot_index = initial_pivot_index

    left = lo
    eq = lo
    right = hi - 1

    while eq <= right:
        if pivot_index == eq:
            eq += 1
            continue

        order = compare(arr[eq], arr[pivot_index])
        if order < 0:
            if left != eq:
                arr[eq], arr[left] = arr[left], arr[eq]
                if left == pivot_index:
                    pivot_index = eq
            left += 1
            eq += 1
        elif order > 0:
            arr[eq], arr[right] = arr[right], arr[eq]
            if right == pivot_index:
                pivot_index = eq
            right -= 1
        else:
            eq += 1

    assert eq == right + 1
    return left, eq
