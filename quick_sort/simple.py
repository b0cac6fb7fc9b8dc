"""
In-place quick sorts over a mutable sequence.

Each partition step cuts the range in two around a pivot; only the strictly
smaller and strictly greater regions need further sorting. The smaller side
is sorted recursively and the larger side by looping, which keeps the stack
depth logarithmic.
"""

from collections.abc import MutableSequence
from typing import TypeVar

from localtypes import Comparator, KeyFunc, resolve_bounds
from quick_sort.partition import fat_partition
from quick_sort.pivot_select import median_of_three_pivot

T = TypeVar("T")


def normal_quick_sort(
    arr: MutableSequence[T], compare: Comparator[T], lo: int = 0, hi: int | None = None
) -> None:
    """
    Sorts arr[lo:hi] in place: median-of-three pivot, fat partition.

    Not stable.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)

    while hi - lo > 1:
        if hi - lo == 2:
            if compare(arr[lo], arr[lo + 1]) > 0:
                arr[lo], arr[lo + 1] = arr[lo + 1], arr[lo]
            return

        pivot_index = median_of_three_pivot(arr, compare, lo, hi)
        left, right = fat_partition(arr, compare, pivot_index, lo, hi)

        # arr[left:right] already holds its final values
        if left - lo < hi - right:
            normal_quick_sort(arr, compare, lo, left)
            lo = right
        else:
            normal_quick_sort(arr, compare, right, hi)
            hi = left


def key_quick_sort(
    arr: MutableSequence[T], key: KeyFunc[T], lo: int = 0, hi: int | None = None
) -> None:
    """
    Sorts arr[lo:hi] in place by a sort key, with Hoare-style crossing scans
    around the middle element's key.

    Not stable.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)

    while hi - lo > 1:
        pivot_key = key(arr[lo + (hi - lo) // 2])
        i, j = lo, hi - 1

        while i <= j:
            while key(arr[i]) < pivot_key:
                i += 1
            while pivot_key < key(arr[j]):
                j -= 1
            if i <= j:
                arr[i], arr[j] = arr[j], arr[i]
                i += 1
                j -= 1

        # arr[lo:j+1] <= pivot_key <= arr[i:hi]
        if j + 1 - lo < hi - i:
            key_quick_sort(arr, key, lo, j + 1)
            lo = i
        else:
            key_quick_sort(arr, key, i, hi)
            hi = j + 1
