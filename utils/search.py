"""
Binary search over sorted sequences ordered by a comparator.

`bisect` only understands `<` and key functions, while every sort in this
project is driven by a comparator, so these mirror `bisect_left` and
`bisect_right` for that case.
"""

from collections.abc import Sequence
from typing import TypeVar

from localtypes import Comparator, resolve_bounds

T = TypeVar("T")


def binary_search_leftmost(
    arr: Sequence[T],
    compare: Comparator[T],
    target: T,
    lo: int = 0,
    hi: int | None = None,
) -> int:
    """
    Returns the leftmost insertion point of target in arr[lo:hi].

    When equal elements exist, the index of the first of them is returned,
    so every element of arr[lo:result] compares strictly less than target.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)
    while lo < hi:
        mid = (lo + hi) // 2
        if compare(arr[mid], target) < 0:
            lo = mid + 1
        else:
            hi = mid
    return lo


def binary_search_rightmost(
    arr: Sequence[T],
    compare: Comparator[T],
    target: T,
    lo: int = 0,
    hi: int | None = None,
) -> int:
    """
    Returns the rightmost insertion point of target in arr[lo:hi].

    Every element of arr[lo:result] compares less than or equal to target.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)
    while lo < hi:
        mid = (lo + hi) // 2
        if compare(target, arr[mid]) < 0:
            hi = mid
        else:
            lo = mid + 1
    return lo
