"""
Pivot selection strategies.

Each returns an absolute index inside the half-open range [lo, hi), which must
not be empty.
"""

from collections.abc import Sequence
from typing import TypeVar

from localtypes import Comparator, resolve_bounds

T = TypeVar("T")


def _non_empty_bounds(arr: Sequence[T], lo: int, hi: int | None) -> tuple[int, int]:
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if lo == hi:
        raise ValueError("Cannot select a pivot from an empty range")
    return lo, hi


def first_element_as_pivot(arr: Sequence[T], lo: int = 0, hi: int | None = None) -> int:
    lo, hi = _non_empty_bounds(arr, lo, hi)
    return lo


def middle_element_as_pivot(arr: Sequence[T], lo: int = 0, hi: int | None = None) -> int:
    lo, hi = _non_empty_bounds(arr, lo, hi)
    return lo + (hi - lo) // 2


def last_element_as_pivot(arr: Sequence[T], lo: int = 0, hi: int | None = None) -> int:
    lo, hi = _non_empty_bounds(arr, lo, hi)
    return hi - 1


def median_of_three_pivot(
    arr: Sequence[T], compare: Comparator[T], lo: int = 0, hi: int | None = None
) -> int:
    """
    Index of the median of the first, middle and last elements of the range.

    The third comparison is only made when the first two do not decide.
    """
    lo, hi = _non_empty_bounds(arr, lo, hi)
    i1, i2, i3 = lo, lo + (hi - lo) // 2, hi - 1
    e1, e2, e3 = arr[i1], arr[i2], arr[i3]

    cmp12 = compare(e1, e2)
    cmp23 = compare(e2, e3)

    # e1 <= e2 <= e3 or e3 <= e2 <= e1
    if (cmp12 <= 0 and cmp23 <= 0) or (cmp12 >= 0 and cmp23 >= 0):
        return i2

    cmp13 = compare(e1, e3)

    # e2 <= e1 <= e3 or e3 <= e1 <= e2
    if (cmp12 >= 0 and cmp13 <= 0) or (cmp13 >= 0 and cmp12 <= 0):
        return i1

    return i3
