"""
Stable quick sort in functional style.

Instead of mutating its input, it builds new lists for every segment. Slower
than the in-place sorts (more allocation, copying and comparisons) but stable.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

from localtypes import Comparator

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class _Pivot(Generic[T]):
    """Pivot waiting for its left segment to be emitted."""

    value: T


def functional_stable_quick_sort(seq: Sequence[T], compare: Comparator[T]) -> list[T]:
    """
    Returns a new sorted list; seq is left untouched.

    The first element is the pivot, so it is the leftmost of the elements
    equal to it: those go to its right, in their original order.

    Pending segments and pivots sit on an explicit stack, so already-sorted
    input costs quadratic time but no recursion.
    """
    output: list[T] = []
    stack: list[list[T] | _Pivot[T]] = [list(seq)]

    while stack:
        entry = stack.pop()
        if isinstance(entry, _Pivot):
            output.append(entry.value)
            continue
        if not entry:
            continue

        pivot = entry[0]
        left: list[T] = []
        right: list[T] = []
        for x in islice(entry, 1, None):
            if compare(x, pivot) < 0:
                left.append(x)
            else:
                right.append(x)

        # Popped in reverse: left, then pivot, then right
        stack.append(right)
        stack.append(_Pivot(pivot))
        stack.append(left)

    return output
