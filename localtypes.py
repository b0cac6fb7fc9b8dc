"""
Type definitions shared by the sorting, data structure and functional modules.

Ordering follows the `functools.cmp_to_key` convention: a comparator returns
a negative number, zero or a positive number.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from typing_extensions import TypeAliasType

T = TypeVar("T")


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


# Ordering
_E = TypeVar("_E")

Comparator = TypeAliasType("Comparator", Callable[[_E, _E], int], type_params=(_E,))
KeyFunc = TypeAliasType("KeyFunc", Callable[[_E], SupportsLessThan], type_params=(_E,))

# Merging: consumer receives (output_index, element)
ResultConsumer = TypeAliasType("ResultConsumer", Callable[[int, _E], None], type_params=(_E,))


def natural_order(a: Any, b: Any) -> int:
    """Comparator using the elements' own `<`."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(compare: Comparator[T]) -> Comparator[T]:
    """Inverts a comparator (turns a min-heap into a max-heap)."""
    return lambda a, b: compare(b, a)


def key_to_comparator(key: KeyFunc[T]) -> Comparator[T]:
    """
    Adapts a sort-key extractor into a comparator.

    Args:
        key: Function extracting an orderable key from each element.

    Returns:
        A comparator ordering elements by their keys.
    """

    def compare(a: T, b: T) -> int:
        return natural_order(key(a), key(b))

    return compare


def resolve_bounds(length: int, lo: int, hi: int | None) -> tuple[int, int]:
    """Normalizes an optional half-open range [lo, hi) over a sequence."""
    if hi is None:
        hi = length
    if not 0 <= lo <= hi <= length:
        raise IndexError(f"Invalid range [{lo}, {hi}) for length {length}")
    return lo, hi
