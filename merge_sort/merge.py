"""
Merging of sorted sequences.

Every merge is stable: when elements compare equal, the one from the earlier
sequence is emitted first. Results are pushed to a consumer called with
(output_index, element), so callers decide where merged elements land.
"""

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from data_structure.binary_heap import MinHeap
from localtypes import Comparator, ResultConsumer, resolve_bounds
from utils.search import binary_search_leftmost, binary_search_rightmost

T = TypeVar("T")


def merge_two_sorted_sequences(
    first: Sequence[T],
    second: Sequence[T],
    compare: Comparator[T],
    consume: ResultConsumer[T],
) -> None:
    i1 = 0
    i2 = 0

    while i1 < len(first) and i2 < len(second):
        # On ties emit from first, and only from first: a later element of
        # first may still equal second[i2] and must precede it
        if compare(first[i1], second[i2]) <= 0:
            consume(i1 + i2, first[i1])
            i1 += 1
        else:
            consume(i1 + i2, second[i2])
            i2 += 1

    while i1 < len(first):
        consume(i1 + i2, first[i1])
        i1 += 1

    while i2 < len(second):
        consume(i1 + i2, second[i2])
        i2 += 1


def merge_multiple_sorted_sequences_naive(
    sequences: Sequence[Sequence[T]],
    compare: Comparator[T],
    consume: ResultConsumer[T],
) -> None:
    """
    K-way merge by scanning every sequence head for the minimum, O(n * k).
    """
    if len(sequences) < 2:
        raise ValueError("At least two sequences are required")

    # positions[i] is the next element to check in sequences[i]
    positions = [0] * len(sequences)
    output_index = 0

    while True:
        min_found: tuple[int, T] | None = None

        for seq_index, seq in enumerate(sequences):
            position = positions[seq_index]
            if position >= len(seq):
                continue
            element = seq[position]
            # Strictly less: an equal later head must not win
            if min_found is None or compare(element, min_found[1]) < 0:
                min_found = (seq_index, element)

        if min_found is None:
            return

        seq_index, element = min_found
        consume(output_index, element)
        positions[seq_index] += 1
        output_index += 1


@dataclass(frozen=True, slots=True)
class _HeapEntry(Generic[T]):
    element: T
    seq_index: int


def merge_multiple_sorted_sequences_smart(
    sequences: Sequence[Sequence[T]],
    compare: Comparator[T],
    consume: ResultConsumer[T],
) -> None:
    """
    K-way merge through a min-heap of sequence heads, O(n log k).
    """
    if len(sequences) < 2:
        raise ValueError("At least two sequences are required")

    def compare_entries(a: _HeapEntry[T], b: _HeapEntry[T]) -> int:
        # The heap is not stable: break ties on the sequence index
        order = compare(a.element, b.element)
        return order if order != 0 else a.seq_index - b.seq_index

    positions = [0] * len(sequences)
    heap: MinHeap[_HeapEntry[T]] = MinHeap(compare_entries)

    for seq_index, seq in enumerate(sequences):
        if seq:
            heap.insert(_HeapEntry(seq[0], seq_index))
            positions[seq_index] = 1

    output_index = 0
    while heap:
        entry = heap.take_min()
        consume(output_index, entry.element)
        output_index += 1

        seq = sequences[entry.seq_index]
        position = positions[entry.seq_index]
        if position < len(seq):
            heap.insert(_HeapEntry(seq[position], entry.seq_index))
            positions[entry.seq_index] = position + 1


def merge_two_adjacent_sorted_sequences_inplace(
    arr: MutableSequence[T],
    separation: int,
    compare: Comparator[T],
    lo: int = 0,
    hi: int | None = None,
) -> None:
    """
    Merges the sorted runs arr[lo:separation] and arr[separation:hi] in place.

    Only the left run is copied to a buffer. The right run is read from arr
    directly: the write position always stays behind the next unread right
    element, and right elements left over at the end are already in place.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if not lo <= separation <= hi:
        raise IndexError(f"Separation {separation} outside [{lo}, {hi}]")

    if separation == lo or separation == hi:
        return

    buffer = list(arr[lo:separation])
    i = 0
    j = separation
    write = lo

    while i < len(buffer) and j < hi:
        assert write < j
        # Ties take the buffered left element
        if compare(buffer[i], arr[j]) <= 0:
            arr[write] = buffer[i]
            i += 1
        else:
            arr[write] = arr[j]
            j += 1
        write += 1

    while i < len(buffer):
        arr[write] = buffer[i]
        i += 1
        write += 1


def smart_merge_two_adjacent_sorted_sequences_inplace(
    arr: MutableSequence[T],
    separation: int,
    compare: Comparator[T],
    lo: int = 0,
    hi: int | None = None,
) -> None:
    """
    Same as merge_two_adjacent_sorted_sequences_inplace, but skips work:

    - nothing to do when left max <= right min;
    - left elements <= right min and right elements >= left max are already
      in place, so binary searches narrow the merged window to the rest.
    """
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if not lo <= separation <= hi:
        raise IndexError(f"Separation {separation} outside [{lo}, {hi}]")

    if hi - lo <= 1 or separation == lo or separation == hi:
        return

    left_max = arr[separation - 1]
    right_min = arr[separation]

    if compare(left_max, right_min) <= 0:
        return

    # arr[right_delimit:hi] >= left_max, already in place
    right_delimit = binary_search_leftmost(arr, compare, left_max, separation, hi)
    # arr[lo:left_delimit] <= right_min, already in place
    left_delimit = binary_search_rightmost(arr, compare, right_min, lo, separation)

    if separation == left_delimit or separation == right_delimit:
        return

    merge_two_adjacent_sorted_sequences_inplace(
        arr, separation, compare, left_delimit, right_delimit
    )
