"""Tests for merge_sort/merge.py"""

import numpy as np
import pytest

from localtypes import natural_order
from merge_sort.merge import (
    merge_multiple_sorted_sequences_naive,
    merge_multiple_sorted_sequences_smart,
    merge_two_adjacent_sorted_sequences_inplace,
    merge_two_sorted_sequences,
    smart_merge_two_adjacent_sorted_sequences_inplace,
)


def by_key(a, b):
    return natural_order(a[0], b[0])


class SliceRecordingList(list):
    """List that records the bounds of every slice read from it."""

    def __init__(self, values):
        super().__init__(values)
        self.slices = []

    def __getitem__(self, index):
        if isinstance(index, slice):
            self.slices.append((index.start, index.stop))
        return super().__getitem__(index)


def collect(merge, *args) -> list:
    """Runs a merge and returns its output, checking indices are consecutive."""
    output = []

    def consume(index, element):
        assert index == len(output)
        output.append(element)

    merge(*args, consume)
    return output


class TestMergeTwoSortedSequences:
    def test_interleaved(self):
        assert collect(merge_two_sorted_sequences, [1, 3, 5], [2, 4, 6], natural_order) == [
            1,
            2,
            3,
            4,
            5,
            6,
        ]

    def test_empty_sides(self):
        assert collect(merge_two_sorted_sequences, [], [1, 2], natural_order) == [1, 2]
        assert collect(merge_two_sorted_sequences, [1, 2], [], natural_order) == [1, 2]
        assert collect(merge_two_sorted_sequences, [], [], natural_order) == []

    def test_ties_come_from_first(self):
        first = [(1, "a"), (2, "a"), (2, "b")]
        second = [(1, "x"), (2, "x")]
        result = collect(merge_two_sorted_sequences, first, second, by_key)
        assert result == [(1, "a"), (1, "x"), (2, "a"), (2, "b"), (2, "x")]


@pytest.mark.parametrize(
    "merge", [merge_multiple_sorted_sequences_naive, merge_multiple_sorted_sequences_smart]
)
class TestMergeMultipleSortedSequences:
    def test_three_sequences(self, merge):
        sequences = [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
        assert collect(merge, sequences, natural_order) == list(range(1, 10))

    def test_with_empty_sequences(self, merge):
        sequences = [[], [3, 4], [], [1, 2]]
        assert collect(merge, sequences, natural_order) == [1, 2, 3, 4]

    def test_ties_follow_sequence_order(self, merge):
        sequences = [[(1, 0), (2, 0)], [(1, 1)], [(0, 2), (1, 2), (2, 2)]]
        result = collect(merge, sequences, by_key)
        assert result == [(0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 2)]

    def test_random(self, merge):
        rng = np.random.default_rng(123456)
        sequences = [sorted(rng.integers(0, 50, size=size).tolist()) for size in (0, 7, 30, 12, 1)]
        expected = sorted(x for seq in sequences for x in seq)
        assert collect(merge, sequences, natural_order) == expected

    def test_requires_two_sequences(self, merge):
        with pytest.raises(ValueError):
            collect(merge, [[1, 2]], natural_order)


@pytest.mark.parametrize(
    "merge",
    [
        merge_two_adjacent_sorted_sequences_inplace,
        smart_merge_two_adjacent_sorted_sequences_inplace,
    ],
)
class TestMergeAdjacentInPlace:
    def test_basic(self, merge):
        arr = [1, 4, 6, 2, 3, 5]
        merge(arr, 3, natural_order)
        assert arr == [1, 2, 3, 4, 5, 6]

    def test_already_ordered(self, merge):
        arr = [1, 2, 3, 4]
        merge(arr, 2, natural_order)
        assert arr == [1, 2, 3, 4]

    def test_one_side_empty(self, merge):
        arr = [3, 1, 2]
        merge(arr, 1, natural_order, 1, 3)
        assert arr == [3, 1, 2]
        merge(arr, 3, natural_order, 1, 3)
        assert arr == [3, 1, 2]

    def test_sub_range(self, merge):
        arr = [9, 5, 7, 1, 6, 0]
        merge(arr, 3, natural_order, 1, 5)
        assert arr == [9, 1, 5, 6, 7, 0]

    def test_stable(self, merge):
        arr = [(1, "l"), (2, "l"), (3, "l"), (2, "r"), (3, "r"), (4, "r")]
        merge(arr, 3, by_key)
        assert arr == [(1, "l"), (2, "l"), (2, "r"), (3, "l"), (3, "r"), (4, "r")]

    def test_random(self, merge):
        rng = np.random.default_rng(123456)
        for _ in range(20):
            left = sorted(rng.integers(0, 20, size=int(rng.integers(0, 15))).tolist())
            right = sorted(rng.integers(0, 20, size=int(rng.integers(0, 15))).tolist())
            arr = left + right
            merge(arr, len(left), natural_order)
            assert arr == sorted(left + right)

    def test_invalid_separation(self, merge):
        with pytest.raises(IndexError):
            merge([1, 2, 3], 4, natural_order)

    def test_separation_before_range(self, merge):
        arr = [3, 1, 2]
        with pytest.raises(IndexError):
            merge(arr, 0, natural_order, 1, 3)
        assert arr == [3, 1, 2]

    def test_right_run_read_in_place(self, merge):
        """Only the left run is copied out; the right run is read by index."""
        arr = SliceRecordingList([2, 5, 6, 1, 5, 7, 8])
        merge(arr, 3, natural_order)
        assert arr == [1, 2, 5, 5, 6, 7, 8]
        assert arr.slices == [(0, 3)]
