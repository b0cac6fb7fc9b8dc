"""
Parallel merge sorts on a thread pool.

concurrent_merge_sort works in four phases, each a batch of tasks joined
before the next one starts:

1. Split the array evenly into M parts and sort every part.
2. Take M-1 pivots from the sorted first part and split every part at the
   leftmost insertion point of each pivot. Sub-part k of every part then
   holds values in [pivot k-1, pivot k), so the sub-parts with the same
   index form a bucket, and buckets are ordered among themselves.
3. Worker k copies bucket k out of the array into its own buffers.
4. Worker k merges its buffers into the slice of the array right after the
   buckets before it.

Tasks only ever write to disjoint ranges of the array, and a phase never
reads what the same phase writes.
"""

import logging
from collections.abc import Iterable, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import accumulate, pairwise
from typing import TypeVar

from typing_extensions import Self

from constants import DEFAULT_FORK_DEPTH, DEFAULT_PARALLELISM, MIN_ELEMENTS_PER_WORKER
from localtypes import Comparator, resolve_bounds
from merge_sort.merge import (
    merge_multiple_sorted_sequences_smart,
    smart_merge_two_adjacent_sorted_sequences_inplace,
)
from merge_sort.simple import merge_sort_inplace
from utils.search import binary_search_leftmost

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RangePartition:
    """
    Consecutive half-open parts of a range, given by their endpoints.

    With endpoints e0 <= e1 <= ... <= en, part i is [e_i, e_{i+1}).
    Parts may be empty.
    """

    __slots__ = ("endpoints",)

    def __init__(self, endpoints: tuple[int, ...]) -> None:
        self.endpoints = endpoints

    @classmethod
    def from_endpoints(cls, endpoints: Iterable[int]) -> Self:
        endpoints = tuple(endpoints)
        if len(endpoints) < 2:
            raise ValueError("A partition needs at least two endpoints")
        if any(a > b for a, b in pairwise(endpoints)):
            raise ValueError(f"Endpoints must be ascending, got {endpoints}")
        return cls(endpoints)

    @classmethod
    def from_part_sizes(cls, sizes: Iterable[int], start: int = 0) -> Self:
        sizes = tuple(sizes)
        if any(size < 0 for size in sizes):
            raise ValueError(f"Part sizes must be non-negative, got {sizes}")
        return cls.from_endpoints(accumulate(sizes, initial=start))

    @classmethod
    def evenly_partition(cls, start: int, end: int, parts: int) -> Self:
        """Parts of equal length, the last one also takes the remainder."""
        if parts < 1:
            raise ValueError("At least one part is required")
        if start > end:
            raise ValueError(f"Invalid range [{start}, {end})")
        length = (end - start) // parts
        endpoints = [start + i * length for i in range(parts)]
        endpoints.append(end)
        return cls.from_endpoints(endpoints)

    @classmethod
    def by_pivots(
        cls,
        arr: Sequence[T],
        compare: Comparator[T],
        start: int,
        end: int,
        pivots: Sequence[T],
    ) -> Self:
        """
        Splits the sorted arr[start:end] before the first element not less
        than each pivot. Pivots must be ascending.
        """
        endpoints = [start]
        for pivot in pivots:
            endpoints.append(
                binary_search_leftmost(arr, compare, pivot, endpoints[-1], end)
            )
        endpoints.append(end)
        return cls.from_endpoints(endpoints)

    def part_count(self) -> int:
        return len(self.endpoints) - 1

    def part_start(self, part: int) -> int:
        return self.endpoints[part]

    def part_end(self, part: int) -> int:
        return self.endpoints[part + 1]

    def part_range(self, part: int) -> range:
        return range(self.part_start(part), self.part_end(part))

    def part_length(self, part: int) -> int:
        return self.part_end(part) - self.part_start(part)

    def total_start(self) -> int:
        return self.endpoints[0]

    def total_end(self) -> int:
        return self.endpoints[-1]

    def total_range(self) -> range:
        return range(self.total_start(), self.total_end())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangePartition):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __repr__(self) -> str:
        return f"RangePartition{self.endpoints}"


def _choose_pivots(
    arr: Sequence[T], first_part: RangePartition, part: int, count: int
) -> list[T]:
    """count evenly spaced elements of a sorted part, excluding its first one."""
    start = first_part.part_start(part)
    length = first_part.part_length(part)
    return [arr[start + (k * length) // (count + 1)] for k in range(1, count + 1)]


def concurrent_merge_sort(
    arr: MutableSequence[T],
    compare: Comparator[T],
    parallelism: int = DEFAULT_PARALLELISM,
) -> None:
    """
    Stable in-place merge sort using up to `parallelism` worker threads.

    Small inputs, or a parallelism of 1, use the sequential merge sort.

    Raises:
        ValueError: If parallelism is below 1.
    """
    if parallelism < 1:
        raise ValueError(f"Parallelism must be at least 1, got {parallelism}")

    n = len(arr)
    if parallelism == 1 or n <= parallelism * MIN_ELEMENTS_PER_WORKER:
        merge_sort_inplace(arr, compare)
        return

    workers = parallelism
    parts = RangePartition.evenly_partition(0, n, workers)
    logger.debug(f"Sorting {n} elements in parts {parts}")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        # Phase 1: sort every part
        sorting = [
            pool.submit(merge_sort_inplace, arr, compare, parts.part_start(i), parts.part_end(i))
            for i in range(workers)
        ]
        for future in sorting:
            future.result()

        # Phase 2: split every part into one sub-part per worker
        pivots = _choose_pivots(arr, parts, 0, workers - 1)
        splitting = [
            pool.submit(
                RangePartition.by_pivots,
                arr,
                compare,
                parts.part_start(i),
                parts.part_end(i),
                pivots,
            )
            for i in range(workers)
        ]
        sub_parts = [future.result() for future in splitting]

        bucket_sizes = [
            sum(split.part_length(k) for split in sub_parts) for k in range(workers)
        ]
        destinations = RangePartition.from_part_sizes(bucket_sizes)
        logger.debug(f"Bucket layout {destinations}")

        # Phase 3: every worker copies its bucket out of the array
        def gather(k: int) -> list[list[T]]:
            return [
                list(arr[split.part_start(k) : split.part_end(k)]) for split in sub_parts
            ]

        gathering = [pool.submit(gather, k) for k in range(workers)]
        buffers = [future.result() for future in gathering]

        # Phase 4: merge every bucket into its destination range
        def merge_into_place(k: int) -> None:
            offset = destinations.part_start(k)

            def write(index: int, element: T) -> None:
                arr[offset + index] = element

            merge_multiple_sorted_sequences_smart(buffers[k], compare, write)

        merging = [pool.submit(merge_into_place, k) for k in range(workers)]
        for future in merging:
            future.result()


def fork_join_merge_sort(
    arr: MutableSequence[T],
    compare: Comparator[T],
    max_depth: int = DEFAULT_FORK_DEPTH,
) -> None:
    """
    Stable in-place merge sort forking a thread for the left half at each
    level above max_depth, then joining it before merging.
    """
    if max_depth < 0:
        raise ValueError(f"Depth must be non-negative, got {max_depth}")
    _fork_join(arr, compare, 0, len(arr), max_depth)


def _fork_join(
    arr: MutableSequence[T], compare: Comparator[T], lo: int, hi: int, depth: int
) -> None:
    lo, hi = resolve_bounds(len(arr), lo, hi)
    if depth == 0 or hi - lo <= MIN_ELEMENTS_PER_WORKER:
        merge_sort_inplace(arr, compare, lo, hi)
        return

    mid = lo + (hi - lo) // 2
    with ThreadPoolExecutor(max_workers=1) as pool:
        left = pool.submit(_fork_join, arr, compare, lo, mid, depth - 1)
        _fork_join(arr, compare, mid, hi, depth - 1)
        left.result()
    smart_merge_two_adjacent_sorted_sequences_inplace(arr, mid, compare, lo, hi)
