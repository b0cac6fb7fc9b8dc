"""
Merge sort variants.

**Merging**
    - merge: two-way and k-way merges pushing to a consumer, adjacent in-place merges

**Sorts**
    - simple: merge_sorted (new list) and merge_sort_inplace
    - concurrent: concurrent_merge_sort (bucketed, thread pool) and fork_join_merge_sort
"""

from .concurrent import RangePartition, concurrent_merge_sort, fork_join_merge_sort
from .merge import (
    merge_multiple_sorted_sequences_naive,
    merge_multiple_sorted_sequences_smart,
    merge_two_adjacent_sorted_sequences_inplace,
    merge_two_sorted_sequences,
    smart_merge_two_adjacent_sorted_sequences_inplace,
)
from .simple import merge_sort_inplace, merge_sorted

__all__ = [
    # Merging
    "merge_two_sorted_sequences",
    "merge_multiple_sorted_sequences_naive",
    "merge_multiple_sorted_sequences_smart",
    "merge_two_adjacent_sorted_sequences_inplace",
    "smart_merge_two_adjacent_sorted_sequences_inplace",
    # Sorts
    "merge_sorted",
    "merge_sort_inplace",
    "concurrent_merge_sort",
    "fork_join_merge_sort",
    "RangePartition",
]
