"""
Quick sort variants.

**Building blocks**
    - pivot_select: first / middle / last / median-of-three pivots
    - partition: Lomuto, Hoare and fat (three-way) partitions

**Sorts**
    - simple: in-place normal_quick_sort (comparator) and key_quick_sort (sort key)
    - stable: functional_stable_quick_sort, non-mutating and stable
    - container_agnostic: one quick sort for lists and linked lists
    - lazy: LazyQuickSorter, sorts only what queries touch
"""

from .container_agnostic import (
    AFTER_LAST,
    LinkedListContainer,
    PartitionResult,
    QuickSortableContainer,
    SequenceContainer,
    container_agnostic_fat_partition,
    container_agnostic_quick_sort,
    quick_sort_linked_list,
    quick_sort_sequence,
)
from .lazy import LazyQuickSorter
from .partition import (
    fat_partition,
    fat_partition_tracking_pivot,
    hoare_partition,
    lomuto_partition,
)
from .pivot_select import (
    first_element_as_pivot,
    last_element_as_pivot,
    median_of_three_pivot,
    middle_element_as_pivot,
)
from .simple import key_quick_sort, normal_quick_sort
from .stable import functional_stable_quick_sort

__all__ = [
    # Pivot selection
    "first_element_as_pivot",
    "middle_element_as_pivot",
    "last_element_as_pivot",
    "median_of_three_pivot",
    # Partitions
    "lomuto_partition",
    "hoare_partition",
    "fat_partition",
    "fat_partition_tracking_pivot",
    # Sorts
    "normal_quick_sort",
    "key_quick_sort",
    "functional_stable_quick_sort",
    "LazyQuickSorter",
    # Container agnostic
    "QuickSortableContainer",
    "SequenceContainer",
    "LinkedListContainer",
    "AFTER_LAST",
    "PartitionResult",
    "container_agnostic_fat_partition",
    "container_agnostic_quick_sort",
    "quick_sort_sequence",
    "quick_sort_linked_list",
]
