"""
Runs every algorithm once on a small seeded input and logs the results.
"""

import logging

import numpy as np

from constants import DEMO_SEED
from data_structure import HashMapDAG, LinkedList, MatrixDAG, MinHeap, topological_order
from dyn_pro import DagShortestPathSolver, NumericDistanceOps
from functional import (
    LazyEvalFixedPointApplier,
    ListCache,
    MatrixCache,
    y_combinator,
)
from localtypes import key_to_comparator, natural_order, reverse_order
from merge_sort import concurrent_merge_sort, fork_join_merge_sort, merge_sorted
from quick_sort import (
    LazyQuickSorter,
    functional_stable_quick_sort,
    normal_quick_sort,
    quick_sort_linked_list,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def demo_sorts(values: list[int]):
    logger.info(f"Input: {values}")

    arr = list(values)
    normal_quick_sort(arr, natural_order)
    logger.info(f"normal_quick_sort: {arr}")

    words = ["pear", "fig", "kiwi", "apple", "plum", "date"]
    by_length = functional_stable_quick_sort(words, key_to_comparator(len))
    logger.info(f"functional_stable_quick_sort by length: {by_length}")

    linked = LinkedList.from_iterable(values)
    quick_sort_linked_list(linked, natural_order)
    logger.info(f"quick_sort_linked_list: {list(linked)}")

    lazy_arr = list(values)
    sorter = LazyQuickSorter(lazy_arr, natural_order)
    logger.info(
        f"LazyQuickSorter min={sorter.at(0)} median={sorter.at(len(sorter) // 2)}, "
        f"fully sorted: {sorter.is_fully_sorted()}"
    )

    logger.info(f"merge_sorted descending: {merge_sorted(values, reverse_order(natural_order))}")

    rng = np.random.default_rng(DEMO_SEED)
    large = rng.integers(-10_000, 10_000, size=5_000).tolist()
    expected = sorted(large)

    concurrent = list(large)
    concurrent_merge_sort(concurrent, natural_order, parallelism=4)
    logger.info(f"concurrent_merge_sort on {len(large)} elements: {concurrent == expected}")

    forked = list(large)
    fork_join_merge_sort(forked, natural_order)
    logger.info(f"fork_join_merge_sort on {len(large)} elements: {forked == expected}")


def demo_heap(values: list[int]):
    heap = MinHeap.from_iterable(values, natural_order)
    drained = [heap.take_min() for _ in range(len(heap))]
    logger.info(f"MinHeap drain: {drained}")


def demo_functional():
    fibonacci = LazyEvalFixedPointApplier(
        lambda fib, n: n if n < 2 else fib(n - 1) + fib(n - 2), ListCache()
    )
    logger.info(f"fibonacci(90) = {fibonacci(90)}")

    factorial = y_combinator(lambda fact, n: 1 if n == 0 else n * fact(n - 1))
    logger.info(f"factorial(10) = {factorial(10)}")


def demo_shortest_path():
    graph = HashMapDAG.from_edges(
        [("a", "b", 1), ("a", "c", 2), ("b", "c", 3), ("b", "d", 4), ("c", "d", 5)]
    )
    logger.info(f"Topological order: {topological_order(graph, 'a')}")

    solver = DagShortestPathSolver(graph, NumericDistanceOps())
    logger.info(f"Shortest a -> d: {solver.shortest_path('a', 'd')}")

    matrix_graph = MatrixDAG.empty(4)
    for src, dst, distance in [(0, 1, 1.0), (0, 2, 2.0), (1, 2, 3.0), (1, 3, 4.0), (2, 3, 5.0)]:
        matrix_graph.add_edge(src, dst, distance)
    matrix_solver = DagShortestPathSolver(matrix_graph, NumericDistanceOps())
    logger.info(f"Shortest 0 -> 3: {matrix_solver.solve(0, 3, MatrixCache(4, 4))}")


if __name__ == "__main__":
    rng = np.random.default_rng(DEMO_SEED)
    values = rng.integers(-50, 50, size=12).tolist()

    demo_sorts(values)
    demo_heap(values)
    demo_functional()
    demo_shortest_path()
