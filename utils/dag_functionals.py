"""
DAG (Directed Acyclic Graph) utilities.

Graphs are given implicitly by a `successors` function, so the same helpers
work for hash-map and matrix backed graphs alike.

Functions:
    reachable_nodes(roots, successors) - Breadth-first reachability
    topological_sort(roots, successors) - Kahn's algorithm for topological ordering
"""

from collections import deque
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def reachable_nodes(
    roots: Iterable[T], successors: Callable[[T], Iterable[T]]
) -> tuple[T, ...]:
    """
    Returns every node reachable from the roots, in breadth-first order.

    Args:
        roots: Starting nodes (included in the result).
        successors: Function returning the nodes a given node points to.
    """
    seen: set[T] = set()
    ordered: list[T] = []
    queue = deque(roots)

    while queue:
        current = queue.popleft()

        # Avoid cycles and diamonds
        if current in seen:
            continue

        seen.add(current)
        ordered.append(current)
        queue.extend(successors(current))

    return tuple(ordered)


def topological_sort(
    roots: Iterable[T], successors: Callable[[T], Iterable[T]]
) -> tuple[T, ...]:
    """
    Returns the nodes reachable from the roots in topological order using Kahn's algorithm.

    Args:
        roots: Starting nodes.
        successors: Function returning the nodes a given node points to.

    Returns:
        Nodes ordered so parents come before children.

    Raises:
        ValueError: If the reachable graph contains a cycle.
    """
    all_nodes = reachable_nodes(roots, successors)
    children_of: dict[T, tuple[T, ...]] = {
        node: tuple(successors(node)) for node in all_nodes
    }

    in_degree: dict[T, int] = {node: 0 for node in all_nodes}
    for children in children_of.values():
        for child in children:
            in_degree[child] += 1

    queue = deque(node for node in all_nodes if in_degree[node] == 0)
    sorted_list: list[T] = []

    while queue:
        node = queue.popleft()
        sorted_list.append(node)

        for child in children_of[node]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                queue.append(child)

    if len(sorted_list) != len(all_nodes):
        raise ValueError("Graph contains a cycle")

    return tuple(sorted_list)
