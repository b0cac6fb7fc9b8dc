"""
Shortest paths in a DAG by memoised recursion.

The best path from src to dst either is empty (src == dst) or takes one edge
src -> next and continues with the best path from next to dst:

    best(src, dst) = min over edges (e, next) of e + best(next, dst)

Written as an open-recursive FixedPointFunction, the solver is tied through a
LazyEvalFixedPointApplier, so every (node, dst) pair is solved once and the
whole computation is linear in the size of the reachable graph. Queries fill
the cache in reverse topological order, which keeps the recursion one edge
deep however long the paths are.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from typing_extensions import TypeAliasType

from data_structure.dag import DAGTraverser, topological_order
from functional.lazy_eval import Cache, DictCache, LazyEvalFixedPointApplier

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")
D = TypeVar("D")
E_contra = TypeVar("E_contra", contravariant=True)


class DistanceOps(Protocol[E_contra, D]):
    """How edge data turns into distances, and how distances add and compare."""

    def get_distance(self, edge: E_contra) -> D: ...

    def add_distance(self, a: D, b: D) -> D: ...

    def zero_distance(self) -> D: ...

    def compare_distance(self, a: D, b: D) -> int: ...


class NumericDistanceOps:
    """The edge data is the distance (int or float)."""

    def get_distance(self, edge: float) -> float:
        return edge

    def add_distance(self, a: float, b: float) -> float:
        return a + b

    def zero_distance(self) -> float:
        return 0

    def compare_distance(self, a: float, b: float) -> int:
        return (a > b) - (a < b)


@dataclass(frozen=True)
class PathInfo(Generic[N, D]):
    """First hop of a best path and the total distance left to travel."""

    next_node: N
    distance_to_destination: D


_Node = TypeVar("_Node")
PathQuery = TypeAliasType("PathQuery", tuple[_Node, _Node], type_params=(_Node,))


class DagShortestPathSolver(Generic[N, E, D]):
    """
    Open-recursive shortest path step over (src, dst) queries.

    Returns None when dst cannot be reached from src. Among equally short
    paths, the first edge enumerated by the traverser wins.
    """

    def __init__(
        self, traverser: DAGTraverser[N, E], distance_ops: DistanceOps[E, D]
    ) -> None:
        self.traverser = traverser
        self.distance_ops = distance_ops

    def eval(
        self,
        recursion: Callable[[PathQuery[N]], PathInfo[N, D] | None],
        input: PathQuery[N],
    ) -> PathInfo[N, D] | None:
        src, dst = input
        ops = self.distance_ops

        if src == dst:
            return PathInfo(dst, ops.zero_distance())

        best: PathInfo[N, D] | None = None
        for edge, next_node in self.traverser.edges_from(src):
            rest = recursion((next_node, dst))
            if rest is None:
                continue
            distance = ops.add_distance(
                ops.get_distance(edge), rest.distance_to_destination
            )
            if best is None or ops.compare_distance(distance, best.distance_to_destination) < 0:
                best = PathInfo(next_node, distance)

        return best

    def solve(
        self,
        src: N,
        dst: N,
        cache: Cache[PathQuery[N], PathInfo[N, D] | None] | None = None,
    ) -> PathInfo[N, D] | None:
        """
        Best first hop and distance from src to dst, or None if unreachable.

        Args:
            cache: Memo for (node, dst) queries, a DictCache by default. A
                MatrixCache fits graphs over nodes 0..n-1.

        Raises:
            ValueError: If a cycle is reachable from src.
        """
        applier = self._filled_applier(src, dst, cache)
        result = applier.eval((src, dst))
        logger.debug(f"Shortest path {src!r} -> {dst!r}: {result}")
        return result

    def shortest_path(
        self,
        src: N,
        dst: N,
        cache: Cache[PathQuery[N], PathInfo[N, D] | None] | None = None,
    ) -> tuple[list[N], D] | None:
        """Full node sequence from src to dst and its distance, or None if unreachable."""
        applier = self._filled_applier(src, dst, cache)

        first = applier.eval((src, dst))
        if first is None:
            return None

        nodes = [src]
        node = src
        while node != dst:
            step = applier.eval((node, dst))
            assert step is not None
            node = step.next_node
            nodes.append(node)

        return nodes, first.distance_to_destination

    def _filled_applier(
        self,
        src: N,
        dst: N,
        cache: Cache[PathQuery[N], PathInfo[N, D] | None] | None,
    ) -> LazyEvalFixedPointApplier[PathQuery[N], PathInfo[N, D] | None]:
        """
        Applier whose cache holds (node, dst) for every node reachable from src.

        Nodes are solved sinks first, so each step finds its successors
        cached and the recursion never goes deeper than one edge.
        """
        applier = LazyEvalFixedPointApplier(
            self, cache if cache is not None else DictCache()
        )
        for node in reversed(topological_order(self.traverser, src)):
            applier.eval((node, dst))
        return applier
