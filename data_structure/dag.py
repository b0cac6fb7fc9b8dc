"""
Traversal interface for directed acyclic graphs.

Algorithms over a DAG only need to enumerate the edges leaving a node, so the
graph representation is abstracted behind `DAGTraverser.edges_from`, which
yields `(edge_data, destination)` pairs. Two representations are provided:

- HashMapDAG: graph[src][dst] = edge_data
- MatrixDAG:  matrix[src][dst] = edge_data, or None when there is no edge
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Generic, Protocol, TypeVar

from typing_extensions import Self

from data_structure.matrix2d import Matrix2D
from utils.dag_functionals import reachable_nodes, topological_sort

N = TypeVar("N")
E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)


class DAGTraverser(Protocol[N, E_co]):
    def edges_from(self, node: N) -> Iterable[tuple[E_co, N]]: ...


class HashMapDAG(Generic[N, E]):
    """
    Adjacency map graph. Nodes absent as keys have no outgoing edges.
    """

    def __init__(self, adjacency: Mapping[N, Mapping[N, E]] | None = None) -> None:
        self._adjacency: dict[N, dict[N, E]] = {
            src: dict(edges) for src, edges in (adjacency or {}).items()
        }

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[N, N, E]]) -> Self:
        """Builds a graph from (src, dst, edge_data) triples."""
        graph = cls()
        for src, dst, edge_data in edges:
            graph.add_edge(src, dst, edge_data)
        return graph

    def add_edge(self, src: N, dst: N, edge_data: E) -> None:
        self._adjacency.setdefault(src, {})[dst] = edge_data

    def edges_from(self, node: N) -> Iterator[tuple[E, N]]:
        for dst, edge_data in self._adjacency.get(node, {}).items():
            yield edge_data, dst

    def nodes(self) -> frozenset[N]:
        all_nodes = set(self._adjacency)
        for edges in self._adjacency.values():
            all_nodes.update(edges)
        return frozenset(all_nodes)


class MatrixDAG(Generic[E]):
    """
    Square adjacency matrix graph over nodes 0..n-1.
    """

    def __init__(self, matrix: Matrix2D[E | None]) -> None:
        if matrix.rows != matrix.cols:
            raise ValueError(f"Adjacency matrix must be square, got {matrix.shape}")
        self.matrix = matrix

    @classmethod
    def empty(cls, node_count: int) -> Self:
        return cls(Matrix2D.defaulted(node_count, node_count))

    @property
    def node_count(self) -> int:
        return self.matrix.rows

    def add_edge(self, src: int, dst: int, edge_data: E) -> None:
        self.matrix.set(src, dst, edge_data)

    def edges_from(self, node: int) -> Iterator[tuple[E, int]]:
        for dst, edge_data in enumerate(self.matrix.row(node)):
            if edge_data is not None:
                yield edge_data, dst

    def nodes(self) -> frozenset[int]:
        return frozenset(range(self.node_count))


def successors(traverser: DAGTraverser[N, E]) -> Callable[[N], Iterator[N]]:
    """Projects a traverser onto its destination nodes."""
    return lambda node: (dst for _, dst in traverser.edges_from(node))


def reachable_from(traverser: DAGTraverser[N, E], *roots: N) -> tuple[N, ...]:
    """Nodes reachable from the roots, breadth first."""
    return reachable_nodes(roots, successors(traverser))


def topological_order(traverser: DAGTraverser[N, E], *roots: N) -> tuple[N, ...]:
    """
    Topological order of the nodes reachable from the roots.

    Raises:
        ValueError: If a cycle is reachable.
    """
    return topological_sort(roots, successors(traverser))
