"""Tests for data_structure/dag.py and utils/dag_functionals.py"""

import pytest

from data_structure.dag import (
    HashMapDAG,
    MatrixDAG,
    reachable_from,
    successors,
    topological_order,
)
from data_structure.matrix2d import Matrix2D
from utils.dag_functionals import reachable_nodes, topological_sort


def adjacency(graph: dict):
    return lambda node: graph.get(node, ())


def assert_before(order, parent, child):
    assert order.index(parent) < order.index(child)


class TestTopologicalSort:
    def test_linear_chain(self):
        """A -> B -> C should give [A, B, C]"""
        graph = {"A": ["B"], "B": ["C"], "C": []}
        result = topological_sort(["A"], adjacency(graph))
        assert list(result) == ["A", "B", "C"]

    def test_diamond(self):
        """
        Diamond: A -> B, A -> C, B -> D, C -> D
        Valid orders: [A, B, C, D] or [A, C, B, D]
        """
        graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}
        result = topological_sort(["A"], adjacency(graph))

        assert_before(result, "A", "B")
        assert_before(result, "A", "C")
        assert_before(result, "B", "D")
        assert_before(result, "C", "D")

    def test_disconnected_roots(self):
        """Roots with no edges should still be included."""
        result = topological_sort(["A", "B", "C"], adjacency({}))
        assert set(result) == {"A", "B", "C"}

    def test_only_reachable_nodes(self):
        graph = {"A": ["B"], "X": ["A"]}
        result = topological_sort(["A"], adjacency(graph))
        assert result == ("A", "B")

    def test_no_roots(self):
        """No roots should return an empty tuple."""
        assert topological_sort([], adjacency({})) == ()

    def test_cycle_detection(self):
        """Graph with cycle should raise ValueError."""
        graph = {"A": ["B"], "B": ["C"], "C": ["A"]}
        with pytest.raises(ValueError, match="cycle"):
            topological_sort(["A"], adjacency(graph))

    def test_self_loop_detection(self):
        """Node with self-loop should raise ValueError."""
        with pytest.raises(ValueError, match="cycle"):
            topological_sort(["A"], adjacency({"A": ["A"]}))

    def test_complex_dag(self):
        """
        More complex DAG:
        1 -> 2, 3
        2 -> 4
        3 -> 4, 5
        4 -> 6
        5 -> 6
        """
        graph = {1: [2, 3], 2: [4], 3: [4, 5], 4: [6], 5: [6]}
        result = topological_sort([1], adjacency(graph))

        assert len(result) == 6
        for parent, children in graph.items():
            for child in children:
                assert_before(result, parent, child)


class TestReachableNodes:
    def test_breadth_first_order(self):
        graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}
        assert reachable_nodes(["A"], adjacency(graph)) == ("A", "B", "C", "D")

    def test_cycles_terminate(self):
        graph = {"A": ["B"], "B": ["A"]}
        assert reachable_nodes(["A"], adjacency(graph)) == ("A", "B")


class TestHashMapDAG:
    def test_from_edges(self):
        graph = HashMapDAG.from_edges([("a", "b", 1), ("a", "c", 2), ("b", "c", 3)])
        assert list(graph.edges_from("a")) == [(1, "b"), (2, "c")]
        assert graph.nodes() == frozenset({"a", "b", "c"})

    def test_missing_node_is_sink(self):
        graph = HashMapDAG({"a": {"b": 1}})
        assert list(graph.edges_from("b")) == []
        assert list(graph.edges_from("unknown")) == []

    def test_traversal_helpers(self):
        graph = HashMapDAG.from_edges([("a", "b", 1), ("b", "c", 1), ("a", "c", 1)])
        assert list(successors(graph)("a")) == ["b", "c"]
        assert reachable_from(graph, "b") == ("b", "c")
        assert topological_order(graph, "a") == ("a", "b", "c")

    def test_cycle_in_graph(self):
        graph = HashMapDAG.from_edges([("a", "b", 1), ("b", "a", 1)])
        with pytest.raises(ValueError, match="cycle"):
            topological_order(graph, "a")


class TestMatrixDAG:
    def test_edges_skip_empty_cells(self):
        graph = MatrixDAG.empty(3)
        graph.add_edge(0, 2, 5.0)
        graph.add_edge(0, 1, 1.0)
        assert list(graph.edges_from(0)) == [(1.0, 1), (5.0, 2)]
        assert list(graph.edges_from(2)) == []
        assert graph.node_count == 3
        assert graph.nodes() == frozenset({0, 1, 2})

    def test_non_square_rejected(self):
        with pytest.raises(ValueError):
            MatrixDAG(Matrix2D.defaulted(2, 3))

    def test_topological_order(self):
        graph = MatrixDAG.empty(4)
        for src, dst in [(0, 2), (2, 1), (1, 3), (0, 3)]:
            graph.add_edge(src, dst, 1)
        assert topological_order(graph, 0) == (0, 2, 1, 3)
