"""
Generic containers.

**Heap** (binary_heap.py)
    - MinHeap: array-backed binary heap ordered by a comparator

**Arena** (slot_map.py, linked_list.py)
    - SlotMap: generational arena
    - LinkedList / Cursor: doubly-linked list whose cursors do not hold the list

**Grid** (matrix2d.py)
    - Matrix2D: bound-checked 2D grid of arbitrary values

**DAG** (dag.py)
    - DAGTraverser: edges_from(node) -> (edge_data, dst) pairs
    - HashMapDAG, MatrixDAG: the two graph representations
"""

from .binary_heap import MinHeap
from .dag import (
    DAGTraverser,
    HashMapDAG,
    MatrixDAG,
    reachable_from,
    successors,
    topological_order,
)
from .linked_list import Cursor, LinkedList
from .matrix2d import Matrix2D
from .slot_map import SlotKey, SlotMap

__all__ = [
    # Heap
    "MinHeap",
    # Arena
    "SlotMap",
    "SlotKey",
    "LinkedList",
    "Cursor",
    # Grid
    "Matrix2D",
    # DAG
    "DAGTraverser",
    "HashMapDAG",
    "MatrixDAG",
    "successors",
    "reachable_from",
    "topological_order",
]
