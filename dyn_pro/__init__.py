"""
Dynamic programming on top of functional.lazy_eval.

- dag_shortest_path: shortest paths in a DAG as a memoised fixed point
"""

from .dag_shortest_path import (
    DagShortestPathSolver,
    DistanceOps,
    NumericDistanceOps,
    PathInfo,
)

__all__ = [
    "DagShortestPathSolver",
    "DistanceOps",
    "NumericDistanceOps",
    "PathInfo",
]
