"""
Pure helpers with no algorithm-specific dependencies.

Modules:
    search          - Comparator-driven binary search
    dag_functionals - DAG reachability and topological sort
"""
