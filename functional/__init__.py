"""
Functional programming utilities: memoisation and fixed points.

**Lazy evaluation** (lazy_eval.py)
    - Cache, DictCache, ListCache, MatrixCache, KeyMappedCache
    - LazyEvalFunction: memoised plain function
    - SimpleFixedPointApplier, LazyEvalFixedPointApplier: recursion from open form

**Y combinator** (y_combinator.py)
    - y_combinator(f): fixed point by self application
"""

from .lazy_eval import (
    MISSING,
    Cache,
    DictCache,
    FixedPointFunction,
    KeyMappedCache,
    LazyEvalFixedPointApplier,
    LazyEvalFunction,
    ListCache,
    MatrixCache,
    SimpleFixedPointApplier,
    as_open_function,
)
from .y_combinator import SelfReferentialFixedPointApplier, self_apply, y_combinator

__all__ = [
    # Lazy evaluation
    "MISSING",
    "Cache",
    "DictCache",
    "ListCache",
    "MatrixCache",
    "KeyMappedCache",
    "LazyEvalFunction",
    "FixedPointFunction",
    "as_open_function",
    "SimpleFixedPointApplier",
    "LazyEvalFixedPointApplier",
    # Y combinator
    "y_combinator",
    "self_apply",
    "SelfReferentialFixedPointApplier",
]
