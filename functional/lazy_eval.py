"""
Lazy evaluation (memoisation) of plain and recursive functions.

A recursive function can be written in open form: instead of calling itself
by name, it receives the function to recurse with as its first argument,

    fib = lambda recurse, n: n if n < 2 else recurse(n - 1) + recurse(n - 2)

Curried, such a function f has a fixed point r with f(r) = r, and r is the
ordinary recursive function. Writing it this way lets an applier decide what
`recurse` does: call straight back into f, or go through a cache first.

Caches are pluggable (`Cache`) so a dense key space can use a list or a
matrix instead of a dict.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Any, Final, Generic, Protocol, TypeVar, cast

from typing_extensions import TypeAliasType

from data_structure.matrix2d import Matrix2D

logger = logging.getLogger(__name__)

K = TypeVar("K")
K2 = TypeVar("K2")
In = TypeVar("In")
Out = TypeVar("Out")
V = TypeVar("V")


class _Missing:
    """Marker for a cache miss, distinct from a cached None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


# Caches


class Cache(ABC, Generic[K, V]):
    @abstractmethod
    def lookup(self, key: K) -> V | _Missing:
        """Returns the cached value or MISSING."""

    @abstractmethod
    def store(self, key: K, value: V) -> None: ...


class DictCache(Cache[K, V]):
    def __init__(self) -> None:
        self.entries: dict[K, V] = {}

    def lookup(self, key: K) -> V | _Missing:
        return self.entries.get(key, MISSING)  # type: ignore[arg-type]

    def store(self, key: K, value: V) -> None:
        self.entries[key] = value

    def __len__(self) -> int:
        return len(self.entries)


class ListCache(Cache[int, V]):
    """
    Cache over non-negative integer keys. Grows on store; looking up beyond
    the end is a miss.
    """

    def __init__(self) -> None:
        self.slots: list[V | _Missing] = []

    def lookup(self, key: int) -> V | _Missing:
        if not 0 <= key < len(self.slots):
            return MISSING
        return self.slots[key]

    def store(self, key: int, value: V) -> None:
        if key < 0:
            raise IndexError(f"Negative cache key: {key}")
        if key >= len(self.slots):
            self.slots.extend([MISSING] * (key + 1 - len(self.slots)))
        self.slots[key] = value


class MatrixCache(Cache[tuple[int, int], V]):
    """Cache over (row, col) keys stored in a Matrix2D; empty cells hold MISSING."""

    def __init__(self, rows: int, cols: int) -> None:
        self.matrix: Matrix2D[V | _Missing] = Matrix2D(rows, cols, MISSING)

    def lookup(self, key: tuple[int, int]) -> V | _Missing:
        row, col = key
        return self.matrix.at(row, col)

    def store(self, key: tuple[int, int], value: V) -> None:
        row, col = key
        self.matrix.set(row, col, value)


class KeyMappedCache(Cache[K, V], Generic[K, K2, V]):
    """
    Translates keys before reaching an underlying cache, e.g. shifting a
    large integer offset so that a ListCache stays small.
    """

    def __init__(self, cache: Cache[K2, V], key_map: Callable[[K], K2]) -> None:
        self.cache = cache
        self.key_map = key_map

    def lookup(self, key: K) -> V | _Missing:
        return self.cache.lookup(self.key_map(key))

    def store(self, key: K, value: V) -> None:
        self.cache.store(self.key_map(key), value)


# Plain functions


class LazyEvalFunction(Generic[In, Out]):
    """
    Memoises a non-recursive function. Recursive calls made by func itself
    bypass the cache; use LazyEvalFixedPointApplier for those.
    """

    def __init__(self, func: Callable[[In], Out], cache: Cache[In, Out] | None = None) -> None:
        self.func = func
        self.cache: Cache[In, Out] = cache if cache is not None else DictCache()

    def eval(self, input: In) -> Out:
        cached = self.cache.lookup(input)
        if cached is not MISSING:
            return cast(Out, cached)

        value = self.func(input)
        self.cache.store(input, value)
        return value

    __call__ = eval


# Recursive functions


class FixedPointFunction(Protocol[In, Out]):
    """A recursive function in open form: recursion is passed in."""

    def eval(self, recursion: Callable[[In], Out], input: In) -> Out: ...


_Arg = TypeVar("_Arg")
_Res = TypeVar("_Res")
OpenRecursive = TypeAliasType(
    "OpenRecursive",
    FixedPointFunction[_Arg, _Res] | Callable[[Callable[[_Arg], _Res], _Arg], _Res],
    type_params=(_Arg, _Res),
)


def as_open_function(func: Any) -> Callable[[Callable[[In], Out], In], Out]:
    """Accepts either a FixedPointFunction object or a plain f(recursion, input) callable."""
    eval_method = getattr(func, "eval", None)
    if callable(eval_method):
        return eval_method
    if callable(func):
        return func
    raise TypeError(f"Not a fixed point function: {func!r}")


class SimpleFixedPointApplier(Generic[In, Out]):
    """Ties the knot directly: recursion calls straight back into func."""

    def __init__(self, func: "OpenRecursive[In, Out]") -> None:
        self._open = as_open_function(func)

    def eval(self, input: In) -> Out:
        return self._open(self.eval, input)

    __call__ = eval


class LazyEvalFixedPointApplier(Generic[In, Out]):
    """
    Ties the knot through a cache: every recursive call is looked up first,
    so each input is computed at most once.

    Raises ValueError when an input is requested again while it is still being
    computed, which means the recursion is cyclic.
    """

    def __init__(
        self, func: "OpenRecursive[In, Out]", cache: Cache[In, Out] | None = None
    ) -> None:
        self._open = as_open_function(func)
        self.cache: Cache[In, Out] = cache if cache is not None else DictCache()
        self._in_progress: set[Hashable] = set()

    def eval(self, input: In) -> Out:
        cached = self.cache.lookup(input)
        if cached is not MISSING:
            return cast(Out, cached)

        if input in self._in_progress:
            raise ValueError(f"Cyclic recursion detected at input {input!r}")

        self._in_progress.add(input)
        try:
            value = self._open(self.eval, input)
        finally:
            self._in_progress.discard(input)

        logger.debug(f"Computed {input!r} -> {value!r}")
        self.cache.store(input, value)
        return value

    __call__ = eval
