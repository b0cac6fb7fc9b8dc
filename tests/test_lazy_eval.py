"""Tests for functional/lazy_eval.py and functional/y_combinator.py"""

import pytest

from functional.lazy_eval import (
    MISSING,
    DictCache,
    KeyMappedCache,
    LazyEvalFixedPointApplier,
    LazyEvalFunction,
    ListCache,
    MatrixCache,
    SimpleFixedPointApplier,
    as_open_function,
)
from functional.y_combinator import (
    SelfReferentialFixedPointApplier,
    self_apply,
    y_combinator,
)


def open_fibonacci(fib, n):
    return n if n < 2 else fib(n - 1) + fib(n - 2)


def open_factorial(fact, n):
    return 1 if n == 0 else n * fact(n - 1)


class CountingFibonacci:
    """Open-form Fibonacci as an object with eval, counting its calls."""

    def __init__(self):
        self.calls = 0

    def eval(self, recursion, n):
        self.calls += 1
        return n if n < 2 else recursion(n - 1) + recursion(n - 2)


class TestCaches:
    def test_dict_cache(self):
        cache = DictCache()
        assert cache.lookup("a") is MISSING
        cache.store("a", 1)
        assert cache.lookup("a") == 1
        assert len(cache) == 1

    def test_none_is_cacheable(self):
        cache = DictCache()
        cache.store("a", None)
        assert cache.lookup("a") is None

    def test_list_cache_grows(self):
        cache = ListCache()
        assert cache.lookup(3) is MISSING
        cache.store(3, "x")
        assert cache.lookup(3) == "x"
        assert cache.lookup(1) is MISSING
        assert len(cache.slots) == 4
        with pytest.raises(IndexError):
            cache.store(-1, "y")

    def test_matrix_cache(self):
        cache = MatrixCache(2, 3)
        assert cache.lookup((1, 2)) is MISSING
        cache.store((1, 2), 7)
        assert cache.lookup((1, 2)) == 7
        with pytest.raises(IndexError):
            cache.store((2, 0), 1)

    def test_key_mapped_cache(self):
        inner = ListCache()
        cache = KeyMappedCache(inner, lambda key: key - 1000)
        cache.store(1002, "v")
        assert cache.lookup(1002) == "v"
        assert inner.lookup(2) == "v"
        assert len(inner.slots) == 3

    def test_missing_sentinel(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"


class TestLazyEvalFunction:
    def test_computes_once(self):
        calls = []

        def square(x):
            calls.append(x)
            return x * x

        lazy_square = LazyEvalFunction(square)
        assert lazy_square(4) == 16
        assert lazy_square.eval(4) == 16
        assert calls == [4]

    def test_custom_cache(self):
        cache = ListCache()
        lazy_double = LazyEvalFunction(lambda x: 2 * x, cache)
        assert lazy_double(5) == 10
        assert cache.lookup(5) == 10


class TestFixedPointAppliers:
    def test_simple_applier(self):
        fibonacci = SimpleFixedPointApplier(open_fibonacci)
        assert [fibonacci(n) for n in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_lazy_applier_fibonacci(self):
        fibonacci = LazyEvalFixedPointApplier(open_fibonacci)
        assert fibonacci(90) == 2880067194370816120

    def test_lazy_applier_computes_each_input_once(self):
        counting = CountingFibonacci()
        fibonacci = LazyEvalFixedPointApplier(counting, ListCache())
        assert fibonacci.eval(30) == 832040
        assert counting.calls == 31

    def test_simple_applier_recomputes(self):
        counting = CountingFibonacci()
        SimpleFixedPointApplier(counting).eval(10)
        assert counting.calls == 177

    def test_cached_none(self):
        """A None result is cached and not recomputed."""
        calls = []

        def open_none(recursion, n):
            calls.append(n)
            return None if n == 0 else recursion(n - 1)

        applier = LazyEvalFixedPointApplier(open_none)
        assert applier(3) is None
        assert applier(3) is None
        assert calls == [3, 2, 1, 0]

    def test_cyclic_recursion_raises(self):
        applier = LazyEvalFixedPointApplier(lambda recursion, n: recursion((n + 1) % 3))
        with pytest.raises(ValueError, match="Cyclic recursion"):
            applier(0)

    def test_as_open_function(self):
        counting = CountingFibonacci()
        assert as_open_function(counting) == counting.eval
        assert as_open_function(open_fibonacci) is open_fibonacci
        with pytest.raises(TypeError):
            as_open_function(42)


class TestYCombinator:
    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_factorial(self, n, expected):
        factorial = y_combinator(open_factorial)
        assert factorial(n) == expected

    def test_fibonacci(self):
        fibonacci = y_combinator(open_fibonacci)
        assert fibonacci(15) == 610

    def test_object_with_eval(self):
        assert y_combinator(CountingFibonacci())(10) == 55

    def test_self_apply(self):
        factorial = self_apply(lambda m, n: 1 if n == 0 else n * m(m, n - 1))
        assert factorial(6) == 720

    def test_self_referential_applier(self):
        factorial = SelfReferentialFixedPointApplier(open_factorial)
        assert factorial(5) == 120
        assert factorial.eval(7) == 5040
