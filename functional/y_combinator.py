"""
Y combinator.

Python allows direct recursion, so none of this is needed in practice; it
shows how recursion can be recovered from anonymous functions alone.

In lambda calculus a function cannot refer to itself by name. Two ways out:

1. Pass the function to itself. A self-accepting function m is called as
   m(m)(n), e.g.
       m = lambda m: lambda n: 1 if n == 0 else n * m(m)(n - 1)

2. Write it in open form, taking "the finished recursive function" as an
   argument:
       f = lambda r: lambda n: 1 if n == 0 else n * r(n - 1)
   The recursive function r is a fixed point of f: f(r) = r.

The Y combinator turns 2 into 1. With m = (m -> f(m(m))), m(m) = f(m(m)), so
m(m) is the fixed point:

    Y = f -> (m -> f(m(m))) (m -> f(m(m)))

Python evaluates arguments eagerly, so m(m) must be delayed behind a lambda
(the Z combinator form) or it would recurse forever while building it.
Functions here use the uncurried open form f(recursion, input), the same as
in lazy_eval.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from functional.lazy_eval import OpenRecursive, as_open_function

In = TypeVar("In")
Out = TypeVar("Out")


def self_apply(self_accepting: Callable[[Any, In], Out]) -> Callable[[In], Out]:
    """
    Applies a self-accepting function to itself: m(m).

    Uncurried, m(m) is input -> m(m, input).
    """
    return lambda input: self_accepting(self_accepting, input)


def y_combinator(func: "OpenRecursive[In, Out]") -> Callable[[In], Out]:
    """
    Returns the fixed point of an open-form recursive function.

    Example:
        >>> factorial = y_combinator(lambda r, n: 1 if n == 0 else n * r(n - 1))
        >>> factorial(5)
        120
    """
    open_func = as_open_function(func)

    # m = (m, input) -> f(input2 -> m(m, input2), input)
    def wrapped(m: Callable[[Any, In], Out], input: In) -> Out:
        return open_func(lambda inner: m(m, inner), input)

    return self_apply(wrapped)


class SelfReferentialFixedPointApplier(Generic[In, Out]):
    """When a function may refer to itself, the fixed point is just a method calling itself."""

    def __init__(self, func: "OpenRecursive[In, Out]") -> None:
        self._open = as_open_function(func)

    def eval(self, input: In) -> Out:
        return self._open(self.eval, input)

    __call__ = eval
