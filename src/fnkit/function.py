"""
Point-free combinators for curried functions.

    flip        swap the two argument groups of a curried function
    with_index  give an iteration callback a running invocation index
    unary       call a variadic function with a single sequence
    apply_to    flipped function application
    guard       first-match dispatch over (predicate, handler) pairs
"""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Sequence, Any
import functools

from .logger import logger
from .option import compose, first_some, from_predicate, get_or_else, map_option

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

Branch = tuple[Callable[[A], bool], Callable[[A], B]]


def flip(f: Callable[..., Callable[..., C]]) -> Callable[..., Callable[..., C]]:
    """
    Flip the argument groups of a curried function.

    Example:
        prepend = lambda x: lambda y: x + y
        append = flip(prepend)

        prepend("x")("y")  # "xy"
        append("x")("y")   # "yx"
    """
    @functools.wraps(f)
    def flipped(*b: Any) -> Callable[..., C]:
        def take_first(*a: Any) -> C:
            return f(*a)(*b)
        return take_first
    return flipped


class _IndexedCallback(Generic[A, B]):
    """
    Plain callback that feeds a running index to an indexed callback.

    One instance per call of an adapted iterator; it is never shared.
    """

    def __init__(self, callback: Callable[[int], Callable[[A], B]]):
        self._callback = callback
        self.index = 0

    def __call__(self, element: A) -> B:
        result = self._callback(self.index)(element)
        self.index += 1
        return result


def with_index(
    iterate: Callable[[Callable[[A], B]], Callable[[Sequence[A]], C]],
) -> Callable[[Callable[[int], Callable[[A], B]]], Callable[[Sequence[A]], C]]:
    """
    Adapt a curried iteration function so its callback also gets an index.

    The index counts callback invocations, starting at 0 on every call of
    the adapted function. For a left-to-right map that is the element's
    position. An iterate that calls back out of order (a reversed walk, for
    instance) still sees 0, 1, 2, ... in call order, not positions.

    Example:
        map_list = lambda f: lambda xs: list(map(f, xs))
        map_with_index = with_index(map_list)

        map_with_index(lambda i: lambda x: x + i)([10, 20, 30])  # [10, 21, 32]
    """
    def adapt(
        callback: Callable[[int], Callable[[A], B]],
    ) -> Callable[[Sequence[A]], C]:
        def run(sequence: Sequence[A]) -> C:
            return iterate(_IndexedCallback(callback))(sequence)
        return run
    return adapt


def unary(f: Callable[..., B]) -> Callable[[Sequence[Any]], B]:
    """
    Convert a variadic function into one taking a single sequence.

    Example:
        biggest = unary(max)
        biggest([1, 3, 2])  # 3
    """
    @functools.wraps(f)
    def spread(xs: Sequence[Any]) -> B:
        return f(*xs)
    return spread


def apply_to(x: A) -> Callable[[Callable[[A], B]], B]:
    """
    Apply a function, taking the data first.

    Example:
        calc = [lambda n: n + 1, lambda n: n * 2]
        list(map(apply_to(5), calc))  # [6, 10]
    """
    def apply(f: Callable[[A], B]) -> B:
        return f(x)
    return apply


def guard(
    branches: Sequence[Branch[A, B]],
) -> Callable[[Callable[[], B]], Callable[[A], B]]:
    """
    Dispatch on the first branch whose predicate holds.

    Returns the handler output of the first ``(predicate, handler)`` pair
    whose predicate is truthy for the input. Later predicates and handlers
    are not evaluated. When nothing matches, ``fallback()`` is called and its
    value returned; it is not called otherwise.

    Failures raised by predicates, handlers or the fallback propagate
    unchanged.

    Example:
        classify = guard([
            (lambda n: n < 0, lambda n: "negative"),
            (lambda n: n == 0, lambda n: "zero"),
        ])(lambda: "positive")

        classify(-4)  # "negative"
        classify(7)   # "positive"
    """
    match = first_some(
        compose(map_option(handler), from_predicate(predicate))
        for predicate, handler in branches
    )

    def with_fallback(fallback: Callable[[], B]) -> Callable[[A], B]:
        def use_fallback() -> B:
            logger.debug("No branch matched; using fallback")
            return fallback()

        resolve = get_or_else(use_fallback)

        def dispatch(value: A) -> B:
            return resolve(match(value))
        return dispatch
    return with_fallback
