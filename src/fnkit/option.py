"""
Optional values and the helpers the combinators are built from.

An option is either ``Some(value)`` or the ``NOTHING`` singleton. It lets a
function say "no result" without raising, which is what a predicate that
didn't match needs.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Iterable
from dataclasses import dataclass

from toolz import compose, pipe, curried

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value."""
    value: T


@dataclass(frozen=True)
class Nothing:
    """An absent value. Use the ``NOTHING`` instance."""


NOTHING = Nothing()

Option = Some[T] | Nothing


def is_some(opt: Option[T]) -> bool:
    return isinstance(opt, Some)


def is_nothing(opt: Option[T]) -> bool:
    return isinstance(opt, Nothing)


def from_predicate(predicate: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    """
    Lift a predicate into a function returning ``Some(value)`` when the
    predicate holds and ``NOTHING`` otherwise.

    Example:
        positive = from_predicate(lambda x: x > 0)
        positive(3)   # Some(value=3)
        positive(-1)  # NOTHING
    """
    def lifted(value: T) -> Option[T]:
        return Some(value) if predicate(value) else NOTHING
    return lifted


def map_option(f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Apply ``f`` inside a present option. ``f`` is not called on NOTHING."""
    def mapped(opt: Option[T]) -> Option[U]:
        if isinstance(opt, Some):
            return Some(f(opt.value))
        return NOTHING
    return mapped


def get_or_else(fallback: Callable[[], T]) -> Callable[[Option[T]], T]:
    """
    Unwrap an option, calling ``fallback()`` only when it is absent.
    """
    def resolve(opt: Option[T]) -> T:
        if isinstance(opt, Some):
            return opt.value
        return fallback()
    return resolve


def first_some(
    fns: Iterable[Callable[[T], Option[U]]],
) -> Callable[[T], Option[U]]:
    """
    Combine optional-returning functions so the first present result wins.

    Functions are called left to right on the same input and the scan stops
    at the first ``Some``; the remaining functions are never called. With no
    functions, or when every one returns NOTHING, the result is NOTHING.

    Results are produced lazily, so ``next`` stops the scan at the first
    match. ``fns`` is materialised once, so a generator can be passed and the
    combined function reused.
    """
    candidates = tuple(fns)

    def combined(value: T) -> Option[U]:
        return pipe(
            candidates,
            curried.map(lambda fn: fn(value)),
            curried.filter(is_some),
            lambda found: next(found, NOTHING),
        )
    return combined
