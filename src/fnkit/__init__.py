"""
fnkit: Point-free combinators for curried functions.

Provides argument flipping, arity conversion, flipped application,
indexed iteration, and first-match guarded dispatch, built on a small
optional-value core.

Usage:
    from fnkit import flip, with_index, unary, apply_to, guard

    # First-match dispatch with a lazy fallback
    sign = guard([(lambda n: n < 0, lambda n: -1)])(lambda: 1)

    # Give a map callback its position
    map_with_index = with_index(lambda f: lambda xs: list(map(f, xs)))
    map_with_index(lambda i: lambda x: x + i)([10, 20, 30])
"""

from .function import flip, with_index, unary, apply_to, guard, Branch
from .option import (
    Some,
    Nothing,
    NOTHING,
    Option,
    is_some,
    is_nothing,
    from_predicate,
    map_option,
    get_or_else,
    first_some,
    compose,
    pipe,
)
from .logger import logger, setup_logger

__version__ = "0.1.0"
__all__ = [
    # Combinators
    "flip",
    "with_index",
    "unary",
    "apply_to",
    "guard",
    "Branch",
    # Optional values
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "is_some",
    "is_nothing",
    "from_predicate",
    "map_option",
    "get_or_else",
    "first_some",
    "compose",
    "pipe",
    # Logging
    "logger",
    "setup_logger",
]
