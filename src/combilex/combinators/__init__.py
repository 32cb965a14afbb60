"""Composition operators.

Every constructor takes parsers, lexers or string literals and returns a new
combinator. When all children are lexers the result is a lexer whose value is
the contiguous consumed span; otherwise values are structured (tuples for
``then``, lists for repetitions).

Python 3.13+. Zero external dependencies.
"""

from .alternation import Crawl, LexOptional, LexOr, Optional, Or, crawl, optional, or_
from .mapping import CONVERSION_ERRORS, Map, TryMap, map_, try_map
from .repetition import (
    AllOf,
    Count,
    Delimited,
    LexAllOf,
    LexCount,
    LexDelimited,
    LexMany,
    LexManyUntil,
    Many,
    ManyUntil,
    all_of,
    count,
    delimited,
    many,
)
from .sequence import LexThen, Pad, SkipThen, Then, ThenSkip, pad, skip_then, then, then_skip

__all__ = [
    "CONVERSION_ERRORS",
    "AllOf",
    "Count",
    "Crawl",
    "Delimited",
    "LexAllOf",
    "LexCount",
    "LexDelimited",
    "LexMany",
    "LexManyUntil",
    "LexOptional",
    "LexOr",
    "LexThen",
    "Many",
    "ManyUntil",
    "Map",
    "Optional",
    "Or",
    "Pad",
    "SkipThen",
    "Then",
    "ThenSkip",
    "TryMap",
    "all_of",
    "count",
    "crawl",
    "delimited",
    "many",
    "map_",
    "optional",
    "or_",
    "pad",
    "skip_then",
    "then",
    "then_skip",
    "try_map",
]
