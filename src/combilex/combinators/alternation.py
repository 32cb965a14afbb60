"""Ordered alternation: or_, optional and crawl.

Alternation is limited to ordered choice. A branch is tried only when the
previous branch failed, and a successful branch is never revisited.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from combilex.core.protocols import Lex, Outcome, Parse, coerce
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "Crawl",
    "LexOptional",
    "LexOr",
    "Optional",
    "Or",
    "crawl",
    "optional",
    "or_",
]


@dataclass(frozen=True, slots=True)
class Or[T](Parse[T]):
    """Try ``left``; if it fails, try ``right`` at the same position.

    When both fail, the error that got further into the input is returned
    (see ``ParseError.merge``).
    """

    left: Parse[T]
    right: Parse[T]

    def attempt(self, cursor: Cursor) -> Outcome[T]:
        left = self.left.attempt(cursor)
        if isinstance(left, ParseResult):
            return left
        right = self.right.attempt(cursor)
        if isinstance(right, ParseResult):
            return right
        return left.merge(right)


class LexOr(Or[str], Lex):
    """Alternation of two lexers; the chosen branch's span is the value."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Optional[T](Parse[T | None]):
    """Zero or one match; a failure becomes ``None`` without consuming input."""

    item: Parse[T]

    def attempt(self, cursor: Cursor) -> Outcome[T | None]:
        result = self.item.attempt(cursor)
        if isinstance(result, ParseError):
            return ParseResult(None, cursor)
        return result


class LexOptional(Optional[str], Lex):
    """Optional lexer; a failure is an empty match."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        result = self.item.attempt(cursor)
        if isinstance(result, ParseError):
            return ParseResult("", cursor)
        return result


@dataclass(frozen=True, slots=True)
class Crawl[T](Parse[T]):
    """Skip ahead one character at a time until ``item`` matches.

    The value is the item's value; the remaining input starts after the
    match. Fails with the item's last error when the end of input is reached
    without a match.
    """

    item: Parse[T]

    def attempt(self, cursor: Cursor) -> Outcome[T]:
        current = cursor
        while True:
            result = self.item.attempt(current)
            if isinstance(result, ParseResult) or current.is_eof:
                return result
            current = current.advance()


def or_(left: Parse[Any] | str, right: Parse[Any] | str) -> Parse[Any]:
    """Ordered choice between two items; also available as ``left | right``.

    Example:
        >>> (token("true") | token("false")).parse("false!").value
        'false'
    """
    left = coerce(left)
    right = coerce(right)
    if isinstance(left, Lex) and isinstance(right, Lex):
        return LexOr(left, right)
    return Or(left, right)


def optional(item: Parse[Any] | str) -> Parse[Any]:
    """Match ``item`` zero or one time.

    The value on a miss is ``None`` for parsers and ``""`` for lexers, so an
    optional lexer still composes into a lexer.
    """
    item = coerce(item)
    if isinstance(item, Lex):
        return LexOptional(item)
    return Optional(item)


def crawl(item: Parse[Any] | str) -> Parse[Any]:
    """Scan forward for the first position where ``item`` matches.

    Example:
        >>> crawl(integer()).parse("abc 42 def").value
        42
    """
    return Crawl(coerce(item))
