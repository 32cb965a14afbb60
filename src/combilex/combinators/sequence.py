"""Sequencing operators: then, skip_then, then_skip and pad.

Sequencing is fail-fast. The first child that fails ends the whole sequence
with that child's error; later children are never attempted.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from combilex.core.protocols import Lex, Outcome, Parse, coerce, spanned
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "LexThen",
    "Pad",
    "SkipThen",
    "Then",
    "ThenSkip",
    "pad",
    "skip_then",
    "then",
    "then_skip",
]


@dataclass(frozen=True, slots=True)
class Then[A, B](Parse[tuple[A, B]]):
    """Run ``first``, then ``second`` on what remains; value is the pair."""

    first: Parse[A]
    second: Parse[B]

    def attempt(self, cursor: Cursor) -> Outcome[tuple[A, B]]:
        first = self.first.attempt(cursor)
        if isinstance(first, ParseError):
            return first
        second = self.second.attempt(first.cursor)
        if isinstance(second, ParseError):
            return second
        return ParseResult((first.value, second.value), second.cursor)


class LexThen(Then[str, str], Lex):
    """Two lexers in sequence; value is the joined span."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, Then.attempt(self, cursor))


@dataclass(frozen=True, slots=True)
class SkipThen[B](Parse[B]):
    """Run ``first`` then ``second``; keep only ``second``'s value."""

    first: Parse[Any]
    second: Parse[B]

    def attempt(self, cursor: Cursor) -> Outcome[B]:
        first = self.first.attempt(cursor)
        if isinstance(first, ParseError):
            return first
        return self.second.attempt(first.cursor)


@dataclass(frozen=True, slots=True)
class ThenSkip[A](Parse[A]):
    """Run ``first`` then ``second``; keep only ``first``'s value."""

    first: Parse[A]
    second: Parse[Any]

    def attempt(self, cursor: Cursor) -> Outcome[A]:
        first = self.first.attempt(cursor)
        if isinstance(first, ParseError):
            return first
        second = self.second.attempt(first.cursor)
        if isinstance(second, ParseError):
            return second
        return ParseResult(first.value, second.cursor)


@dataclass(frozen=True, slots=True)
class Pad[T](Parse[T]):
    """Require ``left`` before and ``right`` after ``item``; keep the item's value."""

    left: Parse[Any]
    right: Parse[Any]
    item: Parse[T]

    def attempt(self, cursor: Cursor) -> Outcome[T]:
        left = self.left.attempt(cursor)
        if isinstance(left, ParseError):
            return left
        item = self.item.attempt(left.cursor)
        if isinstance(item, ParseError):
            return item
        right = self.right.attempt(item.cursor)
        if isinstance(right, ParseError):
            return right
        return ParseResult(item.value, right.cursor)


def then(first: Parse[Any] | str, second: Parse[Any] | str) -> Parse[Any]:
    """Sequence two items.

    Two lexers give a lexer of the joined span; otherwise the value is the
    tuple ``(first_value, second_value)``.

    Example:
        >>> then(char("a"), digit()).parse("a1!")
        ParseResult(value='a1', cursor=Cursor(source='a1!', pos=2))
        >>> then(char("a").text(), digit()).parse("a1!").value
        ('a', '1')
    """
    first = coerce(first)
    second = coerce(second)
    if isinstance(first, Lex) and isinstance(second, Lex):
        return LexThen(first, second)
    return Then(first, second)


def skip_then(first: Parse[Any] | str, second: Parse[Any] | str) -> Parse[Any]:
    """Sequence two items and keep the second value."""
    return SkipThen(coerce(first), coerce(second))


def then_skip(first: Parse[Any] | str, second: Parse[Any] | str) -> Parse[Any]:
    """Sequence two items and keep the first value."""
    return ThenSkip(coerce(first), coerce(second))


def pad(left: Parse[Any] | str, right: Parse[Any] | str, item: Parse[Any] | str) -> Parse[Any]:
    """Surround ``item`` with ``left`` and ``right``.

    Example:
        >>> pad(">", "<", integer()).parse(">123<").value
        123
    """
    return Pad(coerce(left), coerce(right), coerce(item))
