"""The two combinator contracts: Parse and Lex.

Every lexer, parser and combinator in combilex derives from one of these two
base classes and implements a single method::

    def attempt(self, cursor: Cursor) -> ParseResult[T] | ParseError

``attempt`` either consumes a prefix of the input and returns the value with
the cursor after it, or returns a ParseError describing what was expected.
It never raises for ordinary mismatches and never mutates state: combinators
are frozen dataclasses, so one instance can be reused any number of times and
from several threads at once.

Parse vs Lex:
    Parse[T] produces an arbitrary typed value.
    Lex is a Parse[str] whose value is exactly the consumed span, which is
    what makes ``value + result.rest == input`` hold for every lexer. An
    operator whose children are all lexers is itself a lexer; as soon as one
    child is a plain parser the operator produces structured values instead
    (tuples for ``then``, lists for ``many``/``count``).

Operator methods (``then``, ``many``, ``map``...) are thin wrappers over the
constructor functions in ``combilex.combinators``; the imports are local
because the combinator classes themselves derive from Parse/Lex.

Python 3.13+.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from combilex.diagnostics import DiagnosticCode, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult, as_cursor

__all__ = [
    "FunctionLexer",
    "FunctionParser",
    "Lex",
    "Outcome",
    "Parse",
    "coerce",
    "lexer",
    "parser",
    "spanned",
]

logger = logging.getLogger(__name__)

type Outcome[T] = ParseResult[T] | ParseError


class Parse[T](ABC):
    """Base class for everything that consumes input and produces a value."""

    __slots__ = ()

    @abstractmethod
    def attempt(self, cursor: Cursor) -> Outcome[T]:
        """Match at cursor; return value and next cursor, or a ParseError."""

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, source: str | Cursor) -> Outcome[T]:
        """Run this parser on text or a cursor.

        Errors leaving this call have their origin set to ``source`` so that
        ``ParseError.matched`` reports the input consumed before the failure.

        Example:
            >>> value, rest = digit().many(1).parse("123abc")
            >>> value, rest
            ('123', 'abc')
        """
        cursor = as_cursor(source)
        result = self.attempt(cursor)
        if isinstance(result, ParseError):
            return result.offset(cursor)
        return result

    def parse_str(self, text: str, *, complete: bool = True) -> T:
        """Parse text at a conversion boundary and return the bare value.

        This is the place to implement ``from_str``-style constructors: the
        borrowing ParseError is converted to an OwnedParseError and raised.

        Args:
            text: Input text
            complete: Also require the whole input to be consumed

        Returns:
            The parsed value

        Raises:
            OwnedParseError: If parsing fails (or leaves input, when complete)
        """
        cursor = Cursor(text, 0)
        result = self.attempt(cursor)
        if isinstance(result, ParseResult) and complete and not result.cursor.is_eof:
            result = ParseError(
                ErrorTemplate.describe_end(),
                result.cursor,
                code=DiagnosticCode.EXPECTED_END,
                found_length=result.cursor.remaining,
            )
        if isinstance(result, ParseError):
            error = result.offset(cursor).to_owned()
            logger.debug(
                "Parse failed at position %d: %s", error.position, result.message
            )
            raise error from result.cause
        return result.value

    # ------------------------------------------------------------------
    # Sequencing
    # ------------------------------------------------------------------

    def then(self, other: "Parse[Any] | str") -> "Parse[Any]":
        """Run this, then ``other`` on the remaining input; keep both values."""
        from combilex.combinators import then  # noqa: PLC0415 - circular

        return then(self, other)

    def skip_then(self, other: "Parse[Any] | str") -> "Parse[Any]":
        """Run this, then ``other``; keep only ``other``'s value."""
        from combilex.combinators import skip_then  # noqa: PLC0415 - circular

        return skip_then(self, other)

    def then_skip(self, other: "Parse[Any] | str") -> "Parse[T]":
        """Run this, then ``other``; keep only this value."""
        from combilex.combinators import then_skip  # noqa: PLC0415 - circular

        return then_skip(self, other)

    def pad(self) -> "Parse[T]":
        """Allow any amount of whitespace before and after this item."""
        from combilex.combinators import pad  # noqa: PLC0415 - circular
        from combilex.lexers import ws  # noqa: PLC0415 - circular

        return pad(ws().many(0), ws().many(0), self)

    def pad_with(self, left: "Lex | str", right: "Lex | str") -> "Parse[T]":
        """Require ``left`` before and ``right`` after this item."""
        from combilex.combinators import pad  # noqa: PLC0415 - circular

        return pad(left, right, self)

    # ------------------------------------------------------------------
    # Repetition
    # ------------------------------------------------------------------

    def many(self, minimum: int = 0, maximum: int | None = None) -> "Parse[Any]":
        """Repeat greedily; succeed with ``minimum <= n <= maximum`` matches.

        ``maximum=None`` means unbounded. See ``combilex.combinators.many``.
        """
        from combilex.combinators import many  # noqa: PLC0415 - circular

        return many(self, minimum, maximum)

    def count(self, times: int) -> "Parse[Any]":
        """Match exactly ``times`` times in a row."""
        from combilex.combinators import count  # noqa: PLC0415 - circular

        return count(self, times)

    def all(self, minimum: int = 0) -> "Parse[Any]":
        """Repeat until the input is exhausted; fail if anything is left."""
        from combilex.combinators import all_of  # noqa: PLC0415 - circular

        return all_of(self, minimum)

    def crawl(self) -> "Parse[T]":
        """Skip characters until this item matches."""
        from combilex.combinators import crawl  # noqa: PLC0415 - circular

        return crawl(self)

    # ------------------------------------------------------------------
    # Alternation
    # ------------------------------------------------------------------

    def optional(self) -> "Parse[Any]":
        """Match zero or one time; never fails."""
        from combilex.combinators import optional  # noqa: PLC0415 - circular

        return optional(self)

    def or_(self, other: "Parse[Any] | str") -> "Parse[Any]":
        """Try this, and if it fails try ``other`` on the same input."""
        from combilex.combinators import or_  # noqa: PLC0415 - circular

        return or_(self, other)

    def __or__(self, other: "Parse[Any] | str") -> "Parse[Any]":
        return self.or_(other)

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def map[U](self, function: Callable[[T], U]) -> "Parse[U]":
        """Transform the value with a total function."""
        from combilex.combinators import map_  # noqa: PLC0415 - circular

        return map_(self, function)

    def try_map[U](self, function: Callable[[T], U]) -> "Parse[U]":
        """Transform the value with a function that may reject it by raising."""
        from combilex.combinators import try_map  # noqa: PLC0415 - circular

        return try_map(self, function)


class Lex(Parse[str]):
    """Base class for lexers: the value is the consumed span of input."""

    __slots__ = ()

    def lex(self, source: str | Cursor) -> Outcome[str]:
        """Match text or a cursor; the value is the matched span.

        Example:
            >>> matched, rest = token("foo").lex("foobar")
            >>> matched, rest
            ('foo', 'bar')
        """
        return self.parse(source)

    def text(self) -> Parse[str]:
        """View this lexer as a plain parser of its matched text.

        Composing a plain parser produces structured values, e.g.
        ``a.text().then(b)`` yields ``(matched_a, value_b)`` tuples where
        ``a.then(b)`` would yield one joined span.
        """
        return self.map(str)


def spanned(start: Cursor, outcome: Outcome[Any]) -> Outcome[str]:
    """Replace a successful outcome's value with the input it consumed.

    This is how lexer variants of the operators are derived from their
    parser counterparts: same matching, value = ``start .. outcome.cursor``.
    Errors pass through unchanged.
    """
    if isinstance(outcome, ParseError):
        return outcome
    return ParseResult(start.slice_to(outcome.cursor.pos), outcome.cursor)


@dataclass(frozen=True, slots=True)
class FunctionParser[T](Parse[T]):
    """Adapter turning a plain function into a parser. See ``parser()``."""

    function: Callable[[Cursor], Outcome[T]]

    def attempt(self, cursor: Cursor) -> Outcome[T]:
        return self.function(cursor)


@dataclass(frozen=True, slots=True)
class FunctionLexer(Lex):
    """Adapter turning a plain function into a lexer. See ``lexer()``."""

    function: Callable[[Cursor], Outcome[str]]

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return self.function(cursor)


def parser[T](function: Callable[[Cursor], Outcome[T]]) -> FunctionParser[T]:
    """Wrap ``function(cursor) -> ParseResult | ParseError`` as a parser.

    Usable as a decorator; also the way to build recursive grammars, since
    the function body can refer to parsers defined later in the module.

    Example:
        >>> @parser
        ... def value(cursor):
        ...     return integer().or_(list_of_values).attempt(cursor)
    """
    return FunctionParser(function)


def lexer(function: Callable[[Cursor], Outcome[str]]) -> FunctionLexer:
    """Wrap ``function(cursor) -> ParseResult[str] | ParseError`` as a lexer.

    The function must return the consumed span as its value.
    """
    return FunctionLexer(function)


def coerce(item: "Parse[Any] | str") -> "Parse[Any]":
    """Accept string literals wherever a lexer is expected.

    ``"#"`` becomes ``token("#")``; parsers pass through unchanged.
    """
    if isinstance(item, Parse):
        return item
    if isinstance(item, str):
        from combilex.lexers import token  # noqa: PLC0415 - circular

        return token(item)
    msg = f"Expected a Parse, Lex or str, got {type(item).__name__}"
    raise TypeError(msg)
