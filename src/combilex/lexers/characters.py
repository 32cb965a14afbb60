"""Single-character lexers.

Each lexer here consumes exactly one character or fails at the current
position without consuming anything. Failure at end of input is an ordinary
mismatch, reported with ``found`` = None.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from combilex.constants import MAX_RADIX, MIN_RADIX, RADIX_DIGITS
from combilex.core.protocols import Lex, Outcome
from combilex.diagnostics import CombinatorConfigError, DiagnosticCode, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "AnyChar",
    "Char",
    "CharIf",
    "Digit",
    "WhiteSpace",
    "any_char",
    "char",
    "char_if",
    "digit",
    "hex",
    "ws",
]


def _single(cursor: Cursor) -> ParseResult[str]:
    """Consume the character under the cursor (caller checked it exists)."""
    return ParseResult(cursor.source[cursor.pos], cursor.advance())


@dataclass(frozen=True, slots=True)
class CharIf(Lex):
    """Match one character accepted by a predicate.

    Attributes:
        predicate: Test applied to the current character
        description: Human-readable name of the predicate for error messages
    """

    predicate: Callable[[str], bool]
    description: str

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if not cursor.is_eof and self.predicate(cursor.source[cursor.pos]):
            return _single(cursor)
        return ParseError(ErrorTemplate.describe_character(self.description), cursor)


@dataclass(frozen=True, slots=True)
class Char(Lex):
    """Match one specific character."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise CombinatorConfigError(ErrorTemplate.invalid_character(self.value))

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if cursor.startswith(self.value):
            return _single(cursor)
        return ParseError(
            ErrorTemplate.describe_literal(self.value),
            cursor,
            code=DiagnosticCode.EXPECTED_LITERAL,
        )


@dataclass(frozen=True, slots=True)
class Digit(Lex):
    """Match one ASCII digit of the given radix.

    Digits above 9 are the letters a-z in either case, so ``Digit(16)``
    accepts ``0-9``, ``a-f`` and ``A-F``. Non-ASCII digits (e.g. Arabic-Indic)
    are never accepted.
    """

    radix: int = 10

    def __post_init__(self) -> None:
        if not MIN_RADIX <= self.radix <= MAX_RADIX:
            raise CombinatorConfigError(ErrorTemplate.invalid_radix(self.radix))

    def base(self, radix: int) -> "Digit":
        """Digit matcher for another radix."""
        return Digit(radix)

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if not cursor.is_eof:
            ch = cursor.source[cursor.pos]
            if ch.isascii() and 0 <= RADIX_DIGITS.find(ch.lower()) < self.radix:
                return _single(cursor)
        return ParseError(ErrorTemplate.describe_digit(self.radix), cursor)


@dataclass(frozen=True, slots=True)
class WhiteSpace(Lex):
    """Match one whitespace character (``str.isspace``)."""

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if not cursor.is_eof and cursor.source[cursor.pos].isspace():
            return _single(cursor)
        return ParseError(ErrorTemplate.describe_character("whitespace"), cursor)


@dataclass(frozen=True, slots=True)
class AnyChar(Lex):
    """Match any one character; fails only at end of input."""

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if not cursor.is_eof:
            return _single(cursor)
        return ParseError(
            ErrorTemplate.describe_characters(1),
            cursor,
            code=DiagnosticCode.UNEXPECTED_EOF,
        )


def char_if(predicate: Callable[[str], bool], description: str | None = None) -> CharIf:
    """Lexer for one character satisfying ``predicate``.

    Args:
        predicate: Called with the current character
        description: Name used in "expected character matching ..." errors;
            defaults to the predicate's ``__name__``

    Example:
        >>> char_if(str.isalpha).lex("ab1")
        ParseResult(value='a', cursor=Cursor(source='ab1', pos=1))
    """
    if description is None:
        description = getattr(predicate, "__name__", "predicate")
    return CharIf(predicate, description)


def char(value: str) -> Char:
    """Lexer for exactly the character ``value``."""
    return Char(value)


def digit(radix: int = 10) -> Digit:
    """Lexer for one ASCII digit; ``digit(16)`` or ``digit().base(16)`` for hex."""
    return Digit(radix)


def hex() -> Digit:  # noqa: A001 - mirrors the builtin's meaning
    """Lexer for one hexadecimal digit, either case."""
    return Digit(16)


def ws() -> WhiteSpace:
    """Lexer for one whitespace character."""
    return WhiteSpace()


def any_char() -> AnyChar:
    """Lexer for any single character."""
    return AnyChar()
