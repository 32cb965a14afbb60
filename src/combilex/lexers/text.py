"""Multi-character lexers: literals, fixed widths, scans and end of input."""

from collections.abc import Callable
from dataclasses import dataclass

from combilex.constants import MAX_FOUND_LENGTH
from combilex.core.protocols import Lex, Outcome
from combilex.diagnostics import CombinatorConfigError, DiagnosticCode, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "End",
    "Take",
    "TakeWhile",
    "Token",
    "Until",
    "end",
    "take",
    "take_while",
    "token",
    "until",
]


@dataclass(frozen=True, slots=True)
class Token(Lex):
    """Match an exact, case-sensitive literal."""

    literal: str

    def __post_init__(self) -> None:
        if not self.literal:
            raise CombinatorConfigError(ErrorTemplate.empty_literal())

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if cursor.startswith(self.literal):
            return ParseResult(self.literal, cursor.advance(len(self.literal)))
        return ParseError(
            ErrorTemplate.describe_literal(self.literal),
            cursor,
            code=DiagnosticCode.EXPECTED_LITERAL,
            found_length=len(self.literal),
        )


@dataclass(frozen=True, slots=True)
class End(Lex):
    """Zero-length match at end of input."""

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if cursor.is_eof:
            return ParseResult("", cursor)
        return ParseError(
            ErrorTemplate.describe_end(),
            cursor,
            code=DiagnosticCode.EXPECTED_END,
            found_length=cursor.remaining,
        )


@dataclass(frozen=True, slots=True)
class Take(Lex):
    """Match exactly ``length`` characters, whatever they are."""

    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise CombinatorConfigError(ErrorTemplate.invalid_bounds(self.length, self.length))

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if cursor.remaining >= self.length:
            end = cursor.advance(self.length)
            return ParseResult(cursor.slice_to(end.pos), end)
        return ParseError(
            ErrorTemplate.describe_characters(self.length),
            cursor,
            code=DiagnosticCode.UNEXPECTED_EOF,
            found_length=cursor.remaining,
        )


@dataclass(frozen=True, slots=True)
class TakeWhile(Lex):
    """Match the longest run of characters accepted by a predicate.

    Never fails: a run of length zero is an empty match.
    """

    predicate: Callable[[str], bool]

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        source = cursor.source
        pos = cursor.pos
        while pos < len(source) and self.predicate(source[pos]):
            pos += 1
        return ParseResult(cursor.slice_to(pos), cursor.at(pos))


@dataclass(frozen=True, slots=True)
class Until(Lex):
    """Match everything before the next occurrence of a literal.

    The literal itself is not consumed. Fails when the literal does not
    occur in the remaining input.
    """

    pattern: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise CombinatorConfigError(ErrorTemplate.empty_literal())

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        boundary = cursor.find(self.pattern)
        if boundary < 0:
            return ParseError(
                ErrorTemplate.describe_until(self.pattern),
                cursor,
                code=DiagnosticCode.EXPECTED_LITERAL,
                found_length=min(cursor.remaining, MAX_FOUND_LENGTH),
            )
        return ParseResult(cursor.slice_to(boundary), cursor.at(boundary))


def token(literal: str) -> Token:
    """Lexer for the exact text ``literal``.

    Example:
        >>> matched, rest = token("foo").lex("foobar")
        >>> matched, rest
        ('foo', 'bar')
    """
    return Token(literal)


def end() -> End:
    """Lexer that matches only at end of input."""
    return End()


def take(length: int) -> Take:
    """Lexer for the next ``length`` characters."""
    return Take(length)


def take_while(predicate: Callable[[str], bool]) -> TakeWhile:
    """Lexer for the longest prefix whose characters satisfy ``predicate``."""
    return TakeWhile(predicate)


def until(pattern: str) -> Until:
    """Lexer for the input preceding the next ``pattern``."""
    return Until(pattern)
