"""Escape sequences inside quoted text.

``escape_sequence`` parses one logical character: either a plain character,
or the escape character followed by a code from the mapping. Combine it with
``many(...).until(...)`` to read the body of a quoted string::

    body = escape_sequence().many().until('"').map("".join)
    string = skip_then('"', then_skip(body, '"'))
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from combilex.core.protocols import Outcome, Parse
from combilex.diagnostics import (
    CombinatorConfigError,
    DiagnosticCode,
    ErrorReason,
    ErrorTemplate,
)
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = ["DEFAULT_ESCAPES", "EscapeSequence", "escape_sequence"]

DEFAULT_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


@dataclass(frozen=True, slots=True)
class EscapeSequence(Parse[str]):
    """One character, decoding ``escape_char`` + code pairs.

    Attributes:
        escape_char: Character introducing an escape
        codes: ``(code, replacement)`` pairs, tried in order
    """

    escape_char: str
    codes: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        for value in (self.escape_char, *(code for code, _ in self.codes)):
            if len(value) != 1:
                raise CombinatorConfigError(ErrorTemplate.invalid_character(value))

    def _expected(self) -> str:
        return ErrorTemplate.describe_escape(
            self.escape_char, "".join(code for code, _ in self.codes)
        )

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        if cursor.is_eof:
            return ParseError(
                ErrorTemplate.describe_characters(1),
                cursor,
                code=DiagnosticCode.UNEXPECTED_EOF,
            )
        ch = cursor.source[cursor.pos]
        if ch != self.escape_char:
            return ParseResult(ch, cursor.advance())

        code = cursor.peek(1)
        if code is None:
            return ParseError(self._expected(), cursor, code=DiagnosticCode.INVALID_ESCAPE)
        for known, replacement in self.codes:
            if code == known:
                return ParseResult(replacement, cursor.advance(2))
        return ParseError(
            self._expected(),
            cursor,
            reason=ErrorReason.FAILED_CONVERSION,
            code=DiagnosticCode.INVALID_ESCAPE,
            found_length=2,
        )


def escape_sequence(
    escape_char: str = "\\",
    codes: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
) -> EscapeSequence:
    """Parser for one possibly-escaped character.

    Args:
        escape_char: Character introducing an escape (default backslash)
        codes: Code to replacement mapping; defaults to ``DEFAULT_ESCAPES``

    Raises:
        CombinatorConfigError: If the escape character or a code is not
            exactly one character

    Example:
        >>> escape_sequence().parse("\\\\tx").value
        '\\t'
    """
    pairs = dict(DEFAULT_ESCAPES if codes is None else codes)
    return EscapeSequence(escape_char, tuple(pairs.items()))
