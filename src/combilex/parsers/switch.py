"""Keyword tables: map the first matching lexer to a constant value."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from combilex.core.protocols import Outcome, Parse, coerce
from combilex.diagnostics import DiagnosticCode, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = ["Switch", "switch"]


@dataclass(frozen=True, slots=True)
class Switch[T](Parse[T]):
    """Try each ``(lexer, value)`` case in order; the first match selects ``value``."""

    cases: tuple[tuple[Parse[Any], T], ...]

    def attempt(self, cursor: Cursor) -> Outcome[T]:
        expected: list[str] = []
        for case, value in self.cases:
            result = case.attempt(cursor)
            if isinstance(result, ParseResult):
                return ParseResult(value, result.cursor)
            expected.append(result.expected)
        return ParseError(
            ErrorTemplate.describe_alternatives(tuple(expected)),
            cursor,
            code=DiagnosticCode.NO_ALTERNATIVE,
        )


def switch[T](cases: Iterable[tuple[Parse[Any] | str, T]]) -> Switch[T]:
    """Parser choosing a value by the first matching case.

    Cases are tried in order, so put longer literals before their prefixes.

    Example:
        >>> direction = switch([("up", 1), ("down", -1)])
        >>> direction.parse("down").value
        -1
    """
    return Switch(tuple((coerce(case), value) for case, value in cases))
